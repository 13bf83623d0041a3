import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma-separated list of origins allowed to open a socket
    FRONTEND_URL = os.environ.get('FRONTEND_URL') or 'http://localhost:3000'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '5000'))
    DEBUG = os.environ.get('FLASK_DEBUG', '0').lower() in ('1', 'true', 'yes')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Canvas geometry and pacing
    GRID_SIZE = int(os.environ.get('GRID_SIZE', '10'))
    COOLDOWN_SEC = int(os.environ.get('COOLDOWN_SEC', '60'))
    # Number of most recent edits pushed to clients
    HISTORY_WINDOW = int(os.environ.get('HISTORY_WINDOW', '50'))
    # Edits kept in memory; never less than HISTORY_WINDOW
    HISTORY_RETENTION = int(os.environ.get('HISTORY_RETENTION', '500'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
