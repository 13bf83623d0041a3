from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

EXTENSION_KEY = 'gridcanvas'

socketio = SocketIO(async_mode=None)


def allowed_origins(config) -> list:
    raw = config.get('FRONTEND_URL') or ''
    return [o.strip() for o in raw.split(',') if o.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origins = allowed_origins(flask_app.config)
    CORS(flask_app, origins=origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    # One engine per app; handlers reach it through current_app.extensions
    from gridcanvas.services.canvas import SyncEngine
    flask_app.extensions[EXTENSION_KEY] = SyncEngine.from_config(
        flask_app.config, logger=flask_app.logger
    )

    from gridcanvas.main import main
    flask_app.register_blueprint(main)

    # Handlers bind to the server created by init_app above
    from gridcanvas.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    return flask_app


def get_engine(flask_app):
    return flask_app.extensions[EXTENSION_KEY]
