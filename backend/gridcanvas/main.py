from flask import Blueprint, current_app, jsonify

from gridcanvas import get_engine

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the grid canvas server!'})


@main.route('/health')
def health():
    """Liveness probe with the current presence count."""
    engine = get_engine(current_app)
    return jsonify({'status': 'ok', 'onlinePlayers': engine.presence()})
