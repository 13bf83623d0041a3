from gridcanvas import create_app, socketio

app = create_app()


def run_options(config) -> dict:
    debug = bool(config.get('DEBUG'))
    options = {
        'host': config.get('HOST', '0.0.0.0'),
        'port': int(config.get('PORT', 5000)),
        'debug': debug,
    }
    # Werkzeug's dev server is only allowed in debug mode
    if debug:
        options['allow_unsafe_werkzeug'] = True
    return options


if __name__ == '__main__':
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, **run_options(app.config))
