from flask import current_app, request
from gridcanvas import socketio, get_engine
from gridcanvas.services.canvas import fan_out


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _dispatch(operation, *args) -> None:
    """Run one engine transition and deliver what it produced.

    The engine lock is held across both steps so that pushes reach every
    client in the order the engine accepted the changes.
    """
    engine = get_engine(current_app)
    namespace = request.namespace  # type: ignore

    def _send(event, payload, sid):
        socketio.emit(event, payload, to=sid, namespace=namespace)

    with engine.serialized():
        notifications = operation(engine, _get_sid(), *args)
        fan_out(notifications, engine.connections(), _send)


def _display_name(data):
    if isinstance(data, dict):
        return data.get('displayName', data.get('name'))
    return data


def handle_connect(auth=None):
    _dispatch(lambda engine, sid: engine.connect(sid))


def handle_disconnect(reason=None):
    _dispatch(lambda engine, sid: engine.disconnect(sid))


def handle_register(data=None):
    _dispatch(lambda engine, sid: engine.register(sid, _display_name(data)))


def handle_update_cell(data=None):
    data = data if isinstance(data, dict) else {}
    _dispatch(lambda engine, sid: engine.request_edit(
        sid, data.get('row'), data.get('col'), data.get('character')
    ))


def handle_get_grid_state(data=None):
    _dispatch(lambda engine, sid: engine.grid_state(sid))


def handle_get_history(data=None):
    _dispatch(lambda engine, sid: engine.history(sid))


def handle_get_cooldown_status(data=None):
    _dispatch(lambda engine, sid: engine.cooldown_status(sid))


def handle_socket_error(exc):
    current_app.logger.exception(f"[socket-error] sid={_get_sid()} error={exc!r}")


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register the canvas protocol on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('register', handle_register, namespace=namespace)
    socketio.on_event('updateCell', handle_update_cell, namespace=namespace)
    socketio.on_event('getGridState', handle_get_grid_state, namespace=namespace)
    socketio.on_event('getHistory', handle_get_history, namespace=namespace)
    socketio.on_event('getCooldownStatus', handle_get_cooldown_status, namespace=namespace)
    socketio.on_error(namespace)(handle_socket_error)
