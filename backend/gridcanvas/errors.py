"""Canvas error hierarchy.

Every error here is a client-input error: it rejects one request and is
reported to the requesting connection only.
"""


class CanvasError(Exception):
    """Base error for rejected canvas requests."""

    code = 'CANVAS_ERROR'

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {'message': self.message}


class NotRegistered(CanvasError):
    code = 'NOT_REGISTERED'

    def __init__(self, message: str = 'Player not registered'):
        super().__init__(message)


class SessionNotFound(CanvasError):
    code = 'SESSION_NOT_FOUND'

    def __init__(self, sid: str):
        super().__init__(f'No session for connection {sid}')
        self.sid = sid


class OutOfBounds(CanvasError):
    code = 'OUT_OF_BOUNDS'

    def __init__(self, message: str = 'Invalid grid coordinates'):
        super().__init__(message)


class InvalidCharacter(CanvasError):
    code = 'INVALID_CHARACTER'

    def __init__(self, message: str = 'Character must be a single Unicode character'):
        super().__init__(message)


class InvalidInput(CanvasError):
    code = 'INVALID_INPUT'

    def __init__(self, message: str = 'Display name must not be empty'):
        super().__init__(message)


class CooldownActive(CanvasError):
    """The session edited too recently."""

    code = 'COOLDOWN_ACTIVE'

    def __init__(self, remaining_seconds: int):
        super().__init__(f'Cooldown active. Try again in {remaining_seconds} seconds')
        self.remaining_seconds = remaining_seconds

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['cooldownRemaining'] = self.remaining_seconds
        return data
