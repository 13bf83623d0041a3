import os
import sys
import pytest

# Ensure the backend root (containing the `gridcanvas` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from config import Config
from gridcanvas import create_app, get_engine, socketio
from gridcanvas.services.canvas import SyncEngine


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    FRONTEND_URL = 'http://localhost:3000'
    GRID_SIZE = 10
    COOLDOWN_SEC = 60
    HISTORY_WINDOW = 50
    HISTORY_RETENTION = 500
    SOCKETIO_NAMESPACE = '/'


class FakeClock:
    """Manually advanced wall clock (epoch seconds) plus a monotonic reading.

    advance() moves both; step_wall() moves only the wall clock, the way an
    NTP correction would.
    """

    def __init__(self, start=1_700_000_000.0):
        self.now = start
        self.elapsed = 1000.0

    def __call__(self):
        return self.now

    def monotonic(self):
        return self.elapsed

    def advance(self, seconds):
        self.now += seconds
        self.elapsed += seconds

    def step_wall(self, seconds):
        self.now += seconds


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def engine(clock):
    return SyncEngine(grid_size=10, cooldown_sec=60, history_window=50, clock=clock, timer=clock.monotonic)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def app_clock(flask_app, clock):
    engine = get_engine(flask_app)
    engine.clock = clock
    engine.timer = clock.monotonic
    return clock


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    created = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/'
        )
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected('/'):
                test_client.disconnect(namespace='/')
        except Exception:
            pass


@pytest.fixture()
def sio_client(make_sio_client):
    return make_sio_client()
