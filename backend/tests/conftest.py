import itertools
import os
import sys
import pytest

# Ensure the backend root (containing the `duelrelay` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from config import Config
from duelrelay import create_app, socketio
from duelrelay.services.duel import Arena


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'


class RecordingChannel:
    """Channel that keeps every outbound event instead of sending it."""

    def __init__(self):
        self.sent = []

    def send(self, sid, event, payload=None):
        self.sent.append((sid, event, payload or {}))

    def events_for(self, sid):
        return [(event, payload) for to, event, payload in self.sent if to == sid]

    def names_for(self, sid):
        return [event for event, _ in self.events_for(sid)]

    def clear(self):
        self.sent.clear()


def sequential_codes(prefix='PUB_'):
    counter = itertools.count(1)
    return lambda: f'{prefix}{next(counter):06d}'


@pytest.fixture()
def channel():
    return RecordingChannel()


@pytest.fixture()
def arena(channel):
    return Arena(channel, code_factory=sequential_codes())


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    """Build Socket.IO test clients; all are disconnected on teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
        )
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass
