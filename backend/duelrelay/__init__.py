from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(raw):
    if not raw or raw.strip() == '*':
        return '*'
    return [o.strip() for o in raw.split(',') if o.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One arena per application; handlers reach it through current_app
    from duelrelay.services.duel import Arena, SocketIOChannel
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    flask_app.extensions['arena'] = Arena.from_config(
        flask_app.config,
        SocketIOChannel(socketio, namespace=namespace),
        logger=flask_app.logger,
    )

    from duelrelay.main import main
    flask_app.register_blueprint(main)

    from duelrelay.api.sessions import sessions
    flask_app.register_blueprint(sessions, url_prefix='/api/sessions')

    from duelrelay.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    return flask_app
