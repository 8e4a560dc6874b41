import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Comma-separated list; '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Combat tuning
    MAX_HEALTH = int(os.environ.get('MAX_HEALTH', '100'))
    BODY_DAMAGE = int(os.environ.get('BODY_DAMAGE', '24'))
    HEADSHOT_DAMAGE = int(os.environ.get('HEADSHOT_DAMAGE', '85'))
    # Player names
    NAME_MAX_LENGTH = int(os.environ.get('NAME_MAX_LENGTH', '12'))
    DEFAULT_PLAYER_NAME = os.environ.get('DEFAULT_PLAYER_NAME', 'PLAYER')
    FALLBACK_OPPONENT_NAME = os.environ.get('FALLBACK_OPPONENT_NAME', 'ENEMY')
    # Public match codes are PREFIX + random [A-Z0-9]
    PUBLIC_CODE_PREFIX = os.environ.get('PUBLIC_CODE_PREFIX', 'PUB_')
    PUBLIC_CODE_LENGTH = int(os.environ.get('PUBLIC_CODE_LENGTH', '6'))
