from flask import Blueprint, current_app, jsonify

sessions = Blueprint('sessions', __name__)


def _arena():
    return current_app.extensions['arena']


@sessions.route('', methods=['GET'])
def list_sessions():
    """Live sessions plus queue and connection counts."""
    return jsonify(_arena().snapshot())


@sessions.route('/<string:code>', methods=['GET'])
def get_session(code):
    payload = _arena().describe_session(code)
    if payload is None:
        return jsonify({'error': 'Session not found'}), 404
    return jsonify(payload)
