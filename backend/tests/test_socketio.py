def _names(received):
    return [pkt['name'] for pkt in received]


def _args(received, name):
    return [pkt['args'][0] if pkt['args'] else None for pkt in received if pkt['name'] == name]


def _pair(sio_factory, room='ARENA'):
    alice = sio_factory()
    bob = sio_factory()
    alice.emit('fps_join', {'name': 'alice', 'room': room})
    bob.emit('fps_join', {'name': 'bob', 'room': room})
    alice.get_received()
    bob.get_received()
    return alice, bob


def test_socket_connect_and_ping(sio_factory):
    sio_client = sio_factory()
    assert sio_client.is_connected()
    sio_client.get_received()
    sio_client.emit('ping_fps', {'t': 1})
    received = sio_client.get_received()
    assert _names(received) == ['pong_fps']
    assert _args(received, 'pong_fps') == [{'t': 1}]


def test_private_room_flow(sio_factory):
    alice = sio_factory()
    bob = sio_factory()
    carol = sio_factory()

    alice.emit('fps_join', {'name': 'alice', 'room': ' arena1 '})
    assert _names(alice.get_received()) == ['waitingForOpponent']

    bob.emit('fps_join', {'name': 'bob', 'room': 'ARENA1'})
    assert _args(alice.get_received(), 'matchReady') == [{'opponentName': 'BOB'}]
    assert _args(bob.get_received(), 'matchReady') == [{'opponentName': 'ALICE'}]

    carol.emit('fps_join', {'name': 'carol', 'room': 'arena1'})
    assert _names(carol.get_received()) == ['roomFull']
    assert alice.get_received() == []


def test_public_queue_flow(sio_factory, flask_app):
    alice = sio_factory()
    bob = sio_factory()
    alice.emit('fps_join', {'name': 'alice', 'room': ''})
    assert _names(alice.get_received()) == ['waitingForOpponent']
    bob.emit('fps_join', {'name': 'bob'})
    assert _args(alice.get_received(), 'matchReady') == [{'opponentName': 'BOB'}]
    assert _args(bob.get_received(), 'matchReady') == [{'opponentName': 'ALICE'}]

    snap = flask_app.extensions['arena'].snapshot()
    assert snap['queued'] == 0
    [session] = snap['sessions']
    assert session['public'] is True
    assert session['code'].startswith('PUB_')


def test_move_relay_and_invalid_payload(sio_factory):
    alice, bob = _pair(sio_factory)
    alice.emit('fps_move', {'x': 1, 'y': 2, 'z': 3, 'ry': 0.25})
    assert _args(bob.get_received(), 'opponentMoved') == [{'x': 1.0, 'y': 2.0, 'z': 3.0, 'ry': 0.25}]
    assert alice.get_received() == []

    alice.emit('fps_move', {'x': 'left'})
    assert bob.get_received() == []


def test_shots_resolve_round(sio_factory, client):
    alice, bob = _pair(sio_factory)
    alice.emit('fps_shot', {'hit': False})
    assert bob.get_received() == []

    alice.emit('fps_shot', {'hit': True, 'headshot': True})
    assert _args(alice.get_received(), 'opponentHit') == [{'dmg': 85, 'headshot': True}]
    assert _args(bob.get_received(), 'opponentShot') == [{'hit': True, 'headshot': True}]
    state = client.get('/api/sessions/arena').get_json()
    health = {p['name']: p['health'] for p in state['players']}
    assert health == {'ALICE': 100, 'BOB': 15}

    alice.emit('fps_shot', {'hit': True, 'headshot': True})
    alice_results = _args(alice.get_received(), 'roundResult')
    bob_results = _args(bob.get_received(), 'roundResult')
    assert len(alice_results) == 1
    assert alice_results == bob_results

    state = client.get('/api/sessions/arena').get_json()
    by_name = {p['name']: p for p in state['players']}
    assert alice_results[0]['winner'] == by_name['ALICE']['sid']
    assert by_name['BOB']['health'] == 100
    assert state['rounds'] == 1


def test_reload_and_disconnect(sio_factory, client):
    alice, bob = _pair(sio_factory)
    bob.emit('fps_reload')
    assert _names(alice.get_received()) == ['opponentReloading']

    alice.disconnect()
    assert _names(bob.get_received()) == ['opponentLeft']
    state = client.get('/api/sessions/arena').get_json()
    assert state['state'] == 'open'
    assert [p['name'] for p in state['players']] == ['BOB']

    bob.disconnect()
    assert client.get('/api/sessions/arena').status_code == 404
