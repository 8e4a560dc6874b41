"""Duel domain services: matchmaking, movement relay, combat and lifecycle.

This package contains the transport-free core. Socket handlers and HTTP
routes talk to it through `Arena`; outbound events leave through a
`Channel`, so the services can be driven directly in tests.
"""
from .arena import Arena
from .channel import Channel, SocketIOChannel

__all__ = ['Arena', 'Channel', 'SocketIOChannel']
