"""Framed messaging, JSON commands, peer references and IPv6 helpers for a galaxy42 mesh node."""

__version__ = "0.1.0"