"""Helpers for container-backed tests: archives, logs, exec streams, Docker host, and example scaffolding."""

__version__ = "0.1.0"