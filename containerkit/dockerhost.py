"""Locating the Docker host and detecting a containerised environment."""

from __future__ import annotations

import os
import subprocess
from urllib.parse import urlsplit

DOCKER_SOCKET_OVERRIDE_ENV = "TESTCONTAINERS_DOCKER_SOCKET_OVERRIDE"
DEFAULT_DOCKER_SOCKET = "/var/run/docker.sock"
DOCKERENV_PATH = "/.dockerenv"


def default_gateway_ip() -> str:
    """Return the IP address of the default network gateway.

    Raises RuntimeError when it cannot be detected.
    """
    try:
        output = subprocess.check_output(
            ["sh", "-c", "ip route|awk '/default/ { print $3 }'"]
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RuntimeError("failed to detect docker host") from exc

    ip = output.decode(errors="replace").strip()
    if not ip:
        raise RuntimeError("failed to parse default gateway IP")
    return ip


def extract_docker_host(docker_host: str | None = None) -> str:
    """Return the Docker socket path.

    The override environment variable wins; otherwise a ``unix://`` URL in
    *docker_host* gives the path, and anything else gives the default socket.
    """
    override = os.environ.get(DOCKER_SOCKET_OVERRIDE_ENV, "")
    if override:
        return override

    if not docker_host:
        return DEFAULT_DOCKER_SOCKET

    try:
        url = urlsplit(docker_host)
    except ValueError:
        return DEFAULT_DOCKER_SOCKET

    if url.scheme == "unix":
        return url.path
    return DEFAULT_DOCKER_SOCKET


def in_a_container(path: str | os.PathLike[str] = DOCKERENV_PATH) -> bool:
    """Return True if the marker file at *path* exists."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True