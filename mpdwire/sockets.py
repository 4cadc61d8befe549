"""Creation of sockets suited to a client connection."""

from __future__ import annotations

import errno
import socket

_ATOMIC_FLAGS = (
    getattr(socket, "SOCK_CLOEXEC", 0) | getattr(socket, "SOCK_NONBLOCK", 0)
    if hasattr(socket, "SOCK_CLOEXEC") and hasattr(socket, "SOCK_NONBLOCK")
    else 0
)


def socket_cloexec_nonblock(
    family: int = socket.AF_INET,
    type: int = socket.SOCK_STREAM,
    proto: int = 0,
) -> socket.socket:
    """Open a socket that is closed on exec and does not block.

    Both properties are set atomically where the operating system
    supports it, and afterwards otherwise.  Raises :class:`OSError` if
    the socket cannot be created.
    """
    sock: socket.socket | None = None
    if _ATOMIC_FLAGS:
        try:
            sock = socket.socket(family, type | _ATOMIC_FLAGS, proto)
        except OSError as exc:
            if exc.errno != errno.EINVAL:
                raise

    if sock is None:
        sock = socket.socket(family, type, proto)

    try:
        sock.set_inheritable(False)
        sock.setblocking(False)
    except OSError:
        sock.close()
        raise
    return sock