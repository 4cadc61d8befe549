"""Idle events: the subsystems whose changes the server reports."""

from __future__ import annotations

import enum

from mpdwire.errors import ErrorCode, MpdError
from mpdwire.parser import Pair


class Idle(enum.IntFlag):
    """Subsystems that can report a change while the client is idle."""

    DATABASE = 1 << 0
    STORED_PLAYLIST = 1 << 1
    QUEUE = 1 << 2
    PLAYER = 1 << 3
    MIXER = 1 << 4
    OUTPUT = 1 << 5
    OPTIONS = 1 << 6
    UPDATE = 1 << 7
    STICKER = 1 << 8
    SUBSCRIPTION = 1 << 9
    MESSAGE = 1 << 10
    PARTITION = 1 << 11
    NEIGHBOR = 1 << 12
    MOUNT = 1 << 13


_NAMES = (
    "database",
    "stored_playlist",
    "playlist",
    "player",
    "mixer",
    "output",
    "options",
    "update",
    "sticker",
    "subscription",
    "message",
    "partition",
    "neighbor",
    "mount",
)

_BY_FLAG = {1 << bit: name for bit, name in enumerate(_NAMES)}
_BY_NAME = {name: Idle(1 << bit) for bit, name in enumerate(_NAMES)}


def idle_name(idle: int) -> str | None:
    """The protocol name of a single idle flag, or None if it is not one."""
    return _BY_FLAG.get(int(idle))


def parse_idle_name(name: str) -> Idle:
    """The flag for a protocol name; an empty flag if the name is unknown."""
    return _BY_NAME.get(name, Idle(0))


def parse_idle_pair(pair: Pair) -> Idle:
    """The flag announced by a "changed" pair; an empty flag for other pairs."""
    if pair.name != "changed":
        return Idle(0)
    return parse_idle_name(pair.value)


def idle_mask_command(mask: int) -> str:
    """The "idle" command line that waits for the events in *mask*.

    Raises :class:`ValueError` for an empty mask and :class:`MpdError`
    with ``ErrorCode.ARGUMENT`` if the mask holds unsupported flags.
    """
    remaining = int(mask)
    if remaining == 0:
        raise ValueError("idle mask must not be empty")

    words = ["idle"]
    for flag, name in _BY_FLAG.items():
        if remaining & flag:
            remaining &= ~flag
            words.append(name)

    if remaining:
        # an event the server never delivers could block the client forever
        raise MpdError(
            ErrorCode.ARGUMENT, f"Unsupported idle flags: 0x{remaining:x}"
        )
    return " ".join(words)