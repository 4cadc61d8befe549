"""Objects the server describes as runs of name-value pairs.

Each entity starts with a pair of a particular name.  ``begin`` builds
the entity from that first pair.  ``feed`` takes the pairs that follow
and returns False once a pair starts the next entity.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from mpdwire.kvlist import KeyValueList
from mpdwire.parser import Pair

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d+)")


def _leading_int(text: str) -> int:
    """The integer at the start of *text*, or 0 if there is none."""
    match = _NUMBER.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    value = int(digits)
    return -value if sign == "-" else value


def _leading_unsigned(text: str) -> int:
    """Like :func:`_leading_int`, with negative numbers wrapped to 32 bits."""
    return _leading_int(text) % (1 << 32)


def _expect(pair: Pair, name: str, kind: str) -> None:
    if pair.name != name:
        raise ValueError(
            f"a {kind} begins with a {name!r} pair, not {pair.name!r}"
        )


@dataclass
class Message:
    """A message received on a client-to-client channel."""

    channel: str
    text: str | None = None

    @classmethod
    def begin(cls, pair: Pair) -> Message:
        """Start a message from its "channel" pair."""
        _expect(pair, "channel", "message")
        return cls(pair.value)

    def feed(self, pair: Pair) -> bool:
        """Add *pair*; False if it starts the next message."""
        if pair.name == "channel":
            return False
        if pair.name == "message":
            self.text = pair.value
        return True


@dataclass
class Mount:
    """A mount point on the server."""

    uri: str
    storage: str | None = None

    @classmethod
    def begin(cls, pair: Pair) -> Mount:
        """Start a mount point from its "mount" pair."""
        _expect(pair, "mount", "mount point")
        return cls(pair.value)

    def feed(self, pair: Pair) -> bool:
        """Add *pair*; False if it starts the next mount point."""
        if pair.name == "mount":
            return False
        if pair.name == "storage":
            self.storage = pair.value
        return True


@dataclass
class Neighbor:
    """A storage the server found on the network."""

    uri: str
    display_name: str | None = None

    @classmethod
    def begin(cls, pair: Pair) -> Neighbor:
        """Start a neighbor from its "neighbor" pair."""
        _expect(pair, "neighbor", "neighbor")
        return cls(pair.value)

    def feed(self, pair: Pair) -> bool:
        """Add *pair*; False if it starts the next neighbor."""
        if pair.name == "neighbor":
            return False
        if pair.name == "name":
            self.display_name = pair.value
        return True


@dataclass(frozen=True)
class Partition:
    """A partition of the server."""

    name: str

    @classmethod
    def begin(cls, pair: Pair) -> Partition:
        """Build a partition from its "partition" pair."""
        _expect(pair, "partition", "partition")
        return cls(pair.value)


@dataclass
class Output:
    """An audio output of the server."""

    id: int
    name: str | None = None
    plugin: str | None = None
    enabled: bool = False
    attributes: KeyValueList = field(default_factory=KeyValueList)

    @classmethod
    def begin(cls, pair: Pair) -> Output:
        """Start an output from its "outputid" pair."""
        _expect(pair, "outputid", "output")
        return cls(_leading_unsigned(pair.value))

    def feed(self, pair: Pair) -> bool:
        """Add *pair*; False if it starts the next output."""
        if pair.name == "outputid":
            return False
        if pair.name == "outputname":
            self.name = pair.value
        elif pair.name == "outputenabled":
            self.enabled = _leading_int(pair.value) != 0
        elif pair.name == "plugin":
            self.plugin = pair.value
        elif pair.name == "attribute":
            key, sep, value = pair.value.partition("=")
            if sep and key:
                self.attributes.add(key, value)
        return True

    def attribute(self, name: str) -> str | None:
        """The value of the attribute *name*, or None if it is not set."""
        return self.attributes.get(name)

    def iter_attributes(self) -> Iterator[Pair]:
        """The attributes in the order the server sent them."""
        return iter(self.attributes)