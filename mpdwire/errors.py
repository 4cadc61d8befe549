"""Error information reported by the client library."""

from __future__ import annotations

import enum
import os


class ErrorCode(enum.Enum):
    """The kind of failure an :class:`MpdError` describes."""

    OOM = enum.auto()
    ARGUMENT = enum.auto()
    STATE = enum.auto()
    SYSTEM = enum.auto()
    MALFORMED = enum.auto()
    CLOSED = enum.auto()
    SERVER = enum.auto()


_RECOVERABLE = frozenset({ErrorCode.ARGUMENT, ErrorCode.STATE, ErrorCode.SERVER})


class MpdError(Exception):
    """An error with both machine and human readable details.

    ``server`` and ``at`` are meaningful only for ``ErrorCode.SERVER``;
    ``system`` only for ``ErrorCode.SYSTEM``.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        *,
        server: int | None = None,
        at: int = 0,
        system: int | None = None,
    ) -> None:
        if not isinstance(code, ErrorCode):
            raise TypeError(f"code must be an ErrorCode, not {type(code).__name__}")
        if message is None and code is not ErrorCode.OOM:
            raise ValueError(f"{code.name} errors need a message")
        self.code = code
        self._message = message
        self.server = server
        self.at = at
        self.system = system
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """The human readable message."""
        if self._message is None:
            return "Out of memory"
        return self._message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"MpdError({self.code.name}, {self.message!r})"

    @classmethod
    def from_system(cls, errno_code: int) -> MpdError:
        """A system error with the operating system's message for *errno_code*."""
        return cls(ErrorCode.SYSTEM, os.strerror(errno_code), system=errno_code)

    @classmethod
    def from_os_error(cls, exc: OSError) -> MpdError:
        """A system error built from a caught :class:`OSError`."""
        if exc.errno is None:
            return cls(ErrorCode.SYSTEM, str(exc) or "Unknown error", system=0)
        return cls.from_system(exc.errno)

    def is_fatal(self) -> bool:
        """True if the connection cannot recover from this error."""
        return self.code not in _RECOVERABLE

    def copy(self) -> MpdError:
        """An independent copy holding the fields valid for this error's code."""
        if self.code is ErrorCode.SERVER:
            return MpdError(self.code, self._message, server=self.server, at=self.at)
        if self.code is ErrorCode.SYSTEM:
            return MpdError(self.code, self._message, system=self.system)
        return MpdError(self.code, self._message)