"""Response parsing, errors, idle events and entity objects for the Music Player Daemon protocol."""

__version__ = "0.1.0"

__all__ = [
    "entities",
    "errors",
    "fingerprint",
    "idle",
    "iso8601",
    "kvlist",
    "parser",
    "sockets",
    "uri",
]