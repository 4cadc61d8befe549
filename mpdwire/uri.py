"""Checks on URIs passed to the server."""

from __future__ import annotations


def verify_uri(uri: str) -> bool:
    """True if *uri* is not empty."""
    return uri != ""


def verify_local_uri(uri: str) -> bool:
    """True if *uri* is a non-empty relative path without a trailing slash."""
    return verify_uri(uri) and not uri.startswith("/") and not uri.endswith("/")