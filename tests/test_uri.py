import pytest

from mpdwire.uri import verify_local_uri, verify_uri


@pytest.mark.parametrize(
    "uri, ok",
    [("", False), ("a", True), ("/abs/path", True), ("http://host/x", True)],
)
def test_verify_uri(uri, ok):
    assert verify_uri(uri) is ok


@pytest.mark.parametrize(
    "uri, ok",
    [
        ("", False),
        ("music/song.ogg", True),
        ("/music/song.ogg", False),
        ("music/", False),
        ("/", False),
        ("a", True),
    ],
)
def test_verify_local_uri(uri, ok):
    assert verify_local_uri(uri) is ok


def test_local_implies_valid():
    for uri in ["", "x", "/x", "x/", "x/y"]:
        if verify_local_uri(uri):
            assert verify_uri(uri) is True