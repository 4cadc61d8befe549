import pytest

from mpdwire.fingerprint import FingerprintType, parse_fingerprint_type


def test_parse_chromaprint():
    assert parse_fingerprint_type("chromaprint") is FingerprintType.CHROMAPRINT


@pytest.mark.parametrize("name", ["", "Chromaprint", "chromaprint ", "acoustid"])
def test_parse_unknown(name):
    assert parse_fingerprint_type(name) is FingerprintType.UNKNOWN


def test_known_and_unknown_differ():
    assert parse_fingerprint_type("chromaprint") is not parse_fingerprint_type("x")
    assert parse_fingerprint_type("x") is FingerprintType.UNKNOWN