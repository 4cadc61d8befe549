import errno
import os

import pytest

from mpdwire.errors import ErrorCode, MpdError


@pytest.mark.parametrize(
    "code, fatal",
    [
        (ErrorCode.OOM, True),
        (ErrorCode.ARGUMENT, False),
        (ErrorCode.STATE, False),
        (ErrorCode.SYSTEM, True),
        (ErrorCode.MALFORMED, True),
        (ErrorCode.CLOSED, True),
        (ErrorCode.SERVER, False),
    ],
)
def test_is_fatal(code, fatal):
    assert MpdError(code, "boom").is_fatal() is fatal


def test_oom_default_message():
    err = MpdError(ErrorCode.OOM)
    assert err.message == "Out of memory"
    assert str(err) == "Out of memory"


def test_message_required_for_other_codes():
    with pytest.raises(ValueError):
        MpdError(ErrorCode.STATE)


def test_code_must_be_error_code():
    with pytest.raises(TypeError):
        MpdError(3, "boom")


def test_raisable():
    err = MpdError(ErrorCode.STATE, "not in command list mode")
    assert err.code is ErrorCode.STATE
    assert err.message == "not in command list mode"
    assert str(err) == "not in command list mode"
    with pytest.raises(MpdError, match="not in command list mode"):
        raise err


def test_copy_server_error_keeps_location():
    err = MpdError(ErrorCode.SERVER, "No such song", server=50, at=2)
    dup = err.copy()
    assert dup is not err
    assert (dup.code, dup.message, dup.server, dup.at) == (
        ErrorCode.SERVER,
        "No such song",
        50,
        2,
    )


def test_copy_drops_fields_not_valid_for_code():
    err = MpdError(ErrorCode.ARGUMENT, "bad", server=7, at=3, system=9)
    dup = err.copy()
    assert dup.server is None
    assert dup.at == 0
    assert dup.system is None
    assert dup.message == "bad"


def test_copy_system_error_keeps_system_code():
    err = MpdError.from_system(errno.ECONNREFUSED)
    dup = err.copy()
    assert dup.system == errno.ECONNREFUSED
    assert dup.message == err.message


def test_from_system_uses_strerror():
    err = MpdError.from_system(errno.ENOENT)
    assert err.code is ErrorCode.SYSTEM
    assert err.system == errno.ENOENT
    assert err.message == os.strerror(errno.ENOENT)


def test_from_os_error():
    err = MpdError.from_os_error(OSError(errno.EPIPE, "pipe"))
    assert err.code is ErrorCode.SYSTEM
    assert err.system == errno.EPIPE
    assert err.message == os.strerror(errno.EPIPE)