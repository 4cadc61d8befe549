import pytest

from mpdwire.parser import Pair, Parser, ParserResult


@pytest.fixture
def parser():
    return Parser()


def test_ok(parser):
    assert parser.feed("OK") is ParserResult.SUCCESS
    assert parser.discrete is False


def test_list_ok(parser):
    assert parser.feed("list_OK") is ParserResult.SUCCESS
    assert parser.discrete is True


def test_ack_full(parser):
    assert parser.feed("ACK [50@1] {play} No such song") is ParserResult.ERROR
    assert parser.server_error == 50
    assert parser.at == 1
    assert parser.message == "No such song"


def test_ack_without_at(parser):
    assert parser.feed("ACK [5] {cmd}") is ParserResult.ERROR
    assert parser.server_error == 5
    assert parser.at == 0
    assert parser.message is None


def test_ack_without_command(parser):
    assert parser.feed("ACK [5@0] plain text") is ParserResult.ERROR
    assert parser.message == "plain text"


def test_ack_unterminated_brace_kept_in_message(parser):
    assert parser.feed("ACK [5@0] {open text") is ParserResult.ERROR
    assert parser.message == "{open text"


def test_ack_without_bracket(parser):
    assert parser.feed("ACK") is ParserResult.ERROR
    assert parser.server_error is None
    assert parser.at == 0
    assert parser.message is None


def test_ack_unclosed_bracket_is_malformed(parser):
    assert parser.feed("ACK [2@0 oops") is ParserResult.MALFORMED


def test_pair(parser):
    assert parser.feed("file: music/song.ogg") is ParserResult.PAIR
    assert parser.pair == Pair("file", "music/song.ogg")
    assert parser.name == "file"
    assert parser.value == "music/song.ogg"


def test_pair_splits_at_first_colon(parser):
    assert parser.feed("Title: a: b") is ParserResult.PAIR
    assert parser.pair == Pair("Title", "a: b")


def test_pair_empty_value(parser):
    assert parser.feed("Artist: ") is ParserResult.PAIR
    assert parser.value == ""


@pytest.mark.parametrize("line", ["file:nospace", "nocolon", "", "trailing:"])
def test_malformed(parser, line):
    assert parser.feed(line) is ParserResult.MALFORMED


def test_result_is_stored(parser):
    parser.feed("list_OK")
    assert parser.result is ParserResult.SUCCESS


def test_wrong_state_access_raises(parser):
    assert parser.feed("OK") is ParserResult.SUCCESS
    assert parser.result is ParserResult.SUCCESS
    with pytest.raises(RuntimeError):
        getattr(parser, "pair")
    with pytest.raises(RuntimeError):
        getattr(parser, "message")
    assert parser.discrete is False


def test_fresh_parser_has_no_pair(parser):
    with pytest.raises(RuntimeError):
        getattr(parser, "name")
    assert parser.feed("name: value") is ParserResult.PAIR
    assert parser.name == "name"


def test_reuse_resets_ack_fields(parser):
    parser.feed("ACK [50@3] {x} first")
    parser.feed("ACK")
    assert parser.server_error is None
    assert parser.at == 0
    assert parser.message is None