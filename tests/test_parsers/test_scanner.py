import pytest

from argscan.exceptions import FlagValueMissingError, UnknownFlagError
from argscan.parser import FlagToken, PositionalToken, TokenScanner, arg, boolean, option
from argscan.parser.token_parser import TokenParser


def scanner(arguments=(), flags=None, strict=True, double_dash=True) -> TokenScanner:
    """Build a scanner from name-bound declarations."""
    parser = TokenParser(
        arguments=list(arguments),
        flags=flags or {},
        strict=strict,
        double_dash=double_dash,
    )
    return TokenScanner(parser.arguments, parser.flags, strict, double_dash)


def test_scan_long_and_positional():
    trace = scanner(flags={"force": boolean()}).scan(["--force", "alice"])
    assert trace == [FlagToken("force", "--force"), PositionalToken("alice")]


def test_scan_valued_forms():
    scan = scanner(flags={"name": option(short="n")}).scan
    assert scan(["--name", "x"]) == [FlagToken("name", "x")]
    assert scan(["--name=x"]) == [FlagToken("name", "x")]
    assert scan(["--name=a=b"]) == [FlagToken("name", "a=b")]
    assert scan(["--name="]) == [FlagToken("name", "")]
    assert scan(["-n", "x"]) == [FlagToken("name", "x")]
    assert scan(["-nx"]) == [FlagToken("name", "x")]
    assert scan(["-n=x"]) == [FlagToken("name", "x")]


def test_scan_valued_flag_takes_next_token_verbatim():
    scan = scanner(flags={"name": option(), "force": boolean()}).scan
    assert scan(["--name", "--force"]) == [FlagToken("name", "--force")]
    assert scan(["--name", "--"]) == [FlagToken("name", "--")]


def test_scan_missing_value():
    scan = scanner(flags={"name": option(short="n")}).scan
    with pytest.raises(FlagValueMissingError) as excinfo:
        scan(["--name"])
    assert excinfo.value.flag == "name"
    assert str(excinfo.value) == "Flag --name expects a value"

    with pytest.raises(FlagValueMissingError):
        scan(["-n"])


def test_scan_negation_records_literal_text():
    scan = scanner(flags={"color": boolean(allow_negation=True)}).scan
    assert scan(["--no-color"]) == [FlagToken("color", "--no-color")]
    assert scan(["--color"]) == [FlagToken("color", "--color")]


def test_scan_negation_requires_allow_negation():
    scan = scanner(flags={"color": boolean()}).scan
    with pytest.raises(UnknownFlagError):
        scan(["--no-color"])


def test_scan_short_cluster():
    flags = {"all": boolean(short="a"), "brief": boolean(short="b"), "count": option(short="c")}
    trace = scanner(flags=flags).scan(["-abc", "value"])
    assert trace == [
        FlagToken("all", "-abc"),
        FlagToken("brief", "-bc"),
        FlagToken("count", "value"),
    ]


def test_scan_short_cluster_with_inline_value():
    flags = {"all": boolean(short="a"), "count": option(short="c")}
    trace = scanner(flags=flags).scan(["-ac5"])
    assert trace == [FlagToken("all", "-ac5"), FlagToken("count", "5")]


def test_scan_double_dash_terminator():
    scan = scanner(flags={"force": boolean(short="f")}).scan
    trace = scan(["-f", "--", "-f", "--force", "--"])
    assert trace == [
        FlagToken("force", "-f"),
        PositionalToken("-f"),
        PositionalToken("--force"),
        PositionalToken("--"),
    ]


def test_scan_double_dash_disabled():
    scan = scanner(flags={"force": boolean()}, double_dash=False).scan
    assert scan(["--", "--force"]) == [PositionalToken("--"), FlagToken("force", "--force")]


def test_scan_multiple_continuation():
    flags = {"tag": option(multiple=True), "force": boolean()}
    trace = scanner(flags=flags).scan(["--tag", "a", "b", "--force", "c"])
    assert trace == [
        FlagToken("tag", "a"),
        FlagToken("tag", "b"),
        FlagToken("force", "--force"),
        PositionalToken("c"),
    ]


def test_scan_single_valued_flag_does_not_continue():
    trace = scanner(flags={"name": option()}).scan(["--name", "a", "b"])
    assert trace == [FlagToken("name", "a"), PositionalToken("b")]


def test_scan_multiple_continuation_stops_at_terminator():
    trace = scanner(flags={"tag": option(multiple=True)}).scan(["--tag", "a", "--", "b"])
    assert trace == [FlagToken("tag", "a"), PositionalToken("b")]


def test_scan_consumes_rest():
    arguments = [arg("command"), arg("rest", consumes_rest=True)]
    flags = {"verbose": boolean(short="v")}
    trace = scanner(arguments, flags).scan(["-v", "run", "script", "-v", "--verbose", "--"])
    assert trace == [
        FlagToken("verbose", "-v"),
        PositionalToken("run"),
        PositionalToken("script"),
        PositionalToken("-v"),
        PositionalToken("--verbose"),
        PositionalToken("--"),
    ]


def test_scan_strict_unknown_flag():
    scan = scanner(flags={"force": boolean(short="f")}).scan
    with pytest.raises(UnknownFlagError) as excinfo:
        scan(["--forse"])
    assert excinfo.value.token == "--forse"
    assert excinfo.value.available == ("--force", "-f")

    with pytest.raises(UnknownFlagError):
        scan(["-x"])
    with pytest.raises(UnknownFlagError):
        scan(["--unknown=value"])


def test_scan_strict_allows_dash_and_negative_numbers():
    scan = scanner(arguments=[arg("a"), arg("b"), arg("c")]).scan
    assert scan(["-", "-5", "-3.14"]) == [
        PositionalToken("-"),
        PositionalToken("-5"),
        PositionalToken("-3.14"),
    ]


def test_scan_permissive_unknown_flag_is_positional():
    scan = scanner(flags={"force": boolean()}, strict=False).scan
    assert scan(["--forse", "-x=1"]) == [PositionalToken("--forse"), PositionalToken("-x=1")]


def test_scan_permissive_unknown_flag_feeds_multiple():
    scan = scanner(flags={"tag": option(multiple=True)}, strict=False).scan
    assert scan(["--tag", "a", "-x"]) == [FlagToken("tag", "a"), FlagToken("tag", "-x")]


def test_scan_boolean_with_inline_value_requeues_value():
    scan = scanner(flags={"force": boolean()}).scan
    assert scan(["--force=yes"]) == [FlagToken("force", "--force"), PositionalToken("yes")]


def test_scan_short_boolean_with_inline_value_matches_long_form():
    flags = {"all": boolean(short="a"), "force": boolean(short="f")}
    scan = scanner(flags=flags).scan
    assert scan(["-f=yes"]) == [FlagToken("force", "-f=yes"), PositionalToken("yes")]
    assert scan(["-af=yes"]) == [
        FlagToken("all", "-af=yes"),
        FlagToken("force", "-f=yes"),
        PositionalToken("yes"),
    ]


def test_scan_does_not_drop_tokens():
    flags = {"tag": option(short="t", multiple=True), "force": boolean(short="f")}
    argv = ["a", "-f", "--tag", "x", "y", "--", "-t", "b"]
    trace = scanner(flags=flags).scan(argv)
    assert len(trace) == len(argv) - 2  # "--tag" and the "--" terminator
