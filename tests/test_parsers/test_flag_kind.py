import pytest

from argscan.parser import FlagKind


def test_flag_kind():
    kind = FlagKind.VALUED
    assert kind == FlagKind.VALUED
    assert kind != FlagKind.BOOLEAN
    assert kind != "valued"
    assert kind.value == "valued"
    assert str(kind) == "valued"
    assert len(FlagKind.choices()) == 2


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("boolean", FlagKind.BOOLEAN),
        ("bool", FlagKind.BOOLEAN),
        (" Switch ", FlagKind.BOOLEAN),
        ("option", FlagKind.VALUED),
        ("STRING", FlagKind.VALUED),
        ("value", FlagKind.VALUED),
    ],
)
def test_flag_kind_aliases(alias, expected):
    assert FlagKind(alias) is expected


def test_flag_kind_invalid():
    with pytest.raises(ValueError, match="Must be one of: boolean, valued"):
        FlagKind("count")
    with pytest.raises(ValueError):
        FlagKind(3)
