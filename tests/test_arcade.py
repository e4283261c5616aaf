import pytest

from hidusages.arcade import ArcadeUsage
from hidusages.usage import Reserved


@pytest.mark.parametrize("member", list(ArcadeUsage))
def test_named_members_round_trip(member):
    assert ArcadeUsage.from_value(int(member)) is member


def test_every_id_decodes_to_itself():
    for usage_id in range(0x10000):
        assert int(ArcadeUsage.from_value(usage_id)) == usage_id


def test_pinned_named_values():
    assert ArcadeUsage.from_value(0x30) is ArcadeUsage.GENERAL_PURPOSE_ANALOG_INPUT_STATE
    assert ArcadeUsage.from_value(0x40) is ArcadeUsage.COIN_DOOR_LOCKOUT
    assert ArcadeUsage.from_value(77) is ArcadeUsage.PIN_PAD_COMMAND


@pytest.mark.parametrize("value", [4, 47, 58, 63, 78, 65535])
def test_gaps_are_reserved(value):
    result = ArcadeUsage.from_value(value)
    assert isinstance(result, Reserved)
    assert result.value == value


def test_reserved_name_after_pin_pad():
    assert ArcadeUsage.from_value(78).name == "RESERVED_4E_FFFF"


@pytest.mark.parametrize("value", [65536, -1])
def test_out_of_range_decodes_as_undefined(value):
    assert ArcadeUsage.from_value(value) is ArcadeUsage.UNDEFINED


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        ArcadeUsage.from_value("0x30")