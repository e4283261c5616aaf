import pytest

from hidusages.digitizers import DigitizersUsage
from hidusages.usage import Reserved

ALL_IDS = range(0x10000)


@pytest.mark.parametrize("member", list(DigitizersUsage))
def test_member_round_trip(member):
    assert DigitizersUsage.from_value(int(member)) is member


def test_every_id_decodes_to_itself():
    for usage_id in ALL_IDS:
        assert int(DigitizersUsage.from_value(usage_id)) == usage_id


def test_reserved_and_named_partition_id_space():
    named = {int(m) for m in DigitizersUsage}
    reserved = {
        i for i in ALL_IDS if isinstance(DigitizersUsage.from_value(i), Reserved)
    }
    assert reserved.isdisjoint(named)
    assert len(reserved) + len(named) == 0x10000


def test_named_values():
    assert DigitizersUsage.from_value(32) is DigitizersUsage.STYLUS
    assert DigitizersUsage.from_value(66) is DigitizersUsage.TIP_SWITCH
    assert DigitizersUsage.from_value(176) is DigitizersUsage.BUTTON_PRESS_THRESHOLD


def test_reserved_range_name():
    assert DigitizersUsage.from_value(16) == Reserved("RESERVED_10_1F", 16)


def test_tail_range_shares_one_name():
    first = DigitizersUsage.from_value(177)
    last = DigitizersUsage.from_value(65535)
    assert isinstance(first, Reserved)
    assert first.name == last.name
    assert last.value == 65535


@pytest.mark.parametrize("value", [-1, 0x10000, 1 << 40])
def test_out_of_range_decodes_as_undefined(value):
    assert DigitizersUsage.from_value(value) is DigitizersUsage.UNDEFINED


@pytest.mark.parametrize("value", ["1", 1.5, None])
def test_non_integer_raises(value):
    with pytest.raises(TypeError):
        DigitizersUsage.from_value(value)