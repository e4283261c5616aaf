import pytest

from hidusages.led import LedUsage
from hidusages.usage import Reserved

ALL_IDS = range(0x10000)


@pytest.mark.parametrize("member", list(LedUsage))
def test_member_round_trip(member):
    assert LedUsage.from_value(int(member)) is member


def test_every_id_decodes_to_itself():
    for usage_id in ALL_IDS:
        assert int(LedUsage.from_value(usage_id)) == usage_id


def test_reserved_and_named_partition_id_space():
    named = {int(m) for m in LedUsage}
    reserved = {i for i in ALL_IDS if isinstance(LedUsage.from_value(i), Reserved)}
    assert reserved.isdisjoint(named)
    assert len(reserved) + len(named) == 0x10000


def test_named_values():
    assert LedUsage.from_value(1) is LedUsage.NUM_LOCK
    assert LedUsage.from_value(2) is LedUsage.CAPS_LOCK
    assert LedUsage.from_value(87) is LedUsage.SYSTEM_MICROPHONE_MUTE
    assert LedUsage.from_value(104) is LedUsage.PLAYER_8


def test_players_are_consecutive():
    players = [LedUsage.from_value(int(LedUsage.PLAYER_INDICATOR) + n) for n in range(1, 9)]
    assert [p.name for p in players] == [f"PLAYER_{n}" for n in range(1, 9)]


def test_reserved_range_name():
    assert LedUsage.from_value(88) == Reserved("RESERVED_58_5F", 88)


def test_gap_boundaries():
    assert isinstance(LedUsage.from_value(95), Reserved)
    assert isinstance(LedUsage.from_value(105), Reserved)
    assert LedUsage.from_value(105).name == LedUsage.from_value(65535).name


@pytest.mark.parametrize("value", [-1, 0x10000])
def test_out_of_range_decodes_as_undefined(value):
    assert LedUsage.from_value(value) is LedUsage.UNDEFINED


@pytest.mark.parametrize("value", ["2", 2.0])
def test_non_integer_raises(value):
    with pytest.raises(TypeError):
        LedUsage.from_value(value)