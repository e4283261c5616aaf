import pytest

from hidusages.generic_device_controls import GenericDeviceControlsUsage
from hidusages.usage import Reserved

G = GenericDeviceControlsUsage


@pytest.mark.parametrize("member", list(G))
def test_named_members_round_trip(member):
    assert G.from_value(int(member)) is member


def test_every_id_decodes_to_itself():
    for usage_id in range(0x10000):
        assert int(G.from_value(usage_id)) == usage_id


def test_pinned_named_values():
    assert G.from_value(32) is G.BATTERY_STRENGTH
    assert G.from_value(64) is G.GRIP_POSE_OFFSET
    assert G.from_value(65) is G.POINTER_POSE_OFFSET


@pytest.mark.parametrize("value", [2, 31, 53, 63, 66, 65535])
def test_gaps_are_reserved(value):
    result = G.from_value(value)
    assert isinstance(result, Reserved)
    assert result.value == value


@pytest.mark.parametrize("value", [65536, -2])
def test_out_of_range_decodes_as_undefined(value):
    assert G.from_value(value) is G.UNDEFINED


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        G.from_value(None)