import pytest

from hidusages.monitor import MonitorUsage
from hidusages.usage import Reserved


@pytest.mark.parametrize("member", list(MonitorUsage))
def test_named_members_round_trip(member):
    assert MonitorUsage.from_value(int(member)) is member


def test_every_id_decodes_to_itself():
    for usage_id in range(0x10000):
        assert int(MonitorUsage.from_value(usage_id)) == usage_id


def test_pinned_named_values():
    assert MonitorUsage.from_value(2) is MonitorUsage.EDID_INFORMATION
    assert MonitorUsage.from_value(4) is MonitorUsage.VESA_VERSION


@pytest.mark.parametrize("value", [5, 100, 65535])
def test_above_vesa_version_is_reserved(value):
    result = MonitorUsage.from_value(value)
    assert isinstance(result, Reserved)
    assert result.name == "RESERVED_05_FFFF"
    assert result.value == value


@pytest.mark.parametrize("value", [65536, -1])
def test_out_of_range_decodes_as_undefined(value):
    assert MonitorUsage.from_value(value) is MonitorUsage.UNDEFINED


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        MonitorUsage.from_value("monitor")