import pytest

from hidusages.camera_control import CameraControlUsage
from hidusages.usage import Reserved


def test_named_usages():
    assert CameraControlUsage.from_value(0) is CameraControlUsage.UNDEFINED
    assert CameraControlUsage.from_value(32) is CameraControlUsage.CAMERA_AUTO_FOCUS
    assert CameraControlUsage.from_value(33) is CameraControlUsage.CAMERA_SHUTTER


@pytest.mark.parametrize("value", [1, 31, 34, 65535])
def test_reserved_values_keep_id(value):
    usage = CameraControlUsage.from_value(value)
    assert isinstance(usage, Reserved)
    assert usage.value == value
    assert int(usage) == value


def test_reserved_ranges_are_distinct():
    low = CameraControlUsage.from_value(1)
    high = CameraControlUsage.from_value(34)
    assert low.name != high.name
    assert CameraControlUsage.from_value(31).name == low.name
    assert CameraControlUsage.from_value(65535).name == high.name


def test_out_of_range_decodes_as_undefined():
    assert CameraControlUsage.from_value(-1) is CameraControlUsage.UNDEFINED
    assert CameraControlUsage.from_value(0x10000) is CameraControlUsage.UNDEFINED


def test_round_trip_members():
    for member in CameraControlUsage:
        assert CameraControlUsage.from_value(int(member)) is member


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        CameraControlUsage.from_value("32")