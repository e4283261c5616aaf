import pytest

from hidusages.magnetic_stripe_reader import MagneticStripeReaderUsage as MSR
from hidusages.usage import Reserved


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, MSR.UNDEFINED),
        (1, MSR.MSR_DEVICE_READ_ONLY),
        (17, MSR.TRACK_1_LENGTH),
        (18, MSR.TRACK_2_LENGTH),
        (19, MSR.TRACK_3_LENGTH),
        (20, MSR.TRACK_JIS_LENGTH),
        (32, MSR.TRACK_DATA),
        (33, MSR.TRACK_1_DATA),
        (34, MSR.TRACK_2_DATA),
        (35, MSR.TRACK_3_DATA),
        (36, MSR.TRACK_JIS_DATA),
    ],
)
def test_named_usages(value, expected):
    assert MSR.from_value(value) is expected


@pytest.mark.parametrize("value", [2, 16, 21, 31, 37, 65535])
def test_reserved_values_keep_id(value):
    usage = MSR.from_value(value)
    assert isinstance(usage, Reserved)
    assert usage.value == value


def test_reserved_boundaries_share_range():
    assert MSR.from_value(2).name == MSR.from_value(16).name
    assert MSR.from_value(21).name == MSR.from_value(31).name
    assert MSR.from_value(37).name == MSR.from_value(65535).name
    assert MSR.from_value(16).name != MSR.from_value(21).name


def test_round_trip_members():
    for member in MSR:
        assert MSR.from_value(int(member)) is member


def test_out_of_range_decodes_as_undefined():
    assert MSR.from_value(70000) is MSR.UNDEFINED
    assert MSR.from_value(-5) is MSR.UNDEFINED


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        MSR.from_value(1.5)