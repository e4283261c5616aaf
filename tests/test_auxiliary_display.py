import pytest

from hidusages.auxiliary_display import AuxiliaryDisplayUsage
from hidusages.usage import Reserved


@pytest.mark.parametrize("member", list(AuxiliaryDisplayUsage))
def test_named_members_round_trip(member):
    assert AuxiliaryDisplayUsage.from_value(int(member)) is member


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, AuxiliaryDisplayUsage.UNDEFINED),
        (32, AuxiliaryDisplayUsage.DISPLAY_ATTRIBUTES_REPORT),
        (128, AuxiliaryDisplayUsage.BITMAP_SIZE_X),
        (138, AuxiliaryDisplayUsage.BLIT_REPORT),
        (194, AuxiliaryDisplayUsage.SOFT_KEYS),
        (221, AuxiliaryDisplayUsage.UNICODE_EQUIVALENT),
        (255, AuxiliaryDisplayUsage.REQUEST_REPORT),
    ],
)
def test_decodes_named_values(value, expected):
    assert AuxiliaryDisplayUsage.from_value(value) is expected


@pytest.mark.parametrize(
    "value, name",
    [
        (137, "RESERVED_89"),
        (222, "RESERVED_DE"),
        (256, "RESERVED_100_FFFF"),
    ],
)
def test_single_reserved_slots(value, name):
    result = AuxiliaryDisplayUsage.from_value(value)
    assert result == Reserved(name, value)


@pytest.mark.parametrize("value", [3, 31, 78, 150, 205, 224, 254, 65535])
def test_reserved_values_keep_raw_id(value):
    result = AuxiliaryDisplayUsage.from_value(value)
    assert isinstance(result, Reserved)
    assert int(result) == value


def test_every_id_decodes():
    for usage_id in range(0x10000):
        result = AuxiliaryDisplayUsage.from_value(usage_id)
        assert int(result) == usage_id


@pytest.mark.parametrize("value", [-5, 65536])
def test_out_of_range_decodes_as_undefined(value):
    assert AuxiliaryDisplayUsage.from_value(value) is AuxiliaryDisplayUsage.UNDEFINED


def test_non_integer_is_rejected():
    with pytest.raises(TypeError):
        AuxiliaryDisplayUsage.from_value("32")