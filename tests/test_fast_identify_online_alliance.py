import pytest

from hidusages.fast_identify_online_alliance import FIDOUsage
from hidusages.usage import Reserved


@pytest.mark.parametrize("member", list(FIDOUsage))
def test_named_usages_round_trip(member):
    assert FIDOUsage.from_value(int(member)) is member


def test_known_ids():
    assert FIDOUsage.from_value(1) is FIDOUsage.U2F_AUTHENTICATOR_DEVICE
    assert FIDOUsage.from_value(32) is FIDOUsage.INPUT_REPORT_DATA
    assert FIDOUsage.from_value(33) is FIDOUsage.OUTPUT_REPORT_DATA


@pytest.mark.parametrize("start, end", [(2, 31), (34, 65535)])
def test_reserved_span_endpoints_share_a_range(start, end):
    first = FIDOUsage.from_value(start)
    last = FIDOUsage.from_value(end)
    assert isinstance(first, Reserved)
    assert first.name == last.name
    assert int(first) == start
    assert int(last) == end


def test_reserved_ranges_are_distinct():
    assert FIDOUsage.from_value(2).name != FIDOUsage.from_value(34).name


def test_reserved_range_name():
    assert FIDOUsage.from_value(0x22) == Reserved("RESERVED_22_FFFF", 0x22)


def test_every_id_keeps_its_value():
    assert all(int(FIDOUsage.from_value(i)) == i for i in range(0x10000))


@pytest.mark.parametrize("value", [-1, 0x10000])
def test_out_of_range_decodes_as_undefined(value):
    assert FIDOUsage.from_value(value) is FIDOUsage.UNDEFINED


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        FIDOUsage.from_value("0x20")