import pytest

from vpinlink.params import Param, ParamItem


def test_wire_bytes_of_mixed_values():
    p = Param()
    p.add_multi("vw", 1, "hello")
    assert p.to_bytes() == b"vw\x001\x00hello\x00"


def test_round_trip_through_bytes():
    p = Param()
    p.add_multi("a", 5, "x", -7)
    q = Param(p.to_bytes())
    assert [item.as_str() for item in q] == ["a", "5", "x", "-7"]
    assert len(q) == 4


def test_index_lookup_and_out_of_range():
    p = Param(b"dw\x0013\x001\x00")
    assert p[1].as_int() == 13
    missing = p[3]
    assert not missing.is_valid()
    assert missing.as_int() == 0
    assert missing.is_empty()
    assert not p[-1].is_valid()


def test_index_must_be_int():
    with pytest.raises(TypeError):
        Param(b"a\x00")["a"]


def test_key_lookup():
    p = Param(b"ver\x000.6\x00h-beat\x0010\x00")
    assert p.get("h-beat").as_int() == 10
    assert p.get("ver").as_str() == "0.6"
    assert not p.get("missing").is_valid()


def test_key_without_value_is_invalid():
    assert not Param(b"k\x00").get("k").is_valid()


def test_values_are_not_matched_as_keys():
    p = Param(b"a\x00b\x00c\x00d\x00")
    assert not p.get("b").is_valid()
    assert p.get("c").as_str() == "d"


def test_atoi_semantics():
    assert Param(b"  -12abc").as_int() == -12
    assert Param(b"abc").as_int() == 0
    assert Param(b"+7\x009").as_int() == 7


def test_float_parsing():
    p = Param(b"3.25x\x00-0.5\x00nope\x00")
    assert p[0].as_float() == 3.25
    assert float(p[1]) == -0.5
    assert p[2].as_float() == 0.0


def test_float_formatting_uses_seven_decimals():
    p = Param()
    p.add(1.5)
    assert p[0].as_str() == "1.5000000"
    assert p[0].as_float() == 1.5


def test_capacity_drops_values_that_do_not_fit():
    p = Param(capacity=4)
    assert p.add("abc") is True
    assert p.add("d") is False
    assert p.to_bytes() == b"abc\x00"


def test_capacity_smaller_than_data_rejected():
    with pytest.raises(ValueError):
        Param(b"abcdef", capacity=2)


def test_add_none_and_raw_bytes():
    p = Param()
    p.add(None)
    p.add(b"\x01\x02")
    assert p.to_bytes() == b"\x00\x01\x02"


def test_add_key_pairs():
    p = Param()
    p.add_key("tmpl", "abc")
    assert p.get("tmpl").as_str() == "abc"


def test_unsupported_type():
    with pytest.raises(TypeError):
        Param().add(object())


def test_is_empty():
    assert Param().is_empty()
    assert Param(b"\x00x").is_empty()
    assert not Param(b"x").is_empty()


def test_last_field_without_terminator():
    p = Param(b"a\x00bc")
    assert [str(item) for item in p] == ["a", "bc"]


def test_whole_param_as_str_stops_at_nul():
    assert Param(b"first\x00second\x00").as_str() == "first"


def test_item_conversions():
    item = ParamItem(b"42")
    assert int(item) == 42
    assert str(item) == "42"
    assert item.is_valid()
    assert not item.is_empty()