from __future__ import annotations

from gcharts.application.services.gcharts.query import (
    CompositeParam,
    QueryBuilder,
    format_value,
    is_set,
    multi_dimensional_to_string,
    to_float,
    urlencode,
)
from gcharts.domain.option_store import OptionStore


def test_format_value():
    assert format_value(None) == ""
    assert format_value(3) == "3"
    assert format_value(3.0) == "3"
    assert format_value(0.1) == "0.1"
    assert format_value("ff0000") == "ff0000"
    assert format_value(True) == "1"
    assert format_value(OptionStore([1, "a"])) == "1,a"


def test_to_float_is_best_effort():
    assert to_float(None) == 0.0
    assert to_float("") == 0.0
    assert to_float("12.5") == 12.5
    assert to_float("abc") == 0.0


def test_multi_dimensional_to_string_mixes_stores_and_sequences():
    groups = [OptionStore({"a": 1, "b": 2}), [3, 4], ("x",)]
    assert multi_dimensional_to_string(groups) == "1,2|3,4|x"
    assert multi_dimensional_to_string([]) == ""


def test_composite_param_opens_once():
    param = CompositeParam("chts")
    assert param.opened is False
    param.add(1, 14).add(2, "center")
    assert param.opened is True
    assert param.value() == ",14,center"


def test_query_builder_skips_unopened_composite():
    query = QueryBuilder("http://example.test/chart")
    query.add("cht", "lc").add_composite(CompositeParam("chdls")).add("chs", "1x1")
    assert query.to_url() == "http://example.test/chart?cht=lc&chs=1x1"
    assert query.fragments() == [("cht", "lc"), ("chs", "1x1")]


def test_is_set_follows_loose_truthiness():
    assert is_set("lc") and is_set(12) and is_set("0.0")
    assert not any(is_set(v) for v in (None, "", "0", 0, 0.0, False, OptionStore()))


def test_urlencode_matches_form_encoding():
    assert urlencode("Sales ~ 2024/Q1") == "Sales+%7E+2024%2FQ1"
    assert urlencode("a-b_c.d") == "a-b_c.d"
