from __future__ import annotations

import pytest

from gcharts.application.services.gcharts.chart_builder import OPTION_SETTERS, ChartBuilder, setter_name
from gcharts.application.services.gcharts.errors import ChartValidationError, UnknownOptionError
from gcharts.application.services.gcharts.presets import (
    CHART_PRESETS,
    LineChart,
    PieChart,
    get_chart_class,
)


def test_set_options_dispatches_to_setters():
    chart = ChartBuilder().set_options(
        {
            "type": "lc",
            "width": 300,
            "height": 200,
            "datas": [[1, 2, 3], [4, 5, 6]],
            "labels": ["a", "b", "c"],
            "labels_options": {"position": "b"},
            "title": "Hello world",
            "title_options": {"font-size": 12},
            "transparency": True,
        }
    )
    assert chart.build() == (
        "http://chart.googleapis.com/chart?cht=lc&chs=300x200&chd=t:1,2,3|4,5,6"
        "&chf=bg,s,65432100&chl=a|b|c&chdlp=b&chtt=Hello+world&chts=,12"
    )


def test_unknown_option_names_option_and_setter():
    chart = ChartBuilder()
    with pytest.raises(UnknownOptionError) as exc_info:
        chart.set_options({"font_size": 12})
    err = exc_info.value
    assert err.message == 'Unknown chart option "font_size" or chart method "set_font_size()"'
    assert err.details == {"option": "font_size", "setter": "set_font_size"}
    assert err.status_code == 500
    assert err.code == "chart_unknown_option"


def test_set_options_still_validates():
    with pytest.raises(ChartValidationError):
        ChartBuilder().set_options({"colors": ["red"]})
    with pytest.raises(ChartValidationError):
        ChartBuilder().set_options({"datas": 12})


@pytest.mark.parametrize(
    "datas, expected_series, chd",
    [
        ([1, 2, 3], [[1, 2, 3]], "t:1,2,3"),
        ([[1, 2, 3]], [[1, 2, 3]], "t:1,2,3"),
        ([[1, 2], [3, 4]], [[1, 2], [3, 4]], "t:1,2|3,4"),
        ((5, "6.5"), [[5, "6.5"]], "t:5,6.5"),
    ],
)
def test_set_options_datas_accepts_flat_and_nested_series(datas, expected_series, chd: str):
    chart = ChartBuilder().set_options({"type": "lc", "width": 300, "height": 200, "datas": datas})
    assert chart.get_datas() == expected_series
    assert chart.build().endswith(f"&chd={chd}")


def test_set_options_datas_rejects_mixed_shapes():
    with pytest.raises(ChartValidationError):
        ChartBuilder().set_options({"datas": [[1, 2], 3]})


def test_option_table_covers_every_setter():
    setters = {name for name in dir(ChartBuilder) if name.startswith("set_") and name != "set_options"}
    assert {setter_name(option) for option in OPTION_SETTERS} == setters


def test_setter_name():
    assert setter_name("labels_options") == "set_labels_options"
    assert setter_name("type") == "set_type"


def test_subclass_setter_override_is_used():
    class UpperTitleChart(ChartBuilder):
        def set_title(self, title):
            return super().set_title(str(title).upper())

    chart = UpperTitleChart().set_options({"title": "quiet"})
    assert chart.get_title() == "QUIET"


def test_preset_default_options():
    assert LineChart().get_type() == "lc"
    assert PieChart().get_type() == "p"
    chart = LineChart().set_options({"type": "ls"})
    assert chart.get_type() == "ls"


@pytest.mark.parametrize("preset, expected_type", [("line", "lc"), ("bar", "bvs"), ("pie_3d", "p3"), ("Sparkline", "ls")])
def test_get_chart_class(preset: str, expected_type: str):
    assert get_chart_class(preset)().get_type() == expected_type


def test_get_chart_class_defaults_and_unknown():
    assert get_chart_class(None) is ChartBuilder
    assert get_chart_class("") is ChartBuilder
    with pytest.raises(UnknownOptionError):
        get_chart_class("radar")
    assert set(CHART_PRESETS) >= {"line", "bar", "pie"}
