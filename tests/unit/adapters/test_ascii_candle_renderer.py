# tests/unit/adapters/test_ascii_candle_renderer.py

import pytest

from weather_candles.adapters.ascii_candle_renderer import AsciiCandleRenderer
from weather_candles.entities.candle import Candle


def _strip(line: str) -> str:
    """Returns the chart part of a rendered line."""
    return line.split(" | ", 1)[1]


@pytest.fixture
def renderer() -> AsciiCandleRenderer:
    return AsciiCandleRenderer()


def test_render_empty_candles_returns_no_lines(renderer):
    assert renderer.render([], 50) == []


def test_flat_single_candle_collapses_to_column_zero(renderer):
    """
    max == min would divide by zero on a linear scale; every mark
    goes to column 0 instead.
    """
    candle = Candle(label="2020-01", open=10.0, high=10.0, low=10.0, close=10.0)

    [line] = renderer.render([candle], 10)

    assert _strip(line) == "#" + " " * 9


def test_flat_chart_with_several_candles(renderer):
    candles = [
        Candle(label="2020-01", open=3.0, high=3.0, low=3.0, close=3.0),
        Candle(label="2020-02", open=3.0, high=3.0, low=3.0, close=3.0),
    ]

    lines = renderer.render(candles, 5)

    assert [_strip(line) for line in lines] == ["#    ", "#    "]


def test_wicks_and_body_are_placed_on_shared_scale(renderer):
    candles = [
        Candle(label="2020-01", open=2.0, high=10.0, low=0.0, close=4.0),
        Candle(label="2020-02", open=8.0, high=8.0, low=6.0, close=6.0),
    ]

    lines = renderer.render(candles, 11)

    # one column per unit on [0, 10]
    assert _strip(lines[0]) == "| ###     |"
    assert _strip(lines[1]) == "      ###  "


def test_body_is_painted_over_wicks(renderer):
    candle_low = Candle(label="a", open=0.0, high=10.0, low=0.0, close=5.0)

    [line] = renderer.render([candle_low], 11)

    assert _strip(line) == "######    |"


def test_columns_are_truncated_not_rounded(renderer):
    candles = [
        Candle(label="x", open=0.0, high=0.0, low=0.0, close=0.0),
        Candle(label="y", open=0.99, high=1.0, low=0.99, close=0.99),
    ]

    lines = renderer.render(candles, 3)

    # 0.99 * 2 = 1.98 -> column 1
    assert _strip(lines[1]) == " #|"


def test_label_is_right_aligned_to_eight_chars(renderer):
    candle = Candle(label="2020", open=1.0, high=1.0, low=1.0, close=1.0)

    [line] = renderer.render([candle], 4)

    assert line == "    2020 | #   "


def test_output_follows_input_order(renderer):
    candles = [
        Candle(label="2021", open=1.0, high=2.0, low=0.0, close=1.0),
        Candle(label="2020", open=1.0, high=2.0, low=0.0, close=1.0),
    ]

    lines = renderer.render(candles, 20)

    assert lines[0].strip().startswith("2021")
    assert lines[1].strip().startswith("2020")


def test_every_strip_has_requested_width(renderer):
    candles = [
        Candle(label="2020-01", open=-5.0, high=30.0, low=-10.0, close=25.0),
        Candle(label="2020-02", open=1.0, high=2.0, low=0.5, close=1.5),
    ]

    for line in renderer.render(candles, 37):
        assert len(_strip(line)) == 37


def test_custom_characters():
    renderer = AsciiCandleRenderer(wick_char="-", body_char="=")
    candle = Candle(label="d", open=4.0, high=10.0, low=0.0, close=6.0)

    [line] = renderer.render([candle], 11)

    assert _strip(line) == "-   ===   -"


@pytest.mark.parametrize("width", [0, -3])
def test_render_rejects_non_positive_width(renderer, width):
    candle = Candle(label="2020", open=1.0, high=1.0, low=1.0, close=1.0)

    with pytest.raises(ValueError):
        renderer.render([candle], width)


def test_renderer_rejects_multi_char_glyphs():
    with pytest.raises(ValueError):
        AsciiCandleRenderer(body_char="##")
