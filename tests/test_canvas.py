from bars import Sequence, DisplayState
from ui import render_bars, CanvasConfig


def test_one_bar_group_per_element():
    seq = Sequence.from_values([10, 50, 100, 200, 300])
    svg = render_bars(seq.snapshot())

    assert svg.startswith("<svg")
    assert svg.rstrip().endswith("</svg>")
    assert svg.count('class="bar"') == 5


def test_empty_snapshot_renders_background_only():
    svg = render_bars([])

    assert 'class="bar"' not in svg
    assert 'fill="#ffffff"' in svg


def test_state_colours():
    bars = [{"value": 50, "state": s.value} for s in DisplayState]
    svg = render_bars(bars)

    for color in CanvasConfig.colors.values():
        assert f'fill="{color}"' in svg


def test_unknown_state_falls_back_to_unsorted_colour():
    svg = render_bars([{"value": 50, "state": "mystery"}])

    assert 'fill="#3498db"' in svg


def test_labels_only_for_small_arrays():
    small = render_bars([{"value": 123, "state": "unsorted"}] * 20)
    large = render_bars([{"value": 123, "state": "unsorted"}] * 21)

    assert small.count("<text") == 20
    assert ">123</text>" in small
    assert "<text" not in large


def test_bar_geometry():
    # one bar of value 380 on the 800x400 canvas: height = 380 / 380 * 360
    svg = render_bars([{"value": 380, "state": "sorted"}])

    assert 'height="360.00"' in svg
    assert 'y="30.00"' in svg
    assert 'width="798.00"' in svg
    assert 'x="1.00"' in svg
