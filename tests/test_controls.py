import re

from algorithms import get_algorithm, list_algorithms
from engine import StatsSnapshot
from ui import (
    algorithm_selector,
    array_controls,
    action_buttons,
    button_states,
    statistics_panel,
    algorithm_info_panel,
    color_legend,
)


def _button(html, element_id):
    match = re.search(rf'<button id="{element_id}"[^>]*>', html)
    assert match, element_id
    return match.group(0)


def test_selector_lists_every_algorithm_and_marks_selection():
    html = algorithm_selector(list_algorithms(), selected_key="merge")

    assert html.count("<option") == 5
    assert '<option value="merge" selected>Merge Sort</option>' in html


def test_selector_disabled_while_running():
    html = algorithm_selector(list_algorithms(), is_running=True)

    assert '<select id="algorithm-select" disabled>' in html


def test_array_controls_bounds():
    html = array_controls(size=30, rate=8)

    assert 'id="array-size" min="5" max="100" value="30"' in html
    assert 'id="speed" min="1" max="100" value="8"' in html


def test_buttons_when_idle():
    html = action_buttons(is_running=False)

    assert "disabled" not in _button(html, "start-btn")
    assert "disabled" in _button(html, "stop-btn")
    assert "disabled" not in _button(html, "generate-btn")
    assert "disabled" not in _button(html, "reset-btn")


def test_buttons_when_running():
    html = action_buttons(is_running=True)

    assert "disabled" in _button(html, "start-btn")
    assert "disabled" not in _button(html, "stop-btn")
    assert "disabled" in _button(html, "generate-btn")
    assert "disabled" in _button(html, "reset-btn")


def test_button_states_match_rendered_buttons():
    for running in (False, True):
        html = action_buttons(is_running=running)
        flags = button_states(running)
        for element_id in ("start-btn", "stop-btn", "generate-btn", "reset-btn"):
            assert ("disabled" in _button(html, element_id)) == flags[element_id]


def test_statistics_panel_formats_time():
    html = statistics_panel(StatsSnapshot(comparisons=12, swaps=4, elapsed_ms=1234.56))

    assert '<td id="comparisons">12</td>' in html
    assert '<td id="swaps">4</td>' in html
    assert '<td id="time">1235ms</td>' in html


def test_info_panel_shows_complexities():
    html = algorithm_info_panel(get_algorithm("quick"))

    assert "Quick Sort" in html
    assert '<td id="worst-complexity">O(n²)</td>' in html
    assert '<td id="space-complexity">O(log n)</td>' in html


def test_info_panel_placeholder():
    assert "placeholder" in algorithm_info_panel(None)


def test_legend_has_every_state():
    html = color_legend()

    assert html.count('class="legend-item"') == 6
    assert "Pivot" in html
