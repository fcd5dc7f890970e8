"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • algorithm_selector    – dropdown of registered sorts
  • array_controls        – array size + speed sliders
  • action_buttons        – start / stop / new array / reset
  • statistics_panel      – comparisons, swaps, elapsed time
  • algorithm_info_panel  – name, description, complexity table
  • color_legend          – what each bar colour means

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - Controls that must not change mid-run are rendered disabled while
    `is_running` is True; the page script toggles the same ids live.
"""

from typing import List, Optional

from algorithms import AlgoInfo
from bars import DisplayState
from engine import StatsSnapshot, SIZE_RANGE
from ui.canvas import CONFIG

RATE_RANGE = (1, 100)


def _disabled(flag: bool) -> str:
    return "disabled" if flag else ""


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    is_running: bool = False,
) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(f'<option value="{algo.key}" {sel}>{algo.label}</option>')

    return f"""
    <div class="panel algorithm-selector">
      <h3>Algorithm</h3>
      <select id="algorithm-select" {_disabled(is_running)}>
        {''.join(options)}
      </select>
    </div>
    """


# ---------------------------------------------------------------------------
# Array size / speed
# ---------------------------------------------------------------------------
def array_controls(size: int = 50, rate: int = 5, is_running: bool = False) -> str:
    size_lo, size_hi = SIZE_RANGE
    rate_lo, rate_hi = RATE_RANGE
    return f"""
    <div class="panel array-controls">
      <h3>Array</h3>
      <label>Size: <span id="size-value">{size}</span>
        <input type="range" id="array-size" min="{size_lo}" max="{size_hi}" value="{size}" {_disabled(is_running)}>
      </label>
      <label>Speed: <span id="speed-value">{rate}</span> steps/s
        <input type="range" id="speed" min="{rate_lo}" max="{rate_hi}" value="{rate}">
      </label>
    </div>
    """


# ---------------------------------------------------------------------------
# Action Buttons
# ---------------------------------------------------------------------------
def action_buttons(is_running: bool = False) -> str:
    return f"""
    <div class="panel action-buttons">
      <div class="button-row">
        <button id="start-btn" class="btn-primary" {_disabled(is_running)}>Start</button>
        <button id="stop-btn" {_disabled(not is_running)}>Stop</button>
      </div>
      <div class="button-row">
        <button id="generate-btn" class="btn-secondary" {_disabled(is_running)}>New Array</button>
        <button id="reset-btn" class="btn-secondary" {_disabled(is_running)}>Reset</button>
      </div>
    </div>
    """


def button_states(is_running: bool) -> dict:
    """Same enable rules as action_buttons(), as {element_id: disabled} for the page script."""
    return {
        "start-btn":        is_running,
        "stop-btn":         not is_running,
        "generate-btn":     is_running,
        "reset-btn":        is_running,
        "array-size":       is_running,
        "algorithm-select": is_running,
    }


# ---------------------------------------------------------------------------
# Statistics Panel
# ---------------------------------------------------------------------------
def statistics_panel(stats: Optional[StatsSnapshot] = None) -> str:
    stats = stats or StatsSnapshot()
    return f"""
    <div class="panel statistics-panel">
      <h3>Statistics</h3>
      <table>
        <tr><td>Comparisons:</td><td id="comparisons">{stats.comparisons}</td></tr>
        <tr><td>Swaps:</td><td id="swaps">{stats.swaps}</td></tr>
        <tr><td>Time:</td><td id="time">{stats.elapsed_ms:.0f}ms</td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Info
# ---------------------------------------------------------------------------
def algorithm_info_panel(info: Optional[AlgoInfo]) -> str:
    if info is None:
        return """
        <div class="panel algorithm-info">
          <p class="placeholder">Select an algorithm.</p>
        </div>
        """

    return f"""
    <div class="panel algorithm-info">
      <h3 id="algo-name">{info.label}</h3>
      <p id="algo-description">{info.description}</p>
      <table>
        <tr><td>Best:</td><td id="best-complexity">{info.best}</td></tr>
        <tr><td>Average:</td><td id="avg-complexity">{info.average}</td></tr>
        <tr><td>Worst:</td><td id="worst-complexity">{info.worst}</td></tr>
        <tr><td>Space:</td><td id="space-complexity">{info.space}</td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Colour Legend
# ---------------------------------------------------------------------------
def color_legend() -> str:
    items = []
    for state in DisplayState:
        color = CONFIG.colors[state.value]
        items.append(
            f'<span class="legend-item"><span class="swatch" style="background: {color};"></span>'
            f'{state.value.capitalize()}</span>'
        )
    return f"""
    <div class="panel color-legend">
      {''.join(items)}
    </div>
    """
