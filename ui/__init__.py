"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import algorithm_selector, statistics_panel, …
"""

from ui.canvas import render_bars, CanvasConfig

from ui.controls import (
    RATE_RANGE,
    algorithm_selector,
    array_controls,
    action_buttons,
    button_states,
    statistics_panel,
    algorithm_info_panel,
    color_legend,
)

__all__ = [
    "render_bars",
    "CanvasConfig",
    "RATE_RANGE",
    "algorithm_selector",
    "array_controls",
    "action_buttons",
    "button_states",
    "statistics_panel",
    "algorithm_info_panel",
    "color_legend",
]
