"""
canvas.py — SVG Bar Renderer
============================
Pure rendering function: bar snapshot → SVG string.

The renderer consumes:
  • bars    – [{"value", "state"}] from Player.snapshot() or Frame.bars()
  • config  – visual config (canvas size, colours, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  The caller passes in a snapshot and gets back a string.
  - State colouring is a dict lookup: DisplayState value → hex colour,
    unknown states fall back to the "unsorted" colour.
  - Bar geometry matches the 800×400 canvas the widget has always used:
    height = value / (H - 20) * (H - 40), sitting 10 px above the bottom.
  - Value labels are only drawn when there are few enough bars to read them.
"""

from typing import Dict, List

from bars import DisplayState


# ---------------------------------------------------------------------------
# Visual Config — colour palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 800
    height: int = 400
    bg:     str = "#ffffff"

    # bar colours (state → fill)
    colors: Dict[str, str] = {
        DisplayState.UNSORTED.value:  "#3498db",   # blue
        DisplayState.COMPARING.value: "#e74c3c",   # red
        DisplayState.SWAPPING.value:  "#f39c12",   # orange
        DisplayState.SORTED.value:    "#2ecc71",   # green
        DisplayState.PIVOT.value:     "#9b59b6",   # purple
        DisplayState.AUXILIARY.value: "#95a5a6",   # grey
    }

    # bar
    bar_gap:           int   = 1
    bar_stroke:        str   = "#34495e"
    bar_stroke_width:  float = 0.5

    # value labels
    label_max_bars:    int = 20
    label_color:       str = "#2c3e50"
    label_size:        int = 12
    label_font:        str = "Arial, sans-serif"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(bars: List[dict], config: CanvasConfig = CONFIG) -> str:
    """
    Returns an SVG string.

    Args:
        bars   : Snapshot list of {"value": number, "state": str}.
        config : Visual config.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if bars:
        bar_width  = config.width / len(bars)
        show_label = len(bars) <= config.label_max_bars
        for i, bar in enumerate(bars):
            svg_parts.append(_render_bar(i, bar, bar_width, show_label, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(
    idx: int,
    bar: dict,
    bar_width: float,
    show_label: bool,
    config: CanvasConfig,
) -> str:
    max_height = config.height - 20
    height = bar["value"] / max_height * (config.height - 40)
    x = idx * bar_width
    y = config.height - height - 10
    fill = config.colors.get(bar["state"], config.colors[DisplayState.UNSORTED.value])

    parts = [
        f'<g class="bar" data-index="{idx}" data-state="{bar["state"]}">',
        f'  <rect x="{x + config.bar_gap:.2f}" y="{y:.2f}" '
        f'width="{max(bar_width - 2 * config.bar_gap, 0):.2f}" height="{height:.2f}" '
        f'fill="{fill}" stroke="{config.bar_stroke}" stroke-width="{config.bar_stroke_width}"/>',
    ]
    if show_label:
        parts.append(
            f'  <text x="{x + bar_width / 2:.2f}" y="{y - 5:.2f}" text-anchor="middle" '
            f'font-size="{config.label_size}" font-family="{config.label_font}" '
            f'fill="{config.label_color}">{round(bar["value"])}</text>'
        )
    parts.append("</g>")
    return "\n".join(parts)
