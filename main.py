"""
main.py — Sorting Algorithm Visualizer Flask App
=================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – bars (as SVG), statistics, run state, control flags
  POST /api/start              – start the selected (or given) algorithm
  POST /api/stop               – stop the active run
  POST /api/generate           – new random array (optional size)
  POST /api/reset              – stop + new array of the same size
  POST /api/config/algo        – select algorithm, returns the info panel
  POST /api/config/speed       – set tempo (steps per second)

State management:
  One PlayerHost per app, kept in `app.extensions["player_host"]`.  It
  owns the Player and the asyncio loop that animates it; the page polls
  /api/state every POLL_MS milliseconds to redraw.  This is a local,
  single-user tool: every browser tab drives the same Player.

Config (defaults, overridable with create_app(test_config) or
SORTVIS_* environment variables):
  ARRAY_SIZE, SPEED, ALGORITHM, SEED, POLL_MS
"""

import logging
import os
import sys
from typing import Optional

from flask import Flask, current_app, jsonify, render_template_string, request

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import get_algorithm, list_algorithms
from engine import PlayerHost, RunState, DEFAULT_SIZE, DEFAULT_RATE, DEFAULT_ALGO
from ui import (
    render_bars,
    algorithm_selector,
    array_controls,
    action_buttons,
    button_states,
    statistics_panel,
    algorithm_info_panel,
    color_legend,
)

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure application logging and capture uncaught exceptions."""

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    def _log_excepthook(exc_type, exc, tb) -> None:
        logging.getLogger(__name__).exception(
            "Uncaught exception", exc_info=(exc_type, exc, tb)
        )

    sys.excepthook = _log_excepthook


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(test_config: Optional[dict] = None, host: Optional[PlayerHost] = None) -> Flask:
    """
    Build the Flask app.

    Args:
        test_config : Overrides applied after the defaults and environment.
        host        : Pre-built PlayerHost (tests inject one with a fast rate).
    """
    app = Flask(__name__)
    app.config.from_mapping(
        ARRAY_SIZE=DEFAULT_SIZE,
        SPEED=DEFAULT_RATE,
        ALGORITHM=DEFAULT_ALGO,
        SEED=None,
        POLL_MS=50,
    )
    app.config.from_prefixed_env("SORTVIS")
    if test_config is not None:
        app.config.from_mapping(test_config)

    if host is None:
        host = PlayerHost(
            size=app.config["ARRAY_SIZE"],
            rate=app.config["SPEED"],
            algorithm=app.config["ALGORITHM"],
            seed=app.config["SEED"],
        )
    app.extensions["player_host"] = host

    _register_routes(app)
    return app


def get_host() -> PlayerHost:
    return current_app.extensions["player_host"]


def _body() -> dict:
    return request.get_json(silent=True) or {}


def _state_payload() -> dict:
    """Everything the page needs for one redraw."""
    host  = get_host()
    state = host.state()
    stats = state["stats"]
    running = state["run_state"] == RunState.RUNNING
    return {
        "svg":        render_bars(state["bars"]),
        "stats": {
            "comparisons": stats.comparisons,
            "swaps":       stats.swaps,
            "elapsed_ms":  stats.elapsed_ms,
        },
        "run_state":  state["run_state"].value,
        "is_running": running,
        "controls":   button_states(running),
        "algorithm":  state["algorithm"],
        "size":       state["size"],
        "rate":       state["rate"],
        "last_error": host.last_error,
    }


def _busy(message: str):
    return jsonify({"error": message, **_state_payload()}), 409


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    @app.errorhandler(ValueError)
    def handle_value_error(exc: ValueError):
        logger.debug("rejected request to %s: %s", request.path, exc)
        return jsonify({"error": str(exc)}), 400

    # -----------------------------------------------------------------------
    # Main UI Route
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        state   = get_host().state()
        running = state["run_state"] == RunState.RUNNING

        html = render_template_string(INDEX_TEMPLATE,
            svg=render_bars(state["bars"]),
            algo_selector=algorithm_selector(
                algorithms=list_algorithms(),
                selected_key=state["algorithm"],
                is_running=running,
            ),
            array=array_controls(size=state["size"], rate=state["rate"], is_running=running),
            actions=action_buttons(is_running=running),
            statistics=statistics_panel(state["stats"]),
            info=algorithm_info_panel(get_algorithm(state["algorithm"])),
            legend=color_legend(),
            poll_ms=current_app.config["POLL_MS"],
        )
        return html

    # -----------------------------------------------------------------------
    # API: State
    # -----------------------------------------------------------------------
    @app.route("/api/state")
    def api_state():
        return jsonify(_state_payload())

    # -----------------------------------------------------------------------
    # API: Run control
    # -----------------------------------------------------------------------
    @app.route("/api/start", methods=["POST"])
    def api_start():
        algorithm = _body().get("algorithm")
        if not get_host().start(algorithm):
            return _busy("A run is already active")
        return jsonify(_state_payload())

    @app.route("/api/stop", methods=["POST"])
    def api_stop():
        get_host().stop()
        return jsonify(_state_payload())

    @app.route("/api/generate", methods=["POST"])
    def api_generate():
        size = _body().get("size")
        if not get_host().regenerate(size):
            return _busy("Cannot generate a new array while sorting")
        return jsonify(_state_payload())

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        get_host().reset()
        return jsonify(_state_payload())

    # -----------------------------------------------------------------------
    # API: Configuration
    # -----------------------------------------------------------------------
    @app.route("/api/config/algo", methods=["POST"])
    def api_config_algo():
        key = _body().get("algorithm", "")
        if not get_host().select_algorithm(key):
            return _busy("Cannot change algorithm while sorting")
        payload = _state_payload()
        payload["info"] = algorithm_info_panel(get_algorithm(key))
        return jsonify(payload)

    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        rate = _body().get("rate")
        get_host().set_tempo(rate)
        return jsonify(_state_payload())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg: #ecf0f1;
      --bg-panel: #ffffff;
      --border: #d0d7de;
      --text-primary: #2c3e50;
      --text-secondary: #7f8c8d;
      --accent: #3498db;
      --accent-green: #2ecc71;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
      background: var(--bg);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    /* Sidebar */
    #sidebar {
      width: 320px;
      background: var(--bg);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 20px 16px;
    }

    /* Main area */
    #main {
      flex: 1;
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      gap: 16px;
      padding: 20px;
    }

    #canvas-svg {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 8px;
      box-shadow: 0 2px 12px rgba(0,0,0,0.08);
    }

    /* Panels */
    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
      margin-bottom: 14px;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 12px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    /* Buttons */
    .button-row { display: flex; gap: 8px; margin-bottom: 10px; }

    button {
      flex: 1;
      background: var(--accent);
      color: #fff;
      border: none;
      padding: 10px 14px;
      border-radius: 6px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
    }
    button:disabled { opacity: 0.45; cursor: not-allowed; }
    .btn-primary   { background: var(--accent-green); }
    .btn-secondary { background: #95a5a6; }

    /* Inputs */
    select, input[type="range"] { width: 100%; margin: 6px 0; }
    label {
      display: block;
      margin: 10px 0 4px;
      font-size: 12px;
      color: var(--text-secondary);
    }

    /* Table */
    table { width: 100%; font-size: 13px; margin-top: 8px; }
    table td { padding: 4px; }
    table td:first-child { color: var(--text-secondary); }
    table td:last-child  { text-align: right; font-family: monospace; }

    /* Legend */
    .color-legend { display: flex; flex-wrap: wrap; gap: 12px; font-size: 12px; }
    .legend-item  { display: flex; align-items: center; gap: 6px; }
    .swatch { width: 14px; height: 14px; border-radius: 3px; display: inline-block; }

    #error-banner { color: #e74c3c; font-size: 13px; min-height: 1em; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-selector">{{ algo_selector|safe }}</div>
    <div id="array">{{ array|safe }}</div>
    <div id="actions">{{ actions|safe }}</div>
    <div id="statistics">{{ statistics|safe }}</div>
    <div id="info">{{ info|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-svg">{{ svg|safe }}</div>
    <div id="legend">{{ legend|safe }}</div>
    <div id="error-banner"></div>
  </div>

  <script>
    const POLL_MS = {{ poll_ms }};

    // API helpers
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      const body = await res.json();
      document.getElementById('error-banner').textContent = res.ok ? '' : (body.error || '');
      return body;
    }

    function applyState(data) {
      if (!data || data.svg === undefined) return;
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('comparisons').textContent = data.stats.comparisons;
      document.getElementById('swaps').textContent = data.stats.swaps;
      document.getElementById('time').textContent = Math.round(data.stats.elapsed_ms) + 'ms';
      for (const [id, disabled] of Object.entries(data.controls)) {
        const el = document.getElementById(id);
        if (el) el.disabled = disabled;
      }
      if (data.last_error) {
        document.getElementById('error-banner').textContent = data.last_error;
      }
    }

    async function poll() {
      try {
        const res = await fetch('/api/state');
        applyState(await res.json());
      } finally {
        setTimeout(poll, POLL_MS);
      }
    }

    // Actions
    document.getElementById('start-btn').addEventListener('click', async () => {
      const algorithm = document.getElementById('algorithm-select').value;
      applyState(await post('/api/start', {algorithm}));
    });

    document.getElementById('stop-btn').addEventListener('click', async () => {
      applyState(await post('/api/stop'));
    });

    document.getElementById('generate-btn').addEventListener('click', async () => {
      const size = parseInt(document.getElementById('array-size').value, 10);
      applyState(await post('/api/generate', {size}));
    });

    document.getElementById('reset-btn').addEventListener('click', async () => {
      applyState(await post('/api/reset'));
    });

    // Configuration
    document.getElementById('algorithm-select').addEventListener('change', async (e) => {
      const data = await post('/api/config/algo', {algorithm: e.target.value});
      if (data.info) document.getElementById('info').innerHTML = data.info;
      applyState(data);
    });

    document.getElementById('array-size').addEventListener('input', (e) => {
      document.getElementById('size-value').textContent = e.target.value;
    });

    document.getElementById('array-size').addEventListener('change', async (e) => {
      applyState(await post('/api/generate', {size: parseInt(e.target.value, 10)}));
    });

    document.getElementById('speed').addEventListener('input', async (e) => {
      document.getElementById('speed-value').textContent = e.target.value;
      await post('/api/config/speed', {rate: parseInt(e.target.value, 10)});
    });

    poll();
  </script>
</body>
</html>
"""


if __name__ == "__main__":
    _configure_logging()
    app = create_app()
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    # the reloader would start a second player loop in the child process
    app.run(debug=True, use_reloader=False, host="0.0.0.0", port=5000)
