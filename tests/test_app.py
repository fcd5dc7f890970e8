import time

import pytest

from engine import PlayerHost
from main import create_app

FAST = 10 ** 6


@pytest.fixture
def host():
    host = PlayerHost(size=10, rate=FAST, seed=3)
    yield host
    host.shutdown()


@pytest.fixture
def slow_host():
    host = PlayerHost(size=20, rate=1, seed=3)
    yield host
    host.shutdown()


def make_client(host):
    app = create_app({"TESTING": True}, host=host)
    return app.test_client()


def wait_for_idle(client, timeout=5.0):
    deadline = time.monotonic() + timeout
    while True:
        data = client.get("/api/state").get_json()
        if data["run_state"] == "idle":
            return data
        if time.monotonic() > deadline:
            raise AssertionError("run did not finish in time")
        time.sleep(0.01)


def test_index_renders_page(host):
    client = make_client(host)
    res = client.get("/")

    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "Sorting Algorithm Visualizer" in body
    assert body.count('class="bar"') == 10
    assert 'id="start-btn"' in body
    assert "Bubble Sort" in body


def test_state_payload(host):
    data = make_client(host).get("/api/state").get_json()

    assert data["run_state"] == "idle"
    assert data["is_running"] is False
    assert data["size"] == 10
    assert data["algorithm"] == "bubble"
    assert data["stats"] == {"comparisons": 0, "swaps": 0, "elapsed_ms": 0.0}
    assert data["controls"]["stop-btn"] is True
    assert data["controls"]["start-btn"] is False
    assert data["svg"].startswith("<svg")
    assert data["last_error"] is None


def test_start_runs_to_completion(host):
    client = make_client(host)

    res = client.post("/api/start", json={"algorithm": "merge"})
    assert res.status_code == 200

    data = wait_for_idle(client)
    assert data["algorithm"] == "merge"
    assert data["svg"].count('data-state="sorted"') == 10
    values = [b["value"] for b in host.snapshot()]
    assert values == sorted(values)


def test_start_unknown_algorithm_is_400(host):
    res = make_client(host).post("/api/start", json={"algorithm": "bogo"})

    assert res.status_code == 400
    assert "bogo" in res.get_json()["error"]


def test_busy_operations_are_409(slow_host):
    client = make_client(slow_host)
    client.post("/api/start")

    assert client.post("/api/start").status_code == 409
    assert client.post("/api/generate", json={"size": 30}).status_code == 409
    assert client.post("/api/config/algo", json={"algorithm": "quick"}).status_code == 409

    running = client.get("/api/state").get_json()
    assert running["controls"]["start-btn"] is True
    assert running["controls"]["stop-btn"] is False

    client.post("/api/stop")
    wait_for_idle(client, timeout=1.0)


def test_generate_with_size(host):
    client = make_client(host)

    data = client.post("/api/generate", json={"size": 25}).get_json()
    assert data["size"] == 25
    assert data["svg"].count('class="bar"') == 25


@pytest.mark.parametrize("size", [4, 101, "ten"])
def test_generate_rejects_bad_size(host, size):
    res = make_client(host).post("/api/generate", json={"size": size})

    assert res.status_code == 400


def test_reset_keeps_size(host):
    client = make_client(host)
    client.post("/api/start")
    wait_for_idle(client)

    data = client.post("/api/reset").get_json()
    assert data["size"] == 10
    assert data["stats"]["comparisons"] == 0
    assert data["svg"].count('data-state="unsorted"') == 10


def test_select_algorithm_returns_info_panel(host):
    data = make_client(host).post("/api/config/algo", json={"algorithm": "insertion"}).get_json()

    assert data["algorithm"] == "insertion"
    assert "Insertion Sort" in data["info"]


def test_select_unknown_algorithm_is_400(host):
    res = make_client(host).post("/api/config/algo", json={"algorithm": "bogo"})

    assert res.status_code == 400


def test_speed(host):
    client = make_client(host)

    data = client.post("/api/config/speed", json={"rate": 40}).get_json()
    assert data["rate"] == 40
    assert data["run_state"] == "idle"
    assert data["svg"].startswith("<svg")
    assert client.get("/api/state").get_json()["rate"] == 40
    assert client.post("/api/config/speed", json={"rate": 0}).status_code == 400


def test_config_defaults_build_their_own_host(monkeypatch):
    monkeypatch.setenv("SORTVIS_ARRAY_SIZE", "15")
    app = create_app({"TESTING": True, "ALGORITHM": "quick", "SEED": 1})
    host = app.extensions["player_host"]
    try:
        state = host.state()
        assert state["size"] == 15
        assert state["algorithm"] == "quick"
        assert app.config["POLL_MS"] == 50
    finally:
        host.shutdown()
