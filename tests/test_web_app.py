from fastapi.testclient import TestClient

from web.backend.app import app

client = TestClient(app)


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"


def test_simulate():
    response = client.post("/simulate", json={
        "processes": [{"pid": 0, "arrival_time": 0, "cpu_bursts": [300]}],
        "time_quantum": 100,
        "context_switch_overhead": 10,
    })
    assert response.status_code == 200
    result = response.json()["result"]
    assert result["statistics"]["total_time"] == 320
    assert result["processes"][0]["waiting_time"] == 0
    assert [entry["kind"] for entry in result["gantt_chart"]] == [
        "Execution", "Context Switch", "Execution", "Context Switch", "Execution"]


def test_simulate_rejects_invalid_workload():
    response = client.post("/simulate", json={
        "processes": [{"pid": 0, "arrival_time": 0, "cpu_bursts": [5], "io_waits": [1]}],
    })
    assert response.status_code == 400


def test_simulate_rejects_zero_quantum():
    response = client.post("/simulate", json={
        "processes": [{"pid": 0, "arrival_time": 0, "cpu_bursts": [5]}],
        "time_quantum": 0,
    })
    assert response.status_code == 400


def test_sample_processes_simulate():
    samples = client.get("/sample-processes").json()["samples"]
    assert samples
    for sample in samples:
        response = client.post("/simulate", json={"processes": sample["processes"]})
        assert response.status_code == 200
