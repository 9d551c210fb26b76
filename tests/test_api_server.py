import pytest
from fastapi.testclient import TestClient

from conftest import make_question
from dcauto_quiz.core.models import Domain
from dcauto_quiz.server.api_server import create_api_app


@pytest.fixture
def controller(make_controller, universe):
    return make_controller(universe)


@pytest.fixture
def client(controller):
    return TestClient(create_api_app(controller))


def test_serves_quiz_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "DCAUTO Quiz" in response.text


def test_lists_domains_with_counts(client):
    payload = client.get("/domains").json()
    values = [entry["value"] for entry in payload["domains"]]
    assert values[0] == "ALL"
    assert values[1:] == [domain.value for domain in Domain]
    assert payload["domains"][0]["count"] == 20
    assert all(entry["count"] == 5 for entry in payload["domains"][1:])


def test_initial_state_is_setup(client):
    state = client.get("/state").json()
    assert state["phase"] == "SETUP"
    assert state["timer"] == "20:00"
    assert state["card"] is None


def test_start_answer_and_advance(client, controller):
    response = client.post("/start", json={"domain": "2.0"})
    assert response.status_code == 201
    state = response.json()
    assert state["phase"] == "PLAYING"
    assert state["card"]["domain"] == Domain.ACI.value
    assert state["card"]["domain_code"] == "2.0"
    assert "<p>" in state["card"]["prompt_html"]
    assert state["correct_answer"] is None
    assert len(state["options"]) == 4

    correct = controller.get_current_card().correct_answer
    answered = client.post("/answer", json={"option": correct}).json()
    assert answered["accepted"] is True
    assert answered["is_correct"] is True
    assert answered["correct_answer"] == correct
    assert answered["stats"]["correct"] == 1

    repeat = client.post("/answer", json={"option": correct}).json()
    assert repeat["accepted"] is False
    assert repeat["stats"]["total_answered"] == 1

    moved = client.post("/next").json()
    assert moved["card_number"] == 2
    assert moved["answered"] is False


def test_empty_pool_is_rejected_with_conflict(make_controller):
    client = TestClient(create_api_app(make_controller([make_question("a", Domain.NPF)])))
    response = client.post("/start", json={"domain": Domain.UCS.value})
    assert response.status_code == 409
    assert client.get("/state").json()["phase"] == "SETUP"


def test_unknown_domain_is_unprocessable(client):
    response = client.post("/start", json={"domain": "9.9"})
    assert response.status_code == 422


def test_answer_outside_playing_is_conflict(client):
    response = client.post("/answer", json={"option": "PUT"})
    assert response.status_code == 409


def test_exit_returns_to_setup(client):
    client.post("/start", json={})
    state = client.post("/exit").json()
    assert state["phase"] == "SETUP"
    assert state["stats"]["total_answered"] == 0


def test_pause_and_resume_timer(client, ticker):
    client.post("/start", json={})
    ticker.fire(5)
    paused = client.post("/timer/pause").json()
    assert paused["timer_running"] is False
    ticker.fire(5)
    assert client.get("/state").json()["timer_seconds_remaining"] == 1195
    resumed = client.post("/timer/resume").json()
    assert resumed["timer_running"] is True


def test_summary_reports_accuracy_and_reset(make_controller, ticker):
    controller = make_controller([make_question("only")])
    client = TestClient(create_api_app(controller))
    client.post("/start", json={})
    ticker.fire(1200)
    state = client.get("/state").json()
    assert state["phase"] == "SUMMARY"
    assert state["timer"] == "00:00"
    assert state["low_time"] is True
    assert state["stats"]["accuracy"] == 0
    assert state["stats"]["passed"] is False

    assert client.post("/start", json={}).status_code == 409
    assert client.post("/reset").json()["phase"] == "SETUP"
    assert client.post("/start", json={}).status_code == 201
