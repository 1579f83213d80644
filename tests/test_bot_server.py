import pytest

from bot_server import FantasyBot
from conftest import FakeSession
from ffbot.commands import NO_ACTIVITY_MESSAGE, WEEK_RANGE_MESSAGE


@pytest.fixture
def client(settings, service):
    bot = FantasyBot(settings=settings, service=service)
    return bot.app.test_client()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "league_id": "12345", "season_id": "2015"}


def test_command_reply(client):
    response = client.post("/api/command", json={"text": "player Smith", "user": "jordan"})

    assert response.status_code == 200
    assert "questionable" in response.get_json()["reply"]


def test_command_validation_message(client):
    response = client.post("/api/command", json={"text": "score 14"})
    assert response.get_json() == {"reply": WEEK_RANGE_MESSAGE}


def test_command_requires_text(client):
    response = client.post("/api/command", json={})
    assert response.status_code == 400


def test_players_api(client, session):
    response = client.get("/api/players?name=Smith&position=qb")
    data = response.get_json()

    assert response.status_code == 200
    assert data["headers"] == ["player", "team", "position", "owner", "projection", "note"]
    assert data["players"][0] == {
        "name": "Smith",
        "team": "NE",
        "position": "RB",
        "owner": "FA",
        "projection": "9.4",
        "note": "questionable",
    }
    assert session.requested[0].endswith("&position=0&slotCategoryId=2")


def test_players_api_requires_name(client):
    assert client.get("/api/players").status_code == 400


def test_scoreboard_api(client):
    data = client.get("/api/scoreboard?week=2").get_json()

    assert data["week"] == 2
    assert data["matchups"][0] == {"teams": "Bourbon Cowboys\nGronk Smash\n ", "scores": "112.4\n98.7\n "}


def test_scoreboard_api_rejects_bad_week(client):
    response = client.get("/api/scoreboard?week=0")

    assert response.status_code == 400
    assert response.get_json() == {"error": WEEK_RANGE_MESSAGE}


def test_activity_api(client):
    data = client.get("/api/activity").get_json()
    assert len(data["activity"]) == 3


def test_fetch_failure_is_bad_gateway(settings, make_service):
    bot = FantasyBot(settings=settings, service=make_service(FakeSession({}, status_code=500)))
    response = bot.app.test_client().get("/api/activity")

    assert response.status_code == 502
    assert "error" in response.get_json()


def test_command_reply_for_empty_feed(settings, make_service):
    bot = FantasyBot(settings=settings, service=make_service(FakeSession({"/recentactivity": "<html></html>"})))
    response = bot.app.test_client().post("/api/command", json={"text": "sup"})

    assert response.get_json() == {"reply": NO_ACTIVITY_MESSAGE}
