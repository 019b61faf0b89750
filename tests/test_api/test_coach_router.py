"""
Tests for the coaching API.

Drives a session end to end through the FastAPI test client.
"""

import pytest
from fastapi.testclient import TestClient

from courtside.api.main import app

BASE = "/api/v1/coach"


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def game_id(client):
    """Start a session with a small playbook and return its id."""
    response = client.post(f"{BASE}/start", json={
        "team_name": "HAWKS",
        "team_id": "hawks",
        "lineup": ["A", "B", "C", "D", "E"],
        "seed": 3,
        "plays": [
            {"play_id": "horns_flare", "name": "Horns Flare", "play_type": "horns_action",
             "familiarity": 90},
            {"play_id": "box_lob", "name": "Box Lob", "play_type": "lob_play",
             "category": "inbound", "situation": "after_timeout", "familiarity": 80},
        ],
    })
    assert response.status_code == 201
    return response.json()["game_id"]


# =============================================================================
# App & Session Lifecycle
# =============================================================================

class TestApp:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Courtside API"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSessionLifecycle:

    def test_start_returns_initial_state(self, client):
        response = client.post(f"{BASE}/start", json={"team_name": "OWLS"})

        assert response.status_code == 201
        state = response.json()["state"]
        assert state["team_name"] == "OWLS"
        assert state["situation"]["quarter"] == 1
        assert state["situation"]["clock_display"] == "12:00"
        assert state["timeouts_remaining"] == 7
        assert state["fouls_to_give"] == 4
        assert state["coach_ejected"] is False

    def test_unknown_game_404(self, client):
        response = client.get(f"{BASE}/game_missing/state")

        assert response.status_code == 404
        assert response.json()["detail"] == "Game game_missing not found"

    def test_invalid_start_rejected(self, client):
        response = client.post(f"{BASE}/start", json={"pace_preference": "warp_speed"})
        assert response.status_code == 422

    def test_end_session(self, client, game_id):
        response = client.delete(f"{BASE}/{game_id}")
        assert response.status_code == 200
        assert response.json()["message"] == f"Game {game_id} ended"

        assert client.get(f"{BASE}/{game_id}/state").status_code == 404
        assert client.delete(f"{BASE}/{game_id}").status_code == 404


# =============================================================================
# Situation & Tactics
# =============================================================================

class TestSituation:

    def test_push_situation(self, client, game_id):
        response = client.put(f"{BASE}/{game_id}/situation", json={
            "quarter": 4,
            "game_clock": 18.0,
            "shot_clock": 18.0,
            "team_score": 100,
            "opponent_score": 98,
        })

        assert response.status_code == 200
        situation = response.json()["situation"]
        assert situation["clock_display"] == "0:18"
        assert situation["score_diff"] == 2
        assert situation["is_clutch_time"] is True

    def test_negative_clock_rejected(self, client, game_id):
        response = client.put(f"{BASE}/{game_id}/situation", json={
            "quarter": 1, "game_clock": -1, "team_score": 0, "opponent_score": 0,
        })
        assert response.status_code == 422


class TestTactics:

    def test_partial_update(self, client, game_id):
        response = client.put(f"{BASE}/{game_id}/tactics", json={
            "defense": "zone_2_3",
            "press_enabled": True,
        })

        assert response.status_code == 200
        tactics = response.json()
        assert tactics["defense"] == "zone_2_3"
        assert tactics["press_enabled"] is True

    def test_tactic_change_logged_in_summary(self, client, game_id):
        client.put(f"{BASE}/{game_id}/tactics", json={"pace": "slow"})

        response = client.get(f"{BASE}/{game_id}/summary")

        assert response.status_code == 200
        assert "# HAWKS Coaching Summary" in response.text
        assert "Pace: slow" in response.text


# =============================================================================
# Rotation
# =============================================================================

class TestSubstitutions:

    def test_substitution_updates_lineup(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/substitution", json={
            "players_out": ["A"],
            "players_in": ["F"],
        })

        body = response.json()
        assert body["success"] is True
        assert body["details"]["new_lineup"] == ["B", "C", "D", "E", "F"]

        state = client.get(f"{BASE}/{game_id}/state").json()
        assert state["lineup"] == ["B", "C", "D", "E", "F"]

    def test_player_not_on_floor(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/substitution", json={
            "players_out": ["Z"],
            "players_in": ["F"],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "player_not_in_lineup"

    def test_empty_substitution_rejected(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/substitution", json={
            "players_out": [],
            "players_in": [],
        })
        assert response.status_code == 422

    def test_suggestions(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/substitution-suggestions", json={
            "energy": {"A": 55, "B": 95},
        })

        suggestions = response.json()["suggestions"]
        assert len(suggestions) == 1
        assert suggestions[0]["player_out"] == "A"
        assert suggestions[0]["urgency"] == "high"


# =============================================================================
# Timeouts & Play Calls
# =============================================================================

class TestTimeoutsAndPlays:

    def test_timeout(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/timeout", json={"reason": "stop_run"})

        body = response.json()
        assert body["success"] is True
        assert body["details"] == {"timeouts_left": 6, "reason": "stop_run"}

    def test_after_timeout_recommendation(self, client, game_id):
        client.post(f"{BASE}/{game_id}/timeout", json={})

        plays = client.get(f"{BASE}/{game_id}/plays").json()

        assert plays["recommended"] == ["horns_flare", "box_lob"]
        assert "pick_and_roll" in plays["available"]

    def test_quick_action(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/quick-action", json={
            "action": "shooter_action",
            "primary_player": "B",
        })

        body = response.json()
        assert body["play_type"] == "spot_up_3"
        assert body["primary_player_id"] == "B"

    def test_call_set_play(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/play", json={"play_id": "box_lob"})

        assert response.json()["success"] is True

    def test_call_unknown_play(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/play", json={"play_id": "ghost"})

        body = response.json()
        assert body["success"] is False
        assert body["code"] == "unknown_play"

    def test_end_game_hold(self, client, game_id):
        client.put(f"{BASE}/{game_id}/situation", json={
            "quarter": 4, "game_clock": 20.0, "team_score": 100, "opponent_score": 100,
        })

        response = client.get(f"{BASE}/{game_id}/end-game")

        body = response.json()
        assert body["action"] == "hold_for_last_shot"
        assert body["target_shot_clock"] == 4


# =============================================================================
# Officials & Fouls
# =============================================================================

class TestOfficials:

    def test_challenge_only_once(self, client, game_id):
        first = client.post(f"{BASE}/{game_id}/challenge", json={"challenge_type": "foul_call"})
        second = client.post(f"{BASE}/{game_id}/challenge", json={"challenge_type": "foul_call"})

        assert first.json()["success"] is True
        assert second.json()["success"] is False
        assert second.json()["code"] == "already_used"

        state = client.get(f"{BASE}/{game_id}/state").json()
        assert state["challenge_used"] is True

    def test_argue_morale_out_of_range(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/argue", json={"team_morale": 150})
        assert response.status_code == 422

    def test_argue(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/argue", json={"team_morale": 60})

        details = response.json()["details"]
        assert "got_technical" in details
        assert "morale_change" in details

    def test_intentional_foul(self, client, game_id):
        response = client.post(f"{BASE}/{game_id}/foul", json={"player_id": "C"})

        body = response.json()
        assert body["success"] is True
        assert body["details"]["fouls_to_give_left"] == 3
        assert body["details"]["free_throws"] is False
