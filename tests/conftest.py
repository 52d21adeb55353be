"""Shared test fixtures for the FPL team analyzer.

The payloads are a miniature FPL season at GW10:

- ARS (1) plays LIV (2) in GW10-13; ARS rates those 4/5, LIV rates them 2.
- CHE (3) hosts TOT (4) and NEW (5) hosts MCI (6) in GW10-13, all difficulty 3.
- CHE v NEW in GW18 (last GW of the window) and CHE v MCI in GW19 (outside).
- BUR (7) has no fixtures at all.
"""

import copy

import pytest
import requests


TEAMS = [
    {"id": 1, "code": 3, "name": "Arsenal", "short_name": "ARS"},
    {"id": 2, "code": 14, "name": "Liverpool", "short_name": "LIV"},
    {"id": 3, "code": 8, "name": "Chelsea", "short_name": "CHE"},
    {"id": 4, "code": 6, "name": "Spurs", "short_name": "TOT"},
    {"id": 5, "code": 4, "name": "Newcastle", "short_name": "NEW"},
    {"id": 6, "code": 43, "name": "Man City", "short_name": "MCI"},
    {"id": 7, "code": 90, "name": "Burnley", "short_name": "BUR"},
]

# (id, web_name, element_type, team, now_cost, form, selected_by_percent)
ELEMENTS = [
    (1, "Weak", 2, 1, 50, "1.0", "3.1"),
    (2, "GK1", 1, 3, 45, "4.0", "10.2"),
    (3, "GK2", 1, 4, 40, "3.5", "2.0"),
    (4, "DEF2", 2, 3, 55, "5.0", "15.0"),
    (5, "DEF3", 2, 4, 50, "4.5", "8.4"),
    (6, "DEF4", 2, 5, 45, "4.2", "6.6"),
    (7, "DEF5", 2, 6, 45, "3.8", "4.0"),
    (8, "MID1", 3, 3, 130, "8.5", "55.3"),
    (9, "MID2", 3, 4, 100, "7.5", "30.1"),
    (10, "MID3", 3, 5, 80, "6.0", "12.0"),
    (11, "MID4", 3, 6, 65, "5.5", "9.9"),
    (12, "MID5", 3, 5, 50, "4.8", "1.5"),
    (13, "FWD1", 4, 6, 140, "7.9", "48.0"),
    (14, "FWD2", 4, 3, 75, "5.2", "7.7"),
    (15, "FWD3", 4, 4, 55, "3.2", "0.8"),
    # Not in the squad
    (100, "Star", 2, 2, 45, "6.0", "22.5"),
    (101, "Pricey", 2, 2, 200, "7.0", "40.0"),
    (102, "Playmaker", 3, 2, 40, "9.0", "33.0"),
    (103, "Meh", 2, 3, 40, "2.0", "0.3"),
    (104, "Striker", 4, 2, 60, "6.5", "5.0"),
]


def _element(eid, name, etype, team, cost, form, sel):
    return {
        "id": eid,
        "web_name": name,
        "element_type": etype,
        "team": team,
        "now_cost": cost,
        "form": form,
        "selected_by_percent": sel,
        "total_points": eid * 3,
        "points_per_game": "4.0",
    }


def _fixture(event, team_h, team_a, h_diff, a_diff):
    return {
        "event": event,
        "team_h": team_h,
        "team_a": team_a,
        "team_h_difficulty": h_diff,
        "team_a_difficulty": a_diff,
    }


@pytest.fixture
def bootstrap_data():
    """Minimal FPL bootstrap-static response."""
    return {
        "events": [
            {"id": 9, "is_current": False, "is_next": False, "finished": True},
            {"id": 10, "is_current": True, "is_next": False, "finished": False},
            {"id": 11, "is_current": False, "is_next": True, "finished": False},
        ],
        "teams": copy.deepcopy(TEAMS),
        "elements": [_element(*row) for row in ELEMENTS],
    }


@pytest.fixture
def fixtures_data():
    """FPL fixtures response, deliberately out of gameweek order."""
    rows = [
        _fixture(18, 3, 5, 3, 3),
        _fixture(19, 3, 6, 3, 3),
        _fixture(25, 1, 3, 3, 3),
        _fixture(None, 2, 4, 2, 2),
        _fixture(9, 1, 4, 1, 1),
    ]
    for gw in range(10, 14):
        if gw % 2 == 0:
            rows.append(_fixture(gw, 1, 2, 4, 2))   # ARS home
        else:
            rows.append(_fixture(gw, 2, 1, 2, 5))   # ARS away
        rows.append(_fixture(gw, 3, 4, 3, 3))
        rows.append(_fixture(gw, 5, 6, 3, 3))
    return list(reversed(rows))


@pytest.fixture
def entry_data():
    """FPL entry/{id}/ response."""
    return {
        "id": 123456,
        "player_first_name": "Alex",
        "player_last_name": "Manager",
        "summary_overall_rank": 12345,
        "summary_event_rank": 678,
        "summary_overall_points": 456,
        "last_deadline_bank": 5,
        "last_deadline_value": 1000,
    }


@pytest.fixture
def picks_data():
    """FPL entry/{id}/event/10/picks/ response: elements 1..15."""
    return {
        "picks": [
            {
                "element": eid,
                "position": eid,
                "multiplier": 2 if eid == 8 else 1,
                "is_captain": eid == 8,
                "is_vice_captain": eid == 13,
            }
            for eid in range(1, 16)
        ],
        "entry_history": {"event": 10, "bank": 5, "value": 1000},
    }


@pytest.fixture
def snapshot(bootstrap_data, entry_data, fixtures_data, picks_data):
    from fpl_analyzer.data.fpl_api import TeamSnapshot

    return TeamSnapshot(
        team_id="123456",
        bootstrap=bootstrap_data,
        entry=entry_data,
        fixtures=fixtures_data,
        current_gw=10,
        picks=picks_data,
    )


# ---------------------------------------------------------------------------
# Fake FPL API
# ---------------------------------------------------------------------------

class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def fake_fpl_api(monkeypatch, bootstrap_data, entry_data, fixtures_data, picks_data):
    """Route ``requests.get`` to canned payloads; records every URL requested.

    Tests may override a route with ``fake_fpl_api.routes[suffix] = FakeResponse(...)``.
    """

    class _Api:
        calls: list[str] = []
        routes = {
            "bootstrap-static/": FakeResponse(bootstrap_data),
            "fixtures/": FakeResponse(fixtures_data),
            "event/10/picks/": FakeResponse(picks_data),
            "entry/123456/": FakeResponse(entry_data),
        }

        def get(self, url, timeout=None):
            self.calls.append(url)
            for suffix, resp in self.routes.items():
                if url.endswith(suffix):
                    return resp
            return FakeResponse({"detail": "Not found."}, status_code=404)

    api = _Api()
    api.calls = []
    monkeypatch.setattr("fpl_analyzer.data.fpl_api.requests.get", api.get)
    return api
