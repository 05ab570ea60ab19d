"""Tests for the GitHub GraphQL client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from gh_breakout.github_client import GitHubAPIError, fetch_contribution_data


def _response(payload: dict, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.reason = "Unauthorized" if status_code == 401 else "OK"
    response.json.return_value = payload
    return response


def _calendar_payload(weeks: list[list[dict]]) -> dict:
    return {
        "data": {
            "user": {
                "contributionsCollection": {
                    "contributionCalendar": {
                        "totalContributions": 7,
                        "weeks": [{"contributionDays": days} for days in weeks],
                    }
                }
            }
        }
    }


def _raw_day(weekday: int, count: int = 1, color: str = "#9be9a8") -> dict:
    return {
        "color": color,
        "contributionCount": count,
        "date": f"2024-01-0{weekday + 1}",
        "weekday": weekday,
    }


def test_fetch_places_days_on_their_weekday() -> None:
    payload = _calendar_payload(
        [
            [_raw_day(4), _raw_day(5, count=6), _raw_day(6, count=0, color="#ebedf0")],
            [_raw_day(day) for day in range(7)],
            [_raw_day(0)],
        ]
    )

    with patch("gh_breakout.github_client.requests.post", return_value=_response(payload)) as post:
        data = fetch_contribution_data("testuser", "token")

    assert post.call_args.kwargs["headers"] == {"Authorization": "bearer token"}
    assert post.call_args.kwargs["json"]["variables"] == {"userName": "testuser"}
    assert data["username"] == "testuser"
    assert data["total_contributions"] == 7
    first_week = data["weeks"][0]["days"]
    assert first_week[:4] == [None, None, None, None]
    assert first_week[5] == {"color": "#9be9a8", "count": 6, "date": "2024-01-06"}
    assert all(day is not None for day in data["weeks"][1]["days"])
    assert data["weeks"][2]["days"][1:] == [None] * 6


def test_fetch_raises_on_http_error() -> None:
    with patch("gh_breakout.github_client.requests.post", return_value=_response({}, 401)):
        with pytest.raises(GitHubAPIError, match="401 Unauthorized"):
            fetch_contribution_data("testuser", "bad-token")


def test_fetch_raises_on_graphql_errors() -> None:
    payload = {"errors": [{"message": "Something went wrong"}]}

    with patch("gh_breakout.github_client.requests.post", return_value=_response(payload)):
        with pytest.raises(GitHubAPIError, match="Something went wrong"):
            fetch_contribution_data("testuser", "token")


def test_fetch_raises_on_unknown_user() -> None:
    with patch(
        "gh_breakout.github_client.requests.post",
        return_value=_response({"data": {"user": None}}),
    ):
        with pytest.raises(GitHubAPIError, match="not found"):
            fetch_contribution_data("ghost", "token")


def test_fetch_wraps_network_errors() -> None:
    with patch(
        "gh_breakout.github_client.requests.post",
        side_effect=requests.ConnectionError("connection refused"),
    ):
        with pytest.raises(GitHubAPIError, match="connection refused"):
            fetch_contribution_data("testuser", "token")
