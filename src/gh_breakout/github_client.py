"""GitHub GraphQL client for contribution calendars."""

from typing import Any, TypedDict

import requests

from .constants import NUM_DAYS

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
REQUEST_TIMEOUT = 30  # Seconds

CONTRIBUTION_QUERY = """
query($userName: String!) {
  user(login: $userName) {
    contributionsCollection {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            color
            contributionCount
            date
            weekday
          }
        }
      }
    }
  }
}
"""


class ContributionDay(TypedDict):
    color: str
    count: int
    date: str


class ContributionWeek(TypedDict):
    days: list[ContributionDay | None]


class ContributionData(TypedDict):
    username: str
    total_contributions: int
    weeks: list[ContributionWeek]


class GitHubAPIError(Exception):
    """Raised when contribution data cannot be fetched from GitHub."""
    pass


def fetch_contribution_data(username: str, token: str) -> ContributionData:
    """
    Fetch the contribution calendar of a GitHub user.

    Args:
        username: GitHub login to fetch
        token: Personal access token used for the GraphQL API

    Returns:
        Contribution weeks with one slot per weekday, ``None`` for missing days

    Raises:
        GitHubAPIError: On network failures, HTTP errors, GraphQL errors or unknown users
    """
    try:
        response = requests.post(
            GITHUB_GRAPHQL_URL,
            json={"query": CONTRIBUTION_QUERY, "variables": {"userName": username}},
            headers={"Authorization": f"bearer {token}"},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        raise GitHubAPIError(f"Request failed: {e}") from e

    if not response.ok:
        raise GitHubAPIError(f"{response.status_code} {response.reason}")

    payload = response.json()
    if payload.get("errors"):
        messages = "; ".join(error.get("message", str(error)) for error in payload["errors"])
        raise GitHubAPIError(f"GraphQL error: {messages}")

    user = (payload.get("data") or {}).get("user")
    if user is None:
        raise GitHubAPIError(f"User '{username}' not found")

    calendar = user["contributionsCollection"]["contributionCalendar"]
    return {
        "username": username,
        "total_contributions": calendar.get("totalContributions", 0),
        "weeks": [_parse_week(week["contributionDays"]) for week in calendar["weeks"]],
    }


def _parse_week(raw_days: list[dict[str, Any]]) -> ContributionWeek:
    """Place each day on its weekday row so partial weeks keep their shape."""
    days: list[ContributionDay | None] = [None] * NUM_DAYS
    for index, raw_day in enumerate(raw_days):
        row = raw_day.get("weekday", index)
        if not 0 <= row < NUM_DAYS:
            continue
        days[row] = {
            "color": raw_day["color"],
            "count": raw_day["contributionCount"],
            "date": raw_day.get("date", ""),
        }
    return {"days": days}
