from dataclasses import dataclass, field

import pytest

from app.core.errors import InvalidTokenError, TeamNotFoundError
from app.core.metrics import get_counters, metrics_registry
from app.services.security import Caller
from app.services.team_access import TeamAccessService


@dataclass
class InMemoryTeamDirectory:
    """Directory fake keyed by user id; records every lookup."""

    teams: dict
    memberships: dict
    current: dict = field(default_factory=dict)
    users: dict = field(default_factory=dict)
    calls: list = field(default_factory=list)

    def list_by_caller(self, user_id):
        self.calls.append(("list_by_caller", user_id))
        return [self.teams[tid] for tid in self.memberships.get(user_id, [])]

    def find_by_id_for_caller(self, user_id, team_id):
        self.calls.append(("find_by_id_for_caller", user_id, team_id))
        if team_id in self.memberships.get(user_id, []):
            return self.teams[team_id]
        return None

    def members(self, team_id):
        self.calls.append(("members", team_id))
        return [self.users[uid] for uid, tids in self.memberships.items() if team_id in tids]

    def current_team(self, user_id):
        self.calls.append(("current_team", user_id))
        tid = self.current.get(user_id)
        return self.teams.get(tid) if tid is not None else None


@pytest.fixture()
def directory(team_factory, user_factory):
    teams = {
        1: team_factory(id=1, name="One", smtp_password="x", custom_server_limit=1),
        2: team_factory(id=2, name="Two"),
        3: team_factory(id=3, name="Three"),
        9: team_factory(id=9, name="Elsewhere"),
    }
    return InMemoryTeamDirectory(
        teams=teams,
        memberships={1: [3, 1, 2], 2: [9]},
        current={1: 3},
        users={
            1: user_factory(id=1, name="Alice", email="alice@example.com"),
            2: user_factory(id=2, name="Bob", email="bob@example.com"),
        },
    )


@pytest.fixture()
def service(directory):
    return TeamAccessService(directory)


def _caller(**overrides):
    return Caller(**{"user_id": 1, "team_id": 1, "abilities": frozenset({"read"}), **overrides})


def test_list_teams_sorted_ascending(service):
    assert [t["id"] for t in service.list_teams(_caller())] == [1, 2, 3]


def test_list_teams_redacts_each_team(service):
    teams = service.list_teams(_caller())
    assert all("smtp_password" not in t and "custom_server_limit" not in t for t in teams)
    revealed = service.list_teams(_caller(abilities=frozenset({"view:sensitive"})))
    assert revealed[0]["smtp_password"] == "x"
    assert "custom_server_limit" not in revealed[0]


@pytest.mark.parametrize(
    "operation",
    [
        lambda s, c: s.list_teams(c),
        lambda s, c: s.get_team(c, 1),
        lambda s, c: s.get_team_members(c, 1),
        lambda s, c: s.get_current_team(c),
        lambda s, c: s.get_current_team_members(c),
    ],
)
def test_missing_team_scope_fails_before_lookup(service, directory, operation):
    with pytest.raises(InvalidTokenError) as excinfo:
        operation(service, _caller(team_id=None))
    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "invalid token"
    assert directory.calls == []


def test_get_team_scoped_to_memberships(service):
    assert service.get_team(_caller(), 2)["name"] == "Two"
    with pytest.raises(TeamNotFoundError) as foreign:
        service.get_team(_caller(), 9)
    with pytest.raises(TeamNotFoundError) as missing:
        service.get_team(_caller(), 999)
    assert foreign.value.message == missing.value.message == "Team not found."
    assert foreign.value.detail == missing.value.detail
    assert foreign.value.docs_url.endswith("/get-team-by-teamid")


def test_get_team_members(service):
    members = service.get_team_members(_caller(), 1)
    assert [m["name"] for m in members] == ["Alice"]
    with pytest.raises(TeamNotFoundError) as excinfo:
        service.get_team_members(_caller(), 9)
    assert excinfo.value.docs_url.endswith("/get-team-by-teamid-members")


def test_current_team_and_members(service):
    assert service.get_current_team(_caller())["id"] == 3
    assert [m["id"] for m in service.get_current_team_members(_caller())] == [1]


def test_current_team_missing(service):
    with pytest.raises(TeamNotFoundError):
        service.get_current_team(_caller(user_id=2))


def test_operations_are_counted(service):
    metrics_registry.reset()
    service.list_teams(_caller())
    service.get_team(_caller(), 1)
    counters = get_counters()
    assert counters["teams.list"] == 1
    assert counters["teams.get"] == 1
    metrics_registry.reset()
