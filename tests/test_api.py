import pytest
from fastapi.testclient import TestClient

from bounty_gateway.app import create_app
from bounty_gateway.config import Config

from realm_samples import (
    ALICE,
    BOB,
    BOUNTY_1,
    BOUNTY_3,
    COUNT_3,
    EMPTY_APPLICATIONS,
    NIL_BOUNTY,
    FakeRealm,
    application,
    applications,
    leaderboard,
    leaderboard_entry,
    validators,
)

RESPONSES = {
    "GetBountyCount()": COUNT_3,
    "GetBounty(1)": BOUNTY_1,
    "GetBounty(2)": NIL_BOUNTY,
    "GetBounty(3)": BOUNTY_3,
    "GetApplicationsForBounty(1)": applications(
        application(1, ALICE, "https://pr/1", 0),
        application(2, BOB, "https://pr/2", 1),
    ),
    "GetApplicationsForBounty(3)": EMPTY_APPLICATIONS,
    "GetValidatorsForApplication(1)": validators(BOB),
    "GetLeaderboard()": leaderboard(leaderboard_entry(ALICE, 3, 5, 10, 42)),
}


def make_client(responses=None):
    realm = FakeRealm(RESPONSES if responses is None else responses)
    app = create_app(Config(), datasource=realm)
    return TestClient(app), realm


@pytest.fixture
def client():
    test_client, _ = make_client()
    with test_client:
        yield test_client


def test_list_bounties(client):
    r = client.get("/api/bounties")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    assert r.headers["access-control-allow-origin"] == "*"
    body = r.json()
    assert [b["id"] for b in body] == ["1", "3"]
    assert body[0]["issueUrl"] == "https://github.com/gnolang/gno/issues/1"
    assert body[1]["isClaimed"] is True


def test_list_bounties_count_failure_is_500():
    test_client, _ = make_client({})
    with test_client:
        r = test_client.get("/api/bounties")
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("text/plain")
    assert "failed to get count" in r.text
    assert r.headers["access-control-allow-origin"] == "*"


def test_get_bounty(client):
    r = client.get("/api/bounties/1")
    assert r.status_code == 200
    assert r.json()["title"] == "first_bounty"
    assert r.json()["id"] == "1"


def test_get_bounty_not_found(client):
    r = client.get("/api/bounties/2")
    assert r.status_code == 404
    assert r.text == "bounty not found"


def test_get_bounty_transport_error_is_404(client):
    r = client.get("/api/bounties/99")
    assert r.status_code == 404


def test_list_applications_omits_empty_validators(client):
    r = client.get("/api/bounties/1/applications")
    assert r.status_code == 200
    body = r.json()
    assert body[0]["status"] == "Pending"
    assert body[0]["validators"] == [BOB]
    assert body[1]["status"] == "Approved"
    assert "validators" not in body[1]


def test_list_applications_empty_sentinel(client):
    r = client.get("/api/bounties/3/applications")
    assert r.status_code == 200
    assert r.json() == []


def test_list_applications_failure_degrades_to_empty(client):
    r = client.get("/api/bounties/7/applications")
    assert r.status_code == 200
    assert r.json() == []


def test_leaderboard(client):
    r = client.get("/api/leaderboard")
    assert r.status_code == 200
    assert r.json() == [{
        "address": ALICE,
        "bountiesCreated": 3,
        "bountiesApplied": 5,
        "validationsPerformed": 10,
        "score": 42,
    }]


def test_leaderboard_failure_is_500():
    test_client, _ = make_client({"GetBountyCount()": COUNT_3})
    with test_client:
        r = test_client.get("/api/leaderboard")
    assert r.status_code == 500


def test_user_routes(client):
    r = client.get(f"/api/user/{ALICE}/bounties")
    assert r.status_code == 200
    assert [b["id"] for b in r.json()] == ["1"]

    r = client.get(f"/api/user/{BOB}/applications")
    assert r.status_code == 200
    body = r.json()
    assert [a["id"] for a in body] == ["2"]
    assert body[0]["bountyTitle"] == "first_bounty"


def test_options_preflight_any_path(client):
    r = client.options("/anything/at/all")
    assert r.status_code == 200
    assert r.content == b""
    assert r.headers["access-control-allow-origin"] == "*"
    assert "GET" in r.headers["access-control-allow-methods"]
    assert "Content-Type" in r.headers["access-control-allow-headers"]


def test_lifespan_closes_datasource():
    test_client, realm = make_client()
    with test_client:
        assert test_client.get("/health").json() == {"status": "healthy"}
    assert realm.closed


class BrokenRealm(FakeRealm):
    async def evaluate(self, expression: str) -> str:
        raise RuntimeError("unexpected failure")


def test_unhandled_error_keeps_cors_headers():
    app = create_app(Config(), datasource=BrokenRealm({}))
    with TestClient(app) as test_client:
        r = test_client.get("/api/leaderboard")
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("text/plain")
    assert r.headers["access-control-allow-origin"] == "*"
