"""End-to-end tests for vote endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from voteable.domain.model import Entity
from voteable.interface.api.app import create_app
from voteable.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_guest, make_post, make_tag, make_user
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container with in-memory persistence."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def seed(client, container):
    """Store entities in the in-memory database behind the app."""

    def _seed(*entities: Entity) -> None:
        database = client.portal.call(container.get, InMemoryDatabase)
        for entity in entities:
            database.entities[entity.ref()] = entity

    return _seed


def votes_url(entity: Entity) -> str:
    return f"/{entity.kind}/{entity.id}/votes"


def voter_params(voter: Entity, **extra) -> dict:
    return {"voter_kind": voter.kind, "voter_id": str(voter.id), **extra}


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCastVoteEndpoint:
    """End-to-end tests for POST /{kind}/{id}/votes.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_cast_up_vote(self, client, seed):
        """Should cast a vote and return updated counters."""
        # Arrange
        user, post = make_user(), make_post()
        seed(user, post)

        # Act
        response = client.post(
            votes_url(post), json=voter_params(user, disposition="up")
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["disposition"] == "up"
        assert data["counters"] == {
            "up_votes": 1,
            "down_votes": 0,
            "abstain_votes": 0,
            "total_votes": 1,
        }

    def test_duplicate_returns_success_false(self, client, seed):
        user, post = make_user(), make_post()
        seed(user, post)
        client.post(votes_url(post), json=voter_params(user, disposition="down"))

        response = client.post(
            votes_url(post), json=voter_params(user, disposition="down")
        )

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["counters"]["down_votes"] == 1

    def test_strict_duplicate_returns_409(self, client, seed):
        user, post = make_user(), make_post()
        seed(user, post)
        client.post(votes_url(post), json=voter_params(user, disposition="abstain"))

        response = client.post(
            votes_url(post),
            json=voter_params(user, disposition="abstain", strict=True),
        )

        assert response.status_code == 409
        assert "Already voted abstain" in response.json()["detail"]

    def test_changing_vote_moves_counter(self, client, seed):
        user, post = make_user(), make_post()
        seed(user, post)
        client.post(votes_url(post), json=voter_params(user, disposition="up"))

        response = client.post(
            votes_url(post), json=voter_params(user, disposition="down")
        )

        counters = response.json()["counters"]
        assert (counters["up_votes"], counters["down_votes"]) == (0, 1)

    def test_guest_can_vote(self, client, seed):
        guest, post = make_guest(), make_post()
        seed(guest, post)

        response = client.post(
            votes_url(post), json=voter_params(guest, disposition="up")
        )

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_non_voteable_target_returns_400(self, client, seed):
        user, tag = make_user(), make_tag()
        seed(user, tag)

        response = client.post(
            votes_url(tag), json=voter_params(user, disposition="up")
        )

        assert response.status_code == 400
        assert "not voteable" in response.json()["detail"]

    def test_non_voter_returns_400(self, client, seed):
        tag, post = make_tag(), make_post()
        seed(tag, post)

        response = client.post(votes_url(post), json=voter_params(tag, disposition="up"))

        assert response.status_code == 400
        assert "cannot vote" in response.json()["detail"]

    def test_unknown_voteable_returns_404(self, client, seed):
        user = make_user()
        seed(user)

        response = client.post(
            f"/post/{uuid4()}/votes", json=voter_params(user, disposition="up")
        )

        assert response.status_code == 404

    def test_unknown_kind_returns_404(self, client, seed):
        user = make_user()
        seed(user)

        response = client.post(
            f"/widget/{uuid4()}/votes", json=voter_params(user, disposition="up")
        )

        assert response.status_code == 404

    def test_malformed_id_returns_400(self, client, seed):
        user = make_user()
        seed(user)

        response = client.post(
            "/post/not-a-uuid/votes", json=voter_params(user, disposition="up")
        )

        assert response.status_code == 400

    def test_invalid_disposition_returns_422(self, client, seed):
        user, post = make_user(), make_post()
        seed(user, post)

        response = client.post(
            votes_url(post), json=voter_params(user, disposition="sideways")
        )

        assert response.status_code == 422


class TestRetractVoteEndpoint:
    def test_retract_vote(self, client, seed):
        user, post = make_user(), make_post()
        seed(user, post)
        client.post(votes_url(post), json=voter_params(user, disposition="up"))

        response = client.delete(votes_url(post), params=voter_params(user))

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Vote retracted successfully",
        }
        counters = client.get(f"{votes_url(post)}/counters").json()
        assert counters["total_votes"] == 0

    def test_retract_without_vote(self, client, seed):
        user, post = make_user(), make_post()
        seed(user, post)

        response = client.delete(votes_url(post), params=voter_params(user))

        assert response.status_code == 200
        assert response.json()["success"] is False

    def test_strict_retract_without_vote_returns_404(self, client, seed):
        user, post = make_user(), make_post()
        seed(user, post)

        response = client.delete(
            votes_url(post), params=voter_params(user, strict="true")
        )

        assert response.status_code == 404


class TestVoteStatusEndpoint:
    def test_status_before_and_after_vote(self, client, seed):
        user, post = make_user(), make_post()
        seed(user, post)

        before = client.get(f"{votes_url(post)}/status", params=voter_params(user))
        client.post(votes_url(post), json=voter_params(user, disposition="down"))
        after = client.get(f"{votes_url(post)}/status", params=voter_params(user))

        assert before.json() == {
            "voted": False,
            "disposition": None,
            "up": False,
            "down": False,
            "abstain": False,
        }
        assert after.json() == {
            "voted": True,
            "disposition": "down",
            "up": False,
            "down": True,
            "abstain": False,
        }


class TestVoteCountersEndpoint:
    def test_counters(self, client, seed):
        post = make_post(up_votes=3, down_votes=1, abstain_votes=2)
        seed(post)

        response = client.get(f"{votes_url(post)}/counters")

        assert response.status_code == 200
        assert response.json() == {
            "up_votes": 3,
            "down_votes": 1,
            "abstain_votes": 2,
            "total_votes": 6,
        }

    def test_counters_of_non_voteable_returns_400(self, client, seed):
        tag = make_tag()
        seed(tag)

        response = client.get(f"{votes_url(tag)}/counters")

        assert response.status_code == 400
