"""Unit tests for the in-memory repositories and transaction manager."""

from uuid import uuid4

import logfire
import pytest
from sqlalchemy.exc import IntegrityError

from voteable.domain.model import VoteRecord
from voteable.domain.value import CounterDelta, Disposition, VoteRecordId
from voteable.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryEntityRepository,
    InMemoryTransactionManager,
    InMemoryVoteRecordRepository,
)
from tests.conftest import make_comment, make_guest, make_post, make_user


def make_record(voter, voteable, disposition=Disposition.UP) -> VoteRecord:
    return VoteRecord(
        id=VoteRecordId(uuid4()),
        voter=voter.ref(),
        voteable=voteable.ref(),
        disposition=disposition,
    )


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def vote_repo(database):
    return InMemoryVoteRecordRepository(database)


@pytest.fixture
def entity_repo(database):
    return InMemoryEntityRepository(database)


class TestInMemoryVoteRecordRepository:
    @pytest.mark.asyncio
    async def test_duplicate_pair_raises_integrity_error(self, vote_repo):
        user, post = make_user(), make_post()
        await vote_repo.create(make_record(user, post))

        with pytest.raises(IntegrityError):
            await vote_repo.create(make_record(user, post, Disposition.DOWN))

    @pytest.mark.asyncio
    async def test_same_id_different_kind_is_a_different_pair(self, vote_repo):
        """References compare on kind as well as id."""
        user, post = make_user(), make_post()
        comment = make_comment().model_copy(update={"id": post.id})

        await vote_repo.create(make_record(user, post))
        await vote_repo.create(make_record(user, comment))

        assert await vote_repo.count_by_voteable(post.ref()) == 1
        assert await vote_repo.count_by_voteable(comment.ref()) == 1

    @pytest.mark.asyncio
    async def test_update_changes_disposition(self, vote_repo):
        user, post = make_user(), make_post()
        record = await vote_repo.create(make_record(user, post))

        await vote_repo.update(
            record.model_copy(update={"disposition": Disposition.ABSTAIN})
        )

        stored = await vote_repo.find(user.ref(), post.ref())
        assert stored.disposition is Disposition.ABSTAIN
        assert stored.id == record.id

    @pytest.mark.asyncio
    async def test_delete(self, vote_repo):
        user, post = make_user(), make_post()
        record = await vote_repo.create(make_record(user, post))

        assert await vote_repo.delete(record) is True
        assert await vote_repo.delete(record) is False
        assert await vote_repo.find(user.ref(), post.ref()) is None

    @pytest.mark.asyncio
    async def test_find_by_voter_and_voteables(self, vote_repo):
        user, guest = make_user(), make_guest()
        first, second, third = make_post(), make_post(), make_post()
        await vote_repo.create(make_record(user, first))
        await vote_repo.create(make_record(user, third, Disposition.DOWN))
        await vote_repo.create(make_record(guest, second))

        records = await vote_repo.find_by_voter_and_voteables(
            user.ref(), [first.ref(), second.ref()]
        )

        assert [r.voteable for r in records] == [first.ref()]
        assert await vote_repo.find_by_voter_and_voteables(user.ref(), []) == []

    @pytest.mark.asyncio
    async def test_count_by_disposition(self, vote_repo):
        post = make_post()
        await vote_repo.create(make_record(make_user("a.example.com"), post))
        await vote_repo.create(make_record(make_user("b.example.com"), post))
        await vote_repo.create(make_record(make_guest(), post, Disposition.DOWN))

        assert await vote_repo.count_by_voteable(post.ref()) == 3
        assert await vote_repo.count_by_voteable(post.ref(), Disposition.UP) == 2
        assert await vote_repo.count_by_voteable(post.ref(), Disposition.ABSTAIN) == 0


class TestInMemoryEntityRepository:
    @pytest.mark.asyncio
    async def test_apply_vote_delta(self, entity_repo):
        post = make_post(up_votes=1)
        await entity_repo.save(post)

        await entity_repo.apply_vote_delta(
            post.ref(), CounterDelta(up_votes=-1, down_votes=1)
        )

        stored = await entity_repo.find_by_ref(post.ref())
        assert (stored.up_votes, stored.down_votes) == (0, 1)

    @pytest.mark.asyncio
    async def test_counters_are_not_clamped(self, entity_repo):
        post = make_post()
        await entity_repo.save(post)

        await entity_repo.apply_vote_delta(post.ref(), CounterDelta(down_votes=-1))

        stored = await entity_repo.find_by_ref(post.ref())
        assert stored.down_votes == -1

    @pytest.mark.asyncio
    async def test_missing_entity_is_logged_and_skipped(
        self, entity_repo, monkeypatch
    ):
        """Same behaviour as the PostgreSQL repository: warn, write nothing."""
        warnings = []
        monkeypatch.setattr(
            logfire, "warn", lambda message, **attrs: warnings.append((message, attrs))
        )
        post = make_post()

        await entity_repo.apply_vote_delta(post.ref(), CounterDelta(up_votes=1))

        assert await entity_repo.find_by_ref(post.ref()) is None
        assert warnings == [
            ("Vote counters target missing", {"entity": str(post.ref())})
        ]


class TestInMemoryTransactionManager:
    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self, database, vote_repo):
        transactions = InMemoryTransactionManager(database)
        user, post = make_user(), make_post()

        async with transactions.transaction():
            await vote_repo.create(make_record(user, post))

        assert await vote_repo.find(user.ref(), post.ref()) is not None

    @pytest.mark.asyncio
    async def test_exception_rolls_back_every_write(
        self, database, vote_repo, entity_repo
    ):
        transactions = InMemoryTransactionManager(database)
        user, post = make_user(), make_post()
        await entity_repo.save(post)

        with pytest.raises(RuntimeError):
            async with transactions.transaction():
                await vote_repo.create(make_record(user, post))
                await entity_repo.apply_vote_delta(post.ref(), CounterDelta(up_votes=1))
                raise RuntimeError("boom")

        assert await vote_repo.find(user.ref(), post.ref()) is None
        assert (await entity_repo.find_by_ref(post.ref())).up_votes == 0
