"""Shared in-memory store backing the in-memory repositories."""

from voteable.domain.model import Entity, VoteRecord
from voteable.domain.value import EntityRef


class InMemoryDatabase:
    """State shared by in-memory repositories bound to the same "database".

    Domain models are immutable, so a shallow copy of the containers is a
    complete snapshot.
    """

    def __init__(self) -> None:
        self.entities: dict[EntityRef, Entity] = {}
        self.vote_records: list[VoteRecord] = []

    def snapshot(self) -> tuple[dict[EntityRef, Entity], list[VoteRecord]]:
        return dict(self.entities), list(self.vote_records)

    def restore(
        self, snapshot: tuple[dict[EntityRef, Entity], list[VoteRecord]]
    ) -> None:
        self.entities, self.vote_records = dict(snapshot[0]), list(snapshot[1])
