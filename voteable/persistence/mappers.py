"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Type
from uuid import UUID

from voteable.domain.model import Entity, VoteRecord
from voteable.domain.value import Disposition, EntityRef, VoteRecordId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_entity(entity_cls: Type[Entity], row: Dict[str, Any]) -> Entity:
    """Convert database row to the entity model registered for its table.

    Args:
        entity_cls: Domain model class for the row's kind
        row: Database row as dict

    Returns:
        Entity domain model
    """
    return entity_cls.model_validate({**row, "id": _uuid(row["id"])})


def entity_to_dict(entity: Entity) -> Dict[str, Any]:
    """Convert entity domain model to database dict.

    Value objects wrapping a single primitive dump to that primitive.

    Args:
        entity: Entity domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return entity.model_dump()


def row_to_vote_record(row: Dict[str, Any]) -> VoteRecord:
    """Convert database row to VoteRecord domain model.

    Args:
        row: Database row as dict

    Returns:
        VoteRecord domain model
    """
    return VoteRecord(
        id=VoteRecordId(_uuid(row["id"])),
        voter=EntityRef(kind=row["voter_type"], id=_uuid(row["voter_id"])),
        voteable=EntityRef(kind=row["voteable_type"], id=_uuid(row["voteable_id"])),
        disposition=Disposition(row["disposition"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_record_to_dict(record: VoteRecord) -> Dict[str, Any]:
    """Convert VoteRecord domain model to database dict.

    Args:
        record: VoteRecord domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": record.id,
        "voter_type": record.voter.kind,
        "voter_id": record.voter.id,
        "voteable_type": record.voteable.kind,
        "voteable_id": record.voteable.id,
        "disposition": record.disposition.value,
        "created_at": record.created_at,
        "updated_at": record.updated_at,
    }
