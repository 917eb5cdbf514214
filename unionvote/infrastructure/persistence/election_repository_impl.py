"""Election repository implementation using SQLAlchemy."""

import logging

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from unionvote.domain.entities.candidate import Candidate
from unionvote.domain.entities.election import Election
from unionvote.domain.exceptions import ConflictError, NotFoundError
from unionvote.domain.repositories.election_repository import ElectionRepository
from unionvote.domain.value_objects.election_status import ElectionStatus
from unionvote.infrastructure.exceptions import DatabaseError
from unionvote.infrastructure.persistence.base_repository_impl import BaseRepositoryImpl
from unionvote.infrastructure.persistence.sqlalchemy_models import ElectionModel


logger = logging.getLogger(__name__)


class ElectionRepositoryImpl(BaseRepositoryImpl[Election], ElectionRepository):
    """Election repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Args:
            session: AsyncSession for database operations
        """
        super().__init__(
            session=session,
            entity_class=Election,
            model_class=ElectionModel,
        )

    def _default_order(self) -> list[Any]:
        """新しい選挙から順に並べる."""
        return [ElectionModel.created_at.desc(), ElectionModel.id]

    async def save(self, entity: Election, expected_version: int) -> Election:
        """Save the aggregate if the stored version still matches.

        Args:
            entity: Election aggregate to persist
            expected_version: Version read when the aggregate was loaded

        Returns:
            Election entity with its new version

        Raises:
            ConflictError: Stored version differs from expected_version
            NotFoundError: Election row no longer exists
        """
        new_version = expected_version + 1
        updated_at = datetime.now(UTC)
        try:
            stmt = (
                update(ElectionModel)
                .where(
                    ElectionModel.id == entity.id,
                    ElectionModel.version == expected_version,
                )
                .values(
                    **self._to_values(entity),
                    updated_at=updated_at,
                    version=new_version,
                )
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(stmt)

            if result.rowcount == 0:  # type: ignore[attr-defined]
                await self.session.rollback()
                stored = await self._get_stored_version(entity.id)
                if stored is None:
                    raise NotFoundError(
                        "Election not found", {"election_id": entity.id}
                    )
                raise ConflictError(
                    "Election was modified concurrently; reload and retry",
                    {
                        "election_id": entity.id,
                        "expected_version": expected_version,
                        "stored_version": stored,
                    },
                )

            await self.session.commit()

        except SQLAlchemyError as e:
            logger.error(f"Database error saving election: {e}")
            await self.session.rollback()
            raise DatabaseError(
                "Failed to save election", {"id": entity.id, "error": str(e)}
            ) from e

        entity.version = new_version
        entity.updated_at = updated_at
        return entity

    async def _get_stored_version(self, election_id: str | None) -> int | None:
        result = await self.session.execute(
            select(ElectionModel.version).where(ElectionModel.id == election_id)
        )
        return result.scalar_one_or_none()

    def _to_values(self, entity: Election) -> dict[str, Any]:
        """集約をUPDATE用の列値に変換する."""
        return {
            "title": entity.title,
            "description": entity.description,
            "start_at": entity.start_at,
            "end_at": entity.end_at,
            "status": entity.status.value,
            "eligible_voters": entity.eligible_voters,
            "total_votes": entity.total_votes,
            "candidates": [_candidate_to_dict(c) for c in entity.roster],
            "voters": entity.ledger.voter_ids(),
        }

    def _to_entity(self, model: ElectionModel) -> Election:
        """Convert database model to domain entity.

        Args:
            model: Database model

        Returns:
            Domain entity
        """
        return Election(
            id=model.id,
            title=model.title,
            description=model.description,
            start_at=_as_utc(model.start_at),
            end_at=_as_utc(model.end_at),
            status=ElectionStatus(model.status),
            eligible_voters=model.eligible_voters,
            total_votes=model.total_votes,
            candidates=[_dict_to_candidate(c) for c in model.candidates or []],
            voters=model.voters or [],
            created_by=model.created_by,
            created_at=_as_utc(model.created_at) if model.created_at else None,
            updated_at=_as_utc(model.updated_at) if model.updated_at else None,
            version=model.version,
        )

    def _to_model(self, entity: Election) -> ElectionModel:
        """Convert domain entity to database model (version 1).

        Args:
            entity: Domain entity

        Returns:
            Database model
        """
        return ElectionModel(
            id=entity.id,
            **self._to_values(entity),
            created_by=entity.created_by,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            version=1,
        )


def _as_utc(value: datetime) -> datetime:
    # SQLiteはタイムゾーンを保存しないためUTCとして読み戻す
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


def _candidate_to_dict(candidate: Candidate) -> dict[str, Any]:
    return {
        "id": candidate.id,
        "student_id": candidate.student_id,
        "name": candidate.name,
        "position": candidate.position,
        "department": candidate.department,
        "year": candidate.year,
        "profile_image": candidate.profile_image,
        "bio": candidate.bio,
        "platform": list(candidate.platform),
        "votes": candidate.votes,
    }


def _dict_to_candidate(data: dict[str, Any]) -> Candidate:
    return Candidate(
        id=data["id"],
        student_id=data["student_id"],
        name=data["name"],
        position=data["position"],
        department=data.get("department"),
        year=data.get("year"),
        profile_image=data.get("profile_image"),
        bio=data.get("bio"),
        platform=data.get("platform") or [],
        votes=data.get("votes", 0),
    )
