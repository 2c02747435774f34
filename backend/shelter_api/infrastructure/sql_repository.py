"""SQL Repository - async SQLAlchemy implementation of the ResourceRepository contract.

Invariants:
    - Every database call runs inside translate_db_errors (rollback + DataAccessError)
    - Identifiers that are not integers are treated as absent, never as errors
    - Unknown or read-only columns in filters/payloads raise DataAccessError(QUERY)
    - A body that is not a JSON object raises DataAccessError(QUERY)
    - A repeated filter key matches any of its values (IN)
    - update() merges only the given columns; untouched columns keep their values

Design Decisions:
    - One generic base parameterized by model + record schema; resources add only
      their extra queries (find_dogs) and removal hooks
    - Records leave the repository as JSON-ready dicts (pydantic model_dump)
"""

import logging
from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel
from sqlalchemy import Column, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shelter_api.core.domain_types import FailureKind, Record, ResourceId
from shelter_api.core.errors import DataAccessError
from shelter_api.db.base import Base
from shelter_api.infrastructure.database import translate_db_errors

logger = logging.getLogger(__name__)

READ_ONLY_COLUMNS = frozenset({"id", "created_at"})


def parse_primary_key(resource_id: ResourceId) -> int | None:
    """Integer primary key from a path segment, or None when it is not one."""
    try:
        return int(str(resource_id).strip())
    except (TypeError, ValueError):
        return None


def coerce_filter_value(column: Column, raw: str) -> Any:
    """Convert a query-string value to the column's Python type."""
    python_type = column.type.python_type
    if python_type is datetime:
        return datetime.fromisoformat(raw)
    return python_type(raw)


class SqlResourceRepository:
    """Generic CRUD repository over one ORM model."""

    model: type[Base]
    record_schema: type[BaseModel]

    def __init__(self, db: AsyncSession):
        self._db = db

    @property
    def _columns(self):
        return self.model.__table__.columns

    def _to_record(self, row: Base) -> Record:
        return self.record_schema.model_validate(row).model_dump(mode="json")

    def _filter_clauses(
        self, filters: Mapping[str, str | list[str]],
    ) -> list:
        clauses = []
        for name, raw in filters.items():
            column = self._columns.get(name)
            if column is None:
                raise DataAccessError(
                    f"Unknown filter column '{name}'", "find", FailureKind.QUERY,
                )
            try:
                if isinstance(raw, list):
                    clause = column.in_(
                        [coerce_filter_value(column, v) for v in raw],
                    )
                else:
                    clause = column == coerce_filter_value(column, raw)
            except (TypeError, ValueError, NotImplementedError) as e:
                raise DataAccessError(
                    f"Invalid value for filter column '{name}'", "find",
                    FailureKind.QUERY,
                ) from e
            clauses.append(clause)
        return clauses

    def _writable(self, values: object, operation: str) -> dict:
        if not isinstance(values, Mapping):
            raise DataAccessError(
                f"Expected an object body, got {type(values).__name__}",
                operation, FailureKind.QUERY,
            )
        rejected = sorted(
            name for name in values
            if name not in self._columns or name in READ_ONLY_COLUMNS
        )
        if rejected:
            raise DataAccessError(
                f"Unknown or read-only columns: {', '.join(rejected)}",
                operation, FailureKind.QUERY,
            )
        return dict(values)

    async def _before_remove(self, pk: int) -> None:
        """Hook for resources that must detach related rows first."""

    async def find(
        self, filters: Mapping[str, str | list[str]],
    ) -> list[Record]:
        query = select(self.model).order_by(self.model.id)
        for clause in self._filter_clauses(filters):
            query = query.where(clause)
        async with translate_db_errors(self._db, "find"):
            result = await self._db.execute(query)
            return [self._to_record(row) for row in result.scalars().all()]

    async def find_by_id(self, resource_id: ResourceId) -> Record | None:
        pk = parse_primary_key(resource_id)
        if pk is None:
            return None
        async with translate_db_errors(self._db, "find_by_id"):
            row = await self._db.get(self.model, pk)
            return self._to_record(row) if row is not None else None

    async def add(self, payload: object) -> Record:
        values = self._writable(payload, "add")
        async with translate_db_errors(self._db, "add"):
            row = self.model(**values)
            self._db.add(row)
            await self._db.commit()
            await self._db.refresh(row)
            logger.info(
                f"Added {self.model.__tablename__} row {row.id}",
                extra={"resource": self.model.__tablename__},
            )
            return self._to_record(row)

    async def remove(self, resource_id: ResourceId) -> int:
        pk = parse_primary_key(resource_id)
        if pk is None:
            return 0
        async with translate_db_errors(self._db, "remove"):
            await self._before_remove(pk)
            result = await self._db.execute(
                delete(self.model).where(self.model.id == pk),
            )
            await self._db.commit()
            return result.rowcount

    async def update(
        self, resource_id: ResourceId, changes: object,
    ) -> Record | None:
        values = self._writable(changes, "update")
        pk = parse_primary_key(resource_id)
        if pk is None:
            return None
        async with translate_db_errors(self._db, "update"):
            row = await self._db.get(self.model, pk)
            if row is None:
                return None
            for name, value in values.items():
                setattr(row, name, value)
            await self._db.commit()
            await self._db.refresh(row)
            return self._to_record(row)
