# monthly_reports/repositories/base.py
from __future__ import annotations
from typing import Any, Generic, Mapping, Optional, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """
    Single-table record store keyed by integer id (SQLAlchemy 2.0 style).
    Every write commits on its own; there is no unit of work across calls.
    """
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    # READS
    def get(self, record_id: int) -> Optional[T]:
        return self.db.get(self.model, record_id)

    def fetch(self, *, limit: int = 50, offset: int = 0) -> list[T]:
        stmt = select(self.model).order_by(self.model.id.asc()).limit(limit).offset(offset)
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(self.model)).scalar_one()

    # WRITES
    def insert(self, values: Mapping[str, Any]) -> T:
        entity = self.model(**values)
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, record_id: int, values: Mapping[str, Any]) -> Optional[T]:
        entity = self.get(record_id)
        if not entity:
            return None
        for key, value in values.items():
            setattr(entity, key, value)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, record_id: int) -> bool:
        entity = self.get(record_id)
        if not entity:
            return False
        self.db.delete(entity)
        self.db.commit()
        return True
