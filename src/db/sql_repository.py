"""Implementation of EntityRepository using SQLAlchemy"""

from dataclasses import asdict, fields
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import Game, Shoe, UcsbBuilding, key_of
from src.db.schema import Base, DBGame, DBShoe, DBUcsbBuilding

E = TypeVar("E")

MIN_INTEGER_KEY = -(2**63)
MAX_INTEGER_KEY = 2**63 - 1


class SQLRepository(Generic[E]):
    """Data stored using SQL / methods implemented using SQLAlchemy.

    Column names of ``table`` must match the field names of ``entity_type``.
    """

    def __init__(self, db_session: Session, entity_type: type[E], table: type[Base]) -> None:
        self.db = db_session
        self.entity_type = entity_type
        self.table = table

    def find_all(self) -> list[E]:
        """Every stored record, ordered by key."""
        key_column = getattr(self.table, self.entity_type.key_field)
        query = select(self.table).order_by(key_column)
        return [self._to_model(row) for row in self.db.scalars(query)]

    def find_by_key(self, key: Any) -> E | None:
        """Get record by key, if it exists."""
        row = self._fetch_row(key)
        if row:
            return self._to_model(row)
        return None

    def save(self, entity: E) -> E:
        """Insert or overwrite. A record without a key gets one from the database."""
        row = self.db.merge(self._to_row(entity))
        self.db.commit()
        self.db.refresh(row)
        return self._to_model(row)

    def delete(self, entity: E) -> None:
        """Remove the record with the entity's key (no-op if it is already gone)."""
        row = self._fetch_row(key_of(entity))
        if row is None:
            return
        self.db.delete(row)
        self.db.commit()

    def _fetch_row(self, key: Any) -> Base | None:
        if isinstance(key, int) and not MIN_INTEGER_KEY <= key <= MAX_INTEGER_KEY:
            # cannot be stored in a 64-bit INTEGER column, so no record has it
            return None
        return self.db.get(self.table, key)

    def _to_row(self, entity: E) -> Base:
        values = asdict(entity)
        if values[self.entity_type.key_field] is None:
            # let the database assign the key
            del values[self.entity_type.key_field]
        return self.table(**values)

    def _to_model(self, row: Base) -> E:
        """Convert SQLAlchemy model to data transfer model."""
        return self.entity_type(
            **{f.name: getattr(row, f.name) for f in fields(self.entity_type)}
        )


class SQLGameRepository(SQLRepository[Game]):
    def __init__(self, db_session: Session) -> None:
        super().__init__(db_session, Game, DBGame)


class SQLShoeRepository(SQLRepository[Shoe]):
    def __init__(self, db_session: Session) -> None:
        super().__init__(db_session, Shoe, DBShoe)


class SQLUcsbBuildingRepository(SQLRepository[UcsbBuilding]):
    def __init__(self, db_session: Session) -> None:
        super().__init__(db_session, UcsbBuilding, DBUcsbBuilding)
