"""Protocol repository (implemented with SQLAlchemy in sql_repository.py, with a dictionary in the service tests)"""

from typing import Protocol, TypeVar

E = TypeVar("E")
K = TypeVar("K")


class EntityRepository(Protocol[E, K]):
    """Persistence port for a single entity type E, keyed by K."""

    def find_all(self) -> list[E]:
        """Every stored record, each exactly once."""
        ...

    def find_by_key(self, key: K) -> E | None:
        """Get the record stored under key, if it exists."""
        ...

    def save(self, entity: E) -> E:
        """Insert (key unassigned or unknown) or overwrite (key known). Returns the stored data, including an assigned key."""
        ...

    def delete(self, entity: E) -> None:
        """Remove the record with the entity's key."""
        ...
