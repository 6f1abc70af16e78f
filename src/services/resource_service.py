"""Orchestration of communication from API router to persistence layer, identical for every resource type."""

import logging
from dataclasses import replace
from typing import Any, Generic, TypeVar

from src.core.exceptions import EntityNotFoundError
from src.core.models import attribute_names, key_of
from src.db.repository import EntityRepository

E = TypeVar("E")

logger = logging.getLogger(__name__)


class ResourceService(Generic[E]):
    """List / get / create / update / delete for one entity type.

    Absence of a record is always reported as EntityNotFoundError, never as an empty result.
    """

    def __init__(self, repository: EntityRepository[E, Any], entity_type: type[E]) -> None:
        self.repo = repository
        self.entity_type = entity_type

    @property
    def entity_name(self) -> str:
        return self.entity_type.__name__

    # -- API routes logic ---
    def list_all(self) -> list[E]:
        """Show all stored records."""
        return self.repo.find_all()

    def get(self, key: Any) -> E:
        """Retrieve a single record."""
        return self._fetch(key)

    def create(self, entity: E) -> E:
        """Store a new record and return it, including a store-assigned key.

        No check for an existing record: a client-assigned key that is already taken gets overwritten.
        """
        saved = self.repo.save(entity)
        logger.info("Created %s with id %s", self.entity_name, key_of(saved))
        return saved

    def update(self, key: Any, incoming: E) -> E:
        """Overwrite every non-key attribute of the stored record. The key itself never changes."""
        stored = self._fetch(key)
        updated = replace(
            stored,
            **{name: getattr(incoming, name) for name in attribute_names(self.entity_type)},
        )
        saved = self.repo.save(updated)
        logger.info("Updated %s with id %s", self.entity_name, key)
        return saved

    def delete(self, key: Any) -> str:
        """Remove a record. Returns a confirmation message naming type and key."""
        stored = self._fetch(key)
        self.repo.delete(stored)
        logger.info("Deleted %s with id %s", self.entity_name, key)
        return f"{self.entity_name} with id {key} deleted"

    # -- Internal helpers --
    def _fetch(self, key: Any) -> E:
        """Attempt to find the record in the repository and raise error if it fails."""
        entity = self.repo.find_by_key(key)
        if entity is None:
            logger.debug("%s with id %s not found", self.entity_name, key)
            raise EntityNotFoundError(self.entity_name, key)
        return entity
