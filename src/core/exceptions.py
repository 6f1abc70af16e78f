"""Custom exceptions raised by the service and persistence layers."""

from typing import Any


class AppError(Exception):
    """Top-level exception for anything raised by this application."""


class EntityNotFoundError(AppError):
    """No record of the given entity type is stored under the given key."""

    def __init__(self, entity_name: str, key: Any) -> None:
        self.entity_name = entity_name
        self.key = key
        super().__init__(f"{entity_name} with id {key} not found")
