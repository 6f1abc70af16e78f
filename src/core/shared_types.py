"""
Type definitions used across layers
"""

from enum import StrEnum


class Role(StrEnum):
    USER = "USER"
    ADMIN = "ADMIN"


# ADMIN is a superset of USER
ROLE_GRANTS: dict[Role, frozenset[Role]] = {
    Role.USER: frozenset({Role.USER}),
    Role.ADMIN: frozenset({Role.USER, Role.ADMIN}),
}
