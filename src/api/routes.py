"""The three resource collections served by this application."""

from fastapi import APIRouter

from src.api.models import (
    GameCreate,
    GameResponse,
    GameUpdate,
    ShoeCreate,
    ShoeResponse,
    ShoeUpdate,
    UcsbBuildingCreate,
    UcsbBuildingResponse,
    UcsbBuildingUpdate,
)
from src.api.resources import build_resource_router
from src.core.models import Game, Shoe, UcsbBuilding
from src.db.sql_repository import (
    SQLGameRepository,
    SQLShoeRepository,
    SQLUcsbBuildingRepository,
)

games_router = build_resource_router(
    resource="games",
    entity_type=Game,
    repository_factory=SQLGameRepository,
    key_type=str,
    create_model=GameCreate,
    update_model=GameUpdate,
    response_model=GameResponse,
)

shoes_router = build_resource_router(
    resource="shoes",
    entity_type=Shoe,
    repository_factory=SQLShoeRepository,
    key_type=int,
    create_model=ShoeCreate,
    update_model=ShoeUpdate,
    response_model=ShoeResponse,
)

ucsb_buildings_router = build_resource_router(
    resource="ucsbbuildings",
    entity_type=UcsbBuilding,
    repository_factory=SQLUcsbBuildingRepository,
    key_type=int,
    create_model=UcsbBuildingCreate,
    update_model=UcsbBuildingUpdate,
    response_model=UcsbBuildingResponse,
)

router = APIRouter()
router.include_router(games_router)
router.include_router(shoes_router)
router.include_router(ucsb_buildings_router)
