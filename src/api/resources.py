"""
Router factory for the resource-access contract.

Every resource collection exposes the same five endpoints; only the entity type, its key
parameter and its payload models differ. ``build_resource_router`` wires those together
once, so the per-resource modules are a single call each (see routes.py).
"""

from typing import Any, Callable

from fastapi import APIRouter, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from src.api.models import ErrorResponse, MessageResponse
from src.api.security import require_role
from src.core.shared_types import Role
from src.db.database import get_db
from src.db.repository import EntityRepository
from src.services.resource_service import ResourceService

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {404: {"model": ErrorResponse}}


def build_resource_router(
    *,
    resource: str,
    entity_type: type,
    repository_factory: Callable[[Session], EntityRepository[Any, Any]],
    key_type: type,
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    response_model: type[BaseModel],
) -> APIRouter:
    """Build the /api/<resource> router.

    ``repository_factory`` receives the request's database session and returns the storage port
    the service works against. The key is read from the query parameter named after the entity's
    key field (``name`` for games, ``id`` for the others).
    """
    key_param = entity_type.key_field
    entity_name = entity_type.__name__
    router = APIRouter(prefix=f"/api/{resource}", tags=[resource])

    def get_service(db: Session = Depends(get_db)) -> ResourceService:
        return ResourceService(repository_factory(db), entity_type)

    def to_response(entity: Any) -> BaseModel:
        return response_model.model_validate(entity)

    async def read_update_body(request: Request) -> BaseModel:
        # parsed after the role guard; a declared body parameter would be decoded before it
        body = await request.body()
        try:
            return update_model.model_validate_json(body)
        except ValidationError as exc:
            errors = [
                {**error, "loc": ("body", *error["loc"])}
                for error in exc.errors(include_url=False)
            ]
            raise RequestValidationError(errors, body=body) from exc

    @router.get(
        "/all",
        response_model=list[response_model],
        summary=f"List all {resource}",
        dependencies=[Depends(require_role(Role.USER))],
    )
    def list_all(service: ResourceService = Depends(get_service)) -> list[BaseModel]:
        return [to_response(entity) for entity in service.list_all()]

    @router.get(
        "",
        response_model=response_model,
        summary=f"Get a single {entity_name}",
        responses=NOT_FOUND_RESPONSE,
        dependencies=[Depends(require_role(Role.USER))],
    )
    def get_by_key(
        key: key_type = Query(alias=key_param),
        service: ResourceService = Depends(get_service),
    ) -> BaseModel:
        return to_response(service.get(key))

    @router.post(
        "/post",
        response_model=response_model,
        summary=f"Create a new {entity_name}",
        dependencies=[Depends(require_role(Role.ADMIN))],
    )
    def create(
        params: create_model = Depends(),
        service: ResourceService = Depends(get_service),
    ) -> BaseModel:
        return to_response(service.create(entity_type(**params.model_dump())))

    @router.put(
        "",
        response_model=response_model,
        summary=f"Update a single {entity_name}",
        responses=NOT_FOUND_RESPONSE,
        dependencies=[Depends(require_role(Role.ADMIN))],
        openapi_extra={
            "requestBody": {
                "required": True,
                "content": {"application/json": {"schema": update_model.model_json_schema()}},
            }
        },
    )
    def update(
        key: key_type = Query(alias=key_param),
        incoming: BaseModel = Depends(read_update_body),
        service: ResourceService = Depends(get_service),
    ) -> BaseModel:
        updated = service.update(key, entity_type(**incoming.model_dump()))
        return to_response(updated)

    @router.delete(
        "",
        response_model=MessageResponse,
        summary=f"Delete a {entity_name}",
        responses=NOT_FOUND_RESPONSE,
        dependencies=[Depends(require_role(Role.ADMIN))],
    )
    def delete(
        key: key_type = Query(alias=key_param),
        service: ResourceService = Depends(get_service),
    ) -> MessageResponse:
        return MessageResponse(message=service.delete(key))

    return router
