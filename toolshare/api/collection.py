"""CRUD endpoints over one store: list, create, replace, delete and CORS preflight.

Both /users and /werkzeuge are built by build_collection_router; only the
Collection they are given differs.
"""

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request, Response

from toolshare.api.deps import get_repositories
from toolshare.core.errors import BadRequest
from toolshare.schemas.common import DeleteResponse, ErrorResponse
from toolshare.services.collections import Collection
from toolshare.services.repository import RecordRepository, parse_query_id

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


async def read_json_body(request: Request) -> Any:
    """Return the parsed JSON body, or None when the body is empty.

    Malformed JSON raises json.JSONDecodeError and surfaces as a 500.
    """
    raw = await request.body()
    if not raw:
        return None
    return json.loads(raw)


def build_collection_router(collection: Collection) -> APIRouter:
    """Create the router serving one collection. Mount it with the collection's prefix."""
    router = APIRouter()
    id_required = f"{collection.label} ID required"

    def get_repository(
        repositories: Annotated[dict[str, RecordRepository], Depends(get_repositories)],
    ) -> RecordRepository:
        return repositories[collection.name]

    RepositoryDep = Annotated[RecordRepository, Depends(get_repository)]

    @router.options("", include_in_schema=False)
    def preflight() -> Response:
        return Response(status_code=200)

    @router.get("", summary=f"List all {collection.name}")
    def list_records(repository: RepositoryDep) -> list[dict[str, Any]]:
        return repository.list_records()

    @router.post(
        "",
        status_code=201,
        responses=ERROR_RESPONSES,
        summary=f"Create a {collection.label}",
    )
    async def create_record(request: Request, repository: RepositoryDep) -> dict[str, Any]:
        """
        Store the body as a new record. The server assigns the id; any id in
        the body is ignored.
        """
        body = await read_json_body(request)
        if body is None:
            raise BadRequest("Request body required")
        if not isinstance(body, dict):
            raise BadRequest("Request body must be a JSON object")
        return repository.create(body, collection.prepare_create)

    @router.put("", responses=ERROR_RESPONSES, summary=f"Replace a {collection.label}")
    async def replace_record(request: Request, repository: RepositoryDep) -> dict[str, Any]:
        """Overwrite the record whose id matches body.id with the body, verbatim."""
        body = await read_json_body(request)
        if not isinstance(body, dict) or not body.get("id"):
            raise BadRequest(id_required)
        return repository.replace(body)

    @router.delete(
        "",
        response_model=DeleteResponse,
        responses=ERROR_RESPONSES,
        summary=f"Delete a {collection.label}",
    )
    def delete_record(
        repository: RepositoryDep,
        record_id: Annotated[str | None, Query(alias="id")] = None,
    ) -> DeleteResponse:
        if not record_id:
            raise BadRequest(id_required)
        repository.delete(parse_query_id(record_id))
        return DeleteResponse()

    return router
