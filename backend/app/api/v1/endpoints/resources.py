"""
CRUD router shared by every resource
Maps method + path onto one store operation and encodes the result
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_filters, get_store
from app.schemas.error import ErrorResponse
from app.services.serializer import encode, from_model, get_schema, reference_validator
from app.services.store import Store

logger = logging.getLogger(__name__)

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def make_router(resource: str) -> APIRouter:
    """
    Build the CRUD routes for one resource

    Args:
        resource: Resource name registered in the serializer

    Returns:
        Router meant to be mounted under ``/{resource}``
    """
    schema = get_schema(resource)
    CreateModel = schema.create_model
    UpdateModel = schema.update_model
    ResponseModel = schema.response_model

    router = APIRouter()

    @router.get(
        "",
        name=f"list_{resource}",
        responses={status.HTTP_200_OK: {"model": List[ResponseModel]}},
    )
    async def list_records(
        filters: Dict[str, str] = Depends(get_filters),
        store: Store = Depends(get_store),
    ):
        """List records in insertion order, optionally filtered by field equality"""
        records = await store.list(resource, filters)
        return [encode(record) for record in records]

    @router.get(
        "/{record_id}",
        name=f"get_{resource}",
        responses={status.HTTP_200_OK: {"model": ResponseModel}, **NOT_FOUND},
    )
    async def get_record(record_id: str, store: Store = Depends(get_store)):
        return encode(await store.get(resource, record_id))

    @router.post(
        "",
        name=f"create_{resource}",
        status_code=status.HTTP_201_CREATED,
        responses={status.HTTP_201_CREATED: {"model": ResponseModel}, **INVALID},
    )
    async def create_record(payload: CreateModel, store: Store = Depends(get_store)):
        """Create a record; any ``id`` in the body is ignored"""
        record = await store.create(
            resource,
            from_model(payload),
            validate=reference_validator(store, resource),
        )
        logger.debug(f"Created {resource} record {record['id']}")
        return encode(record)

    @router.put(
        "/{record_id}",
        name=f"replace_{resource}",
        responses={status.HTTP_200_OK: {"model": ResponseModel}, **NOT_FOUND, **INVALID},
    )
    async def replace_record(
        record_id: str,
        payload: CreateModel,
        store: Store = Depends(get_store),
    ):
        """Replace every field except ``id``"""
        record = await store.replace(
            resource,
            record_id,
            from_model(payload),
            validate=reference_validator(store, resource),
        )
        return encode(record)

    @router.patch(
        "/{record_id}",
        name=f"merge_{resource}",
        responses={status.HTTP_200_OK: {"model": ResponseModel}, **NOT_FOUND, **INVALID},
    )
    async def merge_record(
        record_id: str,
        payload: UpdateModel,
        store: Store = Depends(get_store),
    ):
        """Overwrite only the supplied fields"""
        record = await store.merge(
            resource,
            record_id,
            from_model(payload, partial=True),
            validate=reference_validator(store, resource),
        )
        return encode(record)

    @router.delete(
        "/{record_id}",
        name=f"delete_{resource}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses=NOT_FOUND,
    )
    async def delete_record(record_id: str, store: Store = Depends(get_store)):
        await store.delete(resource, record_id)
        logger.debug(f"Deleted {resource} record {record_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
