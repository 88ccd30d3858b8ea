"""
CRUD for the lookup tables doctors and patients refer to.

The three routers differ only in model and schemas, so they are built by one
factory. A record still referenced by a doctor or patient cannot be deleted.
"""
from typing import List, Sequence, Type
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlmodel import SQLModel

from hospital import editors, queries
from hospital.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from hospital.errors import RecordNotFound
from hospital.models import Room, Section, Specialization
from hospital.repository import Repository, get_repository
from hospital.schemas import (
    RoomEdit,
    RoomRead,
    SectionEdit,
    SectionRead,
    SpecializationEdit,
    SpecializationRead,
)


def lookup_router(
    model: Type[SQLModel],
    edit_schema: Type[SQLModel],
    read_schema: Type[SQLModel],
    prefix: str,
    label: str,
    referrers: Sequence[str],
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])
    get_name = f"get_{model.__name__.lower()}"

    @router.get("", response_model=List[read_schema])
    def list_items(
        page: int = Query(1, ge=1),
        page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
        repo: Repository = Depends(get_repository),
    ):
        return queries.list_records(repo, model, page, page_size)

    @router.get("/{record_id}", response_model=read_schema, name=get_name)
    def get_item(record_id: int, repo: Repository = Depends(get_repository)):
        record = repo.get(model, record_id)
        if record is None:
            raise RecordNotFound(label)
        return record

    @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    def create_item(
        data: edit_schema,
        request: Request,
        response: Response,
        repo: Repository = Depends(get_repository),
    ):
        record = editors.create_record(repo, model, data)
        response.headers["Location"] = str(request.url_for(get_name, record_id=record.id))
        return record

    @router.put("/{record_id}")
    def update_item(record_id: int, data: edit_schema, repo: Repository = Depends(get_repository)):
        editors.check_path_id(record_id, data.id)
        editors.update_record(repo, model, record_id, data, label)
        return Response(status_code=status.HTTP_200_OK)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_item(record_id: int, repo: Repository = Depends(get_repository)):
        editors.delete_record(repo, model, record_id, label, referrers)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


rooms = lookup_router(Room, RoomEdit, RoomRead, "/rooms", "Room", ["doctors"])
specializations = lookup_router(
    Specialization, SpecializationEdit, SpecializationRead, "/specializations", "Specialization", ["doctors"]
)
sections = lookup_router(Section, SectionEdit, SectionRead, "/sections", "Section", ["doctors", "patients"])
