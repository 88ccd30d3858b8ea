from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request, Response, status

from hospital import editors, queries
from hospital.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from hospital.repository import Repository, get_repository
from hospital.schemas import DoctorDetail, DoctorEdit, DoctorListItem

router = APIRouter(prefix="/doctors", tags=["doctors"])


@router.get("", response_model=List[DoctorListItem])
def list_doctors(
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    repo: Repository = Depends(get_repository),
):
    """
    List doctors with room, specialization and section resolved inline.
    `sortBy` accepts `fullName` (default) or `specialization`.
    """
    return queries.list_doctors(repo, page, page_size, sort_by)


@router.get("/{doctor_id}", response_model=DoctorDetail)
def get_doctor(doctor_id: int, repo: Repository = Depends(get_repository)):
    return queries.get_doctor(repo, doctor_id)


@router.post("", response_model=DoctorDetail, status_code=status.HTTP_201_CREATED)
def create_doctor(
    doctor: DoctorEdit,
    request: Request,
    response: Response,
    repo: Repository = Depends(get_repository),
):
    created = editors.create_doctor(repo, doctor)
    response.headers["Location"] = str(request.url_for("get_doctor", doctor_id=created.id))
    return queries.get_doctor(repo, created.id)


@router.put("/{doctor_id}")
def update_doctor(doctor_id: int, doctor: DoctorEdit, repo: Repository = Depends(get_repository)):
    editors.update_doctor(repo, doctor_id, doctor)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_doctor(doctor_id: int, repo: Repository = Depends(get_repository)):
    editors.delete_doctor(repo, doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
