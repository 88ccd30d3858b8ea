from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request, Response, status

from hospital import editors, queries
from hospital.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from hospital.repository import Repository, get_repository
from hospital.schemas import PatientDetail, PatientEdit, PatientListItem

router = APIRouter(prefix="/patients", tags=["patients"])


@router.get("", response_model=List[PatientListItem])
def list_patients(
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    repo: Repository = Depends(get_repository),
):
    """
    List patients with their section resolved inline.
    `sortBy` accepts `lastName` (default) or `birthDate`.
    """
    return queries.list_patients(repo, page, page_size, sort_by)


@router.get("/{patient_id}", response_model=PatientDetail)
def get_patient(patient_id: int, repo: Repository = Depends(get_repository)):
    return queries.get_patient(repo, patient_id)


@router.post("", response_model=PatientDetail, status_code=status.HTTP_201_CREATED)
def create_patient(
    patient: PatientEdit,
    request: Request,
    response: Response,
    repo: Repository = Depends(get_repository),
):
    created = editors.create_patient(repo, patient)
    response.headers["Location"] = str(request.url_for("get_patient", patient_id=created.id))
    return queries.get_patient(repo, created.id)


@router.put("/{patient_id}")
def update_patient(patient_id: int, patient: PatientEdit, repo: Repository = Depends(get_repository)):
    editors.update_patient(repo, patient_id, patient)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_patient(patient_id: int, repo: Repository = Depends(get_repository)):
    editors.delete_patient(repo, patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
