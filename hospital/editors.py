import logging
from typing import Iterable, Optional, Sequence, Tuple, Type, TypeVar

from sqlmodel import SQLModel

from hospital.errors import RecordInUse, RecordNotFound, ReferenceNotFound, RequestInconsistent
from hospital.models import Doctor, Patient, Room, Section, Specialization
from hospital.repository import Repository
from hospital.schemas import DoctorEdit, PatientEdit

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=SQLModel)

# (referenced model, id, message) checked in order; a None id is an absent optional reference
Reference = Tuple[Type[SQLModel], Optional[int], str]


def check_references(repo: Repository, references: Iterable[Reference]) -> None:
    """
    Raise ReferenceNotFound for the first reference that does not resolve.
    """
    for model, record_id, message in references:
        if record_id is not None and not repo.exists(model, record_id):
            raise ReferenceNotFound(message)


def check_path_id(path_id: int, body_id: Optional[int]) -> None:
    # A body without an id is taken to address the path id
    if body_id is not None and body_id != path_id:
        raise RequestInconsistent()


def create_record(repo: Repository, model: Type[M], data: SQLModel) -> M:
    record = model.model_validate(data.model_dump(exclude={"id"}))
    repo.save(record)
    logger.info("Created %s %s", model.__name__, record.id)
    return record


def update_record(repo: Repository, model: Type[M], record_id: int, data: SQLModel, label: str) -> M:
    """
    Overwrite every editable field of an existing record.
    """
    record = repo.get(model, record_id)
    if record is None:
        raise RecordNotFound(label)
    record.sqlmodel_update(data.model_dump(exclude={"id"}))
    repo.save(record)
    logger.info("Updated %s %s", model.__name__, record_id)
    return record


def delete_record(repo: Repository, model: Type[SQLModel], record_id: int, label: str,
                  referrers: Sequence[str] = ()) -> None:
    record = repo.get(model, record_id)
    if record is None:
        raise RecordNotFound(label)
    if any(getattr(record, name) for name in referrers):
        raise RecordInUse(label)
    repo.delete(record)
    logger.info("Deleted %s %s", model.__name__, record_id)


def _doctor_references(data: DoctorEdit) -> Sequence[Reference]:
    return (
        (Room, data.room_id, "Room doesn't exist."),
        (Specialization, data.specialization_id, "Specialization doesn't exist."),
        (Section, data.section_id, "Section doesn't exist."),
    )


def _patient_references(data: PatientEdit) -> Sequence[Reference]:
    return ((Section, data.section_id, "Sections doesn't exist."),)


def create_doctor(repo: Repository, data: DoctorEdit) -> Doctor:
    check_references(repo, _doctor_references(data))
    return create_record(repo, Doctor, data)


def update_doctor(repo: Repository, doctor_id: int, data: DoctorEdit) -> Doctor:
    check_path_id(doctor_id, data.id)
    check_references(repo, _doctor_references(data))
    return update_record(repo, Doctor, doctor_id, data, "Doctor")


def delete_doctor(repo: Repository, doctor_id: int) -> None:
    delete_record(repo, Doctor, doctor_id, "Doctor")


def create_patient(repo: Repository, data: PatientEdit) -> Patient:
    check_references(repo, _patient_references(data))
    return create_record(repo, Patient, data)


def update_patient(repo: Repository, patient_id: int, data: PatientEdit) -> Patient:
    check_path_id(patient_id, data.id)
    check_references(repo, _patient_references(data))
    return update_record(repo, Patient, patient_id, data, "Patient")


def delete_patient(repo: Repository, patient_id: int) -> None:
    delete_record(repo, Patient, patient_id, "Patient")
