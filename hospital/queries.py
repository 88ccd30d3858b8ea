"""
Read side: paginated listings and single-record fetches.

Related names are resolved with explicit joins in the same select, then each
row is flattened into a display record. Listings are ordered by the requested
sort key with the primary key as tie-break, so repeated calls page consistently.
"""
from typing import Dict, List, Optional, Sequence, Type

from sqlalchemy import func
from sqlmodel import SQLModel, select

from hospital.errors import RecordNotFound
from hospital.models import Doctor, Patient, Room, Section, Specialization
from hospital.repository import Repository
from hospital.schemas import (
    DoctorDetail,
    DoctorListItem,
    PatientDetail,
    PatientListItem,
)

MISSING = "N/A"

DOCTOR_SORT_KEYS = {
    "fullname": (Doctor.full_name,),
    "specialization": (Specialization.name,),
}
# Same text as patient_full_name, so ordering follows the displayed name
PATIENT_FULL_NAME = func.trim(
    Patient.last_name.concat(" ")
    .concat(Patient.first_name)
    .concat(" ")
    .concat(func.coalesce(Patient.middle_name, ""))
)

PATIENT_SORT_KEYS = {
    "lastname": (PATIENT_FULL_NAME,),
    "birthdate": (Patient.birth_date,),
}


def sort_columns(keys: Dict[str, Sequence], sort_by: Optional[str], default: str) -> Sequence:
    """Pick the columns for a sort token, case-insensitively, falling back to `default`."""
    return keys.get((sort_by or "").strip().lower(), keys[default])


def paginate(statement, page: int, page_size: int):
    return statement.offset((page - 1) * page_size).limit(page_size)


def patient_full_name(patient: Patient) -> str:
    parts = (patient.last_name, patient.first_name, patient.middle_name)
    return " ".join(part for part in parts if part)


def _doctor_view():
    return (
        select(Doctor, Room.number, Specialization.name, Section.number)
        .join(Room, Doctor.room_id == Room.id)
        .join(Specialization, Doctor.specialization_id == Specialization.id)
        .outerjoin(Section, Doctor.section_id == Section.id)
    )


def _patient_view():
    return select(Patient, Section.number).join(Section, Patient.section_id == Section.id)


def list_doctors(repo: Repository, page: int, page_size: int, sort_by: Optional[str] = None) -> List[DoctorListItem]:
    order = sort_columns(DOCTOR_SORT_KEYS, sort_by, "fullname")
    statement = paginate(_doctor_view().order_by(*order, Doctor.id), page, page_size)
    return [
        DoctorListItem(
            id=doctor.id,
            full_name=doctor.full_name,
            room_number=str(room_number),
            specialization_name=specialization_name,
            section_number=str(section_number) if section_number is not None else MISSING,
        )
        for doctor, room_number, specialization_name, section_number in repo.all(statement)
    ]


def get_doctor(repo: Repository, doctor_id: int) -> DoctorDetail:
    row = repo.first(_doctor_view().where(Doctor.id == doctor_id))
    if row is None:
        raise RecordNotFound("Doctor")
    doctor, room_number, specialization_name, section_number = row
    return DoctorDetail(
        **doctor.model_dump(),
        room_number=room_number,
        specialization_name=specialization_name,
        section_number=section_number,
    )


def list_patients(repo: Repository, page: int, page_size: int, sort_by: Optional[str] = None) -> List[PatientListItem]:
    order = sort_columns(PATIENT_SORT_KEYS, sort_by, "lastname")
    statement = paginate(_patient_view().order_by(*order, Patient.id), page, page_size)
    return [
        PatientListItem(
            id=patient.id,
            full_name=patient_full_name(patient),
            address=patient.address,
            birth_date=patient.birth_date,
            gender=patient.gender,
            section_name=str(section_number),
        )
        for patient, section_number in repo.all(statement)
    ]


def get_patient(repo: Repository, patient_id: int) -> PatientDetail:
    row = repo.first(_patient_view().where(Patient.id == patient_id))
    if row is None:
        raise RecordNotFound("Patient")
    patient, section_number = row
    return PatientDetail(**patient.model_dump(), section_number=section_number)


def list_records(repo: Repository, model: Type[SQLModel], page: int, page_size: int) -> List[SQLModel]:
    """Listing for lookup tables, which have no related names to resolve."""
    return list(repo.all(paginate(select(model).order_by(model.id), page, page_size)))
