"""
Request and response shapes for the API.

`*Edit` models are the editable fields a client sends on create and update;
`*ListItem` and `*Detail` models are flat display records built from joined rows.
"""
from datetime import date
from sqlmodel import SQLModel
from typing import Optional

from hospital.models import (
    DoctorBase,
    PatientBase,
    RoomBase,
    SectionBase,
    SpecializationBase,
)


class DoctorEdit(DoctorBase):
    id: Optional[int] = None


class DoctorListItem(SQLModel):
    id: int
    full_name: str
    room_number: str
    specialization_name: str
    section_number: str


class DoctorDetail(DoctorBase):
    id: int
    room_number: int
    specialization_name: str
    section_number: Optional[int] = None


class PatientEdit(PatientBase):
    id: Optional[int] = None


class PatientListItem(SQLModel):
    id: int
    full_name: str
    address: str
    birth_date: date
    gender: str
    section_name: str


class PatientDetail(PatientBase):
    id: int
    section_number: int


class RoomEdit(RoomBase):
    id: Optional[int] = None


class RoomRead(RoomBase):
    id: int


class SpecializationEdit(SpecializationBase):
    id: Optional[int] = None


class SpecializationRead(SpecializationBase):
    id: int


class SectionEdit(SectionBase):
    id: Optional[int] = None


class SectionRead(SectionBase):
    id: int
