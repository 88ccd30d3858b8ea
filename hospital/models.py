from datetime import date
from sqlmodel import Field, SQLModel, Relationship
from typing import Optional, List


class RoomBase(SQLModel):
    number: int


class Room(RoomBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    doctors: List["Doctor"] = Relationship(back_populates="room")


class SpecializationBase(SQLModel):
    name: str


class Specialization(SpecializationBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    doctors: List["Doctor"] = Relationship(back_populates="specialization")


class SectionBase(SQLModel):
    number: int


class Section(SectionBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    doctors: List["Doctor"] = Relationship(back_populates="section")
    patients: List["Patient"] = Relationship(back_populates="section")


class DoctorBase(SQLModel):
    full_name: str = Field(index=True)
    room_id: int = Field(foreign_key="room.id")
    specialization_id: int = Field(foreign_key="specialization.id")
    section_id: Optional[int] = Field(default=None, foreign_key="section.id")


class Doctor(DoctorBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    room: Optional[Room] = Relationship(back_populates="doctors")
    specialization: Optional[Specialization] = Relationship(back_populates="doctors")
    section: Optional[Section] = Relationship(back_populates="doctors")


class PatientBase(SQLModel):
    last_name: str = Field(index=True)
    first_name: str
    middle_name: Optional[str] = None
    address: str
    birth_date: date
    gender: str
    section_id: int = Field(foreign_key="section.id")


class Patient(PatientBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    section: Optional[Section] = Relationship(back_populates="patients")
