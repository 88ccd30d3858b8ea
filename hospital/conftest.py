from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from hospital.database import get_session
from hospital.main import app
from hospital.models import Doctor, Patient, Room, Section, Specialization
from hospital.repository import Repository


@pytest.fixture(name="session")
def session_fixture():
    """
    Provide a clean in-memory database session for each test.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def repo(session):
    return Repository(session)


@pytest_asyncio.fixture
async def client(session):
    """
    Provide an async test client with the session override.
    """
    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def lookups(session):
    """
    Two rooms, two specializations and two sections, keyed by a short name.
    """
    records = {
        "room_101": Room(number=101),
        "room_202": Room(number=202),
        "surgery": Specialization(name="Surgery"),
        "cardiology": Specialization(name="Cardiology"),
        "section_1": Section(number=1),
        "section_2": Section(number=2),
    }
    session.add_all(records.values())
    session.commit()
    for record in records.values():
        session.refresh(record)
    return records


@pytest.fixture
def doctors(session, lookups):
    records = [
        Doctor(full_name="Smirnov Oleg", room_id=lookups["room_101"].id,
               specialization_id=lookups["surgery"].id, section_id=lookups["section_1"].id),
        Doctor(full_name="Antonova Irina", room_id=lookups["room_202"].id,
               specialization_id=lookups["surgery"].id, section_id=None),
        Doctor(full_name="Kuznetsov Pavel", room_id=lookups["room_101"].id,
               specialization_id=lookups["cardiology"].id, section_id=lookups["section_2"].id),
    ]
    session.add_all(records)
    session.commit()
    for record in records:
        session.refresh(record)
    return records


@pytest.fixture
def patients(session, lookups):
    records = [
        Patient(last_name="Petrova", first_name="Anna", middle_name="Sergeevna", address="Lenina 1",
                birth_date=date(1985, 3, 2), gender="female", section_id=lookups["section_1"].id),
        Patient(last_name="Ivanov", first_name="Petr", middle_name=None, address="Mira 12",
                birth_date=date(1990, 7, 15), gender="male", section_id=lookups["section_2"].id),
        Patient(last_name="Sidorov", first_name="Ivan", middle_name="Ivanovich", address="Gagarina 5",
                birth_date=date(1970, 1, 30), gender="male", section_id=lookups["section_1"].id),
    ]
    session.add_all(records)
    session.commit()
    for record in records:
        session.refresh(record)
    return records
