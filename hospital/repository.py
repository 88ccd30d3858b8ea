from fastapi import Depends
from sqlmodel import Session, SQLModel
from typing import Optional, Type, TypeVar

from hospital.database import get_session

M = TypeVar("M", bound=SQLModel)


class Repository:
    """
    Thin facade over one request-scoped session.
    """

    def __init__(self, session: Session):
        self.session = session

    def get(self, model: Type[M], record_id: Optional[int]) -> Optional[M]:
        if record_id is None:
            return None
        return self.session.get(model, record_id)

    def exists(self, model: Type[SQLModel], record_id: Optional[int]) -> bool:
        return self.get(model, record_id) is not None

    def all(self, statement):
        return self.session.exec(statement).all()

    def first(self, statement):
        return self.session.exec(statement).first()

    def save(self, record: M) -> M:
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def delete(self, record: SQLModel) -> None:
        self.session.delete(record)
        self.session.commit()


def get_repository(session: Session = Depends(get_session)) -> Repository:
    return Repository(session)
