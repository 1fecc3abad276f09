from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Course, Order, Product, Student, User

M = TypeVar("M")


class SqlRepository(Generic[M]):
    """
    Persistence access for one model class.
    Every write commits immediately; there is no unit of work spanning calls.
    """

    def __init__(self, model: Type[M], session: Session):
        self.model = model
        self.session = session

    def find_all(self) -> List[M]:
        return list(self.session.scalars(select(self.model)))

    def find_by_id(self, entity_id: int) -> Optional[M]:
        return self.session.get(self.model, entity_id)

    def exists_by_id(self, entity_id: int) -> bool:
        return self.find_by_id(entity_id) is not None

    def save(self, entity: M) -> M:
        self.session.add(entity)
        self.session.commit()
        return entity

    def delete_by_id(self, entity_id: int) -> None:
        entity = self.find_by_id(entity_id)
        if entity is not None:
            self.session.delete(entity)
            self.session.commit()


class UserRepository(SqlRepository[User]):
    def __init__(self, session: Session):
        super().__init__(User, session)

    def find_by_username(self, username: Optional[str]) -> Optional[User]:
        if username is None:
            return None
        return self.session.scalars(select(User).filter_by(username=username)).first()

    def exists_by_username(self, username: Optional[str]) -> bool:
        return self.find_by_username(username) is not None


def build_repositories(session: Session) -> dict:
    """One repository per resource, keyed by URL prefix."""
    return {
        "auth": UserRepository(session),
        "courses": SqlRepository(Course, session),
        "orders": SqlRepository(Order, session),
        "products": SqlRepository(Product, session),
        "students": SqlRepository(Student, session),
    }
