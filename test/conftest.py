"""Shared fixtures: an in-memory SQLite schema and a recording fake service."""

from datetime import date
from typing import Any, Dict, List

import pytest
from sqlalchemy import Boolean, Date, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool

from facet.core.logging import log
from facet.db import DbClient, DbConfig, ModelRepository, ModelService


class Base(DeclarativeBase):
    pass


class Book(Base):
    __tablename__ = "book"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    author: Mapped[str] = mapped_column(String(100))
    price: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False))
    published: Mapped[date] = mapped_column(Date, nullable=True)
    in_stock: Mapped[bool] = mapped_column(Boolean, default=True)


class Enrollment(Base):
    __tablename__ = "enrollment"

    student_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    course_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    grade: Mapped[str] = mapped_column(String(2), nullable=True)


BOOKS = [
    dict(id=1, title="Dune", author="Herbert", price=9.5, published=date(1965, 8, 1), in_stock=True),
    dict(id=2, title="Emma", author="Austen", price=4.0, published=date(1815, 12, 23), in_stock=False),
    dict(id=3, title="Ulysses", author="Joyce", price=12.0, published=None, in_stock=True),
    dict(id=4, title="Persuasion", author="Austen", price=6.25, published=date(1817, 12, 20), in_stock=True),
    dict(id=5, title="Neuromancer", author="Gibson", price=8.0, published=date(1984, 7, 1), in_stock=False),
]


@pytest.fixture(autouse=True)
def quiet_log():
    log.set_level("WARNING")
    yield
    log.set_level("INFO")


@pytest.fixture
def db_client() -> DbClient:
    client = DbClient(
        DbConfig(
            url="sqlite://",
            engine_options={
                "connect_args": {"check_same_thread": False},
                "poolclass": StaticPool,
            },
        )
    )
    Base.metadata.create_all(client.engine)
    with client.session() as db:
        db.add_all([Book(**row) for row in BOOKS])
        db.add_all(
            [
                Enrollment(student_id=1, course_id=1, grade="A"),
                Enrollment(student_id=1, course_id=2, grade="B"),
                Enrollment(student_id=2, course_id=1, grade="C"),
                Enrollment(student_id=2, course_id=2, grade=None),
                Enrollment(student_id=3, course_id=1, grade="A"),
            ]
        )
        db.commit()
    yield client
    client.engine.dispose()


@pytest.fixture
def book_service(db_client) -> ModelService:
    return ModelService(ModelRepository(Book), db_client)


@pytest.fixture
def enrollment_service(db_client) -> ModelService:
    return ModelService(ModelRepository(Enrollment), db_client)


class FakeRepository:
    def __init__(self, field_mappings: List[str], identifier: List[str]):
        self.field_mappings = field_mappings
        self.identifier = identifier


class FakeService:
    """Records every call and answers with canned results."""

    def __init__(self, field_mappings=None, identifier=None, items=None):
        self.repository = FakeRepository(
            field_mappings or ["id", "title", "author", "price"],
            identifier or ["id"],
        )
        self.items = items if items is not None else [{"id": 1, "title": "Dune"}]
        self.calls: List[tuple] = []

    def paginate(self, criteria: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(("paginate", criteria))
        return {
            "items": self.items,
            "total": 42,
            "per_page": criteria["per_page"],
            "current_page": criteria["page"],
        }

    def search(self, criteria: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(("search", criteria))
        return {"items": self.items, "total": len(self.items)}

    def create(self, data):
        self.calls.append(("create", data))
        return {"id": 99, **data}

    def read(self, id):
        self.calls.append(("read", id))
        return {"id": id}

    def update(self, id, data):
        self.calls.append(("update", id, data))
        return {"id": id, **data}

    def delete(self, id):
        self.calls.append(("delete", id))
        return {"deleted": id}


@pytest.fixture
def fake_service() -> FakeService:
    return FakeService()


@pytest.fixture
def make_fake_service():
    return FakeService
