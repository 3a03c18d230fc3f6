# examples/main.py
"""
facet-py demo: a small library API over SQLite.

    uvicorn examples.main:app --reload

Then try:
    GET  /books?author=Austen&sort=-price
    GET  /books?price[gte]=5&per_page=2&page=2
    GET  /books?paginate=false
    DELETE /loans/1,2
"""

from datetime import date

from fastapi import FastAPI
from sqlalchemy import Date, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from facet import DbClient, DbConfig, Facet, FacetConfig, ModelRepository, ModelService, log
from facet.core.logging import color_palette


class Base(DeclarativeBase):
    pass


class Book(Base):
    __tablename__ = "book"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    author: Mapped[str] = mapped_column(String(100))
    price: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False))
    published: Mapped[date] = mapped_column(Date, nullable=True)


class Loan(Base):
    """Composite key: delete several with `DELETE /loans/1,2`."""

    __tablename__ = "loan"

    member_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[int] = mapped_column(Integer, primary_key=True)


config = FacetConfig(project_name="Library API", version="0.1.0", author="Library Team")
db_client = DbClient(
    DbConfig(url="sqlite:///./library.db", engine_options={"connect_args": {"check_same_thread": False}})
)

log.section("Starting Application")

with log.timed("Database initialization"):
    Base.metadata.create_all(db_client.engine)
    db_client.test_connection()
    with log.indented():
        log.success(f"Found {color_palette['resource']('book')} table")
        log.success(f"Found {color_palette['resource']('loan')} table")

app: FastAPI = FastAPI()
facet = Facet(config, app)

facet.add_resource("books", service=ModelService(ModelRepository(Book), db_client))
facet.add_resource("loans", service=ModelService(ModelRepository(Loan), db_client))
facet.configure_error_handlers()
facet.print_welcome()
