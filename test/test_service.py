from datetime import date

import pytest

from facet.common.errors import ResourceNotFoundError
from facet.core.contracts import EntityService, Repository
from facet.db import ModelRepository

from conftest import Book, Enrollment


def titles(items):
    return [book.title for book in items]


def test_repository_metadata():
    repository = ModelRepository(Book)
    assert repository.field_mappings == ["id", "title", "author", "price", "published", "in_stock"]
    assert repository.identifier == ["id"]
    assert ModelRepository(Enrollment).identifier == ["student_id", "course_id"]


def test_paginate_counts_all_matches(book_service):
    criteria = {"filters": [], "order": [("id", "asc")], "page": 2, "per_page": 2, "limit": 2, "offset": 2}
    result = book_service.paginate(criteria)

    assert result["total"] == 5
    assert result["per_page"] == 2
    assert result["current_page"] == 2
    assert titles(result["items"]) == ["Ulysses", "Persuasion"]


def test_search_ignores_limit_and_reports_item_count(book_service):
    criteria = {"filters": [("author", "eq", "Austen")], "order": [("price", "desc")], "limit": 1}
    result = book_service.search(criteria)

    assert titles(result["items"]) == ["Persuasion", "Emma"]
    assert result["total"] == 2


@pytest.mark.parametrize(
    "filters, expected",
    [
        ([("price", "gte", "8")], ["Dune", "Ulysses", "Neuromancer"]),
        ([("price", "gte", "5"), ("price", "lt", "9")], ["Persuasion", "Neuromancer"]),
        ([("id", "in", ["2", "4"])], ["Emma", "Persuasion"]),
        ([("id", "notin", ["1", "2", "3"])], ["Persuasion", "Neuromancer"]),
        ([("title", "like", "%u%")], ["Dune", "Ulysses", "Persuasion", "Neuromancer"]),
        ([("published", "isnull", True)], ["Ulysses"]),
        ([("in_stock", "eq", "false")], ["Emma", "Neuromancer"]),
        ([("published", "lt", "1900-01-01")], ["Emma", "Persuasion"]),
        ([("author", "neq", "Austen")], ["Dune", "Ulysses", "Neuromancer"]),
    ],
)
def test_filter_operators(book_service, filters, expected):
    result = book_service.search({"filters": filters, "order": [("id", "asc")]})
    assert titles(result["items"]) == expected


def test_create_ignores_unknown_keys(book_service):
    book = book_service.create(
        {"title": "Kim", "author": "Kipling", "price": 3, "published": "1901-10-01", "secret": "x"}
    )
    assert book.id == 6
    assert book.published == date(1901, 10, 1)
    assert not hasattr(book, "secret")


def test_read_coerces_route_id(book_service):
    assert book_service.read("3").title == "Ulysses"


def test_read_missing_raises(book_service):
    with pytest.raises(ResourceNotFoundError) as info:
        book_service.read("404")
    assert info.value.status_code == 404


def test_update(book_service):
    book = book_service.update("1", {"price": 11.0, "id": 1})
    assert book.price == 11.0
    assert book_service.read(1).price == 11.0


def test_delete_by_id(book_service):
    deleted = book_service.delete("2")
    assert deleted.title == "Emma"
    with pytest.raises(ResourceNotFoundError):
        book_service.read(2)


def test_delete_by_composite_mapping(enrollment_service):
    deleted = enrollment_service.delete({"student_id": [1, 2], "course_id": [1, 2]})

    assert sorted((e.student_id, e.course_id) for e in deleted) == [(1, 1), (1, 2), (2, 1), (2, 2)]
    remaining = enrollment_service.search({})["items"]
    assert [(e.student_id, e.course_id) for e in remaining] == [(3, 1)]


def test_delete_by_mapping_with_no_match(enrollment_service):
    assert enrollment_service.delete({"student_id": [9], "course_id": [9]}) == []


def test_service_satisfies_contracts(book_service):
    assert isinstance(book_service, EntityService)
    assert isinstance(book_service.repository, Repository)


def test_read_by_composite_key(enrollment_service):
    enrollment = enrollment_service.read("1,2")
    assert (enrollment.student_id, enrollment.course_id) == (1, 2)
    assert enrollment.grade == "B"


@pytest.mark.parametrize("id", ["1", "1,2,3", "1,", {"student_id": 1}])
def test_composite_key_with_wrong_parts_is_not_found(enrollment_service, id):
    with pytest.raises(ResourceNotFoundError):
        enrollment_service.read(id)


def test_update_and_delete_by_composite_key(enrollment_service):
    assert enrollment_service.update("2,2", {"grade": "A"}).grade == "A"
    assert enrollment_service.read({"student_id": 2, "course_id": 2}).grade == "A"

    deleted = enrollment_service.delete("2,2")
    assert (deleted.student_id, deleted.course_id) == (2, 2)
    with pytest.raises(ResourceNotFoundError):
        enrollment_service.read("2,2")
