"""Tests for SqlBookRepository: mapping, error translation and session interaction."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, MultipleResultsFound, OperationalError

from src.domain.exceptions import (
    BookConflictError,
    BookNotFoundError,
    BookValidationError,
    StorageError,
)
from src.infrastructure.persistence.models.catalog import Book as OrmBook
from src.infrastructure.persistence.repositories.books import SqlBookRepository


def _book_data(**overrides):
    defaults = {
        "isbn": "1234567890",
        "amazon_url": "https://a.co/test",
        "author": "Carl Diggler",
        "language": "english",
        "pages": 413,
        "publisher": "Scholastic Books",
        "title": "On the Origin of Fake Test Data",
        "year": 2015,
    }
    defaults.update(overrides)
    return defaults


def _orm_book(**overrides):
    return SimpleNamespace(**_book_data(**overrides))


def _update_data(**overrides):
    data = _book_data(**overrides)
    data.pop("isbn")
    return data


def _mock_session(scalar_result=None, scalars_result=()):
    session = AsyncMock()
    session.add = MagicMock()
    session.execute.return_value = MagicMock(
        scalar_one_or_none=MagicMock(return_value=scalar_result),
        scalars=MagicMock(return_value=list(scalars_result)),
    )
    return session


def _executed_sql(session):
    stmt = session.execute.call_args.args[0]
    return str(stmt.compile(dialect=postgresql.dialect()))


# --- _to_domain mapping ---

def test_to_domain_maps_every_field():
    assert SqlBookRepository._to_domain(_orm_book()).model_dump() == _book_data()


def test_to_domain_maps_integer_fields():
    book = SqlBookRepository._to_domain(_orm_book(pages=525600, year=1873))
    assert (book.pages, book.year) == (525600, 1873)


# --- find_all ---

async def test_find_all_returns_domain_objects():
    session = _mock_session(scalars_result=[_orm_book(), _orm_book(isbn="9876543210")])
    result = await SqlBookRepository(session).find_all()
    assert [b.isbn for b in result] == ["1234567890", "9876543210"]


async def test_find_all_returns_empty_list_when_no_rows():
    assert await SqlBookRepository(_mock_session()).find_all() == []


async def test_find_all_applies_equality_filter():
    session = _mock_session()
    await SqlBookRepository(session).find_all({"author": "Carl Diggler"})
    assert "books.author = " in _executed_sql(session)


async def test_find_all_rejects_unknown_filter_field_without_querying():
    session = _mock_session()
    with pytest.raises(BookValidationError):
        await SqlBookRepository(session).find_all({"color": "red"})
    session.execute.assert_not_called()


async def test_find_all_wraps_driver_errors():
    session = _mock_session()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
    with pytest.raises(StorageError):
        await SqlBookRepository(session).find_all()


# --- find_one ---

async def test_find_one_returns_domain_object_when_found():
    repo = SqlBookRepository(_mock_session(scalar_result=_orm_book()))
    assert (await repo.find_one("1234567890")).title == "On the Origin of Fake Test Data"


async def test_find_one_raises_not_found_when_missing():
    repo = SqlBookRepository(_mock_session(scalar_result=None))
    with pytest.raises(BookNotFoundError):
        await repo.find_one("5555555555")


async def test_find_one_refuses_multiple_matches():
    session = _mock_session()
    session.execute.return_value.scalar_one_or_none.side_effect = MultipleResultsFound()
    with pytest.raises(StorageError):
        await SqlBookRepository(session).find_one("1234567890")


# --- create ---

async def test_create_adds_row_and_flushes():
    session = _mock_session()
    result = await SqlBookRepository(session).create(_book_data())
    added = session.add.call_args.args[0]
    assert isinstance(added, OrmBook)
    assert added.isbn == "1234567890"
    session.flush.assert_awaited_once()
    assert result.model_dump() == _book_data()


async def test_create_translates_integrity_error_to_conflict():
    session = _mock_session()
    session.flush.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))
    with pytest.raises(BookConflictError):
        await SqlBookRepository(session).create(_book_data())


async def test_create_wraps_other_driver_errors():
    session = _mock_session()
    session.flush.side_effect = OperationalError("INSERT", {}, Exception("down"))
    with pytest.raises(StorageError):
        await SqlBookRepository(session).create(_book_data())


# --- update ---

async def test_update_returns_post_update_row():
    session = _mock_session(scalar_result=_orm_book(author="Carl Sagan"))
    result = await SqlBookRepository(session).update("1234567890", _update_data(author="Carl Sagan"))
    assert result.author == "Carl Sagan"
    assert result.isbn == "1234567890"


async def test_update_raises_not_found_when_no_row_matched():
    repo = SqlBookRepository(_mock_session(scalar_result=None))
    with pytest.raises(BookNotFoundError):
        await repo.update("5555555555", _update_data())


async def test_update_never_sets_isbn():
    session = _mock_session(scalar_result=_orm_book())
    await SqlBookRepository(session).update("1234567890", _book_data(isbn="0000000000"))
    sql = _executed_sql(session)
    set_clause = sql.split("SET", 1)[1].split("WHERE", 1)[0]
    assert "isbn" not in set_clause
    assert "RETURNING" in sql


# --- remove ---

async def test_remove_succeeds_when_row_deleted():
    session = _mock_session(scalar_result="1234567890")
    assert await SqlBookRepository(session).remove("1234567890") is None
    assert _executed_sql(session).startswith("DELETE FROM books")


async def test_remove_raises_not_found_when_no_row_deleted():
    repo = SqlBookRepository(_mock_session(scalar_result=None))
    with pytest.raises(BookNotFoundError):
        await repo.remove("5555555555")


async def test_remove_wraps_driver_errors():
    session = _mock_session()
    session.execute.side_effect = OperationalError("DELETE", {}, Exception("down"))
    with pytest.raises(StorageError):
        await SqlBookRepository(session).remove("1234567890")
