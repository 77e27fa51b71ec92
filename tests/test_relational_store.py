"""
RelationalStore tests - error translation and reconnect behaviour against SQLite.
"""
import asyncio

import pytest
from sqlalchemy.exc import ArgumentError, OperationalError

from app.core.exceptions import ConnectivityError, ConstraintError, StoreError
from app.db.relational import RelationalStore, is_retryable_connect_error
from app.db.supervisor import ConnectionState
from app.services.notice_service import NoticeService

NOTICES_DDL = """
CREATE TABLE notices (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    content TEXT NOT NULL
)
"""


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def file_store(tmp_path, sleeps):
    async def fake_sleep(delay):
        sleeps.append(delay)

    store = RelationalStore(
        f"sqlite:///{tmp_path / 'admin.db'}",
        sleep=fake_sleep,
        connect_args={"check_same_thread": False},
    )
    yield store
    store.supervisor.stop()


def test_fetch_helpers(relational_store):
    notices = NoticeService(relational_store)
    notices.create("A", "B")

    rows = relational_store.fetch_all("SELECT title, content FROM notices")
    one = relational_store.fetch_one("SELECT title FROM notices WHERE title = :t", {"t": "A"})
    none = relational_store.fetch_one("SELECT title FROM notices WHERE title = :t", {"t": "Z"})

    assert rows == [{"title": "A", "content": "B"}]
    assert one == {"title": "A"}
    assert none is None


def test_delete_reports_rowcount(relational_store):
    notices = NoticeService(relational_store)
    notices.create("A", "B")
    notice_id = notices.list_recent()[0]["id"]

    assert notices.delete(notice_id) == 1
    assert notices.delete(notice_id) == 0


def test_constraint_violation(relational_store):
    with pytest.raises(ConstraintError):
        NoticeService(relational_store).create(None, "content")
    assert relational_store.supervisor.is_connected


def test_other_driver_errors_are_store_errors(relational_store):
    with pytest.raises(StoreError) as info:
        relational_store.fetch_all("SELECT * FROM missing_table")
    assert type(info.value) is StoreError
    assert relational_store.supervisor.is_connected


def test_query_while_disconnected(relational_store):
    relational_store.supervisor.stop()
    with pytest.raises(ConnectivityError):
        relational_store.fetch_all("SELECT 1")


def test_ping(relational_store):
    assert relational_store.ping() is True
    relational_store.supervisor.stop()
    assert relational_store.ping() is False


def test_reconnects_after_connection_drop(file_store, sleeps):
    async def scenario():
        await file_store.supervisor.connect()
        file_store.execute(NOTICES_DDL)
        NoticeService(file_store).create("before", "drop")

        # driver reports the connection as gone
        with pytest.raises(ConnectivityError):
            with file_store.connection():
                raise OperationalError(
                    "SELECT 1", {}, Exception("server closed the connection"),
                    connection_invalidated=True,
                )
        assert file_store.supervisor.state is ConnectionState.disconnected

        with pytest.raises(ConnectivityError):
            NoticeService(file_store).list_recent()

        await file_store.supervisor.join()
        NoticeService(file_store).create("after", "reconnect")
        return NoticeService(file_store).list_recent()

    notices = asyncio.run(scenario())

    assert file_store.supervisor.is_connected
    assert sleeps == [5.0]
    assert [n["title"] for n in notices] == ["after", "before"]


def test_unknown_dialect_is_fatal(sleeps):
    fatal = []

    async def fake_sleep(delay):
        sleeps.append(delay)

    store = RelationalStore("nosuchdialect://host/db", on_fatal=fatal.append, sleep=fake_sleep)

    with pytest.raises(ArgumentError):
        asyncio.run(store.supervisor.connect())

    assert store.supervisor.state is ConnectionState.failed
    assert len(fatal) == 1
    assert sleeps == []


def test_retryable_connect_errors():
    assert is_retryable_connect_error(OperationalError("SELECT 1", {}, Exception("refused")))
    assert is_retryable_connect_error(ConnectionRefusedError())
    assert not is_retryable_connect_error(ArgumentError("bad url"))
    assert not is_retryable_connect_error(ValueError("nope"))
