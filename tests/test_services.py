import logging

from todo_api import services
from todo_api.db import open_store
from todo_api.schemas import TodoCreate, TodoUpdate
from todo_api.services import Outcome


def test_create_and_list(tmp_path):
    store = open_store(str(tmp_path / "todos.db"))
    created = services.create_todo(store, TodoCreate(title="  buy milk  "))
    assert created.outcome is Outcome.OK
    assert created.value["title"] == "buy milk"
    assert created.value["completed"] is False

    listed = services.list_todos(store)
    assert listed.outcome is Outcome.OK
    assert listed.value == [created.value]
    store.close()


def test_update_merges_fields(tmp_path):
    store = open_store(str(tmp_path / "todos.db"))
    todo = services.create_todo(store, TodoCreate(title="a")).value

    res = services.update_todo(store, todo["id"], TodoUpdate(completed=True))
    assert res.outcome is Outcome.OK
    assert res.value == {**todo, "completed": True}

    res = services.update_todo(store, todo["id"], TodoUpdate(title="b"))
    assert res.value == {**todo, "title": "b", "completed": True}
    assert store.find(todo["id"]) == res.value
    store.close()


def test_not_found_outcomes(tmp_path):
    store = open_store(str(tmp_path / "todos.db"))
    assert services.update_todo(store, "nope", TodoUpdate()).outcome is Outcome.NOT_FOUND
    assert services.delete_todo(store, "nope").outcome is Outcome.NOT_FOUND
    store.close()


def test_storage_errors_are_logged(failing_store, caplog):
    with caplog.at_level(logging.ERROR, logger="todo_api.services"):
        assert services.list_todos(failing_store).outcome is Outcome.STORAGE_ERROR
        assert services.create_todo(failing_store, TodoCreate(title="x")).outcome is Outcome.STORAGE_ERROR
        assert services.update_todo(failing_store, "a", TodoUpdate()).outcome is Outcome.STORAGE_ERROR
        assert services.delete_todo(failing_store, "a").outcome is Outcome.STORAGE_ERROR
    assert len(caplog.records) == 4


def test_update_write_failure_is_storage_error(update_failing_store, caplog):
    with caplog.at_level(logging.ERROR, logger="todo_api.services"):
        res = services.update_todo(update_failing_store, "a", TodoUpdate(completed=True))
    assert res.outcome is Outcome.STORAGE_ERROR
    assert res.value is None
    assert len(caplog.records) == 1
    assert caplog.records[0].getMessage() == "Updating todo a failed"


def test_update_of_todo_deleted_after_read_returns_merged(tmp_path, monkeypatch):
    store = open_store(str(tmp_path / "todos.db"))
    todo = services.create_todo(store, TodoCreate(title="gone soon")).value
    read = store.find

    def find_then_delete(todo_id):
        found = read(todo_id)
        store.delete(todo_id)
        return found

    monkeypatch.setattr(store, "find", find_then_delete)
    res = services.update_todo(store, todo["id"], TodoUpdate(completed=True))
    assert res.outcome is Outcome.OK
    assert res.value == {**todo, "completed": True}
    assert store.list() == []
    store.close()
