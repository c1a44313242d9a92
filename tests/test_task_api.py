# tests/test_task_api.py

from __future__ import annotations

import asyncio

import pytest

from ordered_todo.tasks import task_api
from ordered_todo.tasks.task_registry import ADD_DUPLICATE_MESSAGE


@pytest.mark.asyncio
async def test_add_and_list(state) -> None:
    res = await task_api.add_item(state, "buy milk")
    assert res.ok
    assert res.error is None
    assert res.task == {"id": 1, "name": "buy milk", "completed": False, "order": 1}

    await task_api.add_item(state, "walk dog")
    listing = await task_api.todo_list(state)
    assert listing.error is None
    assert [i["name"] for i in listing.items] == ["buy milk", "walk dog"]


@pytest.mark.asyncio
async def test_duplicate_add_reports_message(state) -> None:
    await task_api.add_item(state, "buy milk")
    res = await task_api.add_item(state, "buy milk")

    assert res.ok is False
    assert res.error == ADD_DUPLICATE_MESSAGE
    assert res.task is None


@pytest.mark.asyncio
async def test_empty_filter_reports_error(state) -> None:
    await task_api.add_item(state, "a")
    res = await task_api.todo_list(state, "")
    assert res.items == []
    assert res.error


@pytest.mark.asyncio
async def test_filter_is_case_insensitive(state) -> None:
    await task_api.add_item(state, "Buy Milk")
    await task_api.add_item(state, "walk dog")

    res = await task_api.todo_list(state, "MILK")

    assert [i["name"] for i in res.items] == ["Buy Milk"]


@pytest.mark.asyncio
async def test_update_complete_delete(state) -> None:
    a = (await task_api.add_item(state, "a")).task
    b = (await task_api.add_item(state, "b")).task

    upd = await task_api.update_item(state, b["id"], "a")
    assert upd.ok is False
    assert "Another task" in (upd.error or "")

    upd = await task_api.update_item(state, b["id"], "bee")
    assert upd.ok and upd.task["name"] == "bee"

    done = await task_api.complete_item(state, a["id"])
    assert done.ok and done.task["completed"] is True

    gone = await task_api.delete_item(state, a["id"])
    assert gone.ok and gone.task is None

    again = await task_api.delete_item(state, a["id"])
    assert again.ok is False
    assert again.error == f"Task id {a['id']} not found."

    listing = await task_api.todo_list(state)
    assert listing.items == [{"id": b["id"], "name": "bee", "completed": False, "order": 1}]


@pytest.mark.asyncio
async def test_move_item(state) -> None:
    for name in ("a", "b", "c"):
        await task_api.add_item(state, name)
    c_id = state.tasks.list()[2].id

    res = await task_api.move_item(state, c_id, 1)
    assert res.ok and res.task["order"] == 1

    listing = await task_api.todo_list(state)
    assert [i["name"] for i in listing.items] == ["c", "a", "b"]

    bad = await task_api.move_item(state, c_id, 0)
    assert bad.ok is False
    assert "between 1 and 3" in (bad.error or "")


@pytest.mark.asyncio
async def test_concurrent_adds_keep_orders_dense(state) -> None:
    results = await asyncio.gather(*(task_api.add_item(state, f"t{i}") for i in range(25)))

    assert all(r.ok for r in results)
    listing = await task_api.todo_list(state)
    assert [i["order"] for i in listing.items] == list(range(1, 26))
