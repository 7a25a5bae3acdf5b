# tests/test_reconciler.py

from __future__ import annotations

import asyncio

import pytest

from taskflow.errors import NotAuthenticatedError, NotFoundError, StoreError, ValidationError
from taskflow.model.entity_id import is_provisional_id
from taskflow.model.stats import TaskStats
from taskflow.model.task import ALL_FILTER, Priority, Task, TaskStatus
from taskflow.service.auth import AuthSession
from taskflow.service.reconciler import TaskCollectionReconciler

from .fakes import FakeRecordClient, make_draft


@pytest.mark.asyncio
async def test_add_to_empty_collection_updates_stats(
    reconciler: TaskCollectionReconciler,
) -> None:
    await reconciler.load(ALL_FILTER)

    await reconciler.add(make_draft("Buy milk", priority=Priority.LOW))

    assert len(reconciler.tasks) == 1
    assert reconciler.stats == {"total": 1, "completed": 0, "in_progress": 0}


@pytest.mark.asyncio
async def test_add_prepends_newest_task(reconciler: TaskCollectionReconciler) -> None:
    await reconciler.add(make_draft("first"))
    await reconciler.add(make_draft("second"))

    assert [t["title"] for t in reconciler.tasks] == ["second", "first"]


@pytest.mark.asyncio
async def test_add_with_empty_title_is_rejected_before_store(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    await reconciler.add(make_draft("keep me"))

    with pytest.raises(ValidationError):
        await reconciler.add(make_draft(""))

    assert len(reconciler.tasks) == 1
    assert record_client.operations().count("create") == 1


@pytest.mark.asyncio
async def test_failed_add_leaves_no_provisional_task(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    record_client.fail_operations.add("create")

    with pytest.raises(StoreError):
        await reconciler.add(make_draft("lost"))

    assert reconciler.tasks == []
    assert reconciler.pending == {}
    assert isinstance(reconciler.last_error, StoreError)


@pytest.mark.asyncio
async def test_provisional_task_is_pending_until_create_confirms(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    gate = record_client.add_gate("create")

    adding = asyncio.create_task(reconciler.add(make_draft("in flight")))
    await asyncio.sleep(0)

    assert len(reconciler.pending) == 1
    provisional_id = next(iter(reconciler.pending))
    assert is_provisional_id(provisional_id)
    assert reconciler.tasks == []

    gate.set()
    created = await adding

    assert reconciler.pending == {}
    assert [t["id"] for t in reconciler.tasks] == [created["id"]]
    assert not is_provisional_id(created["id"])


@pytest.mark.asyncio
async def test_add_outside_active_filter_is_not_shown(
    reconciler: TaskCollectionReconciler,
) -> None:
    await reconciler.load(TaskStatus.COMPLETED)

    await reconciler.add(make_draft("todo"))

    assert reconciler.tasks == []
    assert reconciler.stats["total"] == 0


@pytest.mark.asyncio
async def test_set_status_completed_stamps_completion(
    reconciler: TaskCollectionReconciler,
) -> None:
    a = await reconciler.add(make_draft("A"))
    await reconciler.add(make_draft("B", status=TaskStatus.IN_PROGRESS))
    before = reconciler.stats

    updated = await reconciler.set_status(a["id"], TaskStatus.COMPLETED)

    assert updated["completed"] is not None
    assert reconciler.get_task(a["id"])["completed"] is not None
    assert reconciler.stats["completed"] == before["completed"] + 1
    assert reconciler.stats["in_progress"] == before["in_progress"]


@pytest.mark.asyncio
async def test_leaving_completed_clears_completion(
    reconciler: TaskCollectionReconciler,
) -> None:
    task = await reconciler.add(make_draft("A"))
    await reconciler.set_status(task["id"], TaskStatus.COMPLETED)

    await reconciler.set_status(task["id"], TaskStatus.IN_PROGRESS)

    await reconciler.load(ALL_FILTER)
    reloaded = reconciler.get_task(task["id"])
    assert reloaded["status"] == TaskStatus.IN_PROGRESS
    assert reloaded["completed"] is None


@pytest.mark.asyncio
async def test_failed_set_status_leaves_task_and_stats(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    task = await reconciler.add(make_draft("A"))
    stats_before = reconciler.stats
    record_client.fail_operations.add("update")

    with pytest.raises(StoreError):
        await reconciler.set_status(task["id"], TaskStatus.COMPLETED)

    assert reconciler.get_task(task["id"])["status"] == TaskStatus.NOT_STARTED
    assert reconciler.get_task(task["id"])["completed"] is None
    assert reconciler.stats == stats_before
    assert isinstance(reconciler.last_error, StoreError)


@pytest.mark.asyncio
async def test_status_change_drops_task_from_filtered_view(
    reconciler: TaskCollectionReconciler,
) -> None:
    task = await reconciler.add(make_draft("A"))
    await reconciler.load(TaskStatus.NOT_STARTED)

    await reconciler.set_status(task["id"], TaskStatus.IN_PROGRESS)

    assert reconciler.tasks == []


@pytest.mark.asyncio
async def test_save_edit_patches_task_and_stamps_modified(
    reconciler: TaskCollectionReconciler,
) -> None:
    task = await reconciler.add(make_draft("Old title"))

    updated = await reconciler.save_edit(task["id"], {"title": "New title"})

    assert updated["title"] == "New title"
    assert reconciler.get_task(task["id"])["title"] == "New title"
    assert reconciler.get_task(task["id"])["modified"] >= task["modified"]


@pytest.mark.asyncio
async def test_save_edit_rejects_empty_title(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    task = await reconciler.add(make_draft("Keep"))

    with pytest.raises(ValidationError):
        await reconciler.save_edit(task["id"], {"title": " "})

    assert "update" not in record_client.operations()
    assert reconciler.get_task(task["id"])["title"] == "Keep"


@pytest.mark.asyncio
async def test_remove_then_reload_never_returns_task(
    reconciler: TaskCollectionReconciler,
) -> None:
    task = await reconciler.add(make_draft("A"))

    await reconciler.remove(task["id"])
    assert reconciler.tasks == []

    tasks = await reconciler.load(ALL_FILTER)
    assert task["id"] not in [t["id"] for t in tasks]


@pytest.mark.asyncio
async def test_double_remove_is_not_found(reconciler: TaskCollectionReconciler) -> None:
    task = await reconciler.add(make_draft("A"))
    await reconciler.remove(task["id"])

    with pytest.raises(NotFoundError):
        await reconciler.remove(task["id"])


@pytest.mark.asyncio
async def test_rejected_delete_keeps_task(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    task = await reconciler.add(make_draft("A"))
    record_client.reject_delete = True

    with pytest.raises(StoreError):
        await reconciler.remove(task["id"])

    assert [t["id"] for t in reconciler.tasks] == [task["id"]]


@pytest.mark.asyncio
async def test_mutation_of_unknown_id_is_not_found(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    with pytest.raises(NotFoundError):
        await reconciler.set_status("nope", TaskStatus.COMPLETED)

    assert record_client.calls == []


@pytest.mark.asyncio
async def test_late_response_from_superseded_load_is_discarded(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    await reconciler.add(make_draft("open"))
    done = await reconciler.add(make_draft("done"))
    await reconciler.set_status(done["id"], TaskStatus.COMPLETED)

    gate = record_client.add_gate("fetch")
    slow = asyncio.create_task(reconciler.load(ALL_FILTER))
    await asyncio.sleep(0)

    await reconciler.load(TaskStatus.COMPLETED)
    gate.set()
    await slow

    assert reconciler.status_filter == TaskStatus.COMPLETED
    assert [t["title"] for t in reconciler.tasks] == ["done"]
    assert reconciler.stats == {"total": 1, "completed": 1, "in_progress": 0}


@pytest.mark.asyncio
async def test_failed_load_keeps_last_good_collection(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    await reconciler.add(make_draft("A"))
    record_client.fail_operations.add("fetch")

    with pytest.raises(StoreError):
        await reconciler.load(TaskStatus.COMPLETED)

    assert len(reconciler.tasks) == 1
    assert reconciler.status_filter == ALL_FILTER


@pytest.mark.asyncio
async def test_detached_reconciler_ignores_late_responses(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    seen: list[TaskStats] = []
    reconciler.subscribe(lambda tasks, stats: seen.append(stats))
    await record_client.inner.create_record(
        "task", {"records": [{"title": "x", "status": "not-started", "IsDeleted": False}]}
    )

    gate = record_client.add_gate("fetch")
    loading = asyncio.create_task(reconciler.load(ALL_FILTER))
    await asyncio.sleep(0)
    reconciler.detach()
    gate.set()
    await loading

    assert reconciler.tasks == []
    assert seen == []


@pytest.mark.asyncio
async def test_detached_reconciler_ignores_late_failures(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    seen: list[TaskStats] = []
    reconciler.subscribe(lambda tasks, stats: seen.append(stats))
    record_client.fail_operations.add("fetch")

    gate = record_client.add_gate("fetch")
    loading = asyncio.create_task(reconciler.load(ALL_FILTER))
    await asyncio.sleep(0)
    reconciler.detach()
    gate.set()

    assert await loading == []
    assert reconciler.last_error is None
    assert seen == []


@pytest.mark.asyncio
async def test_detached_reconciler_ignores_late_mutation_failures(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    task = await reconciler.add(make_draft("A"))
    record_client.fail_operations.update({"create", "update", "delete"})
    gates = [record_client.add_gate(op) for op in ("create", "update", "delete")]

    pending = [
        asyncio.create_task(reconciler.add(make_draft("B"))),
        asyncio.create_task(reconciler.set_status(task["id"], TaskStatus.COMPLETED)),
        asyncio.create_task(reconciler.remove(task["id"])),
    ]
    await asyncio.sleep(0)
    reconciler.detach()
    for gate in gates:
        gate.set()
    added, status_result, removed = await asyncio.gather(*pending)

    assert is_provisional_id(added["id"])
    assert status_result["status"] == TaskStatus.NOT_STARTED
    assert removed is None
    assert reconciler.last_error is None
    assert [t["id"] for t in reconciler.tasks] == [task["id"]]


@pytest.mark.asyncio
async def test_subscribers_receive_collection_and_stats(
    reconciler: TaskCollectionReconciler,
) -> None:
    published: list[tuple[list[Task], TaskStats]] = []
    reconciler.subscribe(lambda tasks, stats: published.append((tasks, stats)))

    await reconciler.add(make_draft("A"))

    tasks, stats = published[-1]
    assert [t["title"] for t in tasks] == ["A"]
    assert stats["total"] == 1


@pytest.mark.asyncio
async def test_subscribers_see_provisional_task_while_create_is_in_flight(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    published: list[tuple[list[Task], TaskStats]] = []
    reconciler.subscribe(lambda tasks, stats: published.append((tasks, stats)))
    gate = record_client.add_gate("create")

    adding = asyncio.create_task(reconciler.add(make_draft("in flight")))
    await asyncio.sleep(0)

    tasks, stats = published[-1]
    assert [t["title"] for t in tasks] == ["in flight"]
    assert is_provisional_id(tasks[0]["id"])
    assert stats["total"] == 0
    assert reconciler.tasks == []

    gate.set()
    created = await adding

    tasks, stats = published[-1]
    assert [t["id"] for t in tasks] == [created["id"]]
    assert stats["total"] == 1


@pytest.mark.asyncio
async def test_failed_create_withdraws_provisional_task_from_subscribers(
    reconciler: TaskCollectionReconciler, record_client: FakeRecordClient
) -> None:
    published: list[list[Task]] = []
    reconciler.subscribe(lambda tasks, stats: published.append(tasks))
    record_client.fail_operations.add("create")

    with pytest.raises(StoreError):
        await reconciler.add(make_draft("lost"))

    assert len(published[0]) == 1
    assert published[-1] == []


@pytest.mark.asyncio
async def test_operations_require_a_session(
    reconciler: TaskCollectionReconciler,
    auth: AuthSession,
    record_client: FakeRecordClient,
) -> None:
    auth.logout()

    with pytest.raises(NotAuthenticatedError):
        await reconciler.load(ALL_FILTER)
    with pytest.raises(NotAuthenticatedError):
        await reconciler.add(make_draft("A"))

    assert record_client.calls == []


@pytest.mark.asyncio
async def test_completed_iff_status_completed_across_transitions(
    reconciler: TaskCollectionReconciler,
) -> None:
    task = await reconciler.add(make_draft("A"))
    for status in (
        TaskStatus.IN_PROGRESS,
        TaskStatus.COMPLETED,
        TaskStatus.NOT_STARTED,
        TaskStatus.COMPLETED,
    ):
        await reconciler.set_status(task["id"], status)
        for t in await reconciler.load(ALL_FILTER):
            assert (t["completed"] is not None) == (t["status"] == TaskStatus.COMPLETED)
