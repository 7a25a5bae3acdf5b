# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskflow.repository.preferences import PreferencesRepository
from taskflow.service.auth import AuthSession
from taskflow.service.reconciler import TaskCollectionReconciler
from taskflow.store.task_store import TaskStoreClient

from .fakes import FakeRecordClient


@pytest.fixture()
def record_client(tmp_path: Path) -> FakeRecordClient:
    return FakeRecordClient(tmp_path / "tasks.yaml")


@pytest.fixture()
def store(record_client: FakeRecordClient) -> TaskStoreClient:
    return TaskStoreClient(record_client)


@pytest.fixture()
def preferences(tmp_path: Path) -> PreferencesRepository:
    return PreferencesRepository(tmp_path / "preferences.yaml")


@pytest.fixture()
def auth(preferences: PreferencesRepository) -> AuthSession:
    """A signed-in session; tests that need the signed-out gate call logout()."""
    session = AuthSession(preferences)
    session.login({"first_name": "Ada", "email": "ada@example.com"})
    return session


@pytest.fixture()
def reconciler(store: TaskStoreClient, auth: AuthSession) -> TaskCollectionReconciler:
    return TaskCollectionReconciler(store, auth)
