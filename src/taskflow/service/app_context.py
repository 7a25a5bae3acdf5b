# SPDX-License-Identifier: MIT

from taskflow import configuration
from taskflow.errors import ValidationError
from taskflow.repository.preferences import PreferencesRepository
from taskflow.service.auth import AuthSession
from taskflow.service.reconciler import TaskCollectionReconciler
from taskflow.store.http_client import HttpRecordClient
from taskflow.store.local_client import LocalRecordClient
from taskflow.store.record_client import RecordClient
from taskflow.store.task_store import TaskStoreClient


def build_record_client(config: configuration.Configuration) -> RecordClient:
    if config["store_backend"] == "remote":
        if not config["remote_url"]:
            raise ValidationError(
                "remote_url must be set when store_backend is 'remote'"
            )
        return HttpRecordClient(
            base_url=config["remote_url"],
            project_id=config["project_id"],
            public_key=config["public_key"],
            timeout=config["request_timeout"],
        )
    return LocalRecordClient(configuration.DATA_TASKS_PATH)


def build_reconciler(
    config: configuration.Configuration, preferences: PreferencesRepository
) -> TaskCollectionReconciler:
    store = TaskStoreClient(build_record_client(config), page_limit=config["page_limit"])
    return TaskCollectionReconciler(store, AuthSession(preferences))
