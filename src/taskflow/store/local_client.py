# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskflow import time
from taskflow.model.entity_id import generate_entity_id
from taskflow.query.filter import generate_filter
from taskflow.query.sort import sort_records
from taskflow.store.record_client import (
    FetchParams,
    FetchResponse,
    RecordClient,
    RecordClientError,
    WriteParams,
    WriteResponse,
    WriteResult,
)

logger = logging.getLogger(__name__)

STORAGE_KEY = "taskflow-tasks"


class LocalRecordClient(RecordClient):
    """
    Record client backed by a single YAML document on the local device.

    Every record of the table lives under one fixed key. Writes are saved
    before the call returns.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._records: Optional[list[dict[str, Any]]] = None

    @property
    def records(self) -> list[dict[str, Any]]:
        if self._records is None:
            self.__load_data()
        if self._records is None:
            raise ValueError()
        return self._records

    def __load_data(self) -> None:
        self._records = []
        if not self.path.is_file():
            return
        try:
            raw = load(self.path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise RecordClientError(f"could not read {self.path}: {e}") from e
        if raw is not None:
            self._records = list(raw.get(STORAGE_KEY) or [])

    def __save_data(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump({STORAGE_KEY: self.records}, Dumper=Dumper))
        except OSError as e:
            raise RecordClientError(f"could not write {self.path}: {e}") from e

    def __find(self, record_id: Any) -> Optional[dict[str, Any]]:
        for record in self.records:
            if str(record["Id"]) == str(record_id):
                return record
        return None

    async def fetch_records(
        self, table: str, params: FetchParams
    ) -> Optional[FetchResponse]:
        matching = generate_filter(params.get("where", [])).filter(self.records)
        ordered = sort_records(matching, params.get("orderBy", []))

        paging = params.get("pagingInfo")
        if paging is not None:
            ordered = ordered[paging["offset"] : paging["offset"] + paging["limit"]]

        field_names = [field["Field"]["Name"] for field in params.get("Fields", [])]
        if field_names:
            ordered = [
                {name: record.get(name) for name in field_names} for record in ordered
            ]
        return {"success": True, "data": ordered}

    async def create_record(
        self, table: str, params: WriteParams
    ) -> Optional[WriteResponse]:
        now = time.datetime_to_iso_str(time.now_utc())
        results: list[WriteResult] = []
        for fields in params["records"]:
            record = deepcopy(fields)
            record["Id"] = generate_entity_id()
            record["CreatedOn"] = now
            record["ModifiedOn"] = now
            record.setdefault("IsDeleted", False)
            self.records.append(record)
            results.append({"success": True, "data": deepcopy(record)})
        self.__save_data()
        logger.debug("Created %d %s record(s)", len(results), table)
        return {"success": True, "results": results}

    async def update_record(
        self, table: str, params: WriteParams
    ) -> Optional[WriteResponse]:
        results: list[WriteResult] = []
        for fields in params["records"]:
            record = self.__find(fields.get("Id"))
            if record is None:
                results.append(
                    {
                        "success": False,
                        "data": None,
                        "message": f"record {fields.get('Id')} not found",
                    }
                )
                continue
            record.update(deepcopy(fields))
            results.append({"success": True, "data": deepcopy(record)})
        self.__save_data()
        return {
            "success": all(result["success"] for result in results),
            "results": results,
        }
