# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any, NotRequired, Optional, TypedDict

from taskflow.query.filter import WhereCondition
from taskflow.query.sort import OrderBy


class PagingInfo(TypedDict):
    limit: int
    offset: int


class FetchParams(TypedDict):
    Fields: list[dict[str, Any]]
    where: list[WhereCondition]
    orderBy: list[OrderBy]
    pagingInfo: PagingInfo


class WriteParams(TypedDict):
    records: list[dict[str, Any]]


class FetchResponse(TypedDict):
    success: bool
    data: list[dict[str, Any]]
    message: NotRequired[Optional[str]]


class WriteResult(TypedDict):
    success: bool
    data: Optional[dict[str, Any]]
    message: NotRequired[Optional[str]]


class WriteResponse(TypedDict):
    success: bool
    results: list[WriteResult]
    message: NotRequired[Optional[str]]


class RecordClientError(Exception):
    """Transport or storage failure below the task store."""


class RecordClient(ABC):
    """Generic CRUD access to named tables of field-map records."""

    @abstractmethod
    async def fetch_records(
        self, table: str, params: FetchParams
    ) -> Optional[FetchResponse]: ...

    @abstractmethod
    async def create_record(
        self, table: str, params: WriteParams
    ) -> Optional[WriteResponse]: ...

    @abstractmethod
    async def update_record(
        self, table: str, params: WriteParams
    ) -> Optional[WriteResponse]: ...
