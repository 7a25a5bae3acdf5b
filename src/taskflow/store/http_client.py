# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional, cast

import httpx

from taskflow.store.record_client import (
    FetchParams,
    FetchResponse,
    RecordClient,
    RecordClientError,
    WriteParams,
    WriteResponse,
)

logger = logging.getLogger(__name__)


class HttpRecordClient(RecordClient):
    """Record client for a hosted CRUD record API."""

    def __init__(
        self,
        base_url: str,
        project_id: Optional[str],
        public_key: Optional[str],
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.project_id = project_id
        self.public_key = public_key
        self.timeout = timeout
        self._transport = transport

    def __headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.project_id is not None:
            headers["X-Project-Id"] = self.project_id
        if self.public_key is not None:
            headers["Authorization"] = f"Bearer {self.public_key}"
        return headers

    async def __send(self, method: str, path: str, payload: Any) -> Optional[Any]:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout, connect=5.0),
                transport=self._transport,
            ) as client:
                resp = await client.request(
                    method, url, headers=self.__headers(), json=payload
                )
                resp.raise_for_status()
                if not resp.content:
                    return None
                return resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Record API %s %s returned %s", method, url, e.response.status_code
            )
            raise RecordClientError(
                f"{method} {path} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Record API %s %s failed: %s", method, url, e)
            raise RecordClientError(f"{method} {path} failed: {e}") from e
        except ValueError as e:
            raise RecordClientError(f"{method} {path} returned invalid JSON") from e

    async def fetch_records(
        self, table: str, params: FetchParams
    ) -> Optional[FetchResponse]:
        data = await self.__send("POST", f"/tables/{table}/fetch", params)
        return cast(Optional[FetchResponse], data)

    async def create_record(
        self, table: str, params: WriteParams
    ) -> Optional[WriteResponse]:
        data = await self.__send("POST", f"/tables/{table}/records", params)
        return cast(Optional[WriteResponse], data)

    async def update_record(
        self, table: str, params: WriteParams
    ) -> Optional[WriteResponse]:
        data = await self.__send("PUT", f"/tables/{table}/records", params)
        return cast(Optional[WriteResponse], data)
