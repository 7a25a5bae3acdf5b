# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, TypedDict


class OrderBy(TypedDict):
    field: str
    direction: str


def sort_records(
    records: list[dict[str, Any]], order_by: list[OrderBy]
) -> list[dict[str, Any]]:
    sorted_records = deepcopy(records)

    for instruction in reversed(order_by):
        column = instruction["field"]
        descending = instruction["direction"].upper() == "DESC"
        none_records = [record for record in sorted_records if record.get(column) is None]
        value_records = [
            record for record in sorted_records if record.get(column) is not None
        ]
        value_records.sort(key=lambda record: record[column], reverse=descending)
        sorted_records = value_records + none_records

    return sorted_records
