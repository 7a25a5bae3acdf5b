# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any, TypedDict

from taskflow.query.filter_type import Operator


class WhereCondition(TypedDict):
    fieldName: str
    operator: str
    values: list[Any]


def generate_filter(conditions: list[WhereCondition]) -> "Predicate":
    """Every condition in a `where` list must hold for a record to match."""
    filter_obj = And()
    for condition in conditions:
        filter_obj.add_predicate(filter_factory(condition))
    return filter_obj


def filter_factory(condition: WhereCondition) -> "Predicate":
    if condition["operator"] == Operator.EXACT_MATCH:
        return ExactMatch(condition)
    raise ValueError(f"unsupported operator: {condition['operator']}")


class Predicate(ABC):
    @abstractmethod
    def include(self, record: dict[str, Any]) -> bool: ...

    def filter(self, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [record for record in records if self.include(record)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, record: dict[str, Any]) -> bool:
        return all(predicate.include(record) for predicate in self.predicates)


class ExactMatch(Predicate):
    def __init__(self, condition: WhereCondition) -> None:
        self.condition = condition

    def include(self, record: dict[str, Any]) -> bool:
        value = record.get(self.condition["fieldName"])
        # Absent boolean flags read as false
        if value is None and False in self.condition["values"]:
            return True
        return value in self.condition["values"]
