# SPDX-License-Identifier: MIT

from enum import StrEnum


class Operator(StrEnum):
    EXACT_MATCH = "ExactMatch"
