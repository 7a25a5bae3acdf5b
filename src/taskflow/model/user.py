# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class User(TypedDict):
    first_name: str
    email: Optional[str]
