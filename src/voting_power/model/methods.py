from __future__ import annotations

from enum import Enum
from typing import Union

from ..errors import InvalidInputError


class IndexMethod(str, Enum):
    SHAPLEY = "shapley"
    BANZHAF = "banzhaf"

    @classmethod
    def parse(cls, value: Union["IndexMethod", str]) -> "IndexMethod":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip().lower()
            for member in cls:
                if member.value == token:
                    return member
        msg = f"Unknown index method: {value!r} (expected 'shapley' or 'banzhaf')."
        raise InvalidInputError(msg)
