from __future__ import annotations

import string
from typing import Dict

from .common import InvalidIdentifierError, UndefinedVariableError

VARIABLE_NAMES = string.ascii_lowercase + string.ascii_uppercase


class VariableStore:
    """
    Flat global namespace of single-letter integer variables.

    Every slot exists from the start with value 0; a separate defined flag
    distinguishes "never assigned" from "assigned 0".
    """

    __slots__ = ("_values", "_defined")

    def __init__(self) -> None:
        self._values = [0] * len(VARIABLE_NAMES)
        self._defined = [False] * len(VARIABLE_NAMES)

    @staticmethod
    def _slot(name: str) -> int:
        if not isinstance(name, str) or len(name) != 1 or name not in VARIABLE_NAMES:
            raise InvalidIdentifierError(
                f"Invalid variable name {name!r}, variables are single letters a-z or A-Z"
            )
        return VARIABLE_NAMES.index(name)

    def validate(self, name: str) -> str:
        self._slot(name)
        return name

    def get(self, name: str) -> int:
        slot = self._slot(name)
        if not self._defined[slot]:
            raise UndefinedVariableError(f"Variable {name} is undefined")
        return self._values[slot]

    def set(self, name: str, value: int) -> int:
        slot = self._slot(name)
        self._values[slot] = value
        self._defined[slot] = True
        return value

    def is_defined(self, name: str) -> bool:
        return self._defined[self._slot(name)]

    def defined(self) -> Dict[str, int]:
        return {
            name: value
            for name, value, is_set in zip(VARIABLE_NAMES, self._values, self._defined)
            if is_set
        }

    def clear(self) -> None:
        for slot in range(len(VARIABLE_NAMES)):
            self._values[slot] = 0
            self._defined[slot] = False

    def __repr__(self) -> str:
        return f"<VariableStore {self.defined()!r}>"
