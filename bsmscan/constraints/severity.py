from __future__ import annotations

from enum import Enum
from typing import Union

from bsmscan.errors import InvalidSeverityValue


class Severity(Enum):
    """How a constraint's verdict affects the pipeline.

    apply: the verdict filters the point.
    ignore: the constraint runs, its verdict is stored as ``valid_<id>`` and the point passes.
    skip: nothing is computed and the point passes.
    """

    apply = 1
    ignore = 0
    skip = -1

    def __str__(self) -> str:
        return self.name


_ALLOWED = "1 (apply), 0 (ignore), -1 (skip)"


def parse_severity(value: Union[Severity, int, str]) -> Severity:
    if isinstance(value, Severity):
        return value
    # bool is an int subclass, but True/False are not meaningful severities
    if isinstance(value, bool):
        raise InvalidSeverityValue(f"Invalid severity {value!r}. Severities must take values in {_ALLOWED}.")
    if isinstance(value, int):
        try:
            return Severity(value)
        except ValueError:
            raise InvalidSeverityValue(
                f"Invalid severity {value!r}. Severities must take values in {_ALLOWED}."
            ) from None
    if isinstance(value, str):
        text = value.strip().lower()
        if text in Severity.__members__:
            return Severity[text]
        if text in {"1", "0", "-1"}:
            return Severity(int(text))
    raise InvalidSeverityValue(f"Invalid severity {value!r}. Severities must take values in {_ALLOWED}.")
