from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from bsmscan.constraints.base import Constraint
from bsmscan.models.base import ParameterPoint


class Pipeline:
    """Ordered, short-circuiting AND of constraints.

    Constraints run strictly in the given order and evaluation stops at the
    first failure, so later constraints neither run nor store annotations.
    """

    def __init__(self, constraints: Iterable[Constraint]) -> None:
        self._constraints: Tuple[Constraint, ...] = tuple(constraints)
        seen: List[str] = []
        for constraint in self._constraints:
            if constraint.constraint_id in seen:
                raise ValueError(f"Duplicate constraint id {constraint.constraint_id} in pipeline")
            seen.append(constraint.constraint_id)

    @property
    def ids(self) -> List[str]:
        return [c.constraint_id for c in self._constraints]

    def first_failure(self, point: ParameterPoint) -> Optional[str]:
        for constraint in self._constraints:
            if not constraint(point):
                return constraint.constraint_id
        return None

    def __call__(self, point: ParameterPoint) -> bool:
        return self.first_failure(point) is None

    def __iter__(self) -> Iterator[Constraint]:
        return iter(self._constraints)

    def __len__(self) -> int:
        return len(self._constraints)
