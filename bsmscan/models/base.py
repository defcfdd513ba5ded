from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Tuple, Type

from bsmscan.annotations import AnnotationStore
from bsmscan.oblique.parameters import ObliqueInput


@dataclass(frozen=True, eq=False)
class ParameterPoint:
    """Immutable model parameters plus the point's annotation store."""

    parameter_names: ClassVar[Tuple[str, ...]] = ()

    data: AnnotationStore = field(default_factory=AnnotationStore, compare=False, repr=False, kw_only=True)

    def parameters(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.parameter_names}


class Model:
    """Interface a model has to provide to be scanned.

    ``n_hzero`` and ``n_hplus`` count the physical neutral and charged scalars
    (Goldstone bosons excluded) and size the oblique parameter workspaces.
    """

    description: ClassVar[str] = ""
    n_hzero: ClassVar[int] = 0
    n_hplus: ClassVar[int] = 0
    point_type: ClassVar[Type[ParameterPoint]] = ParameterPoint
    input_columns: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> ParameterPoint:
        missing = [name for name in cls.input_columns if name not in row]
        if missing:
            raise KeyError(f"Missing input columns {missing} for {cls.description}")
        return cls.from_input(*(float(row[name]) for name in cls.input_columns))

    @classmethod
    def from_input(cls, *values: float) -> ParameterPoint:
        raise NotImplementedError

    @staticmethod
    def stu_input(point: ParameterPoint) -> ObliqueInput:
        raise NotImplementedError

    @staticmethod
    def ewp_valid(point: ParameterPoint) -> bool:
        raise NotImplementedError
