from __future__ import annotations

from typing import Dict, Iterator, Mapping, Tuple, Union

from bsmscan.errors import DuplicateKey, UnknownKey


class AnnotationStore:
    """Write-once map from annotation name to value.

    Every parameter point owns one store. Constraints add derived quantities
    with :meth:`put`; an existing entry can never be replaced or removed.
    Iteration follows insertion order, which keeps output columns stable.
    """

    __slots__ = ("_data",)

    def __init__(self, initial: Mapping[str, float] | None = None) -> None:
        self._data: Dict[str, float] = {}
        if initial:
            self.merge(initial)

    def get(self, key: str) -> float:
        try:
            return self._data[key]
        except KeyError:
            raise UnknownKey(key) from None

    def __getitem__(self, key: str) -> float:
        return self.get(key)

    def put(self, key: str, value: float) -> None:
        if key in self._data:
            raise DuplicateKey(f"Can't store, key {key} already exists.", [key])
        self._data[key] = float(value)

    def merge(self, other: Union["AnnotationStore", Mapping[str, float]]) -> None:
        """Insert all entries of ``other``.

        The merge is all-or-nothing: if any key already exists, nothing is
        inserted and a single :class:`DuplicateKey` names every collision.
        """
        entries = list(other.items())
        collisions = [(key, value) for key, value in entries if key in self._data]
        if collisions:
            message = "; ".join(
                f"Entry {{{key}, {float(value):g}}} can't be merged. Exists with value {self._data[key]:g}"
                for key, value in collisions
            )
            raise DuplicateKey(message, [key for key, _ in collisions])
        for key, value in entries:
            self._data[key] = float(value)

    def items(self) -> Iterator[Tuple[str, float]]:
        return iter(self._data.items())

    def keys(self) -> Iterator[str]:
        return iter(self._data)

    def to_dict(self) -> Dict[str, float]:
        return dict(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"AnnotationStore({self._data!r})"
