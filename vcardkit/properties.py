# -*- coding: utf-8 -*-
"""
Ordered property storage for a single vCard.

- Keys are structured (`PropertyKey`): base name + ordered parameter tokens.
- A write to an existing key replaces the value in place (order preserved).
- No delete, no value validation: values are written as given.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class PropertyKey:
    name: str
    params: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # written exactly as given: no case folding, empty tokens kept
        if not (self.name or "").strip():
            raise ValueError("property name is required")
        object.__setattr__(self, "params", tuple(self.params))

    @classmethod
    def parse(cls, raw: str) -> "PropertyKey":
        """Build a key from its wire form, e.g. "ADR;WORK;POSTAL"."""
        name, *params = raw.split(";")
        return cls(name, tuple(params))

    @classmethod
    def of(cls, name: str, params: str = "") -> "PropertyKey":
        """Key from a base name and a ";"-joined parameter string (may be empty)."""
        return cls(name, tuple(params.split(";")) if params else ())

    def with_params(self, *params: str) -> "PropertyKey":
        return PropertyKey(self.name, self.params + tuple(params))

    def __str__(self) -> str:
        return ";".join((self.name,) + self.params)


KeyLike = Union[PropertyKey, str]


def _as_key(key: KeyLike) -> PropertyKey:
    return key if isinstance(key, PropertyKey) else PropertyKey.parse(key)


class PropertyStore:
    def __init__(self) -> None:
        self._values: Dict[PropertyKey, str] = {}

    def set(self, key: KeyLike, value: str) -> None:
        # dict keeps the first insertion slot on overwrite
        self._values[_as_key(key)] = value

    def get(self, key: KeyLike, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(_as_key(key), default)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (PropertyKey, str)):
            return False
        return _as_key(key) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Tuple[PropertyKey, str]]:
        return iter(list(self._values.items()))

    def lines(self) -> Iterator[str]:
        """Unfolded `<key>:<value>` lines in insertion order."""
        for key, value in self:
            yield f"{key}:{value}"
