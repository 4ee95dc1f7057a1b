# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Generic ordered key/value bag.

Purpose
=======
A ``Bag`` is a small mutable mapping with chaining mutators. Every access
goes through ``key()``, so subclasses change how keys are stored by
overriding that single method (see ``HeaderBag``).

Definition::

    class Bag:
        __slots__ = ("_data",)

        def __init__(self, data: Mapping[str, Any] | None = None) -> None
        def key(self, key: str) -> str
        def get(self, key: str, default: Any = None) -> Any
        def has(self, key: str) -> bool
        def set(self, key: str, value: Any = None) -> Bag
        def add(self, data: Mapping[str, Any]) -> Bag
        def remove(self, key: str) -> Bag
        def flush(self) -> Bag
        def all(self) -> dict[str, Any]
        def keys(self) -> list[str]
        def values(self) -> list[Any]
        def items(self) -> list[tuple[str, Any]]

Example::

    bag = Bag({"a": 1})
    bag.set("b", 2).set("c", 3).remove("a")
    bag.all()  # {"b": 2, "c": 3}
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

__all__ = ["Bag"]


class Bag:
    """Ordered key/value collection with normalized keys."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        if data:
            self.add(data)

    def key(self, key: str) -> str:
        """Return the storage form of ``key``. Identity by default."""
        return key

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(self.key(key), default)

    def has(self, key: str) -> bool:
        return self.key(key) in self._data

    def set(self, key: str, value: Any = None) -> Bag:
        self._data[self.key(key)] = value
        return self

    def add(self, data: Mapping[str, Any]) -> Bag:
        """Set every pair of ``data`` through ``set()``."""
        for key, value in data.items():
            self.set(key, value)
        return self

    def remove(self, key: str) -> Bag:
        self._data.pop(self.key(key), None)
        return self

    def flush(self) -> Bag:
        self._data.clear()
        return self

    def all(self) -> dict[str, Any]:
        """Return a shallow copy of the stored data."""
        return dict(self._data)

    def keys(self) -> list[str]:
        return list(self._data)

    def values(self) -> list[Any]:
        return list(self._data.values())

    def items(self) -> list[tuple[str, Any]]:
        return list(self._data.items())

    def __getitem__(self, key: str) -> Any:
        stored = self.key(key)
        if stored not in self._data:
            raise KeyError(key)
        return self._data[stored]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        stored = self.key(key)
        if stored not in self._data:
            raise KeyError(key)
        del self._data[stored]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bag):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == type(self)(other)._data
        return NotImplemented

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"
