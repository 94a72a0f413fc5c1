"""
Type hints for DBAPI objects and rows
"""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, TypeAlias

from typing_extensions import Self

# Bind parameters for one statement
InputRow: TypeAlias = Mapping[str, Any] | Sequence[Any]
# A namedtuple by default, or whatever a transform function returns
Row: TypeAlias = Any
Transform: TypeAlias = Callable[[Row], Row]
NamePair: TypeAlias = tuple[str, str]


class Cursor(Protocol):
    description: Any
    def execute(self, query: str, parameters: Any = ...) -> Any: ...
    def executemany(self, query: str, rows: Any) -> Any: ...
    def close(self) -> None: ...
    def __iter__(self) -> Self: ...
    def __next__(self) -> Sequence[Any]: ...


class Connection(Protocol):
    def cursor(self) -> Cursor: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
    def close(self) -> None: ...
