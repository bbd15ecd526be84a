"""Sample model classes shared by the test suite."""

from __future__ import annotations

import collections
from abc import ABC, abstractmethod
from collections.abc import Collection, Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Generic, Literal, NamedTuple, TypeVar
from uuid import UUID

from typefactory.model.markers import BooleanArray, Byte, IntArray, Long, Short

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Nothing(Enum):
    pass


@dataclass
class Address:
    street: str
    city: str
    zip_code: Short


@dataclass
class User:
    id: UUID
    name: str
    email: str
    age: int
    active: bool
    color: Color
    address: Address
    tags: list[str]
    scores: dict[str, float]
    created: datetime
    nickname: str | None = None


@dataclass
class Scalars:
    flag: bool
    small: Byte
    short: Short
    medium: int
    large: Long
    ratio: float
    amount: Decimal
    day: date
    span: timedelta
    mode: Literal["r", "w"]


@dataclass
class Inventory:
    ids: set[int]
    names: frozenset[str]
    queue: collections.deque[int]
    counts: collections.Counter[str]
    ordered: collections.OrderedDict[str, int]
    raw: bytes
    numbers: IntArray
    flags: BooleanArray
    pair: tuple[int, str]
    sequence: tuple[int, ...]


@dataclass
class Box(Generic[T]):
    items: list[T]
    label: str


@dataclass
class Pair(Generic[K, V]):
    key: K
    value: V


class StrBox(Box[str]):
    pass


@dataclass
class Node:
    value: int
    next: Node | None = None


@dataclass
class Loop:
    child: Loop


@dataclass
class Tree:
    label: str
    children: list[Tree]


@dataclass
class Expr:
    operand: Expr | int


@dataclass
class Index(Generic[K]):
    entries: dict[K, int]


@dataclass
class Dangling:
    target: Undefined  # noqa: F821


@dataclass
class DanglingDefault:
    count: int
    note: Undefined = None  # noqa: F821


@dataclass
class WithDefaults:
    required: int
    optional: str = "kept"
    items: list[int] = field(default_factory=list)


class Point(NamedTuple):
    x: int
    y: int


class Money:
    def __init__(self, amount: Decimal, currency: str, /) -> None:
        self.amount = amount
        self.currency = currency


class Legacy:
    def __init__(self, value, label: str = "x") -> None:  # type: ignore[no-untyped-def]
        self.value = value
        self.label = label


class Lenient:
    def __init__(self, count: int, extra=None) -> None:  # type: ignore[no-untyped-def]
        self.count = count
        self.extra = extra


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


class Positive:
    def __init__(self, value: int) -> None:
        if value <= 0:
            raise ValueError("value must be positive")
        self.value = value


class Bag(Collection[int]):
    """Collection accepting any iterable of ints."""

    def __init__(self, items: Iterable[int]) -> None:
        self._items = list(items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items


class Sealed(Collection[int]):
    """Collection without a single-argument constructor."""

    def __init__(self, first: int, second: int) -> None:
        self._items = [first, second]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items


@dataclass
class Holder:
    bag: Bag
    sealed_free: list[int]
