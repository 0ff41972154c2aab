"""Built-in language knowledge: keywords, types, builtins and properties."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from types import MappingProxyType


class CatalogKind(StrEnum):
    KEYWORD = "keyword"
    TYPE = "type"
    BUILTIN_FUNCTION = "builtin_function"
    PROPERTY = "property"


@dataclass(frozen=True, slots=True)
class Signature:
    """Display form of a call (`len(collection) -> Int`) plus its description."""

    label: str
    documentation: str


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    name: str
    kind: CatalogKind
    documentation: str
    detail: str
    signature: Signature | None = None

    def __post_init__(self):
        if self.signature is not None and self.kind != CatalogKind.BUILTIN_FUNCTION:
            raise ValueError(f"Catalog entry `{self.name}` is a {self.kind} and cannot carry a signature")

    @property
    def is_callable(self) -> bool:
        return self.signature is not None


class SymbolCatalog:
    """Read-only mapping from identifier name to its catalog entry.

    Lookups are case-sensitive exact matches. Prefix narrowing is left to consumers.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[CatalogEntry]):
        by_name: dict[str, CatalogEntry] = {}
        for entry in entries:
            if entry.name in by_name:
                raise ValueError(f"Duplicate catalog entry `{entry.name}`")
            by_name[entry.name] = entry
        self._entries: Mapping[str, CatalogEntry] = MappingProxyType(by_name)

    def lookup(self, name: str) -> CatalogEntry | None:
        return self._entries.get(name)

    def entries(self) -> tuple[CatalogEntry, ...]:
        return tuple(self._entries.values())

    def callables(self) -> tuple[CatalogEntry, ...]:
        return tuple(entry for entry in self._entries.values() if entry.is_callable)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("let", "Declares a mutable variable"),
    ("const", "Declares an immutable variable"),
    ("func", "Declares a function"),
    ("fn", "Declares a function (alternative syntax)"),
    ("if", "Conditional statement"),
    ("else", "Alternative branch for if statement"),
    ("while", "Loop that continues while condition is true"),
    ("for", "Iterate over a collection"),
    ("in", "Used in for-in loops"),
    ("return", "Return a value from a function"),
    ("break", "Exit from a loop"),
    ("continue", "Skip to next iteration of loop"),
    ("true", "Boolean true value"),
    ("false", "Boolean false value"),
    ("nil", "Null/empty value"),
)

_TYPES: tuple[tuple[str, str], ...] = (
    ("Int", "Integer type (32-bit)"),
    ("Bool", "Boolean type (true/false)"),
    ("Float", "Floating-point number type"),
    ("Double", "Double-precision floating-point type"),
    ("String", "Text string type"),
)

# name, documentation, completion detail, signature
_BUILTINS: tuple[tuple[str, str, str, Signature | None], ...] = (
    (
        "print",
        "Built-in function to print values to console",
        "print(value) - Print a value to console",
        Signature("print(value)", "Print a value to the console"),
    ),
    (
        "len",
        "Built-in function to get length of collections",
        "len(collection) -> Int - Get length of collection",
        Signature("len(collection) -> Int", "Get the length of a string, array, or dictionary"),
    ),
    (
        "type",
        "Built-in function to get type of a value",
        "type(value) -> String - Get type of value",
        Signature("type(value) -> String", "Get the type name of a value"),
    ),
    (
        "str",
        "Built-in function to convert value to string",
        "str(value) -> String - Convert value to string",
        Signature("str(value) -> String", "Convert a value to its string representation"),
    ),
    (
        "int",
        "Built-in function to convert value to integer",
        "int(value) -> Int - Convert value to integer",
        Signature("int(value) -> Int", "Convert a value to an integer"),
    ),
    (
        "float",
        "Built-in function to convert value to float",
        "float(value) -> Double - Convert value to float",
        Signature("float(value) -> Double", "Convert a value to a floating-point number"),
    ),
    (
        "range",
        "Built-in function to create ranges for iteration",
        "range(count) - Create a range for iteration",
        Signature("range(count) -> Iterable", "Create a range from 0 to count-1 for iteration"),
    ),
    # Method-style builtins are called on a receiver and have no signature help.
    ("append", "Method to add elements to arrays", "array.append(value) - Add value to array", None),
    (
        "toString",
        "Method to convert values to strings",
        "value.toString() -> String - Convert to string",
        None,
    ),
)

_PROPERTIES: tuple[tuple[str, str, str], ...] = (
    (
        "length",
        "Property to get length of strings, arrays, or dictionaries",
        "Get length of string, array, or dictionary",
    ),
)


def build_default_entries() -> tuple[CatalogEntry, ...]:
    entries: list[CatalogEntry] = []
    for name, documentation in _KEYWORDS:
        entries.append(
            CatalogEntry(
                name=name,
                kind=CatalogKind.KEYWORD,
                documentation=documentation,
                detail=f"Bread keyword: {name}",
            )
        )
    for name, documentation in _TYPES:
        entries.append(
            CatalogEntry(
                name=name,
                kind=CatalogKind.TYPE,
                documentation=documentation,
                detail=f"Bread type: {name}",
            )
        )
    for name, documentation, detail, signature in _BUILTINS:
        entries.append(
            CatalogEntry(
                name=name,
                kind=CatalogKind.BUILTIN_FUNCTION,
                documentation=documentation,
                detail=detail,
                signature=signature,
            )
        )
    for name, documentation, detail in _PROPERTIES:
        entries.append(
            CatalogEntry(
                name=name,
                kind=CatalogKind.PROPERTY,
                documentation=documentation,
                detail=detail,
            )
        )
    return tuple(entries)


@lru_cache(maxsize=1)
def default_catalog() -> SymbolCatalog:
    """Process-wide catalog, built once and shared by reference."""
    return SymbolCatalog(build_default_entries())


def lookup(name: str) -> CatalogEntry | None:
    return default_catalog().lookup(name)
