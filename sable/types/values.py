"""Value model for Sable.

Every datum the reader produces and the evaluator consumes is an instance of
one of the classes below. The set is closed: consumers dispatch on the exact
class (see ``VALUE_TYPES``), and two values of different kinds never compare
equal, even where the underlying Python objects would (``1 == True``).

    - symbols  -> Symbol("name")
    - integers -> Integer(int), arbitrary precision
    - strings  -> Str("text")
    - booleans -> Boolean(True/False)
    - chars    -> Char("c"), exactly one codepoint
    - lists    -> List(*elements)
    - vectors  -> Vector(*elements)
"""

from __future__ import annotations

import sys
from typing import Iterator


class Value:
    """Base class of the closed datum variant."""

    __slots__ = ()

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class Symbol(Value):
    __slots__ = ("name",)
    __match_args__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError(f"Symbol name must be a str, got {name!r}")
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def _key(self):
        return self.name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class Integer(Value):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: int):
        # bool is an int subclass; keep Boolean and Integer apart
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Integer expects an int, got {value!r}")
        self.value = value

    def _key(self):
        return self.value

    def __repr__(self):
        return f"Integer({self.value})"

    def __int__(self):
        return self.value


class Str(Value):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise TypeError(f"Str expects a str, got {value!r}")
        self.value = value

    def _key(self):
        return self.value

    def __repr__(self):
        return f"Str({self.value!r})"

    def __len__(self):
        return len(self.value)


class Boolean(Value):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: bool):
        if not isinstance(value, bool):
            raise TypeError(f"Boolean expects a bool, got {value!r}")
        self.value = value

    def _key(self):
        return self.value

    def __repr__(self):
        return f"Boolean({self.value})"


class Char(Value):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: str):
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"Char expects exactly one character, got {value!r}")
        self.value = value

    def _key(self):
        return self.value

    def __repr__(self):
        return f"Char({self.value!r})"


class _Sequence(Value):
    """Shared behaviour of List and Vector: an owned, immutable run of Values."""

    __slots__ = ("elements",)
    __match_args__ = ("elements",)

    def __init__(self, *elements: Value):
        for element in elements:
            if not isinstance(element, Value):
                raise TypeError(
                    f"{type(self).__name__} elements must be Values, got {element!r}"
                )
        self.elements: tuple[Value, ...] = elements

    def _key(self):
        return self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    def __repr__(self):
        inner = ", ".join(repr(e) for e in self.elements)
        return f"{type(self).__name__}({inner})"


class List(_Sequence):
    __slots__ = ()


class Vector(_Sequence):
    """Fixed-length, 0-indexed; ``Vector()`` is the valid empty vector."""

    __slots__ = ()


VALUE_TYPES: tuple[type[Value], ...] = (Symbol, Integer, Str, Boolean, Char, List, Vector)

TRUE = Boolean(True)
FALSE = Boolean(False)
NIL = List()

QUOTE = Symbol("quote")
QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")
