"""
  Sable Reader

- Recursive descent over the source string, one method per production.
- Every production returns ``(value, next_position)`` on success or a
  ``ParseFailure``; failures short-circuit back to the caller untouched.
- Emits the closed Value variant:

    - #t / #f / #true / #false -> Boolean
    - #\\c, #\\space           -> Char
    - "text"                  -> Str  (only \\" is an escape)
    - 123, #b101, #o17, #d9, #xff -> Integer
    - (a b c)                 -> List
    - #(a b c)                -> Vector
    - 'x `x ,x ,@x            -> List(Symbol("quote"), x), etc.
    - anything else           -> Symbol

Unknown ``#`` forms (``#zoo``) are not an error here; they fall through to
the symbol rule.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from sable.config import depth_ceiling, get_max_depth
from sable.types.errors import ParseFailure, ReadResult
from sable.types.values import (
    Boolean,
    Char,
    Integer,
    List,
    QUASIQUOTE,
    QUOTE,
    Str,
    Symbol,
    UNQUOTE,
    UNQUOTE_SPLICING,
    Value,
    Vector,
)

log = logging.getLogger(__name__)

Parsed = Union[tuple[Value, int], ParseFailure]

# Characters that end a symbol, number or boolean token.
DELIMITERS = frozenset("()\";'`,")

RADIX_PREFIXES: dict[str, int] = {"b": 2, "o": 8, "d": 10, "x": 16}

RADIX_DIGITS: dict[int, frozenset[str]] = {
    2: frozenset("01"),
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

# Longest spelling first so "#true" is not cut short at "#t".
BOOLEAN_NAMES: tuple[tuple[str, bool], ...] = (
    ("true", True),
    ("false", False),
    ("t", True),
    ("f", False),
)

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
    "linefeed": "\n",
    "tab": "\t",
    "return": "\r",
    "nul": "\x00",
    "null": "\x00",
    "alarm": "\x07",
    "backspace": "\x08",
    "page": "\x0c",
    "escape": "\x1b",
    "altmode": "\x1b",
    "delete": "\x7f",
    "rubout": "\x7f",
}

QUOTE_SUGAR: dict[str, Symbol] = {
    ",@": UNQUOTE_SPLICING,
    "'": QUOTE,
    "`": QUASIQUOTE,
    ",": UNQUOTE,
}


def positional_value(digits: str, radix: int) -> int:
    """Most-significant digit first expansion of `digits` in `radix`."""
    value = 0
    for digit in digits:
        value = value * radix + int(digit, 16)
    return value


class Reader:
    """Reads datums out of one source string. One instance per input."""

    def __init__(self, text: str, max_depth: Optional[int] = None):
        self.text = text
        self.n = len(text)
        if max_depth is None:
            self.max_depth = get_max_depth()
        else:
            self.max_depth = min(max_depth, depth_ceiling())

    def fail(self, position: int, message: str) -> ParseFailure:
        log.debug("read failed at %d: %s", position, message)
        return ParseFailure(position, message, self.text)

    # ------------------------
    # Lexical helpers
    # ------------------------
    def at_delimiter(self, pos: int) -> bool:
        if pos >= self.n:
            return True
        ch = self.text[pos]
        return ch.isspace() or ch in DELIMITERS

    def scan_while(self, pos: int, accept: Callable[[str], bool]) -> int:
        while pos < self.n and accept(self.text[pos]):
            pos += 1
        return pos

    def scan_token(self, pos: int) -> int:
        while not self.at_delimiter(pos):
            pos += 1
        return pos

    def skip_atmosphere(self, pos: int) -> Union[int, ParseFailure]:
        """Skip whitespace, ; line comments and nested #| |# block comments."""
        text, n = self.text, self.n
        while pos < n:
            ch = text[pos]
            if ch.isspace():
                pos += 1
            elif ch == ";":
                newline = text.find("\n", pos)
                pos = n if newline == -1 else newline + 1
            elif text.startswith("#|", pos):
                start = pos
                pos += 2
                depth = 1
                while depth > 0:
                    if pos >= n:
                        return self.fail(start, "unterminated block comment")
                    if text.startswith("#|", pos):
                        depth += 1
                        pos += 2
                    elif text.startswith("|#", pos):
                        depth -= 1
                        pos += 2
                    else:
                        pos += 1
            else:
                break
        return pos

    # ------------------------
    # Productions
    # ------------------------
    def read_datum(self, pos: int, depth: int = 0) -> Parsed:
        pos = self.skip_atmosphere(pos)
        if isinstance(pos, ParseFailure):
            return pos
        if pos >= self.n:
            return self.fail(pos, "unexpected end of input")
        if depth > self.max_depth:
            return self.fail(pos, f"nesting deeper than {self.max_depth} levels")

        ch = self.text[pos]
        if ch == '"':
            return self.read_string(pos)
        if ch in "'`,":
            return self.read_quoted(pos, depth)
        if ch == "(":
            return self.read_list(pos, depth)
        if ch == ")":
            return self.fail(pos, "unexpected ')'")
        if ch == "#":
            result = self.read_hash(pos, depth)
            if result is not None:
                return result
        if ch in RADIX_DIGITS[10]:
            return self.read_number(pos, pos, 10)
        return self.read_symbol(pos)

    def read_hash(self, pos: int, depth: int) -> Optional[Parsed]:
        """Dispatch on the character after '#'. None means "not a # form"."""
        nxt = self.text[pos + 1] if pos + 1 < self.n else ""
        if nxt == "(":
            return self.read_vector(pos, depth)
        if nxt == "\\":
            return self.read_char(pos)
        if nxt and nxt.lower() in RADIX_PREFIXES:
            return self.read_number(pos, pos + 2, RADIX_PREFIXES[nxt.lower()])
        if nxt and nxt.lower() in "tf":
            return self.read_boolean(pos)
        return None

    def read_boolean(self, pos: int) -> Optional[Parsed]:
        for name, flag in BOOLEAN_NAMES:
            end = pos + 1 + len(name)
            if self.text[pos + 1:end].lower() == name and self.at_delimiter(end):
                return Boolean(flag), end
        return None

    def read_char(self, pos: int) -> Parsed:
        start = pos + 2
        if start >= self.n:
            return self.fail(pos, "expected a character after '#\\'")
        end = self.scan_token(start)
        if end - start > 1:
            named = NAMED_CHARS.get(self.text[start:end].lower())
            if named is not None:
                return Char(named), end
        return Char(self.text[start]), start + 1

    def read_string(self, pos: int) -> Parsed:
        text, n = self.text, self.n
        chars: list[str] = []
        i = pos + 1
        while i < n:
            ch = text[i]
            if ch == '"':
                return Str("".join(chars)), i + 1
            if ch == "\\" and i + 1 < n and text[i + 1] == '"':
                chars.append('"')
                i += 2
                continue
            chars.append(ch)
            i += 1
        return self.fail(pos, "unterminated string literal")

    def read_number(self, pos: int, start: int, radix: int) -> Parsed:
        """Digits of `radix` from `start`; `pos` is where the literal began."""
        alphabet = RADIX_DIGITS[radix]
        end = self.scan_while(start, alphabet.__contains__)
        if end == start:
            prefix = self.text[pos:start]
            return self.fail(pos, f"expected base-{radix} digits after {prefix!r}")
        return Integer(positional_value(self.text[start:end], radix)), end

    def read_quoted(self, pos: int, depth: int) -> Parsed:
        for sugar, head in QUOTE_SUGAR.items():
            if self.text.startswith(sugar, pos):
                break
        start = pos + len(sugar)
        result = self.read_datum(start, depth + 1)
        if isinstance(result, ParseFailure):
            return result
        value, end = result
        return List(head, value), end

    def read_sequence(
        self, pos: int, start: int, depth: int, what: str
    ) -> Union[tuple[list[Value], int], ParseFailure]:
        """Datums up to the closing ')'. `pos` is the opening delimiter."""
        elements: list[Value] = []
        i = start
        while True:
            i = self.skip_atmosphere(i)
            if isinstance(i, ParseFailure):
                return i
            if i >= self.n:
                return self.fail(pos, f"unterminated {what}: missing ')'")
            if self.text[i] == ")":
                return elements, i + 1
            result = self.read_datum(i, depth + 1)
            if isinstance(result, ParseFailure):
                return result
            value, i = result
            elements.append(value)

    def read_list(self, pos: int, depth: int) -> Parsed:
        result = self.read_sequence(pos, pos + 1, depth, "list")
        if isinstance(result, ParseFailure):
            return result
        elements, end = result
        return List(*elements), end

    def read_vector(self, pos: int, depth: int) -> Parsed:
        result = self.read_sequence(pos, pos + 2, depth, "vector")
        if isinstance(result, ParseFailure):
            return result
        elements, end = result
        return Vector(*elements), end

    def read_symbol(self, pos: int) -> Parsed:
        end = self.scan_token(pos)
        name = self.text[pos:end]
        if name == ".":
            return self.fail(pos, "dotted lists are not supported")
        return Symbol(name), end

    # ------------------------
    # Whole-input drivers
    # ------------------------
    def read(self) -> ReadResult:
        result = self.read_datum(0)
        if isinstance(result, ParseFailure):
            return result
        return result[0]

    def read_all(self) -> Union[list[Value], ParseFailure]:
        values: list[Value] = []
        pos = 0
        while True:
            pos = self.skip_atmosphere(pos)
            if isinstance(pos, ParseFailure):
                return pos
            if pos >= self.n:
                return values
            result = self.read_datum(pos)
            if isinstance(result, ParseFailure):
                return result
            value, pos = result
            values.append(value)


def read(text: str) -> ReadResult:
    """Read the first datum in `text`. Trailing text is left unread."""
    return Reader(text).read()


def read_all(text: str) -> Union[list[Value], ParseFailure]:
    """Read every datum in `text`, or the first failure."""
    return Reader(text).read_all()
