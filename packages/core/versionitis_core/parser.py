"""
Range Parsing
=============

Parses compact range expressions into intervals.

Version-scoped form (``VersionIntervalParser``)::

    1.2.3              -> Single(1.2.3)
    1.2.3<2.0.0        -> HalfOpen(1.2.3, 2.0.0)
    1.2.3 <= 2.0.0     -> Open(1.2.3, 2.0.0)
    '1.2.3<2.0.0'      -> HalfOpen(1.2.3, 2.0.0)

Package-scoped form (``PackageIntervalParser``), where one name is shared by
both bounds::

    foo=1.2.3          -> Single(foo-1.2.3)
    foo = 1.2.3 < 2.0  -> HalfOpen(foo-1.2.3, foo-2.0)
    foo: '1.2.3<=2.0'  -> Open(foo-1.2.3, foo-2.0)

Grammar::

    bound     := digit+ ('.' digit+)*
    name      := [A-Za-z0-9_] [A-Za-z0-9_.-]*
    name_sep  := '=' | ':'
    range     := bound | bound ws* '<' ws* bound | bound ws* '<=' ws* bound
    version   := ws* [quote] ws* range ws* [quote] ws*
    package   := ws* [quote] ws* name ws* name_sep ws* [quote] ws* range ws* [quote] ws* [quote] ws*

Either the whole input matches and exactly one interval comes back, or
``ParseError`` is raised with the offending text and a diagnostic naming
what was expected and where.
"""

import re
from enum import Enum
from typing import Callable, Optional, Tuple

from versionitis_common.constants import (
    HALF_OPEN_OPERATOR,
    NAME_SEPARATORS,
    OPEN_OPERATOR,
    QUOTE_CHARS,
)
from versionitis_common.errors import ParseError

from .interval import HalfOpen, Interval, Open, Single
from .version import Package, VersionNumber, parse_version_number

_WHITESPACE = " \t\r\n\f\v"
_BOUND_RE = re.compile(r"[0-9]+(?:\.[0-9]+)*")
_NAME_RE = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_.\-]*")

# Characters that look like an attempt at a range operator.
_OPERATOR_LOOKALIKES = "<>=!~^,"


class RangeKind(str, Enum):
    """Shape of a parsed range."""

    SINGLE = "single"
    HALF_OPEN = "half_open"
    OPEN = "open"


class _Scanner:
    """Cursor over the input text, producing positioned diagnostics."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def accept(self, literal: str) -> bool:
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def match(self, pattern: "re.Pattern") -> Optional[str]:
        m = pattern.match(self.text, self.pos)
        if not m:
            return None
        self.pos = m.end()
        return m.group(0)

    def error(self, expected: str, pos: Optional[int] = None) -> ParseError:
        pos = self.pos if pos is None else pos
        found = repr(self.text[pos]) if pos < len(self.text) else "end of input"
        return ParseError(self.text, f"expected {expected} at position {pos}, found {found}")


class _RangeGrammar:
    """Productions shared by the version- and package-scoped parsers."""

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise ParseError(repr(text), "expected a range string")
        self.scanner = _Scanner(text)

    def open_quote(self) -> Optional[str]:
        s = self.scanner
        s.skip_ws()
        quote = s.peek()
        if quote and quote in QUOTE_CHARS:
            s.pos += 1
            s.skip_ws()
            return quote
        return None

    def close_quote(self, quote: Optional[str], opened_at: int) -> None:
        s = self.scanner
        s.skip_ws()
        if quote is None:
            return
        if not s.accept(quote):
            if s.at_end():
                raise ParseError(
                    s.text, f"unterminated quote {quote!r} opened at position {opened_at}"
                )
            raise s.error(f"closing quote {quote!r}")

    def end(self) -> None:
        s = self.scanner
        s.skip_ws()
        if not s.at_end():
            raise s.error("end of input")

    def bound(self) -> VersionNumber:
        s = self.scanner
        start = s.pos
        token = s.match(_BOUND_RE)
        if token is None:
            raise s.error("a version bound (digits separated by '.')")
        if s.peek() == ".":
            raise s.error("a digit after '.'", s.pos + 1)
        try:
            return parse_version_number(token)
        except ParseError as e:
            raise ParseError(s.text, f"{e.detail} (bound at position {start})") from e

    def range(self) -> Tuple[RangeKind, VersionNumber, Optional[VersionNumber]]:
        s = self.scanner
        start = self.bound()
        s.skip_ws()
        if s.accept(OPEN_OPERATOR):
            kind = RangeKind.OPEN
        elif s.accept(HALF_OPEN_OPERATOR):
            kind = RangeKind.HALF_OPEN
        else:
            char = s.peek()
            if char and char in _OPERATOR_LOOKALIKES:
                raise ParseError(
                    s.text,
                    f"invalid separator {char!r} at position {s.pos}; "
                    f"expected '{HALF_OPEN_OPERATOR}' or '{OPEN_OPERATOR}'",
                )
            return RangeKind.SINGLE, start, None
        s.skip_ws()
        return kind, start, self.bound()

    def quoted_range(self) -> Tuple[RangeKind, VersionNumber, Optional[VersionNumber]]:
        opened_at = self.scanner.pos
        quote = self.open_quote()
        parsed = self.range()
        self.close_quote(quote, opened_at)
        return parsed

    def name(self) -> str:
        s = self.scanner
        token = s.match(_NAME_RE)
        if token is None:
            raise s.error("a package name")
        return token

    def name_separator(self) -> None:
        s = self.scanner
        s.skip_ws()
        for separator in NAME_SEPARATORS:
            if s.accept(separator):
                return
        choices = " or ".join(repr(sep) for sep in NAME_SEPARATORS)
        raise s.error(f"{choices} after the package name")


def _build(kind: RangeKind, start, end) -> Interval:
    if kind is RangeKind.SINGLE:
        return Single(start)
    if kind is RangeKind.HALF_OPEN:
        return HalfOpen(start, end)
    return Open(start, end)


class VersionIntervalParser:
    """
    Parse version ranges such as ``1.2.3<2.0.0`` into ``Interval[VersionNumber]``.

    Example:
        >>> VersionIntervalParser.parse("1.2.3 <= 2.0.0")
        Open(start=VersionNumber('1.2.3'), end=VersionNumber('2.0.0'))
    """

    @staticmethod
    def parse(text: str) -> Interval:
        grammar = _RangeGrammar(text)
        kind, start, end = grammar.quoted_range()
        grammar.end()
        return _build(kind, start, end)


class PackageIntervalParser:
    """
    Parse package ranges such as ``foo=1.2.3<2.0.0`` into ``Interval[Package]``.

    Example:
        >>> PackageIntervalParser.parse("foo = 1.2.3 <= 2.0.0")
        Open(start=Package('foo-1.2.3'), end=Package('foo-2.0.0'))
    """

    @staticmethod
    def parse(text: str) -> Interval:
        grammar = _RangeGrammar(text)
        opened_at = grammar.scanner.pos
        outer_quote = grammar.open_quote()
        name = grammar.name()
        grammar.name_separator()
        kind, start, end = grammar.quoted_range()
        grammar.close_quote(outer_quote, opened_at)
        grammar.end()
        to_package: Callable[[Optional[VersionNumber]], Optional[Package]] = (
            lambda version: Package(name, version) if version is not None else None
        )
        return _build(kind, to_package(start), to_package(end))


def parse_version_interval(text: str) -> Interval:
    """Convenience wrapper around ``VersionIntervalParser.parse``."""
    return VersionIntervalParser.parse(text)


def parse_package_interval(text: str) -> Interval:
    """Convenience wrapper around ``PackageIntervalParser.parse``."""
    return PackageIntervalParser.parse(text)
