"""Growable and fixed-capacity strings with the engine's string hash."""

from __future__ import annotations

_U32_MASK = 0xFFFFFFFF
_SHORT_CAPACITY = 256


def _signed_char(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def short_string_hash(text: str) -> int:
    """Hash ``text`` the way short strings are hashed (32-bit unsigned)."""
    h = 37
    for byte in text.encode("utf-8"):
        h = ((h * 54059) ^ (_signed_char(byte) * 76963)) & _U32_MASK
    return h


def _check_text(text: str) -> str:
    if "\0" in text:
        raise ValueError("strings may not contain NUL characters")
    return text


def _check_short(text: str) -> str:
    _check_text(text)
    if len(text.encode("utf-8")) > ShortString.MAX_LENGTH:
        raise ValueError(
            f"short string exceeds {ShortString.MAX_LENGTH} bytes"
        )
    return text


def _compare(text: str, other: object) -> int:
    other_text = str(other)
    return (text > other_text) - (text < other_text)


def _char_at(text: str, index: int) -> str:
    if not 0 <= index < len(text):
        raise IndexError("character index out of range")
    return text[index]


def _index_of_char(text: str, char: str) -> int:
    if len(char) != 1:
        raise ValueError("expected a single character")
    return text.find(char)


def _slice(text: str, start: int, end: int) -> str:
    if not 0 <= start <= end <= len(text):
        raise IndexError("substring bounds out of range")
    return text[start:end]


class ShortString:
    """A string limited to 255 bytes, hashed with :func:`short_string_hash`."""

    MAX_LENGTH = _SHORT_CAPACITY - 1

    __slots__ = ("_text",)

    def __init__(self, text: object = "") -> None:
        self._text = _check_short(str(text))

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ShortString):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        return f"ShortString({self._text!r})"

    def compare(self, other: object) -> int:
        """Return -1, 0 or 1 as this string sorts before, equal or after ``other``."""
        return _compare(self._text, other)

    def equals(self, other: object) -> bool:
        return self.compare(other) == 0

    def index_of_char(self, char: str) -> int:
        """Index of the first ``char``, or -1 when absent."""
        return _index_of_char(self._text, char)

    def index_of_string(self, text: object) -> int:
        """Index of the first occurrence of ``text``, or -1 when absent."""
        return self._text.find(str(text))

    def substring(self, start: int, end: int) -> ShortString:
        """Characters from ``start`` up to, not including, ``end``."""
        return ShortString(_slice(self._text, start, end))

    def char_at(self, index: int) -> str:
        return _char_at(self._text, index)

    def append(self, text: object) -> ShortString:
        """Append ``text`` in place and return this string."""
        self._text = _check_short(self._text + str(text))
        return self

    def hash(self) -> int:
        return short_string_hash(self._text)


class String:
    """A growable string."""

    __slots__ = ("_text",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: object = "") -> None:
        self._text = _check_text(str(text))

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (String, ShortString, str)):
            return self._text == str(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"String({self._text!r})"

    def append(self, text: object) -> String:
        """Append ``text`` in place and return this string."""
        self._text = _check_text(self._text + str(text))
        return self

    def substring(self, start: int, end: int) -> String:
        return String(_slice(self._text, start, end))

    def short_substring(self, start: int, end: int) -> ShortString:
        return ShortString(_slice(self._text, start, end))

    def compare(self, other: object) -> int:
        """Return -1, 0 or 1 as this string sorts before, equal or after ``other``."""
        return _compare(self._text, other)

    def equals(self, other: object) -> bool:
        return self.compare(other) == 0

    def char_at(self, index: int) -> str:
        return _char_at(self._text, index)

    def index_of_char(self, char: str) -> int:
        """Index of the first ``char``, or -1 when absent."""
        return _index_of_char(self._text, char)

    def index_of_string(self, text: object) -> int:
        """Index of the first occurrence of ``text``, or -1 when absent."""
        return self._text.find(str(text))