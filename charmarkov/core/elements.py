"""Transition endpoints: the Start and End sentinels plus single characters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from charmarkov.core.validation import is_single_char

START_TOKEN = "start"
END_TOKEN = "end"


@dataclass(frozen=True)
class Start:
    def key(self) -> int:
        return -2

    def __repr__(self):
        return "START"


@dataclass(frozen=True)
class End:
    def key(self) -> int:
        return -1

    def __repr__(self):
        return "END"


@dataclass(frozen=True)
class Character:
    char: str

    def __post_init__(self):
        if not is_single_char(self.char):
            raise ValueError(f"Character needs exactly one char, got {self.char!r}")

    def key(self) -> int:
        return ord(self.char)


Element = Union[Start, End, Character]

START = Start()
END = End()


def element_key(element: Element) -> int:
    """Canonical integer key: -2 Start, -1 End, code point for characters.

    Sorting by this key gives Start < End < Character(c) ordered by c.
    """
    return element.key()


def element_token(element: Element) -> str:
    if isinstance(element, Start):
        return START_TOKEN
    if isinstance(element, End):
        return END_TOKEN
    return element.char


def token_element(token: str, strict: bool = False) -> Element:
    """Parse a serialized token back into an element.

    Only the first character of a longer token is kept unless ``strict``
    is set, in which case such a token raises ``ValueError``.
    """
    if token == START_TOKEN:
        return START
    if token == END_TOKEN:
        return END
    if not isinstance(token, str) or not token:
        raise ValueError(f"empty or non-string token {token!r}")
    if len(token) > 1 and strict:
        raise ValueError(f"token {token!r} is longer than one character")
    return Character(token[0])
