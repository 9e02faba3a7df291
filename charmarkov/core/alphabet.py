from __future__ import annotations

import logging
from typing import Iterable

from charmarkov.core.elements import START, END, Start, End, Character, Element, element_key
from charmarkov.core.validation import is_single_char

logger = logging.getLogger(__name__)


class Alphabet:
    """Ordered elements of a model, ``(Start, c1, ..., cn, End)``.

    Position in the sequence is the element's index in the transition matrix.
    The lookup table is built once here and never changed afterwards.
    """

    __slots__ = ("_elements", "_lookup")

    def __init__(self, elements: Iterable[Element]):
        self._elements: tuple[Element, ...] = tuple(elements)
        self._lookup: dict[int, int] = {}
        for i, el in enumerate(self._elements):
            k = element_key(el)
            if k in self._lookup:
                raise ValueError(f"duplicate element {el!r} in alphabet")
            self._lookup[k] = i

    @classmethod
    def from_characters(cls, characters: Iterable[str]) -> "Alphabet":
        chars: list[str] = []
        seen = set()
        for c in characters:
            if not is_single_char(c):
                raise ValueError(f"alphabet entries must be single characters, got {c!r}")
            if c in seen:
                logger.debug("dropping duplicate alphabet character %r", c)
                continue
            seen.add(c)
            chars.append(c)
        return cls([START, *map(Character, chars), END])

    def index_of(self, element: Element) -> int | None:
        if not isinstance(element, (Start, End, Character)):
            return None
        return self._lookup.get(element_key(element))

    def element_at(self, index: int) -> Element:
        if not 0 <= index < len(self._elements):
            raise IndexError(f"alphabet index {index} out of range")
        return self._elements[index]

    def characters(self) -> list[str]:
        return [el.char for el in self._elements if isinstance(el, Character)]

    @property
    def elements(self) -> tuple[Element, ...]:
        return self._elements

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __contains__(self, element):
        return self.index_of(element) is not None

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self):
        return hash(self._elements)

    def __repr__(self):
        return f"Alphabet({list(self._elements)!r})"


def build_alphabet(characters: Iterable[str]) -> Alphabet:
    return Alphabet.from_characters(characters)
