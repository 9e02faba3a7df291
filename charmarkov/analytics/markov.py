from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, replace
from typing import Iterable

from charmarkov.core.alphabet import Alphabet
from charmarkov.core.elements import START, END, Character, Element
from charmarkov.core.matrix import TransitionMatrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkovModel:
    matrix: TransitionMatrix
    alphabet: Alphabet

    def __post_init__(self):
        if self.matrix.size != len(self.alphabet):
            raise ValueError(
                f"matrix is {self.matrix.size}x{self.matrix.size} "
                f"but alphabet has {len(self.alphabet)} elements"
            )

    def index_of(self, element: Element) -> int | None:
        return self.alphabet.index_of(element)

    def count(self, from_: Element, to: Element) -> int:
        """Observed ``from_ -> to`` transitions, 0 when either is unknown."""
        r = self.index_of(from_)
        c = self.index_of(to)
        if r is None or c is None:
            return 0
        return self.matrix.get(r, c)

    def row(self, element: Element) -> list[tuple[int, Element]] | None:
        """(weight, element) pairs over the element's whole outgoing row."""
        i = self.index_of(element)
        if i is None:
            return None
        return list(zip(self.matrix.row(i), self.alphabet.elements))


def empty(characters: Iterable[str]) -> MarkovModel:
    alphabet = Alphabet.from_characters(characters)
    return MarkovModel(matrix=TransitionMatrix.zeros(len(alphabet)), alphabet=alphabet)


def add(from_: Element, to: Element, model: MarkovModel) -> MarkovModel:
    r = model.index_of(from_)
    c = model.index_of(to)
    if r is None or c is None:
        return model
    return replace(model, matrix=model.matrix.increment(r, c))


def wrap(text: str) -> list[Element]:
    return [START, *map(Character, text), END]


def add_list(strings: Iterable[str], model: MarkovModel) -> MarkovModel:
    """Same result as calling ``add`` for every adjacent pair, built in one pass."""
    counts: Counter[tuple[int, int]] = Counter()
    n = 0
    for s in strings:
        if not s:
            continue
        seq = [model.index_of(el) for el in wrap(s)]
        for r, c in zip(seq, seq[1:]):
            if r is not None and c is not None:
                counts[(r, c)] += 1
        n += 1
    if counts:
        model = replace(model, matrix=model.matrix.add_counts(counts))
    logger.debug("trained on %d strings, %d transitions total", n, model.matrix.total())
    return model


def merge(left: MarkovModel, right: MarkovModel) -> MarkovModel:
    """Sum the counts of two models trained over the same alphabet."""
    if left.alphabet != right.alphabet:
        raise ValueError("cannot merge models with different alphabets")
    return replace(left, matrix=left.matrix + right.matrix)
