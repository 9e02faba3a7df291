"""Weighted random walk over a trained model.

Randomness always comes from a caller-owned ``random.Random`` so a walk is
reproducible from its seed and concurrent walks never share generator state.
"""
from __future__ import annotations

import logging
import random

from pydantic import BaseModel, PositiveInt

from charmarkov.analytics.markov import MarkovModel
from charmarkov.core.elements import START, END, Character, Element

logger = logging.getLogger(__name__)


class PhraseSettings(BaseModel):
    max_length: PositiveInt


def step(model: MarkovModel, current: Element, rng: random.Random) -> Element:
    """Draw the element following ``current``.

    An element outside the alphabet has the single choice End. A row whose
    counts are all zero also yields End, without consuming randomness.
    """
    candidates = model.row(current)
    if candidates is None:
        candidates = [(1, END)]
    weights = [w for w, _ in candidates]
    if not any(weights):
        return END
    return rng.choices([el for _, el in candidates], weights=weights)[0]


def walk(model: MarkovModel, start: Element, max_length: int, rng: random.Random) -> list[str]:
    out: list[str] = []
    current = start
    while len(out) < max_length:
        nxt = step(model, current, rng)
        if not isinstance(nxt, Character):
            break
        out.append(nxt.char)
        current = nxt
    return out


def phrase(settings: PhraseSettings, model: MarkovModel, rng: random.Random) -> tuple[list[str], random.Random]:
    out = walk(model, START, settings.max_length, rng)
    logger.debug("generated %d chars (cap %d)", len(out), settings.max_length)
    return out, rng
