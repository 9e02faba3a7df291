import logging
import random
from typing import Iterable, Optional

from charmarkov.analytics.generation import PhraseSettings, phrase
from charmarkov.analytics.markov import MarkovModel, add_list, empty
from charmarkov.analytics.stats import chain_stats
from charmarkov.config import settings

logger = logging.getLogger(__name__)


def train(strings: Iterable[str], characters: Optional[Iterable[str]] = None,
          model: Optional[MarkovModel] = None) -> MarkovModel:
    strings = list(strings)
    if model is None:
        if characters is None:
            characters = sorted({c for s in strings for c in s})
        model = empty(characters)
    elif characters is not None:
        raise ValueError("pass either characters or model, not both")
    return add_list(strings, model)


def _rng(seed: int | None) -> random.Random:
    if seed is None:
        seed = settings.seed
    return random.Random(seed)


def generate(model: MarkovModel, max_length: int | None = None, seed: int | None = None) -> str:
    cfg = PhraseSettings(max_length=settings.max_length if max_length is None else max_length)
    chars, _ = phrase(cfg, model, _rng(seed))
    return ''.join(chars)


def generate_many(model: MarkovModel, count: int, max_length: int | None = None,
                  seed: int | None = None) -> list[str]:
    cfg = PhraseSettings(max_length=settings.max_length if max_length is None else max_length)
    rng = _rng(seed)
    out = []
    for _ in range(count):
        chars, rng = phrase(cfg, model, rng)
        out.append(''.join(chars))
    logger.debug("generated %d phrases", len(out))
    return out


def describe(model: MarkovModel) -> dict:
    return chain_stats(model).model_dump()
