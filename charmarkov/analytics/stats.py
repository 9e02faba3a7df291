import math

from pydantic import BaseModel

from charmarkov.analytics.markov import MarkovModel
from charmarkov.core.elements import Element, element_token


class ChainStats(BaseModel):
    counts: list[list[int]]
    transition: list[list[float]]
    entropy: dict[str, float]
    total: int


def _normalize(row) -> list[float]:
    s = sum(row)
    if s == 0:
        return [0.0] * len(row)
    return [c / s for c in row]


def _entropy(probs) -> float:
    # bits
    H = 0.0
    for p in probs:
        if p > 0:
            H -= p * math.log(p, 2)
    return H


def transition_probabilities(model: MarkovModel, from_: Element) -> dict[Element, float]:
    """P(from_ -> x) for each x with a non-zero count; {} if nothing observed."""
    row = model.row(from_)
    if row is None:
        return {}
    total = sum(w for w, _ in row)
    if total == 0:
        return {}
    return {el: w / total for w, el in row if w}


def row_entropy(model: MarkovModel, from_: Element) -> float:
    return _entropy(transition_probabilities(model, from_).values())


def chain_stats(model: MarkovModel) -> ChainStats:
    counts = model.matrix.to_lists()
    transition = [_normalize(r) for r in counts]
    entropy = {
        element_token(el): _entropy(p)
        for el, p in zip(model.alphabet, transition)
    }
    return ChainStats(counts=counts, transition=transition, entropy=entropy, total=model.matrix.total())
