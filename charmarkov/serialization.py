"""Lossless conversion between a model and its plain-data form.

``encode`` yields::

    {"matrix": [[0, 1], [0, 0]], "alphabet": ["start", "end"],
     "alphabetLookup": {"start": 0, "end": 1}}

``decode`` accepts that shape and raises ``DecodeError`` for anything else.
"""
import logging

from pydantic import ValidationError

from charmarkov.analytics.markov import MarkovModel
from charmarkov.config import settings
from charmarkov.core.alphabet import Alphabet
from charmarkov.core.elements import element_token, token_element
from charmarkov.core.matrix import TransitionMatrix
from charmarkov.errors import DecodeError
from charmarkov.schemas import SerializedModel

logger = logging.getLogger(__name__)


def _to_schema(model: MarkovModel) -> SerializedModel:
    tokens = [element_token(el) for el in model.alphabet]
    return SerializedModel.model_validate({
        "matrix": model.matrix.to_lists(),
        "alphabet": tokens,
        "alphabetLookup": {tok: i for i, tok in enumerate(tokens)},
    })


def _from_schema(data: SerializedModel, strict: bool) -> MarkovModel:
    elements = []
    for tok in data.alphabet:
        try:
            el = token_element(tok, strict=strict)
        except ValueError as exc:
            raise DecodeError(str(exc)) from exc
        if len(tok) > 1 and element_token(el) != tok:
            logger.warning("alphabet token %r truncated to %r", tok, element_token(el))
        elements.append(el)
    try:
        alphabet = Alphabet(elements)
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc
    return MarkovModel(matrix=TransitionMatrix(data.matrix), alphabet=alphabet)


def _problems(exc: ValidationError) -> list[str]:
    out = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        out.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return out


def encode(model: MarkovModel) -> dict:
    return _to_schema(model).model_dump(by_alias=True)


def decode(value, strict: bool | None = None) -> MarkovModel:
    if strict is None:
        strict = settings.strict_decode
    if not isinstance(value, dict):
        raise DecodeError(f"expected a mapping, got {type(value).__name__}")
    try:
        data = SerializedModel.model_validate(value)
    except ValidationError as exc:
        raise DecodeError(_problems(exc)) from exc
    return _from_schema(data, strict)


def to_json(model: MarkovModel, indent: int | None = None) -> str:
    return _to_schema(model).model_dump_json(by_alias=True, indent=indent)


def from_json(text: str | bytes, strict: bool | None = None) -> MarkovModel:
    if strict is None:
        strict = settings.strict_decode
    try:
        data = SerializedModel.model_validate_json(text)
    except ValidationError as exc:
        raise DecodeError(_problems(exc)) from exc
    return _from_schema(data, strict)
