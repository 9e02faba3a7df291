from typing import Annotated

from pydantic import BaseModel, Field, StrictInt, StrictStr, model_validator

from charmarkov.core.elements import START_TOKEN, END_TOKEN

Count = Annotated[StrictInt, Field(ge=0)]


class SerializedModel(BaseModel):
    """Wire shape of a model: matrix, alphabet tokens and token -> index."""

    matrix: list[list[Count]]
    alphabet: list[StrictStr]
    alphabet_lookup: dict[StrictStr, StrictInt] = Field(alias="alphabetLookup")

    @model_validator(mode="after")
    def check_shape(self):
        n = len(self.alphabet)
        if n < 2 or self.alphabet[0] != START_TOKEN or self.alphabet[-1] != END_TOKEN:
            raise ValueError("alphabet must begin with 'start' and end with 'end'")
        if len(self.matrix) != n:
            raise ValueError(f"matrix has {len(self.matrix)} rows, alphabet has {n} entries")
        for i, row in enumerate(self.matrix):
            if len(row) != n:
                raise ValueError(f"matrix row {i} has {len(row)} cells, expected {n}")
        if len(set(self.alphabet)) != n:
            raise ValueError("alphabet contains duplicate tokens")
        expected = {tok: i for i, tok in enumerate(self.alphabet)}
        if self.alphabet_lookup != expected:
            raise ValueError("alphabetLookup does not match alphabet positions")
        return self
