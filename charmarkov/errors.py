class CharMarkovError(Exception):
    """Base class for errors raised by charmarkov."""


class MatrixIndexError(CharMarkovError, IndexError):
    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"cell ({row}, {col}) outside {size}x{size} matrix")
        self.row = row
        self.col = col
        self.size = size


class DecodeError(CharMarkovError, ValueError):
    """Serialized model could not be turned back into a model."""

    def __init__(self, problems: list[str] | str):
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        super().__init__("; ".join(self.problems) or "invalid serialized model")
