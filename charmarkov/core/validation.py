def is_single_char(c) -> bool:
    return isinstance(c, str) and len(c) == 1

def is_count(v) -> bool:
    # bool is an int subclass but never a valid cell
    return isinstance(v, int) and not isinstance(v, bool) and v >= 0
