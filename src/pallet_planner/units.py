import math

INCH = float
LB = float


def parse_float(value: str) -> float:
    text = value.strip()
    if not text:
        raise ValueError("empty input")
    text = text.replace(",", ".")
    return float(text)


def to_number(value) -> float:
    """Coerce ``value`` to a finite float.

    Accepts ints, floats and numeric strings (comma decimal separator
    allowed). Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, str):
        number = parse_float(value)
    elif isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise ValueError(f"number too large: {value!r}") from None
    else:
        raise ValueError(f"not a number: {value!r}")
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def format_inches(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
