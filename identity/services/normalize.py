import re

_NON_DIGITS = re.compile(r"[^0-9]")

def require_str(value, name: str = "value") -> str:
    # None/non-str = bug appelant, pas une saisie invalide
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value

def strip_whitespace(value: str) -> str:
    return require_str(value).strip()

def digits_only(value: str) -> str:
    return _NON_DIGITS.sub("", require_str(value))

def mask(value: str, start: int, length: int | None = None, char: str = "*") -> str:
    """
    Masque `length` caractères à partir de `start` (négatif = depuis la fin).
    mask("8001015009087", 6) -> "800101*******"
    """
    require_str(value)
    n = len(value)
    if start < 0:
        start = max(0, n + start)
    start = min(start, n)
    if length is None:
        length = n - start
    length = max(0, min(length, n - start))
    return value[:start] + char * length + value[start + length:]
