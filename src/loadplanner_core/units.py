CM = float


def parse_float(value: str) -> float:
    text = value.strip()
    if not text:
        raise ValueError("empty input")
    text = text.replace(",", ".")
    return float(text)


def format_float(value: float, ndigits: int = 2) -> str:
    return f"{value:.{ndigits}f}"


def format_percent(ratio: float, ndigits: int = 2) -> str:
    return f"{ratio * 100:.{ndigits}f}%"


def parse_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
