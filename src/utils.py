from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value, digits=0):
    """Round like a person would (2.5 -> 3), not banker's rounding."""
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if digits == 0:
        return int(rounded)
    return float(rounded)


def display_width(text: str) -> int:
    # any non-ASCII code point is treated as a double-width glyph
    return sum(2 if ord(ch) > 0x7F else 1 for ch in text)


def pad_to_width(text: str, width: int) -> str:
    padding = max(width - display_width(text), 0)
    return text + " " * padding


def truncate(text: str, limit: int, keep: int) -> str:
    if len(text) > limit:
        return text[:keep] + "..."
    return text
