import re
from typing import Optional, Tuple

RANGE_RE = re.compile(r"(\d+\.?\d*)\s*[-~]\s*(\d+\.?\d*)")
LESS_THAN_RE = re.compile(r"<\s*(\d+\.?\d*)")
GREATER_THAN_RE = re.compile(r">\s*(\d+\.?\d*)")


def parse_range(text: str) -> Tuple[Optional[float], Optional[float]]:
    """Return (min, max) for "min-max", "min~max", "<max" or ">min".

    Empty or unrecognised text gives (None, None).
    """
    if not text:
        return None, None

    m = RANGE_RE.search(text)
    if m:
        return float(m.group(1)), float(m.group(2))

    m = LESS_THAN_RE.search(text)
    if m:
        return None, float(m.group(1))

    m = GREATER_THAN_RE.search(text)
    if m:
        return float(m.group(1)), None

    return None, None
