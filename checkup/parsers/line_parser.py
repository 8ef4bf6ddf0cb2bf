import re
from typing import Optional, Tuple

from .aliases import canonical_name, iter_aliases
from .models import ParsedIndicator
from .ranges import RANGE_RE

VALUE_RE = re.compile(r"^[^\d]*?(\d+\.?\d*)")
UNIT_RE = re.compile(r"^([a-zA-Z/%μ*^\d]+(?:/[a-zA-Z\d]+)?)")

# nombre chino [abreviatura] valor [unidad] [rango]
# p.ej. "白细胞计数 WBC 5.00 10^9/L 4-10"
GENERIC_RE = re.compile(
    r"^([\u4e00-\u9fa5]+(?:-[\u4e00-\u9fa5]+)?)"
    r"\s*([A-Za-z#]+)?"
    r"\s*(\d+\.?\d*)"
    r"\s*([a-zA-Z/%μ*^\d]+(?:/[a-zA-Z\d]+)?)?"
    r"\s*([\d.\-~]+)?"
)


def extract_value(line: str, alias: str) -> Optional[Tuple[float, str, str]]:
    """Return (value, unit, raw range text) found after ``alias`` in ``line``."""
    pos = line.find(alias)
    if pos < 0:
        return None
    remaining = line[pos + len(alias):].strip()

    m = VALUE_RE.search(remaining)
    if not m:
        return None
    value = float(m.group(1))

    # unidad: lo que sigue inmediatamente al valor
    after_value = remaining[m.end(1):].strip()
    um = UNIT_RE.search(after_value)
    unit = um.group(1) if um else ""

    # el rango se busca en toda la línea
    rm = RANGE_RE.search(line)
    ref_range = rm.group(0) if rm else ""

    return value, unit, ref_range


def parse_known_indicator(line: str) -> Optional[ParsedIndicator]:
    for alias, standard in iter_aliases():
        if alias not in line:
            continue
        found = extract_value(line, alias)
        if found is None:
            continue
        value, unit, ref_range = found
        return ParsedIndicator(name=standard, value=value, unit=unit, reference_range=ref_range)
    return None


def parse_generic_pattern(line: str) -> Optional[ParsedIndicator]:
    m = GENERIC_RE.search(line)
    if not m:
        return None

    name = m.group(1).strip()
    abbr = m.group(2)
    # Si la abreviatura es conocida manda sobre el nombre capturado
    if abbr and canonical_name(abbr):
        name = canonical_name(abbr)

    try:
        value = float(m.group(3))
    except (TypeError, ValueError):
        return None

    return ParsedIndicator(
        name=canonical_name(name) or name,
        value=value,
        unit=m.group(4) or "",
        reference_range=m.group(5) or "",
    )


def parse_line(line: str) -> Optional[ParsedIndicator]:
    """Known aliases first, then the generic layout. None when nothing matches."""
    trimmed = line.strip()
    if not trimmed:
        return None
    return parse_known_indicator(trimmed) or parse_generic_pattern(trimmed)
