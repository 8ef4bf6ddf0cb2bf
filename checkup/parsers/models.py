# ===============================
# File: checkup/parsers/models.py
# ===============================
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class ParsedIndicator:
    name: str
    value: float
    unit: str = ""
    reference_range: str = ""  # texto original, p.ej. "3.5-9.5" o "<0.5"
    reference_min: Optional[float] = None
    reference_max: Optional[float] = None

    @property
    def is_abnormal(self) -> bool:
        """Fuera de los límites presentes; sin límites nunca es anormal."""
        if self.reference_min is not None and self.value < self.reference_min:
            return True
        if self.reference_max is not None and self.value > self.reference_max:
            return True
        return False


@dataclass
class ParsedReport:
    indicators: List[ParsedIndicator]
    raw_text: str
    parse_date: datetime = field(default_factory=datetime.now)

    @property
    def abnormal_count(self) -> int:
        return sum(1 for i in self.indicators if i.is_abnormal)

    def names(self) -> List[str]:
        return [i.name for i in self.indicators]
