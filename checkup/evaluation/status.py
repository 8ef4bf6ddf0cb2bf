from enum import Enum
from typing import NamedTuple, Optional

from checkup.commons.types import Gender, IndicatorTemplate

# Desviación (fracción del ancho del rango, o del límite único) a partir de la
# cual el resultado pasa a crítico. Igual para todos los indicadores.
CRITICAL_DEVIATION_THRESHOLD = 0.2


class HealthStatus(str, Enum):
    NORMAL = "normal"
    HIGH = "high"
    LOW = "low"
    CRITICAL_HIGH = "critical_high"
    CRITICAL_LOW = "critical_low"
    UNKNOWN = "unknown"

    @property
    def is_abnormal(self) -> bool:
        return self not in (HealthStatus.NORMAL, HealthStatus.UNKNOWN)

    @property
    def is_critical(self) -> bool:
        return self in (HealthStatus.CRITICAL_HIGH, HealthStatus.CRITICAL_LOW)

    @property
    def short_label(self) -> str:
        return _SHORT_LABELS[self]


_SHORT_LABELS = {
    HealthStatus.NORMAL: "Normal",
    HealthStatus.HIGH: "High",
    HealthStatus.LOW: "Low",
    HealthStatus.CRITICAL_HIGH: "High!",
    HealthStatus.CRITICAL_LOW: "Low!",
    HealthStatus.UNKNOWN: "N/A",
}


class ReferenceRange(NamedTuple):
    min: Optional[float] = None
    max: Optional[float] = None

    def contains(self, value: float) -> bool:
        return (self.min is None or value >= self.min) and (self.max is None or value <= self.max)


def calculate_deviation(value: float, rng: ReferenceRange) -> float:
    """Distance past the violated bound, normalised.

    Two-sided ranges use the range width, one-sided ranges the bound itself.
    Values inside the range give 0.
    """
    lo, hi = rng
    if lo is not None and hi is not None and hi > lo:
        width = hi - lo
        if value < lo:
            return (lo - value) / width
        if value > hi:
            return (value - hi) / width
        return 0.0

    if hi is not None and value > hi:
        return (value - hi) / hi if hi else float("inf")
    if lo is not None and value < lo:
        return (lo - value) / lo if lo else float("inf")
    return 0.0


def status_for_range(
    value: float,
    rng: ReferenceRange,
    critical_threshold: float = CRITICAL_DEVIATION_THRESHOLD,
) -> HealthStatus:
    if rng.contains(value):
        return HealthStatus.NORMAL

    if rng.max is not None and value > rng.max:
        is_high = True
    elif rng.min is not None and value < rng.min:
        is_high = False
    else:
        # límite único: el lado lo marca el límite presente
        is_high = rng.max is not None

    is_critical = calculate_deviation(value, rng) > critical_threshold
    if is_high:
        return HealthStatus.CRITICAL_HIGH if is_critical else HealthStatus.HIGH
    return HealthStatus.CRITICAL_LOW if is_critical else HealthStatus.LOW


def evaluate_status(
    value: float,
    template: Optional[IndicatorTemplate],
    gender: Gender = Gender.MALE,
    critical_threshold: float = CRITICAL_DEVIATION_THRESHOLD,
) -> HealthStatus:
    """Status of ``value`` against ``template``'s range for ``gender``; UNKNOWN without template."""
    if template is None:
        return HealthStatus.UNKNOWN
    rng = ReferenceRange(*template.reference_range(gender))
    return status_for_range(value, rng, critical_threshold)
