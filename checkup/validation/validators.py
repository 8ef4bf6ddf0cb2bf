# checkup/validation/validators.py
import math
from typing import List, Optional

from pydantic import BaseModel, field_validator


class IndicatorPayload(BaseModel):
    name: str
    value: float
    unit: str = ""
    reference_range: str = ""
    reference_min: Optional[float] = None
    reference_max: Optional[float] = None
    is_abnormal: bool = False

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, v: str):
        if not v or not v.strip():
            raise ValueError("El nombre del indicador es obligatorio")
        return v

    @field_validator("value")
    @classmethod
    def _finite(cls, v: float):
        if not math.isfinite(v):
            raise ValueError(f"Valor no finito: {v}")
        return v


class ReportPayload(BaseModel):
    indicators: List[IndicatorPayload] = []
    abnormal_count: int = 0
    raw_text: str = ""
    parse_date: str

    @field_validator("indicators")
    @classmethod
    def _unique_names(cls, v: List[IndicatorPayload]):
        names = [i.name for i in v]
        if len(names) != len(set(names)):
            raise ValueError("Nombres de indicador repetidos")
        return v


def validate_report_payload_or_raise(payload: dict) -> ReportPayload:
    """Construye el modelo y levanta ValidationError si algo falta/está mal."""
    return ReportPayload.model_validate(payload)
