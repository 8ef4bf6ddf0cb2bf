from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field

from checkup.classification.classifier import BodyZone, IndicatorCategory


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class TrendPreference(str, Enum):
    HIGHER_BETTER = "higher_better"
    LOWER_BETTER = "lower_better"
    RANGE_OPTIMAL = "range_optimal"
    STABLE = "stable"


class IndicatorTemplate(BaseModel):
    name: str
    english_name: Optional[str] = None
    abbreviation: Optional[str] = None
    unit: str = ""
    body_zone: BodyZone = BodyZone.BLOOD
    category: IndicatorCategory = IndicatorCategory.OTHER
    description: Optional[str] = None
    trend_preference: TrendPreference = TrendPreference.RANGE_OPTIMAL

    reference_range_min: Optional[float] = None
    reference_range_max: Optional[float] = None
    reference_range_text: str = "-"
    reference_range_note: Optional[str] = None

    # rangos por sexo
    male_range_min: Optional[float] = None
    male_range_max: Optional[float] = None
    female_range_min: Optional[float] = None
    female_range_max: Optional[float] = None

    def reference_range(self, gender: Gender) -> Tuple[Optional[float], Optional[float]]:
        """Gender-specific pair if either bound is set for ``gender``, else the neutral pair."""
        if gender == Gender.MALE and (
            self.male_range_min is not None or self.male_range_max is not None
        ):
            return self.male_range_min, self.male_range_max
        if gender == Gender.FEMALE and (
            self.female_range_min is not None or self.female_range_max is not None
        ):
            return self.female_range_min, self.female_range_max
        return self.reference_range_min, self.reference_range_max

    def is_in_range(self, value: float, gender: Gender) -> bool:
        lo, hi = self.reference_range(gender)
        above_min = lo is None or value >= lo
        below_max = hi is None or value <= hi
        return above_min and below_max

    def matches(self, name: str) -> bool:
        return name in (self.name, self.english_name, self.abbreviation)


class EvaluatorCfg(BaseModel):
    critical_deviation: float = Field(default=0.2, gt=0)


class ParserCfg(BaseModel):
    min_text_length: int = Field(default=100, ge=0)


class ImportCfg(BaseModel):
    default_gender: Gender = Gender.MALE


class Settings(BaseModel):
    app: Dict[str, Any] = {}
    paths: Dict[str, str] = {}
    parser: ParserCfg = ParserCfg()
    evaluator: EvaluatorCfg = EvaluatorCfg()
    # "import" es palabra reservada
    import_: ImportCfg = Field(default_factory=ImportCfg, alias="import")

    model_config = {"populate_by_name": True}
