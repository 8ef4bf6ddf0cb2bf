from typing import Any, Dict, Optional

import yaml

from checkup.classification.classifier import (
    IndicatorClassification,
    IndicatorClassifying,
    default_classifier,
)
from checkup.commons.types import Gender, IndicatorTemplate, Settings
from checkup.evaluation.status import HealthStatus, ReferenceRange, evaluate_status, status_for_range
from checkup.parsers.base import is_valid_extracted_text
from checkup.parsers.models import ParsedReport
from checkup.parsers.report import parse_report
from checkup.validation.validators import validate_report_payload_or_raise


class ReportEngine:
    """Engine facade that loads config and exposes parse/classify/status.

    Accepts a YAML path, an already loaded dict, or nothing (defaults).
    """

    def __init__(
        self,
        config_path_or_obj: Any = None,
        classifier: Optional[IndicatorClassifying] = None,
    ):
        if isinstance(config_path_or_obj, str):
            with open(config_path_or_obj, "r", encoding="utf-8") as f:
                self.cfg = yaml.safe_load(f) or {}
        elif isinstance(config_path_or_obj, dict):
            self.cfg = config_path_or_obj
        else:
            self.cfg = {}

        self.settings = Settings.model_validate(self.cfg)
        self.critical_threshold = self.settings.evaluator.critical_deviation
        self.classifier = classifier or default_classifier

    def parse(self, text: str) -> ParsedReport:
        return parse_report(text)

    def is_valid_text(self, text: str) -> bool:
        return is_valid_extracted_text(text, self.settings.parser.min_text_length)

    def classify(self, name: str, unit: str = "") -> IndicatorClassification:
        return self.classifier.classify(name, unit)

    def status(
        self,
        value: float,
        template: Optional[IndicatorTemplate],
        gender: Optional[Gender] = None,
    ) -> HealthStatus:
        gender = gender or self.settings.import_.default_gender
        return evaluate_status(value, template, gender, self.critical_threshold)

    def status_for_range(self, value: float, min_: Optional[float], max_: Optional[float]) -> HealthStatus:
        return status_for_range(value, ReferenceRange(min_, max_), self.critical_threshold)

    def to_payload(self, report: ParsedReport) -> Dict:
        """Map a ParsedReport into a plain dict, validated before returning."""
        payload = {
            "indicators": [
                {
                    "name": i.name,
                    "value": i.value,
                    "unit": i.unit,
                    "reference_range": i.reference_range,
                    "reference_min": i.reference_min,
                    "reference_max": i.reference_max,
                    "is_abnormal": i.is_abnormal,
                }
                for i in report.indicators
            ],
            "abnormal_count": report.abnormal_count,
            "raw_text": report.raw_text or "",
            "parse_date": report.parse_date.isoformat(),
        }
        validate_report_payload_or_raise(payload)
        return payload

    def parse_and_map(self, text: str) -> Dict:
        return self.to_payload(self.parse(text))
