# checkup/services/import_service.py
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional, Protocol

from checkup.classification.classifier import (
    ClassificationConfidence,
    IndicatorClassifying,
    default_classifier,
)
from checkup.commons.logger import logger
from checkup.commons.types import Gender, IndicatorTemplate
from checkup.evaluation.status import CRITICAL_DEVIATION_THRESHOLD, HealthStatus, evaluate_status
from checkup.parsers.models import ParsedIndicator, ParsedReport


class RecordSource(str, Enum):
    MANUAL = "manual"
    OCR = "ocr"
    IMPORTED = "imported"


class TemplateStore(Protocol):
    def find(self, name: str) -> Optional[IndicatorTemplate]: ...

    def add(self, template: IndicatorTemplate) -> None: ...


class InMemoryTemplateStore:
    def __init__(self, templates: Iterable[IndicatorTemplate] = ()):
        self._templates: List[IndicatorTemplate] = list(templates)

    def find(self, name: str) -> Optional[IndicatorTemplate]:
        return next((t for t in self._templates if t.matches(name)), None)

    def add(self, template: IndicatorTemplate) -> None:
        self._templates.append(template)

    def __len__(self) -> int:
        return len(self._templates)


@dataclass
class ImportedRecord:
    value: float
    test_date: date
    template: IndicatorTemplate
    status: HealthStatus
    confidence: ClassificationConfidence
    source: RecordSource = RecordSource.OCR
    created_template: bool = False


class ImportService:
    """Links parsed indicators to templates and builds records ready to store.

    Existing templates are matched by exact name/English name/abbreviation;
    anything else gets a new template classified by keyword.
    """

    def __init__(
        self,
        store: TemplateStore,
        classifier: IndicatorClassifying = default_classifier,
        critical_threshold: float = CRITICAL_DEVIATION_THRESHOLD,
    ):
        self.store = store
        self.classifier = classifier
        self.critical_threshold = critical_threshold

    def template_for(self, indicator: ParsedIndicator):
        """Return (template, confidence, created)."""
        existing = self.store.find(indicator.name)
        if existing is not None:
            return existing, ClassificationConfidence.HIGH, False

        cls = self.classifier.classify(indicator.name, indicator.unit)
        template = IndicatorTemplate(
            name=indicator.name,
            unit=indicator.unit,
            body_zone=cls.body_zone,
            category=cls.category,
            reference_range_min=indicator.reference_min,
            reference_range_max=indicator.reference_max,
            reference_range_text=indicator.reference_range or "-",
        )
        self.store.add(template)
        logger.info(
            f"Plantilla nueva '{template.name}' ({cls.body_zone.value}/{cls.category.value}, "
            f"confianza {cls.confidence.value})"
        )
        return template, cls.confidence, True

    def import_report(
        self,
        report: ParsedReport,
        test_date: Optional[date] = None,
        gender: Gender = Gender.MALE,
        source: RecordSource = RecordSource.OCR,
    ) -> List[ImportedRecord]:
        if not report.indicators:
            logger.warning("Reporte sin indicadores reconocidos, nada que importar")
            return []

        test_date = test_date or report.parse_date.date()
        records: List[ImportedRecord] = []
        for indicator in report.indicators:
            template, confidence, created = self.template_for(indicator)
            status = evaluate_status(indicator.value, template, gender, self.critical_threshold)
            records.append(
                ImportedRecord(
                    value=indicator.value,
                    test_date=test_date,
                    template=template,
                    status=status,
                    confidence=confidence,
                    source=source,
                    created_template=created,
                )
            )

        logger.info(
            f"Importados {len(records)} registros "
            f"({sum(1 for r in records if r.created_template)} plantillas nuevas)"
        )
        return records
