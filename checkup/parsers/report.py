from datetime import datetime
from typing import List, Set

from checkup.commons.logger import logger

from .base import should_ignore_line, split_lines
from .line_parser import parse_line
from .models import ParsedIndicator, ParsedReport
from .ranges import parse_range


def parse_report(text: str) -> ParsedReport:
    """Parse OCR/PDF text into a ParsedReport.

    Never raises: a report without indicators is a valid result. Indicators
    are unique by canonical name, first occurrence wins.
    """
    started = datetime.now()
    indicators: List[ParsedIndicator] = []
    seen: Set[str] = set()

    for lineno, line in enumerate(split_lines(text), start=1):
        if should_ignore_line(line):
            logger.debug(f"Línea {lineno}: ruido, se ignora")
            continue

        indicator = parse_line(line)
        if indicator is None:
            logger.debug(f"Línea {lineno}: sin indicador reconocible")
            continue

        if indicator.name in seen:
            logger.debug(f"Línea {lineno}: '{indicator.name}' duplicado, se descarta")
            continue
        seen.add(indicator.name)

        indicator.reference_min, indicator.reference_max = parse_range(indicator.reference_range)
        indicators.append(indicator)

    report = ParsedReport(indicators=indicators, raw_text=text, parse_date=started)
    logger.info(
        f"Reporte parseado: {len(indicators)} indicadores, {report.abnormal_count} fuera de rango"
    )
    return report
