import json
import os
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from checkup.commons.logger import setup_logging
from checkup.commons.report_engine import ReportEngine
from checkup.commons.types import Gender, IndicatorTemplate
from checkup.services.import_service import ImportService, InMemoryTemplateStore

app = typer.Typer(add_completion=False, help="Checkup report parser")

DEFAULT_SETTINGS = Path(__file__).resolve().parent / "checkup" / "configs" / "settings.yaml"


def load_cfg(path: Optional[str] = None) -> dict:
    config_path = Path(path or os.getenv("CHECKUP_SETTINGS", DEFAULT_SETTINGS))
    if not config_path.exists():
        return {}
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _bootstrap():
    cfg = load_cfg()
    logger = setup_logging(cfg.get("paths", {}).get("logs_root"), os.getenv("LOG_LEVEL", "INFO"))
    try:
        engine = ReportEngine(cfg)
    except ValidationError as e:
        logger.log("ERROR", f"Configuración inválida: {e}")
        raise typer.Exit(code=2)
    return engine, logger


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise typer.BadParameter(f"No se pudo leer {path}: {e}")


@app.command()
def parse(
    file: Path = typer.Argument(..., help="archivo de texto extraído (OCR/PDF)"),
    gender: Gender = typer.Option(Gender.MALE, help="sexo para evaluar el estado"),
    as_json: bool = typer.Option(False, "--json", help="imprime el payload JSON"),
):
    """Parsea un texto de informe y lista los indicadores encontrados."""
    engine, logger = _bootstrap()
    text = _read_text(file)
    if not engine.is_valid_text(text):
        logger.log("WARNING", f"{file}: el texto parece incompleto, conviene usar OCR")

    report = engine.parse(text)
    if as_json:
        typer.echo(json.dumps(engine.to_payload(report), ensure_ascii=False, indent=2))
        return

    if not report.indicators:
        typer.echo("No se reconocieron indicadores")
        return

    for ind in report.indicators:
        # plantilla provisional con los límites del propio informe
        template = IndicatorTemplate(
            name=ind.name,
            unit=ind.unit,
            reference_range_min=ind.reference_min,
            reference_range_max=ind.reference_max,
            reference_range_text=ind.reference_range or "-",
        )
        status = engine.status(ind.value, template, gender)
        typer.echo(
            f"{ind.name}\t{ind.value:g} {ind.unit}\t[{ind.reference_range or '-'}]\t{status.short_label}"
        )
    typer.echo(f"Total: {len(report.indicators)}  fuera de rango: {report.abnormal_count}")


@app.command()
def classify(
    name: str = typer.Argument(...),
    unit: str = typer.Option("", help="unidad del indicador"),
):
    """Infiere zona corporal y categoría de un indicador."""
    engine, _ = _bootstrap()
    c = engine.classify(name, unit)
    typer.echo(f"{name}\t{c.body_zone.value}\t{c.category.value}\t{c.confidence.value}")


@app.command()
def status(
    value: float = typer.Argument(...),
    min_: Optional[float] = typer.Option(None, "--min", help="límite inferior"),
    max_: Optional[float] = typer.Option(None, "--max", help="límite superior"),
):
    """Evalúa un valor contra un rango de referencia."""
    engine, _ = _bootstrap()
    if min_ is None and max_ is None:
        typer.echo("unknown")
        return
    typer.echo(engine.status_for_range(value, min_, max_).value)


@app.command("import-report")
def import_report(
    file: Path = typer.Argument(...),
    gender: Optional[Gender] = typer.Option(None, help="sexo para evaluar el estado"),
):
    """Importa un informe contra un almacén de plantillas en memoria."""
    engine, logger = _bootstrap()
    report = engine.parse(_read_text(file))
    svc = ImportService(InMemoryTemplateStore(), engine.classifier, engine.critical_threshold)
    records = svc.import_report(report, gender=gender or engine.settings.import_.default_gender)
    for r in records:
        typer.echo(
            f"{r.template.name}\t{r.value:g}\t{r.status.value}\t"
            f"{r.template.body_zone.value}/{r.template.category.value}\t{r.confidence.value}"
        )
    logger.log("INFO", f"{file}: {len(records)} registros")


if __name__ == "__main__":
    app()
