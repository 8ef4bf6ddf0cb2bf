# flake8: noqa

from loguru import logger

from checkup.parsers.aliases import INDICATOR_ALIASES, canonical_name, iter_aliases
from checkup.parsers.base import is_valid_extracted_text, should_ignore_line
from checkup.parsers.line_parser import parse_generic_pattern, parse_line
from checkup.parsers.ranges import parse_range
from checkup.parsers.report import parse_report

REPORT = """某某医院体检报告
姓名：张三
性别：男
2025-04-24
联系电话 176****3916
白细胞计数 WBC 5.00 10^9/L 4-10
红细胞计数 RBC 4.85 10^12/L 4.3-5.8
血红蛋白 HGB 150 g/L 130-175
血小板计数 PLT 320 10^9/L 125-350
空腹血糖 GLU 6.8 mmol/L 3.9-6.1
随机文字没有数字
白细胞 7.20 10^9/L 4-10
"""


# ----------------- AliasTable -----------------
def test_canonical_name_exact_and_case_sensitive():
    assert canonical_name("WBC") == "白细胞计数"
    assert canonical_name("白细胞") == "白细胞计数"
    assert canonical_name("wbc") is None
    assert canonical_name("不存在") is None


def test_aliases_longest_first():
    lengths = [len(a) for a, _ in iter_aliases()]
    assert lengths == sorted(lengths, reverse=True)
    assert len(lengths) == len(INDICATOR_ALIASES)


# ----------------- LineFilter -----------------
def test_ignore_phone_and_date():
    assert should_ignore_line("176****3916")
    assert should_ignore_line("2025-04-24")
    assert should_ignore_line("2025/4/24 上午")
    # menos de tres asteriscos no es un teléfono enmascarado
    assert not should_ignore_line("176**3916")


def test_ignore_blank_and_form_labels():
    assert should_ignore_line("")
    assert should_ignore_line("   \t")
    assert should_ignore_line("姓名：张三")
    assert should_ignore_line("  送检医生：李四")
    assert not should_ignore_line("白细胞计数 WBC 5.00 10^9/L 4-10")


# ----------------- RangeParser -----------------
def test_parse_range_forms():
    assert parse_range("3.5-9.5") == (3.5, 9.5)
    assert parse_range("3.5~9.5") == (3.5, 9.5)
    assert parse_range("<0.5") == (None, 0.5)
    assert parse_range(">120") == (120.0, None)
    assert parse_range("") == (None, None)
    assert parse_range("阴性") == (None, None)


# ----------------- LineParser -----------------
def test_parse_line_known_alias_scenario():
    ind = parse_line("白细胞计数 WBC 5.00 10^9/L 4-10")
    assert ind is not None
    assert ind.name == "白细胞计数"
    assert ind.value == 5.0
    assert ind.unit == "10^9/L"
    assert ind.reference_range == "4-10"


def test_parse_line_prefers_longest_alias():
    assert parse_line("眼压-右眼 15 10-21").name == "眼压-右眼"
    assert parse_line("右眼眼压 16 10-21").name == "眼压-右眼"


def test_parse_line_generic_fallback():
    ind = parse_line("总胆红素 TBIL 12.5 umol/L 3.4-20.5")
    assert ind.name == "总胆红素"
    assert ind.value == 12.5
    assert ind.unit == "umol/L"
    assert ind.reference_range == "3.4-20.5"

    ind = parse_line("尿比重 1.020")
    assert ind.name == "尿比重"
    assert ind.value == 1.02
    assert ind.unit == ""


def test_generic_known_abbreviation_overrides_name():
    ind = parse_generic_pattern("血糖 GLU 5.1 mmol/L 3.9-6.1")
    assert ind.name == "空腹血糖"
    assert ind.value == 5.1


def test_parse_line_no_match():
    assert parse_line("随机文字没有数字") is None
    assert parse_line("WBC 结果见附页") is None
    assert parse_line("") is None


# ----------------- ReportParser -----------------
def test_parse_report_scenario():
    report = parse_report(REPORT)
    assert report.names() == ["白细胞计数", "红细胞计数", "血红蛋白", "血小板计数", "空腹血糖"]
    wbc = report.indicators[0]
    assert (wbc.reference_min, wbc.reference_max) == (4.0, 10.0)
    assert not wbc.is_abnormal
    assert report.abnormal_count == 1
    assert report.raw_text == REPORT


def test_parse_report_first_occurrence_wins():
    report = parse_report("白细胞 5.5 10^9/L 4-10\nWBC 12.0 10^9/L 4-10\n")
    assert len(report.indicators) == 1
    assert report.indicators[0].value == 5.5


def test_parse_report_is_idempotent_on_raw_text():
    first = parse_report(REPORT)
    again = parse_report(first.raw_text)
    assert [(i.name, i.value, i.reference_min, i.reference_max) for i in again.indicators] == [
        (i.name, i.value, i.reference_min, i.reference_max) for i in first.indicators
    ]


def test_parse_report_empty_and_noise_only():
    assert parse_report("").indicators == []
    report = parse_report("176****3916\r\n2025-04-24\r\n随机文字没有数字")
    assert report.indicators == []
    assert report.abnormal_count == 0


def test_unparseable_range_is_never_abnormal():
    report = parse_report("尿比重 1.020")
    ind = report.indicators[0]
    assert ind.reference_min is None and ind.reference_max is None
    assert not ind.is_abnormal


# ----------------- Calidad del texto extraído -----------------
def test_extracted_text_quality():
    assert not is_valid_extracted_text("血常规 5.0")
    assert is_valid_extracted_text(REPORT * 2)
    assert not is_valid_extracted_text("x" * 200)


def test_parse_report_logs_skipped_lines():
    messages = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        parse_report("176****3916\n随机文字没有数字\n白细胞 5.5 4-10\nWBC 6.0 4-10\n")
    finally:
        logger.remove(sink_id)
    assert any(m.startswith("Línea 1:") and "ruido" in m for m in messages)
    assert any(m.startswith("Línea 2:") and "sin indicador" in m for m in messages)
    assert any(m.startswith("Línea 4:") and "duplicado" in m for m in messages)
