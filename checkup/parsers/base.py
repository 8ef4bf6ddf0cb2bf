import re
from typing import List, Pattern

# Líneas de ruido: teléfono enmascarado, fecha al inicio y rótulos del formulario
IGNORE_PATTERNS: List[Pattern[str]] = [
    re.compile(r"\d{3}\*{3,}\d+"),  # 176****3916
    re.compile(r"^\d{4}[-/]\d{1,2}[-/]\d{1,2}"),  # 2025-04-24, 2025/4/24
    re.compile(r"^姓名"),
    re.compile(r"^性别"),
    re.compile(r"^年龄"),
    re.compile(r"^科室"),
    re.compile(r"^医院"),
    re.compile(r"^报告"),
    re.compile(r"^检查"),
    re.compile(r"^送检"),
]

REPORT_KEYWORDS = ("检查", "检验", "结果", "参考", "正常", "mmol", "g/L", "U/L", "血", "尿")

_NUMBER = re.compile(r"\d+\.?\d*")


def split_lines(text: str) -> List[str]:
    """Divide en líneas (\\n, \\r\\n o \\r); conserva las vacías."""
    return re.split(r"\r\n|\n|\r", text or "")


def should_ignore_line(line: str) -> bool:
    trimmed = line.strip()
    if not trimmed:
        return True
    return any(p.search(trimmed) for p in IGNORE_PATTERNS)


def is_valid_extracted_text(text: str, min_length: int = 100) -> bool:
    """Heuristic used on PDF text before falling back to OCR.

    True when the text is long enough, mentions at least one report keyword
    and carries at least one number.
    """
    if len(text or "") <= min_length:
        return False
    has_keyword = any(k in text for k in REPORT_KEYWORDS)
    return has_keyword and _NUMBER.search(text) is not None
