from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple, TypeVar


class BodyZone(str, Enum):
    FULL_BODY = "全身"
    HEAD = "头部"
    EYE = "眼科"
    EAR = "耳鼻喉"
    ORAL = "口腔"
    THYROID = "甲状腺"
    CHEST = "胸部"
    HEART = "心血管"
    LUNG = "肺部"
    LIVER = "肝脏"
    KIDNEY = "肾脏"
    DIGESTIVE = "消化系统"
    BLOOD = "血液"
    URINARY = "泌尿系统"
    REPRODUCTIVE = "生殖系统"
    BONE = "骨骼"
    SKIN = "皮肤"
    NERVOUS = "神经系统"


class IndicatorCategory(str, Enum):
    ROUTINE = "常规检查"
    BLOOD_ROUTINE = "血常规"
    BLOOD_BIOCHEMISTRY = "血生化"
    URINE_ROUTINE = "尿常规"
    THYROID_FUNCTION = "甲状腺功能"
    TUMOR_MARKER = "肿瘤标志物"
    IMAGING = "影像检查"
    ELECTROCARDIOGRAM = "心电图"
    VISION = "视力检查"
    HEARING = "听力检查"
    OTHER = "其他"


class ClassificationConfidence(str, Enum):
    HIGH = "high"  # coincidencia exacta con una plantilla existente (la decide el llamador)
    MEDIUM = "medium"  # coincidencia por palabra clave
    LOW = "low"  # valores por defecto


@dataclass(frozen=True)
class IndicatorClassification:
    body_zone: BodyZone
    category: IndicatorCategory
    confidence: ClassificationConfidence


class IndicatorClassifying(Protocol):
    """Anything that maps (name, unit) to a classification, synchronously and totally."""

    def classify(self, name: str, unit: str = "") -> IndicatorClassification: ...


T = TypeVar("T")
Rules = Tuple[Tuple[T, Tuple[str, ...]], ...]

# Orden de evaluación = prioridad. "碱性磷酸酶" aparece en hígado y hueso: gana hígado.
BODY_ZONE_RULES: Rules = (
    (BodyZone.BLOOD, (
        "血细胞", "红细胞", "白细胞", "血小板", "血红蛋白",
        "淋巴", "粒细胞", "单核", "嗜酸", "嗜碱",
        "网织红", "血沉", "凝血", "纤维蛋白",
    )),
    (BodyZone.LIVER, (
        "肝", "转氨酶", "alt", "ast", "ggt", "胆红素",
        "白蛋白", "球蛋白", "碱性磷酸酶", "alp",
        "谷丙", "谷草", "胆汁酸",
    )),
    (BodyZone.KIDNEY, ("肾", "肌酐", "尿素", "尿酸", "bun", "crea", "胱抑素", "肾小球")),
    (BodyZone.HEART, (
        "心", "血压", "收缩压", "舒张压", "脉搏",
        "心率", "心电", "心肌", "肌钙蛋白", "bnp",
        "同型半胱氨酸",
    )),
    (BodyZone.THYROID, ("甲状腺", "tsh", "t3", "t4", "ft3", "ft4", "甲功", "抗甲状腺")),
    # lípidos -> cardiovascular
    (BodyZone.HEART, ("胆固醇", "甘油三酯", "脂蛋白", "hdl", "ldl", "载脂蛋白", "血脂")),
    # glucosa -> metabolismo general
    (BodyZone.FULL_BODY, ("血糖", "葡萄糖", "糖化", "胰岛素", "c肽", "glu", "hba1c")),
    (BodyZone.DIGESTIVE, ("胃", "消化", "淀粉酶", "脂肪酶", "幽门", "胃蛋白酶", "胃泌素")),
    (BodyZone.URINARY, (
        "尿常规", "尿蛋白", "尿糖", "尿隐血", "尿胆", "尿比重", "尿ph", "尿白细胞",
    )),
    (BodyZone.EYE, ("眼", "视力", "眼压", "裸眼", "矫正视力")),
    (BodyZone.EAR, ("听力", "耳", "鼻", "咽")),
    (BodyZone.ORAL, ("口腔", "牙", "龋")),
    (BodyZone.LUNG, ("肺", "肺活量", "呼吸", "fvc", "fev")),
    (BodyZone.BONE, ("骨", "骨密度", "钙", "磷", "维生素d", "碱性磷酸酶")),
    # marcadores tumorales -> órgano relacionado
    (BodyZone.LIVER, ("afp", "甲胎蛋白")),
    (BodyZone.REPRODUCTIVE, ("psa", "前列腺")),
    (BodyZone.FULL_BODY, ("cea", "癌胚抗原", "ca", "肿瘤标志")),
    (BodyZone.REPRODUCTIVE, ("睾酮", "雌激素", "孕酮", "卵泡", "黄体", "精液", "前列腺")),
    (BodyZone.FULL_BODY, ("身高", "体重", "bmi", "体重指数", "腰围")),
)

CATEGORY_RULES: Rules = (
    (IndicatorCategory.BLOOD_ROUTINE, (
        "血细胞", "红细胞", "白细胞", "血小板", "血红蛋白",
        "淋巴", "粒细胞", "单核", "嗜酸", "嗜碱",
        "网织红", "血沉", "rbc", "wbc", "hgb", "plt",
    )),
    (IndicatorCategory.URINE_ROUTINE, (
        "尿常规", "尿蛋白", "尿糖", "尿隐血", "尿胆",
        "尿比重", "尿ph", "尿白细胞", "尿红细胞",
    )),
    # función hepática
    (IndicatorCategory.BLOOD_BIOCHEMISTRY, (
        "转氨酶", "alt", "ast", "ggt", "胆红素",
        "白蛋白", "球蛋白", "碱性磷酸酶", "alp",
        "谷丙", "谷草", "胆汁酸", "肝功",
    )),
    # función renal
    (IndicatorCategory.BLOOD_BIOCHEMISTRY, ("肌酐", "尿素", "尿酸", "bun", "肾功")),
    # lípidos
    (IndicatorCategory.BLOOD_BIOCHEMISTRY, ("胆固醇", "甘油三酯", "脂蛋白", "hdl", "ldl", "血脂")),
    (IndicatorCategory.THYROID_FUNCTION, ("甲状腺", "tsh", "t3", "t4", "ft3", "ft4", "甲功")),
    (IndicatorCategory.TUMOR_MARKER, (
        "afp", "甲胎蛋白", "cea", "癌胚抗原", "ca", "psa", "前列腺特异", "肿瘤标志",
    )),
    (IndicatorCategory.ROUTINE, ("身高", "体重", "bmi", "血压", "脉搏", "心率")),
    (IndicatorCategory.VISION, ("视力", "眼压")),
    (IndicatorCategory.HEARING, ("听力",)),
    (IndicatorCategory.ELECTROCARDIOGRAM, ("心电", "ecg")),
)


def _first_match(text: str, rules: Sequence[Tuple[T, Tuple[str, ...]]]) -> Optional[T]:
    for tag, keywords in rules:
        if any(k.lower() in text for k in keywords):
            return tag
    return None


class KeywordIndicatorClassifier:
    """Ordered first-match keyword rules over the lower-cased name.

    ``unit`` is accepted for future rules; the current tables only look at
    the name.
    """

    def __init__(self, body_zone_rules: Rules = BODY_ZONE_RULES, category_rules: Rules = CATEGORY_RULES):
        self.body_zone_rules = body_zone_rules
        self.category_rules = category_rules

    def infer_body_zone(self, name: str, unit: str = "") -> Tuple[BodyZone, bool]:
        """(zone, matched); matched is False when the FULL_BODY default was used."""
        zone = _first_match((name or "").lower(), self.body_zone_rules)
        if zone is None:
            return BodyZone.FULL_BODY, False
        return zone, True

    def infer_category(self, name: str, unit: str = "") -> IndicatorCategory:
        category = _first_match((name or "").lower(), self.category_rules)
        return category if category is not None else IndicatorCategory.OTHER

    def classify(self, name: str, unit: str = "") -> IndicatorClassification:
        body_zone, zone_matched = self.infer_body_zone(name, unit)
        category = self.infer_category(name, unit)
        if zone_matched or category != IndicatorCategory.OTHER:
            confidence = ClassificationConfidence.MEDIUM
        else:
            confidence = ClassificationConfidence.LOW
        return IndicatorClassification(body_zone=body_zone, category=category, confidence=confidence)


default_classifier = KeywordIndicatorClassifier()
