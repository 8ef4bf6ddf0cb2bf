from typing import Dict, Iterator, Optional, Tuple

# alias (nombre chino, abreviatura, sigla inglesa) -> nombre canónico
INDICATOR_ALIASES: Dict[str, str] = {
    # 血常规
    "白细胞": "白细胞计数",
    "白细胞计数": "白细胞计数",
    "WBC": "白细胞计数",
    "红细胞": "红细胞计数",
    "红细胞计数": "红细胞计数",
    "RBC": "红细胞计数",
    "血红蛋白": "血红蛋白",
    "HGB": "血红蛋白",
    "Hb": "血红蛋白",
    "血小板": "血小板计数",
    "血小板计数": "血小板计数",
    "PLT": "血小板计数",
    "中性粒细胞": "中性粒细胞绝对值",
    "中性粒细胞绝对值": "中性粒细胞绝对值",
    "GRAN#": "中性粒细胞绝对值",
    "淋巴细胞": "淋巴细胞绝对值",
    "淋巴细胞绝对值": "淋巴细胞绝对值",
    "淋巴细胞计数": "淋巴细胞绝对值",
    "LYM#": "淋巴细胞绝对值",
    "单核细胞": "单核细胞绝对值",
    "单核细胞绝对值": "单核细胞绝对值",
    "Mono#": "单核细胞绝对值",
    "嗜酸性粒细胞": "嗜酸性粒细胞绝对值",
    "嗜酸性粒细胞绝对值": "嗜酸性粒细胞绝对值",
    "Eos#": "嗜酸性粒细胞绝对值",
    # 血生化
    "空腹血糖": "空腹血糖",
    "葡萄糖": "空腹血糖",
    "GLU": "空腹血糖",
    "FBG": "空腹血糖",
    "总胆固醇": "总胆固醇",
    "TC": "总胆固醇",
    "CHO": "总胆固醇",
    "甘油三酯": "甘油三酯",
    "TG": "甘油三酯",
    "高密度脂蛋白": "高密度脂蛋白胆固醇",
    "HDL-C": "高密度脂蛋白胆固醇",
    "HDL": "高密度脂蛋白胆固醇",
    "低密度脂蛋白": "低密度脂蛋白胆固醇",
    "LDL-C": "低密度脂蛋白胆固醇",
    "LDL": "低密度脂蛋白胆固醇",
    "尿酸": "尿酸",
    "UA": "尿酸",
    "肌酐": "肌酐",
    "Cr": "肌酐",
    "CREA": "肌酐",
    "尿素氮": "尿素氮",
    "BUN": "尿素氮",
    "谷丙转氨酶": "谷丙转氨酶",
    "ALT": "谷丙转氨酶",
    "谷草转氨酶": "谷草转氨酶",
    "AST": "谷草转氨酶",
    # 血压
    "收缩压": "收缩压",
    "舒张压": "舒张压",
    "高压": "收缩压",
    "低压": "舒张压",
    # 眼压
    "眼压": "眼压",
    "眼压-右眼": "眼压-右眼",
    "眼压-左眼": "眼压-左眼",
    "右眼眼压": "眼压-右眼",
    "左眼眼压": "眼压-左眼",
    # 甲状腺
    "促甲状腺激素": "促甲状腺激素",
    "TSH": "促甲状腺激素",
    "游离T3": "游离三碘甲状腺原氨酸",
    "FT3": "游离三碘甲状腺原氨酸",
    "游离T4": "游离甲状腺素",
    "FT4": "游离甲状腺素",
    # 肿瘤标志物
    "甲胎蛋白": "甲胎蛋白",
    "AFP": "甲胎蛋白",
    "癌胚抗原": "癌胚抗原",
    "CEA": "癌胚抗原",
}

# Más largo primero: "白细胞计数" gana a "白细胞", "HDL-C" a "HDL".
# sorted() es estable, así que los empates respetan el orden de la tabla.
_ALIASES_BY_PRIORITY: Tuple[Tuple[str, str], ...] = tuple(
    sorted(INDICATOR_ALIASES.items(), key=lambda kv: len(kv[0]), reverse=True)
)


def canonical_name(raw: str) -> Optional[str]:
    """Exact, case-sensitive lookup."""
    return INDICATOR_ALIASES.get(raw)


def iter_aliases() -> Iterator[Tuple[str, str]]:
    """(alias, canonical) pairs in matching priority order."""
    return iter(_ALIASES_BY_PRIORITY)
