# flake8: noqa

import pytest

from checkup.classification.classifier import (
    BodyZone,
    ClassificationConfidence,
    IndicatorCategory,
    KeywordIndicatorClassifier,
    default_classifier,
)


def test_blood_routine():
    c = default_classifier.classify("白细胞计数", "10^9/L")
    assert c.body_zone == BodyZone.BLOOD
    assert c.category == IndicatorCategory.BLOOD_ROUTINE
    assert c.confidence == ClassificationConfidence.MEDIUM


def test_earlier_rule_wins_for_shared_keyword():
    # "碱性磷酸酶" está en hígado y en hueso
    c = default_classifier.classify("碱性磷酸酶", "U/L")
    assert c.body_zone == BodyZone.LIVER
    assert c.category == IndicatorCategory.BLOOD_BIOCHEMISTRY


def test_latin_names_are_lowercased():
    c = default_classifier.classify("TSH", "mIU/L")
    assert c.body_zone == BodyZone.THYROID
    assert c.category == IndicatorCategory.THYROID_FUNCTION


def test_eye_pressure():
    c = default_classifier.classify("眼压", "mmHg")
    assert c.body_zone == BodyZone.EYE
    assert c.category == IndicatorCategory.VISION


def test_full_body_keyword_hit_is_medium():
    c = default_classifier.classify("空腹血糖", "mmol/L")
    assert c.body_zone == BodyZone.FULL_BODY
    assert c.category == IndicatorCategory.OTHER
    assert c.confidence == ClassificationConfidence.MEDIUM


def test_default_fallback_is_low():
    c = default_classifier.classify("未知项目", "")
    assert c.body_zone == BodyZone.FULL_BODY
    assert c.category == IndicatorCategory.OTHER
    assert c.confidence == ClassificationConfidence.LOW


def test_unit_does_not_change_result():
    assert default_classifier.classify("白细胞计数", "mmHg") == default_classifier.classify("白细胞计数", "")


@pytest.mark.parametrize("name", ["", "   ", "123", "!!", "Ω", "超长" * 50])
def test_classify_is_total(name):
    c = default_classifier.classify(name, "")
    assert isinstance(c.body_zone, BodyZone)
    assert isinstance(c.category, IndicatorCategory)
    assert c.confidence != ClassificationConfidence.HIGH


def test_custom_rules():
    clf = KeywordIndicatorClassifier(body_zone_rules=((BodyZone.SKIN, ("皮",)),), category_rules=())
    c = clf.classify("皮肤弹性", "")
    assert c.body_zone == BodyZone.SKIN
    assert c.category == IndicatorCategory.OTHER
    assert c.confidence == ClassificationConfidence.MEDIUM
