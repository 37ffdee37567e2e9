# tests/modules/expressions/domain/test_classification.py
"""
Tests para: classify_char / classify_char_lookup
Tipo: Unitario (Domain)
"""
import string

import pytest

from idiom_guide.modules.expressions.domain.classification import (
    CharCategory,
    classify_char,
    classify_char_lookup,
)


@pytest.mark.parametrize(
    "char, expected",
    [
        ("I", CharCategory.SOME_CHARS),
        ("N", CharCategory.SOME_CHARS),
        ("J", CharCategory.SOME_CHARS),
        ("A", CharCategory.OTHER_CHARS),
        ("C", CharCategory.OTHER_CHARS),
        ("j", CharCategory.OTHER),
        ("Z", CharCategory.OTHER),
    ],
)
def test_classify_char(char, expected):
    assert classify_char(char) is expected


def test_category_text():
    assert classify_char("I").value == "some chars"
    assert classify_char("B").value == "other chars"
    assert classify_char("x").value == "other"


def test_both_variants_agree():
    """
    Given: Todas las letras ASCII y dígitos
    When: Se clasifican con ambas variantes
    Then: Devuelven la misma categoría
    """
    for char in string.ascii_letters + string.digits:
        assert classify_char(char) is classify_char_lookup(char)


@pytest.mark.parametrize("bad", ["", "IN"])
@pytest.mark.parametrize("classifier", [classify_char, classify_char_lookup])
def test_rejects_non_single_char(classifier, bad):
    with pytest.raises(ValueError):
        classifier(bad)
