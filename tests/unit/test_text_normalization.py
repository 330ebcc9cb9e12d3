"""텍스트 정규화 유닛 테스트"""
import pytest

from src.utils.text import normalize_text, split_words, coerce_text


# 글자 변형은 코드 포인트로 명시 (에디터 자동 변환 방지)
PERSIAN_YEH = "\u06cc"
ARABIC_YEH = "\u064a"
PERSIAN_KEHEH = "\u06a9"
ARABIC_KAF = "\u0643"
TEH_MARBUTA = "\u0629"
HEH = "\u0647"
ALEF_MADDA = "\u0622"
ALEF = "\u0627"
ZWNJ = "\u200c"


class TestNormalizeText:
    """페르시아어 정규화 테스트"""

    def test_lowercase_latin(self):
        """라틴 문자 소문자 변환"""
        assert normalize_text("Ceramic MUG") == "ceramic mug"

    def test_trim(self):
        """앞뒤 공백 제거"""
        assert normalize_text("   کاسه  ") == normalize_text("کاسه")
        assert normalize_text("  abc\t\n") == "abc"

    def test_yeh_variants_unified(self):
        """yeh 두 형태가 같은 값으로"""
        assert normalize_text(PERSIAN_YEH) == normalize_text(ARABIC_YEH) == ARABIC_YEH

    def test_keh_variants_unified(self):
        """keh/kaf 두 형태가 같은 값으로"""
        persian_book = PERSIAN_KEHEH + "تاب"
        arabic_book = ARABIC_KAF + "تاب"
        assert normalize_text(persian_book) == normalize_text(arabic_book)

    def test_teh_marbuta_to_heh(self):
        assert normalize_text(TEH_MARBUTA) == HEH

    def test_alef_madda_to_alef(self):
        """آبی → ابی"""
        assert normalize_text(ALEF_MADDA + "ب" + PERSIAN_YEH) == ALEF + "ب" + ARABIC_YEH

    def test_zwnj_becomes_space(self):
        """반공백(ZWNJ) → 일반 공백"""
        text = "م" + PERSIAN_YEH + ZWNJ + "روم"
        assert normalize_text(text) == "م" + ARABIC_YEH + " " + "روم"

    def test_zwnj_at_edges_trimmed(self):
        assert normalize_text(ZWNJ + "abc" + ZWNJ) == "abc"

    def test_empty_string(self):
        assert normalize_text("") == ""
        assert normalize_text("   ") == ""

    def test_non_string_is_empty(self):
        """비문자열 상품명은 예외 없이 빈 문자열"""
        assert normalize_text(None) == ""
        assert normalize_text(123) == ""
        assert normalize_text(["کاسه"]) == ""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "  Ceramic Mug ",
            "کاسه سفالی دست ساز",
            "لعاب آبی",
            "م" + PERSIAN_YEH + ZWNJ + "روم",
            ZWNJ + ZWNJ,
            "MADDA " + ALEF_MADDA + TEH_MARBUTA,
        ],
    )
    def test_idempotent(self, text):
        """normalize(normalize(s)) == normalize(s)"""
        once = normalize_text(text)
        assert normalize_text(once) == once


class TestTokenize:
    """공백 단어 분리 테스트"""

    def test_split_collapses_whitespace(self):
        assert split_words("  a   b\tc ") == ["a", "b", "c"]

    def test_split_empty(self):
        assert split_words("") == []
        assert split_words("   ") == []


def test_coerce_text():
    assert coerce_text("abc") == "abc"
    assert coerce_text(None) == ""
    assert coerce_text(3.5) == ""
