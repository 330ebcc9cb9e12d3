"""Persian search text normalization."""

from __future__ import annotations

from typing import Any

from ..core.cleaning import coerce_text


# 출처(입력기/데이터)마다 섞여 쓰이는 글자 변형을 하나의 형태로 통일
# - ی (U+06CC, 페르시아 yeh)   → ي (U+064A, 아랍 yeh)
# - ک (U+06A9, 페르시아 keheh) → ك (U+0643, 아랍 kaf)
# - ة (U+0629, teh marbuta)    → ه (U+0647, heh)
# - آ (U+0622, alef madda)     → ا (U+0627, alef)
# - ZWNJ (U+200C, 반공백)       → 일반 공백
_CHAR_TABLE = str.maketrans({
    "ی": "ي",
    "ک": "ك",
    "ة": "ه",
    "آ": "ا",
    "\u200c": " ",
})


def normalize_text(text: Any) -> str:
    """검색 비교용 텍스트 정규화

    시각적으로 같은 문자열이 같은 값으로 비교되도록 정규화합니다.

    적용 순서:
        1. 소문자 변환 (라틴 문자)
        2. 페르시아어 글자 변형 통일 (yeh, keh, teh marbuta, alef madda)
        3. ZWNJ → 공백
        4. 앞뒤 공백 제거

    예시:
        - "کتاب" (페르시아 keheh/yeh) == "كتاب" (아랍 kaf)
        - "لعاب آبی" -> "لعاب ابي"

    Args:
        text: 원본 문자열 (문자열이 아니면 빈 문자열로 취급)

    Returns:
        정규화된 문자열. 멱등: normalize_text(normalize_text(s)) == normalize_text(s)
    """
    text = coerce_text(text)
    if not text:
        return ""

    return text.lower().translate(_CHAR_TABLE).strip()
