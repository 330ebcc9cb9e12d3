"""Text cleaning helpers."""

from __future__ import annotations

from typing import Any


def coerce_text(value: Any) -> str:
    """
    외부 데이터(상품 레코드 등)의 텍스트 필드를 안전하게 문자열로 변환

    상품 데이터의 완전성은 보장되지 않으므로 None/숫자 등
    문자열이 아닌 값은 예외 대신 빈 문자열로 취급합니다.

    Args:
        value: 원본 값

    Returns:
        문자열 (문자열이 아니면 "")
    """
    if not isinstance(value, str):
        return ""
    return value
