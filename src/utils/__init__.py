"""Utilities package

- hash_utils: 캐시 키 생성
- resource_loader: YAML 리소스 로딩
- text/: 정규화, 유사도, 관련도 점수
"""

from .hash_utils import hash_string, generate_recent_searches_key
from .resource_loader import load_catalog, load_yaml_resource

from .text import (
    calculate_relevance_score,
    normalize_text,
)

__all__ = [
    # hash
    "hash_string",
    "generate_recent_searches_key",
    # resources
    "load_catalog",
    "load_yaml_resource",
    # text
    "calculate_relevance_score",
    "normalize_text",
]
