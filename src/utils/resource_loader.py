"""리소스 파일(YAML) 로더 유틸리티"""
import os
import yaml
from typing import Any, Dict
from functools import lru_cache

from src.core.logging import logger


def get_resource_path(relative_path: str) -> str:
    """프로젝트 루트 기준 리소스 절대 경로 반환"""
    # src/utils/resource_loader.py -> src/utils -> src -> root
    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱

    Raises:
        FileNotFoundError: 리소스 파일이 없는 경우
        yaml.YAMLError: YAML 파싱 실패
    """
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.warning(f"Resource not found: {path}")
        raise FileNotFoundError(path)

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise yaml.YAMLError(f"Resource root must be a mapping: {path}")
    return data


def load_catalog(relative_path: str) -> Dict[str, list]:
    """카탈로그(상품/카테고리) 리소스 로드

    Raises:
        FileNotFoundError: 리소스 파일이 없는 경우
        yaml.YAMLError: YAML 파싱 실패 또는 products/categories가 리스트가 아닌 경우
    """
    data = load_yaml_resource(relative_path)

    catalog: Dict[str, list] = {}
    for section in ("products", "categories"):
        rows = data.get(section) or []
        if not isinstance(rows, list):
            raise yaml.YAMLError(f"'{section}' must be a list: {relative_path}")
        catalog[section] = list(rows)
    return catalog
