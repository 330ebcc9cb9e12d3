"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 주입
- 전역 상태 초기화
"""

from __future__ import annotations

import copy
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.fixtures import CATEGORIES, PRODUCTS  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@dataclass
class FakeRedis:
    """최근 검색어 서비스 Unit 테스트용 인메모리 Redis

    - get/setex/delete/ping 만 지원
    - 저장된 값과 TTL을 메모리에 유지
    """

    store: dict[str, str] = field(default_factory=dict)
    ttls: dict[str, int] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self.store.get(key)

    def setex(self, key: str, ttl: int, value: str) -> bool:
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    def delete(self, key: str) -> int:
        existed = key in self.store
        self.store.pop(key, None)
        self.ttls.pop(key, None)
        return 1 if existed else 0

    def ping(self) -> bool:
        return True


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def product_rows() -> list[dict[str, Any]]:
    """상품 dict 목록 (테스트마다 복사본)"""
    return copy.deepcopy(PRODUCTS)


@pytest.fixture
def category_rows() -> list[dict[str, Any]]:
    return copy.deepcopy(CATEGORIES)


@pytest.fixture
def product_repository(product_rows, category_rows):
    from src.repositories.impl.product_repository import ProductRepository

    return ProductRepository(products=product_rows, categories=category_rows)
