"""상품 카탈로그 리포지토리 - YAML 리소스 기반 인메모리 카탈로그."""

from __future__ import annotations

from typing import Any, Iterable, Optional

import yaml
from pydantic import ValidationError

from src.core.config import settings
from src.core.exceptions import ProductFetchException
from src.core.logging import logger
from src.schemas.product_schema import Category, Product
from src.utils.resource_loader import load_catalog


class ProductRepository:
    """읽기 전용 상품 카탈로그

    검색 엔진에는 이미 메모리에 올라온 상품 목록만 전달합니다.
    데이터를 직접 넘기면 리소스 파일을 읽지 않습니다.
    """

    def __init__(
        self,
        products: Optional[Iterable[Any]] = None,
        categories: Optional[Iterable[Any]] = None,
        resource: Optional[str] = None,
    ):
        self.resource = resource or settings.catalog_resource
        self._products: Optional[list[Product]] = None
        self._categories: dict[str, Category] = {}

        if products is not None:
            self._products = self._parse_products(products)
            self._categories = self._parse_categories(categories or [])

    def list_products(self) -> list[Product]:
        """상품 목록 반환 (최초 호출 시 로드)

        Raises:
            ProductFetchException: 카탈로그 로드 실패
        """
        if self._products is None:
            self._load()
        return list(self._products or [])

    def get_category_name(self, category_id: Optional[str]) -> Optional[str]:
        """카테고리 ID → 카테고리명 (없으면 None)"""
        if category_id is None:
            return None
        if self._products is None:
            self._load()
        category = self._categories.get(str(category_id))
        return category.title if category else None

    def _load(self) -> None:
        try:
            data = load_catalog(self.resource)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Catalog load failed: resource={self.resource}, error={type(e).__name__}")
            raise ProductFetchException(str(e), {"resource": self.resource})

        self._products = self._parse_products(data["products"])
        self._categories = self._parse_categories(data["categories"])
        logger.info(
            f"Catalog loaded: products={len(self._products)}, categories={len(self._categories)}"
        )

    @staticmethod
    def _parse_products(rows: Iterable[Any]) -> list[Product]:
        products: list[Product] = []
        for row in rows:
            if isinstance(row, Product):
                products.append(row)
                continue
            try:
                products.append(Product.model_validate(row))
            except ValidationError as e:
                # 불완전한 레코드 하나 때문에 카탈로그 전체를 버리지 않음
                logger.warning(f"Skipping invalid product row: {e.error_count()} error(s)")
        return products

    @staticmethod
    def _parse_categories(rows: Iterable[Any]) -> dict[str, Category]:
        categories: dict[str, Category] = {}
        for row in rows:
            try:
                category = row if isinstance(row, Category) else Category.model_validate(row)
            except ValidationError as e:
                logger.warning(f"Skipping invalid category row: {e.error_count()} error(s)")
                continue
            categories[category.id] = category
        return categories
