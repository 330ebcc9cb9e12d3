"""상품 리포지토리 / 검색 서비스 유닛 테스트"""
from unittest.mock import patch

import pytest
import yaml

from src.core.exceptions import ProductFetchException
from src.engine import SearchContext
from src.repositories.impl.product_repository import ProductRepository
from src.schemas.product_schema import Product, SearchResultItem
from src.services import ProductSearchService, create_search_results
from src.services.impl.search_service import UNKNOWN_CATEGORY_NAME


class TestProductRepository:
    """카탈로그 로딩 테스트"""

    def test_in_memory_rows(self, product_repository):
        products = product_repository.list_products()
        assert all(isinstance(p, Product) for p in products)
        assert [p.id for p in products] == ["1", "2", "3", "4", "5", "6"]

    def test_category_name(self, product_repository):
        assert product_repository.get_category_name("10") == "ظروف سفالی"
        assert product_repository.get_category_name("99") is None
        assert product_repository.get_category_name(None) is None

    def test_invalid_rows_skipped(self):
        repository = ProductRepository(
            products=[{"id": 1, "title": "ok"}, {"title": "no id"}, "garbage"],
            categories=[{"title": "no id"}, {"id": 7, "title": "ok"}],
        )
        assert [p.id for p in repository.list_products()] == ["1"]
        assert repository.get_category_name("7") == "ok"

    def test_loads_bundled_catalog(self):
        """resources/catalog/products.yaml"""
        repository = ProductRepository()
        products = repository.list_products()
        assert len(products) > 0
        assert repository.get_category_name(products[0].category_id)

    @patch("src.repositories.impl.product_repository.load_catalog")
    def test_missing_resource_raises(self, mock_load):
        mock_load.side_effect = FileNotFoundError("catalog/missing.yaml")
        repository = ProductRepository(resource="catalog/missing.yaml")

        with pytest.raises(ProductFetchException) as exc_info:
            repository.list_products()
        assert exc_info.value.error_code == "PRODUCT_FETCH_FAILED"

    @patch("src.repositories.impl.product_repository.load_catalog")
    def test_broken_yaml_raises(self, mock_load):
        mock_load.side_effect = yaml.YAMLError("bad indent")
        with pytest.raises(ProductFetchException):
            ProductRepository(resource="catalog/broken.yaml").list_products()

    @patch("src.utils.resource_loader.load_yaml_resource")
    def test_non_list_products_raises(self, mock_yaml):
        """products가 스칼라인 카탈로그도 로드 실패로 취급"""
        mock_yaml.return_value = {"products": 5, "categories": []}
        repository = ProductRepository(resource="catalog/scalar.yaml")

        with pytest.raises(ProductFetchException):
            repository.list_products()
        with pytest.raises(ProductFetchException):
            repository.get_category_name("1")

    @patch("src.utils.resource_loader.load_yaml_resource")
    def test_non_list_categories_raises(self, mock_yaml):
        mock_yaml.return_value = {"products": [], "categories": {"id": "1"}}
        with pytest.raises(ProductFetchException):
            ProductRepository(resource="catalog/scalar.yaml").list_products()

    @patch("src.utils.resource_loader.load_yaml_resource")
    def test_missing_sections_are_empty(self, mock_yaml):
        mock_yaml.return_value = {"products": None}
        assert ProductRepository(resource="catalog/empty.yaml").list_products() == []


class TestCreateSearchResults:
    """드롭다운 결과 생성 테스트"""

    def test_maps_display_fields(self, product_repository):
        results = create_search_results(
            product_repository.list_products(),
            "کاسه",
            lambda category_id: f"cat-{category_id}",
        )
        assert all(isinstance(r, SearchResultItem) for r in results)
        assert [r.id for r in results] == ["1", "2"]
        assert results[0].category == "cat-10"
        assert results[0].price == 450000
        assert results[0].image_url == "/images/1.webp"

    def test_limit(self, product_repository):
        results = create_search_results(
            product_repository.list_products(), "کاسه", lambda _: "", limit=1
        )
        assert len(results) == 1

    def test_short_query(self, product_repository):
        assert create_search_results(product_repository.list_products(), "a", lambda _: "") == []


class TestProductSearchService:
    """검색 서비스 테스트"""

    def test_suggest_resolves_category(self, product_repository):
        service = ProductSearchService(product_repository)
        results = service.suggest("لعاب آبی")
        assert [r.id for r in results] == ["4", "2"]
        assert results[0].category == "لعاب و رنگ"

    def test_unknown_category_fallback(self, product_repository):
        service = ProductSearchService(product_repository)
        results = service.suggest("ceramic mug", context=SearchContext.DEFAULT)
        assert results[0].category == UNKNOWN_CATEGORY_NAME

    def test_suggest_limit_override(self, product_repository):
        service = ProductSearchService(product_repository)
        assert len(service.suggest("کاسه", limit=1)) == 1

    def test_list_products_filter(self, product_repository):
        service = ProductSearchService(product_repository)
        assert [p.id for p in service.list_products("ابی")] == ["2", "4"]
        assert len(service.list_products(None)) == 6

    @patch("src.repositories.impl.product_repository.load_catalog")
    def test_fetch_failure_yields_empty(self, mock_load):
        """카탈로그 실패 시 빈 목록으로 검색 → 빈 결과"""
        mock_load.side_effect = FileNotFoundError("gone")
        service = ProductSearchService(ProductRepository(resource="catalog/gone.yaml"))

        assert service.suggest("کاسه") == []
        assert service.list_products("کاسه") == []
        assert service.category_name("10") == UNKNOWN_CATEGORY_NAME

    def test_requires_repository(self):
        with pytest.raises(ValueError):
            ProductSearchService(None)
