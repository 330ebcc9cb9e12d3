"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class StorefrontSearchException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 카탈로그(상품 목록) 관련 예외
class CatalogException(StorefrontSearchException):
    """카탈로그 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "CATALOG_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CATALOG_ERROR", details)


class ProductFetchException(CatalogException):
    """상품 목록을 가져오지 못했을 때"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to fetch products: {reason}"
        super().__init__(message, "PRODUCT_FETCH_FAILED", details or {"reason": reason})


# 캐시 관련 예외
class CacheException(StorefrontSearchException):
    """캐시 관련 예외"""
    def __init__(self, message: str, error_code: str = "CACHE_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CACHE_ERROR", details)


class CacheConnectionException(CacheException):
    """캐시 연결 실패"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to connect to cache: {reason}"
        super().__init__(message, "CACHE_CONNECTION_ERROR", details or {"reason": reason})


class CacheSerializationException(CacheException):
    """캐시 직렬화/역직렬화 오류"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Cache {operation} failed: {reason}"
        super().__init__(message, "CACHE_SERIALIZATION_ERROR",
                        details or {"operation": operation, "reason": reason})


# 유효성 검증 관련 예외
class ValidationException(StorefrontSearchException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("query", reason, details)


# 검색 위젯 생명주기 관련 예외
class SearchControllerClosedException(StorefrontSearchException):
    """이미 닫힌(dispose된) 검색 컨트롤러를 사용하려 할 때"""
    def __init__(self, operation: str, details: Optional[dict[str, Any]] = None):
        message = f"Search controller is closed (operation: {operation})"
        super().__init__(message, "CONTROLLER_CLOSED", details or {"operation": operation})
