"""Pydantic 스키마 정의 (상품/검색)"""
from typing import Optional, List, Any
from pydantic import BaseModel, Field, field_validator
from datetime import datetime


class Product(BaseModel):
    """카탈로그 상품

    검색 엔진이 읽는 필드는 id와 title뿐이며,
    나머지는 화면 표시용으로 그대로 전달됩니다.
    """
    id: str = Field(..., description="상품 ID")
    title: str = Field("", description="상품명 (검색 대상)")
    image_url: str = Field("", description="대표 이미지 URL")
    price: Optional[int] = Field(None, ge=0, description="가격")
    category_id: Optional[str] = Field(None, description="카테고리 ID")
    description: Optional[str] = Field(None, description="상품 설명")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """숫자 ID도 문자열로 통일"""
        if v is None:
            raise ValueError("상품 ID는 필수입니다")
        return str(v)

    @field_validator("title", mode="before")
    @classmethod
    def coerce_title(cls, v: Any) -> str:
        """누락/비문자열 상품명은 빈 문자열로 취급"""
        return v if isinstance(v, str) else ""

    @field_validator("category_id", mode="before")
    @classmethod
    def coerce_category_id(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v)


class Category(BaseModel):
    """카테고리"""
    id: str = Field(..., description="카테고리 ID")
    title: str = Field(..., description="카테고리명")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        return str(v)


class SearchResultItem(BaseModel):
    """자동완성 드롭다운 표시용 검색 결과"""
    id: str = Field(..., description="상품 ID")
    title: str = Field(..., description="상품명")
    image_url: str = Field("", description="대표 이미지 URL")
    category: str = Field(..., description="카테고리명")
    price: Optional[int] = Field(None, description="가격")
    description: Optional[str] = Field(None, description="상품 설명")


class SearchSuggestResponse(BaseModel):
    """자동완성 검색 응답"""
    query: str = Field(..., description="요청 검색어")
    results: List[SearchResultItem] = Field(default_factory=list, description="관련도순 결과")
    total: int = Field(..., ge=0, description="결과 개수")


class ProductListResponse(BaseModel):
    """상품 목록(검색 필터 적용) 응답"""
    search: Optional[str] = Field(None, description="필터 검색어")
    products: List[Product] = Field(default_factory=list, description="상품 목록 (원래 순서)")
    total: int = Field(..., ge=0, description="상품 개수")


class RecentSearchRequest(BaseModel):
    """최근 검색어 저장 요청"""
    query: str = Field(..., min_length=1, max_length=200, description="제출된 검색어")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """검색어 검증: 공백만 있는 값 거부"""
        if not v or not v.strip():
            raise ValueError("검색어는 공백만으로 구성될 수 없습니다")
        if "\0" in v:
            raise ValueError("검색어에 허용되지 않는 문자가 포함되어 있습니다")
        return v.strip()


class RecentSearchResponse(BaseModel):
    """최근 검색어 응답"""
    session_id: str = Field(..., description="세션 ID")
    searches: List[str] = Field(default_factory=list, description="최신순 검색어")


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
