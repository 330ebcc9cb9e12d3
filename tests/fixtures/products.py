"""상품 테스트 자산 (엔진 독립)

- 단순 dict만 보관
- pytest fixture 선언하지 않음
- 입력 순서가 의미 있음 (안정 정렬 검증)
"""

PRODUCTS = [
    {
        "id": 1,
        "title": "کاسه سفالی دست ساز",
        "image_url": "/images/1.webp",
        "price": 450000,
        "category_id": "10",
    },
    {
        "id": 2,
        "title": "کاسه لعاب آبی",
        "image_url": "/images/2.webp",
        "price": 380000,
        "category_id": "10",
    },
    {
        "id": 3,
        "title": "بشقاب سفالی",
        "image_url": "/images/3.webp",
        "price": 520000,
        "category_id": "10",
    },
    {
        "id": 4,
        "title": "لعاب آبی",
        "image_url": "/images/4.webp",
        "price": 150000,
        "category_id": "30",
    },
    {
        "id": 5,
        "title": "گلدان سرامیکی",
        "image_url": "/images/5.webp",
        "price": 290000,
        "category_id": "20",
    },
    {
        "id": 6,
        "title": "Ceramic Mug",
        "image_url": "/images/6.webp",
        "price": 230000,
        "category_id": "99",
    },
]

CATEGORIES = [
    {"id": "10", "title": "ظروف سفالی"},
    {"id": "20", "title": "دکوری"},
    {"id": "30", "title": "لعاب و رنگ"},
]
