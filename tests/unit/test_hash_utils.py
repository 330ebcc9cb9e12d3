"""해싱 유틸리티 유닛 테스트"""
from src.utils.hash_utils import hash_string, generate_recent_searches_key


class TestHashUtils:
    """해싱 유틸리티 테스트"""

    def test_hash_string_consistency(self):
        """동일한 입력에 대한 일관성"""
        assert hash_string("کاسه سفالی") == hash_string("کاسه سفالی")

    def test_hash_string_different_inputs(self):
        """다른 입력에 대한 다른 해시"""
        assert hash_string("session-1") != hash_string("session-2")

    def test_hash_string_length(self):
        """MD5 해시 길이 확인 (32자)"""
        assert len(hash_string("test")) == 32

    def test_recent_searches_key_format(self):
        """캐시 키 포맷 확인"""
        key = generate_recent_searches_key("session-1")
        assert key.startswith("recent_searches:")
        assert len(key) == len("recent_searches:") + 32

    def test_recent_searches_key_strips_session(self):
        assert generate_recent_searches_key(" session-1 ") == generate_recent_searches_key("session-1")
