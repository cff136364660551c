"""Unit tests for request credential extraction."""

from knowspace.interface.api.auth import extract_token


class TestExtractToken:
    """A Bearer header wins over the auth cookie."""

    def test_bearer_header(self):
        assert extract_token("Bearer abc.def", None) == "abc.def"

    def test_scheme_is_case_insensitive(self):
        assert extract_token("bearer abc", None) == "abc"

    def test_header_wins_over_cookie(self):
        assert extract_token("Bearer from-header", "from-cookie") == "from-header"

    def test_cookie_used_without_header(self):
        assert extract_token(None, "from-cookie") == "from-cookie"

    def test_non_bearer_header_falls_back_to_cookie(self):
        assert extract_token("Basic dXNlcjpwYXNz", "from-cookie") == "from-cookie"

    def test_empty_bearer_falls_back_to_cookie(self):
        assert extract_token("Bearer ", "from-cookie") == "from-cookie"

    def test_nothing_given(self):
        assert extract_token(None, None) is None
        assert extract_token("", "") is None
