"""Unit tests for the Username value type."""

import pytest
from pydantic import ValidationError

from knowspace.domain.value import Username


class TestUsername:
    """Usernames are 1-50 characters without surrounding whitespace."""

    @pytest.mark.parametrize("name", ["a", "alice", "Ada Lovelace", "x" * 50])
    def test_valid_names_accepted(self, name):
        assert str(Username(name)) == name

    @pytest.mark.parametrize(
        "name", ["", " alice", "alice ", "alice\n", "\talice", "x" * 51]
    )
    def test_invalid_names_rejected(self, name):
        with pytest.raises(ValidationError):
            Username(name)
