"""Unit tests for the User entity decoder.

Tests cover:
- Valid payloads
- Invalid id and name types
- Decoding wrapped in guard()
"""

import pytest

from railway_result.core.result import Success, guard
from railway_result.domain.entities import User
from railway_result.domain.errors import ParsingError


@pytest.mark.unit
class TestUserFromJson:
    """Test User.from_json."""

    def test_decodes_valid_payload(self):
        """Test a well-formed object decodes."""
        assert User.from_json({"id": 1, "name": "Hylke"}) == User(id=1, name="Hylke")

    def test_extra_keys_are_ignored(self):
        """Test unknown keys do not break decoding."""
        assert User.from_json({"id": 2, "name": "Ada", "role": "admin"}).id == 2

    @pytest.mark.parametrize("user_id", ["oops", None, 1.5, True])
    def test_rejects_non_int_id(self, user_id):
        """Test id must be an int (bools excluded)."""
        with pytest.raises(ValueError, match="`id` must be an int"):
            User.from_json({"id": user_id, "name": "Ada"})

    @pytest.mark.parametrize("name", ["", 123, None])
    def test_rejects_invalid_name(self, name):
        """Test name must be a non-empty string."""
        with pytest.raises(ValueError, match="`name` must be a non-empty string"):
            User.from_json({"id": 1, "name": name})


@pytest.mark.unit
class TestUserDecodingAtBoundary:
    """Test decoding failures captured by guard()."""

    def test_guard_returns_success_for_valid_payload(self):
        result = guard(
            lambda: User.from_json({"id": 1, "name": "Hylke"}),
            on_error=ParsingError.from_cause,
        )

        assert result == Success(User(id=1, name="Hylke"))

    def test_guard_returns_parsing_error_for_invalid_payload(self):
        """Test the decoder's ValueError becomes a ParsingError payload."""
        result = guard(
            lambda: User.from_json({"id": "oops", "name": 123}),
            on_error=ParsingError.from_cause,
        )

        assert result.is_failure
        assert isinstance(result.error, ParsingError)
        assert isinstance(result.error.cause, ValueError)
