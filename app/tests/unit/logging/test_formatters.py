"""Unit tests for adminkit.logging.formatters module."""

import pytest

from adminkit.logging.formatters import SENSITIVE_PATTERNS, mask_sensitive_data


@pytest.mark.unit
class TestMaskSensitiveData:
    """Test suite for mask_sensitive_data processor."""

    def test_masks_sensitive_keys(self):
        processor = mask_sensitive_data()
        result = processor(
            None,
            "info",
            {"event": "login", "password": "hunter2", "user_phone_no": "138", "user_id": 1},
        )
        assert result["password"] == "***REDACTED***"
        assert result["user_phone_no"] == "***REDACTED***"
        assert result["user_id"] == 1
        assert result["event"] == "login"

    def test_masks_nested_dicts(self):
        processor = mask_sensitive_data()
        result = processor(None, "info", {"event": "e", "user": {"api_key": "k", "name": "n"}})
        assert result["user"] == {"api_key": "***REDACTED***", "name": "n"}

    def test_case_insensitive(self):
        processor = mask_sensitive_data()
        assert processor(None, "info", {"event": "e", "AuthToken": "x"})["AuthToken"] == "***REDACTED***"

    def test_custom_mask_and_patterns(self):
        processor = mask_sensitive_data(mask_value="##", additional_patterns=frozenset({"email"}))
        result = processor(None, "info", {"event": "e", "email": "a@b.c"})
        assert result["email"] == "##"

    def test_phone_is_sensitive(self):
        assert "phone" in SENSITIVE_PATTERNS
