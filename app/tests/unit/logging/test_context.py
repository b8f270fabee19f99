"""Unit tests for adminkit.logging.context module."""

import uuid

import pytest
import structlog

from adminkit.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
    set_correlation_id,
)


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        with bind_request_context(user_id=1):
            uuid.UUID(get_correlation_id())

    def test_uses_provided_correlation_id(self):
        with bind_request_context(correlation_id="req-123"):
            assert get_correlation_id() == "req-123"

    def test_binds_user_and_locale(self):
        with bind_request_context(user_id=5, user_name="dana", locale="zh-CN"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["user_id"] == 5
            assert ctx["user_name"] == "dana"
            assert ctx["locale"] == "zh-CN"

    def test_skips_none_values(self):
        with bind_request_context():
            ctx = structlog.contextvars.get_contextvars()
            assert "user_id" not in ctx
            assert "client_ip" not in ctx

    def test_extra_context(self):
        with bind_request_context(tenant="acme"):
            assert structlog.contextvars.get_contextvars()["tenant"] == "acme"

    def test_context_removed_after_block(self):
        with bind_request_context(correlation_id="req-1", user_id=1):
            pass
        ctx = structlog.contextvars.get_contextvars()
        assert "correlation_id" not in ctx
        assert "user_id" not in ctx

    def test_nested_blocks_restore_outer_values(self):
        with bind_request_context(correlation_id="outer", user_id=1):
            with bind_request_context(correlation_id="inner", user_id=2):
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "outer"
            assert structlog.contextvars.get_contextvars()["user_id"] == 1


@pytest.mark.unit
class TestCorrelationHelpers:
    """Tests for correlation id helpers."""

    def test_get_correlation_id_none_by_default(self):
        assert get_correlation_id() is None

    def test_set_and_clear(self):
        set_correlation_id("abc")
        assert get_correlation_id() == "abc"
        clear_request_context()
        assert get_correlation_id() is None
