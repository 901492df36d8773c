"""Tests for the policy model, constants and category table."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from csp_policy import (
    CSP_HEADER,
    CSP_HEADER_LEGACY,
    CSP_HEADER_REPORT_ONLY,
    NONE,
    SELF,
    PolicyConfig,
)
from csp_policy.policy import CATEGORIES, RESERVED_KEYWORDS


class TestConstants:
    def test_keyword_tokens_are_quoted(self):
        assert SELF == "'self'"
        assert NONE == "'none'"

    def test_header_names(self):
        assert CSP_HEADER == "Content-Security-Policy"
        assert CSP_HEADER_LEGACY == "X-Content-Security-Policy"
        assert CSP_HEADER_REPORT_ONLY == "Content-Security-Policy-Report-Only"

    def test_reserved_keywords(self):
        assert RESERVED_KEYWORDS == {"none", "self", "unsafe-inline", "unsafe-eval"}


class TestCategories:
    def test_order_and_defaults(self):
        assert [(c.tag, c.default) for c in CATEGORIES] == [
            ("font-src", SELF),
            ("img-src", SELF),
            ("style-src", SELF),
            ("script-src", SELF),
            ("connect-src", NONE),
            ("frame-src", NONE),
            ("media-src", NONE),
            ("object-src", NONE),
        ]

    def test_every_category_backed_by_a_field(self):
        fields = set(PolicyConfig.model_fields)
        for category in CATEGORIES:
            assert category.field in fields

    def test_table_is_immutable(self):
        with pytest.raises((AttributeError, TypeError)):
            CATEGORIES[0].default = NONE  # type: ignore[misc]


class TestPolicyConfig:
    def test_defaults(self):
        config = PolicyConfig()
        for category in CATEGORIES:
            assert config.sources(category) == []
        assert config.default_scope is None
        assert config.allow_eval is False
        assert config.allow_inline_script is False
        assert config.allow_inline_style is False
        assert config.reporting_url is None

    def test_lists_not_shared_between_instances(self):
        a = PolicyConfig()
        b = PolicyConfig()
        a.script_sources.append(SELF)
        assert b.script_sources == []

    def test_mutable_after_construction(self):
        config = PolicyConfig()
        config.allow_eval = True
        config.default_scope = "self"
        config.style_sources = [SELF, "https://fonts.googleapis.com"]
        assert config.allow_eval is True
        assert config.style_sources == [SELF, "https://fonts.googleapis.com"]

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PolicyConfig(worker_sources=[SELF])

    def test_assignment_validated(self):
        config = PolicyConfig()
        with pytest.raises(ValidationError):
            config.image_sources = "https://a.com"  # type: ignore[assignment]

    def test_sources_returns_live_list(self):
        config = PolicyConfig()
        category = CATEGORIES[1]
        config.sources(category).append("data:")
        assert config.image_sources == ["data:"]
