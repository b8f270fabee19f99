"""Tests for adminkit.i18n.models module."""

import pytest

from adminkit.i18n.exceptions import InvalidLocaleError
from adminkit.i18n.models import ROOT, Locale, LookupResult, LookupStatus
from tests.factories.i18n import make_message_catalog


class TestLocale:
    """Tests for Locale."""

    def test_from_string_normalises_case_and_separator(self):
        """from_string() accepts '_' and fixes casing."""
        assert Locale.from_string("en_us").tag == "en-US"
        assert Locale.from_string("ZH-cn").tag == "zh-CN"
        assert Locale.from_string("zh_hans_cn").tag == "zh-Hans-CN"
        assert Locale.from_string("es-419").tag == "es-419"

    def test_from_string_empty_is_root(self):
        """An empty tag is the root locale."""
        assert Locale.from_string("") == ROOT
        assert ROOT.is_root

    @pytest.mark.parametrize("bad", ["e", "english-US", "en US", "en--US", "1a"])
    def test_from_string_invalid(self, bad):
        """from_string() raises InvalidLocaleError (a ValueError) for malformed tags."""
        with pytest.raises(InvalidLocaleError):
            Locale.from_string(bad)
        with pytest.raises(ValueError):
            Locale.from_string(bad)

    def test_language_and_region(self):
        """language and region properties split the tag."""
        locale = Locale.from_string("zh-Hans-CN")
        assert locale.language == "zh"
        assert locale.region == "CN"
        assert Locale.from_string("fr").region == ""

    def test_parent_chain(self):
        """parent drops the last subtag down to root."""
        locale = Locale.from_string("zh-Hans-CN")
        assert locale.parent == Locale("zh-Hans")
        assert Locale("zh").parent == ROOT
        assert ROOT.parent is None

    def test_candidates_exclude_root(self):
        """candidates() lists the locale and its parents without root."""
        assert Locale.from_string("en-US").candidates() == [Locale("en-US"), Locale("en")]
        assert ROOT.candidates() == []

    def test_locale_is_hashable_and_immutable(self):
        """Locale works as a dict key and cannot be modified."""
        mapping = {Locale.from_string("en-US"): 1}
        assert mapping[Locale("en-US")] == 1
        with pytest.raises(AttributeError):
            Locale("en-US").tag = "fr-FR"

    def test_str(self):
        assert str(Locale.from_string("en-us")) == "en-US"


class TestLookupResult:
    """Tests for LookupResult."""

    def test_found(self):
        result = LookupResult.found("Hello", locale=Locale("en"))
        assert result.is_found
        assert result.status == LookupStatus.FOUND
        assert result.template == "Hello"
        assert result.locale == Locale("en")

    def test_found_empty_template_is_still_found(self):
        """An empty template is a hit, not a miss."""
        result = LookupResult.found("")
        assert result.is_found
        assert result.template == ""

    def test_not_found(self):
        result = LookupResult.not_found()
        assert not result.is_found
        assert result.template is None


class TestMessageCatalog:
    """Tests for MessageCatalog."""

    def test_get_message(self):
        catalog = make_message_catalog()
        assert catalog.get_message("user.created") == "User {} created"
        assert catalog.get_message("missing") is None

    def test_empty_entry_is_distinct_from_missing(self):
        catalog = make_message_catalog(messages={"blank": ""})
        assert catalog.get_message("blank") == ""
        assert catalog.has_message("blank")
        assert not catalog.has_message("other")

    def test_set_message_and_len(self):
        catalog = make_message_catalog(messages={})
        catalog.set_message("a", "A")
        assert len(catalog) == 1
        assert catalog.get_message("a") == "A"

    def test_merge_later_entries_override(self):
        catalog = make_message_catalog(messages={"a": "A", "b": "B"})
        catalog.merge(make_message_catalog(messages={"b": "B2", "c": "C"}))
        assert catalog.messages == {"a": "A", "b": "B2", "c": "C"}
