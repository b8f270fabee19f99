"""Translation models for the i18n system.

Defines locales, catalog lookup results and per-locale message catalogs.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from adminkit.i18n.exceptions import InvalidLocaleError

_SUBTAG_PATTERN = re.compile(r"^[A-Za-z0-9]{1,8}$")
_LANGUAGE_PATTERN = re.compile(r"^[A-Za-z]{2,3}$")


@dataclass(frozen=True)
class Locale:
    """A language/region selector.

    Holds a normalised IETF BCP 47 style tag (e.g. "en-US", "zh-Hans-CN").
    The empty tag is the root locale, whose catalog is consulted last.
    Frozen to ensure immutability and hashability.

    Attributes:
        tag: Normalised locale tag.
    """

    tag: str

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse and normalise a locale string.

        Accepts "-" or "_" separators. The language is lower-cased,
        a 4-letter script title-cased and a 2-letter or 3-digit region
        upper-cased.

        Args:
            locale_str: Locale string (e.g., "en-US", "zh_cn").

        Returns:
            Normalised Locale.

        Raises:
            InvalidLocaleError: If locale_str is not a well-formed tag.
        """
        if locale_str is None:
            raise InvalidLocaleError("Unsupported locale: None")

        stripped = locale_str.strip()
        if not stripped:
            return ROOT

        parts = re.split(r"[-_]", stripped)
        if not _LANGUAGE_PATTERN.match(parts[0]) or not all(
            _SUBTAG_PATTERN.match(part) for part in parts[1:]
        ):
            raise InvalidLocaleError(f"Unsupported locale: {locale_str}")

        normalised = [parts[0].lower()]
        for part in parts[1:]:
            if len(part) == 4 and part.isalpha():
                normalised.append(part.title())
            elif (len(part) == 2 and part.isalpha()) or (
                len(part) == 3 and part.isdigit()
            ):
                normalised.append(part.upper())
            else:
                normalised.append(part.lower())

        return cls("-".join(normalised))

    @property
    def is_root(self) -> bool:
        return not self.tag

    @property
    def language(self) -> str:
        """Get language part of locale (e.g., "en" from "en-US").

        Returns:
            Language code, or "" for the root locale.
        """
        return self.tag.split("-")[0]

    @property
    def region(self) -> str:
        """Get region part of locale (e.g., "US" from "en-US").

        Returns:
            Region code, or "" if the tag carries none.
        """
        for part in self.tag.split("-")[1:]:
            if (len(part) == 2 and part.isalpha()) or (
                len(part) == 3 and part.isdigit()
            ):
                return part
        return ""

    @property
    def parent(self) -> Optional["Locale"]:
        """Drop the last subtag ("zh-Hans-CN" -> "zh-Hans" -> "zh" -> root).

        Returns:
            Parent locale, or None for the root locale.
        """
        if self.is_root:
            return None
        if "-" not in self.tag:
            return ROOT
        return Locale(self.tag.rsplit("-", 1)[0])

    def candidates(self) -> List["Locale"]:
        """List this locale and its parents, most specific first, without root."""
        chain = []
        current: Optional[Locale] = self
        while current is not None and not current.is_root:
            chain.append(current)
            current = current.parent
        return chain


ROOT = Locale("")


class LookupStatus(str, Enum):
    """Outcome of a catalog lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LookupResult:
    """Result of asking a catalog for a message template.

    A missing key is a normal outcome, represented by NOT_FOUND rather than
    an exception.

    Attributes:
        status: LookupStatus of the lookup.
        template: Raw template when found (may be the empty string).
        locale: Locale whose catalog supplied the template, when found.
    """

    status: LookupStatus
    template: Optional[str] = None
    locale: Optional[Locale] = None

    @property
    def is_found(self) -> bool:
        return self.status == LookupStatus.FOUND

    @classmethod
    def found(
        cls, template: str, locale: Optional[Locale] = None
    ) -> "LookupResult":
        return cls(status=LookupStatus.FOUND, template=template, locale=locale)

    @classmethod
    def not_found(cls) -> "LookupResult":
        return cls(status=LookupStatus.NOT_FOUND)


@dataclass
class MessageCatalog:
    """Container for the messages of a single locale.

    Keys are flat dotted strings ("UserType.ADMIN", "user.not_found").
    An empty string is a real entry, distinct from a missing key.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Mapping of message key to template string.
        loaded_at: Timestamp (ISO 8601) when messages were loaded.
    """

    locale: Locale
    messages: Dict[str, str] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def __len__(self) -> int:
        return len(self.messages)

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a message template by key.

        Args:
            key: Message key.

        Returns:
            Template string, or None if the key is absent.
        """
        return self.messages.get(key)

    def set_message(self, key: str, message: str) -> None:
        self.messages[key] = message

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def merge(self, other: "MessageCatalog") -> None:
        """Merge another catalog into this one.

        Later entries override earlier ones.

        Args:
            other: MessageCatalog to merge.
        """
        self.messages.update(other.messages)
