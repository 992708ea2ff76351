"""Locale resolution for content filenames.

Default-locale documents are plain ``<name>.mdx`` files. Every other locale
lives next to them as ``<name>.<locale>.mdx``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from mdxblog.core.config import DEFAULT_LOCALE, DEFAULT_LOCALES

BASE_EXTENSION = ".mdx"

# Any two-letter suffix right before the extension marks a translation
LOCALE_SUFFIX_RE = re.compile(r"\.[a-z]{2}\.mdx$")


class UnsupportedLocaleError(ValueError):
    """Raised when a locale outside the configured set is requested."""

    def __init__(self, locale: str, supported: Iterable[str]):
        self.locale = locale
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported locale {locale!r} (supported: {', '.join(self.supported)})"
        )


def normalize_locale(locale: str) -> str:
    return locale.strip().lower()


@dataclass(frozen=True)
class LocaleRule:
    """Filename rule selecting the documents of one locale."""

    locale: str
    is_default: bool
    # Suffixes of the other configured locales, excluded from the default rule
    other_locales: tuple[str, ...] = ()

    @property
    def suffix(self) -> str:
        if self.is_default:
            return BASE_EXTENSION
        return f".{self.locale}{BASE_EXTENSION}"

    def matches(self, filename: str) -> bool:
        """Check whether a bare filename belongs to this locale."""
        if self.is_default:
            if not filename.endswith(BASE_EXTENSION):
                return False
            if LOCALE_SUFFIX_RE.search(filename):
                return False
            return not any(
                filename.endswith(f".{code}{BASE_EXTENSION}")
                for code in self.other_locales
            )
        return filename.endswith(self.suffix)

    def filename_for(self, name: str) -> str:
        """Build the filename a document called *name* has in this locale."""
        return f"{name}{self.suffix}"


class LocaleResolver:
    """Maps locale codes to filename rules.

    With ``supported_locales=None`` any locale is accepted structurally and
    an unknown one simply matches no files.
    """

    def __init__(
        self,
        default_locale: str = DEFAULT_LOCALE,
        supported_locales: Iterable[str] | None = DEFAULT_LOCALES,
    ):
        self.default_locale = normalize_locale(default_locale)
        if supported_locales is None:
            self.supported_locales: tuple[str, ...] | None = None
        else:
            codes = [normalize_locale(code) for code in supported_locales]
            if self.default_locale not in codes:
                codes.insert(0, self.default_locale)
            self.supported_locales = tuple(dict.fromkeys(codes))

    def resolve(self, locale: str | None = None) -> LocaleRule:
        """Return the filename rule for *locale* (default locale if None).

        Raises:
            UnsupportedLocaleError: If a supported set is configured and the
                locale is not in it
        """
        code = self.default_locale if locale is None else normalize_locale(locale)
        if self.supported_locales is not None and code not in self.supported_locales:
            raise UnsupportedLocaleError(code, self.supported_locales)
        is_default = code == self.default_locale
        others: tuple[str, ...] = ()
        if is_default and self.supported_locales is not None:
            others = tuple(c for c in self.supported_locales if c != code)
        return LocaleRule(locale=code, is_default=is_default, other_locales=others)
