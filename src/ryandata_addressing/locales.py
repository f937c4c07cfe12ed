"""Locale string helpers.

Locales are BCP-47 style tags (``en``, ``en-US``, ``zh-Hant``,
``zh-Hant-TW``). Underscores are accepted and canonicalized. Matching uses
fallback candidates: ``zh-Hant-TW`` falls back to ``zh-Hant``, ``fr-CA`` to
``fr``. Some locales have an explicit parent that interrupts the natural
chain, e.g. ``zh-Hant`` never falls back to ``zh`` (which is Simplified).
"""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_LOCALE = "en"

# Explicit parents; "root" stops the chain.
PARENT_LOCALES: dict[str, str] = {
    "zh-Hant": "root",
    "zh-Hant-MO": "zh-Hant-HK",
    "sr-Latn": "root",
    "az-Cyrl": "root",
    "uz-Arab": "root",
    "es-AR": "es-419",
    "es-BO": "es-419",
    "es-CL": "es-419",
    "es-CO": "es-419",
    "es-MX": "es-419",
    "es-PE": "es-419",
    "es-US": "es-419",
    "es-VE": "es-419",
    "pt-AO": "pt-PT",
    "pt-MZ": "pt-PT",
    "en-AU": "en-001",
    "en-GB": "en-001",
    "en-IE": "en-001",
    "en-IN": "en-001",
    "en-NZ": "en-001",
    "en-SG": "en-001",
    "en-ZA": "en-001",
}


def canonicalize(locale: str | None) -> str:
    """Canonicalize a locale tag.

    >>> canonicalize("zh_hant_tw")
    'zh-Hant-TW'
    >>> canonicalize("EN-us")
    'en-US'
    """
    if not locale:
        return ""
    parts = [part for part in locale.replace("_", "-").split("-") if part]
    if not parts:
        return ""
    canonical = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            canonical.append(part.title())
        elif len(part) == 2 or (len(part) == 3 and part.isdigit()):
            canonical.append(part.upper())
        else:
            canonical.append(part.lower())
    return "-".join(canonical)


def get_candidates(locale: str, fallback_locale: str | None = None) -> list[str]:
    """Get the fallback chain for a locale, most specific first.

    Args:
        locale: Locale tag.
        fallback_locale: Locale appended to the end of the chain, if given.

    Returns:
        Canonical candidate locales without duplicates.
    """
    candidates: list[str] = []
    current = canonicalize(locale)
    while current:
        candidates.append(current)
        parent = PARENT_LOCALES.get(current)
        if parent is not None:
            if parent == "root":
                break
            current = parent
            continue
        current = current.rpartition("-")[0]

    if fallback_locale:
        for candidate in get_candidates(fallback_locale):
            if candidate not in candidates:
                candidates.append(candidate)
    return candidates


def match(first_locale: str | None, second_locale: str | None) -> bool:
    """Check whether two locales are identical once canonicalized."""
    if not first_locale or not second_locale:
        return False
    return canonicalize(first_locale) == canonicalize(second_locale)


def match_candidates(first_locale: str | None, second_locale: str | None) -> bool:
    """Check whether two locales share a fallback candidate.

    ``zh-Hant-TW`` and ``zh-Hant`` match; ``zh-Hant`` and ``zh`` do not.
    Empty locales never match.
    """
    if not first_locale or not second_locale:
        return False
    first = set(get_candidates(first_locale))
    return any(candidate in first for candidate in get_candidates(second_locale))


def resolve(
    available_locales: Iterable[str],
    locale: str | None,
    fallback_locale: str | None = DEFAULT_LOCALE,
) -> str | None:
    """Pick the best available locale for the requested one.

    Args:
        available_locales: Locales that data exists for.
        locale: Requested locale; may be empty.
        fallback_locale: Tried after the requested locale's candidates.

    Returns:
        The first candidate present in ``available_locales``, or None.
    """
    available = {canonicalize(item): item for item in available_locales}
    for candidate in get_candidates(locale or "", fallback_locale):
        if candidate in available:
            return available[candidate]
    return None
