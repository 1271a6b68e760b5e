"""
ssr_first.i18n.preferences

Parser for the browser-supplied language preference header (`Accept-Language`).

Responsibilities:
- Turn `tag[;q=value], ...` into an ordered `LocalePreference`.
- Drop malformed entries instead of failing the request.

Ordering: descending quality, ties keep the order the browser sent them in.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Primary subtag plus optional `-subtag` parts, or the `*` wildcard.
_TAG_RE = re.compile(r"^(?:\*|[A-Za-z]{1,8}(?:-[A-Za-z0-9]{1,8})*)$")

WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class LanguagePreference:
    tag: str
    quality: float = 1.0

    @property
    def primary(self) -> str:
        return self.tag.split("-", 1)[0].lower()

    @property
    def region(self) -> str | None:
        parts = self.tag.split("-")
        return parts[1] if len(parts) > 1 else None

    @property
    def is_wildcard(self) -> bool:
        return self.tag == WILDCARD


LocalePreference = tuple[LanguagePreference, ...]


def _parse_quality(params: list[str]) -> float | None:
    quality = 1.0
    for param in params:
        name, sep, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        if not sep:
            return None
        try:
            quality = float(value.strip())
        except ValueError:
            return None
        if not 0.0 <= quality <= 1.0:
            return None
    return quality


def parse_entry(raw: str) -> LanguagePreference | None:
    tag, *params = raw.split(";")
    tag = tag.strip()
    if not _TAG_RE.match(tag):
        return None
    quality = _parse_quality(params)
    if quality is None:
        return None
    return LanguagePreference(tag=tag, quality=quality)


def parse_accept_language(header: str | None) -> LocalePreference:
    if not header:
        return ()

    entries = [entry for entry in (parse_entry(raw) for raw in header.split(",")) if entry]
    # sorted() is stable, so equal qualities keep header order.
    return tuple(sorted(entries, key=lambda entry: -entry.quality))
