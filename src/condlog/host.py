"""Host services the built-in relations call out to."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from condlog.dates import parse_nlp_date


TitleNormalizer = Callable[[str], str]
DateParser = Callable[[str], datetime]
Enumerator = Callable[[], list[str]]


def normalize_page_title(title: str) -> str:
    """Default title normalization: the title as written.

    Quoting for the query language happens in ``Constant.string``.
    """

    return title


def _no_values() -> list[str]:
    return []


@dataclass(frozen=True)
class HostServices:
    """Narrow interface to the host application.

    Attributes:
        normalize_title: Canonical form of a page title or search string.
        parse_date: Natural-language date expression to an absolute instant.
        page_titles: Every known page title, for target suggestions.
        user_display_names: Every known user display name, for target suggestions.
    """

    normalize_title: TitleNormalizer = normalize_page_title
    parse_date: DateParser = parse_nlp_date
    page_titles: Enumerator = _no_values
    user_display_names: Enumerator = _no_values
