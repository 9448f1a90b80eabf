"""Translator configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from condlog.errors import CondlogError


DAY_NOTE_TITLE_PATTERN = (
    "(January|February|March|April|May|June|July|August|September|October|November|December)"
    " [0-3]?[0-9](st|nd|rd|th), [0-9][0-9][0-9][0-9]"
)
DATE_PLACEHOLDER_PATTERN = r"^\s*\{date\}\s*$"


@dataclass(frozen=True)
class TranslatorConfig:
    """Settings shared by the built-in relations and the translator.

    Attributes:
        day_note_pattern: Regex source matching day-note page titles.
        date_placeholder: Regex source (matched case-insensitively) for the
            target token that stands for "any day-note page".
        date_regex_variable: Variable bound to the compiled day-note pattern.
        heading_levels: Suggested targets for ``has heading``.
        strict: Check every translation for unbound variables.
    """

    day_note_pattern: str = DAY_NOTE_TITLE_PATTERN
    date_placeholder: str = DATE_PLACEHOLDER_PATTERN
    date_regex_variable: str = "date-regex"
    heading_levels: tuple[str, ...] = ("1", "2", "3", "0")
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.date_regex_variable:
            raise CondlogError("date_regex_variable must be non-empty.")
        object.__setattr__(self, "heading_levels", tuple(str(h) for h in self.heading_levels))

    def to_dict(self) -> dict[str, Any]:
        return {
            "day_note_pattern": self.day_note_pattern,
            "date_placeholder": self.date_placeholder,
            "date_regex_variable": self.date_regex_variable,
            "heading_levels": list(self.heading_levels),
            "strict": self.strict,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "TranslatorConfig":
        known = {f.name for f in fields(TranslatorConfig)}
        kwargs = {key: value for key, value in data.items() if key in known}
        if "heading_levels" in kwargs:
            kwargs["heading_levels"] = tuple(kwargs["heading_levels"])
        if "strict" in kwargs:
            kwargs["strict"] = bool(kwargs["strict"])
        return TranslatorConfig(**kwargs)
