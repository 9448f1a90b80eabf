"""Target option providers: suggested values for a relation's target."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


class TargetOptions:
    """Base interface for target option providers."""

    def options_for(self, source: str) -> list[str]:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass(frozen=True, init=False)
class StaticOptions(TargetOptions):
    """Fixed list of legal targets."""

    values: tuple[str, ...]

    def __init__(self, values: Iterable[str]) -> None:
        object.__setattr__(self, "values", tuple(str(v) for v in values))

    def options_for(self, source: str) -> list[str]:
        return list(self.values)


@dataclass(frozen=True)
class DynamicOptions(TargetOptions):
    """Targets computed on demand, usually by querying the host's data."""

    provider: Callable[[str], Iterable[str]]

    def options_for(self, source: str) -> list[str]:
        return [str(v) for v in self.provider(source)]


def from_enumerator(enumerate_values: Callable[[], Iterable[str]]) -> DynamicOptions:
    """Wrap a source-independent host enumerator as dynamic options."""

    return DynamicOptions(lambda _source: enumerate_values())
