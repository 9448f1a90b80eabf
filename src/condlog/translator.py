"""Condition to Datalog translation entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from condlog.clauses import Clause, NotClause
from condlog.config import TranslatorConfig
from condlog.host import HostServices
from condlog.registry import RelationHandler, RelationRegistry
from condlog.relations import builtin_registry
from condlog.schemas import ConditionModel, parse_condition
from condlog.validator import validate_clauses

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Condition:
    """A single relation condition between a source and a target.

    Attributes:
        source: Logic variable name of the entity being constrained.
        relation: Free-text relation, resolved against the registry.
        target: Variable name or literal, depending on the relation.
        negate: Wrap the generated clauses in a ``not``.
    """

    source: str
    relation: str
    target: str = ""
    negate: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "relation": self.relation,
            "target": self.target,
            "not": self.negate,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Condition":
        return Condition.from_model(parse_condition(data))

    @staticmethod
    def from_model(model: ConditionModel) -> "Condition":
        return Condition(
            source=model.source,
            relation=model.relation,
            target=model.target,
            negate=model.negate,
        )


class ConditionTranslator:
    """Translate conditions into clause sequences using a relation registry."""

    def __init__(
        self,
        registry: RelationRegistry,
        config: Optional[TranslatorConfig] = None,
    ) -> None:
        self.registry = registry
        self.config = config or TranslatorConfig()

    def translate(self, condition: Condition) -> list[Clause]:
        """Clauses for ``condition``; empty when its relation does not resolve."""

        handler = self.registry.resolve(condition.relation)
        if handler is None:
            logger.debug("No relation matches %r; condition contributes nothing", condition.relation)
            return []
        clauses = handler.generate(condition.source, condition.target)
        if self.config.strict:
            validate_clauses(clauses, condition.source, condition.target)
        if clauses and condition.negate:
            return [NotClause(tuple(clauses))]
        return clauses

    def translate_all(self, conditions: Iterable[Condition]) -> list[Clause]:
        clauses: list[Clause] = []
        for condition in conditions:
            clauses.extend(self.translate(condition))
        return clauses

    def register(self, name: str, handler: RelationHandler) -> None:
        self.registry.register(name, handler)

    def unregister(self, name: str) -> None:
        self.registry.unregister(name)

    def list_labels(self) -> list[str]:
        return self.registry.list_labels()

    def target_options(self, source: str, relation: str) -> list[str]:
        return self.registry.resolve_target_options(source, relation)


def build_translator(
    host: Optional[HostServices] = None,
    config: Optional[TranslatorConfig] = None,
) -> ConditionTranslator:
    """Translator over a freshly seeded built-in registry."""

    config = config or TranslatorConfig()
    return ConditionTranslator(builtin_registry(host, config), config)


def condition_to_datalog(condition: Condition, translator: ConditionTranslator) -> list[Clause]:
    return translator.translate(condition)
