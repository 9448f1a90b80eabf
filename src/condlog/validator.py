"""Validation utilities for clause sequences."""

from __future__ import annotations

from typing import Iterable

from condlog.clauses import (
    Clause,
    DataPattern,
    FnExpr,
    NotClause,
    OrClause,
    PredExpr,
    Term,
    Variable,
)
from condlog.errors import ValidationError


class ClauseValidator:
    """Check that every variable is bound before a function or predicate uses it.

    Data patterns bind their variables. Function expressions bind their
    result. An ``or`` binds what all of its branches bind; a ``not``
    binds nothing.
    """

    def __init__(self, bound: Iterable[str] = ()) -> None:
        self.initial = frozenset(bound)

    def validate(self, clauses: Iterable[Clause]) -> set[str]:
        """Validate ``clauses`` in order and return the variables they leave bound."""

        return self._validate_sequence(list(clauses), set(self.initial), path="")

    def _validate_sequence(self, clauses: list[Clause], bound: set[str], path: str) -> set[str]:
        for index, clause in enumerate(clauses):
            self._validate_clause(clause, bound, f"{path}{index}")
        return bound

    def _validate_clause(self, clause: Clause, bound: set[str], path: str) -> None:
        if isinstance(clause, DataPattern):
            bound.update(_variables(clause.arguments))
            return
        if isinstance(clause, FnExpr):
            self._require_bound(clause.arguments, bound, f"fn-expr {clause.fn}", path)
            bound.add(clause.binding.value)
            return
        if isinstance(clause, PredExpr):
            self._require_bound(clause.arguments, bound, f"pred-expr {clause.pred}", path)
            return
        if isinstance(clause, OrClause):
            if not clause.clauses:
                raise ValidationError(f"Empty or-clause at clause {path}.")
            branch_bindings: list[set[str]] = []
            for index, branch in enumerate(clause.clauses):
                branch_bound = set(bound)
                self._validate_clause(branch, branch_bound, f"{path}.{index}")
                branch_bindings.append(branch_bound)
            bound.update(set.intersection(*branch_bindings))
            return
        if isinstance(clause, NotClause):
            self._validate_sequence(list(clause.clauses), set(bound), path=f"{path}.")
            return
        raise ValidationError(f"Unknown clause type at clause {path}: {type(clause).__name__}")

    def _require_bound(self, terms: Iterable[Term], bound: set[str], what: str, path: str) -> None:
        for name in _variables(terms):
            if name not in bound:
                raise ValidationError(
                    f"Variable {name!r} used by {what} at clause {path} before it is bound."
                )


def _variables(terms: Iterable[Term]) -> list[str]:
    return [term.value for term in terms if isinstance(term, Variable)]


def validate_clauses(clauses: Iterable[Clause], source: str, target: str) -> set[str]:
    """Validate a translation whose source and target are already bound."""

    return ClauseValidator(bound=(source, target)).validate(clauses)
