"""Render clause sequences as Datalog query text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from condlog.clauses import (
    Clause,
    Constant,
    DataPattern,
    FnExpr,
    NotClause,
    OrClause,
    PredExpr,
    Term,
    Variable,
)
from condlog.errors import ClauseError


@dataclass
class _VarNamePolicy:
    """Map variable names to Datalog symbols, keeping distinct names distinct."""

    _mapping: dict[str, str] = field(default_factory=dict)
    _used: set[str] = field(default_factory=set)

    _UNSAFE = re.compile(r"[^A-Za-z0-9_\-*+!?<>=./]")

    def render(self, name: str) -> str:
        if name in self._mapping:
            return self._mapping[name]
        base = self._UNSAFE.sub("_", name) or "v"
        symbol = base
        idx = 2
        while symbol in self._used:
            symbol = f"{base}_{idx}"
            idx += 1
        self._mapping[name] = symbol
        self._used.add(symbol)
        return symbol


class DatalogRenderer:
    """Datalog (Datomic/DataScript dialect) renderer.

    ``render_clauses`` returns the ``:where`` body, one clause per line;
    ``render_query`` wraps it in a ``[:find ... :where ...]`` form.
    """

    def render_clause(self, clause: Clause) -> str:
        return self._clause(clause, _VarNamePolicy())

    def render_clauses(self, clauses: Iterable[Clause]) -> str:
        policy = _VarNamePolicy()
        return "\n".join(self._clause(clause, policy) for clause in clauses)

    def render_query(self, find: Sequence[str], clauses: Iterable[Clause]) -> str:
        if not find:
            raise ClauseError("render_query requires at least one find variable.")
        policy = _VarNamePolicy()
        head = " ".join(self._var(Variable(name), policy) for name in find)
        body = " ".join(self._clause(clause, policy) for clause in clauses)
        return f"[:find {head} :where {body}]"

    def _clause(self, clause: Clause, policy: _VarNamePolicy) -> str:
        if isinstance(clause, DataPattern):
            return f"[{self._terms(clause.arguments, policy)}]"
        if isinstance(clause, OrClause):
            inner = " ".join(self._clause(c, policy) for c in clause.clauses)
            return f"(or {inner})"
        if isinstance(clause, NotClause):
            inner = " ".join(self._clause(c, policy) for c in clause.clauses)
            return f"(not {inner})"
        if isinstance(clause, FnExpr):
            call = " ".join([clause.fn, *(self._term(a, policy) for a in clause.arguments)])
            return f"[({call}) {self._var(clause.binding, policy)}]"
        if isinstance(clause, PredExpr):
            call = " ".join([clause.pred, *(self._term(a, policy) for a in clause.arguments)])
            return f"[({call})]"
        raise ClauseError(f"Cannot render clause of type {type(clause).__name__}.")

    def _terms(self, terms: Iterable[Term], policy: _VarNamePolicy) -> str:
        return " ".join(self._term(term, policy) for term in terms)

    def _term(self, term: Term, policy: _VarNamePolicy) -> str:
        if isinstance(term, Variable):
            return self._var(term, policy)
        if isinstance(term, Constant):
            return term.value
        raise ClauseError(f"Cannot render term of type {type(term).__name__}.")

    def _var(self, var: Variable, policy: _VarNamePolicy) -> str:
        return f"?{policy.render(var.value)}"
