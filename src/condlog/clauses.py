"""Clause model emitted by the translator.

Clauses serialize to the JSON shape consumed by the downstream Datalog
engine: every node carries a ``type`` tag, terms are
``{"type": "variable" | "constant", "value": ...}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Union

from condlog.errors import ClauseError


@dataclass(frozen=True)
class Variable:
    """Logic variable term."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ClauseError("Variable name must be a string.")

    def to_dict(self) -> dict[str, Any]:
        return {"type": "variable", "value": self.value}


@dataclass(frozen=True)
class Constant:
    """Constant term holding query-language text, already quoted.

    Build constants through the factories so quoting stays in one place.
    """

    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "constant", "value": self.value}

    @staticmethod
    def keyword(name: str) -> "Constant":
        """Attribute keyword such as ``:block/refs``."""

        if not name.startswith(":") or len(name) < 2:
            raise ClauseError(f"Keyword constant must start with ':': {name!r}")
        return Constant(name)

    @staticmethod
    def string(text: str) -> "Constant":
        """Double-quoted string literal with backslashes and quotes escaped."""

        return Constant(quote_string(text))

    @staticmethod
    def number(value: int | float) -> "Constant":
        if isinstance(value, bool):
            raise ClauseError("Numeric constant must not be a bool.")
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return Constant(str(value))

    @staticmethod
    def raw(token: str) -> "Constant":
        """Verbatim token, emitted without quoting."""

        return Constant(str(token))


Term = Union[Variable, Constant]


def quote_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def term_from_dict(data: dict[str, Any]) -> Term:
    """Deserialize a term from a dict."""

    if not isinstance(data, dict):
        raise ClauseError("Term must be a dict.")
    kind = data.get("type")
    value = data.get("value")
    if not isinstance(value, str):
        raise ClauseError(f"Term value must be a string: {value!r}")
    if kind == "variable":
        return Variable(value)
    if kind == "constant":
        return Constant(value)
    raise ClauseError(f"Unknown term type: {kind}")


class Clause:
    """Base class for clause nodes."""

    def to_dict(self) -> dict[str, Any]:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass(frozen=True)
class DataPattern(Clause):
    """``[entity attribute value]`` triple match."""

    arguments: tuple[Term, Term, Term]

    def __post_init__(self) -> None:
        args = tuple(self.arguments)
        if len(args) != 3:
            raise ClauseError(f"Data pattern needs 3 arguments, got {len(args)}.")
        for arg in args:
            if not isinstance(arg, (Variable, Constant)):
                raise ClauseError("Data pattern arguments must be Variable or Constant.")
        object.__setattr__(self, "arguments", args)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "data-pattern", "arguments": [a.to_dict() for a in self.arguments]}


@dataclass(frozen=True)
class OrClause(Clause):
    """Disjunction: matches when any branch matches."""

    clauses: tuple[Clause, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "clauses", _clause_tuple(self.clauses))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "or-clause", "clauses": [c.to_dict() for c in self.clauses]}


@dataclass(frozen=True)
class NotClause(Clause):
    """Negation: matches when the enclosed clauses do not."""

    clauses: tuple[Clause, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "clauses", _clause_tuple(self.clauses))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "not-clause", "clauses": [c.to_dict() for c in self.clauses]}


@dataclass(frozen=True)
class FnExpr(Clause):
    """Function call whose scalar result is bound to ``binding``."""

    fn: str
    arguments: tuple[Term, ...]
    binding: Variable

    def __post_init__(self) -> None:
        if not self.fn:
            raise ClauseError("FnExpr fn must be non-empty.")
        if not isinstance(self.binding, Variable):
            raise ClauseError("FnExpr binding must be a Variable.")
        object.__setattr__(self, "arguments", _term_tuple(self.arguments))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "fn-expr",
            "fn": self.fn,
            "arguments": [a.to_dict() for a in self.arguments],
            "binding": {"type": "bind-scalar", "variable": self.binding.to_dict()},
        }


@dataclass(frozen=True)
class PredExpr(Clause):
    """Boolean predicate used as a filter."""

    pred: str
    arguments: tuple[Term, ...]

    def __post_init__(self) -> None:
        if not self.pred:
            raise ClauseError("PredExpr pred must be non-empty.")
        object.__setattr__(self, "arguments", _term_tuple(self.arguments))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "pred-expr",
            "pred": self.pred,
            "arguments": [a.to_dict() for a in self.arguments],
        }


def pattern(entity: Term, attribute: str, value: Term) -> DataPattern:
    """Shorthand for a data pattern with a keyword attribute."""

    return DataPattern((entity, Constant.keyword(attribute), value))


def _term_tuple(items: Iterable[Term]) -> tuple[Term, ...]:
    terms = tuple(items)
    for term in terms:
        if not isinstance(term, (Variable, Constant)):
            raise ClauseError("Clause arguments must be Variable or Constant.")
    return terms


def _clause_tuple(items: Iterable[Clause]) -> tuple[Clause, ...]:
    clauses = tuple(items)
    for clause in clauses:
        if not isinstance(clause, Clause):
            raise ClauseError(f"Expected a clause, got {type(clause).__name__}.")
    return clauses


def clause_from_dict(data: dict[str, Any]) -> Clause:
    """Deserialize a clause tree from its dict form."""

    if not isinstance(data, dict):
        raise ClauseError("Clause must be a dict.")
    kind = data.get("type")
    if kind == "data-pattern":
        return DataPattern(tuple(term_from_dict(t) for t in _list(data, "arguments")))
    if kind == "or-clause":
        return OrClause(tuple(clause_from_dict(c) for c in _list(data, "clauses")))
    if kind == "not-clause":
        return NotClause(tuple(clause_from_dict(c) for c in _list(data, "clauses")))
    if kind == "fn-expr":
        binding = data.get("binding")
        if not isinstance(binding, dict) or binding.get("type") != "bind-scalar":
            raise ClauseError("fn-expr requires a bind-scalar binding.")
        variable = term_from_dict(binding.get("variable") or {})
        if not isinstance(variable, Variable):
            raise ClauseError("fn-expr binding must be a variable.")
        return FnExpr(
            fn=str(data.get("fn") or ""),
            arguments=tuple(term_from_dict(t) for t in _list(data, "arguments")),
            binding=variable,
        )
    if kind == "pred-expr":
        return PredExpr(
            pred=str(data.get("pred") or ""),
            arguments=tuple(term_from_dict(t) for t in _list(data, "arguments")),
        )
    raise ClauseError(f"Unknown clause type: {kind}")


def clauses_to_dicts(clauses: Iterable[Clause]) -> list[dict[str, Any]]:
    return [clause.to_dict() for clause in clauses]


def _list(data: dict[str, Any], key: str) -> list[Any]:
    items = data.get(key, [])
    if not isinstance(items, list):
        raise ClauseError(f"{key} must be a list.")
    return items
