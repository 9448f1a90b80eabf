"""Translate relation-based query conditions into Datalog clauses."""

from __future__ import annotations

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
    clause_from_dict,
    clauses_to_dicts,
    term_from_dict,
)
from condlog.config import TranslatorConfig
from condlog.dates import day_note_title, is_date_placeholder, parse_nlp_date
from condlog.errors import (
    ClauseError,
    CondlogError,
    ConditionError,
    DateParseError,
    ValidationError,
)
from condlog.host import HostServices
from condlog.options import DynamicOptions, StaticOptions, TargetOptions
from condlog.registry import RelationHandler, RelationRegistry
from condlog.relations import BuiltinRelation, BuiltinRelations, builtin_registry
from condlog.render import DatalogRenderer
from condlog.schemas import ConditionModel, condition_json_schema, parse_conditions
from condlog.translator import (
    Condition,
    ConditionTranslator,
    build_translator,
    condition_to_datalog,
)
from condlog.validator import ClauseValidator, validate_clauses

__all__ = [
    "Clause",
    "Constant",
    "DataPattern",
    "FnExpr",
    "NotClause",
    "OrClause",
    "PredExpr",
    "Term",
    "Variable",
    "clause_from_dict",
    "clauses_to_dicts",
    "term_from_dict",
    "TranslatorConfig",
    "day_note_title",
    "is_date_placeholder",
    "parse_nlp_date",
    "ClauseError",
    "CondlogError",
    "ConditionError",
    "DateParseError",
    "ValidationError",
    "HostServices",
    "DynamicOptions",
    "StaticOptions",
    "TargetOptions",
    "RelationHandler",
    "RelationRegistry",
    "BuiltinRelation",
    "BuiltinRelations",
    "builtin_registry",
    "DatalogRenderer",
    "ConditionModel",
    "condition_json_schema",
    "parse_conditions",
    "Condition",
    "ConditionTranslator",
    "build_translator",
    "condition_to_datalog",
    "ClauseValidator",
    "validate_clauses",
]
