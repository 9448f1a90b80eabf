"""Built-in relations and their clause generators.

Every generator maps ``(source, target)`` to a fixed clause template over
the block/page graph schema: references, page membership, parent/child
edges, headings, titles, user attribution and timestamps.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from condlog.clauses import (
    Clause,
    Constant,
    FnExpr,
    OrClause,
    PredExpr,
    Variable,
    pattern,
)
from condlog.config import TranslatorConfig
from condlog.dates import is_date_placeholder, to_epoch_millis
from condlog.host import HostServices
from condlog.options import StaticOptions, from_enumerator
from condlog.registry import RelationHandler, RelationRegistry


class BuiltinRelation(str, Enum):
    """Built-in relation names, in registration order."""

    SELF = "self"
    REFERENCES = "references"
    IS_REFERENCED_BY = "is referenced by"
    IS_IN_PAGE = "is in page"
    HAS_TITLE = "has title"
    WITH_TEXT_IN_TITLE = "with text in title"
    HAS_ATTRIBUTE = "has attribute"
    HAS_CHILD = "has child"
    HAS_PARENT = "has parent"
    HAS_ANCESTOR = "has ancestor"
    HAS_DESCENDANT = "has descendant"
    WITH_TEXT = "with text"
    CREATED_BY = "created by"
    EDITED_BY = "edited by"
    REFERENCES_TITLE = "references title"
    HAS_HEADING = "has heading"
    IS_IN_PAGE_WITH_TITLE = "is in page with title"
    CREATED_AFTER = "created after"
    CREATED_BEFORE = "created before"
    EDITED_AFTER = "edited after"
    EDITED_BEFORE = "edited before"


INCLUDES = "clojure.string/includes?"


class BuiltinRelations:
    """Clause generators for the built-in relation family."""

    def __init__(
        self,
        host: Optional[HostServices] = None,
        config: Optional[TranslatorConfig] = None,
    ) -> None:
        self.host = host or HostServices()
        self.config = config or TranslatorConfig()

    def handlers(self) -> dict[str, RelationHandler]:
        page_titles = from_enumerator(self.host.page_titles)
        user_names = from_enumerator(self.host.user_display_names)
        R = BuiltinRelation
        table = {
            R.SELF: RelationHandler(self.self_),
            R.REFERENCES: RelationHandler(self.references),
            R.IS_REFERENCED_BY: RelationHandler(self.is_referenced_by),
            R.IS_IN_PAGE: RelationHandler(self.is_in_page),
            R.HAS_TITLE: RelationHandler(self.has_title, page_titles),
            R.WITH_TEXT_IN_TITLE: RelationHandler(self.with_text_in_title),
            R.HAS_ATTRIBUTE: RelationHandler(self.has_attribute, page_titles),
            R.HAS_CHILD: RelationHandler(self.has_child),
            R.HAS_PARENT: RelationHandler(self.has_parent),
            R.HAS_ANCESTOR: RelationHandler(self.has_ancestor),
            R.HAS_DESCENDANT: RelationHandler(self.has_descendant),
            R.WITH_TEXT: RelationHandler(self.with_text),
            R.CREATED_BY: RelationHandler(self.created_by, user_names),
            R.EDITED_BY: RelationHandler(self.edited_by, user_names),
            R.REFERENCES_TITLE: RelationHandler(self.references_title, page_titles),
            R.HAS_HEADING: RelationHandler(
                self.has_heading, StaticOptions(self.config.heading_levels)
            ),
            R.IS_IN_PAGE_WITH_TITLE: RelationHandler(self.is_in_page_with_title, page_titles),
            R.CREATED_AFTER: RelationHandler(self.created_after),
            R.CREATED_BEFORE: RelationHandler(self.created_before),
            R.EDITED_AFTER: RelationHandler(self.edited_after),
            R.EDITED_BEFORE: RelationHandler(self.edited_before),
        }
        return {relation.value: handler for relation, handler in table.items()}

    def self_(self, source: str, target: str) -> list[Clause]:
        return [pattern(Variable(source), ":block/uid", Constant.string(source))]

    def references(self, source: str, target: str) -> list[Clause]:
        return [pattern(Variable(source), ":block/refs", Variable(target))]

    def is_referenced_by(self, source: str, target: str) -> list[Clause]:
        return [pattern(Variable(target), ":block/refs", Variable(source))]

    def is_in_page(self, source: str, target: str) -> list[Clause]:
        return [pattern(Variable(source), ":block/page", Variable(target))]

    def has_title(self, source: str, target: str) -> list[Clause]:
        return self._title_check(source, target)

    def with_text_in_title(self, source: str, target: str) -> list[Clause]:
        title = Variable(f"{source}-Title")
        return [
            pattern(Variable(source), ":node/title", title),
            PredExpr(INCLUDES, (title, self._text(target))),
        ]

    def has_attribute(self, source: str, target: str) -> list[Clause]:
        attribute = Variable(f"{target}-Attribute")
        return [
            pattern(attribute, ":node/title", self._text(target)),
            pattern(Variable(target), ":block/refs", attribute),
            pattern(Variable(target), ":block/parents", Variable(source)),
        ]

    def has_child(self, source: str, target: str) -> list[Clause]:
        return [pattern(Variable(source), ":block/children", Variable(target))]

    def has_parent(self, source: str, target: str) -> list[Clause]:
        return [pattern(Variable(target), ":block/children", Variable(source))]

    def has_ancestor(self, source: str, target: str) -> list[Clause]:
        return [pattern(Variable(source), ":block/parents", Variable(target))]

    def has_descendant(self, source: str, target: str) -> list[Clause]:
        return [pattern(Variable(target), ":block/parents", Variable(source))]

    def with_text(self, source: str, target: str) -> list[Clause]:
        text = Variable(f"{source}-String")
        return [
            OrClause(
                (
                    pattern(Variable(source), ":block/string", text),
                    pattern(Variable(source), ":node/title", text),
                )
            ),
            PredExpr(INCLUDES, (text, self._text(target))),
        ]

    def created_by(self, source: str, target: str) -> list[Clause]:
        return self._user(source, target, ":create/user")

    def edited_by(self, source: str, target: str) -> list[Clause]:
        return self._user(source, target, ":edit/user")

    def references_title(self, source: str, target: str) -> list[Clause]:
        return [
            pattern(Variable(source), ":block/refs", Variable(target)),
            *self._title_check(target, target),
        ]

    def has_heading(self, source: str, target: str) -> list[Clause]:
        return [pattern(Variable(source), ":block/heading", Constant.raw(target))]

    def is_in_page_with_title(self, source: str, target: str) -> list[Clause]:
        return [
            pattern(Variable(source), ":block/page", Variable(target)),
            *self._title_check(target, target),
        ]

    def created_after(self, source: str, target: str) -> list[Clause]:
        return self._time(source, target, ":create/time", "CreateTime", "<")

    def created_before(self, source: str, target: str) -> list[Clause]:
        return self._time(source, target, ":create/time", "CreateTime", ">")

    def edited_after(self, source: str, target: str) -> list[Clause]:
        return self._time(source, target, ":edit/time", "EditTime", "<")

    def edited_before(self, source: str, target: str) -> list[Clause]:
        return self._time(source, target, ":edit/time", "EditTime", ">")

    def _text(self, value: str) -> Constant:
        return Constant.string(self.host.normalize_title(value))

    def _title_check(self, node: str, title: str) -> list[Clause]:
        # `node` carries the title; `title` is either a literal or {date}.
        if not is_date_placeholder(title, self.config.date_placeholder):
            return [pattern(Variable(node), ":node/title", self._text(title))]
        title_var = Variable(f"{node}-Title")
        regex_var = Variable(self.config.date_regex_variable)
        return [
            pattern(Variable(node), ":node/title", title_var),
            FnExpr(
                "re-pattern",
                (Constant.string(self.config.day_note_pattern),),
                binding=regex_var,
            ),
            PredExpr("re-find", (regex_var, title_var)),
        ]

    def _user(self, source: str, target: str, attribute: str) -> list[Clause]:
        user = Variable(f"{source}-User")
        return [
            pattern(Variable(source), attribute, user),
            pattern(user, ":user/display-name", self._text(target)),
        ]

    def _time(self, source: str, target: str, attribute: str, suffix: str, op: str) -> list[Clause]:
        moment = Variable(f"{source}-{suffix}")
        millis = to_epoch_millis(self.host.parse_date(target))
        return [
            pattern(Variable(source), attribute, moment),
            PredExpr(op, (Constant.number(millis), moment)),
        ]


def builtin_registry(
    host: Optional[HostServices] = None,
    config: Optional[TranslatorConfig] = None,
) -> RelationRegistry:
    """Fresh registry seeded with the built-in relations."""

    return RelationRegistry(BuiltinRelations(host, config).handlers())
