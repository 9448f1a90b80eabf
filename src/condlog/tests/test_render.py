import unittest
from datetime import datetime, timezone

from condlog.clauses import Constant, FnExpr, Variable, pattern
from condlog.errors import ClauseError
from condlog.host import HostServices
from condlog.render import DatalogRenderer
from condlog.translator import Condition, build_translator


class TestDatalogRenderer(unittest.TestCase):
    def setUp(self) -> None:
        host = HostServices(parse_date=lambda _t: datetime(2026, 10, 18, tzinfo=timezone.utc))
        self.translator = build_translator(host)
        self.renderer = DatalogRenderer()

    def test_render_pattern(self) -> None:
        clauses = self.translator.translate(Condition("A", "has child", "B"))
        self.assertEqual(self.renderer.render_clauses(clauses), "[?A :block/children ?B]")

    def test_render_negation_and_constants(self) -> None:
        clauses = self.translator.translate(Condition("A", "has heading", "2", negate=True))
        self.assertEqual(self.renderer.render_clauses(clauses), "(not [?A :block/heading 2])")

    def test_render_disjunction_and_predicate(self) -> None:
        clauses = self.translator.translate(Condition("A", "with text", "todo"))
        self.assertEqual(
            self.renderer.render_clauses(clauses),
            "(or [?A :block/string ?A-String] [?A :node/title ?A-String])\n"
            '[(clojure.string/includes? ?A-String "todo")]',
        )

    def test_render_function_binding(self) -> None:
        clauses = self.translator.translate(Condition("A", "has title", "{date}"))
        text = self.renderer.render_clauses(clauses)
        lines = text.splitlines()
        self.assertEqual(lines[0], "[?A :node/title ?A-Title]")
        self.assertTrue(lines[1].startswith('[(re-pattern "(January|'))
        self.assertTrue(lines[1].endswith('") ?date-regex]'))
        self.assertEqual(lines[2], "[(re-find ?date-regex ?A-Title)]")

    def test_render_timestamp_predicate(self) -> None:
        clauses = self.translator.translate(Condition("A", "created before", "yesterday"))
        self.assertEqual(
            self.renderer.render_clauses(clauses),
            "[?A :create/time ?A-CreateTime]\n[(> 1792281600000 ?A-CreateTime)]",
        )

    def test_render_query(self) -> None:
        clauses = self.translator.translate_all(
            [Condition("A", "references", "B"), Condition("B", "has title", "Home")]
        )
        self.assertEqual(
            self.renderer.render_query(["A"], clauses),
            '[:find ?A :where [?A :block/refs ?B] [?B :node/title "Home"]]',
        )
        with self.assertRaises(ClauseError):
            self.renderer.render_query([], clauses)

    def test_unsafe_variable_names_stay_distinct(self) -> None:
        clauses = [
            pattern(Variable("My Page"), ":node/title", Constant.string("My Page")),
            pattern(Variable("My_Page"), ":block/refs", Variable("My Page")),
        ]
        self.assertEqual(
            self.renderer.render_clauses(clauses),
            '[?My_Page :node/title "My Page"]\n[?My_Page_2 :block/refs ?My_Page]',
        )

    def test_render_single_clause(self) -> None:
        clause = FnExpr("ground", (Constant.number(5),), binding=Variable("n"))
        self.assertEqual(self.renderer.render_clause(clause), "[(ground 5) ?n]")


if __name__ == "__main__":
    unittest.main()
