import unittest

from condlog.clauses import (
    Constant,
    DataPattern,
    FnExpr,
    NotClause,
    OrClause,
    PredExpr,
    Variable,
    clause_from_dict,
    pattern,
    term_from_dict,
)
from condlog.errors import ClauseError


class TestConstants(unittest.TestCase):
    def test_string_constant_is_quoted_and_escaped(self) -> None:
        self.assertEqual(Constant.string("My Page").value, '"My Page"')
        self.assertEqual(Constant.string('say "hi"').value, '"say \\"hi\\""')
        self.assertEqual(Constant.string("a\\b").value, '"a\\\\b"')

    def test_keyword_requires_colon(self) -> None:
        self.assertEqual(Constant.keyword(":block/refs").value, ":block/refs")
        with self.assertRaises(ClauseError):
            Constant.keyword("block/refs")

    def test_number_and_raw(self) -> None:
        self.assertEqual(Constant.number(1700000000000).value, "1700000000000")
        self.assertEqual(Constant.number(12.0).value, "12")
        self.assertEqual(Constant.raw("2").value, "2")
        with self.assertRaises(ClauseError):
            Constant.number(True)

    def test_variable_name_must_be_a_string(self) -> None:
        self.assertEqual(Variable("").to_dict(), {"type": "variable", "value": ""})
        with self.assertRaises(ClauseError):
            Variable(3)  # type: ignore[arg-type]


class TestClauseShapes(unittest.TestCase):
    def test_data_pattern_to_dict(self) -> None:
        clause = pattern(Variable("A"), ":block/children", Variable("B"))
        self.assertEqual(
            clause.to_dict(),
            {
                "type": "data-pattern",
                "arguments": [
                    {"type": "variable", "value": "A"},
                    {"type": "constant", "value": ":block/children"},
                    {"type": "variable", "value": "B"},
                ],
            },
        )

    def test_data_pattern_arity(self) -> None:
        with self.assertRaises(ClauseError):
            DataPattern((Variable("A"), Constant.keyword(":block/refs")))  # type: ignore[arg-type]

    def test_fn_expr_carries_scalar_binding(self) -> None:
        clause = FnExpr("re-pattern", (Constant.string("x+"),), binding=Variable("date-regex"))
        self.assertEqual(
            clause.to_dict(),
            {
                "type": "fn-expr",
                "fn": "re-pattern",
                "arguments": [{"type": "constant", "value": '"x+"'}],
                "binding": {
                    "type": "bind-scalar",
                    "variable": {"type": "variable", "value": "date-regex"},
                },
            },
        )

    def test_nested_clauses(self) -> None:
        inner = pattern(Variable("A"), ":block/heading", Constant.raw("2"))
        negation = NotClause([inner])
        self.assertEqual(negation.clauses, (inner,))
        self.assertEqual(negation.to_dict()["type"], "not-clause")
        disjunction = OrClause([inner, inner])
        self.assertEqual(len(disjunction.to_dict()["clauses"]), 2)
        with self.assertRaises(ClauseError):
            NotClause([Variable("A")])  # type: ignore[list-item]

    def test_clause_from_dict_restores_tree(self) -> None:
        title = Variable("A-Title")
        tree = NotClause(
            (
                OrClause(
                    (
                        pattern(Variable("A"), ":block/string", title),
                        pattern(Variable("A"), ":node/title", title),
                    )
                ),
                PredExpr("clojure.string/includes?", (title, Constant.string("x"))),
            )
        )
        self.assertEqual(clause_from_dict(tree.to_dict()), tree)

    def test_clause_from_dict_rejects_unknown_payloads(self) -> None:
        with self.assertRaises(ClauseError):
            clause_from_dict({"type": "rule-expr"})
        with self.assertRaises(ClauseError):
            clause_from_dict({"type": "fn-expr", "fn": "f", "arguments": [], "binding": {}})
        with self.assertRaises(ClauseError):
            term_from_dict({"type": "blank", "value": "x"})
        with self.assertRaises(ClauseError):
            clause_from_dict({"type": "or-clause", "clauses": "nope"})


if __name__ == "__main__":
    unittest.main()
