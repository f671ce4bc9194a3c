import unittest

from lambdaeval.lang.error import LexError, ParseError, ValidationError
from lambdaeval.lang.lexical import Binding, Evaluation, ExecStmt, Grammar, NamedFunc
from lambdaeval.lang.namespace import Namespace
from lambdaeval.pure.grammar import parse
from lambdaeval.pure.term import FreeVariable


class GrammarTestCase(unittest.TestCase):

    def test_infer(self):
        cases = {
            "I := \\x.x": NamedFunc,
            "K:=\\xy.x": NamedFunc,
            "I I": ExecStmt,
            "(\\x.x) a": ExecStmt,
        }
        for case, expected in cases.items():
            self.assertIsInstance(Grammar.infer(case), expected, case)


class NamedFuncTestCase(unittest.TestCase):

    def test_init(self):
        stmt = NamedFunc("  TWO := \\f.\\x.f (f x)")
        self.assertEqual("TWO", stmt.name)
        self.assertEqual(parse("2"), stmt.term)

    def test_first_declare_splits(self):
        # everything after the first ':=' is the term, so a second one is a lex error inside the term
        with self.assertRaises(LexError) as ctx:
            NamedFunc("A := x := y")
        self.assertEqual(7, ctx.exception.position)

    def test_invalid_name(self):
        cases = {"foo := x": 0, "  Ab := x": 3, " := x": 1, "A B := x": 1}
        for case, position in cases.items():
            with self.assertRaises(ValidationError, msg=case) as ctx:
                NamedFunc(case)
            self.assertEqual(position, ctx.exception.position, case)

    def test_positions_relative_to_line(self):
        with self.assertRaises(ParseError) as ctx:
            NamedFunc("ID := (\\x.x")
        self.assertEqual(11, ctx.exception.position)
        self.assertEqual("expected ')'", ctx.exception.msg)

    def test_execute(self):
        namespace = Namespace()
        result = NamedFunc("I := \\x.x").execute(namespace)
        self.assertEqual(Binding("I", parse("\\x.x"), False), result)
        self.assertEqual("bound I to \\a.a", str(result))
        self.assertTrue(NamedFunc("I := \\y.y").execute(namespace).overwritten)

    def test_definition_is_not_reduced(self):
        namespace = Namespace()
        NamedFunc("X := (\\x.x) y").execute(namespace)
        self.assertEqual(parse("(\\x.x) y"), namespace["X"])


class ExecStmtTestCase(unittest.TestCase):

    def test_execute(self):
        result = ExecStmt("(\\x.x)a").execute(Namespace())
        self.assertEqual(FreeVariable("a"), result.normal_form)
        self.assertIsNone(result.numeral)
        self.assertEqual("a\nNot a Church numeral", str(result))

    def test_numeral(self):
        result = ExecStmt("\\f.\\x.f(f x)").execute(Namespace())
        self.assertEqual(2, result.numeral)
        self.assertEqual("\\a.\\b.a (a b)\nChurch numeral for: 2", str(result))

    def test_steps(self):
        result = ExecStmt("(\\x.\\y.x) a b").execute(Namespace())
        self.assertIsInstance(result, Evaluation)
        self.assertEqual(2, result.steps)


if __name__ == '__main__':
    unittest.main()
