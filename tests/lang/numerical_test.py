import unittest

from lambdaeval.lang.numerical import cnumber, number
from lambdaeval.pure.grammar import parse
from lambdaeval.pure.reduction import normalize
from lambdaeval.pure.term import Application, BoundVariable, Function


class NumericalTestCase(unittest.TestCase):

    def test_cnumber(self):
        should_fail = [-2, 0.3, 4.0, 14.2, "3", True]
        for case in should_fail:
            self.assertRaises(ValueError, cnumber, case)

        should_pass = {0: parse("\\f.\\x.x"), 3: parse("\\f.\\x.f (f (f x))")}
        for case, result in should_pass.items():
            self.assertEqual(result, cnumber(case), case)

    def test_number(self):
        should_fail = [
            parse("\\f.\\x.f f"),
            parse("\\f.\\x.x f x"),
            parse("\\f.\\x.f x x"),
            parse("\\x.x"),
            parse("\\f.\\x.\\y.y"),
            parse("\\f.\\x.x (f x)"),
            parse("a"),
            Function(Function(BoundVariable(2))),
        ]
        for case in should_fail:
            self.assertIsNone(number(case), case)

        should_pass = {3: parse("\\f.\\x.f (f (f x))"), 0: parse("\\f.\\x.x"), 1: parse("\\a.\\b.a b")}
        for result, case in should_pass.items():
            self.assertEqual(result, number(case), case)

    def test_literal_round_trip(self):
        for num in [0, 1, 2, 25, 1000]:
            self.assertEqual(num, number(normalize(parse(str(num)))), num)

    def test_reduced_numerals(self):
        cases = {
            "\\f.\\x.f(f x)": 2,
            "(\\n.\\f.\\x.f (n f x)) 4": 5,
            "(\\m.\\n.\\f.\\x.m f (n f x)) 2 3": 5,
            "(\\m.\\n.\\f.m (n f)) 3 4": 12,
            "(\\b.\\e.e b) 2 3": 8,
        }
        for case, result in cases.items():
            self.assertEqual(result, number(normalize(parse(case))), case)

    def test_large(self):
        body = BoundVariable(0)
        for _ in range(5000):
            body = Application(BoundVariable(1), body)
        self.assertEqual(5000, number(Function(Function(body))))


if __name__ == '__main__':
    unittest.main()
