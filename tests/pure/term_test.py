import unittest

from lambdaeval.pure.term import Application, BoundVariable, FreeVariable, Function, Name, is_closed, names


class TermTestCase(unittest.TestCase):

    def test_negative_index(self):
        self.assertRaises(ValueError, BoundVariable, -1)

    def test_immutable(self):
        term = Function(BoundVariable(0))
        with self.assertRaises(AttributeError):
            term.body = BoundVariable(1)

    def test_name_position_ignored(self):
        self.assertEqual(Name("I", 0), Name("I", 12))
        self.assertNotEqual(Name("I"), Name("K"))

    def test_is_closed(self):
        should_fail = [FreeVariable("x"), BoundVariable(0), Function(BoundVariable(1)),
                       Function(Application(BoundVariable(0), FreeVariable("y")))]
        for case in should_fail:
            self.assertFalse(is_closed(case), case)

        should_pass = [Function(BoundVariable(0)), Function(Function(BoundVariable(1))), Name("I")]
        for case in should_pass:
            self.assertTrue(is_closed(case), case)

    def test_names(self):
        term = Application(Name("A"), Function(Application(Name("B"), Name("A"))))
        self.assertEqual({"A", "B"}, names(term))
        self.assertEqual(set(), names(FreeVariable("x")))


if __name__ == '__main__':
    unittest.main()
