import io
import unittest
from contextlib import redirect_stdout

from lambdaeval.lang.error import ErrorHandler
from lambdaeval.lang.session import Session
from lambdaeval.lang.shell import Shell


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.error_handler = ErrorHandler(fatal=False, color=False)
        self.shell = Shell(Session(self.error_handler, prelude=False))

    def run_lines(self, *lines):
        out = io.StringIO()
        with redirect_stdout(out):
            for line in lines:
                self.shell.onecmd(line)
        return out.getvalue()

    def test_session(self):
        out = self.run_lines("K := \\xy.x", "K a b")
        self.assertEqual("bound K to \\a.\\b.a\na\nNot a Church numeral\n", out)

    def test_continuation(self):
        self.assertEqual("", self.run_lines("(\\x.x"))
        self.assertEqual(Shell.secondary_prompt, self.shell.prompt)

        self.assertEqual("z\nNot a Church numeral\n", self.run_lines(") z"))
        self.assertEqual(Shell._tmp_prompt, self.shell.prompt)

    def test_error_does_not_exit(self):
        out = self.run_lines("x)", "y")
        self.assertEqual("x)\n ^\nError (column 2): expected end of input\ny\nNot a Church numeral\n", out)
        self.assertEqual(1, self.error_handler.errors)

    def test_help_mentions_continuation(self):
        out = self.run_lines("help")
        self.assertIn("unclosed parentheses", out)
        self.assertIn("Type 'exit' to leave.", out)

    def test_exit(self):
        self.assertTrue(self.shell.onecmd("exit"))
        with redirect_stdout(io.StringIO()):
            self.assertTrue(self.shell.onecmd("EOF"))


if __name__ == '__main__':
    unittest.main()
