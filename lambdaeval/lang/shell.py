"""Handles interactive/command-line mode for the lambdaeval interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lambda calculus interpreter shell."""
    intro = "Lambda calculus interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""

    def default(self, line):
        """Executes arbitrary lambdaeval line."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            line = self._tmp_line + self.sess.preprocess_line(line)

            if self.sess.needs_continuation(line):
                self._tmp_line = line + " "
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            self.sess.add(line)
            while self.sess.results:
                print(self.sess.pop())

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lambdaeval interpreter!\n\n"
              "Terms are written with '\\' (or 'λ') for lambda, single lowercase letters for \n"
              "variables and numbers for Church numerals. '\\xy.x' is short for '\\x.\\y.x'.\n\n"
              "Try it out by typing 'K := \\xy.x'. This will bind the lambda term to the \n"
              "name 'K'. Next, try typing 'K a b'. This will reduce to 'a'. Expressions are \n"
              "reduced to normal form, and Church numerals are reported as numbers: try \n"
              "'ADD 2 3'.\n\n"
              "A line with unclosed parentheses continues on the next line (prompt '. '). \n"
              "Close them with ')' to evaluate the whole input. Type 'exit' to leave.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
