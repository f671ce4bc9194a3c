"""Session control for the lambdaeval language. Evaluates lines one at a time against a single Namespace, either in
command-line mode or file interpretation mode.
"""

from lambdaeval.lang import prelude as seed
from lambdaeval.lang.error import GenericException
from lambdaeval.lang.lexical import Binding, Grammar
from lambdaeval.lang.namespace import Namespace


class Session:
    """Governs a lambdaeval session, with control over the scope of named funcs."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path=SH_FILE, prelude=True, max_steps=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path            # used for error messages
        self.max_steps = max_steps  # reduction step budget per expression, None for unlimited

        self.namespace = Namespace()
        self.lines = []    # list of (line, line num) still to run, file mode only
        self.results = []  # Bindings/Evaluations that have not been popped yet

        if prelude:
            seed.load(self.namespace)

        if path != Session.SH_FILE:
            try:
                with open(path, "r", encoding="utf-8") as file:
                    for line_num, line in enumerate(file):
                        line = self.preprocess_line(line)
                        if line:
                            self.lines.append((line, line_num + 1))
            except OSError:
                raise GenericException(f"'{path}' could not be opened")

    @staticmethod
    def preprocess_line(line):
        """Strips comments and trailing whitespace from a line from a file or command-line."""
        if ";;" in line:
            line = line[:line.index(";;")]  # get rid of comments
        return line.rstrip()

    @staticmethod
    def needs_continuation(line):
        """Whether line has unclosed parentheses, i.e. the command-line should keep reading."""
        return line.count("(") > line.count(")")

    def evaluate(self, line):
        """Evaluates a single preprocessed line and returns its Binding or Evaluation. Raises GenericExceptions, in
        which case the namespace is left unchanged.
        """
        stmt = Grammar.infer(line)
        result = stmt.execute(self.namespace, self.max_steps)

        if isinstance(result, Binding):
            if result.overwritten:
                self.error_handler.warn(f"'{result.name}' was already defined and has been overwritten")
            if self.namespace.is_cyclic(result.name):
                self.error_handler.warn(f"'{result.name}' refers to itself and cannot be expanded")
        return result

    def add(self, line, line_num=None):
        """Evaluates line and stores the result in self.results. Blank lines are ignored."""
        line = self.preprocess_line(line)
        if not line.strip():
            return None

        self.error_handler.register_line(self.path, line, line_num)  # in case error is raised
        result = self.evaluate(line)
        self.results.append(result)
        self.error_handler.remove_line(self.path)  # error was not raised

        return result

    def run(self):
        """Runs this session's file lines in order, printing each result. A line that fails is reported by the error
        handler and does not stop the following lines.
        """
        while self.lines:
            line, line_num = self.lines.pop(0)
            with self.error_handler:
                self.add(line, line_num)
            while self.results:
                print(self.pop())

    def pop(self):
        """Removes and returns the display text of the oldest result."""
        return str(self.results.pop(0))
