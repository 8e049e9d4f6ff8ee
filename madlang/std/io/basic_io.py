import sys
from typing import Optional, TextIO


class BasicIO:
    """Line-oriented access to the process streams.

    Streams left as None are resolved at call time, so a redirected
    sys.stdin/sys.stdout (e.g. under pytest's capsys) is honoured.
    """
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin
        self.stdout = stdout

    def write_line(self, text: str) -> None:
        out = self.stdout if self.stdout is not None else sys.stdout
        out.write(text + '\n')
        out.flush()

    def read_line(self) -> Optional[str]:
        """Return the next line without its terminator, or None at EOF."""
        src = self.stdin if self.stdin is not None else sys.stdin
        line = src.readline()
        if line == '':
            return None
        return line.rstrip('\r\n')
