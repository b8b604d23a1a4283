"""
Console input/output used by the interactive session.

The controller only talks to this object, so tests can hand it a scripted
replacement instead of the real terminal.
"""


class ConsoleIO:
    def read_line(self, prompt: str) -> str:
        """Prints the prompt on its own line and returns the raw answer.

        Raises EOFError when stdin is exhausted.
        """
        print(prompt)
        return input()

    def write_line(self, message: str):
        print(message)
