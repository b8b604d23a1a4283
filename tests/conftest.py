import pytest

from dir_cleaner.console import ConsoleIO


class ScriptedConsole(ConsoleIO):
    """Replays canned answers and records everything shown to the user."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def read_line(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("script exhausted")
        # Padded so the caller has to trim
        return f" {self.answers.pop(0)}\n"

    def write_line(self, message):
        self.output.append(message)


@pytest.fixture
def scripted_console():
    """Factory: scripted_console("n", "1", "done")."""
    return lambda *answers: ScriptedConsole(answers)


@pytest.fixture
def tree(tmp_path):
    """
    root/
      a/target.txt
      b/c/target.txt
      b/other.txt
    """
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "target.txt").write_text("a")
    (tmp_path / "b" / "c").mkdir(parents=True)
    (tmp_path / "b" / "c" / "target.txt").write_text("c")
    (tmp_path / "b" / "other.txt").write_text("other")
    return tmp_path
