import logging

import pytest

from dir_cleaner import config
from dir_cleaner.exceptions import MissingArgumentError
from dir_cleaner.main import main, parse_args, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        yield
    finally:
        for h in root.handlers:
            if h not in handlers:
                h.close()
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture
def answers(monkeypatch):
    """Feeds the given answers to input(); EOFError once they run out."""
    def feed(*lines):
        it = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return feed


def test_parse_args_discards_program_name():
    args = parse_args(["/usr/bin/dir-cleaner", "./photos", "-v"])
    assert args.root == "./photos"
    assert args.verbose
    assert not args.no_progress


def test_parse_args_missing_root():
    with pytest.raises(MissingArgumentError) as exc:
        parse_args(["dir-cleaner"])
    assert "Usage" in str(exc.value)


def test_main_missing_root_prints_usage(capsys):
    assert main(["dir-cleaner"]) == 1
    assert config.USAGE in capsys.readouterr().err


def test_main_deletes_selected_file(tmp_path, answers, capsys):
    p = tmp_path / "test.txt"
    p.write_text("x")
    answers("test.txt", "n", "1", "done")

    assert main(["dir-cleaner", str(tmp_path), "--no-progress"]) == 0

    assert not p.exists()
    out = capsys.readouterr().out
    assert config.SEARCH_PROMPT in out
    assert "Entry 1" in out
    assert config.DELETED_MSG in out


def test_main_keep_all(tmp_path, answers):
    p = tmp_path / "test.txt"
    p.write_text("x")
    answers("test.txt", "y")

    assert main(["dir-cleaner", str(tmp_path), "--no-progress"]) == 0
    assert p.exists()


def test_main_unreadable_root(tmp_path, answers, capsys):
    answers("test.txt")

    assert main(["dir-cleaner", str(tmp_path / "missing"), "--no-progress"]) == 1
    assert "missing" in capsys.readouterr().err


def test_main_end_of_input_cancels(tmp_path, answers):
    (tmp_path / "test.txt").write_text("x")
    answers("test.txt", "n")

    assert main(["dir-cleaner", str(tmp_path), "--no-progress"]) == 1
    assert (tmp_path / "test.txt").exists()


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "cleaner.log"
    setup_logging(verbose=True, log_file=log_file)

    logging.info("hello from the cleaner")
    for h in logging.getLogger().handlers:
        h.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert "[INFO] hello from the cleaner" in log_file.read_text(encoding="utf-8")
