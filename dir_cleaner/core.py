import re
import sys
import logging
from pathlib import Path
from typing import List, Optional, TypeVar

from .console import ConsoleIO
from .exceptions import InvalidInputError
from .models import FileRecord
from .scanning.filesystem import DirectoryScanner
from . import config

T = TypeVar("T")

# Unsigned decimal, optional leading '+'
_ENTRY_NUMBER = re.compile(r"\+?[0-9]+")


def parse_entry_number(answer: str) -> int:
    """Parses a deletion answer into an entry number (not range checked)."""
    if not _ENTRY_NUMBER.fullmatch(answer):
        raise InvalidInputError(f"Not an entry number: {answer!r}")
    number = int(answer)
    # Anything past the platform word size is not a number we can index with
    if number > sys.maxsize:
        raise InvalidInputError(f"Entry number too large: {answer!r}")
    return number


def swap_remove(items: List[T], index: int) -> T:
    """Removes items[index] by moving the last element into its slot."""
    last = items.pop()
    if index == len(items):
        return last
    removed = items[index]
    items[index] = last
    return removed


class DirCleanerApp:
    def __init__(self, console: ConsoleIO, scanner: Optional[DirectoryScanner] = None):
        self.console = console
        self.scanner = scanner or DirectoryScanner()

    def run(self, root: Path) -> List[FileRecord]:
        """
        Runs one interactive session.
        1. Ask for the file name
        2. Scan root for it and list the matches
        3. Keep everything, or delete entries one by one

        Returns the records that were deleted. OSError from the scan or from a
        deletion propagates and ends the session.
        """
        target = self.console.read_line(config.SEARCH_PROMPT).strip()

        files = self.scanner.scan(root, target)
        if not files:
            self.console.write_line(config.NO_MATCHES_MSG.format(name=target))

        for i, record in enumerate(files, start=1):
            self.console.write_line(f"Entry {i}")
            self.console.write_line(record.show_info())

        answer = self.console.read_line(config.KEEP_ALL_PROMPT).strip()
        if answer == config.KEEP_ALL_ANSWER:
            self.console.write_line(config.GOODBYE_MSG)
            return []

        return self._deletion_loop(files)

    def _deletion_loop(self, files: List[FileRecord]) -> List[FileRecord]:
        deleted: List[FileRecord] = []
        while True:
            answer = self.console.read_line(config.DELETE_PROMPT).strip()
            if answer == config.DONE_TOKEN:
                self.console.write_line(config.GOODBYE_MSG)
                break

            try:
                index = parse_entry_number(answer)
            except InvalidInputError as e:
                logging.debug(str(e))
                self.console.write_line(config.INVALID_NUMBER_MSG)
                continue

            # A wrong number ends the session rather than asking again
            if index < 1 or index > len(files):
                logging.debug(f"Entry {index} out of range (1-{len(files)})")
                self.console.write_line(config.OUT_OF_RANGE_MSG)
                break

            record = swap_remove(files, index - 1)
            record.delete()
            logging.info(f"Deleted {record.path}")
            self.console.write_line(config.DELETED_MSG)
            deleted.append(record)

        return deleted
