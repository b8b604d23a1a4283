import os
from dataclasses import dataclass


@dataclass(frozen=True)
class FileRecord:
    """
    A file whose name matched the search target.
    """
    name: str
    folder: str             # directory being scanned when the match was found
    creation_date: str      # UTC, config.DATE_FORMAT
    path: str

    def show_info(self) -> str:
        """Returns the record as an indented block, one field per line."""
        return (
            f"\tfile name: {self.name} \n"
            f"\tdirectory: {self.folder} \n"
            f"\tcreation date: {self.creation_date}"
        )

    def delete(self):
        """Removes the underlying file. Raises OSError on failure."""
        os.remove(self.path)


@dataclass
class DirEntry:
    """Path plus its stat snapshot, only used while walking a directory."""
    path: str
    stat: os.stat_result
