import os
import stat
import logging
from datetime import datetime, UTC
from typing import List, Optional, Set, Tuple

from tqdm import tqdm

from .. import config
from ..models import DirEntry, FileRecord


class DirectoryScanner:
    def __init__(self, disable_progress: Optional[bool] = None):
        # Same meaning as tqdm's disable: None hides it when stderr is not a terminal
        self.disable_progress = disable_progress

    def scan(self, root, target_name: str) -> List[FileRecord]:
        """
        Collects every file under root (at any depth) named exactly target_name.

        The current directory's matches come before those of its
        subdirectories (depth-first, pre-order). Raises OSError if root, or
        any directory below it, cannot be listed.
        """
        root = os.fspath(root)
        logging.info(f"Scanning {root} for '{target_name}'...")

        root_stat = os.stat(root)
        visited: Set[Tuple[int, int]] = {(root_stat.st_dev, root_stat.st_ino)}

        with tqdm(desc="Scanning", unit="dir", disable=self.disable_progress, leave=False) as progress:
            records = self._scan_dir(root, target_name, visited, progress)

        logging.info(f"Scan complete. Found {len(records)} matching files.")
        return records

    def _scan_dir(self,
                  directory: str,
                  target_name: str,
                  visited: Set[Tuple[int, int]],
                  progress: tqdm) -> List[FileRecord]:
        with os.scandir(directory) as it:
            entries = list(it)
        progress.update(1)

        # Sort for stable traversal order
        entries.sort(key=lambda e: (e.name.lower(), e.name))

        files: List[DirEntry] = []
        dirs: List[DirEntry] = []
        for e in entries:
            info = self._stat_entry(e)
            if info is None:
                continue
            if stat.S_ISDIR(info.stat.st_mode):
                dirs.append(info)
            elif stat.S_ISREG(info.stat.st_mode):
                files.append(info)

        records = []
        for info in files:
            if os.path.basename(info.path) != target_name:
                continue
            record = self._build_record(info, directory)
            if record:
                records.append(record)

        for info in dirs:
            # Symlinked directories can point back up the tree
            identity = (info.stat.st_dev, info.stat.st_ino)
            if identity in visited:
                logging.debug(f"Already visited {info.path}, not descending again")
                continue
            visited.add(identity)
            records.extend(self._scan_dir(info.path, target_name, visited, progress))

        return records

    def _stat_entry(self, entry: os.DirEntry) -> Optional[DirEntry]:
        """Follows symlinks. Returns None when the entry can't be stat'ed."""
        try:
            return DirEntry(path=entry.path, stat=entry.stat())
        except OSError as e:
            logging.debug(f"Skipping {entry.path}: {e}")
            return None

    def _build_record(self, info: DirEntry, folder: str) -> Optional[FileRecord]:
        try:
            created = datetime.fromtimestamp(self._creation_timestamp(info.stat), UTC)
        except (OverflowError, OSError, ValueError) as e:
            logging.warning(f"Skipping {info.path}: creation time unavailable ({e})")
            return None

        return FileRecord(
            name=os.path.basename(info.path),
            folder=folder,
            creation_date=created.strftime(config.DATE_FORMAT),
            path=info.path,
        )

    @staticmethod
    def _creation_timestamp(st: os.stat_result) -> float:
        # st_birthtime is missing on most Linux builds; ctime is the closest stand-in
        birthtime = getattr(st, "st_birthtime", None)
        return birthtime if birthtime is not None else st.st_ctime
