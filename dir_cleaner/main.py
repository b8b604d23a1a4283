import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .console import ConsoleIO
from .core import DirCleanerApp
from .exceptions import MissingArgumentError
from .scanning.filesystem import DirectoryScanner
from . import config

def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to stderr and, optionally, a file.

    stdout is left to the interactive dialogue.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format=config.LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

def parse_args(argv: List[str]) -> argparse.Namespace:
    """
    argv[0] is the program name and is discarded; the root directory is required.
    """
    prog = Path(argv[0]).name if argv else "dir-cleaner"
    p = argparse.ArgumentParser(prog=prog, description="Find files by exact name and delete unwanted copies")

    p.add_argument("root", nargs="?", default=None, help="Directory to search (recursively)")

    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    p.add_argument("--no-progress", action="store_true", help="Hide the scan progress counter")

    args = p.parse_args(argv[1:])
    if args.root is None:
        raise MissingArgumentError()
    return args

def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv if argv is None else argv

    try:
        args = parse_args(argv)
    except MissingArgumentError as e:
        print(e, file=sys.stderr)
        return 1

    setup_logging(args.verbose, args.log_file)

    scanner = DirectoryScanner(disable_progress=True if args.no_progress else None)
    app = DirCleanerApp(ConsoleIO(), scanner)

    try:
        deleted = app.run(args.root)
    except (KeyboardInterrupt, EOFError):
        logging.warning("Operation cancelled by user.")
        return 1
    except OSError as e:
        logging.debug("Fatal filesystem error.", exc_info=True)
        print(e, file=sys.stderr)
        return 1

    logging.info(f"Session finished. Deleted {len(deleted)} files.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
