"""
Bump the build counter in the generated lib/version.dart.

Reads the previous build number (if any), increments it and rewrites the
whole file from a fixed template. A missing or unparsable file restarts the
counter at 1.
"""
from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Repository root is the parent of tools/, independent of the cwd
REPO_ROOT = Path(__file__).resolve().parent.parent
VERSION_FILE = REPO_ROOT / "lib" / "version.dart"

VERSION_NUMBER = "1.0.0"

BUILD_RE = re.compile(r"build = ([0-9]+);")

VERSION_TEMPLATE = """\
// This file is auto-generated. Do not edit manually.
class Version {{
  static const String number = '{number}';
  static const int build = {build};
}}
"""


@dataclass(frozen=True)
class VersionRecord:
    number: str
    build: int

    def render(self) -> str:
        return VERSION_TEMPLATE.format(number=self.number, build=self.build)


def read_build(path: Path) -> int:
    """
    Return the build number stored in path, or 0 if there is none.

    Unreadable and unparsable files are treated the same way: as if no
    version file existed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.info("[update-version] No existing version file found, starting at build 1")
        return 0

    m = BUILD_RE.search(content)
    if not m:
        logger.debug("[update-version] No build number in %s, starting at build 1", path)
        return 0
    return int(m.group(1))


def bump(path: Path = VERSION_FILE) -> VersionRecord:
    record = VersionRecord(VERSION_NUMBER, read_build(path) + 1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(record.render(), encoding="utf-8")

    logger.info("[update-version] Updated build number to %s", record.build)
    return record


def _configure_logging() -> None:
    # Errors go to stderr, everything else to stdout
    out = logging.StreamHandler(sys.stdout)
    out.addFilter(lambda record: record.levelno < logging.ERROR)
    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.ERROR)
    logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=[out, err])


def main() -> int:
    _configure_logging()
    try:
        bump(VERSION_FILE)
    except OSError as e:
        logger.error("[update-version] Error updating version: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
