# loader.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from advising.catalog import Catalog
from advising.course import Course
from advising.normalize import normalize

logger = logging.getLogger(__name__)

DELIMITER = ","


@dataclass
class LoadResult:
    path: str
    loaded: int = 0
    skipped: list[int] = field(default_factory=list)  # line numbers of malformed records
    duplicates: list[str] = field(default_factory=list)


def split_record(line: str) -> list[str]:
    # no quoting or escapes: fields never contain commas
    return line.split(DELIMITER)


def decode(raw: bytes, path) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        # registrar exports are often latin1; every byte decodes there
        logger.warning("%s is not UTF-8; reading it as latin1", path)
        return raw.decode("latin1")


def split_lines(raw: bytes, source) -> list[str]:
    # one record per "\n"; other Unicode line breaks belong to the title
    return [line[:-1] if line.endswith("\r") else line for line in decode(raw, source).split("\n")]


def read_lines(path) -> list[str] | None:
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        logger.error("Could not open file: %s (%s)", path, e)
        return None
    return split_lines(raw, path)


def fill_catalog(lines: list[str], catalog: Catalog, source) -> LoadResult:
    logger.info("Loading courses from %s...", source)
    result = LoadResult(path=str(source))

    for lineno, line in enumerate(lines, start=1):
        if not line:
            continue
        fields = split_record(line)
        if len(fields) < 2 or not normalize(fields[0]):
            logger.warning("Invalid course line %d (skipped): %s", lineno, line)
            result.skipped.append(lineno)
            continue

        course = Course.from_fields(fields)
        if catalog.insert(course):
            result.loaded += 1
        else:
            result.duplicates.append(course.id)

    logger.info("Courses loaded into data structure: %d loaded, %d skipped, %d duplicate",
                result.loaded, len(result.skipped), len(result.duplicates))
    return result


def load_courses(path, catalog: Catalog) -> LoadResult | None:
    """
    Read a course file into the catalog, one "id,title[,prereq...]" per line.
    Returns None (catalog untouched) when the file cannot be read.
    """
    lines = read_lines(path)
    if lines is None:
        return None
    return fill_catalog(lines, catalog, Path(path))


def load_uploaded(raw: bytes, catalog: Catalog, name="upload") -> LoadResult:
    """Same as load_courses, for file contents already in memory (web uploads)."""
    return fill_catalog(split_lines(raw, name), catalog, name)
