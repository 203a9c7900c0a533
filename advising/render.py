# render.py
from __future__ import annotations

import sys

import pandas as pd

from advising.catalog import Catalog

NOT_FOUND = "Course not found."


def render_listing(catalog: Catalog) -> list[str]:
    return [c.basic_line() for c in catalog.enumerate()]


def render_detail(catalog: Catalog, query: str) -> list[str]:
    course = catalog.lookup(query)
    if course is None:
        return [NOT_FOUND]

    lines = [course.basic_line()]
    if not course.prerequisites:
        lines.append("Prerequisites: None")
        return lines

    entries = []
    for pid in course.prerequisites:
        pre = catalog.lookup(pid)
        # a dangling id still prints, with the legacy "None Required" wording
        entries.append(f"{pre.id}: {pre.title}" if pre else f"{pid}: None Required")
    lines.append("Prerequisites: " + ", ".join(entries))
    return lines


def print_all(catalog: Catalog, out=None) -> None:
    out = out or sys.stdout
    for line in render_listing(catalog):
        print(line, file=out)


def print_detail(catalog: Catalog, query: str, out=None) -> None:
    out = out or sys.stdout
    for line in render_detail(catalog, query):
        print(line, file=out)


def catalog_frame(catalog: Catalog) -> pd.DataFrame:
    rows = [
        {"id": c.id, "title": c.title, "prerequisites": ", ".join(c.prerequisites)}
        for c in catalog.enumerate()
    ]
    return pd.DataFrame(rows, columns=["id", "title", "prerequisites"])
