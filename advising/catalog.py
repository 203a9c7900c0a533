# catalog.py
from __future__ import annotations

import logging
from bisect import bisect_left
from typing import Iterator

from advising.course import Course
from advising.normalize import normalize

logger = logging.getLogger(__name__)


class Catalog:
    """Courses kept sorted by id, searched by binary search.

    Filled once by the loader, then only read. The first course filed
    under an id wins; later ones with the same id are refused.
    """

    def __init__(self):
        self._ids: list[str] = []  # sorted, parallel to _courses
        self._courses: list[Course] = []

    def insert(self, course: Course) -> bool:
        i = bisect_left(self._ids, course.id)
        if i < len(self._ids) and self._ids[i] == course.id:
            logger.warning("Duplicate course %s ignored (keeping %r)", course.id, self._courses[i].title)
            return False
        self._ids.insert(i, course.id)
        self._courses.insert(i, course)
        return True

    def lookup(self, course_id: str) -> Course | None:
        key = normalize(course_id)
        i = bisect_left(self._ids, key)
        if i < len(self._ids) and self._ids[i] == key:
            return self._courses[i]
        return None

    def enumerate(self) -> Iterator[Course]:
        return iter(tuple(self._courses))

    def ids(self) -> list[str]:
        return list(self._ids)

    def __iter__(self) -> Iterator[Course]:
        return self.enumerate()

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, course_id) -> bool:
        return self.lookup(course_id) is not None
