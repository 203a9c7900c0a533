# course.py
from __future__ import annotations

from dataclasses import dataclass, field

from advising.normalize import normalize


@dataclass(frozen=True)
class Course:
    id: str
    title: str
    prerequisites: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_fields(cls, fields: list[str]) -> "Course":
        # [id, title, prereq1, prereq2, ...]
        return cls(
            id=normalize(fields[0]),
            title=fields[1],
            prerequisites=tuple(normalize(p) for p in fields[2:]),
        )

    def basic_line(self) -> str:
        return f"{self.id}, {self.title}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "prerequisites": list(self.prerequisites),
        }
