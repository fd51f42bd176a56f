from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Record:
    """A single catalog entry."""

    author: str
    title: str
    year: int
    available: bool = True

    def __post_init__(self) -> None:
        self.author = self.author.strip()
        self.title = self.title.strip()

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        status = "available" if self.available else "lent out"
        return f"{self.title} by {self.author} ({self.year}, {status})"

    def to_dict(self) -> dict:
        return {
            "author": self.author,
            "title": self.title,
            "year": self.year,
            "available": self.available,
        }

    @staticmethod
    def from_dict(data: dict) -> "Record":
        return Record(
            author=data["author"],
            title=data["title"],
            year=int(data["year"]),
            available=bool(data.get("available", True)),
        )
