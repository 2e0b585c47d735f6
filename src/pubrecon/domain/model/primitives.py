"""Small value objects shared across the model."""

from __future__ import annotations

from dataclasses import dataclass


def normalize_path(value: str) -> str:
    """Collapse duplicate separators, force a leading ``/`` and drop any trailing one."""

    segments = [segment for segment in value.strip().split("/") if segment]
    return "/" + "/".join(segments)


@dataclass(frozen=True, slots=True)
class ItemPath:
    """Path structure of a live item, richer than the bare path string."""

    full_path: str

    def __post_init__(self) -> None:
        if not self.full_path.strip():
            raise ValueError("Item path must not be blank")
        object.__setattr__(self, "full_path", normalize_path(self.full_path))

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(segment for segment in self.full_path.split("/") if segment)

    @property
    def name(self) -> str:
        segments = self.segments
        return segments[-1] if segments else ""

    @property
    def parent_path(self) -> str | None:
        segments = self.segments
        if len(segments) <= 1:
            return None
        return "/" + "/".join(segments[:-1])

    def __str__(self) -> str:
        return self.full_path
