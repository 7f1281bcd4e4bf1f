from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

PathSegment: TypeAlias = str | int


@dataclass(frozen=True, slots=True)
class ModelPath:
    """Location inside a manifest, used to point validation errors at a field.

    Each nested call derives its own child path; ancestors are never touched.
    """

    segments: tuple[PathSegment, ...]

    @classmethod
    def root(cls, segment: PathSegment) -> ModelPath:
        return cls((segment,))

    def child(self, segment: PathSegment) -> ModelPath:
        return ModelPath((*self.segments, segment))

    def __str__(self) -> str:
        return ".".join(str(segment) for segment in self.segments)
