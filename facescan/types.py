from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_xywh(cls, b: Sequence[Any]) -> "Rect":
        # accepts tuples, lists and numpy rows from detectMultiScale
        x, y, w, h = b
        return cls(int(x), int(y), int(w), int(h))

    @property
    def x2(self) -> int:
        return self.x + self.width

    @property
    def y2(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def clamped(self) -> "Rect":
        """Copy with negative width/height clamped to zero."""
        if self.width >= 0 and self.height >= 0:
            return self
        return Rect(self.x, self.y, max(0, self.width), max(0, self.height))

    def as_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass
class ImageResult:
    path: Path
    faces: List[Rect] = field(default_factory=list)
    saved_to: Optional[Path] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path),
            "faces": [f.as_dict() for f in self.faces],
            "saved_to": str(self.saved_to) if self.saved_to is not None else None,
        }
