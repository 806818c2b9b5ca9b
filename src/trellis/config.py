from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrellisConfig:
    encoding: str = "utf-8"
    known_classes: frozenset[str] = field(default_factory=frozenset)  # empty: accept any class
    percentage_range: tuple[int, int] = (0, 100)

    @classmethod
    def from_env(cls) -> TrellisConfig:
        """Build a config from ``TRELLIS_*`` environment variables."""
        classes = os.environ.get("TRELLIS_CLASSES", "")
        return cls(
            encoding=os.environ.get("TRELLIS_ENCODING", "utf-8"),
            known_classes=frozenset(c.strip() for c in classes.split(",") if c.strip()),
        )
