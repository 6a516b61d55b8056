from dataclasses import dataclass, field
from typing import FrozenSet

IMAGE_EXTENSIONS: FrozenSet[str] = frozenset({"png", "jpg", "jpeg", "gif", "bmp"})
FINGERPRINT_STRATEGIES = ("raw", "normalized")


@dataclass
class Settings:
    recursive: bool = True
    strategy: str = "raw"
    canonical_size: int = 256
    strict: bool = False
    extensions: FrozenSet[str] = field(default=IMAGE_EXTENSIONS)

    def validate(self) -> None:
        """Raise ValueError if any setting is out of range."""
        if self.strategy not in FINGERPRINT_STRATEGIES:
            raise ValueError(
                f"Unknown fingerprint strategy: {self.strategy!r}. "
                f"Must be one of {', '.join(FINGERPRINT_STRATEGIES)}"
            )
        if self.canonical_size < 1:
            raise ValueError(f"canonical_size must be positive, got {self.canonical_size}")
        if not self.extensions:
            raise ValueError("At least one image extension is required")
