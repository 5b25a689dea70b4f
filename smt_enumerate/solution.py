from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Solution:
    """Concrete values of the tracked variables, in tracked-variable order."""

    values: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def as_dict(self, names: Sequence[str]) -> dict[str, int]:
        """Map variable names to values, pairing them by position."""
        if len(names) != len(self.values):
            raise ValueError(
                f"Expected {len(self.values)} names, got {len(names)}"
            )
        return dict(zip(names, self.values))
