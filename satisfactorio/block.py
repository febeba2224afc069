"""Block instances stored in chunks."""

from __future__ import annotations

from dataclasses import dataclass

AIR_ID = 0
_U32_MAX = 0xFFFF_FFFF


@dataclass(frozen=True)
class BlockInstance:
    """A single block, identified by a 32-bit unsigned id; id 0 is air."""

    id: int

    def __post_init__(self) -> None:
        if not 0 <= self.id <= _U32_MAX:
            raise ValueError(f"block id {self.id} does not fit in 32 unsigned bits")

    @classmethod
    def air(cls) -> BlockInstance:
        """The empty block."""
        return cls(AIR_ID)

    def is_air(self) -> bool:
        return self.id == AIR_ID