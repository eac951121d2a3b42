from __future__ import annotations

from pydantic import BaseModel, Field

from typing import Any, Optional, Tuple


class Item(BaseModel):
    """Candidate item with its footprint in grid cells."""

    id: str = Field(description="Identifier of the item in the host inventory")
    width: int = Field(description="Footprint width in cells")
    height: int = Field(description="Footprint height in cells")
    stack_size: Optional[int] = Field(
        default=None,
        description="Stack size, None for items that do not stack")
    payload: Any = Field(
        default=None,
        exclude=True,
        description="Opaque reference to the host's inventory entity")

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def stack_weight(self) -> int:
        """Stack size used for scoring; unstackable items weigh 1."""
        return self.stack_size if self.stack_size is not None else 1


class Placement(BaseModel):
    """Rectangle already resident in the destination grid."""

    x: int = Field(description="Column of the top-left cell")
    y: int = Field(description="Row of the top-left cell")
    width: int = Field(description="Width in cells")
    height: int = Field(description="Height in cells")

    def as_rect(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


class ItemPlacement(BaseModel):
    """Position chosen for one selected item."""

    item: Item
    x: int = Field(ge=0, description="Column of the top-left cell")
    y: int = Field(ge=0, description="Row of the top-left cell")

    def as_rect(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.item.width, self.item.height)


class TrialResult(BaseModel):
    """Outcome of one seeded trial."""

    seed_width: int
    seed_height: int
    seed_placed: bool = False
    placements: list[ItemPlacement] = Field(default_factory=list)
    score: float = 0.0
    # result length after each fill sweep
    sweep_sizes: list[int] = Field(default_factory=list)

    @property
    def items(self) -> list[Item]:
        return [p.item for p in self.placements]


class PackingPlan(BaseModel):
    """Standard result returned by the combination search."""
    placements: list[ItemPlacement] = Field(default_factory=list)
    score: float = 0.0
    trials: list[TrialResult] = Field(default_factory=list)
    used_area: int = 0
    free_area: int = 0
    fill_rate: float = 0.0

    @property
    def items(self) -> list[Item]:
        return [p.item for p in self.placements]
