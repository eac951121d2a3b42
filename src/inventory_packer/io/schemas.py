"""Data schemas for input/output operations."""

from typing import List, Optional
from pydantic import BaseModel, Field

from inventory_packer.grid import mask_from_cells
from inventory_packer.models import Item, PackingPlan, Placement


class CandidateSchema(BaseModel):
    """Schema for a candidate item."""
    id: str = Field(description="Identifier of the item")
    width: int = Field(description="Width in cells")
    height: int = Field(description="Height in cells")
    stack_size: Optional[int] = Field(None, ge=1, description="Stack size, omitted for unstackable items")

    def to_item(self) -> Item:
        return Item(id=self.id, width=self.width, height=self.height, stack_size=self.stack_size)


class OptimizeRequest(BaseModel):
    """Schema for an optimization request."""
    candidates: List[CandidateSchema] = Field(default_factory=list, description="Items marked to move")
    existing: List[Placement] = Field(default_factory=list, description="Items already in the grid")
    ignored: Optional[List[List[bool]]] = Field(None, description="HEIGHT x WIDTH mask of unusable cells")
    ignored_cells: List[List[int]] = Field(default_factory=list, description="Unusable cells as [x, y] pairs")
    seed_count: Optional[int] = Field(None, ge=1, description="Largest groups tried as seeds")

    def to_items(self) -> List[Item]:
        return [candidate.to_item() for candidate in self.candidates]

    def build_mask(self) -> Optional[List[List[bool]]]:
        """Merge the mask and the cell list; raises ValueError on bad shapes."""
        if self.ignored is None and not self.ignored_cells:
            return None

        for cell in self.ignored_cells:
            if len(cell) != 2:
                raise ValueError(f"Ignored cell {cell} must be an [x, y] pair")
        mask = mask_from_cells((x, y) for x, y in self.ignored_cells)
        if self.ignored is not None:
            if len(self.ignored) != len(mask) or any(len(row) != len(mask[0]) for row in self.ignored):
                raise ValueError(f"Ignored mask must be {len(mask)} rows of {len(mask[0])} cells")
            mask = [
                [a or bool(b) for a, b in zip(mask_row, row)]
                for mask_row, row in zip(mask, self.ignored)
            ]
        return mask


class PlacementSchema(BaseModel):
    """Schema for one selected item and where it goes."""
    id: str
    x: int
    y: int
    width: int
    height: int


class TrialSchema(BaseModel):
    """Schema for one seeded trial."""
    seed: List[int] = Field(description="Seed footprint [width, height]")
    placed: bool
    score: float
    items: int


class MetricsSchema(BaseModel):
    used_area: int
    free_area: int
    fill_rate: float = Field(ge=0, le=1)


class OptimizeResponse(BaseModel):
    """Schema for an optimization result."""
    selected: List[str] = Field(description="Item ids in placement order")
    placements: List[PlacementSchema]
    score: float
    metrics: MetricsSchema
    trials: List[TrialSchema]

    @classmethod
    def from_plan(cls, plan: PackingPlan) -> "OptimizeResponse":
        return cls(
            selected=[p.item.id for p in plan.placements],
            placements=[
                PlacementSchema(id=p.item.id, x=p.x, y=p.y, width=p.item.width, height=p.item.height)
                for p in plan.placements
            ],
            score=plan.score,
            metrics=MetricsSchema(
                used_area=plan.used_area,
                free_area=plan.free_area,
                fill_rate=plan.fill_rate,
            ),
            trials=[
                TrialSchema(
                    seed=[t.seed_width, t.seed_height],
                    placed=t.seed_placed,
                    score=t.score,
                    items=len(t.placements),
                )
                for t in plan.trials
            ],
        )
