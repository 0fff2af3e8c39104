"""Weekly schedule and floor layout models for HomePlan."""

from typing import Dict, List

from pydantic import Field

from homeplan.models.base import PlanModel


class WeeklyScheduleEntry(PlanModel):
    """Work planned for one week of the project."""

    week_number: int = Field(..., ge=1, description="Global week number (1-based)")
    phase_name: str = Field(..., description="Phase the week belongs to")
    tasks: List[str] = Field(default_factory=list, description="Tasks for the week")
    workforce_required: Dict[str, int] = Field(
        default_factory=dict, description="Worker type -> crew size"
    )
    materials_needed: Dict[str, int] = Field(
        default_factory=dict, description="Material name -> weekly quantity"
    )


class LayoutConfig(PlanModel):
    """Room counts for a floor."""

    bedrooms: int = Field(..., ge=0)
    bathrooms: int = Field(..., ge=0)
    kitchen: int = Field(..., ge=0)
    living_room: int = Field(..., ge=0)
    dining_room: int = Field(..., ge=0)
    balconies: int = Field(..., ge=0)
    utilities: int = Field(..., ge=0)

    @property
    def total_rooms(self) -> int:
        return (
            self.bedrooms
            + self.bathrooms
            + self.kitchen
            + self.living_room
            + self.dining_room
            + self.balconies
            + self.utilities
        )


class LayoutSuggestion(PlanModel):
    """Suggested room program for one floor."""

    floor_number: int = Field(..., ge=1, description="Floor number (1 = ground)")
    total_rooms: int = Field(..., ge=0, description="Sum of all room counts")
    layout_config: LayoutConfig = Field(..., description="Room counts")
    suggestions: str = Field(..., description="Placement advice for the floor")
