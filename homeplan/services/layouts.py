"""Layout suggestion generator for HomePlan.

Picks a room program per floor from the per-floor built-up area tier and
the floor's position in the building.
"""

from typing import List, NamedTuple, Optional, Tuple

from homeplan.models.project import ProjectInputs
from homeplan.models.schedule import LayoutConfig, LayoutSuggestion


class RoomProgram(NamedTuple):
    """Room counts for an area tier.

    ``balconies`` of None means no balcony on the ground floor and one
    on every other floor.
    """

    bedrooms: int
    bathrooms: int
    kitchen: int
    living_room: int
    dining_room: int
    balconies: Optional[int]
    utilities: int


# (exclusive upper bound on per-floor sq ft, program)
AREA_TIERS: List[Tuple[int, RoomProgram]] = [
    (800, RoomProgram(2, 1, 1, 1, 0, None, 1)),
    (1500, RoomProgram(3, 2, 1, 1, 1, None, 1)),
    (2500, RoomProgram(4, 3, 1, 1, 1, 2, 1)),
]

# Anything at or above the last bound
LARGEST_PROGRAM = RoomProgram(5, 4, 1, 2, 1, 2, 2)

GROUND_FLOOR_TEXT = (
    "Ground floor optimized for common areas. Consider placing living room, "
    "dining room, and kitchen with easy access. Include a guest bedroom if "
    "space permits. Ensure proper ventilation and natural lighting."
)
TOP_FLOOR_TEXT = (
    "Top floor ideal for private spaces. Position bedrooms to maximize privacy "
    "and natural light. Consider a terrace or extended balcony space. Master "
    "bedroom can have attached bathroom and balcony access."
)
MIDDLE_FLOOR_TEXT = (
    "Mid-floor layout balanced for bedrooms and family spaces. Optimize room "
    "placement for cross-ventilation. Consider positioning bathrooms centrally "
    "to reduce plumbing costs."
)


def room_program_for(built_up_area: float) -> RoomProgram:
    """Select the room program for a per-floor area."""
    for upper_bound, program in AREA_TIERS:
        if built_up_area < upper_bound:
            return program
    return LARGEST_PROGRAM


def _floor_text(floor: int, number_of_floors: int) -> str:
    # Ground floor wins on single-storey buildings
    if floor == 1:
        return GROUND_FLOOR_TEXT
    if floor == number_of_floors:
        return TOP_FLOOR_TEXT
    return MIDDLE_FLOOR_TEXT


def generate_layouts(inputs: ProjectInputs) -> List[LayoutSuggestion]:
    """Generate one layout suggestion per floor, ground floor first."""
    program = room_program_for(inputs.built_up_area)
    suggestions = []

    for floor in range(1, inputs.number_of_floors + 1):
        is_ground_floor = floor == 1
        balconies = program.balconies
        if balconies is None:
            balconies = 0 if is_ground_floor else 1

        layout = LayoutConfig(
            bedrooms=program.bedrooms,
            bathrooms=program.bathrooms,
            kitchen=program.kitchen,
            living_room=program.living_room,
            dining_room=program.dining_room,
            balconies=balconies,
            utilities=program.utilities,
        )
        suggestions.append(
            LayoutSuggestion(
                floor_number=floor,
                total_rooms=layout.total_rooms,
                layout_config=layout,
                suggestions=_floor_text(floor, inputs.number_of_floors),
            )
        )

    return suggestions
