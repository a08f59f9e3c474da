"""
Sorting application records by Hilbert value.

Each Entity is mapped to a point of the 3D lattice (age, years employed,
rounded wage) and the entities are then ordered along the curve.
"""

from typing import List, Optional

from .hilbert_curve import HilbertCurve

# Wages go up to ~2000, so 12 bits per axis
EXAMPLE_DIMENSION = 3
EXAMPLE_ITERATIONS = 12


class Entity:
    def __init__(self, id: int, age: int, years_employed: int, wage: float):
        self.id = id
        self.age = age
        self.years_employed = years_employed
        self.wage = wage

    def __repr__(self):
        return f"Entity(id={self.id}, age={self.age}, years_employed={self.years_employed}, wage={self.wage})"


def entity_coords(entity: Entity) -> List[int]:
    """Map an Entity to a point in the lattice."""
    return [int(entity.age), int(entity.years_employed), int(round(entity.wage))]


def sample_entities() -> List[Entity]:
    return [
        Entity(1, 30, 2, 1000),
        Entity(2, 32, 6, 1500.5),
        Entity(3, 40, 15, 780.8),
        Entity(4, 31, 4, 860.6),
        Entity(5, 45, 20, 2043.4),
    ]


def run_example(curve: Optional[HilbertCurve] = None) -> List[str]:
    """
    Compute the Hilbert value of each sample entity, then sort them.

    Returns:
        Report lines, one per entity before and after sorting
    """
    if curve is None:
        curve = HilbertCurve(EXAMPLE_DIMENSION, EXAMPLE_ITERATIONS)

    entities = sample_entities()
    lines = []

    for entity in entities:
        coords = entity_coords(entity)
        lines.append(
            f"Entity {entity.id} has coordinates {' '.join(str(c) for c in coords)} "
            f"and Hilbert value {curve.hilbert_number_from_point(coords)}"
        )

    sorted_entities, hilbert_values = curve.sort_data(entities, entity_coords)

    lines.append("")
    lines.append("Now Sorted")
    for entity, hilbert_value in zip(sorted_entities, hilbert_values):
        lines.append(f"Entity {entity.id} has Hilbert value {hilbert_value}")

    return lines
