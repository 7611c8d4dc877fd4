"""
Cabinet refinishing calculator.

Only cabinet_count matters. Every cabinet is treated as 2 doors, 2 drawers
and one face frame, 30 sqft of surface regardless of its real geometry.
"""

from .base import BaseCalculator


class CabinetCalculator(BaseCalculator):

    PROJECT_TYPE = "cabinet"

    def measure_surfaces(self, dimensions: dict, surfaces: dict) -> list:
        geo = self.config.geometry
        cabinet_count = self.parse_number(dimensions.get("cabinet_count"))

        # Cabinets paint every face; any selected surface turns the job on
        if not cabinet_count or not any(surfaces.values()):
            return []

        doors = cabinet_count * geo["cabinet_doors_each"]
        drawers = cabinet_count * geo["cabinet_drawers_each"]
        frames = cabinet_count

        labor_hours = (doors * self.throughput("hours_per_door")
                       + drawers * self.throughput("hours_per_drawer")
                       + frames * self.throughput("hours_per_frame"))

        return [self.make_measure(
            "cabinets", cabinet_count * geo["cabinet_sqft"], labor_hours,
        )]
