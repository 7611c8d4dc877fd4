"""
Commercial space calculator.

Larger open areas: no opening deduction on walls, faster throughput.
Floors are coated (epoxy) at their own rate.
"""

from .base import BaseCalculator


class CommercialCalculator(BaseCalculator):

    PROJECT_TYPE = "commercial"

    def measure_surfaces(self, dimensions: dict, surfaces: dict) -> list:
        measures = []
        geo = self.config.geometry

        space = self.get_dims(dimensions, "length", "width", "height")
        floor = self.get_dims(dimensions, "length", "width")

        if surfaces.get("walls") and space:
            length, width, height = space
            wall_area = self.perimeter(length, width) * height
            wall_area *= self.config.opening_factor["commercial"]
            measures.append(self.make_measure(
                "walls", wall_area, wall_area / self.throughput("walls_sqft_per_hr"),
            ))

        if surfaces.get("ceiling") and floor:
            ceiling_area = floor[0] * floor[1]
            measures.append(self.make_measure(
                "ceiling", ceiling_area, ceiling_area / self.throughput("ceiling_sqft_per_hr"),
            ))

        if surfaces.get("trim") and floor:
            trim_lf = self.perimeter(*floor)
            measures.append(self.make_measure(
                "trim",
                trim_lf * geo["trim_sqft_per_lf"],
                trim_lf / self.throughput("trim_lf_per_hr"),
            ))

        door_count = self.parse_number(dimensions.get("doors"))
        if surfaces.get("doors") and door_count:
            measures.append(self.make_measure(
                "doors",
                door_count * self.config.door_sqft["commercial"],
                door_count * self.throughput("hours_per_door"),
            ))

        if surfaces.get("floors") and floor:
            floor_area = floor[0] * floor[1]
            measures.append(self.make_measure(
                "floors", floor_area, floor_area / self.throughput("floors_sqft_per_hr"),
            ))

        return measures
