"""
Interior room calculator.

Walls = perimeter × height less 10% for openings. Ceiling = L × W.
Trim runs the room perimeter. Doors priced per door.
"""

from .base import BaseCalculator


class InteriorCalculator(BaseCalculator):

    PROJECT_TYPE = "interior"

    def measure_surfaces(self, dimensions: dict, surfaces: dict) -> list:
        measures = []
        geo = self.config.geometry

        room = self.get_dims(dimensions, "length", "width", "height")
        floor = self.get_dims(dimensions, "length", "width")

        # 1. Walls
        if surfaces.get("walls") and room:
            length, width, height = room
            wall_area = self.perimeter(length, width) * height
            wall_area *= self.config.opening_factor["interior"]
            measures.append(self.make_measure(
                "walls", wall_area, wall_area / self.throughput("walls_sqft_per_hr"),
            ))

        # 2. Ceiling
        if surfaces.get("ceiling") and floor:
            length, width = floor
            ceiling_area = length * width
            measures.append(self.make_measure(
                "ceiling", ceiling_area, ceiling_area / self.throughput("ceiling_sqft_per_hr"),
            ))

        # 3. Trim: labor by linear foot, paint by sqft equivalent
        if surfaces.get("trim") and floor:
            trim_lf = self.perimeter(*floor)
            measures.append(self.make_measure(
                "trim",
                trim_lf * geo["trim_sqft_per_lf"],
                trim_lf / self.throughput("trim_lf_per_hr"),
            ))

        # 4. Doors
        door_count = self.parse_number(dimensions.get("doors"))
        if surfaces.get("doors") and door_count:
            measures.append(self.make_measure(
                "doors",
                door_count * self.config.door_sqft["interior"],
                door_count * self.throughput("hours_per_door"),
            ))

        return measures
