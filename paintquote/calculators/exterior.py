"""
Exterior house calculator.

Siding = building perimeter × height less 15% for openings.
Soffit assumes a 2 ft overhang all around; fascia runs the perimeter at 1 ft.
Trim = corner boards + trim around each window.
"""

from .base import BaseCalculator


class ExteriorCalculator(BaseCalculator):

    PROJECT_TYPE = "exterior"

    def measure_surfaces(self, dimensions: dict, surfaces: dict) -> list:
        measures = []
        geo = self.config.geometry

        house = self.get_dims(dimensions, "length", "width", "height")
        footprint = self.get_dims(dimensions, "length", "width")
        window_count = self.parse_number(dimensions.get("windows"))

        # 1. Siding
        if surfaces.get("siding") and house:
            length, width, height = house
            siding_area = self.perimeter(length, width) * height
            siding_area *= self.config.opening_factor["exterior"]
            measures.append(self.make_measure(
                "siding", siding_area, siding_area / self.throughput("siding_sqft_per_hr"),
            ))

        # 2. Soffit: overhang widens the footprint on every side
        if surfaces.get("soffit") and footprint:
            length, width = footprint
            overhang = geo["soffit_overhang_ft"]
            soffit_area = 2 * (length + width + 2 * overhang) * overhang
            measures.append(self.make_measure(
                "soffit", soffit_area, soffit_area / self.throughput("soffit_sqft_per_hr"),
            ))

        # 3. Fascia
        if surfaces.get("fascia") and footprint:
            fascia_lf = self.perimeter(*footprint)
            measures.append(self.make_measure(
                "fascia",
                fascia_lf * geo["fascia_height_ft"],
                fascia_lf / self.throughput("fascia_lf_per_hr"),
            ))

        # 4. Trim: corners full height plus window surrounds
        if surfaces.get("trim") and house:
            height = house[2]
            trim_lf = (height * geo["exterior_corner_runs"]
                       + window_count * geo["exterior_trim_lf_per_window"])
            measures.append(self.make_measure(
                "trim",
                trim_lf * geo["trim_sqft_per_lf"],
                trim_lf / self.throughput("trim_lf_per_hr"),
            ))

        # 5. Doors
        door_count = self.parse_number(dimensions.get("doors"))
        if surfaces.get("doors") and door_count:
            measures.append(self.make_measure(
                "doors",
                door_count * self.config.door_sqft["exterior"],
                door_count * self.throughput("hours_per_door"),
            ))

        # 6. Window trim
        if surfaces.get("windows") and window_count:
            measures.append(self.make_measure(
                "window trim",
                window_count * geo["window_trim_sqft"],
                window_count * self.throughput("hours_per_window"),
            ))

        return measures
