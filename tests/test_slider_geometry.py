import unittest

from headless_forms.component_schema import BoundingBox, CoordinatePoint
from headless_forms.slider.geometry import has_track_extent, position_to_value, track_percent
from headless_forms.slider.ranges import ValueRange

BOUNDS = ValueRange(min=0, max=100)
HORIZONTAL_TRACK = BoundingBox(x=10.0, y=0.0, width=200.0, height=20.0)
VERTICAL_TRACK = BoundingBox(x=0.0, y=50.0, width=20.0, height=200.0)


class PositionToValueTests(unittest.TestCase):
    def test_horizontal_ltr_maps_left_edge_to_min(self) -> None:
        self.assertEqual(position_to_value(CoordinatePoint(10, 5), HORIZONTAL_TRACK, "horizontal", "ltr", BOUNDS, 1), 0)
        self.assertEqual(position_to_value(CoordinatePoint(110, 5), HORIZONTAL_TRACK, "horizontal", "ltr", BOUNDS, 1), 50)
        self.assertEqual(position_to_value(CoordinatePoint(210, 5), HORIZONTAL_TRACK, "horizontal", "ltr", BOUNDS, 1), 100)

    def test_horizontal_ltr_is_increasing(self) -> None:
        values = [
            position_to_value(CoordinatePoint(x, 0), HORIZONTAL_TRACK, "horizontal", "ltr", BOUNDS, 1)
            for x in range(10, 211, 10)
        ]
        self.assertEqual(values, sorted(values))
        self.assertLess(values[0], values[-1])

    def test_horizontal_rtl_is_decreasing(self) -> None:
        values = [
            position_to_value(CoordinatePoint(x, 0), HORIZONTAL_TRACK, "horizontal", "rtl", BOUNDS, 1)
            for x in range(10, 211, 10)
        ]
        self.assertEqual(values, sorted(values, reverse=True))
        self.assertGreater(values[0], values[-1])

    def test_vertical_is_decreasing_downwards(self) -> None:
        for direction in ("ltr", "rtl"):
            values = [
                position_to_value(CoordinatePoint(0, y), VERTICAL_TRACK, "vertical", direction, BOUNDS, 1)
                for y in range(50, 251, 10)
            ]
            self.assertEqual(values, sorted(values, reverse=True))
            self.assertEqual(values[0], 100)
            self.assertEqual(values[-1], 0)

    def test_vertical_rtl_flips_once(self) -> None:
        point = CoordinatePoint(0, 110)
        ltr = position_to_value(point, VERTICAL_TRACK, "vertical", "ltr", BOUNDS, 1)
        rtl = position_to_value(point, VERTICAL_TRACK, "vertical", "rtl", BOUNDS, 1)
        self.assertEqual(ltr, 70)
        self.assertEqual(rtl, 70)

    def test_value_is_quantized_and_offset_by_min(self) -> None:
        bounds = ValueRange(min=20, max=40)
        value = position_to_value(CoordinatePoint(67, 0), HORIZONTAL_TRACK, "horizontal", "ltr", bounds, 5)
        # 57 / 200 of the way from 20 to 40 is 25.7
        self.assertEqual(value, 25)

    def test_unmeasured_track_maps_to_zero(self) -> None:
        bounds = ValueRange(min=20, max=40)
        self.assertEqual(position_to_value(CoordinatePoint(50, 0), None, "horizontal", "ltr", bounds, 1), 0)
        flat = BoundingBox(x=0, y=0, width=0, height=10)
        self.assertEqual(position_to_value(CoordinatePoint(50, 0), flat, "horizontal", "ltr", bounds, 1), 0)

    def test_track_percent_reports_missing_extent(self) -> None:
        flat = BoundingBox(x=0, y=0, width=10, height=0)
        self.assertIsNone(track_percent(CoordinatePoint(0, 0), flat, "vertical", "ltr"))
        self.assertEqual(track_percent(CoordinatePoint(5, 0), flat, "horizontal", "ltr"), 0.5)


class TrackExtentTests(unittest.TestCase):
    def test_extent_follows_main_axis(self) -> None:
        flat = BoundingBox(x=0.0, y=0.0, width=0.0, height=20.0)
        self.assertFalse(has_track_extent(flat, "horizontal"))
        self.assertTrue(has_track_extent(flat, "vertical"))
        self.assertFalse(has_track_extent(None, "horizontal"))
        self.assertTrue(has_track_extent(HORIZONTAL_TRACK, "horizontal"))
        self.assertIsNone(track_percent(CoordinatePoint(0, 0), flat, "horizontal", "ltr"))


if __name__ == "__main__":
    unittest.main()
