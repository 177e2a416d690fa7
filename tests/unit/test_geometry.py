"""Tests for bounding box, normalization and simplification."""

import math

import pytest

from glyphpreview.core.geometry import (
    compute_bounding_box,
    normalize,
    simplify,
    simplify_stroke,
)
from glyphpreview.domain import BoundingBox, Point, Stroke, Template


class TestComputeBoundingBox:
    """Tests for compute_bounding_box."""

    def test_single_stroke(self, corner_template: Template) -> None:
        bbox = compute_bounding_box(corner_template)
        assert bbox.to_tuple() == (0, 0, 10, 10, 10, 10)

    def test_multiple_strokes(self, offset_template: Template) -> None:
        bbox = compute_bounding_box(offset_template)
        assert bbox == BoundingBox(min_x=20, min_y=30, max_x=60, max_y=50)
        assert bbox.width == 40
        assert bbox.height == 20

    def test_negative_coordinates(self) -> None:
        template = Template(strokes=[Stroke(points=[Point(-5, -2), Point(3, 7)])])
        assert compute_bounding_box(template).to_tuple() == (-5, -2, 3, 7, 8, 9)

    def test_no_strokes_gives_zero_box(self) -> None:
        assert compute_bounding_box(Template()).to_tuple() == (0, 0, 0, 0, 0, 0)

    def test_empty_strokes_give_zero_box(self) -> None:
        template = Template(strokes=[Stroke(), Stroke()])
        assert compute_bounding_box(template).is_zero()

    def test_empty_strokes_are_ignored(self) -> None:
        template = Template(strokes=[Stroke(), Stroke(points=[Point(4, 5)]), Stroke()])
        assert compute_bounding_box(template) == BoundingBox(4, 5, 4, 5)

    def test_non_finite_points_are_ignored(self) -> None:
        template = Template(
            strokes=[Stroke(points=[Point(1, 1), Point(math.inf, 0), Point(3, math.nan)])]
        )
        assert compute_bounding_box(template) == BoundingBox(1, 1, 1, 1)

    def test_accepts_raw_data(self) -> None:
        bbox = compute_bounding_box([[{"x": 2, "y": 3}, {"x": "bad", "y": 0}, [12, 8]]])
        assert bbox.to_tuple() == (2, 3, 12, 8, 10, 5)

    def test_does_not_modify_template(self, offset_template: Template) -> None:
        before = offset_template.to_dict()
        compute_bounding_box(offset_template)
        assert offset_template.to_dict() == before


class TestNormalize:
    """Tests for normalize."""

    def test_moves_to_origin(self, offset_template: Template) -> None:
        normalized, _ = normalize(offset_template)
        shifted = compute_bounding_box(normalized)
        assert shifted.min_x == 0
        assert shifted.min_y == 0
        assert shifted.max_x == 40
        assert shifted.max_y == 20

    def test_returns_original_box(self, offset_template: Template) -> None:
        _, bbox = normalize(offset_template)
        assert bbox == BoundingBox(20, 30, 60, 50)

    def test_translates_every_point(self, offset_template: Template) -> None:
        normalized, _ = normalize(offset_template)
        assert normalized.strokes[0].points == [Point(0, 0), Point(40, 0)]
        assert normalized.strokes[1].points == [Point(20, 0), Point(20, 20), Point(5, 15)]

    def test_original_unchanged(self, offset_template: Template) -> None:
        before = offset_template.to_dict()
        normalized, _ = normalize(offset_template)
        normalized.strokes[0].points.append(Point(99, 99))
        normalized.strokes.append(Stroke())
        assert offset_template.to_dict() == before

    def test_result_is_independent_when_already_at_origin(self, corner_template: Template) -> None:
        normalized, _ = normalize(corner_template)
        assert normalized is not corner_template
        normalized.strokes[0].points.clear()
        assert len(corner_template.strokes[0]) == 3

    def test_preserves_stroke_order_and_name(self, offset_template: Template) -> None:
        normalized, _ = normalize(offset_template)
        assert normalized.name == "tee"
        assert [len(s) for s in normalized.strokes] == [2, 3]

    def test_empty_template(self) -> None:
        normalized, bbox = normalize(Template(strokes=[Stroke()]))
        assert bbox.is_zero()
        assert normalized.is_empty()
        assert len(normalized) == 1

    def test_drops_non_finite_points(self) -> None:
        template = Template(
            strokes=[Stroke(points=[Point(2, 3), Point(math.nan, 0), Point(6, math.inf), Point(4, 5)])]
        )
        normalized, bbox = normalize(template)

        assert bbox == BoundingBox(2, 3, 4, 5)
        assert normalized.strokes[0].points == [Point(0, 0), Point(2, 2)]
        # The caller keeps its points
        assert len(template.strokes[0]) == 4

    def test_only_non_finite_points_gives_empty_template(self) -> None:
        normalized, bbox = normalize(Template(strokes=[Stroke(points=[Point(math.nan, 0)])]))
        assert bbox.is_zero()
        assert normalized.is_empty()

    def test_idempotent(self, offset_template: Template) -> None:
        """Test that a second normalization does not move anything."""
        first, first_bbox = normalize(offset_template)
        second, second_bbox = normalize(first)
        assert second == first
        assert second_bbox.min_x == 0
        assert second_bbox.min_y == 0
        assert second_bbox.width == first_bbox.width
        assert second_bbox.height == first_bbox.height


class TestSimplify:
    """Tests for simplify and simplify_stroke."""

    @pytest.mark.parametrize("ratio", [0.0, -0.5, 1.0, 2.5])
    def test_out_of_range_ratio_is_identity(
        self, long_stroke_template: Template, ratio: float
    ) -> None:
        before = long_stroke_template.to_dict()
        result = simplify(long_stroke_template, ratio)
        assert result.to_dict() == before

    def test_keeps_every_nth_point(self, long_stroke_template: Template) -> None:
        # floor(1 / 0.3) = 3: indices 0, 3, 6, 9 plus the last (10)
        result = simplify(long_stroke_template, 0.3)
        assert [p.x for p in result.strokes[0].points] == [0, 3, 6, 9, 10]

    def test_does_not_duplicate_last_point(self, long_stroke_template: Template) -> None:
        # floor(1 / 0.2) = 5: indices 0, 5, 10 already end on the last point
        result = simplify(long_stroke_template, 0.2)
        assert [p.x for p in result.strokes[0].points] == [0, 5, 10]

    def test_ratio_above_half_keeps_all_points(self, long_stroke_template: Template) -> None:
        result = simplify(long_stroke_template, 0.9)
        assert result.strokes[0].points == long_stroke_template.strokes[0].points

    def test_short_strokes_kept_verbatim(self) -> None:
        template = Template(
            strokes=[
                Stroke(),
                Stroke(points=[Point(1, 1)]),
                Stroke(points=[Point(0, 0), Point(5, 5)]),
            ]
        )
        result = simplify(template, 0.1)
        assert result == template

    @pytest.mark.parametrize("ratio", [0.01, 0.1, 0.25, 0.34, 0.5, 0.75, 0.99])
    def test_keeps_first_and_last(self, ratio: float) -> None:
        points = [Point(float(i), float(i % 3)) for i in range(17)]
        stroke = Stroke(points=points)
        result = simplify_stroke(stroke, ratio)
        assert result.first == points[0]
        assert result.last == points[-1]
        assert len(result) <= len(stroke)

    @pytest.mark.parametrize("ratio", [1e-310, 5e-324])
    def test_subnormal_ratio_keeps_endpoints(self, ratio: float) -> None:
        points = [Point(float(i), 0.0) for i in range(5)]
        result = simplify_stroke(Stroke(points=points), ratio)
        assert result.points == [points[0], points[-1]]

    def test_subnormal_ratio_through_template(self, long_stroke_template: Template) -> None:
        result = simplify(long_stroke_template, 1e-310)
        assert [p.x for p in result.strokes[0].points] == [0, 10]

    def test_duplicate_points_keep_true_last(self) -> None:
        """Test that an equal point earlier in the stroke is not mistaken for the last."""
        stroke = Stroke(points=[Point(0, 0), Point(1, 0), Point(0, 0), Point(2, 0), Point(0, 0)])
        result = simplify_stroke(stroke, 0.34)
        # floor(1 / 0.34) = 2: indices 0, 2, 4; index 4 is the last
        assert len(result) == 3

    def test_original_unchanged(self, long_stroke_template: Template) -> None:
        before = long_stroke_template.to_dict()
        simplify(long_stroke_template, 0.3)
        assert long_stroke_template.to_dict() == before

    def test_preserves_name(self, offset_template: Template) -> None:
        assert simplify(offset_template, 0.5).name == "tee"
