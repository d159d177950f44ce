"""Tests for scene composition and the SVG it produces."""

from __future__ import annotations

import numpy as np
import pytest

from arrayplot.engine.colorscheme import color, rgb_string
from arrayplot.engine.matrix import to_grid
from arrayplot.engine.scene import compose_scene, format_value
from arrayplot.models.options import RenderOptions
from tests.conftest import CHECKER, MIXED_SIGN, RAMP_3x4, cell_rects, find_all, parse_svg


def _render(matrix, **options):
    return compose_scene(to_grid(matrix), RenderOptions(**options))


class TestDocument:
    def test_root_and_viewport(self):
        root = parse_svg(_render(CHECKER, width=300, height=200).to_svg())
        assert root.tag == "{http://www.w3.org/2000/svg}svg"
        assert root.get("width") == "300"
        assert root.get("height") == "200"

    def test_style_block(self):
        svg = _render(CHECKER).to_svg()
        root = parse_svg(svg)
        styles = find_all(root, "style")
        assert len(styles) == 1
        assert ".title" in styles[0].text
        assert ".axis-label" in styles[0].text

    def test_draw_order(self):
        scene = _render(CHECKER, show_values=True)
        kinds = [(e.tag, e.css_class) for e in scene.elements]
        assert kinds[0] == ("rect", "")  # border
        assert kinds[1] == ("text", "title")
        first_label = kinds.index(("text", "cell-value"))
        last_cell = max(i for i, k in enumerate(kinds) if k == ("rect", "cell"))
        assert last_cell < first_label
        assert kinds.index(("rect", "colorbar")) > first_label
        assert kinds[-1] == ("text", "axis-label")

    def test_border(self):
        border = _render(CHECKER, width=120, height=80).elements[0]
        assert border.attributes["x"] == "0.5"
        assert border.attributes["width"] == "119"
        assert border.attributes["height"] == "79"
        assert border.attributes["fill"] == "none"

    def test_title_centered_and_escaped(self):
        scene = _render(CHECKER, width=300, title="A < B & C")
        root = parse_svg(scene.to_svg())
        title = [t for t in find_all(root, "text") if t.get("class") == "title"][0]
        assert title.text == "A < B & C"
        assert title.get("x") == "150"
        assert title.get("text-anchor") == "middle"

    def test_default_title(self):
        assert _render(CHECKER).title == "Array Plot"

    def test_dimension_label(self):
        scene = _render(RAMP_3x4, width=200, height=100)
        label = scene.elements[-1]
        assert label.text == "3×4"
        assert label.attributes["x"] == "20"
        assert label.attributes["y"] == "90"

    def test_text_uses_sans_serif(self):
        scene = _render(CHECKER, show_values=True)
        for label in scene.select("text", "cell-value"):
            assert "sans-serif" in label.attributes["font-family"]
        assert "sans-serif" in scene.styles[".title"]


class TestCells:
    def test_checker_scenario(self):
        scene = _render(CHECKER, colorscheme="grayscale", width=100, height=100)
        cells = cell_rects(parse_svg(scene.to_svg()))
        fills = [c.get("fill") for c in cells]
        assert len(cells) == 4
        assert fills.count("rgb(255,255,255)") == 2
        assert fills.count("rgb(0,0,0)") == 2

    def test_cell_geometry(self):
        cells = _render(CHECKER, width=100, height=100).select("rect", "cell")
        first, last = cells[0], cells[-1]
        assert (first.attributes["x"], first.attributes["y"]) == ("10", "15")
        assert (last.attributes["x"], last.attributes["y"]) == ("50", "50")
        assert first.attributes["width"] == "40"
        assert first.attributes["height"] == "35"
        assert first.attributes["stroke"] == "#ffffff"
        assert first.attributes["stroke-width"] == "0.5"

    def test_row_major_order(self):
        cells = _render(RAMP_3x4, colorscheme="viridis").select("rect", "cell")
        expected = [rgb_string(color(v / 11, "viridis")) for v in range(12)]
        assert [c.attributes["fill"] for c in cells] == expected

    @pytest.mark.parametrize("k", [-2.5, 0, 3, 1000])
    def test_constant_grid_single_color(self, k):
        scene = _render(np.full((3, 3), k), colorscheme="viridis")
        fills = {c.attributes["fill"] for c in scene.select("rect", "cell")}
        assert fills == {rgb_string(color(0.5, "viridis"))}

    def test_unknown_scheme_renders_grayscale(self):
        a = _render(RAMP_3x4, colorscheme="no-such-scheme").to_svg()
        b = _render(RAMP_3x4, colorscheme="grayscale").to_svg()
        assert a == b


class TestValueLabels:
    def test_hidden_by_default(self):
        assert _render(CHECKER).select("text", "cell-value") == []

    def test_one_label_per_cell(self):
        labels = _render(RAMP_3x4, show_values=True).select("text", "cell-value")
        assert len(labels) == 12

    def test_labels_round_trip(self):
        grid = np.array(MIXED_SIGN)
        root = parse_svg(_render(grid, show_values=True).to_svg())
        labels = [t for t in find_all(root, "text") if t.get("class") == "cell-value"]
        parsed = [float(t.text) for t in labels]
        assert parsed == [round(v, 2) for v in grid.flatten()]

    def test_contrast_heuristic(self):
        labels = _render([[0.0, 0.5, 0.51, 1.0]], show_values=True).select("text", "cell-value")
        assert [t.attributes["fill"] for t in labels] == ["black", "black", "white", "white"]

    def test_constant_grid_labels_show_value(self):
        labels = _render([[4, 4]], show_values=True).select("text", "cell-value")
        assert [t.text for t in labels] == ["4.0", "4.0"]
        assert all(t.attributes["fill"] == "black" for t in labels)

    def test_label_position_and_size(self):
        label = _render(CHECKER, width=100, height=100, show_values=True).select("text", "cell-value")[0]
        assert label.attributes["x"] == "30"
        assert label.attributes["y"] == "32.5"
        assert label.attributes["font-size"] == "10.5"
        assert label.attributes["dominant-baseline"] == "central"


class TestColorbar:
    def test_on_by_default(self):
        scene = _render(RAMP_3x4)
        assert len(scene.select("rect", "colorbar")) == 1
        assert len(scene.defs) == 1

    def test_can_be_hidden(self):
        scene = _render(RAMP_3x4, show_colorbar=False)
        assert scene.select("rect", "colorbar") == []
        assert scene.defs == ()
        assert "linearGradient" not in scene.to_svg()

    def test_gradient_stops(self):
        root = parse_svg(_render(RAMP_3x4, colorscheme="coolwarm").to_svg())
        gradients = find_all(root, "linearGradient")
        assert len(gradients) == 1
        assert gradients[0].get("y1") == "100%"
        assert gradients[0].get("y2") == "0%"
        stops = find_all(root, "stop")
        assert len(stops) == 11
        assert stops[0].get("offset") == "0%"
        assert stops[5].get("offset") == "50%"
        assert stops[-1].get("offset") == "100%"
        assert stops[0].get("stop-color") == rgb_string(color(0.0, "coolwarm"))
        assert stops[-1].get("stop-color") == rgb_string(color(1.0, "coolwarm"))

    def test_bar_references_gradient(self):
        scene = compose_scene(to_grid(CHECKER), RenderOptions(), gradient_id="bar-7")
        bar = scene.select("rect", "colorbar")[0]
        assert bar.attributes["fill"] == "url(#bar-7)"
        assert scene.defs[0].attributes["id"] == "bar-7"

    def test_min_max_labels(self):
        scene = _render(RAMP_3x4, width=400, height=400)
        axis = [t for t in scene.select("text", "axis-label") if t.text != "3×4"]
        assert [t.text for t in axis] == ["11.0", "0.0"]
        top, bottom = axis
        assert float(top.attributes["y"]) < float(bottom.attributes["y"])
        assert top.attributes["x"] == "393"


def test_format_value():
    assert format_value(3.14159) == "3.14"
    assert format_value(2) == "2.0"
    assert format_value(np.float64(-0.005)) in ("-0.01", "-0.0")


def test_scene_repr_svg_matches_markup():
    scene = _render(CHECKER)
    assert scene._repr_svg_() == scene.to_svg() == str(scene)
