"""Shared test fixtures."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import numpy as np
import pytest

SVG_NS = {"svg": "http://www.w3.org/2000/svg"}


# Sample matrices

CHECKER = [[0, 1], [1, 0]]

RAMP_3x4 = [
    [0.0, 1.0, 2.0, 3.0],
    [4.0, 5.0, 6.0, 7.0],
    [8.0, 9.0, 10.0, 11.0],
]

CONSTANT_2x3 = [[7, 7, 7], [7, 7, 7]]

MIXED_SIGN = [[-1.234, 0.5], [2.718, -3.14159]]


def parse_svg(svg_text: str) -> ET.Element:
    """Parse generated SVG; fails the test on malformed XML."""
    return ET.fromstring(svg_text)


def find_all(root: ET.Element, tag: str) -> list[ET.Element]:
    return root.findall(f".//svg:{tag}", SVG_NS)


def cell_rects(root: ET.Element) -> list[ET.Element]:
    return [r for r in find_all(root, "rect") if r.get("class") == "cell"]


@pytest.fixture
def checker() -> list[list[int]]:
    return CHECKER


@pytest.fixture
def ramp() -> list[list[float]]:
    return RAMP_3x4


@pytest.fixture
def ramp_array() -> np.ndarray:
    return np.array(RAMP_3x4)


@pytest.fixture
def constant_grid() -> list[list[int]]:
    return CONSTANT_2x3
