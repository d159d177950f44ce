"""SVG markup output."""
