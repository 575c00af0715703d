"""
Geometry Canvas Editor - Color Utilities

Fill colors for newly created shapes. Hues are stepped by the golden-ratio
conjugate so consecutive shapes stay visually distinct without a fixed
palette running out.
"""

import colorsys

from constants import SHAPE_COLOR_SATURATION, SHAPE_COLOR_LIGHTNESS, SHAPE_COLOR_ALPHA

GOLDEN_RATIO_CONJUGATE = 0.618033988749895


def hsl_to_rgba_string(hue, saturation, lightness, alpha):
	"""Format an HSL color (all components 0-1) as a CSS-style rgba() string."""
	r, g, b = colorsys.hls_to_rgb(hue % 1.0, lightness, saturation)
	return f"rgba({round(r * 255)}, {round(g * 255)}, {round(b * 255)}, {alpha})"


def parse_rgba_string(color):
	"""Parse '#RRGGBB' or 'rgba(r, g, b, a)' into (r, g, b, a) with r/g/b 0-255, a 0-1.

	Returns:
		Tuple, or None when the string is not in either format
	"""
	color = color.strip()
	if color.startswith('#') and len(color) == 7:
		try:
			return (int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16), 1.0)
		except ValueError:
			return None
	if color.startswith('rgba(') and color.endswith(')'):
		parts = [part.strip() for part in color[5:-1].split(',')]
		if len(parts) != 4:
			return None
		try:
			return (int(parts[0]), int(parts[1]), int(parts[2]), float(parts[3]))
		except ValueError:
			return None
	return None


class ShapeColorCycle:
	"""Hands out a new fill color per call."""

	def __init__(self, start_hue=0.0, saturation=SHAPE_COLOR_SATURATION,
	             lightness=SHAPE_COLOR_LIGHTNESS, alpha=SHAPE_COLOR_ALPHA):
		self._hue = start_hue
		self.saturation = saturation
		self.lightness = lightness
		self.alpha = alpha

	def next_color(self):
		color = hsl_to_rgba_string(self._hue, self.saturation, self.lightness, self.alpha)
		self._hue = (self._hue + GOLDEN_RATIO_CONJUGATE) % 1.0
		return color
