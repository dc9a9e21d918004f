"""
What the turtle engine needs from whatever it draws on.

Coordinates here are device coordinates: origin at the top-left corner,
y increasing downward. Angles are radians, measured clockwise on screen
from the positive x axis, as a canvas measures them.
"""
import math
from typing import NamedTuple

class Pen(NamedTuple):
	color: str
	width: float
	mode: str  # paint, erase or reverse

def arc_points(center, radii, start:float, extent:float) -> list[tuple[float, float]]:
	""" A polyline approximation of an elliptical arc. """
	cx, cy = center
	rx, ry = radii
	steps = max(2, int(abs(extent) / (math.pi / 36) * max(1.0, max(abs(rx), abs(ry)) / 50)) + 1)
	return [
		(cx + rx * math.cos(start + extent * i / steps), cy + ry * math.sin(start + extent * i / steps))
		for i in range(steps + 1)
	]

class Surface:
	""" The drawing operations a turtle engine calls. """
	def clear(self, background:str): raise NotImplementedError(type(self))
	def line(self, start, stop, pen:Pen): raise NotImplementedError(type(self))
	def arc(self, center, radii, start:float, extent:float, pen:Pen): raise NotImplementedError(type(self))
	def polygon(self, points:list, color:str, pen:Pen=None):
		""" Fill a closed path, and stroke it too if given a pen. """
		raise NotImplementedError(type(self))
	def flood_fill(self, point, color:str): raise NotImplementedError(type(self))
	def text(self, point, angle:float, text:str, color:str, font:str, size:float): raise NotImplementedError(type(self))
	def present(self, sprites:list):
		"""
		Make the drawing so far visible, with turtle sprites (lists of points) on top.
		Also a good moment for an interactive surface to look at its event queue.
		"""
		raise NotImplementedError(type(self))

class BlindSurface(Surface):
	""" Draws nothing, for sessions without a display. """
	def clear(self, background): pass
	def line(self, start, stop, pen): pass
	def arc(self, center, radii, start, extent, pen): pass
	def polygon(self, points, color, pen=None): pass
	def flood_fill(self, point, color): pass
	def text(self, point, angle, text, color, font, size): pass
	def present(self, sprites): pass
