"""
Turtle geometry.

Each turtle has a position and a heading. Positions are kept in device
units relative to the centre of the canvas with y pointing up; the
"scrunch" factors convert between those and the logical units that
Logo programs see. Headings are degrees clockwise from north and are
never normalized.

Straight-line motion respects one of three boundary policies:
	window: anything goes.
	fence: the turtle stops at the edge.
	wrap: the turtle leaves by one edge and comes back in the opposite one.
"""
import math
from contextlib import contextmanager
from typing import Optional
from .surface import Surface, Pen, arc_points

EPSILON = 1e-3  # Shorter moves than this just make a dot.

STANDARD_COLORS = [
	"black", "blue", "lime", "cyan", "red", "magenta", "yellow", "white",
	"brown", "tan", "green", "aquamarine", "salmon", "purple", "orange", "gray",
]

MODES = ("wrap", "fence", "window")

def _direction(heading:float) -> tuple[float, float]:
	""" Unit vector for a heading. Right angles come out exact. """
	quarters = heading / 90
	if quarters == int(quarters):
		return [(0, 1), (1, 0), (0, -1), (-1, 0)][int(quarters) % 4]
	r = math.radians(heading)
	return math.sin(r), math.cos(r)

class TurtleState:
	def __init__(self):
		self.x = 0.0
		self.y = 0.0
		self.heading = 0.0
		self.down = True
		self.color = "black"
		self.width = 1
		self.penmode = "paint"
		self.visible = True

	def pen(self) -> Pen: return Pen(self.color, self.width, self.penmode)

	def sprite(self, device) -> list[tuple[float, float]]:
		""" The little triangle, nose forward. """
		cx, cy = device
		r = math.radians(90 - self.heading)
		def corner(angle, length): return cx + math.cos(r + angle) * length, cy - math.sin(r + angle) * length
		return [corner(0, 20), corner(-math.pi * 2 / 3, 10), corner(math.pi * 2 / 3, 10)]

class TurtleEngine:
	def __init__(self, surface:Surface, width:int, height:int):
		self.surface = surface
		self.width = width
		self.height = height
		self.turtles = [TurtleState()]
		self.index = 0
		self.mode = "wrap"
		self.background = "white"
		self.fontsize = 14
		self.fontname = "sans-serif"
		self.sx = self.sy = 1.0
		self.palette = list(STANDARD_COLORS)
		self.mousepos = (0.0, 0.0)
		self.clickpos = (0.0, 0.0)
		self.button = 0
		self._fill_depth = 0
		self._saved_mode = self.mode
		self._path : Optional[list] = None
		self._carry = None  # Wrap displacement from the last SETPOS, and where it left the turtle.
		surface.clear(self.background)

	@property
	def current(self) -> TurtleState: return self.turtles[self.index]

	def _device(self, x, y) -> tuple[float, float]:
		return self.width / 2 + x, self.height / 2 - y

	def logical(self, device) -> tuple[float, float]:
		""" From device pixels (as mouse events report them) to logical coordinates. """
		dx, dy = device
		return (dx - self.width / 2) / self.sx, (self.height / 2 - dy) / self.sy

	def _go(self, x1, y1, x2, y2):
		if self._path is not None:
			self._path.append(self._device(x2, y2))
		elif self.current.down:
			self.surface.line(self._device(x1, y1), self._device(x2, y2), self.current.pen())

	def _moveto(self, x, y):
		t = self.current
		w, h = self.width / 2, self.height / 2
		while True:
			if self.mode == "window":
				self._go(t.x, t.y, x, y)
				t.x, t.y = x, y
				return

			# Fraction of the way along before meeting an edge.
			fx = fy = 1.0
			if x < -w and t.x != x: fx = (t.x + w) / (t.x - x)
			elif x > w and t.x != x: fx = (t.x - w) / (t.x - x)
			if y < -h and t.y != y: fy = (t.y + h) / (t.y - y)
			elif y > h and t.y != y: fy = (t.y - h) / (t.y - y)

			ix, iy = x, y  # Draw to here,
			wx, wy = x, y  # then continue from here.
			if fx < 1 and fx <= fy:
				less = x < -w
				ix = -w if less else w
				iy = t.y - fx * (t.y - y)
				x += 2 * w if less else -2 * w
				wx, wy = -ix, iy
			elif fy < 1 and fy <= fx:
				less = y < -h
				ix = t.x - fy * (t.x - x)
				iy = -h if less else h
				y += 2 * h if less else -2 * h
				wx, wy = ix, -iy

			self._go(t.x, t.y, ix, iy)
			if self.mode == "fence":
				t.x, t.y = ix, iy
				return
			t.x, t.y = wx, wy
			if fx == 1 and fy == 1:
				return

	def move(self, distance:float):
		t = self.current
		self._carry = None
		point = abs(distance) < EPSILON
		if point:
			saved = t.x, t.y
			distance = EPSILON
		dx, dy = _direction(t.heading)
		self._moveto(t.x + distance * dx * self.sx, t.y + distance * dy * self.sy)
		if point:
			t.x, t.y = saved

	def turn(self, angle:float):
		self.current.heading += angle

	def setheading(self, angle:float):
		self.current.heading = angle

	def setposition(self, x:Optional[float]=None, y:Optional[float]=None):
		""" Logical coordinates. Either may be None to leave it alone. """
		t = self.current
		tx = t.x if x is None else x * self.sx
		ty = t.y if y is None else y * self.sy
		gx, gy = tx, ty
		if self.mode == "wrap" and self._carry is not None:
			cx, cy, at_x, at_y = self._carry
			if (t.x, t.y) == (at_x, at_y):
				if x is not None: gx += cx
				if y is not None: gy += cy
		self._moveto(gx, gy)
		if self.mode == "wrap" and (t.x, t.y) != (tx, ty):
			self._carry = (t.x - tx, t.y - ty, t.x, t.y)
		else:
			self._carry = None

	def position(self) -> tuple[float, float]:
		t = self.current
		return t.x / self.sx, t.y / self.sy

	def towards(self, x:float, y:float) -> float:
		px, py = self.position()
		return 90 - math.degrees(math.atan2(y - py, x - px))

	def home(self):
		self._carry = None
		self._moveto(0.0, 0.0)
		self.current.heading = 0.0

	def clear(self):
		self.surface.clear(self.background)

	def clearscreen(self):
		self.home()
		self.clear()

	def setmode(self, mode:str):
		assert mode in MODES, mode
		self._carry = None
		if self._fill_depth:
			self._saved_mode = mode
		else:
			self.mode = mode

	def setscrunch(self, sx:float, sy:float):
		self.sx, self.sy = sx, sy

	def setbackground(self, color:str):
		self.background = color
		self.surface.clear(color)

	def arc(self, angle:float, radius:float):
		""" Centred on the turtle, starting straight ahead, clockwise for positive angles. The turtle stays put. """
		t = self.current
		cx, cy = self._device(t.x, t.y)
		radii = radius * self.sx, radius * self.sy
		start = math.radians(t.heading - 90)
		extent = math.radians(angle)
		if self._path is not None:
			self._path.extend(arc_points((cx, cy), radii, start, extent))
			return
		if not t.down:
			return
		if self.mode == "wrap":
			offsets = [(dx, dy) for dx in (0, self.width, -self.width) for dy in (0, self.height, -self.height)]
		else:
			offsets = [(0, 0)]
		for dx, dy in offsets:
			self.surface.arc((cx + dx, cy + dy), radii, start, extent, t.pen())

	@contextmanager
	def filled(self, color:str):
		"""
		Motion inside the block traces a path instead of drawing,
		and the path is filled at the end, come what may.
		Boundaries are suspended meanwhile.
		"""
		if not self._fill_depth:
			self._saved_mode = self.mode
			self.mode = "window"
			self._path = [self._device(self.current.x, self.current.y)]
		self._fill_depth += 1
		try:
			yield
		finally:
			self._fill_depth -= 1
			if not self._fill_depth:
				path, self._path = self._path, None
				self.mode = self._saved_mode
				t = self.current
				self.surface.polygon(path, color, t.pen() if t.down else None)

	def fill(self):
		""" Flood the region around the turtle with the pen color. """
		t = self.current
		self.surface.flood_fill(self._device(t.x, t.y), t.color)

	def drawtext(self, text:str):
		t = self.current
		self.surface.text(self._device(t.x, t.y), t.heading, text, t.color, self.fontname, self.fontsize)

	def setturtle(self, index:int):
		""" Switch to another turtle, hatching new ones as needed. """
		while len(self.turtles) <= index:
			self.turtles.append(TurtleState())
		self.index = index

	@contextmanager
	def ask(self, index:int):
		saved = self.index
		self.setturtle(index)
		try:
			yield self.current
		finally:
			self.index = saved

	def present(self):
		sprites = [t.sprite(self._device(t.x, t.y)) for t in self.turtles if t.visible]
		self.surface.present(sprites)

	# Mouse state, as reported by an interactive surface.

	def mouse_moved(self, device):
		self.mousepos = self.logical(device)

	def mouse_pressed(self, device, button:int):
		self.clickpos = self.logical(device)
		self.button = button

	def mouse_released(self):
		self.button = 0

	# Capture and restore everything, as for replaying a session.

	def snapshot(self) -> dict:
		return {
			"turtles": [dict(vars(t)) for t in self.turtles],
			"index": self.index,
			"mode": self.mode,
			"background": self.background,
			"fontsize": self.fontsize,
			"fontname": self.fontname,
			"scrunch": (self.sx, self.sy),
			"palette": list(self.palette),
		}

	def restore(self, snapshot:dict):
		self.turtles = []
		for fields in snapshot["turtles"]:
			t = TurtleState()
			vars(t).update(fields)
			self.turtles.append(t)
		self.index = snapshot["index"]
		self.mode = snapshot["mode"]
		self.background = snapshot["background"]
		self.fontsize = snapshot["fontsize"]
		self.fontname = snapshot["fontname"]
		self.sx, self.sy = snapshot["scrunch"]
		self.palette = list(snapshot["palette"])
		self._carry = None
