"""
Native driver to bind the turtle with the graphics of SDL via PyGame.

There is a constraint, which is that the display and event loop are constrained to a single thread.
So this surface looks at the event queue whenever the turtle engine asks it to present the drawing,
which the interpreter does at each yield point. Mouse events go to the turtle engine;
a quit event goes to whatever callback the host supplied, normally Interpreter.request_bye.

Drawing accumulates on an off-screen canvas. The display shows the canvas with the turtles on top.
"""
import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
import pygame
from collections import deque
from typing import Callable, Optional
from pygame import draw
from .. import diagnostics as D
from ..diagnostics import LogoError
from ..surface import Surface, Pen, arc_points

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

def _rgb(color:str) -> pygame.Color:
	try:
		return pygame.Color(color)
	except ValueError:
		raise LogoError(D.BAD_COLOR, value=color) from None

def _xy(point) -> tuple[int, int]:
	return round(point[0]), round(point[1])

class GameSurface(Surface):
	def __init__(self, width:int, height:int, title="Logo"):
		pygame.init()
		self._display = pygame.display.set_mode((width, height))
		pygame.display.set_caption(title)
		self._canvas = pygame.Surface((width, height))
		self._background = WHITE
		self._turtle = None
		self._on_quit:Optional[Callable] = None
		self._fonts = {}
		self.closed = False

	def bind(self, turtle, on_quit:Callable=None):
		""" Tell the surface where mouse events and the quit event go. """
		self._turtle = turtle
		self._on_quit = on_quit

	# Drawing

	def _stroke(self, pen:Pen, paint:Callable):
		"""
		Paint one shape with the pen's mode. paint(surface, color) does the actual drawing.
		Reverse mode inverts whatever the shape covers.
		"""
		if pen.mode == "paint":
			paint(self._canvas, _rgb(pen.color))
		elif pen.mode == "erase":
			paint(self._canvas, self._background)
		else:
			size = self._canvas.get_size()
			mask = pygame.Surface(size)
			mask.fill(BLACK)
			paint(mask, WHITE)
			inverse = pygame.Surface(size)
			inverse.fill(WHITE)
			inverse.blit(self._canvas, (0, 0), special_flags=pygame.BLEND_RGB_SUB)
			inverse.blit(mask, (0, 0), special_flags=pygame.BLEND_RGB_MULT)
			self._canvas.blit(mask, (0, 0), special_flags=pygame.BLEND_RGB_SUB)
			self._canvas.blit(inverse, (0, 0), special_flags=pygame.BLEND_RGB_ADD)

	def clear(self, background):
		self._background = _rgb(background)
		self._canvas.fill(self._background)

	def line(self, start, stop, pen):
		width = max(1, round(pen.width))
		self._stroke(pen, lambda s, c: draw.line(s, c, _xy(start), _xy(stop), width))

	def arc(self, center, radii, start, extent, pen):
		points = [_xy(p) for p in arc_points(center, radii, start, extent)]
		width = max(1, round(pen.width))
		self._stroke(pen, lambda s, c: draw.lines(s, c, False, points, width))

	def polygon(self, points, color, pen=None):
		points = [_xy(p) for p in points]
		if len(points) < 3:
			return
		draw.polygon(self._canvas, _rgb(color), points)
		if pen is not None:
			width = max(1, round(pen.width))
			self._stroke(pen, lambda s, c: draw.lines(s, c, True, points, width))

	def flood_fill(self, point, color):
		""" Everything connected to the point and the same color as it becomes the new color. """
		canvas = self._canvas
		width, height = canvas.get_size()
		x, y = _xy(point)
		if not (0 <= x < width and 0 <= y < height):
			return
		target = canvas.get_at((x, y))
		replacement = _rgb(color)
		if target == replacement:
			return
		canvas.lock()
		try:
			pending = deque([(x, y)])
			while pending:
				x, y = pending.popleft()
				if canvas.get_at((x, y)) != target:
					continue
				canvas.set_at((x, y), replacement)
				for nx, ny in ((x+1, y), (x-1, y), (x, y+1), (x, y-1)):
					if 0 <= nx < width and 0 <= ny < height:
						pending.append((nx, ny))
		finally:
			canvas.unlock()

	def text(self, point, angle, text, color, font, size):
		key = font, round(size)
		if key not in self._fonts:
			self._fonts[key] = pygame.font.SysFont(font, round(size))
		image = self._fonts[key].render(text, True, _rgb(color))
		# Text runs along the turtle's heading; heading 90 is ordinary left-to-right text.
		image = pygame.transform.rotate(image, 90 - angle)
		self._canvas.blit(image, _xy(point))

	def present(self, sprites):
		self.pump()
		if self.closed:
			return
		self._display.blit(self._canvas, (0, 0))
		for sprite in sprites:
			draw.polygon(self._display, BLACK, [_xy(p) for p in sprite], 1)
		pygame.display.flip()

	# Events

	def pump(self):
		for event in pygame.event.get():
			if event.type == pygame.QUIT:
				self.closed = True
				if self._on_quit is not None:
					self._on_quit()
			elif self._turtle is None:
				continue
			elif event.type == pygame.MOUSEMOTION:
				self._turtle.mouse_moved(event.pos)
			elif event.type == pygame.MOUSEBUTTONDOWN:
				self._turtle.mouse_moved(event.pos)
				self._turtle.mouse_pressed(event.pos, event.button)
			elif event.type == pygame.MOUSEBUTTONUP:
				self._turtle.mouse_released()

	def linger(self, fps=30):
		""" Keep the window up until the user closes it. """
		clock = pygame.time.Clock()
		while not self.closed:
			self.pump()
			clock.tick(fps)
		pygame.quit()
