"""
These classes just exist as support scaffolding for test cases:
a text stream with scripted input, and a surface that remembers what it was asked to draw.
"""
import unittest
from ..diagnostics import LogoError
from ..surface import Surface

class BufferStream:
	def __init__(self, *lines:str):
		self.inputbuffer = list(lines)
		self.output = []
		self.last_prompt = None
		self.textcolor = "black"
		self.font = "monospace"
		self.textsize = 13

	def read(self, prompt=None):
		self.last_prompt = prompt
		if self.inputbuffer:
			return self.inputbuffer.pop(0)

	def write(self, *parts):
		self.output.extend(parts)

	def clear(self):
		self.output.clear()

	def readback(self) -> str:
		return "".join(self.output)

class RecordingSurface(Surface):
	""" Each call lands in self.calls as a tuple of the method name and its arguments. """
	def __init__(self):
		self.calls = []

	def ops(self, name) -> list[tuple]:
		return [call[1:] for call in self.calls if call[0] == name]

	def clear(self, background): self.calls.append(("clear", background))
	def line(self, start, stop, pen): self.calls.append(("line", start, stop, pen))
	def arc(self, center, radii, start, extent, pen): self.calls.append(("arc", center, radii, start, extent, pen))
	def polygon(self, points, color, pen=None): self.calls.append(("polygon", points, color, pen))
	def flood_fill(self, point, color): self.calls.append(("flood_fill", point, color))
	def text(self, point, angle, text, color, font, size): self.calls.append(("text", point, angle, text, color, font, size))
	def present(self, sprites): self.calls.append(("present", sprites))

def session(*lines, width=300, height=300, **hooks):
	""" An interpreter drawing on a RecordingSurface, reading the given lines of input. """
	from ..executive import Interpreter
	from ..turtle import TurtleEngine
	hooks.setdefault("seed", 1)
	return Interpreter(TurtleEngine(RecordingSurface(), width, height), BufferStream(*lines), **hooks)

class LogoTestCase(unittest.TestCase):
	""" Conveniences for running bits of Logo and checking what comes of them. """
	def setUp(self):
		self.logo = session()

	def value(self, text):
		return self.logo.run(text, return_result=True)

	def output(self, text) -> str:
		self.logo.stream.clear()
		self.logo.run(text)
		return self.logo.stream.readback()

	def fault(self, text) -> LogoError:
		with self.assertRaises(LogoError) as cm:
			self.logo.run(text, return_result=True)
		return cm.exception

	def assertValues(self, cases):
		for text, expect in cases:
			with self.subTest(text):
				self.assertEqual(expect, self.value(text))

	def assertFaults(self, cases):
		for text, message in cases:
			with self.subTest(text):
				self.assertEqual(message, str(self.fault(text)))
