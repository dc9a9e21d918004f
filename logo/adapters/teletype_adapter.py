import sys

class Console:
	""" The text stream for a terminal session. Styling is remembered but has no effect on a teletype. """
	def __init__(self):
		self.textcolor = "black"
		self.font = "monospace"
		self.textsize = 13
		self._transcript = []

	def write(self, *parts):
		for fragment in parts:
			sys.stdout.write(fragment)
			self._transcript.append(fragment)
		sys.stdout.flush()

	@staticmethod
	def read(prompt=None):
		try:
			return input(prompt or "")
		except EOFError:
			return None

	def clear(self):
		self._transcript.clear()

	def readback(self) -> str:
		return "".join(self._transcript)
