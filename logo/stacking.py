"""
Activation records for Logo's dynamic scope.

Each procedure call pushes an Activation whose dynamic link is the caller's
frame. Looking a variable up walks the dynamic links down to the RootFrame,
which holds the globals. Names are case-insensitive.
"""
from typing import Generic, TypeVar

T = TypeVar("T")

class Cell:
	""" A variable's box. A cell with no value is declared but unbound. """
	__slots__ = ("value", "buried")
	def __init__(self, value=None):
		self.value = value
		self.buried = False

class Frame(Generic[T]):
	_bindings : dict[str, T]
	dynamic_link : "Frame[T]" = None
	test : bool = None  # Set by TEST, consulted by IFTRUE and IFFALSE.

	def holds(self, key:str) -> bool: return key.lower() in self._bindings
	def assign(self, key:str, value:T):
		self._bindings[key.lower()] = value
		return value
	def fetch(self, key:str) -> T: return self._bindings[key.lower()]
	def remove(self, key:str): self._bindings.pop(key.lower(), None)
	def items(self): return self._bindings.items()

	def find(self, key:str) -> T:
		""" Innermost binding along the dynamic chain, or None. """
		key = key.lower()
		frame = self
		while frame is not None:
			if key in frame._bindings:
				return frame._bindings[key]
			frame = frame.dynamic_link
		return None

class RootFrame(Frame[T]):
	""" Global variables """
	def __init__(self):
		self._bindings = {}

	def clear(self): self._bindings.clear()

class Activation(Frame[T]):
	def __init__(self, dynamic_link: Frame[T]):
		self._bindings = {}
		self.dynamic_link = dynamic_link
