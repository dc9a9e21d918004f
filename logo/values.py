"""
The run-time values of Logo, and the rules for copying, comparing,
coercing and printing them.

A word is a Python str or number. A list is a Python list, deep-copied
whenever it is stored. An array is a LogoArray, shared by reference.
"""
import math, re
from decimal import Decimal
from boozetools.support.foundation import Visitor
from . import diagnostics as D
from .diagnostics import LogoError

UNARY_MINUS = "<UNARYMINUS>"

NUMBER = re.compile(r"^-?([0-9]*\.?[0-9]+(?:[eE]\s*[\-+]?\s*[0-9]+)?)$")

class LogoArray:
	""" Fixed length, origin-indexed, and never copied. """
	__slots__ = ("items", "origin")

	def __init__(self, items:list, origin:int=1):
		self.items = items
		self.origin = origin

	def __len__(self): return len(self.items)
	def __iter__(self): return iter(self.items)
	def __repr__(self): return "LogoArray(%r, %d)" % (self.items, self.origin)

	def position(self, index:int) -> int:
		at = index - self.origin
		if not 0 <= at < len(self.items):
			raise LogoError(D.INDEX_OUT_OF_BOUNDS)
		return at

	def item(self, index:int):
		return self.items[self.position(index)]

	def setitem(self, index:int, value):
		self.items[self.position(index)] = value

def is_word(value) -> bool:
	return isinstance(value, (str, int, float))

def is_list(value) -> bool:
	return isinstance(value, list)

def is_array(value) -> bool:
	return isinstance(value, LogoArray)

def is_number(value) -> bool:
	if isinstance(value, (int, float)): return True
	return isinstance(value, str) and NUMBER.match(value) is not None

def to_number(value):
	""" The numeric projection of a word, or a complaint. """
	if isinstance(value, (int, float)):
		return value
	if isinstance(value, str) and NUMBER.match(value):
		return float(re.sub(r"\s", "", value))
	if value is None:
		raise LogoError(D.NO_OUTPUT)
	raise LogoError(D.EXPECTED_NUMBER)

def to_integer(value) -> int:
	number = to_number(value)
	if math.isfinite(number): return int(number)
	raise LogoError(D.EXPECTED_NUMBER)

def to_string(value) -> str:
	if isinstance(value, str):
		return "-" if value == UNARY_MINUS else value
	if isinstance(value, (int, float)):
		return format_number(value)
	if value is None:
		raise LogoError(D.NO_OUTPUT)
	raise LogoError(D.EXPECTED_STRING)

def to_list(value) -> list:
	""" Lists are themselves; words become lists of characters. """
	if isinstance(value, list):
		return value
	if isinstance(value, (str, int, float)):
		return list(to_string(value))
	if value is None:
		raise LogoError(D.NO_OUTPUT)
	raise LogoError(D.EXPECTED_LIST)

def truth(value) -> bool:
	if isinstance(value, (int, float)):
		return value != 0
	if isinstance(value, str):
		lowered = value.lower()
		if lowered == "true": return True
		if lowered == "false": return False
		return to_number(value) != 0
	if value is None:
		raise LogoError(D.NO_OUTPUT)
	raise LogoError(D.EXPECTED_NUMBER)

def copy(value):
	""" Lists are copied all the way down. Arrays are shared. """
	if isinstance(value, list):
		return [copy(v) for v in value]
	return value

def equal(a, b) -> bool:
	if is_word(a) and is_word(b):
		if isinstance(a, (int, float)) or isinstance(b, (int, float)):
			if is_number(a) and is_number(b):
				return to_number(a) == to_number(b)
		return to_string(a) == to_string(b)
	if isinstance(a, list) and isinstance(b, list):
		return len(a) == len(b) and all(equal(x, y) for x, y in zip(a, b))
	if isinstance(a, LogoArray) and isinstance(b, LogoArray):
		return a is b
	return False

def reaches(container, target) -> bool:
	""" Can one get to target from container by walking lists and arrays? """
	visited = set()
	agenda = [container]
	while agenda:
		node = agenda.pop()
		if node is target:
			return True
		if isinstance(node, (list, LogoArray)) and id(node) not in visited:
			visited.add(id(node))
			agenda.extend(node)
	return False

def format_number(n) -> str:
	""" Numbers print the way a JavaScript-flavored Logo prints them. """
	if isinstance(n, bool): n = int(n)
	if isinstance(n, int): return str(n)
	if math.isnan(n): return "NaN"
	if math.isinf(n): return "Infinity" if n > 0 else "-Infinity"
	if n == int(n) and abs(n) < 1e21: return str(int(n))
	text = repr(n)
	if "e" not in text: return text
	mantissa, exponent = text.split("e")
	exponent = int(exponent)
	if -7 < exponent < 21:
		return format(Decimal(text), "f")
	return "%se%s%d" % (mantissa, "+" if exponent > 0 else "-", abs(exponent))

_MUST_ESCAPE = re.compile(r"([\\;\s\[\]{}])")

class Rendering(Visitor):
	"""
	Turns values into text.

	`decorate` controls whether the outermost list gets its brackets.
	`escape` is for text that will be read back in, as when a list is run.
	"""
	def __init__(self, decorate=True, escape=False):
		self._decorate = decorate
		self._escape = escape

	def __call__(self, value) -> str:
		if isinstance(value, list) and not self._decorate:
			return self._join(value)
		return self.visit(value)

	def _join(self, items) -> str:
		parts = []
		glue = False
		for item in items:
			if self._escape and item == UNARY_MINUS:
				parts.append(" -" if parts else "-")
				glue = True
				continue
			text = self.visit(item)
			parts.append(text if glue or not parts else " " + text)
			glue = False
		return "".join(parts)

	def visit_str(self, word):
		if self._escape and word != UNARY_MINUS:
			return _MUST_ESCAPE.sub(r"\\\1", word)
		return to_string(word)

	def visit_int(self, number): return format_number(number)
	def visit_float(self, number): return format_number(number)
	def visit_bool(self, flag): return format_number(int(flag))

	def visit_list(self, items):
		return "[" + self._join(items) + "]"

	def visit_LogoArray(self, array):
		text = "{" + self._join(array.items) + "}"
		if array.origin != 1:
			text += "@%d" % array.origin
		return text

	def visit_NoneType(self, _):
		raise LogoError(D.NO_OUTPUT)

stringify = Rendering(decorate=True)
stringify_nodecorate = Rendering(decorate=False)
reparse_text = Rendering(decorate=False, escape=True)
