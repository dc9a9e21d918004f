"""
The reader turns program text into atoms.

An atom is a word (str), a list (Python list of atoms) or an array
(LogoArray of atoms). At the top level, operators and parentheses come
out as separate words and minus signs are sorted into binary and unary.
Inside brackets and braces, only whitespace and the brackets and braces
themselves separate words.

Pre-processing handles backslash escapes, semicolon comments and tilde
line-continuation before any of that, keeping track of which characters
were escaped so that an escaped bracket is just a character.
"""
import re
from typing import Iterator, NamedTuple, Optional
from boozetools.support.failureprone import SourceText
from . import diagnostics as D
from .diagnostics import LogoError
from .values import LogoArray, UNARY_MINUS, reparse_text

INFIX = frozenset(["+", "-", "*", "/", "%", "^", "=", "<", ">", "<=", ">=", "<>"])
OPERATOR_CHARS = frozenset("+-*/%^=<>()")
WHITESPACE = frozenset(" \t\n")
BRACKETS = frozenset("[]{}")
NUMBER_PREFIX = re.compile(r"[0-9]*\.?[0-9]+(?:[eE][\-+]?[0-9]+)?")

class Char(NamedTuple):
	ch: str
	literal: bool
	offset: int

def prepare(text:str) -> Iterator[Char]:
	""" Apply escapes, drop comments, join continued lines. """
	i, n = 0, len(text)
	while i < n:
		c = text[i]
		if c == "\\":
			if i + 1 < n:
				yield Char(text[i+1], True, i)
			i += 2
		elif c == ";":
			j, continued = i+1, False
			while j < n and text[j] != "\n":
				if text[j] == "\\":
					continued = False
					j += 2
				else:
					continued = text[j] == "~"
					j += 1
			i = j+1 if continued and j < n else j
		elif c == "~" and text.startswith("\n", i+1):
			i += 2
		else:
			yield Char(c, False, i)
			i += 1

class Program(NamedTuple):
	atoms: list
	spans: list[tuple[int, int]]
	source: SourceText

class Reader:
	def __init__(self, text:str):
		self.text = text.replace("\r", "")
		self._chars = list(prepare(self.text))
		self._pos = 0

	def _at(self, ahead=0) -> Optional[Char]:
		at = self._pos + ahead
		return self._chars[at] if at < len(self._chars) else None

	def _is(self, symbols, ahead=0) -> bool:
		c = self._at(ahead)
		return c is not None and not c.literal and c.ch in symbols

	def _skip_space(self) -> bool:
		skipped = False
		while self._is(WHITESPACE):
			self._pos += 1
			skipped = True
		return skipped

	def _run(self, stoppers) -> str:
		""" Characters up to the next unescaped stopper. """
		start = self._pos
		while self._at() is not None and not self._is(stoppers):
			self._pos += 1
		return "".join(c.ch for c in self._chars[start:self._pos])

	def program(self) -> Program:
		atoms, spans = [], []
		prev = None
		while True:
			leading_space = self._skip_space()
			c = self._at()
			if c is None: break
			start = c.offset
			if c.literal:
				atom = self._run(WHITESPACE | BRACKETS | OPERATOR_CHARS)
			elif c.ch == "[":
				self._pos += 1
				atom = self._items("]")
			elif c.ch == "{":
				self._pos += 1
				atom = self._array()
			elif c.ch == "]":
				raise LogoError(D.UNEXPECTED_BRACKET)
			elif c.ch == "}":
				raise LogoError(D.UNEXPECTED_BRACE)
			elif c.ch in OPERATOR_CHARS:
				atom = self._operator()
				if atom == "-":
					trailing_space = self._is(WHITESPACE) or self._at() is None
					if prev is None or (isinstance(prev, str) and (prev in INFIX or prev == "(")) or (leading_space and not trailing_space):
						atom = UNARY_MINUS
			elif c.ch in "\"'":
				self._pos += 1
				atom = '"' + self._run(WHITESPACE | BRACKETS | frozenset("()"))
			elif c.ch == ":":
				self._pos += 1
				atom = ":" + self._run(WHITESPACE | BRACKETS | OPERATOR_CHARS)
			elif c.ch.isdigit() or (c.ch == "." and self._at(1) is not None and self._at(1).ch.isdigit()):
				atom = self._number()
			elif ord(c.ch) < 32:
				raise LogoError(D.PARSE_FAILURE, string=self.text[start:])
			else:
				atom = self._run(WHITESPACE | BRACKETS | OPERATOR_CHARS)
			atoms.append(atom)
			spans.append((start, self._chars[self._pos-1].offset+1))
			prev = atom
		return Program(atoms, spans, SourceText(self.text))

	def _operator(self) -> str:
		first = self._at().ch
		self._pos += 1
		if first in "<>" and self._is("=") or (first == "<" and self._is(">")):
			self._pos += 1
			return first + self._chars[self._pos-1].ch
		return first

	def _number(self) -> str:
		start = self._pos
		while self._at() is not None and not self._at().literal and not self._is(WHITESPACE | BRACKETS | frozenset("()")):
			self._pos += 1
		run = "".join(c.ch for c in self._chars[start:self._pos])
		match = NUMBER_PREFIX.match(run)
		if match is None:
			self._pos = start
			return self._run(WHITESPACE | BRACKETS | OPERATOR_CHARS)
		self._pos = start + match.end()
		return match.group(0)

	def _items(self, terminator:Optional[str]) -> list:
		""" The inside of a list. With no terminator, read to the end of the text. """
		items = []
		while True:
			self._skip_space()
			c = self._at()
			if c is None:
				if terminator is None: return items
				raise LogoError(D.MISSING_BRACKET if terminator == "]" else D.MISSING_BRACE)
			if c.literal:
				items.append(self._run(WHITESPACE | BRACKETS))
			elif c.ch == terminator:
				self._pos += 1
				return items
			elif c.ch == "[":
				self._pos += 1
				items.append(self._items("]"))
			elif c.ch == "{":
				self._pos += 1
				items.append(self._array())
			elif c.ch == "]":
				raise LogoError(D.UNEXPECTED_BRACKET)
			elif c.ch == "}":
				raise LogoError(D.UNEXPECTED_BRACE)
			else:
				items.append(self._run(WHITESPACE | BRACKETS))

	def _array(self) -> LogoArray:
		items = self._items("}")
		origin = 1
		mark = self._pos
		self._skip_space()
		if self._is("@"):
			self._pos += 1
			self._skip_space()
			digits = ""
			if self._is("-"):
				digits = "-"
				self._pos += 1
			while self._is("0123456789"):
				digits += self._at().ch
				self._pos += 1
			origin = int(digits) if digits.strip("-") else 0
		else:
			self._pos = mark
		return LogoArray(items, origin)

def parse(text:str) -> list:
	""" Top-level atoms of some program text. """
	return Reader(text).program().atoms

def parse_list(text:str) -> list:
	""" Read text the way the inside of a list is read, as PARSE and READLIST do. """
	return Reader(text)._items(None)

def reparse(block) -> list:
	""" Turn a list back into top-level atoms, so that it can be run. """
	if isinstance(block, list):
		return parse(reparse_text(block))
	return parse(reparse_text([block]))

class AtomStream:
	"""
	The cursor the evaluator consumes atoms from.
	Top-level streams also know where each atom came from in the source.
	"""
	def __init__(self, atoms:list, spans=None, source:SourceText=None):
		self.atoms = atoms
		self.spans = spans
		self.source = source
		self.index = 0

	@classmethod
	def of_program(cls, program:Program):
		return cls(program.atoms, program.spans, program.source)

	def __bool__(self): return self.index < len(self.atoms)

	def peek(self, ahead=0):
		at = self.index + ahead
		return self.atoms[at] if at < len(self.atoms) else None

	def next(self):
		atom = self.atoms[self.index]
		self.index += 1
		return atom

	def span(self, first:int, last:int) -> Optional[tuple[int, int]]:
		""" Source span covering atoms first..last-1, if known. """
		if self.spans is None or first >= len(self.spans): return None
		last = max(first, min(last, len(self.spans)) - 1)
		return self.spans[first][0], self.spans[last][1]

	def row(self, at:int) -> int:
		""" Which source line an atom came from; zero when unknown. """
		if self.spans is None or self.source is None or at >= len(self.spans): return 0
		return self.source.find_row_col(self.spans[at][0])[0]
