"""
The two kinds of procedure, how a user procedure gets built from TO or
DEFINE, how it renders back into text, and how it runs.
"""
import re
from itertools import groupby
from typing import Callable, Optional
from . import diagnostics as D
from .diagnostics import LogoError
from .values import UNARY_MINUS, LogoArray, copy, is_number, to_integer, to_string, format_number
from .stacking import Cell
from .control import Output
from .reader import AtomStream, reparse

IDENTIFIER = re.compile(r"^\.?[A-Za-z¡-῿][A-Za-z0-9_.?¡-῿]*$")

class Procedure:
	name : str
	minimum : int
	default : int
	maximum : int  # -1 means no limit
	special = False
	noeval = False
	buried = False

	@property
	def primitive(self) -> bool: raise NotImplementedError(type(self))

	def arity(self) -> list[int]:
		if self.special: return [-1, -1, -1]
		return [self.minimum, self.default, self.maximum]

	def accepts(self, count:int) -> bool:
		return self.minimum <= count and (self.maximum < 0 or count <= self.maximum)

class Primitive(Procedure):
	"""
	A built-in. Special ones get the atom stream itself;
	no-eval ones get thunks instead of values.
	"""
	def __init__(self, name:str, fn:Callable, minimum:int, default:int, maximum:int, *, special=False, noeval=False):
		assert minimum <= default and (maximum < 0 or default <= maximum), name
		self.name = name
		self.fn = fn
		self.minimum, self.default, self.maximum = minimum, default, maximum
		self.special = special
		self.noeval = noeval

	@property
	def primitive(self) -> bool: return True

	def __repr__(self): return "<primitive %s>" % self.name

class UserProcedure(Procedure):
	def __init__(self, name:str, inputs:list[str], optional:list[tuple[str, list]], rest:Optional[str], explicit_default:Optional[int], block:list, rows:list[int]=None):
		self.name = name
		self.inputs = inputs
		self.optional = optional
		self.rest = rest
		self.explicit_default = explicit_default
		self.block = block
		self.rows = rows or [0] * len(block)
		self.minimum = len(inputs)
		self.maximum = -1 if rest is not None else len(inputs) + len(optional)
		if explicit_default is None:
			self.default = self.minimum
		elif explicit_default < self.minimum or (rest is None and explicit_default > self.maximum):
			raise LogoError(D.BAD_DEFAULT_ARITY, name=name)
		else:
			self.default = explicit_default

	@property
	def primitive(self) -> bool: return False

	def __repr__(self): return "<procedure %s>" % self.name

	def text(self) -> list:
		""" What TEXT outputs: [inputs block] """
		inputs = list(self.inputs)
		inputs.extend([name, list(default)] for name, default in self.optional)
		if self.rest is not None:
			inputs.append([self.rest])
		if self.explicit_default is not None:
			inputs.append(self.explicit_default)
		return [inputs, list(self.block)]

	def definition(self) -> str:
		""" The canonical TO ... END rendering, keeping the original line breaks. """
		header = ["to", self.name]
		header.extend(":" + name for name in self.inputs)
		header.extend("[:%s]" % " ".join([name] + [_defn(a) for a in default]) for name, default in self.optional)
		if self.rest is not None:
			header.append("[:%s]" % self.rest)
		if self.explicit_default is not None:
			header.append(str(self.explicit_default))
		lines = [" ".join(header)]
		atoms = list(zip(self.rows, self.block))
		for row, group in groupby(atoms, key=lambda pair: pair[0]):
			lines.append("  " + _defn_line([atom for _, atom in group]))
		lines.append("end")
		return "\n".join(lines)

def _defn(atom) -> str:
	if isinstance(atom, list):
		return "[ " + _defn_line(atom) + " ]" if atom else "[ ]"
	if isinstance(atom, LogoArray):
		text = "{ " + _defn_line(atom.items) + " }" if atom.items else "{ }"
		return text if atom.origin == 1 else text + "@%d" % atom.origin
	if isinstance(atom, (int, float)):
		return format_number(atom)
	return atom

def _defn_line(atoms) -> str:
	return " ".join(_defn(a) for a in atoms).replace(UNARY_MINUS + " ", "-")

def _input_spec(atom):
	"""
	Sort one item of an input list into required, optional, rest or default arity.
	Returns (kind, payload).
	"""
	if isinstance(atom, str) and is_number(atom):
		return "arity", to_integer(atom)
	if isinstance(atom, (int, float)):
		return "arity", int(atom)
	if isinstance(atom, str):
		return "required", _input_name(atom)
	if isinstance(atom, list) and atom:
		name = _input_name(to_string(atom[0]))
		if len(atom) == 1:
			return "rest", name
		return "optional", (name, list(atom[1:]))
	raise LogoError(D.BAD_INPUT_NAME, name=_defn(atom))

def _input_name(word:str) -> str:
	name = word[1:] if word.startswith(":") else word
	if not name:
		raise LogoError(D.BAD_INPUT_NAME, name=word)
	return name

def check_name(ctx, name:str, complaint=D.EXPECTED_IDENTIFIER) -> str:
	""" A fresh user procedure needs a proper name that isn't a primitive's. """
	if not IDENTIFIER.match(name):
		raise LogoError(complaint)
	existing = ctx.routines.get(name.lower())
	if existing is not None and existing.primitive and (existing.special or not ctx.redefp()):
		raise LogoError(D.CANT_REDEFINE_PRIMITIVE, name=name)
	return name.lower()

def from_stream(ctx, stream:AtomStream) -> UserProcedure:
	""" TO name inputs... body... END, consumed from a running program. """
	if not stream:
		raise LogoError(D.EXPECTED_IDENTIFIER)
	head = stream.next()
	if not isinstance(head, str):
		raise LogoError(D.EXPECTED_IDENTIFIER)
	name = check_name(ctx, head)
	specs = []
	while stream:
		atom = stream.peek()
		if isinstance(atom, list) or isinstance(atom, str) and atom.startswith(":"):
			specs.append(_input_spec(stream.next()))
		elif isinstance(atom, str) and is_number(atom):
			specs.append(_input_spec(stream.next()))
			break
		else:
			break
	block, rows = [], []
	while True:
		if not stream:
			raise LogoError(D.EXPECTED_END)
		at = stream.index
		atom = stream.next()
		if isinstance(atom, str) and ctx.keyword(atom) == "END":
			break
		block.append(atom)
		rows.append(stream.row(at))
	return _assemble(name, specs, block, rows)

def from_text(ctx, name:str, text) -> UserProcedure:
	""" DEFINE name [[inputs] [body]] """
	if not isinstance(text, list) or len(text) != 2 or not isinstance(text[0], list) or not isinstance(text[1], list):
		raise LogoError(D.DEFINITION_SHAPE)
	name = check_name(ctx, name)
	specs = [_input_spec(atom) for atom in text[0]]
	return _assemble(name, specs, reparse(text[1]), None)

def _assemble(name, specs, block, rows) -> UserProcedure:
	inputs, optional, rest, arity = [], [], None, None
	for kind, payload in specs:
		if kind == "required": inputs.append(payload)
		elif kind == "optional": optional.append(payload)
		elif kind == "rest": rest = payload
		else: arity = payload
	return UserProcedure(name, inputs, optional, rest, arity, block, rows)

def invoke(ctx, proc:UserProcedure, args:list):
	""" Bind inputs in a fresh frame, run the body, and catch what it OUTPUTs. """
	with ctx.activation() as frame:
		args = list(args)
		for name in proc.inputs:
			frame.assign(name, Cell(copy(args.pop(0))))
		for name, default in proc.optional:
			if args:
				value = args.pop(0)
			else:
				value = ctx.run_atoms(reparse(default), return_result=True)
				if value is None:
					raise LogoError(D.NO_OUTPUT)
			frame.assign(name, Cell(copy(value)))
		if proc.rest is not None:
			frame.assign(proc.rest, Cell(copy(args)))
		try:
			ctx.execute(AtomStream(proc.block))
			result = None
		except Output as out:
			result = out.value
	ctx.checkpoint()
	return result
