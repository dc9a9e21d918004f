"""
The built-in procedure library, one module per family.

Each module registers its procedures with the `primitive` decorator.
A registered procedure gets the interpreter as its first argument,
then either its input values, its input thunks (noeval) or the atom
stream itself (special).
"""
from .. import diagnostics as D
from ..diagnostics import LogoError
from ..procedures import Primitive
from ..values import LogoArray, to_number

LIBRARY : list[Primitive] = []

def primitive(names:str, minimum:int=None, default:int=None, maximum:int=None, *, special=False, noeval=False):
	"""
	Register a function under one or more space-separated names.
	Arity defaults: with only a minimum given, exactly that many inputs.
	"""
	def decorate(fn):
		lo = 0 if minimum is None else minimum
		mid = lo if default is None else default
		hi = mid if maximum is None else maximum
		for name in names.split():
			LIBRARY.append(Primitive(name, fn, lo, mid, hi, special=special, noeval=noeval))
		return fn
	return decorate

def load_library() -> list[Primitive]:
	""" Importing the family modules is what fills in the library. """
	from . import data, communication, arithmetic, logic, graphics, workspace, control
	return LIBRARY

# Input checks shared by the families. These complain in the name of
# whichever procedure is running.

def need_list(value) -> list:
	if not isinstance(value, list):
		raise LogoError(D.EXPECTED_LIST_IN)
	return value

def need_array(value) -> LogoArray:
	if not isinstance(value, LogoArray):
		raise LogoError(D.EXPECTED_ARRAY)
	return value

def need_block(value) -> list:
	if not isinstance(value, list):
		raise LogoError(D.EXPECTED_BLOCK)
	return value

def need_pair(value) -> tuple[float, float]:
	if not isinstance(value, list) or len(value) != 2:
		raise LogoError(D.EXPECTED_PAIR)
	return to_number(value[0]), to_number(value[1])

def flag(test) -> int:
	""" Logo predicates answer 1 or 0. """
	return 1 if test else 0
