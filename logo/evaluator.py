"""
Precedence-climbing expression evaluation over an atom stream.

Parsing and running are separate steps: parsing consumes atoms and builds
a producer, a zero-argument closure, and calling the producer computes the
value. A statement is parsed in full before any of it runs, which is how
arity errors surface before side effects do.

Relational < additive < multiplicative < power < unary < final.
"""
import math, operator, re
from typing import Callable
from . import diagnostics as D
from .diagnostics import LogoError
from .values import LogoArray, UNARY_MINUS, equal, is_number, to_number, stringify
from .procedures import UserProcedure, invoke
from .reader import AtomStream

Producer = Callable[[], object]

def need(value):
	""" Where a value is required, a procedure that didn't output is a fault. """
	if value is None:
		raise LogoError(D.NO_OUTPUT)
	return value

def divide(a, b):
	a, b = to_number(a), to_number(b)
	if b == 0: raise LogoError(D.DIVIDE_BY_ZERO)
	return a / b

def remainder(a, b):
	""" Takes the sign of the dividend. """
	a, b = to_number(a), to_number(b)
	if b == 0: raise LogoError(D.DIVIDE_BY_ZERO)
	return math.fmod(a, b)

def power(a, b):
	a, b = to_number(a), to_number(b)
	try: return math.pow(a, b)
	except OverflowError: return math.inf if a > 0 or b % 2 == 0 else -math.inf
	except ValueError: return math.nan

def _numeric(op):
	return lambda a, b: op(to_number(a), to_number(b))

def _flag(test):
	return lambda a, b: 1 if test(a, b) else 0

RELATIONAL = {
	"=": _flag(lambda a, b: equal(need(a), need(b))),
	"<>": _flag(lambda a, b: not equal(need(a), need(b))),
	"<": _flag(_numeric(operator.lt)),
	">": _flag(_numeric(operator.gt)),
	"<=": _flag(_numeric(operator.le)),
	">=": _flag(_numeric(operator.ge)),
}
ADDITIVE = {"+": _numeric(operator.add), "-": _numeric(operator.sub)}
MULTIPLICATIVE = {"*": _numeric(operator.mul), "/": divide, "%": remainder}
INFIX = RELATIONAL.keys() | ADDITIVE.keys() | MULTIPLICATIVE.keys() | {"^"}

TRAILING_DIGITS = re.compile(r"^(.*?)([0-9]+)$")

def _is_op(atom, table) -> bool:
	return isinstance(atom, str) and atom in table

def _binary(op, lhs:Producer, rhs:Producer) -> Producer:
	return lambda: op(lhs(), rhs())

def expression(ctx, stream:AtomStream) -> Producer:
	return _left_associative(ctx, stream, RELATIONAL, _additive)

def evaluate(ctx, stream:AtomStream):
	return expression(ctx, stream)()

def _additive(ctx, stream):
	return _left_associative(ctx, stream, ADDITIVE, _multiplicative)

def _multiplicative(ctx, stream):
	return _left_associative(ctx, stream, MULTIPLICATIVE, _power)

def _left_associative(ctx, stream, table, tighter):
	lhs = tighter(ctx, stream)
	while _is_op(stream.peek(), table):
		op = table[stream.next()]
		lhs = _binary(op, lhs, tighter(ctx, stream))
	return lhs

def _power(ctx, stream):
	lhs = _unary(ctx, stream)
	if stream.peek() == "^":
		stream.next()
		return _binary(power, lhs, _power(ctx, stream))
	return lhs

def _unary(ctx, stream):
	if stream.peek() == UNARY_MINUS:
		stream.next()
		operand = _unary(ctx, stream)
		return lambda: -to_number(operand())
	return _final(ctx, stream)

def _final(ctx, stream) -> Producer:
	if not stream:
		raise LogoError(D.UNEXPECTED_END)
	atom = stream.next()
	if not isinstance(atom, str):
		return lambda: atom
	if is_number(atom):
		number = to_number(atom)
		return lambda: number
	if atom.startswith('"'):
		word = atom[1:]
		return lambda: word
	if atom.startswith(":") and len(atom) > 1:
		name = atom[1:]
		return lambda: ctx.getvar(name)
	if atom == "(":
		head = stream.peek()
		if isinstance(head, str) and ctx.lookup(head) is not None and not _is_op(stream.peek(1), INFIX):
			stream.next()
			return dispatch(ctx, head, stream, natural=False)
		inner = expression(ctx, stream)
		if not stream:
			raise LogoError(D.MISSING_PAREN)
		close = stream.next()
		if close != ")":
			raise LogoError(D.MISSING_PAREN_SAW, word=stringify(close))
		return inner
	if atom == ")":
		raise LogoError(D.UNEXPECTED_PAREN)
	return dispatch(ctx, atom, stream, natural=True)

def _nothing(): return None

def dispatch(ctx, name:str, stream:AtomStream, natural:bool) -> Producer:
	"""
	Resolve a procedure and parse its inputs.
	Natural calls take the default number of inputs;
	parenthesized calls take everything up to the closing paren.
	"""
	proc = ctx.lookup(name)
	if proc is None:
		match = TRAILING_DIGITS.match(name)
		if match and match.group(1) and ctx.lookup(match.group(1)) is not None:
			raise LogoError(D.MISSING_SPACE, name=match.group(1), value=match.group(2))
		raise LogoError(D.UNKNOWN_PROCEDURE, name=name)
	if proc.special:
		with ctx.calling(name):
			proc.fn(ctx, stream)
		return _nothing
	args = []
	if natural:
		for _ in range(proc.default):
			args.append(expression(ctx, stream))
	else:
		while stream and stream.peek() != ")":
			args.append(expression(ctx, stream))
		if not stream:
			raise LogoError(D.MISSING_PAREN)
		stream.next()
		if len(args) < proc.minimum:
			raise LogoError(D.TOO_FEW_INPUTS, name=name)
		if not proc.accepts(len(args)):
			raise LogoError(D.TOO_MANY_INPUTS, name=name)
	return producer(ctx, proc, name, args)

def producer(ctx, proc, name:str, args:list[Producer]) -> Producer:
	""" Package up a call whose inputs are already parsed. """
	if isinstance(proc, UserProcedure):
		def call():
			with ctx.calling(name):
				return invoke(ctx, proc, [need(arg()) for arg in args])
	elif proc.noeval:
		def call():
			with ctx.calling(name):
				return proc.fn(ctx, *args)
	else:
		def call():
			with ctx.calling(name):
				return proc.fn(ctx, *[need(arg()) for arg in args])
	return call

def apply(ctx, name:str, values:list):
	""" Call a procedure by name with values already in hand, as APPLY and MAP do. """
	proc = ctx.lookup(name)
	if proc is None:
		raise LogoError(D.UNKNOWN_PROCEDURE_IN, name=name)
	if proc.special or proc.noeval:
		raise LogoError(D.CANT_APPLY_SPECIAL, name=name)
	if len(values) < proc.minimum:
		raise LogoError(D.TOO_FEW_INPUTS, name=name)
	if not proc.accepts(len(values)):
		raise LogoError(D.TOO_MANY_INPUTS, name=name)
	return producer(ctx, proc, name, [_constant(v) for v in values])()

def _constant(value) -> Producer:
	return lambda: value
