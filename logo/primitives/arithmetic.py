"""
Numbers. Trigonometry works in degrees unless the name starts with RAD.
Domain trouble gives NaN or infinity rather than a fault, the way a
JavaScript-flavored Logo behaves.
"""
import math
from .. import diagnostics as D
from ..diagnostics import LogoError
from ..values import to_number, to_integer
from ..evaluator import divide, remainder as _remainder, power as _power
from . import primitive, flag

def _real(fn):
	""" Wrap a math function so that domain and range errors become NaN or infinity. """
	def safe(x):
		try: return fn(x)
		except ValueError: return math.nan
		except OverflowError: return math.inf
	return safe

def _int32(n:int) -> int:
	n &= 0xffffffff
	return n - 0x100000000 if n & 0x80000000 else n

def _bits(value) -> int:
	number = to_number(value)
	return _int32(int(number)) if math.isfinite(number) else 0

# Numeric operations

@primitive("sum", 0, 2, -1)
def sum_(ctx, *numbers):
	total = 0
	for n in numbers: total += to_number(n)
	return total

@primitive("difference", 2)
def difference(ctx, a, b): return to_number(a) - to_number(b)

@primitive("minus", 1)
def minus(ctx, a): return -to_number(a)

@primitive("product", 0, 2, -1)
def product(ctx, *numbers):
	result = 1
	for n in numbers: result *= to_number(n)
	return result

@primitive("quotient", 1, 2, 2)
def quotient(ctx, a, b=None):
	if b is None:
		return divide(1, a)
	return divide(a, b)

@primitive("remainder", 2)
def remainder(ctx, a, b): return _remainder(a, b)

@primitive("modulo", 2)
def modulo(ctx, a, b):
	""" Takes the sign of the divisor. """
	a, b = to_number(a), to_number(b)
	if b == 0: raise LogoError(D.DIVIDE_BY_ZERO)
	return a - b * math.floor(a / b)

@primitive("abs", 1)
def abs_(ctx, a): return abs(to_number(a))

@primitive("int", 1)
def int_(ctx, a):
	a = to_number(a)
	return math.trunc(a) if math.isfinite(a) else a

@primitive("round", 1)
def round_(ctx, a):
	""" Halves go up, even when negative. """
	a = to_number(a)
	return math.floor(a + 0.5) if math.isfinite(a) else a

@primitive("sqrt", 1)
def sqrt(ctx, a): return _real(math.sqrt)(to_number(a))

@primitive("power", 2)
def power(ctx, a, b): return _power(a, b)

@primitive("exp", 1)
def exp(ctx, a): return _real(math.exp)(to_number(a))

def _log(fn):
	def log(x):
		return -math.inf if x == 0 else fn(x)
	return _real(log)

@primitive("log10", 1)
def log10(ctx, a): return _log(math.log10)(to_number(a))

@primitive("ln", 1)
def ln(ctx, a): return _log(math.log)(to_number(a))

@primitive("radarctan", 1, 1, 2)
def radarctan(ctx, a, b=None):
	""" With two inputs, the angle of the vector (a, b). """
	if b is None:
		return math.atan(to_number(a))
	return math.atan2(to_number(b), to_number(a))

@primitive("arctan", 1, 1, 2)
def arctan(ctx, a, b=None):
	return math.degrees(radarctan(ctx, a, b))

@primitive("radsin", 1)
def radsin(ctx, a): return _real(math.sin)(to_number(a))

@primitive("radcos", 1)
def radcos(ctx, a): return _real(math.cos)(to_number(a))

@primitive("radtan", 1)
def radtan(ctx, a): return _real(math.tan)(to_number(a))

@primitive("sin", 1)
def sin(ctx, a): return radsin(ctx, math.radians(to_number(a)))

@primitive("cos", 1)
def cos(ctx, a): return radcos(ctx, math.radians(to_number(a)))

@primitive("tan", 1)
def tan(ctx, a): return radtan(ctx, math.radians(to_number(a)))

@primitive("iseq", 2)
def iseq(ctx, first, last):
	first, last = to_integer(first), to_integer(last)
	step = 1 if first <= last else -1
	return list(range(first, last + step, step))

@primitive("rseq", 3)
def rseq(ctx, first, last, count):
	""" count numbers evenly spaced from first to last. """
	first, last, count = to_number(first), to_number(last), to_integer(count)
	if count < 2:
		return [first][:count]
	step = (last - first) / (count - 1)
	return [first + step * i for i in range(count)]

# Predicates

@primitive("lessp less?", 2)
def lessp(ctx, a, b): return flag(to_number(a) < to_number(b))

@primitive("greaterp greater?", 2)
def greaterp(ctx, a, b): return flag(to_number(a) > to_number(b))

@primitive("lessequalp lessequal?", 2)
def lessequalp(ctx, a, b): return flag(to_number(a) <= to_number(b))

@primitive("greaterequalp greaterequal?", 2)
def greaterequalp(ctx, a, b): return flag(to_number(a) >= to_number(b))

# Random numbers

@primitive("random", 1, 1, 2)
def random(ctx, a, b=None):
	""" RANDOM n is 0..n-1; (RANDOM lo hi) includes both ends. """
	if b is None:
		return math.floor(ctx.prng.next() * to_integer(a))
	lo, hi = to_integer(a), to_integer(b)
	return math.floor(ctx.prng.next() * (hi - lo + 1)) + lo

@primitive("rerandom", 0, 0, 1)
def rerandom(ctx, *seed):
	ctx.prng.seed(*[to_number(s) for s in seed])

# Formatting

@primitive("form", 3)
def form(ctx, number, width, precision):
	text = format(to_number(number), ".%df" % max(0, to_integer(precision)))
	return text.rjust(to_integer(width))

# Bitwise operations

@primitive("bitand", 0, 2, -1)
def bitand(ctx, *numbers):
	result = -1
	for n in numbers: result &= _bits(n)
	return result

@primitive("bitor", 0, 2, -1)
def bitor(ctx, *numbers):
	result = 0
	for n in numbers: result |= _bits(n)
	return result

@primitive("bitxor", 0, 2, -1)
def bitxor(ctx, *numbers):
	result = 0
	for n in numbers: result ^= _bits(n)
	return result

@primitive("bitnot", 1)
def bitnot(ctx, a): return ~_bits(a)

@primitive("ashift", 2)
def ashift(ctx, a, b):
	a, b = _bits(a), _bits(b)
	return _int32(a << b) if b >= 0 else a >> -b

@primitive("lshift", 2)
def lshift(ctx, a, b):
	a, b = _bits(a), _bits(b)
	return _int32(a << b) if b >= 0 else (a & 0xffffffff) >> -b
