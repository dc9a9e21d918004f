"""
Words, lists and arrays: building them, taking them apart, changing them
and asking questions of them.

Selectors keep the flavor of what they were given: the BUTFIRST of a word
is a word, of a list a list.
"""
from .. import diagnostics as D
from ..diagnostics import LogoError
from ..values import (
	LogoArray, is_word, is_number, to_number, to_integer, to_string, to_list,
	copy, equal, reaches,
)
from ..reader import parse, parse_list, reparse
from . import primitive, need_list, need_array, flag

def _rebuild(like, items):
	""" Reassemble pieces into the same kind of thing `like` is. """
	if isinstance(like, list):
		return items
	return "".join(to_string(i) for i in items)

def _nonempty(thing) -> list:
	items = to_list(thing)
	if not items:
		raise LogoError(D.EXPECTED_NONEMPTY)
	return items

# Constructors

@primitive("word", 0, 2, -1)
def word(ctx, *words):
	return "".join(to_string(w) for w in words)

@primitive("list", 0, 2, -1)
def list_(ctx, *things):
	return list(things)

@primitive("sentence se", 0, 2, -1)
def sentence(ctx, *things):
	result = []
	for thing in things:
		if isinstance(thing, list):
			result.extend(thing)
		else:
			result.append(thing)
	return result

@primitive("fput", 2)
def fput(ctx, thing, container):
	if isinstance(container, list):
		return [thing] + container
	return to_string(thing) + to_string(container)

@primitive("lput", 2)
def lput(ctx, thing, container):
	if isinstance(container, list):
		return container + [thing]
	return to_string(container) + to_string(thing)

def _size(value) -> int:
	if not is_number(value) or to_number(value) != int(to_number(value)) or to_number(value) < 1:
		raise LogoError(D.ARRAY_SIZE)
	return int(to_number(value))

@primitive("array", 1, 1, 2)
def array(ctx, size, origin=1):
	return LogoArray([[] for _ in range(_size(size))], to_integer(origin))

@primitive("mdarray", 1, 1, 2)
def mdarray(ctx, sizes, origin=1):
	sizes = [_size(s) for s in need_list(sizes)]
	origin = to_integer(origin)
	def build(dims):
		if len(dims) == 1:
			return LogoArray([[] for _ in range(dims[0])], origin)
		return LogoArray([build(dims[1:]) for _ in range(dims[0])], origin)
	if not sizes:
		raise LogoError(D.ARRAY_SIZE)
	return build(sizes)

@primitive("listtoarray", 1, 1, 2)
def listtoarray(ctx, items, origin=1):
	return LogoArray(list(to_list(items)), to_integer(origin))

@primitive("arraytolist", 1)
def arraytolist(ctx, array):
	return list(need_array(array).items)

@primitive("combine", 2)
def combine(ctx, thing1, thing2):
	if isinstance(thing2, list):
		return fput(ctx, thing1, thing2)
	return word(ctx, thing1, thing2)

@primitive("reverse", 1, 1, 2)
def reverse(ctx, thing, tail=None):
	""" With a tail, the reversal goes in front of it, and the tail decides the type. """
	items = list(reversed(to_list(thing)))
	if tail is None:
		return _rebuild(thing, items)
	return _rebuild(tail, items + to_list(tail))

@primitive("gensym", 0)
def gensym(ctx):
	ctx.gensym_counter += 1
	return "G%d" % ctx.gensym_counter

# Selectors

@primitive("first", 1)
def first(ctx, thing):
	return _nonempty(thing)[0]

@primitive("firsts", 1)
def firsts(ctx, things):
	return [first(ctx, t) for t in to_list(things)]

@primitive("last", 1)
def last(ctx, thing):
	return _nonempty(thing)[-1]

@primitive("butfirst bf", 1)
def butfirst(ctx, thing):
	return _rebuild(thing, _nonempty(thing)[1:])

@primitive("butfirsts bfs", 1)
def butfirsts(ctx, things):
	return [butfirst(ctx, t) for t in to_list(things)]

@primitive("butlast bl", 1)
def butlast(ctx, thing):
	return _rebuild(thing, _nonempty(thing)[:-1])

@primitive("item", 2)
def item(ctx, index, thing):
	index = to_integer(index)
	if isinstance(thing, LogoArray):
		return thing.item(index)
	items = to_list(thing)
	if not 1 <= index <= len(items):
		raise LogoError(D.INDEX_OUT_OF_BOUNDS)
	return items[index - 1]

def _walk(indices, array) -> tuple[LogoArray, int]:
	""" Follow all but the last index down through nested arrays. """
	indices = [to_integer(i) for i in need_list(indices)]
	if not indices:
		raise LogoError(D.INDEX_OUT_OF_BOUNDS)
	for index in indices[:-1]:
		array = need_array(array).item(index)
	return need_array(array), indices[-1]

@primitive("mditem", 2)
def mditem(ctx, indices, array):
	array, index = _walk(indices, array)
	return array.item(index)

@primitive("pick", 1)
def pick(ctx, thing):
	items = _nonempty(thing)
	return items[int(ctx.prng.next() * len(items))]

@primitive("remove", 2)
def remove(ctx, thing, container):
	return _rebuild(container, [x for x in to_list(container) if not equal(x, thing)])

@primitive("remdup", 1)
def remdup(ctx, container):
	kept = []
	for x in to_list(container):
		if not any(equal(x, k) for k in kept):
			kept.append(x)
	return _rebuild(container, kept)

@primitive("quoted", 1)
def quoted(ctx, thing):
	if isinstance(thing, list):
		return thing
	return '"' + to_string(thing)

@primitive("split", 2)
def split(ctx, separator, container):
	""" Pieces between occurrences of the separator. Empty pieces vanish. """
	pieces, current = [], []
	for x in to_list(container):
		if equal(x, separator):
			if current: pieces.append(current)
			current = []
		else:
			current.append(x)
	if current:
		pieces.append(current)
	return [_rebuild(container, p) for p in pieces]

# Mutators

def _store(array:LogoArray, index:int, value):
	if isinstance(value, (list, LogoArray)) and reaches(value, array):
		raise LogoError(D.CIRCULAR_ARRAY)
	array.setitem(index, copy(value))

@primitive("setitem", 3)
def setitem(ctx, index, array, value):
	_store(need_array(array), to_integer(index), value)

@primitive("mdsetitem", 3)
def mdsetitem(ctx, indices, array, value):
	if isinstance(value, (list, LogoArray)) and reaches(value, need_array(array)):
		raise LogoError(D.CIRCULAR_ARRAY)
	inner, index = _walk(indices, array)
	_store(inner, index, value)

@primitive(".setfirst", 2)
def setfirst(ctx, container, value):
	need_list(container)
	if container:
		container[0] = value
	else:
		container.append(value)

@primitive(".setbf", 2)
def setbf(ctx, container, value):
	if not isinstance(container, list) or not container:
		raise LogoError(D.EXPECTED_NONEMPTY)
	container[1:] = to_list(value)

@primitive(".setitem", 3)
def dot_setitem(ctx, index, array, value):
	need_array(array).setitem(to_integer(index), value)

@primitive("push", 2)
def push(ctx, name, thing):
	name = to_string(name)
	ctx.setvar(name, fput(ctx, thing, ctx.getvar(name)))

@primitive("pop", 1)
def pop(ctx, name):
	name = to_string(name)
	stack = ctx.getvar(name)
	top = first(ctx, stack)
	ctx.setvar(name, butfirst(ctx, stack))
	return top

@primitive("queue", 2)
def queue(ctx, name, thing):
	name = to_string(name)
	ctx.setvar(name, lput(ctx, thing, ctx.getvar(name)))

@primitive("dequeue", 1)
def dequeue(ctx, name):
	name = to_string(name)
	stack = ctx.getvar(name)
	bottom = last(ctx, stack)
	ctx.setvar(name, butlast(ctx, stack))
	return bottom

# Predicates

@primitive("wordp word?", 1)
def wordp(ctx, thing): return flag(is_word(thing))

@primitive("listp list?", 1)
def listp(ctx, thing): return flag(isinstance(thing, list))

@primitive("arrayp array?", 1)
def arrayp(ctx, thing): return flag(isinstance(thing, LogoArray))

@primitive("numberp number?", 1)
def numberp(ctx, thing): return flag(is_number(thing))

@primitive("equalp equal?", 2)
def equalp(ctx, a, b): return flag(equal(a, b))

@primitive("notequalp notequal?", 2)
def notequalp(ctx, a, b): return flag(not equal(a, b))

@primitive("emptyp empty?", 1)
def emptyp(ctx, thing):
	if isinstance(thing, LogoArray):
		return 0
	return flag(not to_list(thing))

@primitive("beforep before?", 2)
def beforep(ctx, a, b): return flag(to_string(a) < to_string(b))

@primitive(".eq", 2)
def eq(ctx, a, b):
	""" Same object, which only means something for lists and arrays. """
	return flag(isinstance(a, (list, LogoArray)) and a is b)

@primitive("memberp member?", 2)
def memberp(ctx, thing, container):
	if isinstance(container, LogoArray):
		return flag(any(equal(x, thing) for x in container))
	if is_word(container):
		return flag(is_word(thing) and len(to_string(thing)) == 1 and to_string(thing) in to_string(container))
	return flag(any(equal(x, thing) for x in container))

@primitive("substringp substring?", 2)
def substringp(ctx, a, b):
	if not (is_word(a) and is_word(b)):
		return 0
	return flag(to_string(a) in to_string(b))

@primitive("member", 2)
def member(ctx, thing, container):
	""" The tail of the container starting at the first match, or empty. """
	items = to_list(container)
	for i, x in enumerate(items):
		if equal(x, thing):
			return _rebuild(container, items[i:])
	return _rebuild(container, [])

# Queries

@primitive("count", 1)
def count(ctx, thing):
	if isinstance(thing, LogoArray):
		return len(thing)
	return len(to_list(thing))

@primitive("ascii", 1)
def ascii(ctx, char):
	text = to_string(char)
	if not text:
		raise LogoError(D.EXPECTED_STRING)
	return ord(text[0])

@primitive("char", 1)
def char(ctx, code):
	n = to_integer(code)
	if not 0 <= n < 0x110000:
		raise LogoError(D.BAD_INPUT, value=n)
	return chr(n)

@primitive("lowercase", 1)
def lowercase(ctx, text): return to_string(text).lower()

@primitive("uppercase", 1)
def uppercase(ctx, text): return to_string(text).upper()

_BOLD = {}
_BOLD.update((chr(ord("A") + i), chr(0x1D400 + i)) for i in range(26))
_BOLD.update((chr(ord("a") + i), chr(0x1D41A + i)) for i in range(26))
_BOLD.update((chr(ord("0") + i), chr(0x1D7CE + i)) for i in range(10))

@primitive("standout", 1)
def standout(ctx, text):
	""" Mathematical bold letters and digits stand in for a highlight. """
	return "".join(_BOLD.get(c, c) for c in to_string(text))

@primitive("parse", 1)
def parse_(ctx, text):
	return parse_list(to_string(text))

@primitive("runparse", 1)
def runparse(ctx, text):
	if isinstance(text, list):
		return reparse(text)
	return parse(to_string(text))
