"""
Running instructions, conditionals, loops, non-local exits,
and higher-order procedures.

Instruction lists run through ctx.run_block. Loops visit ctx.checkpoint
after each pass so that the host gets a look in and BYE gets noticed.
"""
import itertools
from .. import diagnostics as D
from ..diagnostics import LogoError
from ..control import Output, Bye, Throw
from ..evaluator import need, evaluate
from ..reader import AtomStream, reparse
from ..values import equal, is_word, to_number, to_integer, to_string, to_list
from . import primitive, need_list, need_block

# Running

@primitive("run", 1)
def run(ctx, block):
	return ctx.run_block(block, return_result=True)

@primitive("runresult", 1)
def runresult(ctx, block):
	result = ctx.run_block(block, return_result=True)
	return [] if result is None else [result]

@primitive("repeat", 2)
def repeat(ctx, count, block):
	count = to_integer(count)
	with ctx.counting():
		for i in range(1, count + 1):
			ctx.repcount = i
			ctx.run_block(block)
			ctx.checkpoint()

@primitive("forever", 1)
def forever(ctx, block):
	with ctx.counting():
		for i in itertools.count(1):
			ctx.repcount = i
			ctx.run_block(block)
			ctx.checkpoint()

@primitive("repcount #", 0)
def repcount(ctx): return ctx.repcount

# Conditionals

@primitive("if", 2, 2, 3)
def if_(ctx, condition, consequent, alternative=None):
	if ctx.truth(condition):
		return ctx.run_block(consequent, return_result=True)
	if alternative is not None:
		return ctx.run_block(alternative, return_result=True)

@primitive("ifelse", 3)
def ifelse(ctx, condition, consequent, alternative):
	return if_(ctx, condition, consequent, alternative)

@primitive("test", 1)
def test(ctx, condition):
	ctx.frame.test = ctx.truth(condition)

def _tested(ctx) -> bool:
	if ctx.frame.test is None:
		raise LogoError(D.NO_TEST)
	return ctx.frame.test

@primitive("iftrue ift", 1)
def iftrue(ctx, block):
	if _tested(ctx):
		return ctx.run_block(block, return_result=True)

@primitive("iffalse iff", 1)
def iffalse(ctx, block):
	if not _tested(ctx):
		return ctx.run_block(block, return_result=True)

# Exits

@primitive("stop", 0)
def stop(ctx): raise Output()

@primitive("output op", 1)
def output(ctx, value): raise Output(value)

@primitive(".maybeoutput", 1, noeval=True)
def maybeoutput(ctx, thunk):
	""" Output whatever the input gives back, if anything. """
	raise Output(thunk())

@primitive("catch", 2)
def catch(ctx, tag, block):
	tag = to_string(tag).upper()
	try:
		return ctx.run_block(block, return_result=True)
	except Throw as throw:
		if throw.tag != tag:
			raise
		ctx.last_error = throw
		return throw.value

@primitive("throw", 1, 1, 2)
def throw(ctx, tag, *value):
	raise Throw(to_string(tag).upper(), *value)

@primitive("error", 0)
def error(ctx):
	""" Describes the last throw a CATCH intercepted, then forgets it. """
	caught, ctx.last_error = ctx.last_error, None
	if caught is None:
		return []
	err = LogoError(D.NO_CATCH if caught.value is None else D.NO_CATCH_WITH_VALUE, tag=caught.tag)
	return [err.code, err.render(ctx.localize), "THROW", -1]

@primitive("wait", 1)
def wait(ctx, sixtieths):
	ctx.wait(to_number(sixtieths) / 60)

@primitive("bye", 0)
def bye(ctx): raise Bye()

@primitive("ignore", 1)
def ignore(ctx, value): pass

@primitive("`", 1)
def quasiquote(ctx, template):
	"""
	Copy a list, filling in the parts marked with a comma:
	, before a list puts in its value, ,@ splices in its value,
	and ", or :, inside a word prefix the value of what follows.
	"""
	result = []
	items = to_list(template)
	i = 0
	while i < len(items):
		item = items[i]
		if item in (",", ",@") and i + 1 < len(items):
			value = need(ctx.run_block(items[i + 1], return_result=True))
			if item == ",":
				result.append(value)
			else:
				result.extend(to_list(value))
			i += 2
			continue
		if isinstance(item, str) and item[:2] in ('",', ":,"):
			value = need(ctx.run_block(item[2:], return_result=True))
			result.append(item[0] + to_string(value))
		elif isinstance(item, list):
			result.append(quasiquote(ctx, item))
		else:
			result.append(item)
		i += 1
	return result

# Loops

def _sign(x) -> int:
	return (x > 0) - (x < 0)

@primitive("for", 2)
def for_(ctx, control, block):
	"""
	FOR [var start limit step?] block. Everything in the control list
	is evaluated before the variable is first set.
	"""
	control = need_list(control)
	if not control:
		raise LogoError(D.EXPECTED_NONEMPTY)
	var = to_string(control[0])
	stream = AtomStream(reparse(control[1:]))
	start = to_number(need(evaluate(ctx, stream)))
	limit = to_number(need(evaluate(ctx, stream)))
	if stream:
		step = to_number(need(evaluate(ctx, stream)))
	else:
		step = 1 if start <= limit else -1
	current = start
	with ctx.counting():
		for i in itertools.count(1):
			if _sign(current - limit) == _sign(step):
				break
			ctx.repcount = i
			ctx.setvar(var, current)
			ctx.run_block(block)
			ctx.checkpoint()
			current += step

@primitive("dotimes", 2)
def dotimes(ctx, control, block):
	""" DOTIMES [var n] block counts 1 to n. """
	control = need_list(control)
	if len(control) < 2:
		raise LogoError(D.EXPECTED_PAIR)
	var = to_string(control[0])
	count = to_integer(need(ctx.run_block(control[1:], return_result=True)))
	with ctx.counting():
		for i in range(1, count + 1):
			ctx.repcount = i
			ctx.setvar(var, i)
			ctx.run_block(block)
			ctx.checkpoint()

def _loop(ctx, block, condition, keep_going:bool, test_first:bool):
	""" The four conditional loops differ only in these two flags. """
	while True:
		if test_first and ctx.truth(need(condition())) != keep_going:
			return
		ctx.run_block(block)
		ctx.checkpoint()
		if not test_first and ctx.truth(need(condition())) != keep_going:
			return

@primitive("do.while", 2, noeval=True)
def do_while(ctx, block, condition):
	_loop(ctx, need_block(block()), condition, True, False)

@primitive("while", 2, noeval=True)
def while_(ctx, condition, block):
	_loop(ctx, need_block(block()), condition, True, True)

@primitive("do.until", 2, noeval=True)
def do_until(ctx, block, condition):
	_loop(ctx, need_block(block()), condition, False, False)

@primitive("until", 2, noeval=True)
def until(ctx, condition, block):
	_loop(ctx, need_block(block()), condition, False, True)

# Selection

def _is_else(ctx, atom) -> bool:
	return isinstance(atom, str) and ctx.keyword(atom) == "ELSE"

@primitive("case", 2)
def case(ctx, value, clauses):
	""" Each clause is [[values...] instructions...] or [ELSE instructions...]. """
	for clause in need_list(clauses):
		clause = need_list(clause)
		if not clause:
			continue
		head = clause[0]
		if _is_else(ctx, head) or isinstance(head, list) and any(equal(x, value) for x in head):
			return ctx.run_block(clause[1:], return_result=True)

@primitive("cond", 1)
def cond(ctx, clauses):
	""" Each clause is [[condition] instructions...] or [ELSE instructions...]. """
	for clause in need_list(clauses):
		clause = need_list(clause)
		if not clause:
			continue
		head = clause[0]
		if _is_else(ctx, head) or ctx.truth(head):
			return ctx.run_block(clause[1:], return_result=True)

# Templates

def _sequence(value) -> list:
	if isinstance(value, list):
		return value
	if is_word(value):
		return to_list(value)
	raise LogoError(D.EXPECTED_LIST_IN)

def _columns(lists) -> list[tuple]:
	sequences = [_sequence(x) for x in lists]
	if len({len(s) for s in sequences}) > 1:
		raise LogoError(D.EXPECTED_EQUAL_LENGTHS)
	return list(zip(*sequences))

@primitive("apply", 2)
def apply(ctx, name, inputs):
	return ctx.call(name, list(need_list(inputs)))

@primitive("invoke", 1, 2, -1)
def invoke(ctx, name, *inputs):
	return ctx.call(name, list(inputs))

@primitive("foreach", 2, 2, -1)
def foreach(ctx, name, *lists):
	for inputs in _columns(lists):
		ctx.call(name, list(inputs))
		ctx.checkpoint()

@primitive("map", 2, 2, -1)
def map_(ctx, name, *lists):
	return [need(ctx.call(name, list(inputs))) for inputs in _columns(lists)]

@primitive("filter", 2)
def filter_(ctx, name, items):
	kept = [x for x in _sequence(items) if ctx.truth(need(ctx.call(name, [x])))]
	return kept if isinstance(items, list) else "".join(kept)

@primitive("find", 2)
def find(ctx, name, items):
	for x in _sequence(items):
		if ctx.truth(need(ctx.call(name, [x]))):
			return x
	return []

@primitive("reduce", 2, 2, 3)
def reduce(ctx, name, items, *initial):
	items = list(_sequence(items))
	if initial:
		value = initial[0]
	elif items:
		value = items.pop(0)
	else:
		raise LogoError(D.EXPECTED_NONEMPTY)
	for x in items:
		value = need(ctx.call(name, [value, x]))
	return value

@primitive("crossmap", 2, 2, -1)
def crossmap(ctx, name, *lists):
	""" Every combination of one item from each list, the last list varying fastest. """
	if len(lists) == 1:
		lists = need_list(lists[0])
	sequences = [_sequence(x) for x in lists]
	return [need(ctx.call(name, list(combo))) for combo in itertools.product(*sequences)]
