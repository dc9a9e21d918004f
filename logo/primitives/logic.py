"""
Boolean operations. AND and OR stop evaluating their inputs as soon as
the answer is known.
"""
from ..evaluator import need
from . import primitive, flag

@primitive("true", 0)
def true(ctx): return 1

@primitive("false", 0)
def false(ctx): return 0

@primitive("and", 0, 2, -1, noeval=True)
def and_(ctx, *thunks):
	return flag(all(ctx.truth(need(t())) for t in thunks))

@primitive("or", 0, 2, -1, noeval=True)
def or_(ctx, *thunks):
	return flag(any(ctx.truth(need(t())) for t in thunks))

@primitive("xor", 0, 2, -1)
def xor(ctx, *values):
	result = False
	for v in values:
		result ^= ctx.truth(v)
	return flag(result)

@primitive("not", 1)
def not_(ctx, value):
	return flag(not ctx.truth(value))
