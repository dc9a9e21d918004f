"""
Text in and out, by way of the session's stream.

The stream is anything with read(prompt), write(*parts), clear() and
readback(), plus textcolor, font and textsize attributes.
"""
from ..values import stringify, stringify_nodecorate, to_number, to_string
from ..reader import parse_list
from . import primitive
from .graphics import parse_color

# Transmitters

@primitive("print pr", 0, 1, -1)
def print_(ctx, *things):
	ctx.stream.write(" ".join(stringify_nodecorate(t) for t in things), "\n")

@primitive("type", 0, 1, -1)
def type_(ctx, *things):
	ctx.stream.write("".join(stringify_nodecorate(t) for t in things))

@primitive("show", 0, 1, -1)
def show(ctx, *things):
	ctx.stream.write(" ".join(stringify(t) for t in things), "\n")

# Receivers

def _prompt(args):
	return stringify_nodecorate(args[0]) if args else None

@primitive("readlist", 0, 0, 1)
def readlist(ctx, *prompt):
	text = ctx.stream.read(_prompt(prompt))
	return [] if text is None else parse_list(text)

@primitive("readword", 0, 0, 1)
def readword(ctx, *prompt):
	""" The whole line, spaces and all. At end of input, the empty list. """
	text = ctx.stream.read(_prompt(prompt))
	return [] if text is None else text

# Terminal

@primitive("cleartext ct", 0)
def cleartext(ctx):
	ctx.stream.clear()

@primitive("settextcolor", 1)
def settextcolor(ctx, color):
	ctx.stream.textcolor = parse_color(ctx, color)

@primitive("textcolor", 0)
def textcolor(ctx): return ctx.stream.textcolor

@primitive("setfont", 1)
def setfont(ctx, name):
	ctx.stream.font = to_string(name)

@primitive("font", 0)
def font(ctx): return ctx.stream.font

@primitive("settextsize", 1)
def settextsize(ctx, size):
	ctx.stream.textsize = to_number(size)

@primitive("textsize", 0)
def textsize(ctx): return ctx.stream.textsize

@primitive("increasefont", 0)
def increasefont(ctx):
	ctx.stream.textsize = round(ctx.stream.textsize * 1.25)

@primitive("decreasefont", 0)
def decreasefont(ctx):
	ctx.stream.textsize = round(ctx.stream.textsize / 1.25)
