"""
Turtle graphics: motion, queries, the pen, colors, the window, and the mouse.
Everything here delegates to the session's TurtleEngine.
"""
import math
from .. import diagnostics as D
from ..diagnostics import LogoError
from ..values import is_number, to_number, to_integer, to_string, stringify_nodecorate
from . import primitive, need_block, need_pair, flag

def parse_color(ctx, value) -> str:
	"""
	A palette index, an [r g b] list with components from 0 to 99,
	or a color name (which the color-alias hook gets a look at first).
	"""
	if isinstance(value, list):
		if len(value) != 3:
			raise LogoError(D.BAD_COLOR, value=stringify_nodecorate(value))
		channels = [math.floor(max(0, min(99, math.floor(to_number(v)))) * 255 / 99) for v in value]
		return "#%02x%02x%02x" % tuple(channels)
	if is_number(value):
		index = to_integer(value)
		palette = ctx.turtle.palette
		if not 0 <= index < len(palette):
			raise LogoError(D.BAD_COLOR, value=to_string(value))
		return palette[index]
	name = to_string(value)
	if ctx.color_alias is not None:
		alias = ctx.color_alias(name)
		if alias: return alias
	return name

# Motion

@primitive("forward fd", 1)
def forward(ctx, distance): ctx.turtle.move(to_number(distance))

@primitive("back bk", 1)
def back(ctx, distance): ctx.turtle.move(-to_number(distance))

@primitive("left lt", 1)
def left(ctx, angle): ctx.turtle.turn(-to_number(angle))

@primitive("right rt", 1)
def right(ctx, angle): ctx.turtle.turn(to_number(angle))

@primitive("←", 0)
def nudge_left(ctx): ctx.turtle.turn(-15)

@primitive("→", 0)
def nudge_right(ctx): ctx.turtle.turn(15)

@primitive("↑", 0)
def nudge_forward(ctx): ctx.turtle.move(10)

@primitive("↓", 0)
def nudge_back(ctx): ctx.turtle.move(-10)

@primitive("setpos", 1)
def setpos(ctx, position):
	ctx.turtle.setposition(*need_pair(position))

@primitive("setxy", 2)
def setxy(ctx, x, y): ctx.turtle.setposition(to_number(x), to_number(y))

@primitive("setx", 1)
def setx(ctx, x): ctx.turtle.setposition(x=to_number(x))

@primitive("sety", 1)
def sety(ctx, y): ctx.turtle.setposition(y=to_number(y))

@primitive("setheading seth", 1)
def setheading(ctx, angle): ctx.turtle.setheading(to_number(angle))

@primitive("home", 0)
def home(ctx): ctx.turtle.home()

@primitive("arc", 2)
def arc(ctx, angle, radius): ctx.turtle.arc(to_number(angle), to_number(radius))

# Motion queries

@primitive("pos", 0)
def pos(ctx): return list(ctx.turtle.position())

@primitive("xcor", 0)
def xcor(ctx): return ctx.turtle.position()[0]

@primitive("ycor", 0)
def ycor(ctx): return ctx.turtle.position()[1]

@primitive("heading", 0)
def heading(ctx): return ctx.turtle.current.heading

@primitive("towards", 1)
def towards(ctx, position): return ctx.turtle.towards(*need_pair(position))

@primitive("scrunch", 0)
def scrunch(ctx): return [ctx.turtle.sx, ctx.turtle.sy]

@primitive("setscrunch", 2)
def setscrunch(ctx, sx, sy): ctx.turtle.setscrunch(to_number(sx), to_number(sy))

# Turtle and window control

@primitive("showturtle st", 0)
def showturtle(ctx): ctx.turtle.current.visible = True

@primitive("hideturtle ht", 0)
def hideturtle(ctx): ctx.turtle.current.visible = False

@primitive("shownp shown?", 0)
def shownp(ctx): return flag(ctx.turtle.current.visible)

@primitive("clean", 0)
def clean(ctx): ctx.turtle.clear()

@primitive("clearscreen cs", 0)
def clearscreen(ctx): ctx.turtle.clearscreen()

@primitive("wrap", 0)
def wrap(ctx): ctx.turtle.setmode("wrap")

@primitive("window", 0)
def window(ctx): ctx.turtle.setmode("window")

@primitive("fence", 0)
def fence(ctx): ctx.turtle.setmode("fence")

@primitive("turtlemode", 0)
def turtlemode(ctx): return ctx.turtle.mode.upper()

@primitive("fill", 0)
def fill(ctx): ctx.turtle.fill()

@primitive("filled", 2)
def filled(ctx, color, block):
	""" Trace the path the block draws, then fill it. """
	color = parse_color(ctx, color)
	with ctx.turtle.filled(color):
		ctx.run_block(need_block(block))

@primitive("label", 1, 1, -1)
def label(ctx, *things):
	ctx.turtle.drawtext(" ".join(stringify_nodecorate(t) for t in things))

@primitive("setlabelheight", 1)
def setlabelheight(ctx, size): ctx.turtle.fontsize = to_number(size)

@primitive("labelsize", 0)
def labelsize(ctx): return [ctx.turtle.fontsize, ctx.turtle.fontsize]

@primitive("setlabelfont", 1)
def setlabelfont(ctx, name): ctx.turtle.fontname = to_string(name)

@primitive("labelfont", 0)
def labelfont(ctx): return ctx.turtle.fontname

# Pen and background

@primitive("pendown pd", 0)
def pendown(ctx): ctx.turtle.current.down = True

@primitive("penup pu", 0)
def penup(ctx): ctx.turtle.current.down = False

@primitive("penpaint ppt", 0)
def penpaint(ctx):
	ctx.turtle.current.down = True
	ctx.turtle.current.penmode = "paint"

@primitive("penerase pe", 0)
def penerase(ctx):
	ctx.turtle.current.down = True
	ctx.turtle.current.penmode = "erase"

@primitive("penreverse px", 0)
def penreverse(ctx):
	ctx.turtle.current.down = True
	ctx.turtle.current.penmode = "reverse"

@primitive("penmode", 0)
def penmode(ctx): return ctx.turtle.current.penmode.upper()

@primitive("setpencolor setpc setcolor", 1)
def setpencolor(ctx, color): ctx.turtle.current.color = parse_color(ctx, color)

@primitive("pencolor pc", 0)
def pencolor(ctx): return ctx.turtle.current.color

@primitive("setpalette", 2)
def setpalette(ctx, index, color):
	index = to_integer(index)
	if index < 0:
		raise LogoError(D.BAD_INPUT, value=index)
	color = parse_color(ctx, color)
	palette = ctx.turtle.palette
	while len(palette) <= index:
		palette.append("black")
	palette[index] = color

@primitive("palette", 1)
def palette(ctx, index):
	return parse_color(ctx, to_integer(index))

@primitive("setpensize setwidth setpw", 1)
def setpensize(ctx, size):
	if isinstance(size, list):
		size = need_pair(size)[0]
	ctx.turtle.current.width = to_number(size)

@primitive("pensize", 0)
def pensize(ctx):
	width = ctx.turtle.current.width
	return [width, width]

@primitive("setbackground setbg setscreencolor setsc", 1)
def setbackground(ctx, color): ctx.turtle.setbackground(parse_color(ctx, color))

@primitive("background bg getscreencolor getsc", 0)
def background(ctx): return ctx.turtle.background

@primitive("pendownp pendown?", 0)
def pendownp(ctx): return flag(ctx.turtle.current.down)

# Mouse

@primitive("mousepos", 0)
def mousepos(ctx): return list(ctx.turtle.mousepos)

@primitive("clickpos", 0)
def clickpos(ctx): return list(ctx.turtle.clickpos)

@primitive("buttonp button?", 0)
def buttonp(ctx): return flag(ctx.turtle.button)

@primitive("button", 0)
def button(ctx): return ctx.turtle.button

# Several turtles

def _turtle_number(value) -> int:
	if not is_number(value) or to_number(value) != int(to_number(value)) or to_number(value) < 0:
		raise LogoError(D.BAD_TURTLE)
	return int(to_number(value))

@primitive("setturtle", 1)
def setturtle(ctx, index): ctx.turtle.setturtle(_turtle_number(index))

@primitive("turtle", 0)
def turtle(ctx): return ctx.turtle.index

@primitive("turtles", 0)
def turtles(ctx): return len(ctx.turtle.turtles)

@primitive("ask", 2)
def ask(ctx, index, block):
	""" Run the block as another turtle, then come back. """
	with ctx.turtle.ask(_turtle_number(index)):
		ctx.run_block(need_block(block))
