"""
Procedure and variable definition, property lists, and the workspace
as a whole: listing it, erasing it, and burying parts of it.

A "contents list" names things by kind: [[procedures] [variables] [property lists]].
Any of the three may be missing from the end.
"""
from .. import diagnostics as D
from ..diagnostics import LogoError
from ..values import copy, is_word, to_string
from ..procedures import from_stream, from_text
from . import primitive, need_list, flag

def _names(thing) -> list[str]:
	""" A name or a list of names. """
	if isinstance(thing, list):
		return [to_string(n) for n in thing]
	return [to_string(thing)]

def _contents(thing) -> tuple[list, list, list]:
	if is_word(thing):
		return [to_string(thing)], [], []
	items = need_list(thing)
	if any(is_word(i) for i in items):
		return [to_string(i) for i in items], [], []
	parts = [[to_string(n) for n in need_list(p)] for p in items[:3]]
	parts += [[]] * (3 - len(parts))
	return tuple(parts)

def _known(ctx, name):
	proc = ctx.lookup(to_string(name))
	if proc is None:
		raise LogoError(D.UNKNOWN_PROCEDURE_IN, name=to_string(name))
	return proc

def _user(ctx, name):
	proc = _known(ctx, name)
	if proc.primitive:
		raise LogoError(D.CANT_SHOW_PRIMITIVE, name=proc.name)
	return proc

# Procedure definition

@primitive("to", special=True)
def to(ctx, stream):
	ctx.define(from_stream(ctx, stream))

@primitive("def", 1)
def def_(ctx, name): return _user(ctx, name).definition()

@primitive("text", 1)
def text(ctx, name): return _user(ctx, name).text()

@primitive("define", 2)
def define(ctx, name, definition):
	ctx.define(from_text(ctx, to_string(name), definition))

@primitive("copydef", 2)
def copydef(ctx, newname, oldname):
	ctx.copydef(to_string(newname), to_string(oldname))

# Variables

@primitive("make", 2)
def make(ctx, name, value): ctx.setvar(to_string(name), value)

@primitive("name", 2)
def name(ctx, value, varname): ctx.setvar(to_string(varname), value)

@primitive("local", 1, 1, -1)
def local(ctx, *names):
	for thing in names:
		for n in _names(thing):
			ctx.local(n)

@primitive("localmake", 2)
def localmake(ctx, name, value): ctx.localmake(to_string(name), value)

@primitive("thing", 1)
def thing(ctx, name): return ctx.getvar(to_string(name))

@primitive("global", 1, 1, -1)
def global_(ctx, *names):
	for thing in names:
		for n in _names(thing):
			ctx.global_(n)

# Property lists

@primitive("pprop", 3)
def pprop(ctx, plname, propname, value):
	ctx.plist(to_string(plname), create=True).props[to_string(propname).lower()] = copy(value)

@primitive("gprop", 2)
def gprop(ctx, plname, propname):
	plist = ctx.plist(to_string(plname))
	if plist is None:
		return []
	return plist.props.get(to_string(propname).lower(), [])

@primitive("remprop", 2)
def remprop(ctx, plname, propname):
	key = to_string(plname)
	plist = ctx.plist(key)
	if plist is not None:
		plist.props.pop(to_string(propname).lower(), None)
		if not plist.props:
			del ctx.plists[key.lower()]

@primitive("plist", 1)
def plist(ctx, plname):
	found = ctx.plist(to_string(plname))
	result = []
	if found is not None:
		for key, value in found.props.items():
			result.extend([key, value])
	return result

# Predicates

@primitive("procedurep procedure?", 1)
def procedurep(ctx, name): return flag(ctx.lookup(to_string(name)) is not None)

@primitive("primitivep primitive?", 1)
def primitivep(ctx, name):
	proc = ctx.lookup(to_string(name))
	return flag(proc is not None and proc.primitive)

@primitive("definedp defined?", 1)
def definedp(ctx, name):
	proc = ctx.lookup(to_string(name))
	return flag(proc is not None and not proc.primitive)

@primitive("namep name?", 1)
def namep(ctx, name): return flag(ctx.maybegetvar(to_string(name)) is not None)

@primitive("plistp plist?", 1)
def plistp(ctx, plname):
	found = ctx.plist(to_string(plname))
	return flag(found is not None and found.props)

# Queries

def _user_procedures(ctx, buried:bool) -> list[str]:
	return [n for n, p in ctx.routines.items() if not p.primitive and p.buried == buried]

def _variables(ctx, buried:bool) -> list[str]:
	return [n for n, cell in ctx.root.items() if cell.buried == buried]

def _plists(ctx, buried:bool) -> list[str]:
	return [n for n, p in ctx.plists.items() if p.buried == buried]

@primitive("contents", 0)
def contents(ctx):
	return [_user_procedures(ctx, False), _variables(ctx, False), _plists(ctx, False)]

@primitive("buried", 0)
def buried(ctx):
	return [_user_procedures(ctx, True), _variables(ctx, True), _plists(ctx, True)]

@primitive("traced", 0)
def traced(ctx): return [[], [], []]

@primitive("stepped", 0)
def stepped(ctx): return [[], [], []]

@primitive("procedures", 0)
def procedures(ctx): return _user_procedures(ctx, False)

@primitive("primitives", 0)
def primitives(ctx):
	return [n for n, p in ctx.routines.items() if p.primitive]

@primitive("globals", 0)
def globals_(ctx): return _variables(ctx, False)

@primitive("names", 0)
def names(ctx): return [[], _variables(ctx, False)]

@primitive("plists", 0)
def plists(ctx): return [[], [], _plists(ctx, False)]

@primitive("namelist", 1)
def namelist(ctx, thing): return [[], _names(thing)]

@primitive("pllist", 1)
def pllist(ctx, thing): return [[], [], _names(thing)]

@primitive("arity", 1)
def arity(ctx, name): return _known(ctx, name).arity()

# Erasing

def _erase_procedures(ctx, names):
	for n in names:
		proc = ctx.lookup(n)
		if proc is None:
			continue
		if proc.special:
			raise LogoError(D.CANT_ERASE_SPECIAL, name=n)
		if proc.primitive and not ctx.redefp():
			raise LogoError(D.CANT_ERASE_PRIMITIVE)
		ctx.erase_procedure(n)

def _erase_variables(ctx, names):
	for n in names:
		ctx.root.remove(n)

def _erase_plists(ctx, names):
	for n in names:
		ctx.plists.pop(n.lower(), None)

@primitive("erase", 1)
def erase(ctx, thing):
	procs, variables, plists = _contents(thing)
	_erase_procedures(ctx, procs)
	_erase_variables(ctx, variables)
	_erase_plists(ctx, plists)

@primitive("erall", 0)
def erall(ctx): ctx.erase_all()

@primitive("erps", 0)
def erps(ctx): _erase_procedures(ctx, _user_procedures(ctx, False))

@primitive("erns", 0)
def erns(ctx): _erase_variables(ctx, _variables(ctx, False))

@primitive("erpls", 0)
def erpls(ctx): _erase_plists(ctx, _plists(ctx, False))

@primitive("ern", 1)
def ern(ctx, thing): _erase_variables(ctx, _names(thing))

@primitive("erpl", 1)
def erpl(ctx, thing): _erase_plists(ctx, _names(thing))

# Burying

def _entries(ctx, thing):
	""" Everything a contents list names that exists: procedures, variable cells, property lists. """
	procs, variables, plists = _contents(thing)
	found = [ctx.lookup(n) for n in procs]
	found += [ctx.root.fetch(n) for n in variables if ctx.root.holds(n)]
	found += [ctx.plist(n) for n in plists]
	return [entry for entry in found if entry is not None]

def _set_buried(ctx, thing, buried:bool):
	for entry in _entries(ctx, thing):
		entry.buried = buried

def _everything(ctx):
	return [ctx.routines.values(), [cell for _, cell in ctx.root.items()], ctx.plists.values()]

@primitive("bury", 1)
def bury(ctx, thing): _set_buried(ctx, thing, True)

@primitive("unbury", 1)
def unbury(ctx, thing): _set_buried(ctx, thing, False)

@primitive("buryall", 0)
def buryall(ctx):
	for group in _everything(ctx):
		for entry in group:
			entry.buried = True

@primitive("unburyall", 0)
def unburyall(ctx):
	for group in _everything(ctx):
		for entry in group:
			entry.buried = False

@primitive("buryname", 1)
def buryname(ctx, thing): _set_buried(ctx, [[], _names(thing)], True)

@primitive("unburyname", 1)
def unburyname(ctx, thing): _set_buried(ctx, [[], _names(thing)], False)

@primitive("buriedp buried?", 1)
def buriedp(ctx, thing):
	entries = _entries(ctx, thing)
	return flag(entries and all(entry.buried for entry in entries))
