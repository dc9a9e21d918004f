"""
Everything about telling the user what went wrong.

The catalogue of complaints lives here, along with the LogoError exception
that carries one, and the Report which puts problems in front of a human.
"""
import re, sys, random
from typing import NamedTuple, Optional, Callable
from boozetools.support.failureprone import SourceText, illustration

class TooManyIssues(Exception):
	pass

class Complaint(NamedTuple):
	code: int
	template: str

# Reading
UNEXPECTED_BRACKET = Complaint(26, "Unexpected ']'")
UNEXPECTED_BRACE = Complaint(27, "Unexpected '}'")
MISSING_BRACKET = Complaint(26, "Expected ']'")
MISSING_BRACE = Complaint(27, "Expected '}'")
PARSE_FAILURE = Complaint(44, "Couldn't parse: '{string}'")

# Evaluating
UNEXPECTED_END = Complaint(4, "Unexpected end of instructions")
UNEXPECTED_PAREN = Complaint(10, "Unexpected ')'")
MISSING_PAREN = Complaint(10, "Expected ')'")
MISSING_PAREN_SAW = Complaint(10, "Expected ')', saw {word}")
DIVIDE_BY_ZERO = Complaint(4, "Division by zero")
UNBOUND_VARIABLE = Complaint(11, "Don't know about variable {name:U}")
UNKNOWN_PROCEDURE = Complaint(24, "Don't know how to {name:U}")
UNKNOWN_PROCEDURE_IN = Complaint(24, "{_PROC_}: Don't know how to {name:U}")
MISSING_SPACE = Complaint(39, "Need a space between {name:U} and {value}")
TOO_FEW_INPUTS = Complaint(6, "Not enough inputs for {name:U}")
TOO_MANY_INPUTS = Complaint(7, "Too many inputs for {name:U}")
NO_OUTPUT = Complaint(5, "No output from procedure")
UNEXPECTED_RESULT = Complaint(9, "Don't know what to do with {result}")
STACK_OVERFLOW = Complaint(2, "Stack overflow")

# Types and values
EXPECTED_NUMBER = Complaint(4, "Expected number")
EXPECTED_STRING = Complaint(4, "Expected string")
EXPECTED_LIST = Complaint(4, "Expected list")
EXPECTED_LIST_IN = Complaint(4, "{_PROC_}: Expected list")
EXPECTED_ARRAY = Complaint(4, "{_PROC_}: Expected array")
EXPECTED_BLOCK = Complaint(4, "{_PROC_}: Expected block")
EXPECTED_PAIR = Complaint(4, "{_PROC_}: Expected list of length 2")
EXPECTED_NONEMPTY = Complaint(4, "{_PROC_}: Expected non-empty list")
EXPECTED_EQUAL_LENGTHS = Complaint(4, "{_PROC_}: Expected lists of equal length")
EXPECTED_IDENTIFIER = Complaint(4, "{_PROC_}: Expected identifier")
EXPECTED_END = Complaint(4, "{_PROC_}: Expected END")
INDEX_OUT_OF_BOUNDS = Complaint(4, "{_PROC_}: Index out of bounds")
ARRAY_SIZE = Complaint(4, "{_PROC_}: Array size must be positive integer")
CIRCULAR_ARRAY = Complaint(4, "{_PROC_}: Can't create circular array")
BAD_INPUT = Complaint(4, "{_PROC_}: Bad input {value}")
BAD_COLOR = Complaint(4, "{_PROC_}: Unknown color {value}")
BAD_TURTLE = Complaint(4, "{_PROC_}: Expected turtle number")

# Control
NO_TEST = Complaint(4, "{_PROC_}: Called without TEST")
CANT_APPLY_SPECIAL = Complaint(4, "Can't apply {_PROC_} to special {name:U}")
NO_CATCH = Complaint(21, "No CATCH for tag {tag:U}")
NO_CATCH_WITH_VALUE = Complaint(35, "No CATCH for tag {tag:U}")

# Workspace
CANT_REDEFINE_PRIMITIVE = Complaint(22, "{_PROC_}: Can't redefine primitive {name:U}")
CANT_SHOW_PRIMITIVE = Complaint(22, "{_PROC_}: Can't show definition of primitive {name:U}")
BAD_DEFAULT_ARITY = Complaint(4, "{_PROC_}: Bad default number of inputs for {name:U}")
BAD_INPUT_NAME = Complaint(4, "{_PROC_}: Bad input name {name}")
DEFINITION_SHAPE = Complaint(4, "{_PROC_}: Expected list of length 2")
CANT_OVERWRITE_SPECIAL = Complaint(4, "{_PROC_}: Can't overwrite special {name:U}")
CANT_OVERWRITE_PRIMITIVE = Complaint(4, "{_PROC_}: Can't overwrite primitives unless REDEFP is TRUE")
CANT_ERASE_SPECIAL = Complaint(4, "Can't ERASE special {name:U}")
CANT_ERASE_PRIMITIVE = Complaint(4, "Can't ERASE primitives unless REDEFP is TRUE")

_PLACEHOLDER = re.compile(r"\{(\w+)(?::([UL]))?\}")

def interpolate(template:str, params:dict, proc:Optional[str]) -> str:
	""" Fill in {name}, {name:U}, {name:L} and {_PROC_}. """
	if proc is None and template.startswith("{_PROC_}: "):
		template = template[len("{_PROC_}: "):]
	def fill(match):
		key, case = match.groups()
		if key == "_PROC_": text = (proc or "").upper()
		elif key in params: text = str(params[key])
		else: return match.group(0)
		if case == "U": return text.upper()
		if case == "L": return text.lower()
		return text
	return _PLACEHOLDER.sub(fill, template)

class LogoError(Exception):
	"""
	Every fault a Logo program can commit.

	The procedure that was running when the fault happened gets filled in
	on the way out by the dispatcher; the source span gets filled in by the
	top-level statement loop, if it knows one.
	The trail is the call stack as it stood when the fault happened.
	"""
	source : Optional[SourceText] = None
	span : Optional[tuple[int, int]] = None
	trail : Optional[list[str]] = None

	def __init__(self, complaint:Complaint, **params):
		super().__init__(complaint.template)
		self.complaint = complaint
		self.params = params
		self.proc = None
		self.localize = None

	@property
	def code(self) -> int: return self.complaint.code

	def render(self, localize:Callable[[str], Optional[str]]=None) -> str:
		localize = localize or self.localize
		template = self.complaint.template
		if localize is not None:
			template = localize(template) or template
		return interpolate(template, self.params, self.proc)

	def __str__(self): return self.render()

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Heavens', 'Jeepers',
		'Rats', 'Shell shock', 'Snapping Turtles', 'Tortoise Tracks',
	]

	resignations = [
		'The turtle refuses to budge.',
		'I cannot continue.',
		'The turtle has pulled in its head.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Annotation:
	def __init__(self, source:SourceText, span:tuple[int, int], caption:str=""):
		self.source = source
		self.slice = slice(*span)
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.slice.start)
		single_line = self.source.line_of_text(row)
		width = max(1, self.slice.stop - self.slice.start)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro]
		for ann in self._anns:
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

class Report:
	""" Collects problems and verbose chatter on behalf of an interpreter session. """
	_issues : list[Pic]

	def __init__(self, *, verbose:int, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self): return list(self._issues)

	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def runtime_error(self, err:LogoError, localize=None):
		""" A run died. Say why, and where if we can. """
		intro = err.render(localize)
		if err.source is not None and err.span is not None:
			problem = [Annotation(err.source, err.span)]
		else:
			problem = []
		footer = ["  in %s" % name.upper() for name in reversed(err.trail or ())] if self._verbose else []
		self.issue(Pic(intro, problem, footer))

	def broken_file(self, path, why:str):
		self.issue(Pic("Something went pear-shaped while trying to read %s: %s" % (path, why), []))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)
		self._issues.clear()

def _bemoan(issues):
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
