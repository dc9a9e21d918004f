"""
The interpreter session: the context every primitive receives.

It owns the procedure table, the scope chain, property lists, the random
number generator, the turtle and the text stream, and it runs statement
sequences. Runs are serialized through a queue. Long computations yield
to the host now and then, so that a window can stay responsive.
"""
import copy, math, random, sys, time
from contextlib import contextmanager
from typing import Callable, Optional
from . import diagnostics as D
from .diagnostics import LogoError, Report
from .control import Output, Bye, Throw
from .evaluator import expression, apply
from .procedures import Procedure, UserProcedure
from .reader import AtomStream, Reader, reparse
from .stacking import Cell, RootFrame, Activation, Frame
from .scheduler import RunQueue, SimpleTask
from .values import copy as copy_value, stringify, truth, to_string
from .turtle import TurtleEngine
from .surface import BlindSurface
from .primitives import load_library

YIELD_INTERVAL = 0.02  # seconds of computation between visits to the host
DEFAULT_SEED = 2345678901
CANVAS_SIZE = (1000, 1000)

# Each Logo call costs a handful of Python frames.
sys.setrecursionlimit(max(sys.getrecursionlimit(), 20000))

class PRNG:
	""" Park-Miller, computed in floating point so that seeds reproduce the same sequence. """
	A = 48271
	M = 0x7fffffff
	Q = M / A
	R = M % A

	def __init__(self, seed):
		self.seed(seed)
		self.next()

	def seed(self, x=DEFAULT_SEED):
		self._s = int(x) & 0x7fffffff

	def next(self) -> float:
		hi = self._s / self.Q
		lo = math.fmod(self._s, self.Q)
		t = self.A * lo - self.R * hi
		self._s = t if t > 0 else t + self.M
		return self._s / self.M

class PropertyList:
	__slots__ = ("props", "buried")
	def __init__(self):
		self.props = {}
		self.buried = False

class Interpreter:
	"""
	One Logo session.

	Hooks are all optional:
		save_hook(name, definition_or_None) hears about procedure (re)definition and erasure.
		yield_hook() gets called every so often during long runs.
		localize(template) may return a translated message template.
		keyword_alias(WORD) may return 'END' or 'ELSE'.
		color_alias(name) may return a color for an unfamiliar color name.
	"""
	def __init__(self, turtle:TurtleEngine=None, stream=None, *, report:Report=None,
			save_hook:Callable=None, yield_hook:Callable=None, localize:Callable=None,
			keyword_alias:Callable=None, color_alias:Callable=None, seed=None):
		if stream is None:
			from .adapters.teletype_adapter import Console
			stream = Console()
		self.turtle = turtle or TurtleEngine(BlindSurface(), *CANVAS_SIZE)
		self.stream = stream
		self.report = report or Report(verbose=0)
		self.save_hook = save_hook
		self.yield_hook = yield_hook
		self.localize = localize
		self.keyword_alias = keyword_alias
		self.color_alias = color_alias
		self.routines : dict[str, Procedure] = {}
		self.root = RootFrame[Cell]()
		self.frame : Frame[Cell] = self.root
		self.plists : dict[str, PropertyList] = {}
		self.prng = PRNG(random.random() * 0x7fffffff if seed is None else seed)
		self.call_stack : list[str] = []
		self.repcount = -1
		self.last_error = None
		self.bye_requested = False
		self.gensym_counter = 0
		self._last_yield = time.monotonic()
		self._queue = RunQueue()
		for proc in load_library():
			self.routines[proc.name] = copy.copy(proc)

	# Running programs

	def run(self, text:str, return_result=False):
		""" Read and run one program, synchronously. Faults propagate as LogoError. """
		started = time.monotonic()
		try:
			program = Reader(text).program()
			return self.execute(AtomStream.of_program(program), return_result)
		except Bye:
			return None
		except Output as out:
			return out.value
		except Throw as throw:
			err = LogoError(D.NO_CATCH if throw.value is None else D.NO_CATCH_WITH_VALUE, tag=throw.tag)
			err.localize = self.localize
			raise err from None
		except RecursionError:
			err = LogoError(D.STACK_OVERFLOW)
			err.localize = self.localize
			raise err from None
		except LogoError as err:
			err.localize = self.localize
			raise
		finally:
			self.bye_requested = False
			self.call_stack.clear()
			self.turtle.present()
			self.report.info("Run finished in %.3f seconds." % (time.monotonic() - started))

	def submit(self, text:str, return_result=False):
		"""
		Queue a run behind any already waiting. Returns a Future.
		A run submitted while another is going (say, from a yield hook)
		begins only after the current one finishes.
		"""
		self.report.info("Queued:", text if len(text) < 60 else text[:57]+"...")
		return self._queue.submit(SimpleTask(self.run, text, return_result))

	def request_bye(self):
		""" Safe to call from a hook: the next statement boundary ends the run. """
		self.bye_requested = True

	def execute(self, stream, return_result=False):
		"""
		Run statements until the stream is exhausted.
		Unless return_result, a statement that produces a value is a fault.
		"""
		if not isinstance(stream, AtomStream):
			stream = AtomStream(stream)
		result = None
		while stream:
			if self.bye_requested:
				raise Bye()
			start = stream.index
			try:
				result = expression(self, stream)()
				if result is not None and not return_result:
					raise LogoError(D.UNEXPECTED_RESULT, result=stringify(result))
			except LogoError as err:
				if err.span is None and stream.spans is not None:
					err.span = stream.span(start, stream.index)
					err.source = stream.source
				raise
		return result

	def run_atoms(self, atoms:list, return_result=False):
		return self.execute(AtomStream(atoms), return_result)

	def run_block(self, block, return_result=False):
		""" Run a list (or word) as instructions. """
		return self.run_atoms(reparse(block), return_result)

	def checkpoint(self):
		""" A yield point: visit the host if enough time has passed, and honor BYE. """
		now = time.monotonic()
		if now - self._last_yield >= YIELD_INTERVAL:
			self._last_yield = now
			self.turtle.present()
			if self.yield_hook is not None:
				self.yield_hook()
		if self.bye_requested:
			raise Bye()

	def wait(self, seconds:float):
		deadline = time.monotonic() + seconds
		while True:
			left = deadline - time.monotonic()
			if left <= 0: break
			time.sleep(min(left, YIELD_INTERVAL))
			self.checkpoint()

	@contextmanager
	def calling(self, name:str):
		""" Keep the call stack honest, and pin faults on the innermost procedure. """
		self.call_stack.append(name)
		try:
			yield
		except LogoError as err:
			if err.proc is None:
				err.proc = name
			if err.trail is None:
				err.trail = list(self.call_stack)
			raise
		finally:
			self.call_stack.pop()

	@contextmanager
	def activation(self):
		frame = Activation[Cell](self.frame)
		saved, self.frame = self.frame, frame
		try:
			yield frame
		finally:
			self.frame = saved

	@contextmanager
	def counting(self):
		""" REPCOUNT belongs to the innermost loop. """
		saved = self.repcount
		try:
			yield
		finally:
			self.repcount = saved

	def truth(self, value) -> bool:
		""" Conditions may be written as lists, to be run for their value. """
		if isinstance(value, list):
			value = self.run_block(value, return_result=True)
		return truth(value)

	def keyword(self, word:str) -> str:
		word = word.upper()
		if self.keyword_alias is not None:
			return self.keyword_alias(word) or word
		return word

	def call(self, name:str, values:list):
		return apply(self, to_string(name), values)

	# Variables

	def getvar(self, name:str):
		cell = self.frame.find(name)
		if cell is None or cell.value is None:
			raise LogoError(D.UNBOUND_VARIABLE, name=name)
		return cell.value

	def maybegetvar(self, name:str):
		cell = self.frame.find(name)
		return None if cell is None else cell.value

	def setvar(self, name:str, value):
		cell = self.frame.find(name)
		if cell is None:
			self.root.assign(name, Cell(copy_value(value)))
		else:
			cell.value = copy_value(value)

	def local(self, name:str):
		if not self.frame.holds(name):
			self.frame.assign(name, Cell())

	def localmake(self, name:str, value):
		self.local(name)
		self.frame.fetch(name).value = copy_value(value)

	def global_(self, name:str):
		if not self.root.holds(name):
			self.root.assign(name, Cell())

	# Procedures

	def lookup(self, name:str) -> Optional[Procedure]:
		return self.routines.get(name.lower())

	def define(self, proc:UserProcedure):
		self.routines[proc.name] = proc
		self.report.info("Defined", proc.name.upper())
		if self.save_hook is not None:
			self.save_hook(proc.name, proc.definition())

	def erase_procedure(self, name:str):
		proc = self.routines.pop(name.lower(), None)
		if proc is not None and not proc.primitive:
			self.report.info("Erased", name.upper())
			if self.save_hook is not None:
				self.save_hook(name.lower(), None)

	def redefp(self) -> bool:
		value = self.maybegetvar("redefp")
		return value is not None and truth(value)

	def copydef(self, newname:str, oldname:str):
		newname, oldname = newname.lower(), oldname.lower()
		old = self.lookup(oldname)
		if old is None:
			raise LogoError(D.UNKNOWN_PROCEDURE_IN, name=oldname)
		existing = self.lookup(newname)
		if existing is not None:
			if existing.special:
				raise LogoError(D.CANT_OVERWRITE_SPECIAL, name=newname)
			if existing.primitive and not self.redefp():
				raise LogoError(D.CANT_OVERWRITE_PRIMITIVE)
		proc = copy.copy(old)
		proc.name = newname
		proc.buried = False
		if proc.primitive:
			self.routines[newname] = proc
		else:
			self.define(proc)

	def procedures_as_text(self) -> str:
		return "\n".join(
			proc.definition()
			for proc in self.routines.values()
			if not proc.primitive
		)

	# Property lists

	def plist(self, name:str, create=False) -> Optional[PropertyList]:
		key = name.lower()
		if create and key not in self.plists:
			self.plists[key] = PropertyList()
		return self.plists.get(key)

	# Workspace-wide resets

	def erase_all(self):
		for name in [n for n, p in self.routines.items() if not p.primitive and not p.buried]:
			self.erase_procedure(name)
		for name in [n for n, c in self.root.items() if not c.buried]:
			self.root.remove(name)
		for name in [n for n, p in self.plists.items() if not p.buried]:
			del self.plists[name]
