"""
This is an interpreter for the Logo programming language.

{0}

For example:

    logo spiral.logo

will run spiral.logo in a turtle-graphics window, or else try to explain why not.

    logo -i

will start an interactive session, and

    logo -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

PROMPT = "? "

parser = argparse.ArgumentParser(
	prog="logo",
	description="Interpreter for the Logo programming language, with turtle graphics.",
)
parser.add_argument("program", nargs="*", help="Logo source files to run, in order.")
parser.add_argument('-e', "--execute", action="append", default=[], metavar="TEXT", help="Run TEXT as Logo instructions, after any programs.")
parser.add_argument('-i', "--interactive", action="store_true", help="Read instructions from the console once the programs finish.")
parser.add_argument("--size", default="1000x1000", metavar="WxH", help="Size of the drawing window, in pixels.")
parser.add_argument("--no-graphics", action="store_true", help="Run without a window. Drawing still happens, invisibly.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what's going on.")

def _size(text:str) -> tuple[int, int]:
	try:
		width, height = text.lower().split("x")
		return int(width), int(height)
	except ValueError:
		parser.error("--size wants something like 800x600, not %r" % text)

def _attempt(interp, report, text) -> bool:
	""" Run some Logo. File a report and answer False if it goes wrong. """
	from .diagnostics import LogoError
	try:
		interp.submit(text).result()
	except LogoError as err:
		report.runtime_error(err, interp.localize)
		return False
	return True

def _statements(console):
	""" Lines from the console, keeping a TO definition together with its body. """
	while True:
		line = console.read(PROMPT)
		if line is None:
			return
		words = line.split()
		if words and words[0].lower() == "to":
			body = [line]
			while True:
				more = console.read("> ")
				if more is None:
					break
				body.append(more)
				if more.strip().lower() == "end":
					break
			line = "\n".join(body)
		yield line

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .executive import Interpreter
	from .turtle import TurtleEngine
	from .surface import BlindSurface
	from .adapters.teletype_adapter import Console
	report = Report(verbose=args.verbose)
	width, height = _size(args.size)
	if args.no_graphics:
		surface = None
		turtle = TurtleEngine(BlindSurface(), width, height)
	else:
		from .adapters.game_adapter import GameSurface
		surface = GameSurface(width, height)
		turtle = TurtleEngine(surface, width, height)
	console = Console()
	interp = Interpreter(turtle, console, report=report)
	if surface is not None:
		surface.bind(turtle, interp.request_bye)

	status = 0
	try:
		for program in args.program:
			try: text = Path(program).read_text(encoding="utf-8")
			except OSError as ex:
				report.broken_file(program, str(ex))
				report.complain_to_console()
				return 1
			if not _attempt(interp, report, text):
				status = 1
		for text in args.execute:
			if not _attempt(interp, report, text):
				status = 1
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	report.complain_to_console()
	if args.interactive:
		for text in _statements(console):
			if not _attempt(interp, report, text):
				report.complain_to_console()
			if surface is not None and surface.closed:
				break
	if surface is not None:
		surface.linger()
	return status

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
