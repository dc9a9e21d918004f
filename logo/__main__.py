"""
This is an interpreter for the Logo programming language.

For example:

    py -m logo spiral.logo

will run spiral.logo if possible, or else try to explain why not.
"""
from .cmdline import main

main()
