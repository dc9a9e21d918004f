"""
A Logo interpreter with turtle graphics.

	from logo.executive import Interpreter
	Interpreter().run('repeat 4 [fd 100 rt 90]')
"""
