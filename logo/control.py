"""
Non-local exits. These are not faults, so none of them is a LogoError.
"""

class ControlSignal(Exception):
	pass

class Output(ControlSignal):
	""" OUTPUT, STOP and .MAYBEOUTPUT: unwinds to the enclosing procedure call. """
	def __init__(self, value=None):
		super().__init__(value)
		self.value = value

class Bye(ControlSignal):
	""" Unwinds to the top of the current run, which then ends quietly. """

class Throw(ControlSignal):
	""" THROW: unwinds to a CATCH with the same tag. Tags are kept upper-case. """
	def __init__(self, tag:str, value=None):
		super().__init__(tag, value)
		self.tag = tag
		self.value = value
