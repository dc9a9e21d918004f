import unittest
from unittest import mock
from logo.adapters.teletype_adapter import Console
from logo.adapters.for_test_purposes import LogoTestCase, session

class TransmitterTests(LogoTestCase):
	def test_print_type_show(self):
		for text, expect in [
			('print "a', "a\n"),
			('print [a [b c]]', "a [b c]\n"),
			('(print "a 1 [b])', "a 1 b\n"),
			('(print)', "\n"),
			('type "a type "b', "ab"),
			('(type "a [b c] 2)', "ab c2"),
			('show [a [b]]', "[a [b]]\n"),
			('(show "a [b])', "a [b]\n"),
			('show {a b}@0', "{a b}@0\n"),
			('print 1.5', "1.5\n"),
			('print 3 / 1', "3\n"),
		]:
			with self.subTest(text):
				self.assertEqual(expect, self.output(text))

	def test_cleartext(self):
		self.logo.run('print "a ct type "b')
		self.assertEqual("b", self.logo.stream.readback())

class ReceiverTests(unittest.TestCase):
	def test_readword_and_readlist(self):
		logo = session("hello world", "1 [2 3]")
		self.assertEqual("hello world", logo.run("readword", return_result=True))
		self.assertEqual(["1", ["2", "3"]], logo.run('(readlist "what?)', return_result=True))
		self.assertEqual("what?", logo.stream.last_prompt)

	def test_end_of_input(self):
		logo = session()
		self.assertEqual([], logo.run("readword", return_result=True))
		self.assertEqual([], logo.run("readlist", return_result=True))

	def test_programs_see_what_was_read(self):
		logo = session("3 4")
		self.assertEqual(7, logo.run("apply \"sum readlist", return_result=True))

class TerminalTests(LogoTestCase):
	def test_text_styling(self):
		self.assertValues([
			("textcolor", "black"),
			("settextcolor 4 textcolor", "red"),
			("settextcolor [99 0 0] textcolor", "#ff0000"),
			('setfont "serif font', "serif"),
			("textsize", 13),
			("increasefont textsize", 16),
			("settextsize 13 decreasefont textsize", 10),
			("settextsize 20 textsize", 20),
		])

class ConsoleTests(unittest.TestCase):
	def test_write_goes_to_stdout(self):
		console = Console()
		with mock.patch("sys.stdout") as stdout:
			console.write("a", "\n")
		stdout.write.assert_any_call("a")
		self.assertEqual("a\n", console.readback())
		console.clear()
		self.assertEqual("", console.readback())

	def test_read_at_end_of_file(self):
		with mock.patch("builtins.input", side_effect=EOFError):
			self.assertIsNone(Console.read("? "))
		with mock.patch("builtins.input", return_value="fd 10") as reader:
			self.assertEqual("fd 10", Console.read("? "))
		reader.assert_called_with("? ")

if __name__ == '__main__':
	unittest.main()
