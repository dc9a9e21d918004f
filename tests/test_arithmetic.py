import math
import unittest
from logo.adapters.for_test_purposes import LogoTestCase, session

class ArithmeticTests(LogoTestCase):
	def test_operations(self):
		self.assertValues([
			("sum 1 2", 3),
			("difference 5 7", -2),
			("minus 3", -3),
			("(product 2 3 4)", 24),
			("quotient 8 2", 4),
			("(quotient 4)", 0.25),
			("remainder -7 3", -1),
			("modulo -7 3", 2),
			("modulo 7 -3", -2),
			("abs -4", 4),
			("int -3.7", -3),
			("int 3.7", 3),
			("round 2.5", 3),
			("round -2.5", -2),
			("sqrt 16", 4),
			("power 2 10", 1024),
			("exp 0", 1),
			("log10 1000", 3),
			("ln 1", 0),
			("iseq 3 1", [3, 2, 1]),
			("iseq 1 3", [1, 2, 3]),
			("rseq 0 1 5", [0, 0.25, 0.5, 0.75, 1]),
			("form 3.14159 8 2", "    3.14"),
			("form 123.456 10 2", "    123.46"),
		])

	def test_domain_trouble(self):
		self.assertTrue(math.isnan(self.value("sqrt -1")))
		self.assertEqual(-math.inf, self.value("ln 0"))
		self.assertEqual("Division by zero", str(self.fault("quotient 1 0")))
		self.assertEqual("Division by zero", str(self.fault("modulo 1 0")))

	def test_trigonometry(self):
		for text, expect in [
			("sin 30", 0.5),
			("cos 60", 0.5),
			("tan 45", 1),
			("arctan 1", 45),
			("(arctan 0 1)", 90),
			("(arctan -1 0)", 180),
			("radsin 0", 0),
			("(radarctan 1 1)", math.pi / 4),
		]:
			with self.subTest(text):
				self.assertAlmostEqual(expect, self.value(text))

	def test_comparisons(self):
		self.assertValues([
			("lessp 1 2", 1),
			("greaterp 1 2", 0),
			("lessequalp 2 2", 1),
			("greaterequalp 1 2", 0),
			("less? 1 2", 1),
		])

	def test_bits(self):
		self.assertValues([
			("bitand 12 10", 8),
			("bitor 12 10", 14),
			("bitxor 12 10", 6),
			("(bitand 7 6 4)", 4),
			("bitnot 0", -1),
			("ashift 1 4", 16),
			("ashift -16 -2", -4),
			("lshift -1 -28", 15),
			("lshift 1 31", -2147483648),
		])

class RandomTests(unittest.TestCase):
	def test_seeded_sessions_agree(self):
		a, b = session(seed=42), session(seed=42)
		text = "(list random 100 random 100 random 100)"
		self.assertEqual(a.run(text, return_result=True), b.run(text, return_result=True))

	def test_rerandom_repeats(self):
		logo = session()
		text = "rerandom output (list random 1000 random 1000)"
		self.assertEqual(logo.run(text, return_result=True), logo.run(text, return_result=True))
		text = "(rerandom 7) output random 1000"
		self.assertEqual(logo.run(text, return_result=True), logo.run(text, return_result=True))

	def test_ranges(self):
		logo = session()
		for _ in range(50):
			self.assertIn(logo.run("random 3", return_result=True), [0, 1, 2])
			self.assertIn(logo.run("(random 5 7)", return_result=True), [5, 6, 7])

class LogicTests(LogoTestCase):
	def test_connectives(self):
		self.assertValues([
			("true", 1),
			("false", 0),
			("and 1 0", 0),
			("(and 1 1 1)", 1),
			("(and)", 1),
			('or 0 "true', 1),
			("(or 0 0 0)", 0),
			("xor 1 1", 0),
			("xor 1 0", 1),
			("not 0", 1),
			('not "false', 1),
		])

	def test_short_circuit(self):
		self.value('make "x 0')
		self.value('to bump make "x :x + 1 output 1 end')
		self.assertEqual(0, self.value("and 0 bump"))
		self.assertEqual(1, self.value("or 1 bump"))
		self.assertEqual(0, self.value(":x"))
		self.assertEqual(1, self.value("or 0 bump"))
		self.assertEqual(1, self.value(":x"))

if __name__ == '__main__':
	unittest.main()
