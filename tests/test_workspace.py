import unittest
from logo.adapters.for_test_purposes import LogoTestCase

class VariableTests(LogoTestCase):
	def test_make_and_thing(self):
		self.assertValues([
			('make "x 3 :x', 3),
			('thing "x', 3),
			('name 4 "y :y', 4),
			('make "X 5 :x', 5),
			('make "l [a b] make "m :l .setfirst :m "z :l', ["a", "b"]),
		])
		self.assertFaults([
			('make [] 123', "Expected string"),
			('thing "nope', "Don't know about variable NOPE"),
		])

	def test_local_and_global(self):
		self.value('make "v "outer')
		self.value('to shadow local "v make "v "inner output :v end')
		self.assertEqual(["inner", "outer"], self.value('(list shadow :v)'))
		self.value('to lm localmake "w 7 output :w end')
		self.assertEqual(7, self.value("lm"))
		self.assertEqual(0, self.value('namep "w'))
		self.value('to g global "gg make "gg 9 end')
		self.assertEqual(9, self.value('g :gg'))
		self.value('to several (local "a [b c]) make "b 1 output namep "b end')
		self.assertEqual(1, self.value("several"))
		self.assertEqual(0, self.value('namep "b'))

	def test_declared_but_unbound(self):
		self.value('global "q')
		self.assertEqual(0, self.value('namep "q'))
		self.assertEqual("Don't know about variable Q", str(self.fault(":q")))

class PropertyListTests(LogoTestCase):
	def test_properties(self):
		self.assertValues([
			('pprop "p "a 1 gprop "p "a', 1),
			('gprop "p "missing', []),
			('gprop "nobody "a', []),
			('pprop "P "B [x] plist "p', ["a", 1, "b", ["x"]]),
			('plistp "p', 1),
			('remprop "p "a plist "p', ["b", ["x"]]),
			('remprop "p "b plistp "p', 0),
			('plist "p', []),
		])

class PredicateTests(LogoTestCase):
	def test_kinds_of_name(self):
		self.value("to sq :x output :x * :x end")
		self.assertValues([
			('procedurep "sq', 1),
			('procedurep "fd', 1),
			('procedurep "nosuch', 0),
			('primitivep "fd', 1),
			('primitivep "sq', 0),
			('definedp "sq', 1),
			('defined? "fd', 0),
			('namep "sq', 0),
			('arity "fd', [1, 1, 1]),
			('arity "sum', [0, 2, -1]),
		])

class ContentsTests(LogoTestCase):
	def setUp(self):
		super().setUp()
		self.value('to sq :x output :x * :x end')
		self.value('make "v 1 pprop "p "k "val')

	def test_queries(self):
		self.assertValues([
			("contents", [["sq"], ["v"], ["p"]]),
			("procedures", ["sq"]),
			("globals", ["v"]),
			("names", [[], ["v"]]),
			("plists", [[], [], ["p"]]),
			('namelist "a', [[], ["a"]]),
			('pllist [a b]', [[], [], ["a", "b"]]),
			("buried", [[], [], []]),
		])
		self.assertIn("fd", self.value("primitives"))

	def test_burying(self):
		self.assertValues([
			('bury "sq contents', [[], ["v"], ["p"]]),
			('buried', [["sq"], [], []]),
			('buriedp "sq', 1),
			('buriedp [[] [v]]', 0),
			('unbury "sq buriedp "sq', 0),
			('buryname "v globals', []),
			('unburyname "v globals', ["v"]),
			('buryall contents', [[], [], []]),
			('unburyall contents', [["sq"], ["v"], ["p"]]),
		])

	def test_erall_spares_the_buried(self):
		self.value('bury [[sq] [] [p]] erall')
		self.assertEqual([[], [], []], self.value("contents"))
		self.assertEqual([["sq"], [], ["p"]], self.value("buried"))

	def test_erasing(self):
		self.assertValues([
			('erase "sq procedures', []),
			('erase [[] [v]] globals', []),
			('erase [[] [] [p]] plists', [[], [], []]),
		])

	def test_erasing_by_kind(self):
		self.assertValues([
			("erps procedures", []),
			("globals", ["v"]),
			("erns globals", []),
			("erpls plists", [[], [], []]),
		])

	def test_ern_and_erpl(self):
		self.assertValues([
			('make "w 2 ern [v w] globals', []),
			('erpl "p plistp "p', 0),
		])

	def test_erase_faults(self):
		self.assertFaults([
			("(erase {})", "ERASE: Expected list"),
			('erase "fd', "Can't ERASE primitives unless REDEFP is TRUE"),
			('erase "to', "Can't ERASE special TO"),
		])
		self.assertEqual(1, self.value('make "redefp 1 erase "fd procedurep "sq'))
		self.assertEqual(0, self.value('procedurep "fd'))

class CopydefTests(LogoTestCase):
	def test_copydef(self):
		self.value("to sq :x output :x * :x end")
		self.assertEqual(16, self.value('copydef "square "sq square 4'))
		self.assertEqual([0, 10], self.value('copydef "ahead "fd ahead 10 pos'))
		self.assertEqual(1, self.value('primitivep "ahead'))
		self.assertFaults([
			('copydef "fd "sq', "COPYDEF: Can't overwrite primitives unless REDEFP is TRUE"),
			('copydef "x "nosuch', "COPYDEF: Don't know how to NOSUCH"),
		])

if __name__ == '__main__':
	unittest.main()
