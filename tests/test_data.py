import unittest
from logo.values import LogoArray
from logo.adapters.for_test_purposes import LogoTestCase

class ConstructorTests(LogoTestCase):
	def test_words_and_lists(self):
		self.assertValues([
			('word "a "b', "ab"),
			('(word "a "b "c)', "abc"),
			('(word)', ""),
			('list "a [b]', ["a", ["b"]]),
			('se "a [b c]', ["a", "b", "c"]),
			('(sentence [a] [[b]] "c)', ["a", ["b"], "c"]),
			('fput "a [b]', ["a", "b"]),
			('fput "a "bc', "abc"),
			('lput "c [a b]', ["a", "b", "c"]),
			('lput "c "ab', "abc"),
			('combine "a [b]', ["a", "b"]),
			('combine "a "b', "ab"),
			('reverse [a b c]', ["c", "b", "a"]),
			('reverse "abc', "cba"),
			('(reverse [a b] [c])', ["b", "a", "c"]),
			('gensym', "G1"),
			('gensym', "G2"),
		])

	def test_arrays(self):
		array = self.value("array 3")
		self.assertIsInstance(array, LogoArray)
		self.assertEqual([[], [], []], array.items)
		self.assertEqual(0, self.value("(array 2 0)").origin)
		self.assertEqual(["a", "b"], self.value("arraytolist listtoarray [a b]"))
		grid = self.value("mdarray [2 3]")
		self.assertEqual(2, len(grid))
		self.assertEqual(3, len(grid.items[0]))
		self.assertFaults([
			("array 0", "ARRAY: Array size must be positive integer"),
			("array 1.5", "ARRAY: Array size must be positive integer"),
			("arraytolist [a]", "ARRAYTOLIST: Expected array"),
		])

class SelectorTests(LogoTestCase):
	def test_selectors(self):
		self.assertValues([
			('first "abc', "a"),
			('first [[a] b]', ["a"]),
			('firsts [[a b] [c d]]', ["a", "c"]),
			('last [a b]', "b"),
			('butfirst [a b c]', ["b", "c"]),
			('bf "abc', "bc"),
			('bfs [[a b] [c d]]', [["b"], ["d"]]),
			('bl "abc', "ab"),
			('item 2 [a b c]', "b"),
			('item 3 "abc', "c"),
			('item 0 {a b}@0', "a"),
			('mditem [2 1] {{a b} {c d}}', "c"),
			('remove "b [a b c b]', ["a", "c"]),
			('remove "b "abcb', "ac"),
			('remdup [a b a c b]', ["a", "b", "c"]),
			('quoted "a', '"a'),
			('quoted [a]', ["a"]),
			('split ", "a,b,,c', ["a", "b", "c"]),
			('split "x [1 x 2 3 x]', [["1"], ["2", "3"]]),
		])

	def test_selector_faults(self):
		self.assertFaults([
			('item 4 [a b c]', "ITEM: Index out of bounds"),
			('item 3 {a b}', "ITEM: Index out of bounds"),
			('butfirst []', "BUTFIRST: Expected non-empty list"),
			('last "', "LAST: Expected non-empty list"),
		])

	def test_pick_chooses_a_member(self):
		self.assertIn(self.value("pick [a b c]"), ["a", "b", "c"])

class MutatorTests(LogoTestCase):
	def test_setitem(self):
		self.assertEqual("x", self.value('make "a array 3 setitem 1 :a "x item 1 :a'))
		self.assertEqual("q", self.value('make "m mdarray [2 2] mdsetitem [1 2] :m "q mditem [1 2] :m'))

	def test_arrays_are_shared(self):
		self.assertEqual(9, self.value('make "a {1 2} make "b :a setitem 1 :b 9 item 1 :a'))

	def test_stored_lists_are_copies(self):
		self.assertEqual(["b"], self.value('make "l [b] make "a array 1 setitem 1 :a :l .setfirst :l "z item 1 :a'))

	def test_circular_arrays_are_refused(self):
		self.assertFaults([
			('make "a array 1 setitem 1 :a :a', "SETITEM: Can't create circular array"),
			('make "a array 1 setitem 1 :a (list :a)', "SETITEM: Can't create circular array"),
			('make "m mdarray [2 2] mdsetitem [1 1] :m :m', "MDSETITEM: Can't create circular array"),
		])

	def test_dot_mutators(self):
		self.assertEqual(["z", "b"], self.value('make "l [a b] .setfirst :l "z :l'))
		self.assertEqual(["a", "x", "y"], self.value('make "l [a b] .setbf :l [x y] :l'))
		self.assertEqual("q", self.value('make "a array 2 .setitem 2 :a "q item 2 :a'))

	def test_stacks_and_queues(self):
		self.assertValues([
			('make "s [] push "s 1 push "s 2 pop "s', 2),
			(':s', [1]),
			('make "q [] repeat 5 [queue "q repcount] :q', [1, 2, 3, 4, 5]),
			('make "q "0 repeat 5 [queue "q repcount] :q', "012345"),
			('make "q [a b c] (list dequeue "q dequeue "q dequeue "q)', ["c", "b", "a"]),
			('make "q "abc dequeue "q :q', "ab"),
			('make "s [] repeat 5 [push "s repcount] :s', [5, 4, 3, 2, 1]),
		])
		self.assertEqual("POP: Expected non-empty list", str(self.fault('make "s [] pop "s')))

class PredicateTests(LogoTestCase):
	def test_predicates(self):
		self.assertValues([
			('wordp "a', 1),
			('wordp [a]', 0),
			('listp [a]', 1),
			('arrayp {a}', 1),
			('numberp "12', 1),
			('numberp "1a', 0),
			('equalp [a [1]] [a [1]]', 1),
			('notequalp "a "b', 1),
			('emptyp []', 1),
			('emptyp "', 1),
			('emptyp {}', 0),
			('beforep "a "b', 1),
			('memberp "b [a b]', 1),
			('memberp "z "abc', 0),
			('memberp "bc "abc', 0),
			('substringp "bc "abcd', 1),
			('substringp [a] "abcd', 0),
			('.eq [a] [a]', 0),
			('make "l [a] .eq :l :l', 1),
			('make "v {a} .eq :v :v', 1),
		])

	def test_member(self):
		self.assertValues([
			('member "c "abcd', "cd"),
			('member "c [a b c d]', ["c", "d"]),
			('member "z [a b]', []),
		])

class QueryTests(LogoTestCase):
	def test_queries(self):
		self.assertValues([
			('count "hello', 5),
			('count [a [b c]]', 2),
			('count {a b c}', 3),
			('ascii "A', 65),
			('char 97', "a"),
			('lowercase "ABC', "abc"),
			('uppercase "abc', "ABC"),
			('standout "Ab1', "\U0001D400\U0001D41B\U0001D7CF"),
			('parse "1\\ \\[2\\ 3\\]', ["1", ["2", "3"]]),
			('runparse "1+2', ["1", "+", "2"]),
			('run runparse "1+2', 3),
		])
		self.assertFaults([
			('ascii "', "Expected string"),
			('char 99999999', "CHAR: Bad input 99999999"),
			('char -1', "CHAR: Bad input -1"),
		])

if __name__ == '__main__':
	unittest.main()
