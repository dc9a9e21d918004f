import unittest
from logo import diagnostics as D
from logo.adapters.for_test_purposes import LogoTestCase, session

class RunningTests(LogoTestCase):
	def test_run(self):
		self.assertValues([
			("run [1]", 1),
			('runresult [make "x 1]', []),
			("runresult [1+2]", [3]),
		])
		self.assertEqual("No output from procedure", str(self.fault("show run []")))

	def test_repeat_and_repcount(self):
		self.assertValues([
			('make "s [] repeat 3 [make "s lput repcount :s] :s', [1, 2, 3]),
			('make "s [] repeat 2 [make "s lput # :s] :s', [1, 2]),
			('make "s [] repeat 2 [repeat 2 [make "s lput repcount :s] make "s lput repcount :s] :s', [1, 2, 1, 1, 2, 2]),
			("repcount", -1),
		])

	def test_forever(self):
		self.assertEqual(234, self.value('to foo forever [if repcount = 5 [make "c 234 stop]] end foo :c'))
		self.assertIsNone(self.value("forever [if repcount = 5 [bye]]"))

class ConditionalTests(LogoTestCase):
	def test_if(self):
		self.assertValues([
			('make "r "a if 0 [make "r "b] :r', "a"),
			('if 1 ["a]', "a"),
			('if [1<2] ["a]', "a"),
			('(if 0 ["a] ["b])', "b"),
			('(if [1>2] [make "r "a] [make "r "b]) :r', "b"),
			('ifelse 1 ["a] ["b]', "a"),
			('ifelse [1>2] ["a] ["b]', "b"),
			('to foo if 1 [output "a] output "b end foo', "a"),
		])
		self.assertEqual("No output from procedure", str(self.fault('show if 0 ["a]')))

	def test_test(self):
		self.assertValues([
			('make "c 1 test 2 > 1 iftrue [make "c 2] :c', 2),
			('make "c 1 test 2 > 1 iff [make "c 2] :c', 1),
			('test 1 > 2 iffalse ["a]', "a"),
		])
		self.assertFaults([
			('to x iftrue ["a] end x', "IFTRUE: Called without TEST"),
			('to y iffalse ["b] end y', "IFFALSE: Called without TEST"),
		])

	def test_test_belongs_to_its_procedure(self):
		self.value('to t1 test 1 output t2 end')
		self.value('to t2 iftrue [output 1] output 2 end')
		self.assertEqual("IFTRUE: Called without TEST", str(self.fault("t1")))

	def test_case_and_cond(self):
		self.value('to vowelp :letter output case :letter [[[a e i o u] "true] [else "false]] end')
		self.assertEqual(["true", "false"], self.value('(list vowelp "a vowelp "b)'))
		self.value('to evenp :n output not bitand :n 1 end')
		self.value(
			'to evens :numbers op cond [ [[emptyp :numbers] []] '
			'[[evenp first :numbers] fput first :numbers evens butfirst :numbers] '
			'[else evens butfirst :numbers] ] end'
		)
		self.assertEqual(["2", "4", "6"], self.value("evens [1 2 3 4 5 6]"))
		self.assertValues([
			('cond [[[2<3] "yep] [else "nope]]', "yep"),
			('cond [[[2>3] "yep] [else "nope]]', "nope"),
			('case 2 [[[1] "a]]', None),
		])

	def test_case_else_alias(self):
		aliased = session(keyword_alias=lambda word: {"ALIE": "ELSE"}.get(word))
		self.assertEqual("b", aliased.run('case 2 [[[1] "a] [alie "b]]', return_result=True))
		self.assertIsNone(self.value('case 2 [[[1] "a] [alie "b]]'))

class ExitTests(LogoTestCase):
	def test_catch_and_throw(self):
		self.assertEqual("a\nb\n", self.output('catch "x [show "a throw "x show "b] show "b'))
		self.assertEqual("z", self.value('catch "x [show "a (throw "x "z) show "b]'))
		self.assertFaults([
			('catch "x [throw "q]', "No CATCH for tag Q"),
			('throw "q', "No CATCH for tag Q"),
		])
		self.assertEqual(21, self.fault('throw "q').code)
		self.assertEqual(35, self.fault('(throw "q 1)').code)

	def test_throw_takes_one_input_unless_parenthesized(self):
		self.assertIsNone(self.value('catch "tag [throw "tag 5]'))
		self.assertEqual(5, self.value('catch "tag [(throw "tag 5)]'))

	def test_error(self):
		self.assertValues([
			('catch "x [throw "x] error', [21, "No CATCH for tag X", "THROW", -1]),
			("error", []),
			('catch "x [(throw "x "z)] error', [35, "No CATCH for tag X", "THROW", -1]),
		])

	def test_catch_leaves_faults_alone(self):
		self.assertEqual("Division by zero", str(self.fault('catch "error [show 1 / 0]')))

	def test_bye(self):
		self.assertEqual("1\n", self.output("print 1 bye print 2"))

	def test_maybeoutput_and_ignore(self):
		self.assertValues([
			("to foo .maybeoutput 5 end foo", 5),
			('to bar .maybeoutput make "c 0 end bar', None),
			("ignore 1 > 2", None),
		])

	def test_wait(self):
		self.assertIsNone(self.value("wait 1"))

	def test_quasiquote(self):
		self.assertValues([
			("`[foo baz ,[bf [a b c]] garply ,@[bf [a b c]]]", ["foo", "baz", ["b", "c"], "garply", "b", "c"]),
			('make "n "x `[",:n]', ['"x']),
			('make "n "x `[:,:n]', [":x"]),
			("`[a [b ,[sum 1 2]]]", ["a", ["b", 3]]),
		])

class LoopTests(LogoTestCase):
	def test_for(self):
		self.assertValues([
			('make "x 0 for [r 1 5] [make "x :x + :r] :x', 15),
			('make "x 0 for [r 0 10 2] [make "x :x + :r] :x', 30),
			('make "x 0 for [r 10 0 -2] [make "x :x + :r] :x', 30),
			('make "x 0 for [r 10 0 -2-2] [make "x :x + :r] :x', 18),
			('make "x 0 for [r 10 10] [make "x :x + :r] :x', 10),
			('make "x 0 for [r 10 10 -1] [make "x :x + :r] :x', 10),
			('make "x 0 for [r 10 20 -1] [make "x :x + :r] :x', 0),
			('make "x 0 for [r 20 10 1] [make "x :x + :r] :x', 0),
			('make "x 0 repeat 3 [for [i 1 4] [make "x :x + 1]] :x', 12),
		])

	def test_for_evaluates_its_limits_first(self):
		self.assertEqual(1050, self.value('make "i 5 make "x 0 for [i 0 100 :i] [make "x :x + :i] :x'))
		self.assertEqual("Don't know about variable I", str(self.fault('ern "i for [i 0 100 :i+1] []')))

	def test_dotimes(self):
		self.assertValues([
			('make "x 0 dotimes [i 5] [make "x :x + :i] :x', 15),
			('make "x 0 dotimes [i 0] [make "x :x + :i] :x', 0),
		])

	def test_conditional_loops(self):
		self.assertValues([
			('make "x 0 do.while [make "x :x + 1] :x < 10 :x', 10),
			('make "x 0 do.while [make "x :x + 1] [:x < 10] :x', 10),
			('make "x 0 while :x < 10 [make "x :x + 1] :x', 10),
			('make "x 0 while [:x < 10] [make "x :x + 1] :x', 10),
			('make "x 0 do.until [make "x :x + 1] :x > 10 :x', 11),
			('make "x 0 do.until [make "x :x + 1] [:x > 10] :x', 11),
			('make "x 0 until :x > 10 [make "x :x + 1] :x', 11),
			('make "x 0 until [:x > 10] [make "x :x + 1] :x', 11),
			('make "x 5 while :x < 3 [make "x 0] :x', 5),
			('make "x 5 do.while [make "x :x + 1] :x < 3 :x', 6),
		])
		self.assertEqual("DO.WHILE: Expected block", str(self.fault("do.while 1 2")))

class TemplateTests(LogoTestCase):
	def test_apply_and_invoke(self):
		self.assertValues([
			('apply "word ["a "b "c]', '"a"b"c'),
			('apply "sum [1 2]', 3),
			('invoke "word "a', "a"),
			('(invoke "word "a "b "c)', "abc"),
			('(invoke "word)', ""),
		])

	def test_foreach(self):
		self.assertEqual(15, self.value('make "x 0 to addx :a make "x :x+:a end foreach "addx [1 2 3 4 5] :x'))

	def test_map_filter_find_reduce(self):
		self.assertValues([
			('to double :x output :x * 2 end map "double [1 2 3]', [2, 4, 6]),
			('(map "sum [1 2 3] [40 50 60] [700 800 900])', [741, 852, 963]),
			('(map "item [2 1 2 3] [john paul george ringo])', ["o", "p", "e", "n"]),
			('map "uppercase "abc', ["A", "B", "C"]),
			('to odd :x output :x % 2 end filter "odd [1 2 3]', ["1", "3"]),
			('find "numberp (list "a "b "c 4 "e "f)', 4),
			('find "numberp (list "a "b "c "d "e "f)', []),
			('reduce "sum [1 2 3 4]', 10),
			('(reduce "sum [1 2 3 4] 10)', 20),
			('reduce "word [a b c]', "abc"),
		])

	def test_crossmap(self):
		self.assertValues([
			('(crossmap "word [a b c] [1 2 3 4])', ["a1", "a2", "a3", "a4", "b1", "b2", "b3", "b4", "c1", "c2", "c3", "c4"]),
			('(crossmap "word [a b] [1 2])', ["a1", "a2", "b1", "b2"]),
			('crossmap "word [[a b] [1 2]]', ["a1", "a2", "b1", "b2"]),
		])

	def test_template_faults(self):
		self.assertFaults([
			('(map "show {})', "MAP: Expected list"),
			('(map "sum [1 2] [1])', "MAP: Expected lists of equal length"),
			('map "while [1]', "Can't apply MAP to special WHILE"),
			('map "nosuch [1]', "MAP: Don't know how to NOSUCH"),
			('reduce "sum []', "REDUCE: Expected non-empty list"),
			('apply "sum 1', "APPLY: Expected list"),
		])
		self.assertIs(D.TOO_MANY_INPUTS, self.fault('apply "first [a b]').complaint)

if __name__ == '__main__':
	unittest.main()
