import unittest
from tagparse.support import failureprone
from tagparse.parsing.definitions import parse_tag
from tagparse.parsing.interface import ParseError

class TestSourceText(unittest.TestCase):
	def test_line_of_text(self):
		text = failureprone.SourceText("ab\ncd")
		self.assertEqual('cd', text.line_of_text(2))
		self.assertEqual('ab', text.line_of_text(1))
	
	def test_complaint(self):
		text = failureprone.SourceText("abc=1,\n  x=%")
		expect = "\n".join([
			"At line 2, column 5: invalid value",
			" >>>   x=%",
			"         ^ near here",
		])
		self.assertEqual(expect, text.complaint(2, 5, "invalid value"))
	
	def test_illustration(self):
		self.assertEqual("abc\n ^^ here", failureprone.illustration("abc", 1, 2, caption="here"))


class TestParseErrorComplaint(unittest.TestCase):
	def test_complaint_names_the_source(self):
		tag = "required,length(min=1 max=10)"
		with self.assertRaises(ParseError) as cm:
			parse_tag(tag, 'User.name')
		lines = cm.exception.complaint(tag).splitlines()
		self.assertEqual("User.name: line 1, column 23: ')' or ',' expected but got 'm'", lines[0])
		self.assertEqual(" >>> " + tag, lines[1])
		self.assertEqual(" "*27 + "^ near here", lines[2])
	
	def test_error_at_end_of_text(self):
		with self.assertRaises(ParseError) as cm:
			parse_tag("a='abc")
		self.assertEqual("At line 1, column 7: unterminated string", cm.exception.complaint("a='abc").splitlines()[0])


if __name__ == '__main__':
	unittest.main()
