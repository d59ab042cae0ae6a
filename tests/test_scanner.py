import unittest
from tagparse.scanning.engine import Scanner
from tagparse.scanning.interface import Kind, END_OF_INPUT
from tagparse.parsing.interface import ScanError

def kinds_and_texts(text):
	yy = Scanner(text)
	result = []
	while True:
		token = yy.scan()
		if token.kind is Kind.EOF: return result
		result.append((token.kind, token.text))

class TestTokens(unittest.TestCase):
	def test_00_smoke_test(self):
		self.assertEqual([], kinds_and_texts(''))
		self.assertEqual([], kinds_and_texts(' \t\n '))
		self.assertEqual([(Kind.IDENT, 'a')], kinds_and_texts('a'))
	
	def test_01_each_kind(self):
		self.assertEqual(
			[
				(Kind.IDENT, 'abc'),
				(Kind.INT, '12'),
				(Kind.FLOAT, '3.5'),
				(Kind.FLOAT, '.5'),
				(Kind.FLOAT, '7.'),
				(Kind.STRING, r"'x\ty'"),
				(Kind.CHAR, ','),
				(Kind.CHAR, '('),
				(Kind.IDENT, '_under_score9'),
			],
			kinds_and_texts(r"abc 12 3.5 .5 7. 'x\ty' ,( _under_score9"),
		)
	
	def test_02_string_semantic(self):
		token = Scanner(r"'x\ty\'z'").scan()
		self.assertEqual(Kind.STRING, token.kind)
		self.assertEqual("x\ty'z", token.semantic)
	
	def test_03_double_quote_is_just_punctuation(self):
		self.assertEqual([(Kind.CHAR, '"'), (Kind.IDENT, 'x'), (Kind.CHAR, '"')], kinds_and_texts('"x"'))
	
	def test_04_minus_is_separate(self):
		self.assertEqual([(Kind.CHAR, '-'), (Kind.INT, '56')], kinds_and_texts('-56'))
	
	def test_05_unicode_identifier(self):
		self.assertEqual([(Kind.IDENT, 'größe')], kinds_and_texts('größe'))
		self.assertEqual([(Kind.IDENT, 'a'), (Kind.CHAR, '½'), (Kind.IDENT, 'x_9')], kinds_and_texts('a½ x_9'))
		self.assertEqual([(Kind.IDENT, 'x'), (Kind.CHAR, '²')], kinds_and_texts('x²'))
	
	def test_06_malformed_numbers(self):
		for text in ['0x1F', '1.2.3', '12abc', '3.5e10']:
			with self.subTest(text=text):
				with self.assertRaises(ScanError) as cm:
					Scanner(text).scan()
				self.assertIn('malformed number literal', cm.exception.message)


class TestRawAccess(unittest.TestCase):
	def test_peek_and_next(self):
		yy = Scanner('ab')
		self.assertEqual('a', yy.peek())
		self.assertEqual('a', yy.peek())
		self.assertEqual('a', yy.next())
		self.assertEqual('b', yy.next())
		self.assertEqual(END_OF_INPUT, yy.next())
		self.assertEqual(END_OF_INPUT, yy.peek())
	
	def test_peek_after_token_sees_the_raw_character(self):
		yy = Scanner('name(x')
		self.assertEqual('name', yy.scan().text)
		self.assertEqual('(', yy.peek())
	
	def test_positions(self):
		yy = Scanner('a\n  bc')
		first, second = yy.scan(), yy.scan()
		self.assertEqual((0, 1, 1), tuple(first.position))
		self.assertEqual((4, 2, 3), tuple(second.position))
		self.assertEqual((6, 2, 5), tuple(yy.position()))


class TestQuotedStrings(unittest.TestCase):
	def test_every_escape(self):
		yy = Scanner(r'''\a\b\f\n\r\t\v\\\"\'' trailing''')
		self.assertEqual('\a\b\f\n\r\t\v\\"\'', yy.read_quoted())
		self.assertEqual(' ', yy.peek())
	
	def test_unterminated(self):
		for text in ["'abc", "'abc\ndef'", "'abc\rdef'", "'abc\\"]:
			with self.subTest(text=text):
				with self.assertRaises(ScanError) as cm:
					Scanner(text).scan()
				self.assertEqual('unterminated string', cm.exception.message)
	
	def test_invalid_escape(self):
		with self.assertRaises(ScanError) as cm:
			Scanner(r"'ab\qc'", 'T.f').scan()
		self.assertEqual(r'invalid escape sequence: \q', cm.exception.message)
		self.assertEqual('T.f', cm.exception.source)
		self.assertEqual((1, 5), (cm.exception.line, cm.exception.column))


if __name__ == '__main__':
	unittest.main()
