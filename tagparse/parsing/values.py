"""
Values: the literal sub-language that appears after an `=`.

A value is an integer, a float, a string, or an array of values. Identifiers in
value position are just strings without the quotes. Numbers may carry a leading
minus sign but never a plus. Arrays nest; named-argument groups do not.
"""
import math

from ..scanning.engine import Scanner
from ..scanning.interface import Kind, Token, QUOTE
from .interface import Value, GrammarError, NumericRangeError, INT64_MIN, INT64_MAX

OPEN_ARRAY, CLOSE_ARRAY, COMMA, MINUS = '[', ']', ',', '-'

class ValueParser:
	"""
	Reads one value at a time.
	Subclasses supply the larger structure; this just knows how to read a value
	from wherever the scanner happens to be.
	"""
	
	def __init__(self, scanner:Scanner):
		self.scanner = scanner
	
	def fail(self, message, position=None, exception_class=GrammarError):
		raise self.scanner.error(exception_class, message, position)
	
	def parse_value(self) -> Value:
		yy = self.scanner
		yy.skip_blanks()
		if yy.peek() == OPEN_ARRAY:
			yy.next()
			return self.parse_array()
		return self.parse_scalar()
	
	def parse_scalar(self) -> Value:
		""" Anything but an array. """
		yy = self.scanner
		yy.skip_blanks()
		if yy.peek() == QUOTE:
			yy.next()
			return yy.read_quoted()
		token = yy.scan()
		if token.kind is Kind.IDENT: return token.text
		if token.is_char(MINUS):
			number = yy.scan()
			if number.kind not in (Kind.INT, Kind.FLOAT):
				self.fail("invalid value: '-%s' (a minus sign must precede a number)"%number.text, number.position)
			return -self.convert_number(number)
		if token.kind in (Kind.INT, Kind.FLOAT): return self.convert_number(token)
		self.fail("invalid value: '%s'"%token.text, token.position)
	
	def convert_number(self, token:Token):
		"""
		The range check applies to the literal as written, before any sign.
		Thus -9223372036854775808 is out of range even though its negation would fit.
		"""
		if token.kind is Kind.INT:
			value = int(token.text, 10)
			if not INT64_MIN <= value <= INT64_MAX:
				self.fail("integer literal out of range: %s"%token.text, token.position, NumericRangeError)
			return value
		value = float(token.text)
		if math.isinf(value):
			self.fail("float literal out of range: %s"%token.text, token.position, NumericRangeError)
		return value
	
	def parse_array(self) -> tuple:
		"""
		The opening bracket is already consumed.
		Open arrays live on an explicit stack, so nesting depth is limited by memory rather than by Python's stack.
		"""
		yy = self.scanner
		stack = [[]]
		just_opened = True
		while True:
			yy.skip_blanks()
			c = yy.peek()
			if c == OPEN_ARRAY:
				yy.next()
				stack.append([])
				just_opened = True
				continue
			if just_opened and c == CLOSE_ARRAY:
				yy.next()
				stack.pop()
				value = ()
				if not stack: return value
			else:
				value = self.parse_scalar()
			# Each closing bracket finishes the innermost open array, which becomes an element of the next one out.
			while True:
				stack[-1].append(value)
				yy.skip_blanks()
				where = yy.position()
				c = yy.next()
				if c == COMMA: break
				if c != CLOSE_ARRAY: self.fail("',' or ']' expected but got %s"%describe(c), where)
				value = tuple(stack.pop())
				if not stack: return value
			just_opened = False

def describe(c:str) -> str:
	""" Name a raw character for an error message. """
	return repr(c) if c else 'end of input'
