"""
The top of the grammar: a tag string is a comma-separated list of definitions.

	tag        := definition (',' definition)*
	definition := ident ['=' value | '(' args ')']
	args       := pair (',' pair)*
	pair       := ident '=' value

After an identifier, one character of lookahead decides which form of definition
is in play. The lookahead is raw: it does not consume a token, because the value
or argument-list parser wants to start from a clean position.
"""
import warnings

from ..scanning.engine import Scanner
from ..scanning.interface import Kind, END_OF_INPUT
from .interface import Definition, GrammarError, make_definition
from .values import ValueParser, COMMA, describe

EQUALS, OPEN_ARGS, CLOSE_ARGS = '=', '(', ')'

class TagParser(ValueParser):
	"""
	One of these per tag string. Not reusable, and not to be shared between threads.
	
	With `strict=False` (the default) an identifier followed by something other than
	`=`, `(`, `,` or the end is taken to be a bare name with no attributes, and a
	warning is issued. With `strict=True` that is a GrammarError instead.
	"""
	
	def __init__(self, text:str, source:str='', *, strict=False):
		super().__init__(Scanner(text, source))
		self.strict = strict
	
	def parse(self) -> list[Definition]:
		yy = self.scanner
		result = []
		while True:
			token = yy.scan()
			if token.kind is Kind.EOF: return result
			elif token.kind is Kind.IDENT: result.append(self.parse_definition(token.text))
			elif token.is_char(COMMA): pass
			else: self.fail("invalid token: %s"%token.text, token.position)
	
	def parse_definition(self, name:str) -> Definition:
		yy = self.scanner
		yy.skip_blanks()
		c = yy.peek()
		if c == EQUALS:
			yy.next()
			return make_definition(name, {name: self.parse_value()})
		if c == OPEN_ARGS:
			yy.next()
			return make_definition(name, self.parse_arguments())
		if c not in (END_OF_INPUT, COMMA):
			self.unexpected_after_name(name, c)
		return make_definition(name)
	
	def unexpected_after_name(self, name:str, c:str):
		message = "%s expected after %r but got %s"%(" or ".join(map(repr, "=(,")), name, describe(c))
		if self.strict: self.fail(message)
		warnings.warn(str(self.scanner.error(GrammarError, message)))
	
	def parse_arguments(self) -> dict:
		""" The opening parenthesis is already consumed. Duplicate names: the last one wins. """
		yy = self.scanner
		arguments = {}
		while True:
			token = yy.scan()
			if token.kind is not Kind.IDENT:
				self.fail("invalid attribute name: %s"%(token.text or 'end of input'), token.position)
			yy.skip_blanks()
			where = yy.position()
			c = yy.next()
			if c != EQUALS: self.fail("'=' expected but got %s"%describe(c), where)
			arguments[token.text] = self.parse_value()
			yy.skip_blanks()
			where = yy.position()
			c = yy.next()
			if c == CLOSE_ARGS: return arguments
			if c != COMMA: self.fail("')' or ',' expected but got %s"%describe(c), where)


def parse_tag(tag_value:str, source:str='', *, strict=False) -> list[Definition]:
	"""
	Parse one tag string into its definitions, in order of appearance.
	`source` is whatever label you'd like to see in error messages, e.g. "User.name".
	Raises a ParseError (of some subclass) at the first problem.
	"""
	return TagParser(tag_value, source, strict=strict).parse()
