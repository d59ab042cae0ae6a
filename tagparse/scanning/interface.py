"""
Scanning Interface Definitions.
"""
from enum import Enum
from typing import NamedTuple

END_OF_INPUT = '' # What `peek()` and `next()` report once the text runs out.

QUOTE = "'" # The only string delimiter in tag syntax. Double-quotes are ordinary punctuation.
BACKSLASH = '\\'
NEWLINE = '\n'
LINE_BREAKS = {'\n', '\r'}

ESCAPE = {
	'a': '\a', 'b': '\b', 'f': '\f', 'n': '\n', 'r': '\r', 't': '\t', 'v': '\v',
	'\\': '\\', '"': '"', "'": "'",
}

class Kind(Enum):
	IDENT = "identifier"
	INT = "integer literal"
	FLOAT = "float literal"
	STRING = "string literal"
	CHAR = "punctuation"
	EOF = "end of input"

class Position(NamedTuple):
	""" Offset is zero-based; line and column count from one, as people do. """
	offset: int = 0
	line: int = 1
	column: int = 1

class Token(NamedTuple):
	"""
	A classified lexeme. `text` is exactly what appeared in the source, so a string
	literal's text still has its quotes and backslashes. The semantic value of a
	string token is in `semantic`; for every other kind it's None.
	"""
	kind: Kind
	text: str
	position: Position
	semantic: object = None
	
	def is_char(self, c:str) -> bool:
		return self.kind is Kind.CHAR and self.text == c

def is_ident_start(c:str) -> bool: return c.isidentifier()
def is_ident_part(c:str) -> bool: return c != '' and ('_'+c).isidentifier() # Python's own notion of an identifier continuation.
def is_digit(c:str) -> bool: return c in DIGITS and c != ''

DIGITS = '0123456789'
