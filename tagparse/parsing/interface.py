"""
Parsing Interface Definitions: what comes out of a parse, and what gets raised instead.
"""
from types import MappingProxyType
from typing import NamedTuple, Mapping, Union

from ..support import failureprone

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

# Arrays come back as tuples, so a parsed value is immutable all the way down.
Value = Union[int, float, str, tuple]

class Definition(NamedTuple):
	"""
	One clause of a tag string.
	For `max=10` the name is "max" and the attributes are {"max": 10}.
	For `required` the attributes are empty.
	For `length(min=1, max=10)` the attributes are exactly the listed pairs.
	"""
	name: str
	attributes: Mapping[str, Value]
	
	def attribute(self, key:str, default=None):
		return self.attributes.get(key, default)
	
	def __repr__(self):
		return "Definition(%r, %r)"%(self.name, dict(self.attributes))

def make_definition(name:str, attributes:dict=None) -> Definition:
	""" The parser hands over its dictionary; callers get a read-only view. """
	return Definition(name, MappingProxyType(dict(attributes or {})))


class LanguageError(ValueError):
	""" Base class of all exceptions arising from reading tag syntax. """

class ParseError(LanguageError):
	"""
	Something in a tag string could not be understood. Parsing stops at the first one.
	
	message: what went wrong, in plain language.
	source: the caller's label for where the tag came from, e.g. "User.name". Not interpreted.
	line, column: where it went wrong, counting from one.
	offset: the same place as a zero-based index into the tag string.
	"""
	def __init__(self, message:str, source:str='', line:int=1, column:int=1, offset:int=0):
		super().__init__(message, source, line, column)
		self.message, self.source = message, source
		self.line, self.column, self.offset = line, column, offset
	
	def __str__(self):
		return "%s (%d:%d [%s])"%(self.message, self.line, self.column, self.source)
	
	def complaint(self, text:str) -> str:
		""" A multi-line report with the offending line of `text` and a caret under the trouble. """
		return failureprone.SourceText(text, filename=self.source or None).complaint(self.line, self.column, self.message)

class ScanError(ParseError):
	""" Lexical trouble: unterminated strings, bad escapes, mangled numbers. """

class GrammarError(ParseError):
	""" Syntactic trouble: a perfectly good token in a place it doesn't belong. """

class NumericRangeError(ParseError):
	""" A numeric literal that does not fit in a 64-bit integer or float. """
