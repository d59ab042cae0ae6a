"""
The hand-written scanner for tag syntax.

There is no automaton here: the lexical grammar is small enough that a few
character-class predicates do the job. What matters is that every advance goes
through `next()`, so the line and column are always right when it comes time
to complain about something.

The parser needs two views of the text. Most of the time it wants whole tokens
(`scan`), but at a few decision points it must inspect or consume a single raw
character (`peek`, `next`) without committing to a token. Quoted strings are
also read raw, since their contents follow different rules than the space between
tokens.
"""
import re

from .interface import (
	END_OF_INPUT, QUOTE, BACKSLASH, NEWLINE, LINE_BREAKS, ESCAPE,
	Kind, Position, Token, is_ident_start, is_ident_part, is_digit,
)
from ..parsing.interface import ScanError

INTEGER = re.compile(r'[0-9]+')
FLOAT = re.compile(r'[0-9]+\.[0-9]*|\.[0-9]+')

class Scanner:
	"""
	One scanner per parse. `source` is an opaque label which only ever shows up in error messages.
	"""
	
	def __init__(self, text:str, source:str=''):
		self.text = text
		self.source = source
		self.__size = len(text)
		self.__offset = 0
		self.__line = 1
		self.__column = 1
	
	def position(self) -> Position:
		return Position(self.__offset, self.__line, self.__column)
	
	def peek(self) -> str:
		""" The next raw character, or END_OF_INPUT. Does not advance. """
		if self.__offset < self.__size: return self.text[self.__offset]
		return END_OF_INPUT
	
	def next(self) -> str:
		""" Consume and return the next raw character, or END_OF_INPUT (without advancing) at the end. """
		c = self.peek()
		if c == END_OF_INPUT: return c
		self.__offset += 1
		if c == NEWLINE:
			self.__line += 1
			self.__column = 1
		else:
			self.__column += 1
		return c
	
	def skip_blanks(self):
		while self.peek().isspace(): self.next()
	
	def error(self, exception_class, message, position:Position=None):
		""" Build (but do not raise) an exception located at the given position, or the current one. """
		where = position or self.position()
		return exception_class(message, self.source, where.line, where.column, where.offset)
	
	def scan(self) -> Token:
		"""
		Skip whitespace, then recognize exactly one token.
		At the end of the text, this answers a Kind.EOF token, as often as you like.
		"""
		self.skip_blanks()
		start = self.position()
		c = self.peek()
		if c == END_OF_INPUT:
			return Token(Kind.EOF, '', start)
		if is_ident_start(c):
			while is_ident_part(self.peek()): self.next()
			return Token(Kind.IDENT, self.__since(start), start)
		if is_digit(c) or (c == '.' and self.__digit_follows()):
			return self.__scan_number(start)
		if c == QUOTE:
			self.next()
			semantic = self.read_quoted()
			return Token(Kind.STRING, self.__since(start), start, semantic)
		self.next()
		return Token(Kind.CHAR, c, start)
	
	def read_quoted(self) -> str:
		"""
		The opening quote is already consumed. Read up to and including the closing quote,
		and return the characters in between with escape sequences worked out.
		"""
		pieces = []
		while True:
			where = self.position()
			c = self.next()
			if c == QUOTE: return ''.join(pieces)
			if c == END_OF_INPUT or c in LINE_BREAKS:
				raise self.error(ScanError, "unterminated string", where)
			if c == BACKSLASH:
				where = self.position()
				c = self.next()
				if c == END_OF_INPUT or c in LINE_BREAKS:
					raise self.error(ScanError, "unterminated string", where)
				try: pieces.append(ESCAPE[c])
				except KeyError: raise self.error(ScanError, "invalid escape sequence: \\%s"%c, where) from None
			else:
				pieces.append(c)
	
	def __since(self, start:Position) -> str:
		return self.text[start.offset:self.__offset]
	
	def __digit_follows(self) -> bool:
		return is_digit(self.text[self.__offset+1:self.__offset+2])
	
	def __scan_number(self, start:Position) -> Token:
		# Take the whole run of word-ish characters so that "0x1F" or "12abc" is one bad lexeme, not two good ones.
		while is_ident_part(self.peek()) or self.peek() == '.': self.next()
		text = self.__since(start)
		if INTEGER.fullmatch(text): return Token(Kind.INT, text, start)
		if FLOAT.fullmatch(text): return Token(Kind.FLOAT, text, start)
		raise self.error(ScanError, "malformed number literal: %s"%text, start)
