"""
This module is all about easing over the process to display where things go wrong.

A parse error knows its line and column. That's enough to point a finger, but people
would much rather see the offending line with the trouble-spot underlined. If you're
dealing with a text console (as most users of tag strings are) then the `illustration`
function helps: Given a single line of text and a few parameters, it makes a suitable
picture. The SourceText wraps a tag string and knows how to slice out a given line.

Line breaks are a funny thing. The scanner counts only \n as starting a new line,
because a tag string that contains a bare \r is almost certainly broken anyway.
The SourceText must agree with the scanner, so it breaks lines the same way.
"""

import re

LINE_BREAK = re.compile(r"\n")

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. `start` is a zero-based column. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

class SourceText:
	""" Wrapper for a tag string: participates in half-respectable error-display with context. """
	def __init__(self, content:str, filename:str=None):
		self.content = content
		self.filename = filename
		self.__bounds = None
	
	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINE_BREAK.finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]
	
	def line_of_text(self, row:int) -> str:
		""" Row counts from one. Past the end, you get the last line. """
		self.__make_bounds()
		r = min(max(0, row - 1), len(self.__bounds) - 2)
		return self.content[self.__bounds[r]:self.__bounds[r + 1]].rstrip('\r\n')
	
	def _format_message(self, row, col, message):
		prefix = "At" if self.filename is None else str(self.filename)+":"
		return "%s line %d, column %d: %s" % (prefix, row, col, message)
	
	def complaint(self, row:int, col:int, message:str, width:int=1) -> str:
		reference = self._format_message(row, col, message)
		illustrated = illustration(self.line_of_text(row), col - 1, width, prefix=' >>> ')
		return "%s\n%s"%(reference, illustrated)
