""" Bits and bobs in support of showing definitions to people, and writing them back out as tags. """
import math
from decimal import Decimal

from ..scanning.interface import ESCAPE, QUOTE, is_ident_start, is_ident_part
from ..parsing.interface import INT64_MAX

# Double-quotes have an escape, but they don't need one inside single-quotes.
REVERSE_ESCAPE = {c: '\\'+letter for letter, c in ESCAPE.items() if c != '"'}

def is_name(text) -> bool:
	return isinstance(text, str) and text != '' and is_ident_start(text[0]) and all(map(is_ident_part, text))

def render_string(text:str) -> str:
	return QUOTE + ''.join(REVERSE_ESCAPE.get(c, c) for c in text) + QUOTE

def render_float(x:float) -> str:
	""" Always with a decimal point, never with an exponent, because tag syntax has no exponents. """
	if not math.isfinite(x): raise ValueError("Tag syntax has no way to write %r"%x)
	text = repr(x)
	if 'e' in text: text = format(Decimal(text), 'f')
	if '.' not in text: text += '.0'
	return text

def render_value(value) -> str:
	if isinstance(value, bool): raise ValueError("Tag syntax has no booleans: %r"%value)
	if isinstance(value, int):
		# The literal is range-checked before its sign is applied, so -2**63 cannot be written.
		if abs(value) > INT64_MAX: raise ValueError("Integer out of range: %d"%value)
		return str(value)
	if isinstance(value, float): return render_float(value)
	if isinstance(value, str): return render_string(value)
	if isinstance(value, (tuple, list)): return '[' + ', '.join(map(render_value, value)) + ']'
	raise ValueError("Not a tag value: %r"%(value,))

def render_definition(definition) -> str:
	name, attributes = definition
	if not is_name(name): raise ValueError("Not a valid definition name: %r"%(name,))
	if not attributes: return name
	if len(attributes) == 1 and name in attributes:
		return name + '=' + render_value(attributes[name])
	pairs = []
	for key, value in attributes.items():
		if not is_name(key): raise ValueError("Not a valid attribute name: %r"%(key,))
		pairs.append(key + '=' + render_value(value))
	return name + '(' + ', '.join(pairs) + ')'

def render(definitions) -> str:
	""" The canonical tag string for a sequence of definitions. Parsing it gives them back. """
	return ','.join(map(render_definition, definitions))

def definition_grid(definitions) -> list[list[str]]:
	""" One row per attribute (or per bare definition), with a header row. """
	grid = [['definition', 'attribute', 'value', 'type']]
	for definition in definitions:
		if not definition.attributes: grid.append([definition.name, '', '', ''])
		for key, value in definition.attributes.items():
			grid.append([definition.name, key, render_value(value), type(value).__name__])
	return grid

def print_grid(grid):
	lens = list(map(len, grid))
	assert len(set(lens)) == 1, lens
	grid = [[str(cell) for cell in row] for row in grid]
	width = [max(map(len, column)) for column in zip(*grid)]
	horizontal = '\u2500'
	vertical = ' \u2502 '
	upper = horizontal + '\u252c' + horizontal
	inner = horizontal + '\u253c' + horizontal
	lower = horizontal + '\u2534' + horizontal
	segments = [horizontal*w for w in width]
	print(upper.join(segments))
	for r, row in enumerate(grid):
		if r == 1: print(inner.join(segments))
		print(vertical.join(s.ljust(w,' ') for s,w in zip(row, width)))
	print(lower.join(segments))
