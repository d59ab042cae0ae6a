"""
Finding tag strings to parse.

The parser proper does not care where a tag string comes from. In Python, the
natural home for per-field annotations is the `metadata` mapping on a dataclass
field:

	@dataclass
	class User:
		name: str = field(metadata={'validate': "required,length(min=4, max=10)"})

	parse_struct(User, 'validate')  # {'name': [Definition('required', {}), Definition('length', {...})]}

Anything else can describe itself to `parse_schema` as plain (field-name, tag-string) pairs.
"""
import dataclasses
from typing import Iterable

from .parsing.definitions import parse_tag
from .parsing.interface import Definition

def parse_schema(type_name:str, fields:Iterable[tuple[str, str]], *, strict=False) -> dict[str, list[Definition]]:
	"""
	Fields with an empty (or None) tag are skipped entirely: they do not appear in the result.
	A tag that is not a string at all is a TypeError naming the field.
	The first field that fails to parse aborts the whole business; its error carries the label "Type.field".
	"""
	result = {}
	for field_name, tag_value in fields:
		if tag_value is None: continue
		if not isinstance(tag_value, str):
			raise TypeError("Tag of %s.%s must be a string, not %s"%(type_name, field_name, type(tag_value).__name__))
		if not tag_value: continue
		result[field_name] = parse_tag(tag_value, type_name+"."+field_name, strict=strict)
	return result

def parse_struct(obj, tag_key:str, *, strict=False) -> dict[str, list[Definition]]:
	""" Parse the `tag_key` entry in the metadata of each field of a dataclass (type or instance). """
	if not dataclasses.is_dataclass(obj):
		raise TypeError("Expected a dataclass or dataclass instance, got %r"%type(obj).__name__)
	cls = obj if isinstance(obj, type) else type(obj)
	return parse_schema(cls.__name__, struct_tags(cls, tag_key), strict=strict)

def struct_tags(cls, tag_key:str):
	""" Yield (field-name, tag-string) pairs in declaration order. """
	for f in dataclasses.fields(cls):
		yield f.name, f.metadata.get(tag_key, '')
