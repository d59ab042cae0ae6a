""" A toy validator driven by tag strings. Real validators have many more rules; this is just a worked example. """

from dataclasses import dataclass, field

from tagparse.introspection import parse_struct

###################################################################################
#  Rules are plain functions of (value, definition) returning an error message or None:
###################################################################################

def required(value, d):
	if value in (None, '', (), []): return "is required"

def length(value, d):
	low, high = d.attribute('min', 0), d.attribute('max')
	if len(value) < low: return "must be at least %d long"%low
	if high is not None and len(value) > high: return "must be at most %d long"%high

def maximum(value, d):
	# Written as `max=10`, so the attribute shares the definition's name.
	if value > d.attribute('max'): return "must not exceed %s"%d.attribute('max')

def one_of(value, d):
	if value not in d.attribute('oneof'): return "must be one of %s"%", ".join(map(str, d.attribute('oneof')))

RULES = {'required': required, 'length': length, 'max': maximum, 'oneof': one_of}

###################################################################################
#  A model with some tags on it:
###################################################################################

@dataclass
class User:
	name: str = field(default='', metadata={'validate': "required,length(min=4, max=10)"})
	age: int = field(default=0, metadata={'validate': "max=150"})
	role: str = field(default='guest', metadata={'validate': "oneof=[guest, admin, 'power user']"})
	note: str = ''

###################################################################################
#  And finally, tie it up in a nice neat bow:
###################################################################################

def validate(obj) -> dict:
	""" Map each field name to a list of complaints. Fields without complaints are omitted. """
	problems = {}
	for field_name, definitions in parse_struct(obj, 'validate').items():
		value = getattr(obj, field_name)
		for d in definitions:
			message = RULES[d.name](value, d)
			if message: problems.setdefault(field_name, []).append(message)
	return problems
