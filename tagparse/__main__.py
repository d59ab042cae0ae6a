"""
Parse tag strings given on the command line.

Each TAG argument is parsed separately. By default the result is written back out
in canonical tag syntax, one line per argument. Use --json for machine-readable
output or --pretty for a table.
"""

import sys, argparse, json

from tagparse.parsing.definitions import parse_tag
from tagparse.parsing.interface import ParseError
from tagparse.support import pretty

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m tagparse', description=__doc__,)
	parser.add_argument('tags', nargs='+', metavar='TAG', help='a tag string, such as "required,length(min=1, max=10)"')
	parser.add_argument('-s', '--source', default='<argv>', help='label to show in error messages')
	parser.add_argument('--strict', action='store_true', help='reject a name followed by anything but "=", "(", "," or the end.')
	parser.add_argument('--json', action='store_true', help='write the definitions as JSON.')
	parser.add_argument('-i', '--indent', help='indent the JSON output for easier reading.', action='store_const', dest='indent', const=2, default=None)
	parser.add_argument('--pretty', action='store_true', help='display the definitions in attractive grid format on STDOUT.')
	return parser.parse_args(argv)

def as_json(definitions):
	return [{'name': d.name, 'attributes': dict(d.attributes)} for d in definitions]

def main(args) -> int:
	results = []
	for tag in args.tags:
		try: definitions = parse_tag(tag, args.source, strict=args.strict)
		except ParseError as e:
			print(e.complaint(tag), file=sys.stderr)
			return 1
		results.append(definitions)
	if args.json:
		json.dump([as_json(r) for r in results], sys.stdout, indent=args.indent)
		print()
	elif args.pretty:
		for definitions in results: pretty.print_grid(pretty.definition_grid(definitions))
	else:
		for definitions in results: print(pretty.render(definitions))
	return 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
