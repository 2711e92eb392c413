"""colour-tool: convert colours between colour spaces and match them against palettes.

Usage: colour-tool [options] <command> ...

Commands:
  convert [colours...]          one row per colour
  match <palette> [colours...]  the nearest palette entries to each colour
  columns                       list the --columns codes
  help [format]                 docs for an output format

A colour is any supported notation (#rgb, #rrggbb, rgb(), hsl(), hwb(),
lin(), xyz(), xyy(), lab(), lch(), yuv(), ycc()) or a name from a loaded
palette, e.g. `tomato`.

With -f html, -t PATH renders the table through your own Jinja2 template
(see `help html`).

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  COLOUR_TOOL_PALETTE_PATH  directories holding *.palette files (default ~/.colour-tool)
  COLOUR_TOOL_FORMAT        default output format (default text)
"""

import argparse
import importlib
import math
import sys

from colour_tool import __version__, registry
from colour_tool.core import env
from colour_tool.core.colour import Colour
from colour_tool.core.dataset import DataSet
from colour_tool.core.errors import ColourError
from colour_tool.core.palette import Palette
from colour_tool.core.palettes import PaletteRegistry

PROG = 'colour-tool'


class CommandError(Exception):
    """A user error to report on stderr before exiting with status 1."""


def _build_parser() -> argparse.ArgumentParser:
    formats = registry.discover()

    epilog = (
        'Examples:\n'
        f'  {PROG} convert tomato "#8a371b" "hsl(171.63,79.31%,35.68%)"\n'
        f'  {PROG} -c "rx[hsl][css]" -f csv convert "lch(59.99 40 180)"\n'
        f'  {PROG} match css -n 3 tomato\n'
        f'  {PROG} -p basic.palette match basic -e 10 "#ff6347"\n'
        f'  {PROG} columns\n'
        f'  {PROG} help json\n'
        f'  {PROG} -f html -t page.html.j2 convert red green blue\n'
        '\n'
        f'Formats: {", ".join(sorted(formats))}\n'
    )
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Convert colours between colour spaces and match them against palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global options before the subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-p', '--palette', metavar='FILE', action='append', default=[], help='Load a palette file')
    parser.add_argument('-f', '--format', default=None, help='Output format (default: $COLOUR_TOOL_FORMAT or text)')
    parser.add_argument('-c', '--columns', default=None, help='Output columns, see `columns`')
    parser.add_argument('-t', '--template', metavar='PATH', default=None, help='Jinja2 template for the html format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('convert', help='Convert colours to various colour spaces')
    p.add_argument('colours', nargs='*', help='Colours to convert')

    p = sub.add_parser('match', help='Find the nearest entries of a palette')
    p.add_argument('palette_name', metavar='palette', help='Palette to match against')
    p.add_argument('colours', nargs='*', help='Colours to match')
    p.add_argument('-n', '--count', type=int, default=None, help='Matches per colour (default: whole palette)')
    p.add_argument('-e', '--delta', type=float, default=math.inf, help='Maximum ΔE*₀₀ of a match')

    sub.add_parser('columns', help='List column codes for --columns')

    p = sub.add_parser('help', help='Print full docs for an output format')
    p.add_argument('topic', nargs='?', help='Format name')

    return parser


def _load_palettes(args: argparse.Namespace) -> PaletteRegistry:
    palettes = PaletteRegistry()
    for path in args.palette:
        palettes.add(Palette.parse_json_file(path))
    palettes.load_user_palettes()
    return palettes


def _parse_colour(palettes: PaletteRegistry, text: str) -> Colour:
    colour = palettes.parse_string(text)
    if colour is None:
        raise CommandError(f'Could not parse {text} as a colour')
    return colour


def _render(data: DataSet, format_name: str, template: str | None = None) -> None:
    formatter = registry.discover().get(format_name)
    if formatter is None:
        raise CommandError(f'Unrecognized output format: {format_name}')
    print(formatter.format(data, template=template), end='')


def convert(palettes: PaletteRegistry, args: argparse.Namespace, format_name: str) -> None:
    data = DataSet(args.columns or 'rpxl', palettes)
    for text in args.colours:
        data.push(text, _parse_colour(palettes, text))
    _render(data, format_name, args.template)


def match(palettes: PaletteRegistry, args: argparse.Namespace, format_name: str) -> None:
    palette = palettes.palette_of(args.palette_name)
    data = DataSet(args.columns or f'[{palette.name}][{palette.name}:d][{palette.name}:e]', palettes)
    count = args.count if args.count is not None else len(palette)
    for text in args.colours:
        colour = _parse_colour(palettes, text)
        matches = palette.match(colour, count, args.delta)
        if not matches:
            print(f'No matches for {text}', file=sys.stderr)
            continue
        for m in matches:
            data.push(text, m.colour, colour)
    _render(data, format_name, args.template)


def columns(palettes: PaletteRegistry) -> None:
    data = DataSet('*', palettes)
    code_width = max(len(c) for c in data.columns)
    sample_width = max(len(s) for s in data.samples)
    print('\nColumn specifications and their meanings:\n')
    print('Use single-letter codes as they are; wrap the others in [], e.g. -c "rx[hsl][css:e]".\n')
    for code, sample, header in zip(data.columns, data.samples, data.headers):
        print(f'    {code.ljust(code_width)}  {sample.ljust(sample_width)}  {header}')
    print()


def _print_help(topic: str | None) -> None:
    """Print the module docs of an output format."""
    formats = registry.discover()

    if topic is None:
        print('Available formats:\n')
        for name, fmt in sorted(formats.items()):
            print(f'  {name:<8} {fmt.help}')
        print(f'\nRun: {PROG} help <format> for full docs.')
        return

    if topic not in formats:
        raise CommandError(f'Unknown format: {topic}. Available: {", ".join(sorted(formats))}')

    mod = importlib.import_module(registry.module_of(topic))
    doc = (mod.__doc__ or '').strip()
    print(doc or f'(No module docs for {topic!r})')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args, extra = parser.parse_known_args(argv)
    # Before Python 3.12 colours after -n/-e are left unparsed
    if extra and args.command in ('convert', 'match') and not any(a.startswith('-') for a in extra):
        args.colours = [*args.colours, *extra]
    elif extra:
        parser.error(f'unrecognized arguments: {" ".join(extra)}')

    # Load .env before anything else; OS env vars always win
    env_path = env.load_env(env_file=args.env_file)
    if env_path:
        print(f'{PROG}: loaded {env_path}', file=sys.stderr)
    settings = env.settings()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == 'help':
            _print_help(args.topic)
            return
        palettes = _load_palettes(args)
        format_name = args.format or settings.output_format
        if args.command == 'convert':
            convert(palettes, args, format_name)
        elif args.command == 'match':
            match(palettes, args, format_name)
        elif args.command == 'columns':
            columns(palettes)
    except (ColourError, CommandError, OSError) as e:
        print(f'{PROG}: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
