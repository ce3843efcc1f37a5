#!python3 -X utf8

from typing import Any, List
import sys
import os
import argparse
from pathlib import Path
import logging
import re

##################################################################################################
# Main
##################################################################################################

ArgParser = argparse.ArgumentParser

class Commands:
    def __init__(self, parser: ArgParser) -> None:
        self.subparsers = parser.add_subparsers(dest='command')

    class Command:
        def __init__(self, commands: 'Commands', name: str) -> None:
            self.parser = commands.subparsers.add_parser(name)

        def __enter__(self) -> ArgParser:
            return self.parser

        def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
            pass

    def __call__(self, name: str) -> Any:
        return Commands.Command(self, name)


# argparse takes `-5,3` for an option, `(-5,3)` is left alone and still
# reads as a pair.
_NEGATIVE_PAIR_RE = re.compile(r'^-\d*\.?\d+\s*,\s*-?\d*\.?\d+$')

def protect_negative_pairs(argv: List[str]) -> List[str]:
    return [f"({arg})" if _NEGATIVE_PAIR_RE.match(arg) else arg for arg in argv]


def build_parser() -> ArgParser:
    parser = argparse.ArgumentParser(description='Span set algebra from the command line.')
    parser.add_argument('--config', type=str, default=None, help='YAML config file (default: .spanset.yml)')
    parser.add_argument('--debug', action='store_true', help='Log every set operation.')
    commands = Commands(parser)

    with commands('demo') as cmd:
        pass

    with commands('merge') as cmd:
        cmd.add_argument('pairs', type=str, nargs='+', help='Spans as low,high, e.g. 100,200 or -5,3')

    for name in ('contained', 'intersected'):
        with commands(name) as cmd:
            cmd.add_argument('boundary', type=str, nargs=1)
            cmd.add_argument('pairs', type=str, nargs='*')
            scan = cmd.add_mutually_exclusive_group()
            scan.add_argument('--full', action='store_true', help='Test every span.')
            scan.add_argument('--early-stop', action='store_true', help='Stop after the first run of matches.')

    with commands('compare') as cmd:
        cmd.add_argument('--left', type=str, nargs='*', default=[])
        cmd.add_argument('--right', type=str, nargs='*', default=[])

    return parser


def main(argv: List[str] | None = None) -> int:
    if sys.platform.lower() == "win32":
        os.system('chcp 65001 > nul')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore

    logging.basicConfig(level=logging.INFO, format='%(message)s')

    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(protect_negative_pairs(argv))
    if args.command is None:
        parser.print_help()
        return 0

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    from spanset.config import load_config
    from spanset.messages import error, set_color
    from spanset.spanset import ScanMode

    try:
        config = load_config(Path(args.config) if args.config else None)
    except (OSError, ValueError) as e:
        error(f"Could not load config: {e}")
        return 1
    set_color(config.color)

    try:
        match args.command:
            case 'demo':
                from spanset.tasks.demo import demo
                demo(config)

            case 'merge':
                from spanset.tasks.merge import merge
                merge(args.pairs, config)

            case 'contained' | 'intersected':
                from spanset.tasks.filter import filter_spans
                if args.full:         scan = ScanMode.FULL
                elif args.early_stop: scan = ScanMode.EARLY_STOP
                else:                 scan = config.scan
                filter_spans(args.command, args.boundary[0], args.pairs, scan, config)

            case 'compare':
                from spanset.tasks.compare import compare
                if not compare(args.left, args.right, config):
                    return 1

            case _:
                raise ValueError(f"Unknown command: {args.command}")
    except (TypeError, ValueError) as e:
        error(str(e))
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
