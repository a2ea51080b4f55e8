#!/usr/bin/env python3
import argparse
import os
import sys
from typing import List, Optional

from command_graph import command_graph, summarize
from command_tree import CommandGraphError, CommandTreeError, load_command_tree
from dot_writer import write_dot

DEFAULT_OUTPUT_NAME = "commands.dot"

if os.name == "nt":
    INVALID_PATH_CHARS = frozenset('"<>|\0' + "".join(chr(i) for i in range(1, 32)))
else:
    INVALID_PATH_CHARS = frozenset("\0")

DESCRIPTION = (
    "Minecraft command graph generator. "
    "Generates a .dot graph file from a commands.json file from the minecraft data generator."
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mccmdgraph", description=DESCRIPTION)
    ap.add_argument("in_json", nargs="?", help="commands.json produced by the data generator")
    ap.add_argument("out_dot", nargs="?", default=None,
                    help=f"Output .dot file (default: ./{DEFAULT_OUTPUT_NAME}, must not exist)")
    return ap


def has_invalid_chars(path: str) -> bool:
    return any(c in INVALID_PATH_CHARS for c in path)


def check_paths(in_json: str, out_dot: str) -> Optional[str]:
    """Return an error message for the first failed check, or None."""
    if has_invalid_chars(in_json):
        return f"Input file path {in_json} contains invalid characters."
    if has_invalid_chars(out_dot):
        return f"Output file path {out_dot} contains invalid characters."
    if os.path.isdir(out_dot):
        return f"Output path {out_dot} is a directory"
    if os.path.isdir(in_json):
        return f"Input path {in_json} is a directory"
    if os.path.exists(out_dot):
        return f"Output file {out_dot} already exists."
    if not os.path.isfile(in_json):
        return f"File not found: {in_json}"
    return None


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args, extra = ap.parse_known_args(argv)

    # unknown options end up in extra as well
    if extra:
        print("Too many arguments", file=sys.stderr)
        return 1
    if args.in_json is None:
        ap.print_help()
        return 0

    out_dot = args.out_dot or os.path.join(os.getcwd(), DEFAULT_OUTPUT_NAME)

    problem = check_paths(args.in_json, out_dot)
    if problem:
        print(problem, file=sys.stderr)
        return 1

    print(f"Reading file: {args.in_json}", file=sys.stderr)
    print("Parsing JSON", file=sys.stderr)
    try:
        root = load_command_tree(args.in_json)
    except CommandTreeError as e:
        print(f"Failed to parse JSON file. Error: \n{e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read JSON file. Error: \n{e}", file=sys.stderr)
        return 1

    print("Creating Graph", file=sys.stderr)
    try:
        elements = command_graph(root)
    except CommandGraphError as e:
        print(f"Failed to build graph. Error: \n{e}", file=sys.stderr)
        return 1

    s = summarize(elements)
    print(f"Graph: {s['nodes']} nodes, {s['edges']} edges, {s['redirects']} redirects"
          f"{'' if s['acyclic'] else ' (redirects form cycles)'}", file=sys.stderr)

    print(f"Writing to file: {out_dot}", file=sys.stderr)
    try:
        write_dot(elements, out_dot)
    except OSError as e:
        print(f"Failed to write {out_dot}. Error: \n{e}", file=sys.stderr)
        return 1

    print("Done", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
