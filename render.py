"""
render.py

Print the evolution of an elementary cellular automaton on a circular row,
followed by the time spent computing it.

Example
-------
python render.py --rule 30 --width 64 --height 32

python render.py -r 90 -x 9 -y 4 --start-line "    #    "
"""

from __future__ import annotations
import argparse, sys
from typing import List
from rules import ElementaryRule
from simulate import ClockError, DEAD, ALIVE, format_duration, simulate

def ensure_length(line: str, length: int, fill: str = DEAD) -> str:
    """
    Truncate or right-pad `line` to exactly `length` characters.
    Length is counted in code points, so multi-byte characters count once.
    """
    if len(line) > length:
        return line[:length]
    return line + fill * (length - len(line))

def default_line(width: int) -> str:
    """A single live cell in the rightmost position."""
    return DEAD * (width - 1) + ALIVE

def _bounded_int(lo: int, hi: int | None = None):
    def parse(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
        if value < lo or (hi is not None and value > hi):
            bounds = f"{lo}..{hi}" if hi is not None else f">= {lo}"
            raise argparse.ArgumentTypeError(f"{value} is out of range (expected {bounds})")
        return value
    return parse

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Render an elementary cellular automaton on a circular row.")

    p.add_argument("-r", "--rule", type=_bounded_int(0, 255), default=110, help="Wolfram rule number (0-255).")
    p.add_argument("-x", "--width", type=_bounded_int(1), default=30, help="Row width in cells.")
    p.add_argument("-y", "--height", type=_bounded_int(0), default=30, help="Generations to compute after the start line.")
    p.add_argument("--start-line", default=None, help="Literal start row; padded or truncated to the width. '#' marks live cells.")
    return p

def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.start_line is not None:
        line = ensure_length(args.start_line, args.width)
    else:
        line = default_line(args.width)

    rule = ElementaryRule.from_int(args.rule)
    try:
        result = simulate(line, rule, args.height)
    except ClockError as e:
        sys.exit(f"Timing failed: {e}")

    print(f"{result.text}\n{format_duration(result.elapsed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
