from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Tuple
from rules import Rule

ALIVE = "#"
DEAD = " "


class ClockError(RuntimeError):
    """The wall clock went backwards while timing a run."""


@dataclass(frozen=True)
class SimulationResult:
    text: str
    elapsed: float  # seconds spent in the generation loop
    generations: int  # rendered lines, generation 0 included


def parse_row(line: str) -> List[bool]:
    return [c == ALIVE for c in line]

def render_row(row: List[bool]) -> str:
    return "".join(ALIVE if alive else DEAD for alive in row)

def rotate(row: List[bool]) -> List[bool]:
    '''
    Move the last cell to the front. An empty row stays empty.
    '''
    if not row:
        return []
    return row[-1:] + row[:-1]

def neighborhoods(row: List[bool]) -> Iterator[Tuple[bool, bool, bool]]:
    '''
    Yield one (left, center, right) triple per cell, wrapping around both ends.
    Rotating right by one and taking circular windows of 3 lines the window
    starting at position k up with cell k as its centre.
    '''
    shifted = rotate(row)
    n = len(shifted)
    for k in range(n):
        yield shifted[k], shifted[(k + 1) % n], shifted[(k + 2) % n]

def step_1d(row: List[bool], rule: Rule) -> List[bool]:
    '''
    One synchronous update of a circular row.
    '''
    return [rule.check(*triple) for triple in neighborhoods(row)]

def evolve(row: List[bool], rule: Rule, t: int = 1) -> List[bool]:
    curr = row
    for _ in range(t):
        curr = step_1d(curr, rule)
    return curr


class Stopwatch:
    def __init__(self) -> None:
        self.started = time.perf_counter()
        self.elapsed: float | None = None

    def stop(self) -> float:
        elapsed = time.perf_counter() - self.started
        if elapsed < 0:
            raise ClockError(f"clock moved backwards by {-elapsed:.9f}s")
        self.elapsed = elapsed
        return elapsed

@contextmanager
def timed() -> Iterator[Stopwatch]:
    """Time the enclosed block; `elapsed` is set once the block exits normally."""
    watch = Stopwatch()
    yield watch
    watch.stop()

def simulate(start_line: str, rule: Rule, generations: int) -> SimulationResult:
    """
    Run `generations` steps from `start_line` and collect every generation as text.

    Generation 0 is emitted exactly as given; later generations are rendered
    from cells, so only '#' in the start line counts as alive. The timer covers
    the generation loop only.
    """
    if generations < 0:
        raise ValueError(f"generations must be >= 0, got {generations}")

    lines = [start_line + "\n"]
    row = parse_row(start_line)
    with timed() as watch:
        for _ in range(generations):
            row = step_1d(row, rule)
            lines.append(render_row(row) + "\n")
    return SimulationResult(text="".join(lines), elapsed=watch.elapsed, generations=len(lines))


_UNITS = ((1_000_000_000, "s"), (1_000_000, "ms"), (1_000, "µs"))

def format_duration(seconds: float) -> str:
    '''
    Human-readable duration: the largest unit (s, ms, µs, ns) that keeps the
    value >= 1, e.g. "1.5s", "12.25ms", "845.1µs", "120ns".
    '''
    nanos = round(seconds * 1e9)
    for per_unit, unit in _UNITS:
        if nanos >= per_unit:
            value = f"{nanos / per_unit:.9f}".rstrip("0").rstrip(".")
            return f"{value}{unit}"
    return f"{nanos}ns"
