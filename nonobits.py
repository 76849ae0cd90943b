#!/usr/bin/env python3

import argparse
import collections
import enum
import functools
import logging
import re
import sys
import time
import typing

__version__ = '1.0.0'

logger = logging.getLogger('nonobits')

# Line state is a bit vector per line, one bit per cell.
MAX_LINE_LENGTH = 64


class CellState(enum.Enum):
    FILLED = enum.auto()
    EXCLUDED = enum.auto()
    UNKNOWN = enum.auto()

    def __str__(self):
        return self.name


class LineKind(enum.Enum):
    ROW = enum.auto()
    COL = enum.auto()

    def orthogonal(self) -> 'LineKind':
        if self is self.ROW:
            return self.COL
        elif self is self.COL:
            return self.ROW
        else:
            raise ValueError(f'{self} has no orthogonal line')

    def __str__(self):
        return self.name


class Coord(typing.NamedTuple):
    row: int
    col: int

    def __str__(self):
        return f'[{self.row + 1}, {self.col + 1}]'


class Line(typing.NamedTuple):
    kind: LineKind
    n: int

    def get_coord(self, index: int) -> Coord:
        if self.kind == LineKind.ROW:
            return Coord(self.n, index)
        elif self.kind == LineKind.COL:
            return Coord(index, self.n)

    def __str__(self):
        return f'{self.kind} {self.n + 1}'


class ConfigError(Exception):
    pass


class ParadoxError(Exception):
    pass


class ConsistencyError(Exception):
    """Raised when a merge would clear a bit that was already proven."""


class FailedError(Exception):
    pass


def bit(n: int) -> int:
    return 1 << n


def run_mask(length: int) -> int:
    """Mask of `length` contiguous low bits (the full mask of a line that long)."""
    return (1 << length) - 1 if length > 0 else 0


def iter_bits(mask: int) -> typing.Iterator[int]:
    index = 0
    while mask:
        if mask & 1:
            yield index
        mask >>= 1
        index += 1


class Segment(typing.NamedTuple):
    length: int
    mask: int
    min_shift: int
    max_shift: int

    @property
    def margin(self) -> int:
        return self.max_shift - self.min_shift

    def __repr__(self):
        return f'<{self.length} @{self.min_shift}-{self.max_shift}>'


def compile_segments(clues: typing.Sequence[int], limit: int) -> typing.Tuple[typing.List[Segment], int]:
    """Turn one line's clues into movable segments.

    Returns the segments in clue order together with the margin shared by
    all of them (how far every segment can slide right of its leftmost
    packing). A single ``0`` clue compiles to no segments at all.
    """
    lengths = [value for value in clues if value != 0]
    if len(lengths) < len(clues) and len(clues) > 1:
        logger.warning('clues %s contain zero-length runs, ignored', tuple(clues))

    if not lengths:
        return [], limit

    min_shifts = []
    position = 0
    for length in lengths:
        min_shifts.append(position)
        position += length + 1  # Including the mandatory space.

    position -= 1  # No space after the last segment.
    margin = limit - position
    if margin < 0:
        logger.warning('clues %s need at least %d cells but the line has %d', tuple(clues), position, limit)

    segments = [Segment(length, run_mask(length), shift, shift + margin)
                for length, shift in zip(lengths, min_shifts)]
    return segments, margin


def solve_line(segments: typing.Sequence[Segment], filled: int, excluded: int, limit: int) -> typing.Tuple[int, int]:
    """Deduce what every consistent placement of the segments agrees on.

    Returns ``(common_filled, common_excluded)``: the cells covered by every
    placement that respects the known `filled` and `excluded` cells, and the
    cells covered by none of them. Raises :class:`ParadoxError` when no such
    placement exists.
    """
    full = run_mask(limit)
    if not segments:
        if filled:
            raise ParadoxError(f'cells {_cell_list(filled)} are filled in an empty line')
        return 0, full

    result = _move_segment(segments, filled, excluded, limit, 0, segments[0].min_shift, 0, 0)
    if result is None:
        raise ParadoxError(f'segments {segments} cannot be placed')

    common_filled, common_excluded = result
    return common_filled & full, common_excluded & full


def _move_segment(segments, filled, excluded, limit, idx, shift_start, covered, uncovered):
    if idx == len(segments):
        for i in range(max(shift_start - 1, 0), limit):
            uncovered |= bit(i)
        if uncovered & filled:
            return None
        return covered, uncovered

    common = None
    segment = segments[idx]
    for i in range(shift_start, segment.max_shift + 1):
        if i > 0:
            uncovered |= bit(i - 1)
        if uncovered & filled:
            # `uncovered` only grows from here on.
            break

        new_covered = covered | (segment.mask << i)
        if new_covered & excluded:
            continue

        result = _move_segment(segments, filled, excluded, limit,
                               idx + 1, i + segment.length + 1, new_covered, uncovered)
        if result is None:
            continue
        elif common is None:
            common = result
        else:
            common = (common[0] & result[0], common[1] & result[1])

    return common


def _cell_list(mask: int) -> str:
    return ', '.join(str(i + 1) for i in iter_bits(mask))


class SolveStatus(enum.Enum):
    FINISHED = enum.auto()
    CONTRADICTION = enum.auto()
    STALLED = enum.auto()

    def __str__(self):
        return self.name


class SolveResult(typing.NamedTuple):
    status: SolveStatus
    line: typing.Optional[Line] = None
    message: str = ''
    sweeps: int = 0
    line_runs: int = 0

    @property
    def success(self) -> bool:
        return self.status is SolveStatus.FINISHED


class Nonogram:
    def __init__(self, row_clues: typing.Sequence[typing.Sequence[int]],
                 col_clues: typing.Sequence[typing.Sequence[int]]):
        self._row_clues = tuple(tuple(clues) for clues in row_clues)
        self._col_clues = tuple(tuple(clues) for clues in col_clues)
        self._height = len(self._row_clues)
        self._width = len(self._col_clues)

        if self._height == 0 or self._width == 0:
            raise ConfigError(f'puzzle size {self._height}x{self._width} is empty')
        if self._height > MAX_LINE_LENGTH or self._width > MAX_LINE_LENGTH:
            raise ConfigError(f'puzzle size {self._height}x{self._width} exceeds {MAX_LINE_LENGTH} cells per line')

        self.warnings: typing.List[str] = []
        self._segments = {
            LineKind.ROW: self._compile(self._row_clues, LineKind.ROW),
            LineKind.COL: self._compile(self._col_clues, LineKind.COL),
        }

        row_sum = sum(sum(clues) for clues in self._row_clues)
        col_sum = sum(sum(clues) for clues in self._col_clues)
        if row_sum != col_sum:
            self._warn(f'total row clues sum ({row_sum}) not equal to col clues sum ({col_sum})')

        self._filled = {LineKind.ROW: [0] * self._height, LineKind.COL: [0] * self._width}
        self._excluded = {LineKind.ROW: [0] * self._height, LineKind.COL: [0] * self._width}
        self.line_runs: typing.Counter[Line] = collections.Counter()

    def _compile(self, all_clues, kind: LineKind) -> typing.List[typing.List[Segment]]:
        limit = self.line_length(kind)
        all_segments = []
        for i, clues in enumerate(all_clues):
            segments, margin = compile_segments(clues, limit)
            if margin < 0:
                self._warn(f'{Line(kind, i)} clues {clues} cannot fit in {limit} cells (at least {limit - margin})')
            all_segments.append(segments)

        return all_segments

    def _warn(self, message: str):
        self.warnings.append(message)
        logger.warning(message)

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def row_clues(self) -> typing.Tuple[typing.Tuple[int]]:
        return self._row_clues

    @property
    def col_clues(self) -> typing.Tuple[typing.Tuple[int]]:
        return self._col_clues

    def line_length(self, kind: LineKind) -> int:
        return self._width if kind == LineKind.ROW else self._height

    def line_count(self, kind: LineKind) -> int:
        return self._height if kind == LineKind.ROW else self._width

    def lines(self, kind: LineKind) -> typing.Iterator[Line]:
        return (Line(kind, i) for i in range(self.line_count(kind)))

    def get_line_clues(self, line: Line) -> typing.Tuple[int]:
        if line.kind == LineKind.ROW:
            return self._row_clues[line.n]
        elif line.kind == LineKind.COL:
            return self._col_clues[line.n]

    def get_line_segments(self, line: Line) -> typing.List[Segment]:
        return self._segments[line.kind][line.n]

    def line_masks(self, line: Line) -> typing.Tuple[int, int]:
        return self._filled[line.kind][line.n], self._excluded[line.kind][line.n]

    def cell_state(self, row: int, col: int) -> CellState:
        if self._filled[LineKind.ROW][row] & bit(col):
            return CellState.FILLED
        elif self._excluded[LineKind.ROW][row] & bit(col):
            return CellState.EXCLUDED
        else:
            return CellState.UNKNOWN

    def is_line_finished(self, line: Line) -> bool:
        filled, excluded = self.line_masks(line)
        return (filled | excluded) == run_mask(self.line_length(line.kind))

    def finished(self) -> bool:
        return all(self.is_line_finished(line) for line in self.lines(LineKind.ROW))

    def mark_overlaps(self) -> typing.Tuple[int, int]:
        """Seed both orientations with the cells every packing agrees on.

        Returns the dirty row and column bit vectors: every line holding a
        newly marked cell.
        """
        dirty = {LineKind.ROW: 0, LineKind.COL: 0}
        for kind in LineKind:
            limit = self.line_length(kind)
            for line in self.lines(kind):
                segments = self.get_line_segments(line)
                if not segments:
                    for i in range(limit):
                        self._mark(line.get_coord(i), CellState.EXCLUDED, dirty)
                    continue

                if segments[0].margin < 0:
                    # Nothing to seed, but the line solver must still reject it.
                    dirty[kind] |= bit(line.n)
                    continue

                for segment in segments:
                    for i in range(segment.max_shift, segment.min_shift + segment.length):
                        self._mark(line.get_coord(i), CellState.FILLED, dirty)

        return dirty[LineKind.ROW], dirty[LineKind.COL]

    def _mark(self, coord: Coord, value: CellState, dirty: typing.Dict[LineKind, int]):
        row, col = coord
        if value == CellState.FILLED:
            marks, opposite = self._filled, self._excluded
        else:
            marks, opposite = self._excluded, self._filled

        if opposite[LineKind.ROW][row] & bit(col):
            raise ParadoxError(f'cell {coord} cannot be {value}')

        marks[LineKind.ROW][row] |= bit(col)
        marks[LineKind.COL][col] |= bit(row)
        dirty[LineKind.ROW] |= bit(row)
        dirty[LineKind.COL] |= bit(col)

    def solve(self, heuristic: bool = True,
              observer: typing.Optional[typing.Callable[[typing.Optional[Line]], None]] = None) -> SolveResult:
        """Propagate line deductions until finished, contradicted or stalled."""
        dirty = {LineKind.ROW: run_mask(self._height), LineKind.COL: run_mask(self._width)}
        if heuristic:
            try:
                dirty[LineKind.ROW], dirty[LineKind.COL] = self.mark_overlaps()
            except ParadoxError as e:
                return self._result(SolveStatus.CONTRADICTION, 0, message=f'overlap marks collide: {e}')
            if observer:
                observer(None)

        sweeps = 0
        # Stop only at a fixed point: every changed line has been checked against its clues.
        while dirty[LineKind.ROW] or dirty[LineKind.COL]:
            sweeps += 1
            for kind in LineKind:
                for line in self.lines(kind):
                    if not dirty[kind] & bit(line.n):
                        continue

                    dirty[kind] &= ~bit(line.n)
                    try:
                        changed = self._run_line(line)
                    except ParadoxError as e:
                        message = f'paradox in {line} {self.get_line_clues(line)}: {e}'
                        return self._result(SolveStatus.CONTRADICTION, sweeps, line, message)

                    if changed:
                        dirty[kind.orthogonal()] |= changed
                        if observer:
                            observer(line)

            logger.debug('sweep %d done, dirty rows %x, dirty cols %x',
                         sweeps, dirty[LineKind.ROW], dirty[LineKind.COL])

        if not self.finished():
            return self._result(SolveStatus.STALLED, sweeps, message='no changed line left')

        return self._result(SolveStatus.FINISHED, sweeps)

    def _result(self, status: SolveStatus, sweeps: int, line: Line = None, message: str = '') -> SolveResult:
        return SolveResult(status, line, message, sweeps, sum(self.line_runs.values()))

    def _run_line(self, line: Line) -> int:
        segments = self.get_line_segments(line)
        filled, excluded = self.line_masks(line)
        limit = self.line_length(line.kind)
        if not segments:
            if filled:
                raise ParadoxError(f'cells {_cell_list(filled)} are filled in an empty line')
            result_filled, result_excluded = 0, run_mask(limit)
        else:
            self.line_runs[line] += 1
            result_filled, result_excluded = solve_line(segments, filled, excluded, limit)

        return (self._update(line, result_filled, self._filled)
                | self._update(line, result_excluded, self._excluded))

    def _update(self, line: Line, result: int, masks: typing.Dict[LineKind, typing.List[int]]) -> int:
        """Merge a line result into `masks`; return the newly set bits."""
        lines = masks[line.kind]
        crosses = masks[line.kind.orthogonal()]
        origin = lines[line.n]
        if result == origin:
            return 0
        if origin & ~result:
            raise ConsistencyError(f'{line} would lose cells {_cell_list(origin & ~result)}')

        opposite = self._excluded if masks is self._filled else self._filled
        both = result & opposite[line.kind][line.n]
        if both:
            raise ConsistencyError(f'{line} cells {_cell_list(both)} would be both filled and excluded')

        lines[line.n] = result
        changed = result ^ origin
        for i in iter_bits(changed):
            crosses[i] |= bit(line.n)

        logger.debug('%s: cells %s updated', line, _cell_list(changed))
        return changed

    def verify(self):
        for kind, all_clues in ((LineKind.ROW, self.row_clues), (LineKind.COL, self.col_clues)):
            for line in self.lines(kind):
                if not self.is_line_finished(line):
                    raise FailedError(f'{line} is not finished')

                filled, _ = self.line_masks(line)
                boxes = run_lengths(filled, self.line_length(kind)) or (0,)
                clues = tuple(filter(None, all_clues[line.n])) or (0,)
                if boxes != clues:
                    raise FailedError(f'{line} boxes {boxes} not match with clues {clues}')


def run_lengths(mask: int, limit: int) -> typing.Tuple[int, ...]:
    runs = [0]
    for i in range(limit):
        if mask & bit(i):
            runs[-1] += 1
        elif runs[-1] > 0:
            runs.append(0)

    return tuple(filter(None, runs))


SHORT_SAMPLE = (
    ((2, 2), (2, 2), (2, 2), (2, 2), (8,), (10,), (10,), (2, 4, 2), (4, 4), (8,)),
    ((4,), (6,), (7, 2), (10,), (4, 1), (4, 1), (10,), (7, 2), (6,), (4,)),
)

LONG_SAMPLE = (
    (
        (2, 1), (2, 3, 3), (5, 2, 4), (3, 3, 4), (1, 3, 2, 3),
        (5, 3, 1, 3, 2), (9, 6, 2, 1, 3), (1, 1, 3, 1, 3, 1), (9, 3, 2, 2, 3, 2), (4, 4, 2, 2, 1, 2, 1),
        (5, 3, 6, 2, 3, 2), (1, 2, 6, 2, 1, 2, 2), (1, 3, 4, 1, 5, 2, 2), (4, 3, 3, 2, 2, 2, 1), (4, 2, 5, 3, 2, 2),
        (3, 3, 1, 5, 3, 1, 4), (2, 2, 1, 1, 5, 7, 3), (1, 1, 4, 5, 2, 4, 3), (2, 1, 12, 2, 2, 2), (1, 1, 1, 3, 3, 2),
        (2, 2, 3, 3, 3), (5, 14, 5), (5, 6), (1, 1, 13), (2, 6, 10),
        (2, 5), (3, 12), (3, 5), (14,), (10,),
    ),
    (
        (12,), (5, 4, 1, 2), (1, 8, 2), (2, 7, 2), (1, 2, 1, 1, 1, 7),
        (4, 2, 2, 3), (1, 2, 8, 2, 3), (2, 13, 2), (1, 6, 2, 2, 2), (2, 3, 2, 4, 2, 2, 2),
        (5, 1, 1, 1, 1, 3), (1, 4, 2, 5, 1, 1, 2), (5, 3, 7, 1, 1, 2), (1, 2, 3, 8, 1, 1, 1, 2), (1, 1, 1, 7, 1, 2, 1, 2),
        (1, 2, 5, 1, 1, 1, 2), (1, 2, 5, 1, 1, 1, 1, 2), (6, 7, 1, 2, 1, 2), (2, 1, 4, 1, 2, 1, 2), (5, 1, 2, 1, 2),
        (4, 1, 1, 1, 2, 4), (1, 3, 5, 2, 7), (2, 3, 3, 2, 1, 7), (1, 2, 4, 3, 2, 7), (3, 1, 4, 2, 3, 7),
        (2, 6, 5, 2, 5), (4, 2, 2, 3, 5), (7, 2, 7), (2, 3, 3, 5), (3,),
    ),
)


class NonogramIO:
    class SymbolColl(typing.NamedTuple):
        box: str
        space: str
        unknown: str
        col_fence: str
        row_fence: str
        cross_fence: str

    def __init__(self):
        self.line_fence = 0
        self.row_fence = 0
        self.col_fence = 0
        self.full_width_enabled = False

        self.symbols = self.SymbolColl('@', '*', '.', '|', '-', '+')
        self.full_width_symbols = self.SymbolColl('䨻', 'ｘ', '、', '｜', '－', '＋')
        self.box_symbols = { 'o', self.symbols.box, self.full_width_symbols.box }
        self.space_symbols = { 'x', self.symbols.space, self.full_width_symbols.space }

    def _symbol(self, symbols: 'NonogramIO.SymbolColl', value: CellState) -> str:
        if value == CellState.FILLED:
            return symbols.box
        elif value == CellState.EXCLUDED:
            return symbols.space
        else:
            return symbols.unknown

    def format_line(self, filled: int, excluded: int, length: int, fence=None) -> str:
        fence = self.line_fence if fence is None else fence
        parts = []
        for i in range(length):
            if fence > 0 and i > 0 and i % fence == 0:
                parts.append(self.symbols.col_fence)

            if filled & bit(i):
                parts.append(self.symbols.box)
            elif excluded & bit(i):
                parts.append(self.symbols.space)
            else:
                parts.append(self.symbols.unknown)

        return ''.join(parts)

    def format_board(self, puzzle: Nonogram, highlight: Line = None, row_fence=None, col_fence=None,
                     full_width=None) -> str:
        row_fence = self.row_fence if row_fence is None else row_fence
        col_fence = self.col_fence if col_fence is None else col_fence
        full_width = self.full_width_enabled if full_width is None else full_width
        symbols = self.full_width_symbols if full_width else self.symbols

        csi = '\x1b'
        c_highlight = csi + '[34m'
        c_reset = csi + '[0m'

        fence_parts = []
        for col in range(puzzle.width):
            if col_fence > 0 and col > 0 and col % col_fence == 0:
                fence_parts.append(symbols.cross_fence)
            fence_parts.append(symbols.row_fence)

        fence_line = ''.join(fence_parts)

        lines = []
        for row in range(puzzle.height):
            if row_fence > 0 and row > 0 and row % row_fence == 0:
                lines.append(fence_line)

            parts = []
            for col in range(puzzle.width):
                if col_fence > 0 and col > 0 and col % col_fence == 0:
                    parts.append(symbols.col_fence)

                highlighted = highlight is not None and highlight.n == (
                    row if highlight.kind == LineKind.ROW else col)
                if highlighted:
                    parts.append(c_highlight)

                parts.append(self._symbol(symbols, puzzle.cell_state(row, col)))

                if highlighted:
                    parts.append(c_reset)

            lines.append(''.join(parts))

        return '\n'.join(lines)

    def parse_line(self, text: str, length: int) -> typing.Tuple[int, int]:
        filled = 0
        excluded = 0
        index = 0
        for c in text:
            c = c.lower()
            if c in { self.symbols.col_fence, self.full_width_symbols.col_fence }:
                continue
            elif c in self.box_symbols:
                filled |= bit(index)
            elif c in self.space_symbols:
                excluded |= bit(index)

            index += 1

        if index > length:
            raise ValueError(f'line `{text}` is longer than given length {length}')

        return filled, excluded

    def parse_clues(self, text: str) -> typing.Tuple[int]:
        return tuple(int(x) for x in re.findall(r'\d+', text))

    def load_puzzle(self, file_path) -> Nonogram:
        row_clues, col_clues = self.load_clues(file_path)
        return Nonogram(row_clues, col_clues)

    def load_clues(self, file_path):
        """Read a clue file: a `rows cols` header, then one clue line per row and per column."""
        with (open(file_path) if file_path else sys.stdin) as f:
            lines = []
            for line in f:
                line = line.strip()
                if line.startswith('#'):
                    continue
                elif line == '' and not lines:
                    continue

                # After the header a blank line is an empty clue list.
                lines.append(self.parse_clues(line))

        if not lines or len(lines[0]) < 2:
            raise ValueError(f'missing `rows cols` header in {file_path or "stdin"}')

        num_row, num_col = lines[0][:2]
        body = lines[1:]
        if len(body) < num_row + num_col:
            raise ValueError(f'expected {num_row} row and {num_col} col clue lines, got {len(body)}')

        logger.info('%d rows and %d columns', num_row, num_col)
        return body[:num_row], body[num_row:num_row + num_col]


class NonogramSolver:
    def __init__(self):
        self.heuristic_enabled = True
        self.deduce_board_visible = False
        self.deduce_board_pause = 0
        self.wait_key = False

        self.io = NonogramIO()

    def solve(self, puzzle: Nonogram) -> SolveResult:
        observer = functools.partial(self._show_progress, puzzle) if self.deduce_board_visible else None
        result = puzzle.solve(heuristic=self.heuristic_enabled, observer=observer)
        if not result.success:
            logger.info('%s: %s', result.status, result.message)

        return result

    def _show_progress(self, puzzle: Nonogram, line: typing.Optional[Line]):
        print(f'=== {line or "overlaps"} ===')
        print(self.io.format_board(puzzle, highlight=line))
        print()
        if self.wait_key:
            input()
        else:
            time.sleep(self.deduce_board_pause)

    def solve_line(self, clues: typing.Sequence[int], filled: int, excluded: int, length: int) -> typing.Tuple[int, int]:
        if length > MAX_LINE_LENGTH:
            raise ConfigError(f'line length {length} exceeds {MAX_LINE_LENGTH}')

        segments, _ = compile_segments(clues, length)
        if filled & excluded:
            raise ParadoxError(f'cells {_cell_list(filled & excluded)} are both filled and excluded')

        result_filled, result_excluded = solve_line(segments, filled, excluded, length)
        return filled | result_filled, excluded | result_excluded


def strtobool(text: str) -> bool:
    value = text.lower()
    if value in ('y', 'yes', 't', 'true', 'on', '1'):
        return True
    elif value in ('n', 'no', 'f', 'false', 'off', '0'):
        return False
    else:
        raise argparse.ArgumentTypeError(f'invalid truth value `{text}`')


def create_arg_parser() -> argparse.ArgumentParser:
    int_pair = lambda s: tuple(int(x) for x in s.split(',', 1))

    parser = argparse.ArgumentParser(description='Bitmask Nonograms Puzzle Solver', allow_abbrev=False)
    parser.add_argument('--version', action='version', version=f'nonobits {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print debug logs of every line update')
    subparsers = parser.add_subparsers(dest='mode', required=True, help='choose a mode')

    parser_g = subparsers.add_parser('gram', help='gram mode')
    parser_g.add_argument('puzzle_file', nargs='?',
                          help='a file contains the nanogram clues, see puzzles/*.txt for example'
                          ' (default: solve a built-in sample, `-` reads from stdin);'
                          ' after the `rows cols` header every line, blank or not, is one clue line')
    parser_g.add_argument('--long-sample', action='store_true',
                          help='solve the 30x30 sample instead of the 10x10 one when no file is given')
    parser_g.add_argument('--heuristic', type=strtobool,
                          nargs='?', const=True, default=True, choices=[True, False],
                          help='whether seed the board with overlap marks before deducing (default: true)')
    parser_g.add_argument('--show-progress', type=strtobool,
                          nargs='?', const=True, default=False, choices=[True, False],
                          help='whether print board after each deducing step (highlight changes) (default: false)')
    parser_g.add_argument('--progress-pause', type=float, default=0.1,
                          help='pause some time (in seconds) between each progress board view (default: 0.1)')
    parser_g.add_argument('--wait-key', type=strtobool,
                          nargs='?', const=True, default=False, choices=[True, False],
                          help='whether wait for enter after each progress board view (default: false)')
    parser_g.add_argument('--grid', type=int_pair, nargs='?', default=(5, 5), const=(5, 5), metavar='WIDTH[,HEIGHT]',
                          help='show major grid line when printing gram with the given size, 0 to disable'
                          ' (default: 5,5)')
    parser_g.add_argument('--full-width', type=strtobool,
                          nargs='?', const=True, default=False, choices=[True, False],
                          help='whether use full width char when print gram (default: false)')

    parser_l = subparsers.add_parser('line', help='single line mode')
    parser_l.add_argument('length', type=int,
                          help='length of line')
    parser_l.add_argument('clues', type=int, nargs='+', metavar='clue',
                          help='clue numbers')
    parser_l.add_argument('--content', default='',
                          help='content of the line, `o` or `@` for box, `x` or `*` for space,'
                          ' `|` for border (optional), other character for unknown (case insensitive)')
    parser_l.add_argument('--line-fence', type=int, default=5,
                          help='if greater than 0, print fence when printing single line (default: 5)')

    return parser


def create_solver(args) -> NonogramSolver:
    solver = NonogramSolver()
    if args.mode == 'gram':
        solver.heuristic_enabled = args.heuristic
        solver.deduce_board_visible = args.show_progress or args.wait_key
        solver.deduce_board_pause = args.progress_pause
        solver.wait_key = args.wait_key
        solver.io.col_fence = args.grid[0]
        solver.io.row_fence = args.grid[-1]
        solver.io.full_width_enabled = args.full_width
    elif args.mode == 'line':
        solver.io.line_fence = args.line_fence

    return solver


def main():
    parser = create_arg_parser()
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    solver = create_solver(args)
    if args.mode == 'gram':
        start = time.perf_counter()
        if args.puzzle_file:
            puzzle = solver.io.load_puzzle(None if args.puzzle_file == '-' else args.puzzle_file)
        else:
            puzzle = Nonogram(*(LONG_SAMPLE if args.long_sample else SHORT_SAMPLE))

        logger.info('rows: %d, cols: %d', puzzle.height, puzzle.width)
        result = solver.solve(puzzle)
        elapsed = time.perf_counter() - start

        print(solver.io.format_board(puzzle))
        print()
        if result.success:
            puzzle.verify()
        print(f'Total line runs: {result.line_runs} in {result.sweeps} sweeps')
        print(f'{"SUCCESS" if result.success else "FAILURE"}: took {int(elapsed * 1e6)} us.')
        if not result.success:
            print(f'NOT Solved!!! {result.status}: {result.message}')
            sys.exit(1)
    elif args.mode == 'line':
        filled, excluded = solver.io.parse_line(args.content, args.length)
        origin = solver.io.format_line(filled, excluded, args.length)
        print(f'solving line: {args.clues}')
        print(f'origin: {origin}')
        try:
            filled, excluded = solver.solve_line(args.clues, filled, excluded, args.length)
        except ParadoxError as e:
            print(f'paradox: {e}')
            sys.exit(1)
        print(f'result: {solver.io.format_line(filled, excluded, args.length)}')
        print()


if __name__ == '__main__':
    main()
