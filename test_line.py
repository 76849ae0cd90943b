import unittest

import ddt

from nonobits import *


@ddt.ddt
class TestCase(unittest.TestCase):
    @ddt.file_data('test-data/line-cases.yaml')
    def test_line_solver(self, **case_info):
        length = case_info['length']
        clues = case_info['clues']
        origin = case_info.get('origin', '')
        result = case_info.get('result')

        solver = NonogramSolver()
        solver.io.line_fence = 5
        filled, excluded = solver.io.parse_line(origin, length)

        try:
            filled, excluded = solver.solve_line(clues, filled, excluded, length)
        except ParadoxError:
            self.assertIsNone(result)
        else:
            self.assertIsNotNone(result)
            expected = solver.io.parse_line(result, length)
            self.assertSequenceEqual(solver.io.format_line(filled, excluded, length),
                                     solver.io.format_line(*expected, length))

    @ddt.data(
        ((1, 2, 3), 12),
        ((4,), 4),
        ((1, 1, 1, 1), 9),
    )
    @ddt.unpack
    def test_solve_line_idempotent(self, clues, length):
        segments, _ = compile_segments(clues, length)
        first = solve_line(segments, 0, 0, length)
        again = solve_line(segments, 0, 0, length)
        self.assertEqual(first, again)

        # Feeding the result back in deduces nothing new.
        self.assertEqual(solve_line(segments, *first, length), first)

    def test_solve_line_disjoint(self):
        segments, _ = compile_segments((2, 1), 5)
        filled, excluded = solve_line(segments, bit(4), 0, 5)
        self.assertEqual(filled & excluded, 0)
        self.assertEqual(filled, bit(1) | bit(4))
        self.assertEqual(excluded, bit(3))


class SegmentTestCase(unittest.TestCase):
    def test_min_shift_strictly_increasing(self):
        segments, margin = compile_segments((3, 1, 2, 1), 15)
        shifts = [s.min_shift for s in segments]
        self.assertEqual(shifts, [0, 4, 6, 9])
        self.assertEqual(margin, 5)
        self.assertTrue(all(a < b for a, b in zip(shifts, shifts[1:])))

    def test_max_shift_uses_shared_margin(self):
        segments, margin = compile_segments((2, 2), 7)
        self.assertEqual(margin, 2)
        self.assertEqual([s.max_shift for s in segments], [2, 5])
        self.assertEqual([s.mask for s in segments], [0b11, 0b11])

    def test_zero_clue_is_empty(self):
        self.assertEqual(compile_segments((0,), 5), ([], 5))
        self.assertEqual(compile_segments((), 5), ([], 5))

    def test_zero_runs_dropped(self):
        with self.assertLogs('nonobits', level='WARNING'):
            segments, margin = compile_segments((2, 0, 1), 5)
        self.assertEqual([s.length for s in segments], [2, 1])
        self.assertEqual(margin, 1)

    def test_negative_margin_warns(self):
        with self.assertLogs('nonobits', level='WARNING') as cm:
            segments, margin = compile_segments((3,), 2)
        self.assertEqual(margin, -1)
        self.assertEqual(segments[0].max_shift, -1)
        self.assertIn('need at least 3 cells', cm.output[0])


class MaskTestCase(unittest.TestCase):
    def test_run_mask(self):
        self.assertEqual(run_mask(0), 0)
        self.assertEqual(run_mask(3), 0b111)
        self.assertEqual(run_mask(64), 2 ** 64 - 1)

    def test_iter_bits(self):
        self.assertEqual(list(iter_bits(0b101001)), [0, 3, 5])
        self.assertEqual(list(iter_bits(0)), [])

    def test_run_lengths(self):
        self.assertEqual(run_lengths(0b0110111, 7), (3, 2))
        self.assertEqual(run_lengths(0, 4), ())


if __name__ == '__main__':
    unittest.main()
