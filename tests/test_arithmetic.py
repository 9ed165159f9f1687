import functools
import operator
import unittest

import numpy as np

from ratio import BIGINT, I8, U8, Ratio


class ArithmeticTests(unittest.TestCase):
    def test_arithmetic_operations(self):
        a = Ratio(1, 3)
        b = Ratio(1, 6)
        self.assertEqual(a + b, Ratio(1, 2))
        self.assertEqual(a - b, Ratio(1, 6))
        self.assertEqual(a * b, Ratio(1, 18))
        self.assertEqual(a / b, Ratio(2))

    def test_results_are_reduced(self):
        result = Ratio(1, 6) + Ratio(1, 3)
        self.assertEqual(result.to_pair(), (1, 2))
        self.assertEqual((Ratio(2, 3) * Ratio(3, 2)).to_pair(), (1, 1))
        self.assertEqual((Ratio(1, 2) / Ratio(-1, 4)).to_pair(), (-2, 1))

    def test_operations_with_bare_integers(self):
        half = Ratio(1, 2)
        self.assertEqual(half + 1, Ratio(3, 2))
        self.assertEqual(1 + half, Ratio(3, 2))
        self.assertEqual(half - 1, Ratio(-1, 2))
        self.assertEqual(1 - half, Ratio(1, 2))
        self.assertEqual(2 * Ratio(1, 3), Ratio(2, 3))
        self.assertEqual(Ratio(1, 3) * 2, Ratio(2, 3))
        self.assertEqual(Ratio(1, 3) / 2, Ratio(1, 6))
        self.assertEqual(2 / Ratio(1, 3), Ratio(6))

    def test_remainder(self):
        self.assertEqual(Ratio(7, 2) % 2, Ratio(3, 2))
        self.assertEqual(Ratio(-7, 2) % 2, Ratio(-3, 2))
        self.assertEqual(Ratio(7, 2) % Ratio(3, 2), Ratio(1, 2))
        self.assertEqual(5 % Ratio(3, 2), Ratio(1, 2))

    def test_division_by_zero_is_fatal(self):
        with self.assertRaises(ZeroDivisionError):
            _ = Ratio(1) / Ratio(0)
        with self.assertRaises(ZeroDivisionError):
            _ = Ratio(1) / 0
        with self.assertRaises(ZeroDivisionError):
            _ = Ratio(1) % Ratio(0)
        with self.assertRaises(ZeroDivisionError):
            _ = 1 / Ratio(0)

    def test_numpy_integer_operands(self):
        value = Ratio(1, 2, kind=I8) + np.int8(1)
        self.assertEqual(value, Ratio(3, 2, kind=I8))
        self.assertEqual(value.kind, I8)

    def test_operands_must_share_kind(self):
        with self.assertRaises(TypeError):
            _ = Ratio(1, 2) + Ratio(1, 2, kind=I8)
        with self.assertRaises(TypeError):
            _ = Ratio(1, 2) + 0.5
        with self.assertRaises(TypeError):
            _ = Ratio(1, 2) * "2"

    def test_bounded_overflow_is_fatal(self):
        hundred = Ratio(100, 1, kind=I8)
        with self.assertRaises(OverflowError):
            _ = hundred + hundred
        with self.assertRaises(OverflowError):
            _ = hundred + 100
        with self.assertRaises(OverflowError):
            _ = Ratio(1, 2, kind=I8) + 1000
        self.assertEqual(Ratio(127, kind=I8) - Ratio(127, kind=I8), Ratio.zero(I8))

    def test_checked_failures(self):
        big = Ratio(128, 1, kind=U8)
        small = Ratio(1, 128, kind=U8)
        one = Ratio.one(U8)
        zero = Ratio.zero(U8)
        self.assertIsNone(big.checked_add(big))
        self.assertIsNone(small.checked_sub(big))
        self.assertIsNone(big.checked_mul(big))
        self.assertIsNone(small.checked_div(big))
        self.assertIsNone(one.checked_div(zero))

        i8_min = Ratio(-128, 1, kind=I8)
        self.assertIsNone(i8_min.checked_div(Ratio(-1, 1, kind=I8)))
        self.assertIsNone(Ratio(-128, 3, kind=I8).checked_div(-1))
        self.assertIsNone(i8_min.checked_mul(Ratio(1, -1, kind=I8)))
        self.assertIsNone(Ratio.new_raw(-128, -1, kind=I8).checked_add(0))
        self.assertEqual(Ratio(-127, 1, kind=I8).checked_div(-1), Ratio(127, kind=I8))

    def test_checked_operand_outside_kind_gives_none(self):
        half = Ratio(1, 2, kind=I8)
        self.assertIsNone(half.checked_add(300))
        self.assertIsNone(half.checked_sub(-300))
        self.assertIsNone(half.checked_mul(1000))
        self.assertIsNone(half.checked_div(np.int16(500)))
        with self.assertRaises(TypeError):
            half.checked_add(0.5)
        with self.assertRaises(TypeError):
            half.checked_add(Ratio(1, 2))

    def test_checked_successes(self):
        a = Ratio(1, 2, kind=I8)
        b = Ratio(1, 3, kind=I8)
        self.assertEqual(a.checked_add(b), Ratio(5, 6, kind=I8))
        self.assertEqual(a.checked_sub(b), Ratio(1, 6, kind=I8))
        self.assertEqual(a.checked_mul(b), Ratio(1, 6, kind=I8))
        self.assertEqual(a.checked_div(b), Ratio(3, 2, kind=I8))
        self.assertEqual(a.checked_mul(2), Ratio.one(I8))

    def test_checked_never_fails_on_unbounded_kind(self):
        huge = Ratio(2**200, 3)
        self.assertEqual(huge.checked_mul(huge), Ratio(2**400, 9))
        self.assertEqual(huge.kind, BIGINT)

    def test_in_place_operators_rebind(self):
        value = Ratio(1, 2)
        alias = value
        value += Ratio(1, 3)
        self.assertEqual(value, Ratio(5, 6))
        self.assertEqual(alias, Ratio(1, 2))
        self.assertIsNot(value, alias)
        value -= 1
        self.assertEqual(value, Ratio(-1, 6))
        value *= Ratio(2)
        self.assertEqual(value, Ratio(-1, 3))
        value /= 3
        self.assertEqual(value, Ratio(-1, 9))
        value %= Ratio(1, 18)
        self.assertEqual(value, Ratio(0))

    def test_failed_in_place_update_leaves_value_intact(self):
        value = Ratio(100, 3, kind=I8)
        with self.assertRaises(OverflowError):
            value += Ratio(100, kind=I8)
        self.assertEqual(value.to_pair(), (100, 3))

    def test_negation(self):
        self.assertEqual(-Ratio(1, 2), Ratio(-1, 2))
        self.assertEqual((-Ratio(1, 2)).denom, 2)
        value = Ratio(3, 4)
        self.assertIs(+value, value)
        with self.assertRaises(OverflowError):
            _ = -Ratio(1, 2, kind=U8)

    def test_sum_and_product(self):
        values = [Ratio(1, 2), Ratio(1, 3), Ratio(1, 6)]
        self.assertEqual(sum(values), Ratio(1))
        self.assertEqual(functools.reduce(operator.mul, values), Ratio(1, 36))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
