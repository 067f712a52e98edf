from unittest import TestCase

from .scalar_test_functions import f, f_exact


# ======================================================================

class _Recorder:
    # Wraps a function, keeping every x it was evaluated at.
    def __init__(self, func):
        self.func, self.xs = func, []

    def __call__(self, x):
        self.xs.append(x)
        return self.func(x)


# ----------------------------------------------------------------------

class TestBisection(TestCase):
    def test_bisection(self):
        from rootfinding import Bisection, Status

        # Check normal operation.  Bracket may be given in any order.
        for x_a, x_b in ((1.0, 2.0), (2.0, 1.0)):
            bisect = Bisection()
            x, res = bisect.compute(f, x_a, x_b, full_output=True)
            self.assertAlmostEqual(x, f_exact, places=8)
            self.assertEqual(res.status, Status.CONVERGED)

        # Check failure to converge is flagged.
        bisect = Bisection(max_iteration=10)
        x, res = bisect.compute(f, 1.0, 2.0, full_output=True)
        self.assertEqual(res.status, Status.NOT_CONVERGED)
        self.assertEqual(res.iterations, 10)
        self.assertFalse(res.converged)
        self.assertAlmostEqual(x, f_exact, places=2)  # Last estimate.

    def test_bisection_exact_root(self):
        from rootfinding import Bisection, Status

        # Only 1 it. (soln was in centre).
        bisect = Bisection()
        x, res = bisect.compute(lambda x_: (2 * x_ - 1) * (x_ - 3), 0, 1,
                                full_output=True)
        self.assertEqual(x, 0.5)
        self.assertEqual(res.status, Status.EXACT_ROOT)
        self.assertEqual(res.iterations, 1)

    def test_bisection_zero_midpoint(self):
        from rootfinding import Bisection, Status

        # A midpoint of exactly zero is not taken as the root.
        x, res = Bisection().compute(lambda x_: x_ - 1, -2.0, 2.0,
                                     full_output=True)
        self.assertEqual(x, 1.0)
        self.assertEqual(res.status, Status.EXACT_ROOT)
        self.assertEqual(res.iterations, 2)
        self.assertEqual(len(res.errors), 1)  # None at x = 0.

    def test_bisection_stays_in_bracket(self):
        from rootfinding import Bisection

        rec = _Recorder(f)
        Bisection().compute(rec, 1.0, 2.0)
        self.assertGreater(len(rec.xs), 2)
        for x in rec.xs:
            self.assertTrue(1.0 <= x <= 2.0)

    def test_bisection_invalid_bracket(self):
        from rootfinding import Bisection, InvalidBracket

        # No sign change.
        with self.assertRaises(InvalidBracket):
            Bisection().compute(f, 2.0, 3.0)

        # End point already a root.
        with self.assertRaises(InvalidBracket) as cm:
            Bisection().compute(lambda x_: x_ - 1, 1.0, 2.0)
        self.assertIsInstance(cm.exception, ValueError)

        # Degenerate interval.
        with self.assertRaises(InvalidBracket):
            Bisection().compute(f, 1.0, 1.0)


# ----------------------------------------------------------------------

class TestFalsePosition(TestCase):
    def test_false_position(self):
        from rootfinding import FalsePosition, Status

        fp = FalsePosition()
        x, res = fp.compute(f, 1.0, 2.0, full_output=True)
        self.assertAlmostEqual(x, f_exact, places=8)
        self.assertEqual(res.status, Status.CONVERGED)

        # Much faster than bisection here.
        self.assertLess(res.iterations, 20)

    def test_false_position_stays_in_bracket(self):
        from rootfinding import FalsePosition

        rec = _Recorder(f)
        FalsePosition().compute(rec, 2.0, 1.0)
        for x in rec.xs:
            self.assertTrue(1.0 <= x <= 2.0)

    def test_false_position_invalid_bracket(self):
        from rootfinding import FalsePosition, InvalidBracket

        with self.assertRaises(InvalidBracket):
            FalsePosition().compute(f, -5.0, -4.0)
