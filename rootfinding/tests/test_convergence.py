from unittest import TestCase

from .scalar_test_functions import runaway


# ======================================================================

class TestConvergenceTracker(TestCase):
    def test_relative_error(self):
        from rootfinding import relative_error

        self.assertAlmostEqual(relative_error(2.0, 1.0), 0.5)
        self.assertAlmostEqual(relative_error(-2.0, -1.0), 0.5)
        self.assertAlmostEqual(relative_error(-1.0, 1.0), 2.0)
        self.assertEqual(relative_error(3.0, 3.0), 0.0)

    def test_is_divergent(self):
        from rootfinding import is_divergent

        # Not enough history.
        self.assertFalse(is_divergent([]))
        self.assertFalse(is_divergent([0.1, 0.2]))

        # Strictly increasing tail.
        self.assertTrue(is_divergent([0.1, 0.2, 0.3]))
        self.assertTrue(is_divergent((0.5, 0.01, 0.02, 0.03)))

        # Decreasing, flat or mixed tails.
        self.assertFalse(is_divergent([0.3, 0.2, 0.1]))
        self.assertFalse(is_divergent([0.1, 0.2, 0.2]))
        self.assertFalse(is_divergent([0.1, 0.3, 0.2]))
        self.assertFalse(is_divergent([0.1, 0.2, 0.3, 0.1]))

        # Other window sizes.
        self.assertTrue(is_divergent([0.3, 0.1, 0.2], window=2))
        self.assertFalse(is_divergent([0.1, 0.2, 0.3], window=4))
        with self.assertRaises(ValueError):
            is_divergent([0.1, 0.2], window=1)


# ----------------------------------------------------------------------

class TestDivergentIteration(TestCase):
    def test_divergent_skip(self):
        from rootfinding import FixedPoint, DivergentIteration

        fp = FixedPoint()
        with self.assertRaises(DivergentIteration) as cm:
            fp.compute(runaway, 2.0)

        # Detected as soon as three increasing errors are available.
        err = cm.exception
        self.assertEqual(err.iteration, 3)
        self.assertEqual(len(err.errors), 3)
        self.assertTrue(err.errors[0] < err.errors[1] < err.errors[2])
        self.assertEqual(err.method, 'fixedpoint')
        self.assertIn("divergent", str(err))

    def test_divergent_no_skip(self):
        from rootfinding import FixedPoint, Status, is_divergent

        fp = FixedPoint(divergent_skip=False, max_iteration=20)
        x, res = fp.compute(runaway, 2.0, full_output=True)

        # Runs to the iteration limit instead.
        self.assertEqual(res.status, Status.NOT_CONVERGED)
        self.assertEqual(res.iterations, 20)
        self.assertEqual(len(res.errors), 20)
        self.assertTrue(is_divergent(res.errors))
        self.assertGreater(x, 1e6)

    def test_divergent_raise_on_maxiter(self):
        from rootfinding import FixedPoint, DidNotConverge

        fp = FixedPoint(divergent_skip=False, max_iteration=10,
                        raise_on_maxiter=True)
        with self.assertRaises(DidNotConverge) as cm:
            fp.compute(runaway, 2.0)
        self.assertEqual(cm.exception.iteration, 10)
