import math
import unittest

from examcalc.errors import EvaluationError
from examcalc.evaluator import build_scope, evaluate
from examcalc.nodes import Call, Constant, Symbol
from examcalc.parser import parse
from examcalc.whitelist import ALLOWED_FUNCTIONS, ALLOWED_SYMBOLS, AngleMode

DEG = AngleMode.DEGREES
RAD = AngleMode.RADIANS


def run(text, mode=DEG, ans=0.0):
    return evaluate(parse(text), mode, ans)


class TestScope(unittest.TestCase):
    def test_covers_whitelist(self):
        scope = build_scope(DEG, 3.0)
        self.assertEqual(set(scope), set(ALLOWED_FUNCTIONS) | set(ALLOWED_SYMBOLS))
        self.assertEqual(scope["ans"], 3.0)
        with self.assertRaises(TypeError):
            scope["ans"] = 1.0

    def test_accepts_mode_names(self):
        self.assertAlmostEqual(build_scope("rad")["sin"](math.pi / 2), 1.0)
        self.assertAlmostEqual(build_scope("degrees")["sin"](90), 1.0)
        with self.assertRaises(ValueError):
            build_scope("gradians")


class TestEvaluate(unittest.TestCase):
    def test_arithmetic(self):
        self.assertEqual(run("2^3*2"), 16.0)
        self.assertEqual(run("2^3^2"), 512.0)
        self.assertEqual(run("-2^2"), -4.0)
        self.assertEqual(run("2^-1"), 0.5)
        self.assertEqual(run("(1+2)(3+4)"), 21.0)
        self.assertEqual(run("7-2-1"), 4.0)

    def test_trig_degrees(self):
        self.assertAlmostEqual(run("sin(30)"), 0.5)
        self.assertAlmostEqual(run("cos(60)"), 0.5)
        self.assertAlmostEqual(run("tan(45)"), 1.0)
        self.assertAlmostEqual(run("atan(1)"), 45.0)
        self.assertAlmostEqual(run("acos(0)"), 90.0)

    def test_trig_radians(self):
        self.assertAlmostEqual(run("sin(pi/2)", RAD), 1.0)
        self.assertAlmostEqual(run("atan(1)", RAD), math.pi / 4)

    def test_inverse_round_trip(self):
        self.assertAlmostEqual(run("asin(sin(30))", DEG), 30.0)
        self.assertAlmostEqual(run("asin(sin(0.5))", RAD), 0.5)

    def test_logs_and_roots(self):
        self.assertAlmostEqual(run("log(e)"), 1.0)
        self.assertAlmostEqual(run("ln(e^2)"), 2.0)
        self.assertAlmostEqual(run("log10(1000)"), 3.0)
        self.assertAlmostEqual(run("sqrt(16)"), 4.0)
        self.assertAlmostEqual(run("exp(0)"), 1.0)

    def test_ans_binding(self):
        self.assertEqual(run("ans+1", DEG, 5), 6.0)
        self.assertEqual(run("ans"), 0.0)

    def test_unvalidated_tree_fails_as_evaluation_error(self):
        trees = [
            Symbol("x"),
            Symbol("sin"),
            Call("sin", (Constant(1.0), Constant(2.0))),
            Call("pi", (Constant(1.0),)),
        ]
        for tree in trees:
            with self.assertRaises(EvaluationError, msg=repr(tree)):
                evaluate(tree, DEG)

    def test_non_finite_results(self):
        bad = ["1/0", "0^-1", "asin(2)", "sqrt(-1)", "log(0)", "(-8)^(1/3)", "exp(1000)", "10^400", "1e308*10"]
        for text in bad:
            with self.assertRaises(EvaluationError, msg=text) as ctx:
                run(text)
            self.assertEqual(str(ctx.exception), "Expression did not produce a finite number.")


if __name__ == "__main__":
    unittest.main()
