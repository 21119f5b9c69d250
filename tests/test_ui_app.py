import unittest
from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[1] / "ui" / "app.py"


class TestCalculatorPanel(unittest.TestCase):
    def setUp(self):
        self.at = AppTest.from_file(str(APP_PATH), default_timeout=30)
        self.at.run()

    def evaluate(self, expression):
        self.at.text_input(key="expression").input(expression)
        self.at.button(key="evaluate").click()
        self.at.run()

    def test_initial_state(self):
        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.session_state["last_answer"], 0.0)
        self.assertEqual(self.at.session_state["angle_mode"], "DEG")

    def test_evaluates_and_keeps_answer(self):
        self.evaluate("2^3*2")
        self.assertEqual(self.at.success[0].value, "= 16")
        self.assertEqual(self.at.session_state["last_answer"], 16.0)

        self.evaluate("ans+1")
        self.assertEqual(self.at.success[0].value, "= 17")

    def test_error_leaves_answer(self):
        self.evaluate("5")
        self.evaluate("1/0")
        self.assertEqual(self.at.error[0].value, "Expression did not produce a finite number.")
        self.assertEqual(self.at.session_state["last_answer"], 5.0)

    def test_radian_mode(self):
        self.at.radio(key="angle_mode").set_value("RAD")
        self.evaluate("sin(pi/2)")
        self.assertEqual(self.at.success[0].value, "= 1")

    def test_all_clear(self):
        self.evaluate("9")
        self.at.button(key="all_clear").click()
        self.at.run()
        self.assertEqual(self.at.session_state["last_answer"], 0.0)
        self.assertEqual(len(self.at.success), 0)


if __name__ == "__main__":
    unittest.main()
