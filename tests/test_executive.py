import io
import unittest
from unittest import mock

from asalang import syntax
from asalang.diagnostics import Report, TooManyIssues
from asalang.evaluator import Interpreter
from asalang.executive import run_program
from asalang.values import Number

class Silence(Report):
	def __init__(self, max_issues=30):
		super().__init__(verbose=False, max_issues=max_issues)
		self.complain_to_console = mock.Mock()

def _sum_program():
	add = syntax.MathExpression("+", [syntax.Number(2), syntax.Number(3)])
	return syntax.Program([syntax.Expression([add])])

def _broken_program():
	return syntax.Program([syntax.Expression([syntax.Identifier("x")])])

class ExecutiveTests(unittest.TestCase):

	def test_result_is_displayed(self):
		report = Silence()
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			result = run_program(_sum_program(), report)
		self.assertEqual(Number(5), result)
		self.assertEqual("5\n", out.getvalue())
		self.assertTrue(report.ok())

	def test_quiet_run(self):
		report = Silence()
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			run_program(_sum_program(), report, display=False)
		self.assertEqual("", out.getvalue())

	def test_failure_goes_to_the_report(self):
		report = Silence()
		self.assertIsNone(run_program(_broken_program(), report, display=False))
		self.assertTrue(report.sick())
		self.assertEqual(1, len(report.issues))
		text = report.issues[0].as_text()
		self.assertIn("UndefinedVariable", text)
		self.assertIn("x", text)
		self.assertEqual(0, report.complain_to_console.call_count)

	def test_shared_interpreter(self):
		report = Silence()
		interpreter = Interpreter(report)
		define = syntax.Program([syntax.VariableDefine([syntax.Identifier("x"), syntax.Number(9)])])
		run_program(define, report, interpreter, display=False)
		self.assertIsNone(run_program(_broken_program(), report, display=False))
		self.assertEqual(Number(9), run_program(_broken_program(), report, interpreter, display=False))
		self.assertEqual(1, len(report.issues))

	def test_too_many_issues(self):
		report = Silence(max_issues=2)
		run_program(_broken_program(), report, display=False)
		with self.assertRaises(TooManyIssues):
			run_program(_broken_program(), report, display=False)

class ReportTests(unittest.TestCase):

	def test_verbose_notes_go_to_stderr(self):
		report = Report(verbose=1)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			run_program(_sum_program(), report, display=False)
		self.assertIn("Pushing the root frame.", err.getvalue())

	def test_quiet_unless_verbose(self):
		report = Report(verbose=0)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			run_program(_sum_program(), report, display=False)
		self.assertEqual("", err.getvalue())

	def test_complaints(self):
		report = Report()
		run_program(_broken_program(), report, display=False)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			report.complain_to_console()
		self.assertIn("Evaluation failed: UndefinedVariable", err.getvalue())
		with mock.patch("sys.stderr", new_callable=io.StringIO):
			self.assertRaises(AssertionError, report.assert_no_issues, "oops")
		report.reset()
		self.assertTrue(report.ok())

if __name__ == '__main__':
	unittest.main()
