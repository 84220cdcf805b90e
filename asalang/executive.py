"""
Overall control for running a program: hand the tree to an interpreter,
then either show the result or file the failure with the report.
"""
from typing import Optional
from . import syntax
from .diagnostics import Report
from .errors import AsaError
from .evaluator import Interpreter
from .values import Value

def run_program(root:syntax.Node, report:Report, interpreter:Optional[Interpreter] = None, *, display=True) -> Optional[Value]:
	if interpreter is None: interpreter = Interpreter(report)
	report.info("Evaluating", root.describe())
	try: result = interpreter.evaluate(root)
	except AsaError as ex:
		report.evaluation_failed(root, ex)
		return None
	if display: print(result)
	return result
