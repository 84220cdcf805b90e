"""
The tree-walking evaluator.

One `visit_` method per kind of node the language knows how to evaluate.
Anything else is refused with `UnimplementedNode` before dispatch.
Children are evaluated left-to-right before their parent combines them,
and the first error raised aborts the whole evaluation unchanged.
"""
import operator
from typing import Optional
from boozetools.support.foundation import Visitor
from . import syntax
from .diagnostics import Report
from .errors import (
	DivisionByZero, EmptyStatement, InvalidExpression, InvalidIdentifier,
	InvalidVariable, TypeMismatch, UnimplementedNode,
)
from .stacking import ScopeStack
from .values import Value, Number, String, Bool, TRUE

def _divide(l:int, r:int) -> int:
	# Truncate toward zero, the way fixed-width machine division does.
	q = abs(l) // abs(r)
	return q if (l < 0) == (r < 0) else -q

ARITHMETIC = {
	"+": operator.add,
	"-": operator.sub,
	"*": operator.mul,
	"/": _divide,
}

ORDERING = {
	">": operator.gt,
	"<": operator.lt,
	">=": operator.ge,
	"<=": operator.le,
}

EQUALITY = {
	"==": operator.eq,
	"!=": operator.ne,
}

# Kinds which may appear directly within a Program.
PROGRAM_FORMS = (
	syntax.Expression, syntax.VariableDefine,
	syntax.String, syntax.Number, syntax.Bool,
)

def _glyph(raw:syntax.TEXT) -> str:
	if isinstance(raw, bytes):
		try: return raw.decode("utf-8")
		except UnicodeDecodeError: raise InvalidExpression() from None
	return raw

def _name(raw:syntax.TEXT) -> str:
	if isinstance(raw, bytes):
		try: return raw.decode("utf-8")
		except UnicodeDecodeError: raise InvalidIdentifier(raw.decode("utf-8", errors="replace")) from None
	return raw

class Interpreter(Visitor):
	"""
	Owns a scope stack, which starts out empty.
	The first Program evaluated on an empty stack gets a root frame,
	and that frame lasts as long as the interpreter does.
	Thus, successive programs fed to one interpreter share their variables.
	"""
	stack: ScopeStack

	def __init__(self, report:Optional[Report] = None):
		self.stack = ScopeStack()
		self._report = report

	def _info(self, *args):
		if self._report is not None: self._report.info(*args)

	def evaluate(self, node:syntax.Node) -> Value:
		if not hasattr(self, "visit_" + type(node).__name__):
			raise UnimplementedNode("Unsupported or unimplemented node: " + node.describe())
		return self.visit(node)

	exec = evaluate

	def _operands(self, node:syntax.Branch):
		if len(node.children) != 2: raise InvalidExpression()
		left = self.evaluate(node.children[0])
		right = self.evaluate(node.children[1])
		return left, right

	@staticmethod
	def visit_Number(node:syntax.Number): return Number(node.value)
	@staticmethod
	def visit_String(node:syntax.String): return String(node.value)
	@staticmethod
	def visit_Bool(node:syntax.Bool): return Bool(node.value)

	def visit_Identifier(self, node:syntax.Identifier):
		return self.stack.lookup(_name(node.value))

	def visit_Expression(self, node:syntax.Expression):
		if len(node.children) != 1: raise InvalidExpression()
		return self.evaluate(node.children[0])

	def visit_Statement(self, node:syntax.Statement):
		if not node.children: raise EmptyStatement()
		return self.evaluate(node.children[0])

	def visit_VariableDefine(self, node:syntax.VariableDefine):
		if len(node.children) != 2: raise InvalidVariable()
		target, expr = node.children
		if not isinstance(target, syntax.Identifier): raise InvalidVariable()
		name = _name(target.value)
		value = self.evaluate(expr)
		return self.stack.define(name, value)

	def visit_MathExpression(self, node:syntax.MathExpression):
		left, right = self._operands(node)
		glyph = _glyph(node.name)
		if glyph not in ARITHMETIC: raise InvalidExpression()
		if not (isinstance(left, Number) and isinstance(right, Number)): raise InvalidExpression()
		if glyph == "/" and right.value == 0: raise DivisionByZero()
		return Number(ARITHMETIC[glyph](left.value, right.value))

	def visit_ConditionalExpression(self, node:syntax.ConditionalExpression):
		left, right = self._operands(node)
		glyph = _glyph(node.operator)
		if glyph in ORDERING:
			if not (isinstance(left, Number) and isinstance(right, Number)): raise TypeMismatch()
			return Bool(ORDERING[glyph](left.value, right.value))
		if glyph in EQUALITY:
			if type(left) is not type(right): raise TypeMismatch()
			return Bool(EQUALITY[glyph](left.value, right.value))
		raise InvalidExpression()

	def visit_Program(self, node:syntax.Program):
		if self.stack.is_empty():
			self._info("Pushing the root frame.")
			self.stack.push_frame()
		result = TRUE
		for child in node.children:
			if type(child) not in PROGRAM_FORMS:
				raise UnimplementedNode("Unsupported node type in Program: " + child.describe())
			result = self.evaluate(child)
		return result
