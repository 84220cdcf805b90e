"""
The closed taxonomy of things that can go wrong while evaluating a tree.

Each kind is its own exception class so callers can catch exactly the
failures they care about. The payload (if any) rides along in `args`,
and two errors compare equal when they are the same kind with the same payload.
That makes it easy for a test to say what outcome it expects.
"""

class AsaError(Exception):
	""" Root of the evaluation-failure taxonomy """
	intro = "Something went wrong."

	def __eq__(self, other):
		return type(self) is type(other) and self.args == other.args
	def __hash__(self): return hash((type(self), self.args))
	def __repr__(self): return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, self.args)))
	def describe(self) -> str:
		""" A one-line explanation fit for a human """
		return self.intro

class UndefinedVariable(AsaError):
	intro = "This variable has not been defined in the current scope"
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self): return "%s: %s" % (self.intro, self.name)

class NoStackFrame(AsaError):
	intro = "There is no active scope to read or write variables in."

class InvalidVariable(AsaError):
	intro = "A variable definition needs a name and a value."

class InvalidIdentifier(AsaError):
	intro = "This identifier is not valid text"
	def __init__(self, raw:str):
		super().__init__(raw)
		self.raw = raw
	def describe(self): return "%s: %r" % (self.intro, self.raw)

class EmptyStatement(AsaError):
	intro = "This statement has nothing in it."

class InvalidExpression(AsaError):
	intro = "This expression cannot be computed."

class DivisionByZero(AsaError):
	intro = "Division by zero."

class TypeMismatch(AsaError):
	intro = "These operands are of different types and cannot be compared."

class UnimplementedNode(AsaError):
	intro = "The evaluator does not know how to deal with this kind of node."
	def __init__(self, description:str):
		super().__init__(description)
		self.description = description
	def describe(self): return self.description

class NumberOverflow(AsaError):
	intro = "The result is too large for a 32-bit number."

class NumberUnderflow(AsaError):
	intro = "The result is too small for a 32-bit number."
