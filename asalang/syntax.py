"""
The set of parse-nodes in simple form.
A parser builds these bottom-up; the evaluator walks them top-down.
Every node owns its children outright, so the tree is strictly hierarchical.

Names and operator glyphs may arrive either as `str` or as raw `bytes`,
depending on how the lexer was feeling. The evaluator sorts that out.
"""
from typing import Sequence, Union

TEXT = Union[str, bytes]

class Node:
	children: tuple["Node", ...] = ()
	def __repr__(self): return "<%s>" % type(self).__name__
	def describe(self) -> str:
		""" Short account of the node, for error messages. """
		return repr(self)

class Branch(Node):
	""" Any node that is nothing but an ordered sequence of children. """
	def __init__(self, children:Sequence[Node] = ()):
		self.children = tuple(children)
	def __repr__(self): return "<%s: %s>" % (type(self).__name__, ", ".join(map(repr, self.children)))
	def describe(self): return "%s with %d child(ren)" % (type(self).__name__, len(self.children))

# Literals

class Number(Node):
	def __init__(self, value:int): self.value = value
	def __repr__(self): return "<%s %d>" % (type(self).__name__, self.value)

class String(Node):
	def __init__(self, value:str): self.value = value
	def __repr__(self): return "<%s %r>" % (type(self).__name__, self.value)

class Bool(Node):
	def __init__(self, value:bool): self.value = value
	def __repr__(self): return "<%s %s>" % (type(self).__name__, "true" if self.value else "false")

class Identifier(Node):
	def __init__(self, value:TEXT): self.value = value
	def __repr__(self): return "<%s %r>" % (type(self).__name__, self.value)

class Null(Node): pass

# Compound forms the evaluator understands

class Expression(Branch): pass
class Statement(Branch): pass
class VariableDefine(Branch): pass
class Program(Branch): pass

class MathExpression(Branch):
	def __init__(self, name:TEXT, children:Sequence[Node]):
		super().__init__(children)
		self.name = name
	def describe(self): return "MathExpression %r" % self.name

class ConditionalExpression(Branch):
	def __init__(self, operator:TEXT, children:Sequence[Node]):
		super().__init__(children)
		self.operator = operator
	def describe(self): return "ConditionalExpression %r" % self.operator

# The grammar knows these, but the evaluator does not (yet).

class FunctionArguments(Branch): pass
class FunctionStatements(Branch): pass
class FunctionReturn(Branch): pass

class FunctionDefine(Branch):
	def __init__(self, name:TEXT, children:Sequence[Node]):
		super().__init__(children)
		self.name = name
	def describe(self): return "FunctionDefine %r" % self.name

class FunctionCall(Branch):
	def __init__(self, name:TEXT, children:Sequence[Node] = ()):
		super().__init__(children)
		self.name = name
	def describe(self): return "FunctionCall %r" % self.name
