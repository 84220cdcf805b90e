"""
Frames and the stack of them.

Each frame holds the variables of one evaluation scope.
Reading and writing variables only ever touches the top frame.
There is no search into enclosing frames;
nothing in the language yet creates a nested scope that would want one.
"""
from contextlib import contextmanager
from .errors import NoStackFrame, UndefinedVariable
from .values import Value

class Frame:
	_bindings : dict[str, Value]

	def __init__(self):
		self._bindings = {}
	def __repr__(self): return "<Frame %r>" % self._bindings
	def __len__(self): return len(self._bindings)
	def holds(self, key:str) -> bool: return key in self._bindings
	def assign(self, key:str, value:Value):
		self._bindings[key] = value
		return value
	def fetch(self, key:str) -> Value: return self._bindings[key]
	def names(self): return list(self._bindings)

class ScopeStack:
	""" Owned by exactly one interpreter. The last frame is the current scope. """
	_frames : list[Frame]

	def __init__(self):
		self._frames = []

	@property
	def depth(self) -> int: return len(self._frames)
	def is_empty(self) -> bool: return not self._frames

	@property
	def top(self) -> Frame:
		if not self._frames: raise NoStackFrame()
		return self._frames[-1]

	def push_frame(self) -> Frame:
		frame = Frame()
		self._frames.append(frame)
		return frame

	def pop_frame(self) -> Frame:
		if not self._frames: raise NoStackFrame()
		return self._frames.pop()

	@contextmanager
	def scope(self):
		""" Push a fresh frame for the duration of a `with` block. """
		frame = self.push_frame()
		try: yield frame
		finally: self.pop_frame()

	def define(self, name:str, value:Value) -> Value:
		return self.top.assign(name, value)

	def holds(self, name:str) -> bool:
		return bool(self._frames) and self._frames[-1].holds(name)

	def lookup(self, name:str) -> Value:
		frame = self.top
		try: return frame.fetch(name)
		except KeyError: raise UndefinedVariable(name) from None
