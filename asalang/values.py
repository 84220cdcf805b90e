"""
Run-time values. There are exactly three kinds: numbers, strings, and flags.

Python's own `int`, `str`, and `bool` won't quite do as they stand,
because `True == 1` and the language wants comparisons between different
kinds of value to be an error rather than a coincidence. So each value
carries its kind along explicitly, and equality respects the kind.
"""
from .errors import NumberOverflow, NumberUnderflow

MAX_NUMBER = 2**31 - 1
MIN_NUMBER = -2**31

class Value:
	""" Immutable tagged value. Equal only to the same kind with the same payload. """
	__slots__ = ("_payload",)
	_payload: object

	def __init__(self, payload):
		object.__setattr__(self, "_payload", payload)

	def __setattr__(self, key, value): raise AttributeError("Values are immutable.")
	def __eq__(self, other): return type(self) is type(other) and self._payload == other._payload
	def __hash__(self): return hash((type(self), self._payload))
	def __repr__(self): return "%s(%r)" % (type(self).__name__, self._payload)
	def __str__(self): return str(self._payload)

	@property
	def value(self): return self._payload

class Number(Value):
	""" A 32-bit signed integer. Out-of-range payloads are refused. """
	__slots__ = ()
	def __init__(self, payload:int):
		assert isinstance(payload, int) and not isinstance(payload, bool), type(payload)
		super().__init__(checked(payload))

class String(Value):
	__slots__ = ()
	def __init__(self, payload:str):
		assert isinstance(payload, str), type(payload)
		super().__init__(payload)

class Bool(Value):
	__slots__ = ()
	def __init__(self, payload:bool):
		assert isinstance(payload, bool), type(payload)
		super().__init__(payload)
	def __str__(self): return "true" if self._payload else "false"

TRUE = Bool(True)
FALSE = Bool(False)

def checked(n:int) -> int:
	if n > MAX_NUMBER: raise NumberOverflow()
	if n < MIN_NUMBER: raise NumberUnderflow()
	return n
