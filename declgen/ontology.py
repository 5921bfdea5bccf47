"""
The internal type representation, as the type checker leaves it.

This is input to the emitter and read-only from its point of view.
A type is one of four shapes: a variable cell, a named application,
a function, or a tuple. The variable cell holds one of three states:
a generic (universally-quantified parameter), an unbound placeholder
(which should never survive type checking), or a link to some other type.

Design Note:
-------------
Links may chain. Anything that inspects a variable must follow the chain
to its end before looking at what it finds there. See Var.resolve().
"""
from typing import Sequence, Union

class TypeVar:
	""" The contents of a variable cell. """

class Generic(TypeVar):
	def __init__(self, id:int):
		assert isinstance(id, int) and id >= 0, id
		self.id = id
	def __repr__(self): return "<generic %d>" % self.id

class Unbound(TypeVar):
	def __init__(self, id:int=0):
		self.id = id
	def __repr__(self): return "<unbound %d>" % self.id

class Link(TypeVar):
	def __init__(self, type_:"Type"):
		assert isinstance(type_, Type), type_
		self.type_ = type_
	def __repr__(self): return "<link %r>" % self.type_

#########################

class Type:
	def visit(self, visitor:"TypeVisitor"): raise NotImplementedError(type(self))

class Var(Type):
	"""
	A mutable cell. The type checker fills these in by pointing them
	at other types; by the time we see them, they are either generic,
	linked, or (in case of a bug upstream) unbound.
	"""
	def __init__(self, cell:TypeVar):
		assert isinstance(cell, TypeVar), cell
		self.cell = cell
	def visit(self, visitor): return visitor.on_var(self)
	def resolve(self) -> Union[Generic, Unbound, Type]:
		""" Follow links to the end of the chain. """
		it = self
		while isinstance(it, Var):
			cell = it.cell
			if isinstance(cell, Link): it = cell.type_
			else: return cell
		return it
	def __repr__(self):
		it = self.resolve()
		return "?%d" % it.id if isinstance(it, TypeVar) else repr(it)

class App(Type):
	""" A named type applied to arguments. An empty module means a built-in type. """
	def __init__(self, name:str, module:Sequence[str]=(), args:Sequence[Type]=()):
		assert all(isinstance(a, Type) for a in args), args
		self.name = name
		self.module = tuple(module)
		self.args = tuple(args)
	def visit(self, visitor): return visitor.on_app(self)
	def is_builtin(self): return not self.module
	def __repr__(self):
		prefix = "/".join(self.module)+"." if self.module else ""
		return prefix + self.name + ("[%s]" % (', '.join(map(repr, self.args))) if self.args else "")

class Fn(Type):
	def __init__(self, args:Sequence[Type], retrn:Type):
		assert isinstance(retrn, Type), retrn
		self.args = tuple(args)
		self.retrn = retrn
	def visit(self, visitor): return visitor.on_fn(self)
	def __repr__(self): return "(%s) -> %r" % (", ".join(map(repr, self.args)), self.retrn)

class Tuple(Type):
	def __init__(self, elems:Sequence[Type]):
		self.elems = tuple(elems)
	def visit(self, visitor): return visitor.on_tuple(self)
	def __repr__(self): return "#(%s)" % (", ".join(map(repr, self.elems)))

#########################

class TypeVisitor:
	def on_var(self, v:Var): pass
	def on_app(self, a:App): pass
	def on_fn(self, f:Fn): pass
	def on_tuple(self, t:Tuple): pass

#########################

def generic(id:int) -> Var: return Var(Generic(id))
def unbound(id:int=0) -> Var: return Var(Unbound(id))
def link(type_:Type) -> Var: return Var(Link(type_))
