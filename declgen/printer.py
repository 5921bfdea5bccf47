"""
Converting internal types into TypeScript type syntax.

There are two ways in. Plain `print` names every generic after its id,
which suits declarations that bind each of their generics explicitly:
aliases, custom types, constructor classes. The other way in takes a
usage table (see `usage.py`) so that a generic mentioned only once in a
function signature can collapse to `any`.

The printer also notices whether anything it printed needs the runtime
support library. The emitter asks about that once, at the very end.
"""
from typing import Optional, Sequence
from .ontology import Type, TypeVisitor, Var, App, Fn, Tuple, Generic, Unbound
from .document import Document, text, nil, docvec, wrap_args, wrap_generic_args, wrap_tuple
from .diagnostics import Report
from .imports import namespace_alias
from .naming import type_name, type_variable_name
from .usage import Usages
from . import prelude

class NotBuiltIn(Exception):
	"""
	A built-in type this printer has never heard of.
	Either the table in `prelude` is out of date, or the type checker
	is broken. There is nothing sensible to print, so it is fatal.
	"""

class TypePrinter:
	def __init__(self, current_module:Sequence[str], report:Optional[Report]=None):
		self.current_module = tuple(current_module)
		self.report = report or Report()
		self._prelude_used = False

	def print(self, type_:Type) -> Document:
		return type_.visit(_Printing(self, None))

	def print_with_generic_usages(self, type_:Type, usages:Usages) -> Document:
		assert usages is not None
		return type_.visit(_Printing(self, usages))

	def set_prelude_used(self):
		self._prelude_used = True

	def prelude_used(self) -> bool:
		return self._prelude_used

class _Printing(TypeVisitor):
	""" One trip through one type, with or without a usage table. """
	def __init__(self, printer:TypePrinter, usages:Optional[Usages]):
		self._printer = printer
		self._usages = usages

	def _each(self, types:Sequence[Type]):
		return [t.visit(self) for t in types]

	def on_var(self, v: Var):
		it = v.resolve()
		if isinstance(it, Generic):
			return self._generic(it.id)
		elif isinstance(it, Unbound):
			self._printer.report.unbound_variable(self._printer.current_module, it.id)
			return text("any")
		else:
			return it.visit(self)

	def _generic(self, id:int):
		if self._usages is None:
			return text(type_variable_name(id))
		count = self._usages.get(id, 0)
		if count == 0: return nil()
		elif count == 1: return text("any")
		else: return text(type_variable_name(id))

	def on_app(self, a: App):
		if a.is_builtin():
			return self._prelude_type(a)
		name = text(type_name(a.name))
		if a.module != self._printer.current_module:
			name = docvec(namespace_alias(a.module), ".", name)
		if not a.args:
			return name
		return docvec(name, wrap_generic_args(self._each(a.args)))

	def _prelude_type(self, a: App):
		if a.name in prelude.NATIVE:
			return text(prelude.NATIVE[a.name])
		if a.name not in prelude.RUNTIME:
			raise NotBuiltIn("%s is not a built-in type." % a.name)
		assert len(a.args) == prelude.RUNTIME[a.name], a
		self._printer.set_prelude_used()
		name = text(prelude.RUNTIME_ALIAS + "." + a.name)
		if not a.args:
			return name
		return docvec(name, wrap_generic_args(self._each(a.args)))

	def on_fn(self, f: Fn):
		params = [docvec("x%d" % i, ": ", arg.visit(self)) for i, arg in enumerate(f.args)]
		return docvec(wrap_args(params), " => ", f.retrn.visit(self))

	def on_tuple(self, t: Tuple):
		return wrap_tuple(self._each(t.elems))
