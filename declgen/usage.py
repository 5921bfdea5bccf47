"""
Counting how often each generic appears in a signature.

A generic can either be rendered as an actual type variable such as `A` or `B`,
or it can be rendered as `any`, depending on how many usages it has. With only
one usage, nothing else constrains it, so it is `any`. With more than one usage
it is a TypeScript generic, bound at the enclosing declaration.

	fn(a) -> String        `a` is `any`
	fn() -> Result(a, b)   `a` and `b` are `any`
	fn(a) -> a             `a` is a generic

Tables are built fresh for each declaration. The dict keeps ids in order of
first appearance, so anything listed from a table comes out the same every time.
"""
from typing import Iterable, Optional
from .ontology import Type, TypeVisitor, Var, App, Fn, Tuple, Generic, Unbound

Usages = dict[int, int]

class UsageCounter(TypeVisitor):
	def __init__(self, usages:Usages):
		self.usages = usages
	def on_var(self, v: Var):
		it = v.resolve()
		if isinstance(it, Generic):
			self.usages[it.id] = self.usages.get(it.id, 0) + 1
		elif isinstance(it, Unbound):
			pass
		else:
			it.visit(self)
	def on_app(self, a: App):
		for arg in a.args: arg.visit(self)
	def on_fn(self, f: Fn):
		for arg in f.args: arg.visit(self)
		f.retrn.visit(self)
	def on_tuple(self, t: Tuple):
		for elem in t.elems: elem.visit(self)

def collect_generic_usages(types:Iterable[Type], usages:Optional[Usages]=None) -> Usages:
	if usages is None: usages = {}
	counter = UsageCounter(usages)
	for typ in types:
		typ.visit(counter)
	return usages

def shared_generics(usages:Usages) -> list[int]:
	""" The ids worth naming as parameters of the declaration. """
	return [id for id, count in usages.items() if count > 1]
