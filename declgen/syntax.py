"""
The typed module tree, in simple form.
The type checker builds these; the emitter only reads them.
Only the parts the declaration file cares about are represented:
signatures and types, never function bodies.
"""
from typing import Optional, Sequence, NamedTuple
from .ontology import Type

class ArgNames:
	""" How an argument pattern binds (or ignores) its value. """
	label: Optional[str] = None
	def variable_name(self) -> Optional[str]: return None

class Named(ArgNames):
	def __init__(self, name:str): self.name = name
	def variable_name(self): return self.name

class NamedLabelled(ArgNames):
	def __init__(self, label:str, name:str): self.label, self.name = label, name
	def variable_name(self): return self.name

class Discard(ArgNames):
	def __init__(self, name:str="_"): self.name = name

class LabelledDiscard(ArgNames):
	def __init__(self, label:str, name:str="_"): self.label, self.name = label, name

class Arg(NamedTuple):
	names: ArgNames
	type_: Type
	def variable_name(self) -> Optional[str]: return self.names.variable_name()

class ExternalFnArg(NamedTuple):
	label: Optional[str]
	type_: Type

class RecordConstructorArg(NamedTuple):
	label: Optional[str]
	type_: Type

class RecordConstructor(NamedTuple):
	name: str
	arguments: Sequence[RecordConstructorArg] = ()

class TypedConstant(NamedTuple):
	""" The emitter cares only for the type of a constant, never its value. """
	value: object
	type_: Type

#########################

class Statement:
	public = False

class Import(Statement):
	def __init__(self, module:Sequence[str], package:str=""):
		self.module = tuple(module)
		self.package = package
	def __repr__(self): return "<import %s>" % "/".join(self.module)

class TypeAlias(Statement):
	def __init__(self, alias:str, type_:Type, public:bool=False):
		self.alias, self.type_, self.public = alias, type_, public

class CustomType(Statement):
	def __init__(self, name:str, parameters:Sequence[Type], constructors:Sequence[RecordConstructor], opaque:bool=False, public:bool=False):
		assert constructors, name
		self.name = name
		self.parameters = tuple(parameters)
		self.constructors = tuple(constructors)
		self.opaque = opaque
		self.public = public
	def __repr__(self): return "<type %s>" % self.name

class ExternalType(Statement):
	def __init__(self, name:str, arguments:Sequence[str]=(), public:bool=False):
		self.name = name
		self.arguments = tuple(arguments)
		self.public = public

class ModuleConstant(Statement):
	def __init__(self, name:str, value:TypedConstant, public:bool=False):
		self.name, self.value, self.public = name, value, public

class Fn(Statement):
	def __init__(self, name:str, arguments:Sequence[Arg], return_type:Type, public:bool=False):
		self.name = name
		self.arguments = tuple(arguments)
		self.return_type = return_type
		self.public = public
	def __repr__(self): return "<fn %s/%d>" % (self.name, len(self.arguments))

class ExternalFn(Statement):
	def __init__(self, name:str, arguments:Sequence[ExternalFnArg], return_type:Type, public:bool=False):
		self.name = name
		self.arguments = tuple(arguments)
		self.return_type = return_type
		self.public = public
	def __repr__(self): return "<external fn %s/%d>" % (self.name, len(self.arguments))

#########################

class Module:
	"""
	One type-checked source file: its path segments, the package
	it belongs to, and the top-level statements in source order.
	"""
	def __init__(self, name:Sequence[str], package:str, statements:Sequence[Statement]):
		assert name, "A module needs at least one path segment."
		self.name = tuple(name)
		self.package = package
		self.statements = tuple(statements)
	def __repr__(self): return "<module %s>" % "/".join(self.name)
