"""
Walking a typed module and writing its TypeScript declaration file.

Only the module's statements matter here, never the expressions inside them,
because a declaration file is concerned with inputs and outputs, not with how
the outputs get made. Each public statement turns into zero or more
declarations, in source order; private statements contribute nothing at all.
Imports are gathered first so that types from other modules can be named
through their namespace alias.

The result is a Document. Use `emit_module` to go straight to text.
"""
from typing import Iterable, Optional, Sequence
from boozetools.support.foundation import Visitor
from . import syntax
from .ontology import Type
from .diagnostics import Report
from .document import (
	Document, LayoutError, DEFAULT_WIDTH, INDENT,
	text, nil, line, lines, break_, docvec, join, render, wrap_args, wrap_generic_args,
)
from .imports import Imports, import_path, namespace_alias
from .naming import safe_name, safe_type_name, type_name, type_variable_name, upper_camel
from .printer import TypePrinter
from .usage import collect_generic_usages, shared_generics
from .prelude import RUNTIME_MODULE, RUNTIME_ALIAS

CUSTOM_TYPE_BASE = RUNTIME_ALIAS + ".CustomType"

class EmissionError(Exception):
	"""
	Composing the declarations for one statement failed.
	The statement is the first argument; the cause is chained.
	No part of the module's declaration file is produced.
	"""

def name_with_generics(name:str, types:Iterable[Type]) -> Document:
	""" A name followed by every generic mentioned in the types, if there are any. """
	ids = list(collect_generic_usages(types))
	if not ids: return text(name)
	return docvec(name, wrap_generic_args([text(type_variable_name(id)) for id in ids]))

class DeclarationEmitter(Visitor):
	"""
	One of these per module. The type printer inside tracks whether
	the runtime library got used, so don't reuse an emitter.
	"""
	def __init__(self, module:syntax.Module, report:Optional[Report]=None):
		assert isinstance(module, syntax.Module), module
		self.module = module
		self.report = report or Report()
		self.type_printer = TypePrinter(module.name, self.report)

	def compile(self) -> Document:
		self.report.info("Emitting declarations for", "/".join(self.module.name))
		imports = self.collect_imports()
		declarations = []
		for statement in self.module.statements:
			try: declarations.extend(self.statement(statement))
			except LayoutError as ex: raise EmissionError(statement) from ex

		if self.type_printer.prelude_used():
			path = self.import_path(self.module.package, RUNTIME_MODULE)
			imports.register_module(path, [RUNTIME_ALIAS])
		self.report.info("Emitted %d declaration(s) and %d import(s)" % (len(declarations), len(imports)))

		statements = join(declarations, lines(2))
		if imports.is_empty() and not declarations:
			return docvec("export {}", line())
		elif imports.is_empty():
			return docvec(statements, line())
		elif not declarations:
			return imports.into_doc()
		else:
			return docvec(imports.into_doc(), line(), statements, line())

	def collect_imports(self) -> Imports:
		imports = Imports()
		for statement in self.module.statements:
			if isinstance(statement, syntax.Import):
				self.register_import(imports, statement.package, statement.module)
		return imports

	def register_import(self, imports:Imports, package:str, module:Sequence[str]):
		imports.register_module(self.import_path(package, module), [namespace_alias(module)])

	def import_path(self, package:str, module:Sequence[str]) -> str:
		return import_path(self.module.name, self.module.package, package, module)

	def statement(self, statement:syntax.Statement) -> list[Document]:
		if not statement.public: return []
		return self.visit(statement)

	def visit_TypeAlias(self, ta:syntax.TypeAlias):
		return [docvec("export type ", safe_type_name(ta.alias), " = ", self.type_printer.print(ta.type_), ";")]

	def visit_ExternalType(self, et:syntax.ExternalType):
		# Opaque by construction: nothing on this side knows what is inside.
		name = type_name(et.name)
		if not et.arguments:
			return [docvec("export type ", name, " = any;")]
		params = wrap_generic_args([text(upper_camel(a)) for a in et.arguments])
		return [docvec("export type ", name, params, " = any;")]

	def visit_CustomType(self, ct:syntax.CustomType):
		"""
		Every constructor becomes a class, and then the type itself
		becomes the union of those classes.
		"""
		definitions = [self.record_definition(c, ct.opaque) for c in ct.constructors]
		every_type = list(ct.parameters)
		for c in ct.constructors: every_type.extend(a.type_ for a in c.arguments)
		alternatives = [
			name_with_generics(safe_name(c.name), [a.type_ for a in c.arguments])
			for c in ct.constructors
		]
		definitions.append(docvec(
			"export type ", name_with_generics(type_name(ct.name), every_type),
			" = ", join(alternatives, break_("| ", " | ")), ";",
		))
		return definitions

	def record_definition(self, constructor:syntax.RecordConstructor, opaque:bool) -> Document:
		self.type_printer.set_prelude_used()
		head = docvec(
			# Other modules may not construct or take apart an opaque type.
			nil() if opaque else text("export "),
			"class ",
			name_with_generics(safe_name(constructor.name), [a.type_ for a in constructor.arguments]),
			" extends ", CUSTOM_TYPE_BASE, " {",
		)
		if not constructor.arguments:
			return docvec(head, "}")

		# Unlabelled fields are stored at numeric properties (this[0]), and a number
		# is not a legal parameter name, so constructor parameters take the x prefix.
		# The two schemes must stay distinct.
		params = [
			docvec(_label_or(arg.label, "x%d" % i), ": ", self.type_printer.print(arg.type_))
			for i, arg in enumerate(constructor.arguments)
		]
		fields = [
			docvec(_label_or(arg.label, "%d" % i), ": ", self.type_printer.print(arg.type_), ";")
			for i, arg in enumerate(constructor.arguments)
		]
		body = docvec(
			line(),
			"constructor", wrap_args(params), ";",
			line(),
			line(),
			join(fields, line()),
		).nest(INDENT)
		return docvec(head, body, line(), "}")

	def visit_ModuleConstant(self, mc:syntax.ModuleConstant):
		return [docvec("export const ", safe_name(mc.name), ": ", self.type_printer.print(mc.value.type_), ";")]

	def visit_Fn(self, fn:syntax.Fn):
		params = [(arg.variable_name(), arg.type_) for arg in fn.arguments]
		return [self.function_signature(fn.name, params, fn.return_type)]

	def visit_ExternalFn(self, fn:syntax.ExternalFn):
		params = [(arg.label, arg.type_) for arg in fn.arguments]
		return [self.function_signature(fn.name, params, fn.return_type)]

	def function_signature(self, name:str, params:Sequence[tuple[Optional[str], Type]], return_type:Type) -> Document:
		"""
		Generics used more than once become parameters of the declaration.
		Those used just once print as `any` where they occur.
		"""
		usages = collect_generic_usages([return_type] + [t for _, t in params])
		shared = shared_generics(usages)
		if shared:
			generics = wrap_generic_args([text(type_variable_name(id)) for id in shared])
		else:
			generics = nil()
		printer = self.type_printer
		args = [
			docvec(_label_or(label, "x%d" % i), ": ", printer.print_with_generic_usages(t, usages))
			for i, (label, t) in enumerate(params)
		]
		return docvec(
			"export function ", safe_name(name), generics, wrap_args(args),
			": ", printer.print_with_generic_usages(return_type, usages), ";",
		)

def _label_or(label:Optional[str], default:str) -> Document:
	return text(default if label is None else safe_name(label))

def emit_module(module:syntax.Module, report:Optional[Report]=None, width:int=DEFAULT_WIDTH) -> str:
	""" The whole declaration file for one module, as text. """
	return render(DeclarationEmitter(module, report).compile(), width)
