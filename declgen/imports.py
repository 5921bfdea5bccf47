"""
Finding other modules' declaration files, and keeping track of which ones we need.

Compiled packages are laid out on disk like this:

	<build>/<package>/dist/<module path>.d.ts

so a module in the same package is found by climbing out of the current
module's directories, and a module in another package by climbing one
level further, past the `dist` directory and the package directory.
"""
from typing import Iterable, Sequence
from .document import Document, concat, docvec, line, nil
from .naming import upper_camel

DECLARATION_EXTENSION = ".d.ts"
DIST_DIRECTORY = "dist"
NAMESPACE_SIGIL = "$"

def module_name(parts:Sequence[str]) -> str:
	""" Joins the parts of a module path into a single UpperCamelCase string """
	return "".join(upper_camel(p) for p in parts)

def namespace_alias(module:Sequence[str]) -> str:
	"""
	Other modules' types are referred to through a namespace import.
	The sigil keeps these aliases out of the way of any source-level name.
	"""
	return NAMESPACE_SIGIL + module_name(module)

def import_path(current_module:Sequence[str], current_package:str, package:str, module:Sequence[str]) -> str:
	""" Calculates the path of where to import an external module from """
	path = "/".join(module)
	depth = len(current_module)
	assert depth, "The current module needs a name."
	if package == current_package or not package:
		if depth == 1:
			return "./%s%s" % (path, DECLARATION_EXTENSION)
		return "%s%s%s" % ("../" * (depth - 1), path, DECLARATION_EXTENSION)
	else:
		prefix = "../" * (depth + 1)
		return "%s%s/%s/%s%s" % (prefix, package, DIST_DIRECTORY, path, DECLARATION_EXTENSION)

class Imports:
	"""
	Namespace imports for the top of a declaration file.
	Each path is imported once, however often it is registered.
	"""
	def __init__(self):
		self._modules:dict[str, list[str]] = {}

	def register_module(self, path:str, aliases:Iterable[str]):
		known = self._modules.setdefault(path, [])
		for alias in aliases:
			if alias not in known: known.append(alias)

	def is_empty(self): return not self._modules

	def __len__(self): return len(self._modules)

	def __contains__(self, path:str): return path in self._modules

	def aliases(self, path:str) -> tuple[str, ...]:
		return tuple(self._modules[path])

	def into_doc(self) -> Document:
		""" One line per alias, in order of path; each line ends with a newline. """
		if self.is_empty(): return nil()
		return concat(
			docvec("import * as ", alias, ' from "', path, '";', line())
			for path in sorted(self._modules)
			for alias in self._modules[path]
		)
