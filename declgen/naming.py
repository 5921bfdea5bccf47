"""
Making names safe to use as TypeScript identifiers,
and making up names for type variables.

Values and types live in separate name-spaces in the source language,
but a class declaration in TypeScript occupies both at once. A constructor
commonly shares its name with its own type, so every user-defined nominal
type gets a "$" on the end. Constructors keep their plain names.
"""
import re

# Keywords, reserved words, and a couple of globals best left alone.
# `then` would turn a module into a thenable when imported dynamically.
RESERVED_WORDS = frozenset([
	"await", "arguments", "break", "case", "catch", "class", "const", "continue",
	"debugger", "default", "delete", "do", "else", "enum", "export", "extends",
	"eval", "false", "finally", "for", "function", "if", "implements", "import",
	"in", "instanceof", "interface", "let", "new", "null", "package", "private",
	"protected", "public", "return", "static", "super", "switch", "this", "throw",
	"true", "try", "typeof", "var", "void", "while", "with", "yield",
	"undefined", "then",
])

# Names with special meaning in TypeScript's type syntax.
RESERVED_TYPE_NAMES = frozenset([
	"any", "boolean", "constructor", "declare", "get", "module", "require",
	"number", "set", "string", "symbol", "type", "from", "of",
])

ESCAPE_SUFFIX = "$"
TYPE_ESCAPE_SUFFIX = "_"
TYPE_SUFFIX = "$"

_UNSUITABLE = re.compile(r"[^A-Za-z0-9_$]")
_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z0-9]+|[0-9]+")

def safe_name(raw:str) -> str:
	""" For value-level names: constants, functions, parameters, fields, classes. """
	if raw in RESERVED_WORDS:
		return raw + ESCAPE_SUFFIX
	return _UNSUITABLE.sub(ESCAPE_SUFFIX, raw)

def safe_type_name(raw:str) -> str:
	if raw in RESERVED_TYPE_NAMES:
		return raw + TYPE_ESCAPE_SUFFIX
	return safe_name(raw)

def type_name(raw:str) -> str:
	""" The surface name of a user-defined nominal type. """
	return safe_type_name(upper_camel(raw)) + TYPE_SUFFIX

def upper_camel(raw:str) -> str:
	return "".join(w[0].upper() + w[1:].lower() for w in _WORD.findall(raw))

def type_variable_name(id:int) -> str:
	"""
	All type variables with the same id must end up with the same name.
	This is base-26 in the letters A-Z, except that the leading letter
	of a multi-letter name counts from one: 25 is Z, but 26 is AA.
	"""
	assert id >= 0, id
	if id < 26:
		return chr(65 + id)
	letters = []
	while id >= 26:
		letters.append(chr(65 + id % 26))
		id //= 26
	letters.append(chr(64 + id))
	return "".join(reversed(letters))
