"""
The built-in types, and how each one looks in TypeScript.
Some have native TypeScript equivalents. The rest are backed
by the runtime support library, so referring to one of them
means the declaration file must import that library.
"""
from .ontology import App, Type

RUNTIME_MODULE = ("gleam",)
RUNTIME_ALIAS = "$Gleam"

# name : TypeScript spelling
NATIVE = {
	"Nil": "null",
	"Int": "number",
	"Float": "number",
	"String": "string",
	"Bool": "boolean",
}

# name : arity
RUNTIME = {
	"BitString": 0,
	"UtfCodepoint": 0,
	"List": 1,
	"Result": 2,
}

def _built_in_type(name:str) -> App:
	assert name in NATIVE or RUNTIME[name] == 0, name
	return App(name)

nil_type = _built_in_type("Nil")
int_type = _built_in_type("Int")
float_type = _built_in_type("Float")
string_type = _built_in_type("String")
bool_type = _built_in_type("Bool")
bit_string_type = _built_in_type("BitString")
utf_codepoint_type = _built_in_type("UtfCodepoint")

def list_type(elem:Type) -> App:
	return App("List", (), (elem,))

def result_type(ok:Type, error:Type) -> App:
	return App("Result", (), (ok, error))
