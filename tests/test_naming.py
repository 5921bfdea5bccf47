import unittest

from declgen.naming import (
	RESERVED_WORDS, RESERVED_TYPE_NAMES,
	safe_name, safe_type_name, type_name, upper_camel, type_variable_name,
)

class SafeNameTests(unittest.TestCase):
	def test_reserved_words_get_a_suffix(self):
		for word, expect in [("class", "class$"), ("then", "then$"), ("undefined", "undefined$"), ("delete", "delete$")]:
			with self.subTest(word):
				self.assertEqual(expect, safe_name(word))

	def test_ordinary_names_pass_through(self):
		for word in ["radius", "max_int", "Circle", "x0", "_private"]:
			with self.subTest(word):
				self.assertEqual(word, safe_name(word))

	def test_unsuitable_characters_are_escaped(self):
		self.assertEqual("a$b", safe_name("a-b"))

	def test_never_returns_a_reserved_word(self):
		for word in sorted(RESERVED_WORDS | RESERVED_TYPE_NAMES):
			with self.subTest(word):
				self.assertNotIn(safe_name(word), RESERVED_WORDS)
				self.assertNotIn(safe_type_name(word), RESERVED_WORDS | RESERVED_TYPE_NAMES)

	def test_idempotent(self):
		for word in sorted(RESERVED_WORDS | RESERVED_TYPE_NAMES) + ["radius", "a-b", "Shape"]:
			with self.subTest(word):
				once = safe_name(word)
				self.assertEqual(once, safe_name(once))
				once = safe_type_name(word)
				self.assertEqual(once, safe_type_name(once))

class TypeNameTests(unittest.TestCase):
	def test_type_level_reserved_names(self):
		self.assertEqual("any_", safe_type_name("any"))
		self.assertEqual("string_", safe_type_name("string"))
		self.assertEqual("class$", safe_type_name("class"))
		self.assertEqual("Shape", safe_type_name("Shape"))

	def test_nominal_types_always_get_the_suffix(self):
		self.assertEqual("Shape$", type_name("Shape"))
		self.assertEqual("Shape$", type_name("shape"))
		self.assertEqual("HttpServer$", type_name("HTTPServer"))

	def test_upper_camel(self):
		for raw, expect in [
			("gleam", "Gleam"),
			("my_module", "MyModule"),
			("web_server2", "WebServer2"),
			("HTTPServer", "HttpServer"),
			("Circle", "Circle"),
		]:
			with self.subTest(raw):
				self.assertEqual(expect, upper_camel(raw))

class TypeVariableNameTests(unittest.TestCase):
	def test_known_values(self):
		for id, expect in [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA"), (676, "AAA")]:
			with self.subTest(id):
				self.assertEqual(expect, type_variable_name(id))

	def test_injective_and_deterministic(self):
		names = [type_variable_name(i) for i in range(5000)]
		self.assertEqual(len(names), len(set(names)))
		self.assertEqual(names, [type_variable_name(i) for i in range(5000)])
		for name in names:
			self.assertTrue(name.isalpha() and name.isupper(), name)

if __name__ == '__main__':
	unittest.main()
