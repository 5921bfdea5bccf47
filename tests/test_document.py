import unittest

from declgen.document import (
	LayoutError, render, text, nil, line, lines, break_, docvec, join, concat,
	wrap_args, wrap_generic_args, wrap_tuple,
)

class DocumentTests(unittest.TestCase):
	def test_flat_when_it_fits(self):
		self.assertEqual("(a, b)", render(wrap_args([text("a"), text("b")])))
		self.assertEqual("<A>", render(wrap_generic_args([text("A")])))
		self.assertEqual("[]", render(wrap_tuple([])))

	def test_broken_when_it_does_not(self):
		doc = docvec("f", wrap_args([text("alpha"), text("beta")]))
		self.assertEqual("f(\n  alpha,\n  beta\n)", render(doc, width=10))

	def test_inner_groups_decide_for_themselves(self):
		inner = wrap_args([text("x")])
		doc = docvec("g", wrap_args([text("long_argument_name"), inner]))
		self.assertEqual("g(\n  long_argument_name,\n  (x)\n)", render(doc, width=12))

	def test_breaks_outside_groups_are_flat(self):
		doc = docvec("A", break_("| ", " | "), "B")
		self.assertEqual("A | B", render(doc, width=1))

	def test_blank_lines_carry_no_indentation(self):
		doc = docvec("{", docvec(line(), "a;", line(), line(), "b;").nest(), line(), "}")
		self.assertEqual("{\n  a;\n\n  b;\n}", render(doc))

	def test_lines(self):
		self.assertEqual("a\n\nb", render(join([text("a"), text("b")], lines(2))))

	def test_hard_line_forbids_flat_group(self):
		doc = docvec("x", docvec(break_("", " "), "y", line(), "z").group())
		self.assertEqual("x\ny\nz", render(doc))

	def test_nil_and_concat(self):
		self.assertEqual("", render(nil()))
		self.assertEqual("ab", render(concat(["a", text("b")])))

	def test_malformed_documents(self):
		with self.assertRaises(LayoutError): text(None)
		with self.assertRaises(LayoutError): text("two\nlines")
		with self.assertRaises(LayoutError): lines(0)
		with self.assertRaises(LayoutError): docvec("a", 3)
		with self.assertRaises(LayoutError): render("not a document")

if __name__ == '__main__':
	unittest.main()
