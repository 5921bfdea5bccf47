import unittest

from declgen.document import render
from declgen.imports import Imports, import_path, namespace_alias, module_name

class ReferenceResolverTests(unittest.TestCase):
	def test_namespace_alias(self):
		self.assertEqual("$Gleam", namespace_alias(["gleam"]))
		self.assertEqual("$MyAppWebServer", namespace_alias(["my_app", "web_server"]))
		self.assertEqual("MyAppWebServer", module_name(["my_app", "web_server"]))

	def test_same_package_from_top_level(self):
		self.assertEqual("./other.d.ts", import_path(("app",), "pkg", "pkg", ("other",)))
		self.assertEqual("./x/y.d.ts", import_path(("app",), "pkg", "pkg", ("x", "y")))

	def test_same_package_from_deeper(self):
		self.assertEqual("../x/y.d.ts", import_path(("a", "b"), "pkg", "pkg", ("x", "y")))
		self.assertEqual("../../x/y.d.ts", import_path(("a", "b", "c"), "pkg", "pkg", ("x", "y")))

	def test_empty_package_is_local(self):
		self.assertEqual("./gleam.d.ts", import_path(("app",), "pkg", "", ("gleam",)))
		self.assertEqual("../gleam.d.ts", import_path(("a", "b"), "pkg", "", ("gleam",)))

	def test_other_package(self):
		self.assertEqual("../../lib/dist/lib/util.d.ts", import_path(("app",), "mine", "lib", ("lib", "util")))
		self.assertEqual("../../../lib/dist/lib/util.d.ts", import_path(("a", "b"), "mine", "lib", ("lib", "util")))

class ImportRegistryTests(unittest.TestCase):
	def test_each_path_once(self):
		imports = Imports()
		self.assertTrue(imports.is_empty())
		imports.register_module("./x.d.ts", ["$X"])
		imports.register_module("./x.d.ts", ["$X"])
		self.assertEqual(1, len(imports))
		self.assertIn("./x.d.ts", imports)
		self.assertEqual(("$X",), imports.aliases("./x.d.ts"))

	def test_layout_is_ordered_by_path(self):
		imports = Imports()
		imports.register_module("./zebra.d.ts", ["$Zebra"])
		imports.register_module("./apple.d.ts", ["$Apple"])
		self.assertEqual(
			'import * as $Apple from "./apple.d.ts";\n'
			'import * as $Zebra from "./zebra.d.ts";\n',
			render(imports.into_doc()),
		)

	def test_empty_layout(self):
		self.assertEqual("", render(Imports().into_doc()))

if __name__ == '__main__':
	unittest.main()
