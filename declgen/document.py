"""
A small document algebra in the Wadler/Lindig tradition, and a renderer for it.

The emitter builds one of these rather than a string, so that long signatures
can break onto several lines when they will not fit. A group is laid out flat
if the whole of it fits in the remaining width; otherwise each break directly
inside it becomes a newline at the current nesting depth. Breaks outside of
any group are laid out flat.
"""
from typing import Iterable
from boozetools.support.foundation import Visitor

INDENT = 2
DEFAULT_WIDTH = 80

class LayoutError(Exception):
	""" Somebody tried to build a document which cannot be laid out. """

class Document:
	def append(self, other:"Document") -> "Document":
		return Concat((self, other))
	def nest(self, indent:int=INDENT) -> "Document":
		return Nest(indent, self)
	def group(self) -> "Document":
		return Group(self)
	def surround(self, opening:str, closing:str) -> "Document":
		return Concat((Text(opening), self, Text(closing)))

class Text(Document):
	def __init__(self, text:str):
		if not isinstance(text, str): raise LayoutError("Text must be a string, not %r" % (text,))
		if "\n" in text: raise LayoutError("Use line() for newlines: %r" % text)
		self.text = text
	def __repr__(self): return "Text(%r)" % self.text

class Line(Document):
	""" A hard newline. A group containing one can never be flat. """
	def __init__(self, count:int=1):
		if count < 1: raise LayoutError("Line count must be positive, not %r" % count)
		self.count = count

class Break(Document):
	""" A soft newline: `unbroken` when laid out flat, `broken` then a newline otherwise. """
	def __init__(self, broken:str, unbroken:str):
		self.broken, self.unbroken = broken, unbroken

class Nest(Document):
	def __init__(self, indent:int, doc:Document):
		self.indent, self.doc = indent, doc

class Group(Document):
	def __init__(self, doc:Document):
		self.doc = doc

class Concat(Document):
	def __init__(self, docs:Iterable[Document]):
		self.docs = tuple(docs)
		for d in self.docs:
			if not isinstance(d, Document): raise LayoutError("Not a document: %r" % (d,))

#########################

def text(s:str) -> Document: return Text(s)
def nil() -> Document: return Concat(())
def line() -> Document: return Line(1)
def lines(n:int) -> Document: return Line(n)
def break_(broken:str, unbroken:str) -> Document: return Break(broken, unbroken)

def concat(docs:Iterable) -> Document:
	return Concat(text(d) if isinstance(d, str) else d for d in docs)

def docvec(*docs) -> Document:
	return concat(docs)

def join(docs:Iterable[Document], separator:Document) -> Document:
	parts = []
	for d in docs:
		if parts: parts.append(separator)
		parts.append(d)
	return Concat(parts)

def _wrap(docs:Iterable[Document], opening:str, closing:str) -> Document:
	inner = break_("", "").append(join(docs, break_(",", ", "))).nest(INDENT)
	return inner.append(break_("", "")).surround(opening, closing).group()

def wrap_args(docs:Iterable[Document]) -> Document:
	return _wrap(docs, "(", ")")

def wrap_generic_args(docs:Iterable[Document]) -> Document:
	return _wrap(docs, "<", ">")

def wrap_tuple(docs:Iterable[Document]) -> Document:
	return _wrap(docs, "[", "]")

#########################

class _FlatWidth(Visitor):
	""" Width when laid out all on one line, or None if a hard line forbids it. """
	def visit_Text(self, d:Text): return len(d.text)
	def visit_Line(self, d:Line): return None
	def visit_Break(self, d:Break): return len(d.unbroken)
	def visit_Nest(self, d:Nest): return self.visit(d.doc)
	def visit_Group(self, d:Group): return self.visit(d.doc)
	def visit_Concat(self, d:Concat):
		total = 0
		for each in d.docs:
			w = self.visit(each)
			if w is None: return None
			total += w
		return total

_FLAT_WIDTH = _FlatWidth()

class _Renderer(Visitor):
	def __init__(self, width:int):
		self._width = width
		self._out = []
		self._column = 0
		self._pending = 0
		self._stack = []

	def run(self, doc:Document) -> str:
		self._stack.append((doc, 0, True))
		while self._stack:
			doc, indent, flat = self._stack.pop()
			self.visit(doc, indent, flat)
		return "".join(self._out)

	def _write(self, s:str):
		if not s: return
		if self._pending:
			# Indentation is deferred so that blank lines carry none.
			self._out.append(" " * self._pending)
			self._pending = 0
		self._out.append(s)
		self._column += len(s)

	def _newline(self, indent:int, count:int=1):
		self._out.append("\n" * count)
		self._column = self._pending = indent

	def visit_Text(self, d:Text, indent, flat): self._write(d.text)
	def visit_Line(self, d:Line, indent, flat): self._newline(indent, d.count)
	def visit_Break(self, d:Break, indent, flat):
		if flat: self._write(d.unbroken)
		else:
			self._write(d.broken)
			self._newline(indent)
	def visit_Nest(self, d:Nest, indent, flat):
		self._stack.append((d.doc, indent + d.indent, flat))
	def visit_Group(self, d:Group, indent, flat):
		# Every group decides for itself, whatever surrounds it.
		w = _FLAT_WIDTH.visit(d.doc)
		flat = w is not None and self._column + w <= self._width
		self._stack.append((d.doc, indent, flat))
	def visit_Concat(self, d:Concat, indent, flat):
		for each in reversed(d.docs):
			self._stack.append((each, indent, flat))

def render(doc:Document, width:int=DEFAULT_WIDTH) -> str:
	if not isinstance(doc, Document): raise LayoutError("Not a document: %r" % (doc,))
	return _Renderer(width).run(doc)
