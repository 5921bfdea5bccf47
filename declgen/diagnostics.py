"""
Where the emitter tells somebody about things.

Nothing a user writes can go wrong in here: the module has already passed
the type checker. What can go wrong is an upstream bug leaving something
half-finished in the typed tree. Those which would make the output nonsense
are exceptions. Those which leave a usable (if imprecise) declaration
behind get filed here, so that a developer can look into them later.
"""
import sys
from typing import Any, Sequence

class Report:
	"""
	Collects internal problems for a developer to look at later.
	Filing an issue never stops emission, however many there are.
	"""
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	@property
	def issues(self): return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print("The declaration emitter noticed some internal problems.", file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(), file=sys.stderr)
		sys.stderr.flush()

	# Methods the type printer calls:
	def unbound_variable(self, module:Sequence[str], id:int):
		intro = "An unbound type variable survived type checking."
		detail = "In module %s, variable %d was printed as `any`." % ("/".join(module), id)
		self.issue(Pic(intro, [detail], ["This is a bug in the type checker, not in your program."]))

class Pic:
	def __init__(self, intro:str, details:list[str], footer=()):
		self._intro, self._details, self._footer = intro, details, footer
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(self._details)
		lines.extend(self._footer)
		return '\n'.join(lines)
	def __repr__(self): return "<Pic %r>" % self._intro
