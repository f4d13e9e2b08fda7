# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type-name parsing and the memoizing name -> type cache.

Names are parsed with a small lark grammar (`type_name.lark`) into
`TypeNameExpr` trees, so generic spellings such as `pkg.Box[int]` or
`builtins.dict[str, pkg.Thing]` resolve to parameterized aliases.

Resolution order for the head of a name:
  1. the cache (hits and misses alike),
  2. the preferred modules, in configured order,
  3. a linear scan of the in-scope modules.
The first match wins; two modules exporting the same simple name are not
reported as ambiguous. Every outcome, including "not found", is memoized
until `clear()`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Optional, Sequence, Tuple, get_origin

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from typescope.modules import ModuleRegistry

logger = logging.getLogger("typescope.type_names")

_GRAMMAR_PATH = Path(__file__).with_name("type_name.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	maybe_placeholders=False,
)


class TypeNameSyntaxError(ValueError):
	"""Malformed type-name expression."""

	def __init__(self, message: str, *, text: str, column: Optional[int] = None) -> None:
		super().__init__(message)
		self.text = text
		self.column = column


@dataclass(frozen=True)
class TypeNameExpr:
	"""
	Parsed type name.

	`module` is set only for the explicit `module:Qual.Name` spelling; `path`
	holds the dotted parts after it (or the whole dotted name otherwise).
	"""

	path: Tuple[str, ...]
	module: Optional[str] = None
	args: Tuple["TypeNameExpr", ...] = ()

	def __str__(self) -> str:
		head = ".".join(self.path)
		if self.module is not None:
			head = f"{self.module}:{head}"
		if self.args:
			head += "[" + ", ".join(str(a) for a in self.args) + "]"
		return head


def parse_type_name(text: str) -> TypeNameExpr:
	try:
		tree = _PARSER.parse(text)
	except UnexpectedInput as exc:
		raise TypeNameSyntaxError(
			f"invalid type name {text!r}: {exc}", text=text, column=getattr(exc, "column", None)
		) from exc
	return _build_type_name(tree.children[0])


def _build_type_name(node: Tree) -> TypeNameExpr:
	qualified = node.children[0]
	dotted_parts = [_dotted(child) for child in qualified.children]
	args: Tuple[TypeNameExpr, ...] = ()
	if len(node.children) > 1:
		args = tuple(_build_type_name(child) for child in node.children[1].children)
	if len(dotted_parts) == 2:
		return TypeNameExpr(path=dotted_parts[1], module=".".join(dotted_parts[0]), args=args)
	return TypeNameExpr(path=dotted_parts[0], args=args)


def _dotted(node: Tree) -> Tuple[str, ...]:
	return tuple(str(tok) for tok in node.children if isinstance(tok, Token))


class TypeNameCache:
	"""Name -> type resolution with permanent (until `clear()`) memoization."""

	def __init__(self, modules: ModuleRegistry, *, preferred_modules: Sequence[str] = ()) -> None:
		self._modules = modules
		self._preferred = tuple(preferred_modules)
		self._cache: Dict[str, Any] = {}

	def resolve(self, name: str) -> Any:
		"""Return the class (or parameterized alias) named `name`, or None."""
		if name in self._cache:
			return self._cache[name]
		try:
			expr = parse_type_name(name)
		except TypeNameSyntaxError as exc:
			logger.warning({"evt": "type_name_invalid", "name": name, "error": str(exc)})
			self._cache[name] = None
			return None
		resolved = self._resolve_expr(expr)
		self._cache[name] = resolved
		if resolved is None:
			logger.debug({"evt": "type_name_missing", "name": name})
		return resolved

	def cached_names(self) -> List[str]:
		return list(self._cache)

	def clear(self) -> None:
		self._cache.clear()

	def _resolve_expr(self, expr: TypeNameExpr) -> Any:
		head = self._resolve_head(expr)
		if head is None or not expr.args:
			return head
		args = [self.resolve(str(arg)) for arg in expr.args]
		if any(arg is None for arg in args):
			return None
		try:
			return head[tuple(args)] if len(args) > 1 else head[args[0]]
		except TypeError as exc:
			# Head is not subscriptable, or the arity does not match.
			logger.debug({"evt": "type_name_not_generic", "name": str(expr), "error": str(exc)})
			return None

	def _resolve_head(self, expr: TypeNameExpr) -> Any:
		if expr.module is not None:
			module = self._modules.module_named(expr.module)
			return _lookup_qualname(module, expr.path) if module is not None else None
		for module_name in self._preferred:
			module = self._modules.module_named(module_name)
			if module is None:
				continue
			found = _lookup_in_module(module, expr.path)
			if found is not None:
				return found
		for module in self._modules.in_scope_modules():
			found = _lookup_in_module(module, expr.path)
			if found is not None:
				return found
		return None


def _lookup_in_module(module: ModuleType, path: Tuple[str, ...]) -> Any:
	mod_parts = tuple(module.__name__.split("."))
	if len(path) > len(mod_parts) and path[: len(mod_parts)] == mod_parts:
		# Fully qualified: re-exports count.
		return _lookup_qualname(module, path[len(mod_parts):])
	found = _lookup_qualname(module, path)
	# Bare names only match types defined in the module itself.
	if found is not None and getattr(found, "__module__", None) != module.__name__:
		return None
	return found


def _lookup_qualname(module: ModuleType, path: Tuple[str, ...]) -> Any:
	obj: Any = module
	for part in path:
		try:
			obj = getattr(obj, part, None)
		except ImportError:
			# Lazy modules that import on attribute access.
			return None
		if obj is None:
			return None
	if isinstance(obj, type) or get_origin(obj) is not None:
		return obj
	return None


__all__ = ["TypeNameSyntaxError", "TypeNameExpr", "parse_type_name", "TypeNameCache"]
