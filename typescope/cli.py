#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
`typescope` command line: query a registry built over the current process.

Modules named with `-i/--import` are imported first so their types are in
scope. Names on the command line go through the type-name cache, so generic
spellings (`pkg.Box[int]`) work everywhere a type is expected.

With --json, prints one JSON document with an `exit_code` and the result;
otherwise prints one canonical type name per line.
"""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from typescope.config import ConfigError, RegistryConfig, load_config
from typescope.core.descriptors import ConstructorDescriptor
from typescope.core.names import canonical_name
from typescope.registry import TypeRegistry

Result = Tuple[int, Any]


def _names(types: List[Any]) -> List[str]:
	return [canonical_name(t) for t in types]


def _missing(name: str) -> Result:
	return 1, {"error": f"type '{name}' not found"}


def _cmd_resolve(registry: TypeRegistry, args: argparse.Namespace) -> Result:
	tp = registry.resolve(args.name)
	if tp is None:
		return _missing(args.name)
	return 0, canonical_name(tp)


def _cmd_base(registry: TypeRegistry, args: argparse.Namespace) -> Result:
	tp = registry.resolve(args.name)
	if tp is None:
		return _missing(args.name)
	return 0, canonical_name(registry.nearest_abstract_ancestor(tp))


def _cmd_derived(registry: TypeRegistry, args: argparse.Namespace) -> Result:
	tp = registry.resolve(args.name)
	if tp is None:
		return _missing(args.name)
	found = registry.find_derived_types(
		tp,
		include_assignable=args.assignable,
		include_abstract=args.abstract,
		include_interface=not args.no_interfaces,
	)
	return 0, _names(found)


def _cmd_subclasses(registry: TypeRegistry, args: argparse.Namespace) -> Result:
	tp = registry.resolve(args.name)
	if tp is None:
		return _missing(args.name)
	return 0, _names(registry.find_subclasses(tp))


def _cmd_implementers(registry: TypeRegistry, args: argparse.Namespace) -> Result:
	tp = registry.resolve(args.name)
	if tp is None:
		return _missing(args.name)
	return 0, _names(registry.find_interface_implementers(tp))


def _cmd_tagged(registry: TypeRegistry, args: argparse.Namespace) -> Result:
	tags = []
	for name in args.names:
		tp = registry.resolve(name)
		if tp is None:
			return _missing(name)
		tags.append(tp)
	return 0, _names(registry.find_types_with_any_tag(*tags))


def _cmd_ctor(registry: TypeRegistry, args: argparse.Namespace) -> Result:
	tp = registry.resolve(args.name)
	if tp is None:
		return _missing(args.name)
	supported = []
	for name in args.supported:
		st = registry.resolve(name)
		if st is None:
			return _missing(name)
		supported.append(st)
	ctor = registry.find_best_constructor(tp, supported)
	if ctor is None:
		return 1, {"error": f"no viable constructor for '{canonical_name(tp)}'"}
	return 0, _describe_ctor(ctor)


def _describe_ctor(ctor: ConstructorDescriptor) -> Dict[str, Any]:
	return {
		"declaring_type": canonical_name(ctor.declaring_type),
		"name": ctor.name,
		"kind": ctor.kind.name.lower(),
		"parameters": [{"name": p.name, "type": canonical_name(p.annotation)} for p in ctor.parameters],
	}


_COMMANDS: Dict[str, Callable[[TypeRegistry, argparse.Namespace], Result]] = {
	"resolve": _cmd_resolve,
	"base": _cmd_base,
	"derived": _cmd_derived,
	"subclasses": _cmd_subclasses,
	"implementers": _cmd_implementers,
	"tagged": _cmd_tagged,
	"ctor": _cmd_ctor,
}


def _build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="typescope", description="Discover and resolve types across loaded modules")
	parser.add_argument("--config", type=Path, help="TOML config file (a pyproject.toml with [tool.typescope] works)")
	parser.add_argument(
		"-i",
		"--import",
		dest="imports",
		action="append",
		default=[],
		metavar="MODULE",
		help="Import MODULE before querying (repeatable)",
	)
	parser.add_argument("--json", action="store_true", help="Emit a JSON document instead of plain lines")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
	sub = parser.add_subparsers(dest="command", required=True)

	p = sub.add_parser("resolve", help="Resolve a type name")
	p.add_argument("name")

	p = sub.add_parser("base", help="Nearest-to-root abstract ancestor of a type")
	p.add_argument("name")

	p = sub.add_parser("derived", help="Exported types deriving from a type")
	p.add_argument("name")
	p.add_argument("--assignable", action="store_true", help="Also include issubclass()-assignable types")
	p.add_argument("--abstract", action="store_true", help="Include abstract types")
	p.add_argument("--no-interfaces", action="store_true", help="Exclude interfaces")

	p = sub.add_parser("subclasses", help="Strict subclasses of a type")
	p.add_argument("name")

	p = sub.add_parser("implementers", help="Concrete implementers of an interface")
	p.add_argument("name")

	p = sub.add_parser("tagged", help="Types carrying any of the given tags")
	p.add_argument("names", nargs="+")

	p = sub.add_parser("ctor", help="Best constructor for a type given supported parameter types")
	p.add_argument("name")
	p.add_argument("--supported", action="append", default=[], metavar="TYPE", help="Supported parameter type (repeatable)")
	p.add_argument(
		"--managed-fallback",
		action="store_true",
		help="Accept managed-root parameters regardless of --supported",
	)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	parser = _build_parser()
	args = parser.parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)

	try:
		config = load_config(args.config) if args.config is not None else RegistryConfig()
	except ConfigError as exc:
		print(f"typescope: error: {exc}", file=sys.stderr)
		return 2
	if getattr(args, "managed_fallback", False):
		config = config.with_overrides(allow_managed_fallback=True)

	for module_name in args.imports:
		try:
			importlib.import_module(module_name)
		except ImportError as exc:
			print(f"typescope: error: cannot import '{module_name}': {exc}", file=sys.stderr)
			return 1

	registry = TypeRegistry(config)
	exit_code, result = _COMMANDS[args.command](registry, args)

	if args.json:
		print(json.dumps({"exit_code": exit_code, "result": result}, indent=2, sort_keys=True))
	elif exit_code != 0:
		print(f"typescope: error: {result['error']}", file=sys.stderr)
	elif isinstance(result, list):
		for line in result:
			print(line)
	elif isinstance(result, dict):
		params = ", ".join(f"{p['name']}: {p['type']}" for p in result["parameters"])
		print(f"{result['declaring_type']}.{result['name']}({params})")
	else:
		print(result)
	return exit_code


if __name__ == "__main__":
	sys.exit(main())
