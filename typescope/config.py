# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Registry configuration.

Settings come from code (`RegistryConfig(...)`) or from a TOML file, either a
dedicated file with top-level keys or a `pyproject.toml` with a
`[tool.typescope]` table:

	[tool.typescope]
	exclude_markers = ["editor", "firstpass"]
	preferred_modules = ["__main__", "builtins"]
	include_dynamic = false
	managed_root = "myhost.objects.ManagedObject"
	allow_managed_fallback = true
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

DEFAULT_EXCLUDE_MARKERS: Tuple[str, ...] = ("editor", "firstpass")
DEFAULT_PREFERRED_MODULES: Tuple[str, ...] = ("__main__", "builtins")


class ConfigError(ValueError):
	pass


@dataclass(frozen=True)
class RegistryConfig:
	# Modules whose name contains any marker are out of scope.
	exclude_markers: Tuple[str, ...] = DEFAULT_EXCLUDE_MARKERS
	# Modules tried, in order, before scanning everything for a bare type name.
	preferred_modules: Tuple[str, ...] = DEFAULT_PREFERRED_MODULES
	include_dynamic: bool = False
	# Class, or qualified name resolved through the type-name cache.
	managed_root: Union[type, str, None] = None
	# Accept managed-root parameters regardless of the supported type set.
	allow_managed_fallback: bool = False

	def with_overrides(self, **changes: Any) -> "RegistryConfig":
		return replace(self, **changes)


def load_config(path: Path) -> RegistryConfig:
	"""Load a RegistryConfig from a TOML file."""
	if not path.exists():
		raise ConfigError(f"config file not found: {path}")
	with open(path, "rb") as f:
		try:
			data = tomllib.load(f)
		except tomllib.TOMLDecodeError as exc:
			raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
	tool = data.get("tool")
	if isinstance(tool, dict) and "typescope" in tool:
		data = tool["typescope"]
	elif "tool" in data or "project" in data:
		# A pyproject without our table: defaults.
		return RegistryConfig()
	return config_from_mapping(data)


def config_from_mapping(data: Mapping[str, Any]) -> RegistryConfig:
	known = {f.name for f in fields(RegistryConfig)}
	unknown = sorted(set(data) - known)
	if unknown:
		raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
	values: dict[str, Any] = {}
	for key in ("exclude_markers", "preferred_modules"):
		if key in data:
			values[key] = _str_tuple(key, data[key])
	for key in ("include_dynamic", "allow_managed_fallback"):
		if key in data:
			if not isinstance(data[key], bool):
				raise ConfigError(f"'{key}' must be a boolean")
			values[key] = data[key]
	if "managed_root" in data:
		values["managed_root"] = _optional_str("managed_root", data["managed_root"])
	return RegistryConfig(**values)


def _str_tuple(key: str, value: Any) -> Tuple[str, ...]:
	if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
		raise ConfigError(f"'{key}' must be a list of strings")
	return tuple(value)


def _optional_str(key: str, value: Any) -> Optional[str]:
	if value == "":
		return None
	if not isinstance(value, str):
		raise ConfigError(f"'{key}' must be a qualified type name")
	return value


__all__ = [
	"ConfigError",
	"RegistryConfig",
	"DEFAULT_EXCLUDE_MARKERS",
	"DEFAULT_PREFERRED_MODULES",
	"load_config",
	"config_from_mapping",
]
