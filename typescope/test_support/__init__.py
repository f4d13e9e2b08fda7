# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared helpers for typescope tests.

`samples` holds small, importable class hierarchies (real modules with a
spec and a file, so the module registry keeps them in scope).
"""

from __future__ import annotations

from types import ModuleType
from typing import Any

from typescope.config import RegistryConfig
from typescope.modules import StaticModuleSource
from typescope.registry import TypeRegistry


def make_registry(*modules: ModuleType, **overrides: Any) -> TypeRegistry:
	"""Registry over exactly `modules`, with config overrides applied."""
	config = RegistryConfig().with_overrides(**overrides)
	return TypeRegistry(config, source=StaticModuleSource(modules))


__all__ = ["make_registry"]
