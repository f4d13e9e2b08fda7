from __future__ import annotations

import sys
import types

from typescope.modules import ModuleRegistry, StaticModuleSource, SysModulesSource, is_dynamic_module
from typescope.test_support.samples import editor_tools, generics, shapes


class _ListSource:
	def __init__(self, modules):
		self.items = list(modules)
		self.calls = 0

	def modules(self):
		self.calls += 1
		return list(self.items)


def test_dynamic_modules_have_neither_spec_nor_file():
	assert is_dynamic_module(types.ModuleType("scratch_mod"))
	assert not is_dynamic_module(shapes)
	assert not is_dynamic_module(sys)


def test_exclusion_markers_and_dynamic_modules_are_out_of_scope():
	dyn = types.ModuleType("scratch_mod")
	registry = ModuleRegistry(StaticModuleSource([shapes, editor_tools, dyn]), exclude_markers=("editor",))

	assert registry.in_scope_modules() == (shapes,)
	assert registry.all_modules() == (shapes, editor_tools, dyn)


def test_dynamic_modules_can_be_included():
	dyn = types.ModuleType("scratch_mod")
	registry = ModuleRegistry(StaticModuleSource([shapes, dyn]), include_dynamic=True)
	assert registry.in_scope_modules() == (shapes, dyn)


def test_snapshot_is_cached_until_clear():
	source = _ListSource([shapes])
	registry = ModuleRegistry(source)

	assert registry.in_scope_modules() == (shapes,)
	source.items.append(generics)
	assert registry.in_scope_modules() == (shapes,)
	assert source.calls == 1

	registry.clear()
	assert registry.in_scope_modules() == (shapes, generics)
	assert source.calls == 2


def test_module_named_sees_excluded_modules():
	registry = ModuleRegistry(StaticModuleSource([shapes, editor_tools]), exclude_markers=("editor",))
	assert registry.module_named(editor_tools.__name__) is editor_tools
	assert registry.module_named("no.such.module") is None


def test_sys_modules_source_reports_loaded_modules():
	loaded = list(SysModulesSource().modules())
	assert shapes in loaded
	assert sys in loaded
