# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
typescope: runtime type discovery and dynamic resolution.

Layers:
  core: markers (tags, interfaces, factory constructors), names, the
        metadata-provider protocol
  modules / type_names / hierarchy: cached module snapshot, name resolution,
        ancestor chains and base-type resolution
  discovery / constructors / defaults / binding: the query surface
  registry: TypeRegistry wiring it all together with clear()/rebuild()

The CLI entrypoint is `typescope.cli:main`.
"""

from typescope.binding import BindingMap, FieldMember, PropertyMember, data_type, find_member, get_value, set_value
from typescope.config import RegistryConfig, load_config
from typescope.constructors import ConstructorResolver, InstantiationError, instantiate
from typescope.core.descriptors import ConstructorDescriptor, ConstructorKind, ParameterInfo
from typescope.core.markers import Tag, constructor, interface, tagged
from typescope.core.metadata import MetadataProvider, PythonMetadataProvider, TypeLoadError
from typescope.defaults import DefaultValueError, OpenGenericError, default_value
from typescope.discovery import NotAnInterfaceError, TypeDiscovery
from typescope.hierarchy import are_interchangeable, is_same_or_subclass
from typescope.modules import ModuleRegistry, StaticModuleSource, SysModulesSource
from typescope.registry import TypeRegistry, default_registry, set_default_registry
from typescope.type_names import TypeNameSyntaxError, parse_type_name

__all__ = [
	"BindingMap",
	"FieldMember",
	"PropertyMember",
	"data_type",
	"find_member",
	"get_value",
	"set_value",
	"RegistryConfig",
	"load_config",
	"ConstructorResolver",
	"InstantiationError",
	"instantiate",
	"ConstructorDescriptor",
	"ConstructorKind",
	"ParameterInfo",
	"Tag",
	"constructor",
	"interface",
	"tagged",
	"MetadataProvider",
	"PythonMetadataProvider",
	"TypeLoadError",
	"DefaultValueError",
	"OpenGenericError",
	"default_value",
	"NotAnInterfaceError",
	"TypeDiscovery",
	"are_interchangeable",
	"is_same_or_subclass",
	"ModuleRegistry",
	"StaticModuleSource",
	"SysModulesSource",
	"TypeRegistry",
	"default_registry",
	"set_default_registry",
	"TypeNameSyntaxError",
	"parse_type_name",
]
