"""
typescope.core: shared shapes used by every resolver.

Modules:
  - markers: Tag base class and the @tagged/@interface/@constructor markers
  - names: canonical type names and generic-shape helpers
  - descriptors: ConstructorDescriptor/ParameterInfo
  - metadata: MetadataProvider protocol and the default Python provider
"""

__all__ = [
	"markers",
	"names",
	"descriptors",
	"metadata",
]
