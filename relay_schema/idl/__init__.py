# SDL type registry, connection type generation and schema building
from relay_schema.idl.registry import SchemaDefinitionError, TypeDefinitionRegistry, TypeRedefinitionError
from relay_schema.idl.connection_types import ConnectionTypeGenerator

__all__ = [
    'ConnectionTypeGenerator', 'SchemaDefinitionError', 'TypeDefinitionRegistry', 'TypeRedefinitionError',
]
