import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Set, Union

from graphql import GraphQLSchema, build_ast_schema, print_schema

from relay_schema.core.config import Settings, get_settings
from relay_schema.idl.connection_types import ConnectionTypeGenerator
from relay_schema.idl.registry import SchemaDefinitionError, TypeDefinitionRegistry

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_FILE_EXTENSIONS = (".graphqls", ".graphql", ".gqls", ".gql")

RegistryConfigurer = Callable[[TypeDefinitionRegistry], TypeDefinitionRegistry]


class SchemaResourceError(SchemaDefinitionError):
    """Raised when schema resources are missing or empty."""


@dataclass
class SchemaSource:
    """A built schema together with the registry it was built from."""
    schema: GraphQLSchema
    registry: TypeDefinitionRegistry
    generated_type_names: List[str] = field(default_factory=list)
    _generated: Set[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._generated = set(self.generated_type_names)

    def print_schema(self) -> str:
        return print_schema(self.schema)

    def is_generated(self, type_name: str) -> bool:
        return type_name in self._generated


class SchemaResourceBuilder:
    """
    Collects SDL resources, merges them into one TypeDefinitionRegistry,
    applies registry configurers and builds a GraphQLSchema.

    Example:
        source = (
            SchemaResourceBuilder()
            .schema_resources("schema")
            .generate_connection_types()
            .build()
        )
    """

    def __init__(self, file_extensions: Sequence[str] = DEFAULT_SCHEMA_FILE_EXTENSIONS):
        self._file_extensions = tuple(ext.lower() for ext in file_extensions)
        self._resources: List[Path] = []
        self._texts: List[str] = []
        self._configurers: List[RegistryConfigurer] = []

    def schema_resources(self, *paths: Union[str, Path]) -> "SchemaResourceBuilder":
        """Add schema files, or directories to scan recursively for schema files."""
        self._resources.extend(Path(path) for path in paths)
        return self

    def schema_text(self, sdl: str) -> "SchemaResourceBuilder":
        self._texts.append(sdl)
        return self

    def configure_type_definition_registry(self, configurer: RegistryConfigurer) -> "SchemaResourceBuilder":
        """
        Add a function to apply to the merged registry before the schema is
        built. Configurers run in the order they were added and must return
        the registry to pass on.
        """
        self._configurers.append(configurer)
        return self

    def generate_connection_types(self) -> "SchemaResourceBuilder":
        return self.configure_type_definition_registry(ConnectionTypeGenerator().generate_connection_types)

    def build(self) -> SchemaSource:
        registry = self._load_registry()
        original_names = set(registry)

        for configurer in self._configurers:
            registry = configurer(registry)

        generated = [name for name in registry if name not in original_names]
        if generated:
            logger.info(f"Registry configurers added {len(generated)} type(s): {', '.join(generated)}")

        schema = build_ast_schema(registry.to_document())
        return SchemaSource(schema=schema, registry=registry, generated_type_names=generated)

    def _load_registry(self) -> TypeDefinitionRegistry:
        registry = TypeDefinitionRegistry()
        files = list(self._schema_files())
        if not files and not self._texts:
            raise SchemaResourceError("No schema resources found")

        for path in files:
            logger.debug(f"Loading schema file {path}")
            registry.merge(TypeDefinitionRegistry.parse(path.read_text(encoding="utf-8")))
        for text in self._texts:
            registry.merge(TypeDefinitionRegistry.parse(text))

        logger.info(f"Loaded {len(registry)} type definition(s) from {len(files) + len(self._texts)} resource(s)")
        return registry

    def _schema_files(self) -> Iterable[Path]:
        for resource in self._resources:
            if resource.is_dir():
                for path in sorted(resource.rglob("*")):
                    if path.is_file() and path.suffix.lower() in self._file_extensions:
                        yield path
            elif resource.is_file():
                yield resource
            else:
                raise SchemaResourceError(f"Schema resource not found: {resource}")


def build_schema_source(settings: Optional[Settings] = None) -> SchemaSource:
    """Build a SchemaSource from the configured schema locations."""
    settings = settings or get_settings()
    builder = SchemaResourceBuilder(file_extensions=settings.SCHEMA_FILE_EXTENSIONS)
    builder.schema_resources(*settings.SCHEMA_LOCATIONS)
    if settings.GENERATE_CONNECTION_TYPES:
        builder.generate_connection_types()
    return builder.build()


@lru_cache()
def get_schema_source() -> SchemaSource:
    return build_schema_source(get_settings())
