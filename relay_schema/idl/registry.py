from typing import Dict, Iterator, List, Optional, Union

from graphql import parse
from graphql.language import ast as gql_ast


class SchemaDefinitionError(ValueError):
    """Raised when schema definitions cannot be registered or built."""


class TypeRedefinitionError(SchemaDefinitionError):
    """Raised when a name is registered twice."""

    def __init__(self, name: str, kind: str = "type"):
        self.name = name
        self.kind = kind
        super().__init__(f"{kind.capitalize()} '{name}' is already defined")


SDLDefinition = Union[
    gql_ast.TypeDefinitionNode,
    gql_ast.TypeExtensionNode,
    gql_ast.SchemaDefinitionNode,
    gql_ast.SchemaExtensionNode,
    gql_ast.DirectiveDefinitionNode,
]


class TypeDefinitionRegistry:
    """
    Mutable collection of the SDL definitions that make up a schema under
    construction.

    Type definitions are keyed by their unique name and kept in registration
    order. Type extensions, schema definitions and directive definitions are
    tracked separately and are not part of ``types()``.

    A registry is not thread-safe: callers must serialize access to a single
    instance, including across a read-then-write pass such as connection type
    generation.
    """

    def __init__(self):
        self._types: Dict[str, gql_ast.TypeDefinitionNode] = {}
        self._type_extensions: List[gql_ast.TypeExtensionNode] = []
        self._directives: Dict[str, gql_ast.DirectiveDefinitionNode] = {}
        self._schema_definition: Optional[gql_ast.SchemaDefinitionNode] = None
        self._schema_extensions: List[gql_ast.SchemaExtensionNode] = []

    @classmethod
    def parse(cls, source: str) -> "TypeDefinitionRegistry":
        """
        Parse SDL text into a new registry.

        Raises GraphQLSyntaxError for malformed text and SchemaDefinitionError
        if the document contains operations or fragments.
        """
        registry = cls()
        document = parse(source, no_location=True)
        for definition in document.definitions:
            if isinstance(definition, gql_ast.ExecutableDefinitionNode):
                raise SchemaDefinitionError(
                    f"Executable definitions are not allowed in schema files: {definition.kind}"
                )
            registry.add(definition)
        return registry

    def add(self, definition: SDLDefinition) -> None:
        if isinstance(definition, gql_ast.TypeExtensionNode):
            self._type_extensions.append(definition)
        elif isinstance(definition, gql_ast.TypeDefinitionNode):
            name = definition.name.value
            if name in self._types:
                raise TypeRedefinitionError(name)
            self._types[name] = definition
        elif isinstance(definition, gql_ast.DirectiveDefinitionNode):
            name = definition.name.value
            if name in self._directives:
                raise TypeRedefinitionError(name, kind="directive")
            self._directives[name] = definition
        elif isinstance(definition, gql_ast.SchemaExtensionNode):
            self._schema_extensions.append(definition)
        elif isinstance(definition, gql_ast.SchemaDefinitionNode):
            if self._schema_definition is not None:
                raise TypeRedefinitionError("schema", kind="schema definition")
            self._schema_definition = definition
        else:
            raise SchemaDefinitionError(f"Unsupported definition: {definition.kind}")

    def merge(self, other: "TypeDefinitionRegistry") -> "TypeDefinitionRegistry":
        """Add every definition of ``other`` to this registry and return it."""
        for definition in other.definitions():
            self.add(definition)
        return self

    def types(self) -> Dict[str, gql_ast.TypeDefinitionNode]:
        return dict(self._types)

    def get_type(self, name: str) -> Optional[gql_ast.TypeDefinitionNode]:
        return self._types.get(name)

    def type_extensions(self) -> List[gql_ast.TypeExtensionNode]:
        return list(self._type_extensions)

    def directive_definitions(self) -> Dict[str, gql_ast.DirectiveDefinitionNode]:
        return dict(self._directives)

    @property
    def schema_definition(self) -> Optional[gql_ast.SchemaDefinitionNode]:
        return self._schema_definition

    def definitions(self) -> List[SDLDefinition]:
        # Schema first, then directives, types and extensions, so that the
        # document reads like a hand-written one when printed.
        definitions: List[SDLDefinition] = []
        if self._schema_definition is not None:
            definitions.append(self._schema_definition)
        definitions.extend(self._schema_extensions)
        definitions.extend(self._directives.values())
        definitions.extend(self._types.values())
        definitions.extend(self._type_extensions)
        return definitions

    def to_document(self) -> gql_ast.DocumentNode:
        return gql_ast.DocumentNode(definitions=tuple(self.definitions()))

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._types))

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"<TypeDefinitionRegistry types={len(self._types)} extensions={len(self._type_extensions)}>"
