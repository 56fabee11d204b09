"""
Boilerplate type definitions for pagination based on the Relay
`GraphQL Cursor Connections Specification <https://relay.dev/graphql/connections.htm>`_.

Register ``ConnectionTypeGenerator().generate_connection_types`` with
``SchemaResourceBuilder.configure_type_definition_registry`` (or call
``SchemaResourceBuilder.generate_connection_types``) to enable it.
"""
import logging
from typing import List

from graphql.language import ast as gql_ast

from relay_schema.idl.registry import TypeDefinitionRegistry

logger = logging.getLogger(__name__)

CONNECTION_SUFFIX = "Connection"
EDGE_SUFFIX = "Edge"
PAGE_INFO_TYPE_NAME = "PageInfo"

IMPLEMENTING_TYPE_DEFINITIONS = (
    gql_ast.ObjectTypeDefinitionNode,
    gql_ast.InterfaceTypeDefinitionNode,
)


def named_type(name: str) -> gql_ast.NamedTypeNode:
    return gql_ast.NamedTypeNode(name=gql_ast.NameNode(value=name))


def non_null(type_: gql_ast.TypeNode) -> gql_ast.NonNullTypeNode:
    return gql_ast.NonNullTypeNode(type=type_)


def list_of(type_: gql_ast.TypeNode) -> gql_ast.ListTypeNode:
    return gql_ast.ListTypeNode(type=type_)


def field_definition(name: str, type_: gql_ast.TypeNode) -> gql_ast.FieldDefinitionNode:
    return gql_ast.FieldDefinitionNode(
        description=None,
        name=gql_ast.NameNode(value=name),
        arguments=(),
        type=type_,
        directives=(),
    )


def object_type_definition(name: str, *fields: gql_ast.FieldDefinitionNode) -> gql_ast.ObjectTypeDefinitionNode:
    return gql_ast.ObjectTypeDefinitionNode(
        description=None,
        name=gql_ast.NameNode(value=name),
        interfaces=(),
        directives=(),
        fields=tuple(fields),
    )


class ConnectionTypeGenerator:
    """Adds Connection, Edge and PageInfo types for fields typed ``<Name>Connection``."""

    def generate_connection_types(self, registry: TypeDefinitionRegistry) -> TypeDefinitionRegistry:
        """
        Find fields whose type name ends in "Connection", considered a
        Connection Type by the Relay convention, and add type definitions for
        all such types that don't exist already.

        Existing definitions are never replaced. A hand-written ``<Name>Edge``
        or ``PageInfo`` next to a generated connection is not reconciled: the
        registry raises TypeRedefinitionError on the colliding add.

        Returns the same registry instance with the additional types added.
        """
        type_names = self.find_connection_type_names(registry)
        if not type_names:
            return registry

        registry.add(object_type_definition(
            PAGE_INFO_TYPE_NAME,
            field_definition("hasPreviousPage", non_null(named_type("Boolean"))),
            field_definition("hasNextPage", non_null(named_type("Boolean"))),
            field_definition("startCursor", named_type("String")),
            field_definition("endCursor", named_type("String")),
        ))

        for type_name in type_names:
            logger.info(f"Generating pagination types for '{type_name}'")
            edge_type_name = type_name + EDGE_SUFFIX

            registry.add(object_type_definition(
                type_name + CONNECTION_SUFFIX,
                field_definition("edges", non_null(list_of(named_type(edge_type_name)))),
                field_definition("pageInfo", non_null(named_type(PAGE_INFO_TYPE_NAME))),
            ))
            registry.add(object_type_definition(
                edge_type_name,
                field_definition("cursor", non_null(named_type("String"))),
                field_definition("node", non_null(named_type(type_name))),
            ))

        return registry

    @staticmethod
    def find_connection_type_names(registry: TypeDefinitionRegistry) -> List[str]:
        """
        Return the base names of undefined connection types referenced by
        object and interface fields, without duplicates, in first-seen order.

        Only a single non-null wrapper is unwrapped; list-typed fields are
        ignored.
        """
        names: List[str] = []
        seen = set()

        for definition in registry.types().values():
            if not isinstance(definition, IMPLEMENTING_TYPE_DEFINITIONS):
                continue
            for field in definition.fields or ():
                type_ = field.type
                if isinstance(type_, gql_ast.NonNullTypeNode):
                    type_ = type_.type
                if not isinstance(type_, gql_ast.NamedTypeNode):
                    continue

                name = type_.name.value
                if not name.endswith(CONNECTION_SUFFIX):
                    continue
                if registry.get_type(name) is not None:
                    continue

                base_name = name[:-len(CONNECTION_SUFFIX)]
                if base_name not in seen:
                    seen.add(base_name)
                    names.append(base_name)

        return names
