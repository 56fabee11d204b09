from pydantic import BaseModel
from typing import List
from graphql.language import ast as gql_ast

from relay_schema.idl.source import SchemaSource

# GraphQL introspection kind for each SDL type definition node
TYPE_KINDS = {
    gql_ast.ObjectTypeDefinitionNode: "OBJECT",
    gql_ast.InterfaceTypeDefinitionNode: "INTERFACE",
    gql_ast.UnionTypeDefinitionNode: "UNION",
    gql_ast.EnumTypeDefinitionNode: "ENUM",
    gql_ast.InputObjectTypeDefinitionNode: "INPUT_OBJECT",
    gql_ast.ScalarTypeDefinitionNode: "SCALAR",
}

# Model for a type definition held by the schema registry (output)
class SchemaType(BaseModel):
    name: str
    kind: str
    generated: bool = False
    fields: List[str] = []

def list_schema_types(source: SchemaSource, generated_only: bool = False) -> List[SchemaType]:
    """
    Summarize the registry's type definitions in registration order.
    """
    result = []
    for name, definition in source.registry.types().items():
        generated = source.is_generated(name)
        if generated_only and not generated:
            continue
        fields = getattr(definition, "fields", None) or ()
        result.append(SchemaType(
            name=name,
            kind=TYPE_KINDS.get(type(definition), "UNKNOWN"),
            generated=generated,
            fields=[field.name.value for field in fields],
        ))
    return result
