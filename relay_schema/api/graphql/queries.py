from typing import List
import strawberry
from strawberry.types import Info

from relay_schema.api.graphql.types import SchemaType
from relay_schema.idl.source import SchemaSource
from relay_schema.schemas.schema_type import list_schema_types

def get_source_from_info(info: Info) -> SchemaSource:
    """Extract the schema source from GraphQL info context."""
    return info.context["schema_source"]

@strawberry.type
class SchemaQuery:
    @strawberry.field
    async def sdl(self, info: Info) -> str:
        """Get the built schema as SDL."""
        return get_source_from_info(info).print_schema()

    @strawberry.field
    async def schema_types(self, info: Info, generated_only: bool = False) -> List[SchemaType]:
        """List type definitions, optionally only the generated pagination types."""
        source = get_source_from_info(info)
        return [
            SchemaType(
                name=item.name,
                kind=item.kind,
                generated=item.generated,
                fields=item.fields,
            )
            for item in list_schema_types(source, generated_only=generated_only)
        ]
