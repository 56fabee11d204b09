from typing import Any, Dict

from fastapi import Depends, Request
from strawberry.fastapi import GraphQLRouter

from relay_schema.api.deps import get_source
from relay_schema.api.graphql.schema import schema
from relay_schema.idl.source import SchemaSource

async def get_context(request: Request, source: SchemaSource = Depends(get_source)) -> Dict[str, Any]:
    """
    Creates a context for GraphQL resolvers with the request and the built schema source.
    """
    return {
        "request": request,
        "schema_source": source
    }

# Create a GraphQL router for FastAPI
graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql"  # Enable GraphiQL interface for development
)
