import strawberry

from relay_schema.api.graphql.queries import SchemaQuery

# Define root Query type by combining all feature queries
@strawberry.type
class Query(SchemaQuery):
    pass

# Create schema
schema = strawberry.Schema(query=Query)
