from typing import List
import strawberry

@strawberry.type
class SchemaType:
    """A type definition in the built schema registry."""
    name: str
    kind: str
    generated: bool
    fields: List[str]
