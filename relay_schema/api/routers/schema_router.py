from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from relay_schema.api.deps import get_source
from relay_schema.idl.source import SchemaSource
from relay_schema.schemas.schema_type import SchemaType, list_schema_types

router = APIRouter()

@router.get("/schema.graphqls", response_class=PlainTextResponse)
async def read_schema(source: SchemaSource = Depends(get_source)):
    """
    Get the built schema as SDL, including generated pagination types.
    """
    return source.print_schema()

@router.get("/schema/types", response_model=List[SchemaType])
async def read_schema_types(
    generated_only: bool = False,
    source: SchemaSource = Depends(get_source)
):
    """
    List the registry's type definitions.
    """
    return list_schema_types(source, generated_only=generated_only)
