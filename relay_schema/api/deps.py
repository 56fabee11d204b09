import logging

from fastapi import HTTPException, status
from graphql import GraphQLError

from relay_schema.idl.registry import SchemaDefinitionError
from relay_schema.idl.source import SchemaSource, get_schema_source

logger = logging.getLogger(__name__)

def get_source() -> SchemaSource:
    """
    Return the application schema source, reporting build failures as HTTP 500.
    """
    try:
        return get_schema_source()
    except (SchemaDefinitionError, GraphQLError, TypeError) as e:
        logger.error(f"Schema build failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Schema build failed: {str(e)}",
        )
