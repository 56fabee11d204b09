from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from relay_schema.api.routers import schema_router
from relay_schema.api.graphql.router import graphql_router
from relay_schema.core.config import get_settings
from relay_schema.core.logging import configure_logging

settings = get_settings()
configure_logging(settings)

app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(schema_router.router, prefix=settings.API_V1_STR, tags=["schema"])
app.include_router(graphql_router, prefix="/graphql", tags=["graphql"])

@app.get("/", tags=["Root"])
async def read_root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME}"}

# Optional: Add logic to run the server directly for development
if __name__ == "__main__":
    uvicorn.run("relay_schema.server:app", host="0.0.0.0", port=8000, reload=True)
