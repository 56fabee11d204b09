from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "Relay Schema Builder"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Files or directories holding SDL; directories are scanned recursively
    SCHEMA_LOCATIONS: List[str] = ["schema"]
    SCHEMA_FILE_EXTENSIONS: List[str] = [".graphqls", ".graphql", ".gqls", ".gql"]
    GENERATE_CONNECTION_TYPES: bool = True

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = [
        "http://localhost:3001",
        "http://127.0.0.1:3001",
    ]

    class Config:
        case_sensitive = True

@lru_cache()
def get_settings() -> Settings:
    return Settings()
