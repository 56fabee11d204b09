import json
from pathlib import Path
import pytest
from relay_schema.core.config import Settings, get_settings
from relay_schema.idl.registry import TypeDefinitionRegistry, TypeRedefinitionError
from relay_schema.idl.source import (
    SchemaResourceBuilder,
    SchemaResourceError,
    SchemaSource,
    build_schema_source,
    get_schema_source,
)

QUERY_SDL = """
type Query {
    posts(first: Int, after: String): PostConnection
    comments: CommentConnection!
}
"""

TYPES_SDL = """
type Post { id: ID!, title: String! }
type Comment { id: ID!, body: String! }
"""

@pytest.fixture
def schema_dir(tmp_path):
    """Write a schema split across two files plus an unrelated file"""
    (tmp_path / "query.graphqls").write_text(QUERY_SDL)
    nested = tmp_path / "types"
    nested.mkdir()
    (nested / "types.graphql").write_text(TYPES_SDL)
    (tmp_path / "README.txt").write_text("not a schema")
    return tmp_path

def test_build_with_connection_types(schema_dir):
    """Test that generated pagination types end up in the built schema"""
    source = SchemaResourceBuilder().schema_resources(schema_dir).generate_connection_types().build()

    assert source.generated_type_names == [
        "PageInfo", "PostConnection", "PostEdge", "CommentConnection", "CommentEdge",
    ]
    edge = source.schema.get_type("PostEdge")
    assert str(edge.fields["node"].type) == "Post!"
    assert str(source.schema.get_type("PostConnection").fields["edges"].type) == "[PostEdge]!"
    assert source.is_generated("PageInfo")
    assert not source.is_generated("Post")

    sdl = source.print_schema()
    assert "type PageInfo {" in sdl
    assert "edges: [CommentEdge]!" in sdl

def test_build_without_generation_fails_on_unknown_types(schema_dir):
    """Test that undefined Connection types are reported by schema validation"""
    with pytest.raises(TypeError) as exc_info:
        SchemaResourceBuilder().schema_resources(schema_dir).build()
    assert "PostConnection" in str(exc_info.value)

def test_schema_text_and_configurer_order():
    """Test that configurers run in order after generation"""
    calls = []

    def record(registry):
        calls.append(sorted(registry))
        return registry

    source = (
        SchemaResourceBuilder()
        .schema_text(QUERY_SDL)
        .schema_text(TYPES_SDL)
        .configure_type_definition_registry(record)
        .generate_connection_types()
        .configure_type_definition_registry(record)
        .build()
    )

    assert "PageInfo" not in calls[0]
    assert "PageInfo" in calls[1]
    assert source.registry.get_type("CommentEdge") is not None

def test_configurer_return_value_is_used():
    """Test that the registry returned by a configurer is passed on"""
    replacement = TypeDefinitionRegistry.parse("type Query { ok: Boolean }")

    source = SchemaResourceBuilder().schema_text(QUERY_SDL).configure_type_definition_registry(
        lambda registry: replacement
    ).build()

    assert source.registry is replacement
    assert set(source.schema.query_type.fields) == {"ok"}

def test_custom_file_extensions(schema_dir):
    """Test that only configured extensions are loaded"""
    (schema_dir / "types" / "types.graphql").rename(schema_dir / "types" / "types.sdl")

    source = (
        SchemaResourceBuilder(file_extensions=[".graphqls", ".SDL"])
        .schema_resources(schema_dir)
        .generate_connection_types()
        .build()
    )
    assert source.registry.get_type("Post") is not None

def test_duplicate_types_across_files(tmp_path):
    """Test that the same type in two files is reported"""
    (tmp_path / "a.graphqls").write_text("type Query { ok: Boolean }")
    (tmp_path / "b.graphqls").write_text("type Query { other: Boolean }")

    with pytest.raises(TypeRedefinitionError):
        SchemaResourceBuilder().schema_resources(tmp_path).build()

def test_missing_resource(tmp_path):
    """Test that a missing schema location is reported"""
    with pytest.raises(SchemaResourceError):
        SchemaResourceBuilder().schema_resources(tmp_path / "missing").build()

def test_no_resources(tmp_path):
    """Test that an empty schema location is reported"""
    with pytest.raises(SchemaResourceError):
        SchemaResourceBuilder().schema_resources(tmp_path).build()

def test_build_schema_source_from_settings(schema_dir):
    """Test building from settings, with and without generation"""
    settings = Settings(SCHEMA_LOCATIONS=[str(schema_dir)], GENERATE_CONNECTION_TYPES=True)
    source = build_schema_source(settings)
    assert "PageInfo" in source.registry

    (schema_dir / "query.graphqls").write_text("type Query { post: Post }")
    settings = Settings(SCHEMA_LOCATIONS=[str(schema_dir)], GENERATE_CONNECTION_TYPES=False)
    source = build_schema_source(settings)
    assert source.generated_type_names == []

SAMPLE_SCHEMA = Path(__file__).resolve().parents[2] / "schema" / "schema.graphqls"

def test_build_from_single_file():
    """Test building the bundled sample schema from a file path"""
    source = SchemaResourceBuilder().schema_resources(SAMPLE_SCHEMA).generate_connection_types().build()

    # Query.authors is AuthorConnection!, unwrapped once and detected in field order
    assert source.generated_type_names == [
        "PageInfo",
        "PostConnection", "PostEdge",
        "AuthorConnection", "AuthorEdge",
        "CommentConnection", "CommentEdge",
    ]
    assert str(source.schema.query_type.fields["authors"].type) == "AuthorConnection!"

@pytest.fixture
def clear_schema_caches():
    """Reset cached settings and schema source around a test"""
    get_settings.cache_clear()
    get_schema_source.cache_clear()
    yield
    get_settings.cache_clear()
    get_schema_source.cache_clear()

def test_get_schema_source_is_cached(monkeypatch, clear_schema_caches):
    """Test that the application schema source is built once from settings"""
    monkeypatch.setenv("SCHEMA_LOCATIONS", json.dumps([str(SAMPLE_SCHEMA)]))

    source = get_schema_source()

    assert source is get_schema_source()
    assert source.is_generated("AuthorEdge")
    assert source.registry.get_type("Author") is not None

def test_is_generated():
    """Test generated type lookups on a source built by hand"""
    registry = TypeDefinitionRegistry.parse("type Query { ok: Boolean }")
    source = SchemaSource(
        schema=SchemaResourceBuilder().schema_text("type Query { ok: Boolean }").build().schema,
        registry=registry,
        generated_type_names=["PageInfo", "PostEdge"],
    )

    assert source.is_generated("PostEdge")
    assert not source.is_generated("Query")
    assert source.generated_type_names == ["PageInfo", "PostEdge"]
