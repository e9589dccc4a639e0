"""Core modules for resolver code generation."""

from .config import GraphQLGenDefinition, load_config
from .errors import (
    ConfigError,
    ExtractionError,
    GraphQLGenError,
    ModelMapError,
    SchemaError,
    UnsupportedLanguageError,
    WriteError,
)
from .extractor import SchemaExtractor, extract_enums, extract_ir, extract_types, extract_unions
from .formatting import FormatOptions, format_code, resolve_format_options
from .ir import (
    CodeFileLike,
    GenerateArgs,
    GraphQLArgument,
    GraphQLEnum,
    GraphQLInputType,
    GraphQLScalar,
    GraphQLType,
    GraphQLTypeField,
    GraphQLTypeObject,
    GraphQLUnion,
    IRSchema,
    ModelBinding,
)
from .model_map import build_model_map
from .pipeline import GenerationResult, generate_code
from .registry import Generator, get_resolvers_generator, get_types_generator
from .schema_loader import SchemaLoader, load_schema, parse_schema
from .writer import WriteReport, write_resolvers, write_types

__all__ = [
    # Config
    "GraphQLGenDefinition",
    "load_config",
    # Errors
    "ConfigError",
    "ExtractionError",
    "GraphQLGenError",
    "ModelMapError",
    "SchemaError",
    "UnsupportedLanguageError",
    "WriteError",
    # Extraction
    "SchemaExtractor",
    "extract_enums",
    "extract_ir",
    "extract_types",
    "extract_unions",
    # Formatting
    "FormatOptions",
    "format_code",
    "resolve_format_options",
    # IR types
    "CodeFileLike",
    "GenerateArgs",
    "GraphQLArgument",
    "GraphQLEnum",
    "GraphQLInputType",
    "GraphQLScalar",
    "GraphQLType",
    "GraphQLTypeField",
    "GraphQLTypeObject",
    "GraphQLUnion",
    "IRSchema",
    "ModelBinding",
    # Model map
    "build_model_map",
    # Pipeline
    "GenerationResult",
    "generate_code",
    # Registry
    "Generator",
    "get_resolvers_generator",
    "get_types_generator",
    # Schema loading
    "SchemaLoader",
    "load_schema",
    "parse_schema",
    # Writer
    "WriteReport",
    "write_resolvers",
    "write_types",
]
