"""Exceptions raised by the generation pipeline.

Every fatal condition is an instance of ``GraphQLGenError``; the CLI turns
these into a colored message and a non-zero exit status.
"""


class GraphQLGenError(Exception):
    """Base class for all graphqlgen errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(GraphQLGenError):
    """Raised when graphqlgen.yml is missing or invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ModelMapError(ConfigError):
    """Raised for a malformed or unknown model map entry."""

    def __init__(self, message: str, type_name: str):
        self.type_name = type_name
        super().__init__(message)


class UnsupportedLanguageError(ConfigError):
    """Raised when no generator is registered for a language."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Invalid language: {language}")


class SchemaError(GraphQLGenError):
    """Raised when the schema cannot be read or parsed."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message)


class ExtractionError(GraphQLGenError):
    """Raised for schema constructs the extractor does not support."""

    def __init__(self, message: str, declaration: str):
        self.declaration = declaration
        super().__init__(f"{declaration}: {message}")


class WriteError(GraphQLGenError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write the file at {path}, error: {cause}")
