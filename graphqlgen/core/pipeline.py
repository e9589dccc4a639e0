"""Generation pipeline: schema document -> generated types and resolvers."""

from dataclasses import dataclass

from graphql import DocumentNode

from .extractor import extract_ir
from .formatting import FormatOptions
from .ir import CodeFileLike, GenerateArgs, ModelMap
from .model_map import validate_model_map
from .registry import get_resolvers_generator, get_types_generator

# TODO: read the context type location from graphqlgen.yml
CONTEXT_PATH = "../resolvers/types/Context"


@dataclass(frozen=True)
class GenerationResult:
    """Output of one pipeline run, ready for the writer."""
    generated_types: str
    generated_resolvers: list[CodeFileLike]


def generate_types(
    generate_args: GenerateArgs,
    language: str,
    prettify: bool = True,
    prettify_options: FormatOptions | None = None,
) -> str:
    generator = get_types_generator(language)
    generated_types = generator.generate(generate_args)
    if not prettify:
        return generated_types
    return generator.format(generated_types, prettify_options)


def generate_resolvers(
    generate_args: GenerateArgs,
    language: str,
    prettify: bool = True,
    prettify_options: FormatOptions | None = None,
) -> list[CodeFileLike]:
    generator = get_resolvers_generator(language)
    generated_resolvers = generator.generate(generate_args)
    if not prettify:
        return list(generated_resolvers)
    return [
        CodeFileLike(
            path=r.path,
            code=generator.format(r.code, prettify_options),
            force=r.force,
        )
        for r in generated_resolvers
    ]


def generate_code(
    schema: DocumentNode,
    model_map: ModelMap | None = None,
    prettify: bool = True,
    prettify_options: FormatOptions | None = None,
    language: str = "typescript",
) -> GenerationResult:
    """Run extraction and both generators on one snapshot of the schema.

    Args:
        schema: Parsed GraphQL document
        model_map: Bindings from ``build_model_map``
        prettify: Whether to format generated code
        prettify_options: Options passed to the formatter
        language: Target language identifier

    Raises:
        ExtractionError: For unsupported schema constructs
        ModelMapError: If the model map names a type the schema lacks
        UnsupportedLanguageError: If no generator is registered for ``language``
    """
    model_map = model_map or {}
    ir = extract_ir(schema)
    validate_model_map(model_map, [t.name for t in ir.types])

    generate_args = GenerateArgs(
        types=ir.types,
        enums=ir.enums,
        unions=ir.unions,
        inputs=ir.inputs,
        scalars=ir.scalars,
        context_path=CONTEXT_PATH,
        model_map=model_map,
    )
    generated_types = generate_types(generate_args, language, prettify, prettify_options)
    generated_resolvers = generate_resolvers(generate_args, language, prettify, prettify_options)
    return GenerationResult(
        generated_types=generated_types,
        generated_resolvers=generated_resolvers,
    )
