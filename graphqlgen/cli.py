"""Command-line interface for graphqlgen."""

import os

import click

from . import console
from .core.config import DEFAULT_CONFIG_FILE, load_config
from .core.errors import GraphQLGenError
from .core.formatting import resolve_format_options
from .core.model_map import build_model_map
from .core.pipeline import generate_code
from .core.schema_loader import parse_schema
from .core.writer import SKIPPED, write_resolvers, write_types


def _report_resolver(state: str, path: str):
    if state == SKIPPED:
        console.warning(f"Warning: file ({path}) already exists.")
    else:
        console.success(f"Code generated at {path}")


def run(
    config_path: str = DEFAULT_CONFIG_FILE,
    force: bool = False,
    prettify: bool = True,
    verbose: bool = False,
) -> int:
    """Run the whole generation and return the process exit status.

    Every fatal error is reported here; nothing below this function exits.
    """
    try:
        config = load_config(config_path)
        console.detail(f"Config: {os.path.abspath(config_path)}", verbose)

        schema = parse_schema(config.input.schema_path)
        console.detail(f"Schema: {config.input.schema_path}", verbose)

        options = resolve_format_options(os.getcwd()) if prettify else None
        if options is not None:
            console.info("Found a prettier configuration to use")

        model_map = build_model_map(config.input.models, config.output.types)
        console.detail(f"Models: {len(model_map)}", verbose)

        result = generate_code(
            schema=schema,
            model_map=model_map,
            prettify=prettify,
            prettify_options=options,
            language=config.language,
        )

        write_types(result.generated_types, config.output.types)
        console.success(f"Types and scalars resolvers generated at {config.output.types}")

        report = write_resolvers(
            result.generated_resolvers,
            config.output.resolvers,
            config.output.types,
            force=force,
            report=_report_resolver,
        )
    except GraphQLGenError as e:
        console.error(e.message)
        return 1

    if report.did_skip:
        console.warning(
            f"{os.linesep}Please use the force flag (-f, --force) to overwrite the files."
        )
    return 0


@click.command()
@click.version_option()
@click.option(
    "--config",
    "-c",
    "config_path",
    default=DEFAULT_CONFIG_FILE,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Path to the graphqlgen configuration file.",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing resolver scaffolds.",
)
@click.option(
    "--prettify/--no-prettify",
    default=True,
    help="Format generated code (default: on).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def main(config_path: str, force: bool, prettify: bool, verbose: bool):
    """Generate resolver types and scaffolds from a GraphQL schema.

    Examples:

        graphqlgen

        graphqlgen --config ./api/graphqlgen.yml --force
    """
    raise SystemExit(run(config_path, force=force, prettify=prettify, verbose=verbose))


if __name__ == "__main__":
    main()
