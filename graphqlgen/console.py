"""Colored console messages for the CLI."""

import click


def info(message: str):
    click.echo(click.style(message, fg="blue"))


def success(message: str):
    click.echo(click.style(message, fg="green"))


def warning(message: str):
    click.echo(click.style(message, fg="yellow"))


def error(message: str):
    click.echo(click.style(message, fg="red"), err=True)


def detail(message: str, verbose: bool):
    """Plain output shown only with --verbose."""
    if verbose:
        click.echo(message)
