"""CLI entry point for openapi-to-proto."""

import sys
from pathlib import Path

import click

from openapi_to_proto.generator.proto import DEFAULT_PACKAGE, DEFAULT_SERVICE, ProtoGenerator
from openapi_to_proto.parser.openapi import DocumentParseError, DocumentValidationError, load_document

USAGE = "Usage: openapi-to-proto <input-openapi.yaml> <output.proto>"

EXIT_USAGE = 1
EXIT_READ = 2
EXIT_PARSE = 3
EXIT_VALIDATE = 4
EXIT_WRITE = 5


def _fail(message: str, code: int):
    click.echo(message, err=True)
    sys.exit(code)


class ProtoCommand(click.Command):
    """Reports click usage errors (unknown option, missing value) with EXIT_USAGE."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = EXIT_USAGE
            raise


@click.command(cls=ProtoCommand)
@click.argument("paths", nargs=-1, metavar="INPUT OUTPUT")
@click.option("--package", default=DEFAULT_PACKAGE, show_default=True, help="Proto package name.")
@click.option("--service", default=DEFAULT_SERVICE, show_default=True, help="Name of the generated service.")
def main(paths: tuple[str, ...], package: str, service: str):
    """Convert an OpenAPI 3 document into a proto3 file with google.api.http bindings."""
    if len(paths) != 2:
        _fail(USAGE, EXIT_USAGE)
    input_path, output_path = Path(paths[0]), Path(paths[1])

    try:
        text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Failed to read input file: {e}", EXIT_READ)

    try:
        document = load_document(text, base_uri=input_path.resolve().as_uri())
    except DocumentParseError as e:
        _fail(f"Failed to parse OpenAPI: {e}", EXIT_PARSE)
    except DocumentValidationError as e:
        _fail(f"OpenAPI validation errors: {e}", EXIT_VALIDATE)

    gen = ProtoGenerator(package=package, service_name=service)
    proto = gen.generate(document)
    for warning in gen.warnings:
        click.echo(f"Warning: {warning}", err=True)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(proto, encoding="utf-8")
    except OSError as e:
        _fail(f"Failed to write proto file: {e}", EXIT_WRITE)

    click.echo(f"Wrote proto to {output_path}")
