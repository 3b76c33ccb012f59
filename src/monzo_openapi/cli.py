"""CLI entry point for monzo-openapi."""

import logging
from pathlib import Path

import click

from monzo_openapi.generator.pipeline import generate
from monzo_openapi.loader import collect_fragments, load_docs
from monzo_openapi.parser.base import Document
from monzo_openapi.writer import write_document


def _build(doc_paths: tuple[Path, ...]) -> Document:
    """Load the documentation fragments and run the pipeline."""
    files = collect_fragments(list(doc_paths))
    click.echo(f"Reading {len(files)} documentation file(s)...")
    return generate(load_docs(files))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Monzo OpenAPI: generate an OpenAPI document from the Markdown API docs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("generate")
@click.argument("doc_paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option(
    "-o", "--output", "outputs", multiple=True, required=True, type=click.Path(path_type=Path),
    help="Output file; '.json' writes JSON, anything else YAML. Repeat for several formats.",
)
def generate_cmd(doc_paths: tuple[Path, ...], outputs: tuple[Path, ...]):
    """Generate the OpenAPI document from documentation files or directories."""
    doc = _build(doc_paths)
    click.echo(f"Found {len(doc.operations())} operations in {len(doc.paths)} paths.")

    for output in outputs:
        write_document(doc, output)
        click.echo(f"OpenAPI document saved to {output}")


@main.command()
@click.argument("doc_paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
def endpoints(doc_paths: tuple[Path, ...]):
    """List the operations the documentation yields."""
    doc = _build(doc_paths)
    for path, method, operation in doc.operations():
        click.echo(f"{method.upper():7} {path}  {operation.operation_id}")
