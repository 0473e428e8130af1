"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from kedge_schema_merger.configuration import GenerationError
from kedge_schema_merger.document_assembly import (
    AssemblyError,
    AssemblyRequest,
    DocumentEmissionError,
    DocumentEncodingError,
    assemble_document,
    emit_document,
)
from kedge_schema_merger.logging_config import configure_logging


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="kedge-schema-merger")
def cli() -> None:
    """Kedge OpenAPI schema merging utility."""


@cli.command(name="merge")
@click.option(
    "--kedge-bundle",
    "kedge_bundle_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON file with generated Kedge definitions and injection mapping",
)
@click.option(
    "--kubernetes-schema",
    "kubernetes_schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the Kubernetes OpenAPI v2 schema (JSON)",
)
@click.option(
    "--openshift-schema",
    "openshift_schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the OpenShift OpenAPI v2 schema (JSON)",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Log merge diagnostics to stderr.",
)
def merge(
    kedge_bundle_path: str,
    kubernetes_schema_path: str,
    openshift_schema_path: str,
    verbose: bool,
) -> None:
    """Print the merged Kedge, Kubernetes and OpenShift schema to stdout."""
    configure_logging(verbose=verbose)
    try:
        document = assemble_document(
            AssemblyRequest(
                kedge_bundle_path=kedge_bundle_path,
                kubernetes_schema_path=kubernetes_schema_path,
                openshift_schema_path=openshift_schema_path,
            )
        )
        emit_document(document, sys.stdout)
    except (
        GenerationError,
        AssemblyError,
        DocumentEncodingError,
        DocumentEmissionError,
    ) as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
