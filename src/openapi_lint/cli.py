"""CLI entry point for openapi-lint."""

import logging
from pathlib import Path

import click

from openapi_lint.linter.validator import DEFAULT_RULES, Validator
from openapi_lint.parser.openapi import DocumentParseError, load_document
from openapi_lint.report import format_github, format_json, format_summary, format_text


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
def main():
    """openapi-lint: check OpenAPI documents against API style conventions."""
    pass


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "fmt", default="text", envvar="OPENAPI_LINT_FORMAT", type=click.Choice(["text", "json", "github"]), help="Report format.")
@click.option("--summary-file", default=None, envvar="GITHUB_STEP_SUMMARY", type=click.Path(dir_okay=False, path_type=Path), help="Append a Markdown summary to this file.")
@click.option("-v", "--verbose", is_flag=True, help="Log rule execution details.")
def lint(doc_path: Path, fmt: str, summary_file: Path | None, verbose: bool):
    """Validate an OpenAPI document (JSON or YAML)."""
    _configure_logging(verbose)

    try:
        document = load_document(doc_path)
    except DocumentParseError as e:
        raise click.ClickException(str(e)) from e

    violations = Validator().validate(document)

    if fmt == "json":
        click.echo(format_json(violations))
    elif fmt == "github":
        if violations:
            click.echo(format_github(violations))
    else:
        click.echo(format_text(violations), err=bool(violations))

    if summary_file is not None:
        try:
            with summary_file.open("a", encoding="utf-8") as f:
                f.write(format_summary(violations, str(doc_path)))
        except OSError as e:
            raise click.ClickException(f"Cannot write summary to {summary_file}: {e}") from e

    if violations:
        raise SystemExit(1)


@main.command()
def rules():
    """List the built-in rules in the order they run."""
    for rule in DEFAULT_RULES:
        click.echo(f"{rule.name}: {', '.join(rule.codes)}")
        click.echo(f"  {rule.summary}")
