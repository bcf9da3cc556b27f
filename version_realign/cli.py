"""CLI entry point for version-realign."""

from __future__ import annotations

import json
from pathlib import Path

import click

from version_realign.config import load_config
from version_realign.errors import ConfigurationError
from version_realign.metadata import LocalRepositoryMetadata
from version_realign.pipeline import parse_project_token, run_realign


def _parse_property(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise ConfigurationError(f"Invalid property '{text}': expected KEY=VALUE")
    return key.strip(), value


@click.group()
@click.version_option(package_name="version-realign")
def cli() -> None:
    """Reproducible rebuild versions for multi-module builds."""


@cli.command()
@click.argument("projects", nargs=-1, required=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TOML file with a [tool.version-realign] table.",
)
@click.option(
    "-D",
    "properties",
    multiple=True,
    metavar="KEY=VALUE",
    help="Versioning option, e.g. -D incrementSerialSuffix=rebuild (repeatable).",
)
@click.option(
    "--repository",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory laid out like a Maven repository holding maven-metadata.xml files.",
)
@click.option(
    "--candidate",
    "candidates",
    multiple=True,
    metavar="VERSION",
    help="Version known to be published, applied to every project (repeatable).",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the coordinate → new version map as JSON.",
)
def calculate(
    projects: tuple[str, ...],
    config_path: Path | None,
    properties: tuple[str, ...],
    repository: Path | None,
    candidates: tuple[str, ...],
    output: Path | None,
) -> None:
    """Calculate new versions for PROJECTS given as groupId:artifactId:version."""
    try:
        overrides = dict(_parse_property(p) for p in properties)
        config = load_config(config_path, overrides)
        project_list = [parse_project_token(token) for token in projects]
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    metadata = LocalRepositoryMetadata(repository) if repository else None
    changes = run_realign(project_list, config, metadata, candidates)

    if output is not None:
        mapping = {str(coordinate): change.new for coordinate, change in changes.items()}
        output.write_text(json.dumps(mapping, indent=2) + "\n")
        click.echo(f"✓ Wrote {len(mapping)} versions to {output}")
