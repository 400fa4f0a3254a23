"""Check subcommand for evaluating instances against a type filter."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import yaml

from isvalid import core

from . import config, util

logger = logging.getLogger(__name__)


def resolve_types(
    types: tuple[str, ...],
    filter_name: str | None,
    cfg: config.Config,
) -> list[str] | None:
    """Pick the type filter: CLI types win over a named filter; neither means no filter."""
    if types:
        try:
            return config.parse_cli_types(types)
        except ValueError as e:
            raise click.ClickException(str(e)) from None

    if filter_name is not None:
        if filter_name not in cfg.filters:
            available = ", ".join(cfg.filters) or "none defined"
            raise click.ClickException(f"Filter '{filter_name}' not found. Available filters: {available}")
        return cfg.filters[filter_name]

    return None


def evaluate(instances: dict[str, dict], types: list[str] | None) -> tuple[list[str], list[str]]:
    """Return (hits, misses) as instance labels, in config order."""
    hits, misses = core.validator.partition_instances(instances.items(), types, key=lambda item: item[1])
    for label, _ in hits:
        logger.debug("hit: %s", label)
    for label, _ in misses:
        logger.debug("miss: %s", label)
    return [label for label, _ in hits], [label for label, _ in misses]


def print_table(instances: dict[str, dict], hits: list[str]) -> None:
    """Print formatted table of instances and whether the filter accepts them."""
    max_label = max(max(len(label) for label in instances), 8)
    max_name = max(max(len(str(inst.get("_name", ""))) for inst in instances.values()), 4)

    header = f"{'Instance':<{max_label}}  {'Name':<{max_name}}  {'Valid':<5}  Flags"
    click.echo(util.C.bold(header))
    click.echo(util.C.dim("-" * (len(header) + 20)))

    for label, inst in instances.items():
        label_col = f"{label:<{max_label}}"
        name_col = f"{str(inst.get('_name', '')):<{max_name}}"
        flag_col = ", ".join(util.true_flags(inst))
        if label in hits:
            click.echo(f"{util.C.green(label_col)}  {name_col}  {util.C.green('yes'):<5}  {util.C.cyan(flag_col)}")
        else:
            click.echo(
                f"{util.C.dim(label_col)}  {util.C.dim(name_col)}  {util.C.red('no'):<5}  {util.C.dim(flag_col)}"
            )

    click.echo()
    click.echo(util.C.dim(f"Total: {len(instances)} instances ({len(hits)} valid)"))


def print_yaml(hits: list[str], misses: list[str]) -> None:
    """Print hits and misses as a YAML document."""
    click.echo(
        yaml.safe_dump({"hits": hits, "misses": misses}, sort_keys=False, default_flow_style=False),
        nl=False,
    )


@click.command()
@click.argument("types", nargs=-1)
@click.option("--filter", "filter_name", help="Use a named filter from the config file")
@click.option(
    "-o",
    "--output",
    type=click.Choice(["list", "yaml", "names"]),
    default="list",
    help="Output format: list (table), yaml (hits/misses), or names (valid instances only)",
)
@click.option(
    "-f",
    "--file",
    "cfg_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=f"Path to config file (default: nearest {config.CONFIG_FILENAME})",
)
def check(
    types: tuple[str, ...],
    filter_name: str | None,
    output: str,
    cfg_path: Path | None,
) -> None:
    """Check which configured instances are valid for a type filter.

    \b
    Examples:
      isvalid check                      # Root marker only
      isvalid check view                 # Views (isView or _name 'view')
      isvalid check view app             # Views or apps
      isvalid check view,collection      # Same, comma separated
      isvalid check '*'                  # Any recognized instance
      isvalid check --filter renderables # Named filter from the config
      isvalid check view -o yaml         # Hits and misses as YAML
    """
    if cfg_path is None:
        cfg_path = config.find_config(Path.cwd())
        if cfg_path is None:
            raise click.ClickException(f"No {config.CONFIG_FILENAME} found (use -f to point at a config file)")

    try:
        cfg = config.load_config(cfg_path)
    except ValueError as e:
        raise click.ClickException(str(e)) from None

    selected = resolve_types(types, filter_name, cfg)

    if not cfg.instances:
        click.echo(util.C.yellow(f"No instances defined in {cfg_path}"))
        return

    hits, misses = evaluate(cfg.instances, selected)
    logger.info("%d of %d instances valid for types %s", len(hits), len(cfg.instances), util.format_types(selected))

    if output == "names":
        for label in hits:
            click.echo(label)
    elif output == "yaml":
        print_yaml(hits, misses)
    else:
        click.echo(util.C.dim(f"Types: {util.format_types(selected)}"))
        click.echo()
        print_table(cfg.instances, hits)
