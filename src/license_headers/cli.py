# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations
import difflib
from functools import partial
from pathlib import Path

import click

from .config import load_settings
from .errors import LicenseHeaderError
from .files import read_file, write_file
from .rewriter import check_and_generate_license_headers


def _rel(path: Path, root: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError:
        return path


def _echo_diff(path: Path, old: str, new: str) -> None:
    diff = difflib.unified_diff(
        old.splitlines(True),
        new.splitlines(True),
        fromfile=str(path),
        tofile=f"{path} (updated)",
    )
    click.echo("".join(diff), nl=False)


def _run(ctx: click.Context, root: str, diff: bool, dry_run: bool):
    root_path = Path(root)
    try:
        settings = load_settings(root_path, ctx.obj.get("config_path"),
                                 {"year": ctx.obj.get("year")})
        changed = check_and_generate_license_headers(
            root_path,
            partial(read_file, encoding=settings.encoding),
            partial(write_file, encoding=settings.encoding),
            settings.header(),
            settings.extensions,
            settings.skip_dirs,
            dry_run=dry_run,
            on_change=_echo_diff if diff else None,
        )
    except LicenseHeaderError as e:
        raise click.ClickException(str(e)) from e
    mark = "[~]" if dry_run else "[+]"
    for p in changed:
        click.echo(f"{mark} {_rel(p, root_path)}")
    return changed


@click.group(invoke_without_command=True)
@click.version_option(package_name="license-headers")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML s nastavením (extensions, skip_dirs, holder, comment, year, encoding).",
)
@click.option("--year", type=int, default=None, help="Rok v copyrightu (default: aktuální rok).")
@click.pass_context
def main(ctx, config, year):
    """Doplní nebo obnoví licenční hlavičky ve zdrojácích."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["year"] = year
    if ctx.invoked_subcommand is None:
        # bez argumentů = pre-build krok nad aktuálním adresářem
        ctx.invoke(apply)


@main.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False), default=".")
@click.option("--diff", is_flag=True, help="Ukázat unified diff každé změny.")
@click.pass_context
def apply(ctx, root, diff):
    """Zapíše hlavičky do souborů pod ROOT."""
    if not _run(ctx, root, diff, dry_run=False):
        click.echo("Hotovo: nic k úpravě.")


@main.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False), default=".")
@click.option("--diff", is_flag=True, help="Ukázat unified diff každé čekající změny.")
@click.pass_context
def check(ctx, root, diff):
    """Vypíše soubory pod ROOT s chybějící nebo zastaralou hlavičkou (nic nezapisuje)."""
    changed = _run(ctx, root, diff, dry_run=True)
    if changed:
        click.echo(f"Hlavičku potřebuje {len(changed)} soubor(ů). Spusť 'license-headers apply'.")
        ctx.exit(1)
    click.echo("[OK] Všechny licenční hlavičky jsou aktuální.")


if __name__ == "__main__":
    main()
