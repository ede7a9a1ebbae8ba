"""
CLI interface for Passmint.
"""

import json
import logging
import os
import sys
from typing import Any, Callable, Dict, Optional

import click

from .charsets import BUILTIN_CLASSES
from .config import (
    DEFAULTS,
    apply_overrides,
    config_path,
    load_config,
    request_from_settings,
    save_config,
)
from .exceptions import ConfigError, GenerationError
from .generator import PasswordGenerator
from .random_source import SeededRandomSource, SystemRandomSource
from .utils.clipboard import clear_clipboard_after, copy_to_clipboard


class GeneratorContext:
    """Context object for sharing settings across commands."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file

    @property
    def path(self) -> str:
        return self.config_file or config_path()

    def load_settings(self) -> Dict[str, Any]:
        """Load configured settings, exiting on a broken config file."""
        try:
            return load_config(self.config_file)
        except ConfigError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)


def _switch(on: bool, off: bool) -> Optional[bool]:
    """Collapse an --x/--no-x pair of flags; None when neither was given."""
    if off:
        return False
    if on:
        return True
    return None


def _flag_pair(on: str, off: str, dest: str, help_on: str, help_off: str) -> list:
    return [
        click.option(on, f"{dest}_on", is_flag=True, help=help_on),
        click.option(off, f"{dest}_off", is_flag=True, help=help_off),
    ]


def settings_options(func: Callable) -> Callable:
    """Attach every generation setting as a command option."""
    options = [click.option("--length", "-l", type=int, default=None, help="Password length")]
    options += _flag_pair("--begin-with-letter", "--no-begin-with-letter", "begin_with_letter",
                          "Require the password to start with a letter",
                          "Allow any first character")

    for name, _ in BUILTIN_CLASSES:
        options += _flag_pair(f"--{name}", f"--no-{name}", f"{name}_include",
                              f"Include {name}", f"Exclude {name}")
        options += [
            click.option(f"--{name}-min", f"{name}_min", type=int, default=None,
                         help=f"Minimum number of {name}"),
            click.option(f"--{name}-max", f"{name}_max", type=int, default=None,
                         help=f"Maximum number of {name}"),
        ]
        options += _flag_pair(f"--{name}-duplicates", f"--{name}-unique", f"{name}_duplicates",
                              f"Allow repeated {name}", f"Never repeat a character from {name}")

    options += [
        click.option("--include-other", default=None,
                     help="Extra characters in their own class (removed from all others)"),
        click.option("--other-min", type=int, default=None,
                     help="Minimum number of other characters"),
        click.option("--other-max", type=int, default=None,
                     help="Maximum number of other characters"),
    ]
    options += _flag_pair("--other-duplicates", "--other-unique", "other_duplicates",
                          "Allow repeated other characters",
                          "Never repeat an other character")
    options.append(click.option("--exclude-other", default=None,
                                help="Characters to remove from every built-in class"))
    options += _flag_pair("--exclude-similar", "--include-similar", "exclude_similar",
                          "Exclude similar characters (iIl1lL|o0O)",
                          "Keep similar characters")
    options += _flag_pair("--exclude-ambiguous", "--include-ambiguous", "exclude_ambiguous",
                          "Exclude ambiguous characters ({}[]()/\\'\"`~,;:.<>)",
                          "Keep ambiguous characters")

    for option in reversed(options):
        func = option(func)
    return func


def collect_settings(gen_ctx: GeneratorContext, options: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay command line options onto the configured settings."""

    def switch(dest: str) -> Optional[bool]:
        return _switch(options[f"{dest}_on"], options[f"{dest}_off"])

    overrides = {
        "length": options["length"],
        "begin_with_letter": switch("begin_with_letter"),
        "other.include": options["include_other"],
        "other.min": options["other_min"],
        "other.max": options["other_max"],
        "other.duplicates": switch("other_duplicates"),
        "exclude.other": options["exclude_other"],
        "exclude.similar": switch("exclude_similar"),
        "exclude.ambiguous": switch("exclude_ambiguous"),
    }
    for name, _ in BUILTIN_CLASSES:
        overrides[f"classes.{name}.include"] = switch(f"{name}_include")
        overrides[f"classes.{name}.min"] = options[f"{name}_min"]
        overrides[f"classes.{name}.max"] = options[f"{name}_max"]
        overrides[f"classes.{name}.duplicates"] = switch(f"{name}_duplicates")

    return apply_overrides(gen_ctx.load_settings(), overrides)


@click.group()
@click.option(
    "--config",
    "-c",
    "config_file",
    default=None,
    help="Path to config file (default: ~/.passmint/config.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], verbose: bool) -> None:
    """Passmint - constrained password generator."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    ctx.obj = GeneratorContext(config_file)


@cli.command()
@settings_options
@click.option("--count", "-n", default=1, type=click.IntRange(1, 1000),
              help="How many passwords to generate")
@click.option("--copy", is_flag=True, help="Copy the password to the clipboard instead of printing it")
@click.option("--clear-after", default=60, type=click.IntRange(0, 3600),
              help="Seconds to keep a copied password before clearing the clipboard (0 keeps it)")
@click.option("--seed", type=int, default=None,
              help="Seed for reproducible output (not secure)")
@click.pass_obj
def generate(gen_ctx: GeneratorContext, count: int, copy: bool, clear_after: int,
             seed: Optional[int], **options: Any) -> None:
    """Generate one or more passwords."""
    if copy and count > 1:
        click.echo("Error: --copy can only be used with a single password", err=True)
        sys.exit(1)

    request = request_from_settings(collect_settings(gen_ctx, options))
    rng = SeededRandomSource(seed) if seed is not None else SystemRandomSource()
    generator = PasswordGenerator(request, rng)

    password = ""
    for _ in range(count):
        try:
            password = generator.generate()
        except GenerationError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)
        if not copy:
            click.echo(password)

    if copy:
        # daemon threads die when the CLI exits, so clear in the foreground
        if not copy_to_clipboard(password, clear_after=0):
            click.echo(f"Generated password: {password}")
            return

        click.echo("🔐 Generated password copied to clipboard.")
        if clear_after:
            click.echo(f"Clipboard will be cleared in {clear_after} seconds (Ctrl+C to keep it).")
            clear_clipboard_after(clear_after)


@cli.command()
@settings_options
@click.pass_obj
def classes(gen_ctx: GeneratorContext, **options: Any) -> None:
    """Show the effective character classes and check feasibility."""
    request = request_from_settings(collect_settings(gen_ctx, options))
    generator = PasswordGenerator(request)

    click.echo(generator.get_charset_info())
    try:
        generator.validate()
        click.echo("✅ Settings are feasible")
    except GenerationError as e:
        click.echo(f"❌ {e.kind.value}: {e.message}")


@cli.group()
def config() -> None:
    """Manage the settings file."""
    pass


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_obj
def config_init(gen_ctx: GeneratorContext, force: bool) -> None:
    """Write the default settings to the config file."""
    path = gen_ctx.path
    if os.path.exists(path) and not force:
        click.echo(f"Config file already exists: {path} (use --force to overwrite)", err=True)
        sys.exit(1)

    try:
        written = save_config(DEFAULTS, path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Wrote default settings to {written}")


@config.command("show")
@click.pass_obj
def config_show(gen_ctx: GeneratorContext) -> None:
    """Print the merged settings."""
    click.echo(json.dumps(gen_ctx.load_settings(), ensure_ascii=False, indent=2))


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
