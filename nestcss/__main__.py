"""nestcss command line: compile a json style tree into css text."""

from __future__ import annotations
from json import JSONDecodeError
from typing import NoReturn, TextIO

import click
from conterm.pretty import Markup

from nestcss import __version__
from nestcss.css import to_css_text
from nestcss.style import StyleError, loads_tree


def _fail(message: str) -> NoReturn:
    click.echo(Markup.parse("[red]error:", mar=False) + " " + message, err=True)
    raise SystemExit(1)


@click.command()
@click.version_option(version=__version__, prog_name="nestcss")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="File to write the css to. Defaults to stdout.",
)
@click.option("--style-tag", is_flag=True, help="Wrap the css in a <style> element.")
def cli(source: TextIO, output: TextIO, style_tag: bool) -> None:
    """Compile the json style tree in SOURCE (`-` for stdin) into css."""
    try:
        rules = loads_tree(source.read())
    except UnicodeDecodeError as error:
        _fail(f"{source.name}: invalid utf-8, {error}")
    except JSONDecodeError as error:
        _fail(f"{source.name}: invalid json, {error}")
    except StyleError as error:
        _fail(f"{source.name}: {error}")

    css = to_css_text(rules)
    if style_tag:
        css = f"<style>{css}</style>"
    output.write(css)
    output.write("\n")


if __name__ == "__main__":
    cli()
