import logging
from typing import Annotated

import logzero
import typer

from wildcard_intersection.commands.gen_json_schema_for_pairs import (
    gen_json_schema_for_pairs,
)
from wildcard_intersection.commands.intersect import intersect
from wildcard_intersection.commands.intersect_pairs import intersect_pairs

app = typer.Typer()
app.command()(intersect)
app.command()(intersect_pairs)
app.command()(gen_json_schema_for_pairs)


@app.callback()
def callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
):
    logzero.loglevel(logging.DEBUG if verbose else logging.INFO)


def main():
    app()


if __name__ == "__main__":
    main()
