import functools
import operator
from pathlib import Path
from typing import Annotated

import typer
from logzero import logger
from pydantic import ValidationError
from ruamel.yaml.parser import ParserError

from wildcard_intersection.pattern_pairs import PatternPairs


def intersect_pairs(
    pairs_yaml_paths: Annotated[
        list[Path],
        typer.Argument(
            file_okay=True,
            dir_okay=False,
            exists=True,
            readable=True,
            help="Path(s) to the pattern pairs YAML file(s)",
        ),
    ],
    strict: Annotated[
        bool,
        typer.Option(
            envvar="WILDCARD_INTERSECTION_STRICT",
            help="Reject every pattern with multiple wildcards up front",
        ),
    ] = False,
):
    """Intersect every pattern pair in the given files and print the results as YAML."""
    logger.info(f"Loading pattern pairs from: {', '.join(map(str, pairs_yaml_paths))}")
    try:
        pairs = functools.reduce(
            operator.__add__,
            [PatternPairs.from_yaml(p) for p in pairs_yaml_paths],
        )
    except (FileNotFoundError, ValidationError, ParserError):
        logger.exception("Failed to load or parse pattern pairs.")
        raise typer.Exit(code=1)
    logger.info(f"Loaded {len(pairs)} pattern pairs.")

    results = pairs.intersect(strict=strict)
    for result in results:
        if result.error is not None:
            logger.error(f"{result.x!r} & {result.y!r}: {result.error}")
        elif result.intersection is None:
            logger.warning(f"{result.x!r} & {result.y!r}: no common match.")

    typer.echo(results.to_yaml(), nl=False)

    if results.has_errors:
        raise typer.Exit(code=1)
