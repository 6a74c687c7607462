from typing import Annotated

import typer
from logzero import logger

from wildcard_intersection.errors import InvalidPatternError
from wildcard_intersection.intersection import intersect_all


def intersect(
    patterns: Annotated[
        list[str],
        typer.Argument(help="Patterns holding at most one '*' wildcard each"),
    ],
    strict: Annotated[
        bool,
        typer.Option(
            envvar="WILDCARD_INTERSECTION_STRICT",
            help="Reject every pattern with multiple wildcards up front",
        ),
    ] = False,
):
    """Print the pattern matched by all PATTERNS.

    Exits with code 1 and prints nothing when no string matches them all.
    """
    logger.debug(f"Intersecting {len(patterns)} patterns: {patterns}")

    try:
        intersection = intersect_all(patterns, strict=strict)
    except InvalidPatternError as e:
        logger.error(str(e))
        raise typer.Exit(code=2)

    if intersection is None:
        logger.warning("No string matches all of the given patterns.")
        raise typer.Exit(code=1)

    typer.echo(intersection)
