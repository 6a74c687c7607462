import json

import typer
from pydantic.json_schema import model_json_schema

from wildcard_intersection.pattern_pairs import PatternPairs


def gen_json_schema_for_pairs():
    """Print the JSON schema of a pattern pairs YAML file."""
    typer.echo(json.dumps(model_json_schema(PatternPairs), indent=2))
