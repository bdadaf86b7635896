"""Load declarative check definitions from YAML files."""

import asyncio
from pathlib import Path

import yaml
from pydantic import ValidationError

from endpoint_harness.harness import VerificationHarness
from endpoint_harness.models.definition import DefinitionFile


async def load_definition_file(path: Path) -> DefinitionFile:
    """Load and validate a check definition file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, is not valid YAML or does not
            match the definition schema

    """
    if not path.is_file():
        raise FileNotFoundError(f"Definition file not found: {path}")

    content = await asyncio.to_thread(path.read_text, encoding="utf-8")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty definition file: {path}")

    try:
        return DefinitionFile.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid check definition schema in {path}: {e}") from e


def register_definitions(
    harness: VerificationHarness, definitions: DefinitionFile
) -> None:
    """Register every defined check on the harness, in file order."""
    for definition in definitions.checks:
        harness.register_check(definition.name, definition.to_executor())
