"""Numeral system definitions: the pydantic model and JSON file loading.

WHY: Numeral systems come from several sources (the built-in catalog,
JSON files given on the command line, files in the user data directory).
All of them describe the same thing: an optional prefix and the digit
symbols. A single typed model keeps those sources interchangeable and can
be written back out as JSON.

HOW: SystemDefinition is a frozen pydantic model with ``prefix`` and
``digits`` (a flat list for one level, a list of lists for several).
load_definition() reads a file, validates it with jsonschema against the
bundled numeral_system.schema.json, then parses it into the model.
build() turns a definition into a NumeralSystem.

RULES:
- File layout: {"prefix": "0x", "digits": ["0", ..., "f"]} or
  {"digits": [["H", "B", "K", "D"], ["O", "A", "E", "I"]]}
- prefix is optional and defaults to ""
- Unknown keys in a file are ignored
- Schema errors and unreadable files raise DefinitionError; a well formed
  file describing an invalid system raises ConstructionError from build()
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
from pydantic import BaseModel, ConfigDict, Field

from bibicode.core.numeral import NumeralSystem
from bibicode.errors import DefinitionError

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "numeral_system.schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    """Load the definition JSON schema, cached after the first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


class SystemDefinition(BaseModel):
    """Description of a numeral system, as stored in JSON.

    RULES:
    - digits holds strings for a single level, lists of strings otherwise
    - The model does not validate the alphabet itself; build() does
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(
        default="",
        description="Literal text written before every number of this system.",
    )
    digits: Union[List[str], List[List[str]]] = Field(
        description="Digit symbols (one level) or one symbol list per level.",
    )

    def levels(self) -> List[List[str]]:
        """Return the digits as a list of levels."""
        if all(isinstance(item, str) for item in self.digits):
            return [list(self.digits)]
        return [list(level) for level in self.digits]

    def build(self) -> NumeralSystem:
        """Construct the NumeralSystem this definition describes.

        Raises:
            ConstructionError: If the alphabet is invalid or ambiguous.
        """
        return NumeralSystem(self.prefix, self.levels())

    @classmethod
    def from_system(cls, system: NumeralSystem) -> SystemDefinition:
        """Describe an existing system, flattening single-level alphabets."""
        if len(system.levels) == 1:
            digits: Union[List[str], List[List[str]]] = list(system.levels[0])
        else:
            digits = [list(level) for level in system.levels]
        return cls(prefix=system.prefix, digits=digits)

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)


def parse_definition(data: Any, source: str = "<data>") -> SystemDefinition:
    """Validate already decoded JSON data and build a SystemDefinition.

    Raises:
        DefinitionError: If the data does not match the definition schema.
    """
    try:
        jsonschema.validate(instance=data, schema=_get_schema())
    except jsonschema.ValidationError as exc:
        raise DefinitionError(source, exc.message) from exc
    return SystemDefinition.model_validate(data)


def load_definition(path: Union[str, Path]) -> SystemDefinition:
    """Load a numeral system definition from a JSON file.

    Args:
        path: Path to a UTF-8 JSON file.

    Returns:
        The validated SystemDefinition.

    Raises:
        DefinitionError: If the file cannot be read, is not JSON, or does
            not match the definition schema.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DefinitionError(str(path), "cannot read file ({})".format(exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DefinitionError(str(path), "invalid JSON ({})".format(exc)) from exc

    definition = parse_definition(data, str(path))
    logger.debug("Loaded numeral system definition from %s", path)
    return definition
