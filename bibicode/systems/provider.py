"""Resolve a numeral system from a name or a file path.

WHY: The CLI accepts "hex", "./my-system.json" or "klingon" (a file in the
user data directory) for --from and --to. The core must never depend on
the file system or the environment, so this lookup lives in an injectable
provider that hands back ready-built NumeralSystem objects.

HOW: SystemProvider holds a catalog mapping and an optional data
directory. definition() tries, in order: an existing file path, a catalog
name, then ``<directory>/<name>.json``. resolve() builds the result.

RULES:
- An existing file path always wins over a catalog name of the same text
- Data directory files are only consulted for names not in the catalog
- A missing data directory simply contributes no systems
- Unknown names raise SystemLookupError listing what is available
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Dict, List, Optional

from bibicode.config import DEFINITION_SUFFIX
from bibicode.core.numeral import NumeralSystem
from bibicode.errors import SystemLookupError
from bibicode.systems import CATALOG
from bibicode.systems.definition import SystemDefinition, load_definition

logger = logging.getLogger(__name__)


class SystemProvider:
    """Looks up numeral systems by name or path.

    Args:
        catalog: Named definitions; defaults to the built-in CATALOG.
        directory: Directory of user ``<name>.json`` definitions, or None.
    """

    def __init__(
        self,
        catalog: Optional[Mapping[str, SystemDefinition]] = None,
        directory: Optional[Path] = None,
    ) -> None:
        self.catalog = dict(CATALOG if catalog is None else catalog)
        self.directory = Path(directory) if directory is not None else None

    def user_definitions(self) -> Dict[str, Path]:
        """Map each ``*.json`` stem in the data directory to its path."""
        if self.directory is None or not self.directory.is_dir():
            return {}
        found: Dict[str, Path] = {}
        for path in sorted(self.directory.glob("*" + DEFINITION_SUFFIX)):
            if path.is_file():
                found.setdefault(path.stem, path)
        return found

    def available(self) -> List[str]:
        """Names accepted by resolve(): catalog first, then user files."""
        names = list(self.catalog)
        for name in self.user_definitions():
            if name in self.catalog:
                logger.debug("User definition %s is shadowed by the catalog", name)
                continue
            names.append(name)
        return names

    def definition(self, name: str) -> SystemDefinition:
        """Find the definition for a file path or system name.

        Raises:
            SystemLookupError: If ``name`` matches nothing.
            DefinitionError: If a matching file is malformed.
        """
        path = Path(name)
        if path.is_file():
            logger.info("Using numeral system file %s", path)
            return load_definition(path)

        if name in self.catalog:
            logger.debug("Using catalog numeral system %s", name)
            return self.catalog[name]

        if self.directory is not None:
            user_path = self.directory / (name + DEFINITION_SUFFIX)
            if user_path.is_file():
                logger.info("Using user numeral system %s from %s", name, user_path)
                return load_definition(user_path)

        raise SystemLookupError(name, self.available())

    def resolve(self, name: str) -> NumeralSystem:
        """Build the numeral system for a file path or system name."""
        return self.definition(name).build()
