#!/usr/bin/env python3
"""
Named Context Storage

Contexts live as pretty-printed JSON files, one per name, in a single
directory: <directory>/<name>.json.
"""

import json
import logging
from pathlib import Path

from ..core.errors import ContextNotFound, ExpendError, InvalidContextFile
from ..core.json_utils import read_json, write_json
from .models import UserContext

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_NAME = "default"


class ContextStore:
    """Reads and writes named UserContext files in one directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, name: str) -> Path:
        return self.directory / f"{name}.json"

    def load(self, name: str = DEFAULT_CONTEXT_NAME) -> UserContext:
        """
        Load a named context.

        Raises:
            ContextNotFound: If there is no file for name
            InvalidContextFile: If the file is not a valid context
        """
        return self.load_file(self.path_for(name))

    def load_file(self, path: Path) -> UserContext:
        """Load a context from an explicit file path; see load()."""
        if not path.is_file():
            raise ContextNotFound(
                f"Could not read context file at '{path}'. Use 'context set --name {path.stem}' to create one."
            )
        try:
            return UserContext.from_dict(read_json(path))
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError, ExpendError) as e:
            raise InvalidContextFile(
                f"Could not deserialize context file at '{path}': {e}. You can try to recreate it with 'context set'."
            ) from e

    def save(self, name: str, context: UserContext) -> Path:
        """Write a named context, replacing any existing one."""
        path = self.path_for(name)
        write_json(path, context.to_dict())
        logger.info(f"Stored context '{name}' at {path}")
        return path

    def names(self) -> list[str]:
        """Get the names of all stored contexts, sorted."""
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob("*.json") if p.is_file())
