"""
Resolve the Bunny.net API key for a library from the server environment.

Lookup order:
    A. Direct match:  BUNNY_KEY_<libraryId>
    B. Scan match:    any BUNNY_KEY_* variable whose name contains <libraryId>
    C. Global:        BUNNY_API_KEY
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

KEY_PREFIX = "BUNNY_KEY_"
GLOBAL_KEY = "BUNNY_API_KEY"


@dataclass
class ResolvedKey:
    """An API key and the environment variable it came from."""
    api_key: str
    source: str

    def __repr__(self) -> str:
        return f"ResolvedKey(source={self.source!r})"


def resolve_api_key(
    library_id: str,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[ResolvedKey]:
    """
    Find the API key for a Bunny.net library.

    Args:
        library_id: Bunny.net library ID
        environ: Environment mapping (defaults to os.environ)

    Returns:
        ResolvedKey, or None if no tier matched
    """
    environ = os.environ if environ is None else environ
    library_id = str(library_id or "").strip()

    resolved = None

    direct_name = f"{KEY_PREFIX}{library_id}"
    if library_id and environ.get(direct_name):
        resolved = ResolvedKey(environ[direct_name], direct_name)

    if resolved is None and library_id:
        # Only the first matching name is considered, even if its value is empty
        found = next(
            (name for name in environ if name.startswith(KEY_PREFIX) and library_id in name),
            None,
        )
        if found and environ[found]:
            resolved = ResolvedKey(environ[found], found)

    if resolved is None and environ.get(GLOBAL_KEY):
        resolved = ResolvedKey(environ[GLOBAL_KEY], f"{GLOBAL_KEY} (Global Fallback)")

    logger.info(
        "[API] Key Lookup for ID %s. Found? %s via %s",
        library_id,
        resolved is not None,
        resolved.source if resolved else "none",
    )
    return resolved


def visible_key_names(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    List the BUNNY_* variable names the server can see (never their values).

    Returns:
        Comma-separated names, or a note that none were found
    """
    environ = os.environ if environ is None else environ
    names = [name for name in environ if name.startswith("BUNNY_")]
    return ", ".join(names) or "None detected starting with BUNNY_"
