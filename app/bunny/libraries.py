"""
Known Bunny.net Stream libraries.

Libraries with an empty ID need the ID entered by hand.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BunnyLibrary:
    """A named Bunny.net video library."""
    name: str
    id: str = ""

    @property
    def has_fixed_id(self) -> bool:
        return self.id != ""


BUNNY_LIBRARIES: list[BunnyLibrary] = [
    BunnyLibrary("astro"),
    BunnyLibrary("AstroLMS"),
    BunnyLibrary("C2C LMS"),
    BunnyLibrary("Dr Finance (Presto Public)"),
    BunnyLibrary("InfiniteLMS", "239218"),
    BunnyLibrary("Internal Use"),
    BunnyLibrary("MadAboutSportsLMS"),
    BunnyLibrary("ProfitUniLMS"),
    BunnyLibrary("SPRINGPAD (Presto Public)"),
    BunnyLibrary("TechGurukul LMS (Presto Public)"),
    BunnyLibrary("WDNTV"),
    BunnyLibrary("Yogalution LMS"),
]


def find_library(name: str) -> Optional[BunnyLibrary]:
    """Look up a library by its exact name."""
    for library in BUNNY_LIBRARIES:
        if library.name == name:
            return library
    return None


def resolve_library_id(library_name: Optional[str], library_id: Optional[str]) -> str:
    """
    Pick the library ID to use for an upload.

    A known library with a fixed ID always wins; otherwise the
    manually entered ID is used.

    Args:
        library_name: Selected library name (may be unknown or empty)
        library_id: Manually entered library ID

    Returns:
        Stripped library ID, or "" if none is available
    """
    library = find_library(library_name) if library_name else None
    if library and library.has_fixed_id:
        return library.id
    return (library_id or "").strip()


def env_var_hint(library_id: Optional[str]) -> Optional[str]:
    """
    Name the environment variables an operator should set for a library.

    Returns:
        Hint string, or None when no library ID is known yet
    """
    if not library_id:
        return None
    clean_id = library_id.strip()
    return f"BUNNY_KEY_NAME_{clean_id} OR BUNNY_API_KEY"
