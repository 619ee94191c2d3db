"""
FastAPI dependencies for the Gemini client and server environment.
"""

import os
from typing import Any, Mapping, Optional

from app.settings import get_settings
from app.llm.gemini import get_client


def get_gemini_client() -> Optional[Any]:
    """
    Gemini client dependency.

    Returns None when no key is configured; the chapter and caption
    services then build the client themselves and report the failure
    as a 502 after the upload has been validated.
    """
    if not get_settings().GEMINI_API_KEY:
        return None
    return get_client()


def get_environ() -> Mapping[str, str]:
    """
    Environment the Bunny.net keys are resolved from.

    Per-library BUNNY_KEY_* names are open-ended, so they are read
    from the live environment instead of Settings.
    """
    return os.environ
