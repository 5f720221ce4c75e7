"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, romanparse.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    case_insensitive: bool = False


class DemoConfig(BaseModel):
    """[demo] section — sample input for ``romanparse demo``."""

    model_config = {"frozen": True}

    numeral: str = "XXIX"
    vinculum: str | None = "CXVII"

