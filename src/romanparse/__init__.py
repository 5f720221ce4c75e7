"""romanparse — Roman numeral validation and conversion with vinculum support."""

from __future__ import annotations

__version__ = "0.1.0"

from romanparse.domain.result import ParseResult, Validity  # noqa: E402
from romanparse.services.evaluation import compute_without_vinculum  # noqa: E402
from romanparse.services.parsing import parse  # noqa: E402
from romanparse.services.validation import validate  # noqa: E402

__all__ = [
    "ParseResult",
    "Validity",
    "__version__",
    "compute_without_vinculum",
    "parse",
    "validate",
]
