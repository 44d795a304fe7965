"""
ADF component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class ADFRulesPort(Protocol):
    """Port for the upstream input caps applied before validation."""

    def get_max_json_bytes(self) -> int:
        """Get maximum serialized document size in bytes."""
        ...

    def get_max_depth(self) -> int:
        """Get maximum nesting depth of the document tree."""
        ...
