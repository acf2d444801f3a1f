"""
Shared Pydantic models.

  - VariantInfo: Summary info for listing registered variants
"""

from __future__ import annotations

from pydantic import BaseModel


class VariantInfo(BaseModel):
    """Summary of a registered variant (used by `list`)."""

    name: str
    class_name: str
    description: str = ""
    overrides_step: bool = False
