"""Settings for the vendor list client and CLI."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from vendor_extractor.constants import MAX_PAGE_SIZE

ENV_PREFIX = "VENDOR_EXTRACTOR_"


class ExtractorSettings(BaseModel):
    """Where to pull vendors from and how to page through them."""

    url: Optional[str] = Field(default=None, description="Vendor list endpoint URL")
    page_size: int = Field(default=MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    page_delay: float = Field(default=1.0, ge=0, description="Seconds between pages")
    timeout: float = Field(default=30.0, gt=0)
    category: Optional[str] = Field(default=None, description="Keep only this category label")

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "ExtractorSettings":
        """Load from VENDOR_EXTRACTOR_* variables; unset ones keep defaults."""
        env = os.environ if environ is None else environ
        values: dict = {}
        for name in ("url", "page_size", "page_delay", "timeout", "category"):
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        return cls.model_validate(values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ExtractorSettings":
        """Load from YAML file. Supports nested (client:) or flat structure."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        nested = data.get("client", {}) or {}
        flat = {
            key: nested.get(key, data.get(key))
            for key in ("url", "page_size", "page_delay", "timeout", "category")
        }
        return cls.model_validate({k: v for k, v in flat.items() if v is not None})

    def merged(self, **overrides) -> "ExtractorSettings":
        """Copy with non-None overrides applied (e.g. from CLI flags)."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return self.model_validate({**self.model_dump(), **updates})
