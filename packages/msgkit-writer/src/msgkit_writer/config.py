"""Configuration model for the msgkit-writer package.

Provides ``WriterConfig`` with all tunable parameters and sensible
defaults.  Supports loading overrides from YAML or JSON files via the
``from_file()`` classmethod.
"""

from __future__ import annotations

import codecs
import json
import pathlib

from pydantic import BaseModel, Field, model_validator

from msgkit_writer.property_types import PropertyType
from msgkit_writer.registry import REGISTRY
from msgkit_writer.tags import PropertyTag


class WriterConfig(BaseModel):
    """All tunable parameters with sensible defaults."""

    # --- Identity ---
    writer_version: str = "msgkit_writer:1.0.0"

    # --- String Encoding ---
    prefer_unicode: bool = Field(
        default=True,
        description="Select the _W (UTF-16) variant of string fields rather than _A.",
    )
    ansi_codepage: str = Field(
        default="cp1252",
        description="Python codec used for PT_STRING8 values.",
    )

    # --- Attachment Layout ---
    attachment_name_tag: str = Field(
        default="PR_DISPLAY_NAME_W",
        description="Registry name of the property holding an attachment's file name.",
    )
    attachment_data_tag: str = Field(
        default="PR_ATTACH_DATA_BIN",
        description="Registry name of the property holding an attachment's payload.",
    )

    # --- Logging / PII Safety ---
    log_sample_data: bool = False

    @model_validator(mode="after")
    def _validate_fields(self) -> WriterConfig:
        try:
            codecs.lookup(self.ansi_codepage)
        except LookupError:
            raise ValueError(f"ansi_codepage '{self.ansi_codepage}' is not a known codec")
        for field_name in ("attachment_name_tag", "attachment_data_tag"):
            tag_name = getattr(self, field_name)
            if tag_name not in REGISTRY:
                raise ValueError(f"{field_name} '{tag_name}' is not a registered property tag")
        if REGISTRY[self.attachment_name_tag].type not in (
            PropertyType.PT_UNICODE,
            PropertyType.PT_STRING8,
        ):
            raise ValueError("attachment_name_tag must name a PT_UNICODE or PT_STRING8 property")
        if REGISTRY[self.attachment_data_tag].type is not PropertyType.PT_BINARY:
            raise ValueError("attachment_data_tag must name a PT_BINARY property")
        return self

    @property
    def name_tag(self) -> PropertyTag:
        return REGISTRY[self.attachment_name_tag]

    @property
    def data_tag(self) -> PropertyTag:
        return REGISTRY[self.attachment_data_tag]

    @classmethod
    def from_file(cls, path: str) -> WriterConfig:
        """Load configuration from a YAML or JSON file.

        File format is detected by extension: ``.yaml`` / ``.yml`` for YAML,
        ``.json`` for JSON.  Keys present in the file override the
        corresponding defaults; keys not present retain their defaults.
        """
        file_path = pathlib.Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = file_path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            import yaml  # type: ignore[import-untyped]

            with open(file_path) as fh:
                data = yaml.safe_load(fh)
        elif suffix == ".json":
            with open(file_path) as fh:
                data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

        if data is None:
            data = {}

        return cls(**data)
