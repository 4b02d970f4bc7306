"""Configuration schema for clialgo."""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, Field

from ..core.files import DEFAULT_IMPORTANCE, MAX_IMPORTANCE, MIN_IMPORTANCE


class StorageConfig(BaseModel):
    """Configuration for the data file."""

    data_file: str = "data/clialgo.yaml"


class ExportConfig(BaseModel):
    """Configuration for exporting filtered notes."""

    folder: str = "export"


class NotesConfig(BaseModel):
    """Configuration for newly added notes."""

    default_importance: int = Field(
        default=DEFAULT_IMPORTANCE, ge=MIN_IMPORTANCE, le=MAX_IMPORTANCE
    )


class Config(BaseModel):
    """Main configuration class for clialgo."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    notes: NotesConfig = Field(default_factory=NotesConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        return {
            "storage": {
                "data_file": self.storage.data_file,
            },
            "export": {
                "folder": self.export.folder,
            },
            "notes": {
                "default_importance": self.notes.default_importance,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from dictionary.

        Unknown sections are ignored so that older config files keep loading.
        """
        pydantic_data: dict[str, Any] = {}
        for section in ("storage", "export", "notes"):
            if isinstance(data.get(section), dict):
                pydantic_data[section] = data[section]
        return cls.model_validate(pydantic_data)

    def to_yaml(self) -> str:
        """Convert config to YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)
