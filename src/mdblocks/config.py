"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from mdblocks.core.models import ListOptions, ParsingOptions, TableOptions


CONFIG_FILE = "config.yaml"
DEFAULT_CHECKBOX_PREFIX = "• "


class Settings(BaseModel):
    app_name:       str = "mdblocks"
    parser_config:  str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    max_cell_width: int = Field(default=50, ge=1, description="Table cells are cut to this many characters")
    table_style:    str = Field(default="simple", pattern="^(simple|bordered)$", description="simple or bordered")
    checkbox_checked:   Optional[str] = Field(default=None, description="Prefix for checked to-do items")
    checkbox_unchecked: Optional[str] = Field(default=None, description="Prefix for unchecked to-do items")
    output_dir:     str = Field(default="dist", description="Directory for exported JSON files")
    indent:         int = Field(default=2, ge=0, description="JSON indent; 0 writes compact JSON")
    log_level:      str = Field(default="WARNING", description="Standard logging level name")

    def parsing_options(self) -> ParsingOptions:
        """Conversion options; a checkbox prefix function exists only if a prefix is configured."""
        checkbox_prefix = None
        if self.checkbox_checked is not None or self.checkbox_unchecked is not None:
            checked = DEFAULT_CHECKBOX_PREFIX if self.checkbox_checked is None else self.checkbox_checked
            unchecked = DEFAULT_CHECKBOX_PREFIX if self.checkbox_unchecked is None else self.checkbox_unchecked

            def checkbox_prefix_fn(is_checked: bool) -> str:
                return checked if is_checked else unchecked
            checkbox_prefix = checkbox_prefix_fn
        return ParsingOptions(
            lists=ListOptions(checkbox_prefix=checkbox_prefix),
            tables=TableOptions(max_cell_width=self.max_cell_width, style=self.table_style),
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOCKS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOCKS_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
