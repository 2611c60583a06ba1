"""Block Kit output models and conversion options"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TextObject(BaseModel):
    """A Block Kit composition text object."""
    model_config = ConfigDict(frozen=True)

    type: Literal["mrkdwn", "plain_text"]
    text: str


class SectionBlock(BaseModel):
    """Formatted mrkdwn text; the only block kind that carries styling."""
    model_config = ConfigDict(frozen=True)

    type: Literal["section"] = "section"
    text: Optional[TextObject] = None
    fields: Optional[tuple[TextObject, ...]] = None


class HeaderBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["header"] = "header"
    text: TextObject                # always plain_text


class ImageBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["image"] = "image"
    image_url: str
    alt_text: str
    title: Optional[TextObject] = None


class DividerBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["divider"] = "divider"


Block = Annotated[
    Union[SectionBlock, HeaderBlock, ImageBlock, DividerBlock],
    Field(discriminator="type"),
]


@dataclass(frozen=True)
class ListOptions:
    """List rendering options; checkbox_prefix receives the item's checked state."""
    checkbox_prefix: Optional[Callable[[bool], str]] = None


@dataclass(frozen=True)
class TableOptions:
    max_cell_width: int = 50
    style:          str = "simple"      # simple | bordered


@dataclass(frozen=True)
class ParsingOptions:
    """Caller-supplied options for a single conversion."""
    lists:  ListOptions = field(default_factory=ListOptions)
    tables: TableOptions = field(default_factory=TableOptions)


@dataclass
class SourceDoc:
    """A markdown file read from disk, frontmatter split off; not persisted."""
    path:        Path
    slug:        str
    markdown:    str               # body only (frontmatter stripped)
    frontmatter: dict[str, Any]
