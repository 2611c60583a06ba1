"""Block constructors enforcing Block Kit field length caps"""

from typing import Optional

from mdblocks.core.models import DividerBlock, HeaderBlock, ImageBlock, SectionBlock, TextObject


SECTION_TEXT_LIMIT = 3000
HEADER_TEXT_LIMIT = 150
IMAGE_TEXT_LIMIT = 2000


def section(text: str) -> SectionBlock:
    return SectionBlock(text=TextObject(type="mrkdwn", text=text[:SECTION_TEXT_LIMIT]))


def header(text: str) -> HeaderBlock:
    return HeaderBlock(text=TextObject(type="plain_text", text=text[:HEADER_TEXT_LIMIT]))


def image(url: str, alt_text: str, title: Optional[str] = None) -> ImageBlock:
    """Image block; title becomes a plain_text caption when given."""
    return ImageBlock(
        image_url=url,
        alt_text=alt_text[:IMAGE_TEXT_LIMIT],
        title=TextObject(type="plain_text", text=title[:IMAGE_TEXT_LIMIT]) if title else None,
    )


def divider() -> DividerBlock:
    return DividerBlock()


def with_text(block: SectionBlock, text: str) -> SectionBlock:
    """Copy of a section with its text replaced, capped like section()."""
    return block.model_copy(update={
        "text": TextObject(type="mrkdwn", text=text[:SECTION_TEXT_LIMIT]),
    })
