"""Revert HTML entities the target dialect does not want encoded"""

from mdblocks.core.models import Block, HeaderBlock, SectionBlock, TextObject


# &amp; &lt; &gt; are intentionally absent: the target requires those encoded.
ENTITY_REVERSALS = (
    ('&#39;',  "'"),
    ('&#x27;', "'"),
    ('&quot;', '"'),
    ('&#x2F;', '/'),
    ('&#96;',  '`'),
)


def decode_entities(text: str) -> str:
    for entity, char in ENTITY_REVERSALS:
        text = text.replace(entity, char)
    return text


def _decode_text(obj: TextObject) -> TextObject:
    return obj.model_copy(update={"text": decode_entities(obj.text)})


def decode_block(block: Block) -> Block:
    """Return a copy of block with section/header texts decoded; other kinds as-is."""
    if isinstance(block, SectionBlock):
        update = {}
        if block.text is not None:
            update["text"] = _decode_text(block.text)
        if block.fields is not None:
            update["fields"] = tuple(_decode_text(f) for f in block.fields)
        return block.model_copy(update=update)
    if isinstance(block, HeaderBlock):
        return block.model_copy(update={"text": _decode_text(block.text)})
    return block


def decode_block_entities(blocks: list[Block]) -> list[Block]:
    return [decode_block(b) for b in blocks]
