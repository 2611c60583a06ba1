"""Inline token translation: mrkdwn fragments, plain text, and hoisted images

Every function here takes a single inline SyntaxTreeNode (a child of a block's
``inline`` node). Inline kinds produced by markdown-it:

    text, softbreak, hardbreak, em, strong, s, code_inline, link, image, html_inline

Unknown kinds translate to an empty string so that one odd token never aborts
a document.
"""

import logging
from typing import Union

from markdown_it.tree import SyntaxTreeNode

from mdblocks.core.blocks import image
from mdblocks.core.models import ImageBlock


logger = logging.getLogger(__name__)

# Only these three are escaped; the target dialect wants everything else literal.
ESCAPES = {'&': '&amp;', '<': '&lt;', '>': '&gt;'}

WRAPPERS = {
    'em':     '_',
    'strong': '*',
    's':      '~',
}


def escape_text(text: str) -> str:
    return ''.join(ESCAPES.get(ch, ch) for ch in text)


def inline_children(node: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    """Inline run of a block node (heading, paragraph, th/td), or [] if it has none."""
    for child in node.children:
        if child.type == 'inline':
            return child.children
    return []


def to_mrkdwn(node: SyntaxTreeNode) -> str:
    """Render one inline node as a mrkdwn fragment. Images render as ''."""
    kind = node.type

    if kind in WRAPPERS:
        mark = WRAPPERS[kind]
        return f"{mark}{''.join(to_mrkdwn(c) for c in node.children)}{mark}"

    if kind == 'link':
        label = ''.join(to_mrkdwn(c) for c in node.children)
        return f"<{node.attrs.get('href', '')}|{label}> "

    if kind == 'code_inline':
        return f"`{escape_text(node.content)}`"

    if kind == 'text':
        return escape_text(node.content)

    if kind == 'softbreak':
        return '\n'

    if kind == 'html_inline':
        return node.content

    if kind not in ('hardbreak', 'image'):
        logger.debug("Dropping unsupported inline token %r", kind)
    return ''


def to_plain_text(node: SyntaxTreeNode) -> str:
    """Render one inline node with all styling delimiters stripped."""
    kind = node.type

    if kind in WRAPPERS or kind == 'link':
        return ''.join(to_plain_text(c) for c in node.children)

    if kind == 'image':
        return node.attrs.get('title') or node.attrs.get('src', '')

    if kind == 'code_inline':
        return escape_text(node.content)

    if kind == 'text':
        return escape_text(node.content)

    if kind == 'softbreak':
        return '\n'

    if kind == 'html_inline':
        return node.content

    return ''


def to_image(node: SyntaxTreeNode) -> ImageBlock:
    """Hoist an image node into a standalone ImageBlock."""
    src = str(node.attrs.get('src', ''))
    title = node.attrs.get('title') or None
    alt = node.content or title or src
    return image(src, alt, title)


def translate(node: SyntaxTreeNode) -> Union[str, ImageBlock]:
    """Translate an inline node to either a mrkdwn fragment or an ImageBlock."""
    if node.type == 'image':
        return to_image(node)
    return to_mrkdwn(node)


def cell_text(node: SyntaxTreeNode) -> str:
    """Text for one inline child of a table cell; images give their location."""
    if node.type == 'image':
        return node.attrs.get('src') or node.attrs.get('title') or node.content or 'image'
    return to_plain_text(node)
