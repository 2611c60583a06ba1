"""Block-level translation of a markdown-it syntax tree into Block Kit blocks"""

import logging
from typing import Callable

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from markdown_it.tree import SyntaxTreeNode

from mdblocks.core.blocks import divider, header, image, section, with_text
from mdblocks.core.convert.inline import cell_text, inline_children, to_mrkdwn, to_plain_text, translate
from mdblocks.core.convert.table import TABLE_FORMATTERS
from mdblocks.core.models import Block, ListOptions, ParsingOptions, SectionBlock, TableOptions


logger = logging.getLogger(__name__)

BULLET = '• '
QUOTE_PREFIX = '> '
TASK_ITEM_CLASS = 'task-list-item'


def _append_fragment(blocks: list[Block], fragment: str) -> None:
    """Extend the trailing section with fragment, or open a new one."""
    last = blocks[-1] if blocks else None
    if isinstance(last, SectionBlock) and last.text is not None:
        blocks[-1] = with_text(last, last.text.text + fragment)
    else:
        blocks.append(section(fragment))


def parse_paragraph(node: SyntaxTreeNode) -> list[Block]:
    """Merge adjacent inline fragments into sections; images split the run."""
    blocks: list[Block] = []
    for child in inline_children(node):
        result = translate(child)
        if isinstance(result, str):
            if result:
                _append_fragment(blocks, result)
        else:
            blocks.append(result)
    return blocks


def parse_heading(node: SyntaxTreeNode) -> list[Block]:
    text = ''.join(to_plain_text(c) for c in inline_children(node))
    return [header(text)] if text else []


def parse_code(node: SyntaxTreeNode) -> list[Block]:
    """Fenced or indented code; the info string (language) is dropped."""
    content = node.content
    if content.endswith('\n'):
        content = content[:-1]
    return [section(f"```\n{content}\n```")]


def _checked_state(item: SyntaxTreeNode) -> bool | None:
    """Tri-state checkbox flag set by the tasklists plugin: None when not a task item."""
    classes = str(item.attrs.get('class', '')).split()
    if TASK_ITEM_CLASS not in classes:
        return None
    for child in _item_inline(item):
        if child.type == 'html_inline':
            return 'checked="checked"' in child.content
    return False


def _item_inline(item: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    """Inline run of the item's leading paragraph; nested blocks are ignored."""
    if item.children and item.children[0].type == 'paragraph':
        return inline_children(item.children[0])
    return []


def _item_text(item: SyntaxTreeNode, is_task: bool) -> str:
    children = _item_inline(item)
    if is_task and children and children[0].type == 'html_inline':
        children = children[1:]
    text = ''.join(to_mrkdwn(c) for c in children if c.type != 'image')
    return text.lstrip() if is_task else text


def parse_list(node: SyntaxTreeNode, options: ListOptions) -> list[Block]:
    """One section, one line per item: '1. x' for ordered lists, bullets otherwise."""
    ordered = node.type == 'ordered_list'
    lines = []
    index = 0

    for item in node.children:
        checked = _checked_state(item)
        text = _item_text(item, checked is not None)
        if not _item_inline(item):
            lines.append(text)
        elif ordered:
            index += 1
            lines.append(f"{index}. {text}")
        elif checked is not None:
            prefix = options.checkbox_prefix(checked) if options.checkbox_prefix else None
            lines.append(f"{prefix if prefix is not None else BULLET}{text}")
        else:
            lines.append(f"{BULLET}{text}")

    return [section('\n'.join(lines))]


def _cell(node: SyntaxTreeNode) -> str:
    return ' '.join(cell_text(c) for c in inline_children(node))


def _table_rows(node: SyntaxTreeNode) -> tuple[list[str], list[list[str]]]:
    """Split a table node into (header cells, body rows)."""
    header_cells: list[str] = []
    rows: list[list[str]] = []
    for part in node.children:
        if part.type == 'thead':
            for tr in part.children:
                header_cells = [_cell(th) for th in tr.children]
        elif part.type == 'tbody':
            rows.extend([_cell(td) for td in tr.children] for tr in part.children)
    return header_cells, rows


def parse_table(node: SyntaxTreeNode, options: TableOptions) -> list[Block]:
    header_cells, rows = _table_rows(node)
    formatter = TABLE_FORMATTERS.get(options.style, TABLE_FORMATTERS['simple'])
    grid = formatter(header_cells, rows, options.max_cell_width)
    return [section(f"```\n{grid}\n```")]


def _quote(block: Block) -> Block:
    if isinstance(block, SectionBlock) and block.text is not None and '\n' in block.text.text:
        return with_text(block, QUOTE_PREFIX + block.text.text.replace('\n', '\n' + QUOTE_PREFIX))
    return block


def parse_blockquote(node: SyntaxTreeNode) -> list[Block]:
    """Quote paragraphs only; lists, headings and nested quotes inside are dropped."""
    blocks: list[Block] = []
    for child in node.children:
        if child.type != 'paragraph':
            logger.debug("Dropping %r inside blockquote", child.type)
            continue
        blocks.extend(_quote(b) for b in parse_paragraph(child))
    return blocks


def parse_thematic_break(node: SyntaxTreeNode) -> list[Block]:
    return [divider()]


def parse_html(node: SyntaxTreeNode) -> list[Block]:
    """Emit an image block per top-level <img src=...>; other markup yields nothing."""
    try:
        soup = BeautifulSoup(node.content, 'html.parser')
    except ParserRejectedMarkup as e:
        logger.debug("Unparseable raw HTML block: %s", e)
        return []

    blocks: list[Block] = []
    for tag in soup.find_all('img', recursive=False):
        url = tag.get('src')
        if not url:
            continue
        blocks.append(image(url, tag.get('alt') or url))
    if not blocks:
        logger.debug("Dropping raw HTML block %r", node.content[:40])
    return blocks


def _handlers(options: ParsingOptions) -> dict[str, Callable[[SyntaxTreeNode], list[Block]]]:
    return {
        'heading':      parse_heading,
        'paragraph':    parse_paragraph,
        'fence':        parse_code,
        'code_block':   parse_code,
        'blockquote':   parse_blockquote,
        'bullet_list':  lambda n: parse_list(n, options.lists),
        'ordered_list': lambda n: parse_list(n, options.lists),
        'table':        lambda n: parse_table(n, options.tables),
        'hr':           parse_thematic_break,
        'html_block':   parse_html,
    }


def parse_token(node: SyntaxTreeNode, options: ParsingOptions) -> list[Block]:
    """Translate one block-level node; unknown kinds produce no blocks."""
    handler = _handlers(options).get(node.type)
    if handler is None:
        logger.debug("Skipping unsupported block token %r", node.type)
        return []
    return handler(node)


def parse_blocks(root: SyntaxTreeNode, options: ParsingOptions = None) -> list[Block]:
    """Translate every top-level node in document order; siblings never merge."""
    options = options or ParsingOptions()
    return [block for node in root.children for block in parse_token(node, options)]
