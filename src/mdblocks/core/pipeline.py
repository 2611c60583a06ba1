"""Conversion entry points: markdown text or files to Block Kit blocks"""

import logging
from pathlib import Path

from mdblocks.core.convert.blocks import parse_blocks
from mdblocks.core.convert.entities import decode_block_entities
from mdblocks.core.export import write_blocks
from mdblocks.core.models import Block, ParsingOptions, SourceDoc
from mdblocks.core.parse import discover_files, lex, read_file


logger = logging.getLogger(__name__)


def convert(body: str, options: ParsingOptions = None, parser_config: str = 'gfm-like') -> list[Block]:
    """Convert markdown (or GFM) text into an ordered list of Block Kit blocks.

    - All heading levels become a single header block
    - Numbered, bulleted and to-do lists become one section each
    - Italics, bold, strikethrough, inline code and links become mrkdwn
    - Images (markdown or raw <img>) become image blocks
    - Thematic breaks become dividers

    Tables are rendered as monospace text grids, and block quotes keep only
    their paragraphs. Tokenizer errors propagate unchanged.
    """
    root = lex(body, parser_config)
    blocks = parse_blocks(root, options or ParsingOptions())
    return decode_block_entities(blocks)


async def markdown_to_blocks(body: str, options: ParsingOptions = None, parser_config: str = 'gfm-like') -> list[Block]:
    """Awaitable form of convert(); the work itself never suspends."""
    return convert(body, options, parser_config)


def convert_file(path: Path, options: ParsingOptions = None, parser_config: str = 'gfm-like') -> tuple[SourceDoc, list[Block]]:
    """Read a markdown file (frontmatter stripped) and convert its body."""
    doc = read_file(path)
    return doc, convert(doc.markdown, options, parser_config)


def run_convert(
    path: str,
    output_dir: Path,
    options: ParsingOptions = None,
    parser_config: str = 'gfm-like',
    indent: int = 2,
    ) -> list[tuple[Path, Path]]:
    """Convert every markdown file under path into JSON. Returns (source_path, json_path) pairs."""
    root = Path(path)
    base = root if root.is_dir() else root.parent
    results = []
    for p in discover_files(root):
        try:
            doc, blocks = convert_file(p, options, parser_config)
            out_file = write_blocks(doc, blocks, output_dir, p.parent.relative_to(base), indent)
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
        logger.info("Converted %s -> %s (%d blocks)", p, out_file, len(blocks))
        results.append((p, out_file))
    return results
