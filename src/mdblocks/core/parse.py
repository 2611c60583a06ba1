"""File discovery, frontmatter extraction, and markdown-it tokenization"""

import re
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.tasklists import tasklists_plugin

from mdblocks.core.models import SourceDoc
from mdblocks.core.utils.slug import slugify


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance with GFM tables, strikethrough and task lists."""
    return MarkdownIt(preset, options_update={"linkify": False}).use(tasklists_plugin)


def lex(text: str, preset: str = 'gfm-like') -> SyntaxTreeNode:
    """Tokenize text into a syntax tree; parser errors propagate to the caller."""
    return SyntaxTreeNode(make_parser(preset).parse(text))


def strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def read_file(path: Path) -> SourceDoc:
    """Read a markdown file, splitting off frontmatter and deriving its slug."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = strip_frontmatter(raw)
    slug = frontmatter.get('slug') or slugify(path.stem)
    return SourceDoc(path=path, slug=str(slug), markdown=body, frontmatter=frontmatter)
