"""Export: serialize block lists and message payloads to JSON"""

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from mdblocks.core.models import Block, SourceDoc


BLOCK_LIST = TypeAdapter(list[Block])


def dump_blocks(blocks: list[Block]) -> list[dict[str, Any]]:
    """JSON-ready dicts for blocks, omitting unset optional fields."""
    return BLOCK_LIST.dump_python(blocks, mode='json', exclude_none=True)


def build_payload(blocks: list[Block], text: str = None) -> dict[str, Any]:
    """chat.postMessage-style payload; text is the notification fallback."""
    payload: dict[str, Any] = {"blocks": dump_blocks(blocks)}
    if text:
        payload["text"] = text
    return payload


def to_json(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent or None, ensure_ascii=False)


def write_blocks(
    doc: SourceDoc,
    blocks: list[Block],
    output_dir: Path,
    rel_dir: Path = Path('.'),
    indent: int = 2,
    ) -> Path:
    """Write blocks as JSON to output_dir / rel_dir / doc.slug.json and return the path."""
    dest_dir = output_dir / rel_dir
    dest_dir.mkdir(parents=True, exist_ok=True)
    json_path = dest_dir / f"{doc.slug}.json"
    json_path.write_text(to_json(dump_blocks(blocks), indent), encoding='utf-8')
    return json_path
