"""Slug generation for output file names"""

import re


def slugify(text: str, fallback: str = 'document') -> str:
    """Lowercase, hyphen-separated file-name-safe slug; fallback when nothing survives."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-') or fallback
