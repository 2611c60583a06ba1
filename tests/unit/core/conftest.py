"""Shared fixtures for core unit tests"""

import pytest

from mdblocks.core.convert.inline import inline_children
from mdblocks.core.parse import lex


SAMPLE_MD = """\
# Heading **1**

A paragraph with **bold** text.

- item one
- item two

```python
print("hello")
```

---

> quoted
"""


@pytest.fixture(name="tree")
def tree_fixture():
    """Factory: markdown text -> root SyntaxTreeNode."""
    return lex


@pytest.fixture(name="first_block")
def first_block_fixture():
    """Factory: markdown text -> first top-level block node."""
    return lambda md: lex(md).children[0]


@pytest.fixture(name="inline_nodes")
def inline_nodes_fixture():
    """Factory: a one-paragraph markdown string -> its inline child nodes."""
    return lambda md: inline_children(lex(md).children[0])


@pytest.fixture(name="sample_tree")
def sample_tree_fixture():
    return lex(SAMPLE_MD)
