"""End-to-end tests: raw markdown through markdown_to_blocks"""

import asyncio

import pytest

from mdblocks.core.blocks import header, image, section
from mdblocks.core.pipeline import markdown_to_blocks


IMAGE_URL = "https://user-images.githubusercontent.com/16073505/123464383-b8715300-d5ba-11eb-8586-b1f965e1f18d.jpg"


def _blocks(text: str, options=None):
    return asyncio.run(markdown_to_blocks(text, options))


def test_full_document():
    """Every supported construct in one document converts in source order."""
    text = f"""
a **b** _c_ **_d_ e**

# heading **a**

![59953191-480px]({IMAGE_URL})

<img src="{IMAGE_URL}" alt="59953191-480px"/>

> block quote **a**
> block quote b

[link](https://apple.com)

- bullet _a_
- bullet _b_

1. number _a_
2. number _b_

- [ ] checkbox false
- [x] checkbox true

| Syntax      | Description |
| ----------- | ----------- |
| Header      | Title       |
| Paragraph   | Text        |
"""
    assert _blocks(text) == [
        section("a *b* _c_ *_d_ e*"),
        header("heading a"),
        image(IMAGE_URL, "59953191-480px"),
        image(IMAGE_URL, "59953191-480px"),
        section("> block quote *a*\n> block quote b"),
        section("<https://apple.com|link> "),
        section("• bullet _a_\n• bullet _b_"),
        section("1. number _a_\n2. number _b_"),
        section("• checkbox false\n• checkbox true"),
        section(
            "```\n"
            "Syntax     Description\n"
            "---------  -----------\n"
            "Header     Title\n"
            "Paragraph  Text\n"
            "```"
        ),
    ]


def test_long_text_truncated_to_one_section():
    text = "a" * 3500 + "bbbcccdddeee"
    assert _blocks(text) == [section(text[:3000])]


@pytest.mark.parametrize("fence", ["```", "```javascript"])
def test_code_blocks(fence):
    """Code fences keep their body and drop any language tag."""
    code = "if (a === 'hi') {\n  console.log('hi!')\n} else {\n  console.log('hello')\n}"
    assert _blocks(f"{fence}\n{code}\n```") == [section(f"```\n{code}\n```")]


def test_escaping():
    assert _blocks("<>&'\"\"'&><") == [section("&lt;&gt;&amp;'\"\"'&amp;&gt;&lt;")]


def test_apostrophes_are_not_encoded():
    text = (
        "The 'thing' in the 'dark', it's a blur,\n"
        "A whisper, a 'sigh', a soft purr.\n"
        "Don't ask what it's 'seen', or where it's been,\n"
        "Just the 'echo' of 'what's' within."
    )
    assert _blocks(text) == [section(text)]


def test_special_characters_are_not_encoded():
    text = (
        'Testing "quotes" and \'apostrophes\' and `backticks`\n'
        "Forward/slash and other special chars\n"
        "It's important that contractions work"
    )
    assert _blocks(text) == [section(text)]


def test_table_varying_widths():
    text = """
| Short | Medium Column | Very Long Column Name |
| ----- | ------------- | --------------------- |
| A     | Some text     | This is a longer text |
| B     | More content  | Another long entry    |
"""
    assert _blocks(text) == [section(
        "```\n"
        "Short  Medium Column  Very Long Column Name\n"
        "-----  -------------  ---------------------\n"
        "A      Some text      This is a longer text\n"
        "B      More content   Another long entry\n"
        "```"
    )]


def test_table_inline_formatting_stripped():
    text = """
| Column | **Bold** | _Italic_ |
| ------ | -------- | -------- |
| Row 1  | **text** | _text_   |
| Row 2  | normal   | `code`   |
"""
    assert _blocks(text) == [section(
        "```\n"
        "Column  Bold    Italic\n"
        "------  ------  ------\n"
        "Row 1   text    text\n"
        "Row 2   normal  code\n"
        "```"
    )]


def test_table_empty_cells():
    text = """
| Column A | Column B | Column C |
| -------- | -------- | -------- |
| Value 1  |          | Value 3  |
|          | Value 2  |          |
"""
    assert _blocks(text) == [section(
        "```\n"
        "Column A  Column B  Column C\n"
        "--------  --------  --------\n"
        "Value 1             Value 3\n"
        "          Value 2\n"
        "```"
    )]


def test_table_single_column():
    text = """
| Single Column |
| ------------- |
| Row 1         |
| Row 2         |
"""
    assert _blocks(text) == [section("```\nSingle Column\n-------------\nRow 1\nRow 2\n```")]


def test_table_many_columns():
    text = """
| A | B | C | D | E | F |
| - | - | - | - | - | - |
| 1 | 2 | 3 | 4 | 5 | 6 |
"""
    assert _blocks(text) == [section("```\nA  B  C  D  E  F\n-  -  -  -  -  -\n1  2  3  4  5  6\n```")]


def test_inline_image_splits_paragraph():
    blocks = _blocks("lead ![pic](https://x.io/p.png) tail")
    assert blocks == [section("lead "), image("https://x.io/p.png", "pic"), section(" tail")]


def test_unsupported_html_is_skipped():
    """A bad block never aborts the rest of the document."""
    assert _blocks("<div>\nnot an image\n</div>\n\nafter") == [section("after")]
