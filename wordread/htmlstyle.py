"""The head of the HTML log: stylesheet and opening markup."""

from __future__ import annotations

from typing import Iterable

from wordread.colors import render_color_rules

DEFAULT_BACKGROUND_IMAGE = "../include/log/backgrounds/anime_tyan.webp"

_VIEWPORT = 'name="viewport" content="width=device-width, initial-scale=1.0"'


def _block(indent: int, opener: str, declarations: Iterable[str], closer: str = "}\n\n") -> str:
    """Return one CSS rule: the opener line, indented declarations and the closer."""
    tabs = "\t" * indent
    inner = "\t" * (indent + 1)
    body = "".join(inner + declaration for declaration in declarations)
    return f"{tabs}{opener}\n{body}{tabs}{closer}"


def _background_image(image: str, indent: int) -> str:
    return _block(
        indent,
        "body {",
        (
            "margin: 0;\n",
            "padding: 0;\n",
            "height: 100vh;\n",
            f"background-image: url('{image}');\n",
            "background-size: cover;\n",
            "background-position: center;\n",
            "background-repeat: no-repeat;\n",
            "background-attachment: fixed;\n",
            "font-family: Arial, sans-serif;\n",
            "color: white;\n",
        ),
    )


def _text_section(indent: int) -> str:
    return _block(
        indent,
        ".text-section {",
        (
            "padding: 30px;\n",
            "border-radius: 10px;\n",
            "max-width: 800px;\n",
            "margin: 20px auto;\n",
        ),
    )


def _heading(indent: int) -> str:
    return _block(indent, "h1 {", ("text-align: center;\n", "margin-bottom: 5px;\n"))


def _paragraph(indent: int) -> str:
    return _block(
        indent,
        "p {",
        ("line-height: 0.5;\n", "text-align: justify;\n", "margin: 10px 0;\n"),
    )


def _color(indent: int) -> str:
    return _block(
        indent,
        ".color {",
        ("padding: 0px 10px;\n", "margin: 1px 0;\n", "line-height: 0.5;\n"),
    )


def _color_paragraph(indent: int) -> str:
    return _block(
        indent,
        ".color p {",
        ("white-space: pre;\n", "padding: 0;\n", "margin: 0;\n", "line-height: 1.1;\n"),
    )


def _body_overlay(indent: int) -> str:
    # The z-index declaration and the closing brace carry no newline of their own.
    return _block(
        indent,
        "body::before {",
        (
            'content: "";\n',
            "position: fixed;\n",
            "top: 0;\n",
            "left: 0;\n",
            "right: 0;\n",
            "bottom: 0;\n",
            "background: rgba(0, 0, 0, 0.6);\n",
            "z-index: -1;",
            "pointer-events: none;\n",
        ),
        closer="}",
    )


def render_style(background_image: str = DEFAULT_BACKGROUND_IMAGE, indent: int = 1) -> str:
    """Return the ``<head>`` element of the log, indented by ``indent`` tabs."""
    if indent < 0:
        raise ValueError(f"indent must not be negative: {indent}")
    tabs = "\t" * indent
    inner = "\t" * (indent + 1)
    rules_indent = indent + 2
    return "".join(
        (
            f"{tabs}<head>\n",
            f"{inner}<meta {_VIEWPORT}>\n",
            f"{inner}<style>\n",
            _background_image(background_image, rules_indent),
            _text_section(rules_indent),
            _heading(rules_indent),
            _paragraph(rules_indent),
            _color(rules_indent),
            _color_paragraph(rules_indent),
            render_color_rules(rules_indent),
            _body_overlay(rules_indent),
            f"{inner}</style>\n",
            f"{tabs}</head>\n",
        )
    )


def render_preamble(background_image: str = DEFAULT_BACKGROUND_IMAGE) -> str:
    """Return everything a new log file starts with, up to the open text section."""
    return (
        "<html>\n"
        + render_style(background_image, 1)
        + '\n<body>\n\t<div class="text-section">\n'
    )