"""An HTML log file whose messages are coloured text paragraphs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from wordread.colors import LogColor, html_class
from wordread.htmlstyle import DEFAULT_BACKGROUND_IMAGE, render_preamble

DEFAULT_LOG_PATH = "Log/log.html"

_SPAN_INDENT = "\t" * 3
_TEXT_INDENT = "\t" * 4


def _format_value(value: object) -> str:
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


class HtmlLog:
    """Writes messages into an HTML page styled by the log stylesheet.

    Use it as a context manager, or call :meth:`open` and :meth:`close`.
    """

    def __init__(
        self,
        path: Union[str, "os.PathLike[str]"] = DEFAULT_LOG_PATH,
        background_image: str = DEFAULT_BACKGROUND_IMAGE,
    ) -> None:
        self.path = Path(path)
        self.background_image = background_image
        self._stream: Optional[TextIO] = None
        self._color_open = False

    @property
    def is_open(self) -> bool:
        """Whether the log file is currently open for writing."""
        return self._stream is not None

    def open(self) -> "HtmlLog":
        """Create the log file, with its directory, and write the page head."""
        if self._stream is not None:
            raise RuntimeError(f"log '{self.path}' is already open")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._stream = open(self.path, "w", encoding="utf-8")
        self._color_open = False
        self._write(render_preamble(self.background_image))
        return self

    def close(self) -> None:
        """Close the log file; closing a closed log does nothing."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> "HtmlLog":
        return self.open()

    def __exit__(self, *args: object) -> None:
        self.close()

    def _write(self, text: str) -> None:
        if self._stream is None:
            raise RuntimeError(f"log '{self.path}' is not open")
        self._stream.write(text)
        self._stream.flush()

    def _span_open(self, css_class: str) -> str:
        return f'{_SPAN_INDENT}<span class="color {css_class}">\n'

    def log(self, color: Union[LogColor, int], text: str) -> None:
        """Write ``text`` as one paragraph in ``color``."""
        css_class = html_class(color)
        self._write(
            self._span_open(css_class)
            + f"{_TEXT_INDENT}<p>{text}</p>\n"
            + f"{_SPAN_INDENT}</span>\n"
        )

    def adc_print(self, text: str) -> None:
        """Write ``text`` as a paragraph in the colour currently in effect."""
        self._write(f"{_TEXT_INDENT}<p>{text}</p>\n")

    def text_color(self, color: Union[LogColor, int]) -> None:
        """Start a coloured section for the following :meth:`adc_print` calls.

        Every second call first closes the section the previous call opened.
        """
        css_class = html_class(color)
        if self._color_open:
            self.text_color_end()
            self._color_open = False
        else:
            self._color_open = True
        self._write(self._span_open(css_class))

    def text_color_end(self) -> None:
        """Close the current coloured section."""
        self._write(f"{_SPAN_INDENT}</span>\n")

    def error(self, message: str) -> None:
        """Log ``message`` in red as an error."""
        self.log(LogColor.RED, f"Error: {message}\n")

    def warning(self, message: str) -> None:
        """Log ``message`` in yellow as a warning."""
        self.log(LogColor.YELLOW, f"Warning: {message}\n")

    def place(self, color: Union[LogColor, int], file: str, line: int, func: str) -> None:
        """Log a place in code: file, line and function."""
        self.log(color, f"file [{file}]\nline [{line}]\nfunc [{func}]\n")

    def array_items(
        self, color: Union[LogColor, int], name: str, values: Iterable[object]
    ) -> None:
        """Log every item of ``values`` as ``name[i] = 'value'`` in one section."""
        self.text_color(color)
        for index, value in enumerate(values):
            self.adc_print(f"{name}[{index}] = '{_format_value(value)}'\n")
        self.text_color_end()