# wordread

`wordread` splits text into words and records the line and column where each
word starts. Spaces, tabs, carriage returns and newlines separate words.
Lines and columns start at 1. A space or a word character moves the column
on by one, a tab moves it by four, a newline starts the next line at column
1, and a carriage return does not change the position.

The package can also write log messages into a colored HTML page.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Reading words

```python
from wordread.words import read_words, split_words

for word in read_words("numbers.txt"):
    print(word.text, len(word), word.line, word.column, word.to_double())

words = split_words("12 apples\n\t7 pears")
words[0].to_int()     # 12
words[2].line         # 2
words[2].column       # 5: the tab counts as four columns
```

`Word` is a frozen dataclass with the fields `text`, `line` and `column`.
`len(word)` gives the length of its text.

- `Word.to_int()` reads the word as a base-10 integer, with an optional sign.
- `Word.to_double()` reads the word as a float. It accepts decimal and
  exponent forms, hexadecimal floats such as `0x1.8p1`, `inf`, `infinity`
  and `nan`.

Both raise `WordConversionError`, a subclass of `ValueError`, when the whole
word is not a number of that kind. The message contains the word and its
`line:column` position. The error also has the attributes `word` and `target`.

`read_words(path)` reads a file as bytes and decodes it as UTF-8. Any
undecodable bytes are kept as surrogate escapes. If the file cannot be opened,
the `OSError` is passed on to the caller.

## HTML log

```python
from wordread.colors import LogColor
from wordread.htmllog import HtmlLog

with HtmlLog("Log/log.html", "background.webp") as log:
    log.log(LogColor.BLUE, "size = 3\n")
    log.warning("something looks odd")
    log.error("something went wrong")
    log.place(LogColor.PINK, "main.py", 42, "run")
    log.array_items(LogColor.GREEN, "values", [1, 2.5, 3])
```

`HtmlLog.open()` creates the directory of the log file if it is missing. It
then writes the page head, with its fixed stylesheet, and opens a text
section. Each call to `log()` writes a `<p>` inside a `<span>` that carries the
color's CSS class. `text_color()`, `adc_print()` and `text_color_end()` write
several paragraphs inside one colored span. Writing to a log that is not open
raises `RuntimeError`. So does opening a log that is already open.

The colors are `LogColor.WHITE`, `RED`, `GREEN`, `PINK`, `YELLOW`, `BLACK`
and `BLUE`. White has no CSS class of its own. `wordread.colors.html_class()`
raises `ValueError` for a value that is not one of these colors.

The background image is only referenced by its path in the stylesheet. It is
not copied or checked. `wordread.htmlstyle.render_style()` and
`render_preamble()` return the head markup as a string.

## Command line

```
wordread [NUMBERS] [WORDS] [--log PATH] [--background IMAGE]
```

`NUMBERS` defaults to `tests/test1.txt` and `WORDS` to `tests/test2.txt`. Both
are relative to the current directory. The command does the following:

- It reads every word of the first file as a number.
- It reads every word of the second file as text.
- For each word it logs the value, the length and the `file:line:column` position.
- It writes the log to `--log`, which defaults to `Log/log.html`.

If a file cannot be opened, the command prints `failed open '<path>'.` to
standard error and treats that file as empty. If a word in the first file is
not a number, the command prints the conversion error and exits with status 1.

## What it does not do

- The page is only written. Nothing is ever read back or parsed.
- Logged text is placed into the HTML as it is, without escaping.
- Each `open()` replaces any earlier log file at that path.