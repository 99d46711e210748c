"""Parsing subsystem for md2html.

Two stages, run in order by md2html.parser.Parser:
- `md2html.parsing.blocks.BlockParser`: classified lines to a Document with
  raw inline text
- `md2html.parsing.inline.InlineParser`: raw text of a paragraph or heading
  to inline nodes

Shared character sets live in `md2html.parsing.charsets`, which the line
classifier also uses, so this package imports nothing eagerly.

"""
