"""
Delimited string helpers.

Joins a list of strings into one text field and splits it back, escaping any
occurrence of the delimiter and of the escape character itself. The default
form (`,` delimiter, `/` escape) is what gets persisted in file lists, so it
must not change.

Known limitation: `join([])` and `join([""])` both produce `""`, and
`split("")` returns `[]`.
"""

from typing import Iterable, List

from yabber.common.constants import DELIMITER_CHAR, ESCAPE_CHAR


class DelimitedCodec:
    """Join/split lists of strings through a single escaped text field."""

    def __init__(self, delimiter: str = DELIMITER_CHAR, escape: str = ESCAPE_CHAR):
        if len(delimiter) != 1 or len(escape) != 1:
            raise ValueError("Delimiter and escape must be single characters")
        if delimiter == escape:
            raise ValueError("Delimiter and escape characters must differ")
        self.delimiter = delimiter
        self.escape = escape

    def escape_item(self, item: str) -> str:
        # Escapes first, otherwise the escapes added for delimiters get doubled too
        return (
            item
            .replace(self.escape, self.escape + self.escape)
            .replace(self.delimiter, self.escape + self.delimiter)
        )

    def join(self, items: Iterable[str]) -> str:
        """Join `items` with the delimiter, escaping delimiter and escape chars."""
        return self.delimiter.join(self.escape_item(item) for item in items)

    def split(self, source: str) -> List[str]:
        """
        Split a string produced by `join`, respecting escaped delimiters.

        Only an escape followed by the delimiter or by another escape is an
        escape sequence. Any other escape character is kept as written, so
        lists that were stored unescaped (``chr/c0000.anibnd``) survive.

        Args:
            source: Joined string

        Returns:
            The unescaped fields, in order
        """
        if not source:
            return []

        result: List[str] = []
        field: List[str] = []
        index = 0
        while index < len(source):
            char = source[index]
            following = source[index + 1:index + 2]
            if char == self.escape and following in (self.delimiter, self.escape):
                field.append(following)
                index += 2
                continue
            if char == self.delimiter:
                result.append(''.join(field))
                field = []
            else:
                field.append(char)
            index += 1

        result.append(''.join(field))
        return result


_DEFAULT_CODEC = DelimitedCodec()


def join_delimited(items: Iterable[str]) -> str:
    """Join with the persisted `,` / `/` format."""
    return _DEFAULT_CODEC.join(items)


def split_delimited(source: str) -> List[str]:
    """Split a string in the persisted `,` / `/` format."""
    return _DEFAULT_CODEC.split(source)


__all__ = ["DelimitedCodec", "join_delimited", "split_delimited"]
