"""Placeholder scanning and substitution for translation texts.

Texts use single-brace placeholders: "Hello {name}!". Doubled braces are
escapes, so "{{name}}" renders as the literal "{name}". A lone "}" is kept as
a literal brace, while a "{" that is never closed is an error.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple, Union

from translatable.i18n.errors import InvalidIdentifier, MissingValue, UnknownPlaceholder


@dataclass(frozen=True)
class PlaceholderToken:
    """A placeholder found in a text.

    Attributes:
        name: Identifier between the braces.
        start: Index of the opening brace.
        end: Index just past the closing brace.
    """

    name: str
    start: int
    end: int


Segment = Union[str, PlaceholderToken]


def scan(text: str) -> Tuple[Segment, ...]:
    """Split a text into literal strings and placeholder tokens.

    Args:
        text: Raw translation text.

    Returns:
        Tuple of segments in order; adjacent literals are joined.

    Raises:
        InvalidIdentifier: If a placeholder is not an identifier or is unterminated.
    """
    segments: List[Segment] = []
    literal: List[str] = []
    i = 0
    length = len(text)

    while i < length:
        char = text[i]

        if char == "{":
            if text.startswith("{{", i):
                literal.append("{")
                i += 2
                continue

            close = text.find("}", i + 1)
            if close == -1:
                raise InvalidIdentifier(text[i + 1 :], i)

            name = text[i + 1 : close]
            if not name.isidentifier():
                raise InvalidIdentifier(name, i)

            if literal:
                segments.append("".join(literal))
                literal = []
            segments.append(PlaceholderToken(name=name, start=i, end=close + 1))
            i = close + 1
            continue

        if char == "}" and text.startswith("}}", i):
            literal.append("}")
            i += 2
            continue

        literal.append(char)
        i += 1

    if literal:
        segments.append("".join(literal))

    return tuple(segments)


class Template:
    """A scanned translation text ready to be rendered many times.

    Scanning happens once in the constructor, so identifier errors surface
    when the template is built rather than when it is rendered.
    """

    __slots__ = ("text", "segments", "_constant")

    def __init__(self, text: str):
        self.text = text
        self.segments = scan(text)
        self._constant: Optional[str] = None
        if not self.placeholders:
            self._constant = "".join(self.segments)

    @classmethod
    def parse(cls, text: str) -> "Template":
        return cls(text)

    @property
    def tokens(self) -> Tuple[PlaceholderToken, ...]:
        return tuple(s for s in self.segments if isinstance(s, PlaceholderToken))

    @property
    def placeholders(self) -> Tuple[str, ...]:
        """Unique placeholder names in order of first appearance."""
        names: List[str] = []
        for token in self.tokens:
            if token.name not in names:
                names.append(token.name)
        return tuple(names)

    @property
    def is_constant(self) -> bool:
        """True when the text has no placeholders."""
        return self._constant is not None

    def render(
        self,
        values: Optional[Mapping[str, Any]] = None,
        strict: bool = False,
    ) -> str:
        """Substitute placeholder values into the template.

        Args:
            values: Mapping of placeholder name to value; values are rendered
                with str().
            strict: If True, values that match no placeholder are an error.

        Returns:
            Rendered string. Constant templates always return the same string.

        Raises:
            MissingValue: If a placeholder has no value.
            UnknownPlaceholder: In strict mode, if values has unused names.
        """
        values = values or {}

        if strict:
            unused = [name for name in values if name not in self.placeholders]
            if unused:
                raise UnknownPlaceholder(unused)

        if self._constant is not None:
            return self._constant

        parts = []
        for segment in self.segments:
            if isinstance(segment, PlaceholderToken):
                if segment.name not in values:
                    raise MissingValue(segment.name)
                parts.append(str(values[segment.name]))
            else:
                parts.append(segment)
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Template({self.text!r})"


def placeholders(text: str) -> Tuple[str, ...]:
    """List the placeholder names used by a text."""
    return Template(text).placeholders


def substitute(
    text: str,
    values: Optional[Mapping[str, Any]] = None,
    strict: bool = False,
) -> str:
    """Scan a text and substitute placeholder values in one step.

    Example:
        >>> substitute("Hello {name}!", {"name": "john"})
        'Hello john!'
        >>> substitute("{{x}}", {})
        '{x}'
    """
    return Template(text).render(values, strict=strict)
