"""
Regex helpers for finding templates in wikitext.

All detection of tag templates goes through `tag_regex` and
`tag_block_regex`, so that a rendered tag is always found again by the
pattern built from its own name.

Container templates are found by their name, and their end by balancing
braces, so any text may sit inside them.

The insertion point helpers find the end of the run of templates that must
stay above the maintenance tags (hatnotes, protection and deletion notices)
at the top of a page.
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

import re
import string
from dataclasses import dataclass

# Parameters of a template, allowing two levels of nested templates.
PARAM_BODY = r'(?:\{\{(?:\{\{[^{}]*\}\}|[^{}])*\}\}|[^{}])*'

# Any complete template, allowing two levels of nested templates.
TEMPLATE = r'\{\{' + PARAM_BODY + r'\}\}'

TEMPLATE_RE = re.compile(TEMPLATE)

_PREFIX = r'\{\{\s*(?:subst\s*:\s*)?(?:template\s*:\s*)?'


def case_insensitive_first_letter(tag: str) -> str:
    """Return a regex pattern for the tag with case-insensitive first letter."""
    if tag and tag[0] in string.ascii_letters:
        return '[' + tag[0].upper() + tag[0].lower() + ']' + re.escape(tag[1:])
    else:
        return re.escape(tag)


def template_name_pattern(name: str) -> str:
    """Return a regex pattern matching a template name.

    Spaces and underscores are interchangeable in page titles.
    """
    words = [word for word in re.split(r'[ _]+', name.strip()) if word]
    if not words:
        raise ValueError(f'Invalid template name: {name!r}')
    return '[ _]+'.join([case_insensitive_first_letter(words[0])]
                        + [re.escape(word) for word in words[1:]])


def _names_pattern(name: str, aliases=()) -> str:
    titles = [name] + [alias for alias in aliases if alias and alias != name]
    return '|'.join(template_name_pattern(title) for title in titles)


def tag_regex(name: str, aliases=()) -> re.Pattern:
    """Create the detection regex of a tag and its redirects.

    The match covers ``{{Name`` plus the following ``|`` or ``}}``.
    """
    return re.compile(
        _PREFIX + '(?:' + _names_pattern(name, aliases) + r')\s*(?:\||\}\})',
        re.IGNORECASE)


def tag_block_regex(name: str, aliases=()) -> re.Pattern:
    """Create a regex matching a whole tag template and its line break."""
    return re.compile(
        r'[ \t]*' + _PREFIX + '(?:' + _names_pattern(name, aliases) + r')\s*'
        r'(?:\|' + PARAM_BODY + r')?\}\}[ \t]*\n?',
        re.IGNORECASE)


BRACES_RE = re.compile(r'\{\{|\}\}')

# Named parameters before the tags, then the pipe opening the tag list
_CONTAINER_PARAMS_RE = re.compile(
    r'(?:\|\s*(?!1\s*=)[^=}|{]+=[^|{}]*)*(?:\|\s*(?:1\s*=)?)?')

# Named parameters after the tags, then the closing braces
_CONTAINER_CLOSING_RE = re.compile(r'(?:\|[^=}|{]+=[^|{}]*)*\}\}\Z')


def template_end(text: str, start: int) -> int | None:
    """Return the offset after the template opening at start.

    Braces are balanced, so the template may hold any nested templates.
    None is returned for an unterminated template.
    """
    depth = 0
    for brace in BRACES_RE.finditer(text, start):
        depth += 1 if brace.group() == '{{' else -1
        if not depth:
            return brace.end()
    return None


def template_spans(text: str) -> list[tuple[int, int]]:
    """Return the spans of the outermost templates in text."""
    spans = []
    depth = 0
    start = 0
    for brace in BRACES_RE.finditer(text):
        if brace.group() == '{{':
            if not depth:
                start = brace.start()
            depth += 1
        elif depth:
            depth -= 1
            if not depth:
                spans.append((start, brace.end()))
    return spans


@dataclass
class Container:

    """A container template found in a page text."""

    start: int
    end: int
    opening: str  # ``{{Multiple issues|collapsed=yes|`` or ``...|1=``
    members: str  # everything between the opening and the closing
    closing: str  # named parameters after the tags and ``}}``

    def span(self) -> tuple[int, int]:
        return self.start, self.end


def container_regex(name_regex: str) -> re.Pattern:
    """Create the regex of the opening of a container template."""
    return re.compile(
        r'\{\{\s*(?:template\s*:\s*)?(?:' + name_regex + r')\s*(?=\||\}\})',
        re.IGNORECASE)


def find_containers(text: str, opening_regex: re.Pattern) -> list[Container]:
    """Return the containers of text, in page order.

    A container is recognized by its name alone; its body may hold text
    other than tags.
    """
    containers = []
    for match in opening_regex.finditer(text):
        if containers and match.start() < containers[-1].end:
            continue
        end = template_end(text, match.start())
        if end is None:
            continue
        params = _CONTAINER_PARAMS_RE.match(text, match.end(), end - 2)
        closing = _CONTAINER_CLOSING_RE.search(text, params.end(), end)
        containers.append(Container(
            start=match.start(),
            end=end,
            opening=text[match.start():params.end()],
            members=text[params.end():closing.start()],
            closing=closing.group(),
        ))
    return containers


def count_members(members: str) -> int:
    """Count the templates held by a container."""
    return len(TEMPLATE_RE.findall(members))


def leading_templates_regex(names, pre_regex: str | None = None) -> re.Pattern:
    """Create the regex of the template run at the top of a page.

    :param names: regex fragments of the template names in the run
    :param pre_regex: regex of a block that is not a plain template, such
        as a deletion notice wrapped in HTML comments
    """
    block = (r'\{\{\s*(?:' + '|'.join(names) + r')\d*\s*'
             r'(?:\|(?:\{\{[^{}]*\}\}|[^{}])*)?\}\}')
    if pre_regex:
        block = '(?:' + pre_regex + '|' + block + ')'
    return re.compile(r'(?:\s*' + block + ')*', re.IGNORECASE)


def find_insertion_point(text: str, leading_regex: re.Pattern) -> int:
    """Return the offset right after the leading template run.

    The run is a maximal prefix of recognized blocks, each optionally
    preceded by whitespace. A line break following the run belongs to it.
    """
    match = leading_regex.match(text)
    offset = match.end() if match else 0
    if offset:
        newline = re.compile(r'[ \t]*\n').match(text, offset)
        if newline:
            offset = newline.end()
    return offset


def insert_tag_text(tag_text: str, text: str, leading_regex: re.Pattern) -> str:
    """Insert tag wikitext below the leading templates of a page."""
    if not tag_text:
        return text

    offset = find_insertion_point(text, leading_regex)
    head, rest = text[:offset], text[offset:]
    if head and not head.endswith('\n'):
        head += '\n'
    if not tag_text.endswith('\n'):
        tag_text += '\n'
    return head + tag_text + rest
