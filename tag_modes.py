"""
Tagging modes: redirect, article and file.

A mode is a policy record, not a class hierarchy. Each of the three
variants fills in the same set of capabilities: when it is active, its
catalog, its container template policy, the default groupability of
unknown tags, and how the top of the page is laid out. The first active
mode in priority order (redirect before article) handles a page.
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

import datetime
import os
import re
from dataclasses import dataclass, field
from typing import Callable, NamedTuple

from tag_data import (
    AFD_NOTICE, ARTICLE_DEFERRED_TAGS, ARTICLE_EXCLUSIVE_SETS, ARTICLE_TAGS,
    FILE_EXCLUSIVE_SETS, FILE_TAGS, HATNOTE_TEMPLATES, PROPOSED_DELETION_TEMPLATES,
    PROTECTION_TEMPLATES, REDIRECT_TAGS, SPEEDY_DELETION_TEMPLATES,
)
from tag_patterns import (
    Container, container_regex, find_containers, leading_templates_regex,
)

MERGE_TAGS = ('Merge', 'Merge to', 'Merge from')
TRANSLATION_TAGS = ('Not English', 'Rough translation')


@dataclass
class PageInfo:

    """What the engine needs to know about the page being tagged."""

    title: str
    namespace: int = 0
    exists: bool = True
    is_redirect: bool = False
    shared: bool = False  # file hosted on a shared repository
    mime_type: str | None = None

    @property
    def title_without_ns(self) -> str:
        if self.namespace and ':' in self.title:
            return self.title.split(':', 1)[1]
        return self.title

    @property
    def extension(self) -> str:
        """Return the file type from the mime type, else from the title."""
        if self.mime_type and '/' in self.mime_type:
            return self.mime_type.split('/', 1)[1].split('+', 1)[0]
        return os.path.splitext(self.title)[1].lstrip('.')


@dataclass
class Mode:

    """Tagging policy for one kind of page."""

    name: str
    is_active: Callable[[PageInfo], bool]
    tag_list: dict
    custom_option: str
    group_template: str | None = None
    group_regex: str | None = None
    group_min_size: int = 2
    groupable_default: bool = False
    removal_supported: bool = False
    # None means the page has no leading boilerplate to keep above the tags
    leading_regex: re.Pattern | None = None
    # Matches every tag of the mode at once; such modes regroup all of
    # them instead of placing tags below the leading templates
    collect_regex: re.Pattern | None = None
    deferred_tags: tuple[str, ...] = ()
    date_parameter: str | None = None
    exclusive_sets: tuple = ()
    initial_cleanup: Callable | None = None
    preprocess: Callable | None = None
    validate: Callable | None = None
    container_re: re.Pattern | None = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if self.group_template:
            self.container_re = container_regex(self.group_regex)

    def find_containers(self, text: str) -> list[Container]:
        if not self.container_re:
            return []
        return find_containers(text, self.container_re)

    def find_container(self, text: str) -> Container | None:
        """Return the first container of the page, if any."""
        containers = self.find_containers(text)
        return containers[0] if containers else None

    def container_present(self, text: str) -> bool:
        return self.find_container(text) is not None


def is_checked(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ('', '0', 'no', 'false')
    return bool(value)


# =========================================================================
# Redirect mode
# =========================================================================

REDIRECT_GROUP_REGEX = r'(?:R(?:edirect)?(?: ?cat)?(?:egory)? ?shell|Redr)'

# All redirect category templates begin with "R " or "Redirect ".
REDIRECT_TAG_RE = re.compile(
    r'\s*\{\{(?!' + REDIRECT_GROUP_REGEX + r'\s*[|}])R(?:edirect)? [^{}]*?\}\}',
    re.IGNORECASE)

REDIRECT_DIRECTIVE_RE = re.compile(r'\A\s*#[^\n\[]*\[\[[^\]\n]*\]\][ \t]*\n?')

REDIRECT_MODE = Mode(
    name='redirect',
    is_active=lambda page: page.is_redirect,
    tag_list=REDIRECT_TAGS,
    custom_option='customredirect',
    group_template='Redirect category shell',
    group_regex=REDIRECT_GROUP_REGEX,
    group_min_size=1,
    groupable_default=True,
    removal_supported=True,
    collect_regex=REDIRECT_TAG_RE,
)


# =========================================================================
# Article mode
# =========================================================================

ARTICLE_LEADING_RE = leading_templates_regex(
    HATNOTE_TEMPLATES + PROTECTION_TEMPLATES + SPEEDY_DELETION_TEMPLATES
    + PROPOSED_DELETION_TEMPLATES,
    pre_regex=AFD_NOTICE)

USERSPACE_DRAFT_RE = re.compile(
    r'\{\{\s*([Uu]serspace draft)\s*(\|(?:\{\{[^{}]*\}\}|[^{}])*)?\}\}\s*')


class MergeDiscussion(NamedTuple):

    """Where the rationale of a merge proposal is discussed."""

    tag: str
    target: str
    discuss_article: str
    other_article: str
    title_linked: str

    @property
    def title(self) -> str:
        return re.sub(r'\[\[(.*?)\]\]', r'\1', self.title_linked)

    @property
    def link(self) -> str:
        return f'Talk:{self.discuss_article}#{self.title}'


def normalize_merge_target(target: str) -> str:
    target = (target or '').replace('_', ' ').strip()
    return target[:1].upper() + target[1:]


def merge_discussion(tag: str, values: dict, page: PageInfo) -> MergeDiscussion | None:
    """Return the merge discussion of a merge tag, if one is to be started.

    Discussions are only started for main namespace articles with a
    rationale.
    """
    if page.namespace != 0 or not (values.get('mergeReason') or '').strip():
        return None
    target = normalize_merge_target(values.get('mergeTarget', ''))
    if tag == 'Merge to':
        discuss_article, other_article = target, page.title
    else:
        discuss_article, other_article = page.title, target
    direction = (f'[[{other_article}]]' + (' with ' if tag == 'Merge' else ' into ')
                 + f'[[{discuss_article}]]')
    return MergeDiscussion(tag, target, discuss_article, other_article,
                           'Proposed merge of ' + direction)


def _article_cleanup(text: str, request) -> str:
    return USERSPACE_DRAFT_RE.sub('', text)


def _article_preprocess(request, page: PageInfo):
    """Return the request values and the extra template parameters per tag."""
    values = dict(request.values)
    extra = {}
    for tag in request.tags:
        if tag in TRANSLATION_TAGS:
            if is_checked(values.get('translationPostAtPNT')):
                extra[tag] = {'listed': 'yes'}
        elif tag in MERGE_TAGS:
            values['mergeTarget'] = normalize_merge_target(values.get('mergeTarget', ''))
            discussion = merge_discussion(tag, values, page)
            if discussion:
                extra[tag] = {'discuss': discussion.link}
    return values, extra


def _article_validate(request, page: PageInfo, today: datetime.date) -> str | None:
    values = request.values
    if any(tag in MERGE_TAGS for tag in request.tags):
        if ((is_checked(values.get('mergeTagOther')) or (values.get('mergeReason') or '').strip())
                and '|' in (values.get('mergeTarget') or '')):
            return ('Tagging multiple articles in a merge, and starting a discussion for '
                    'multiple articles, is not supported at the moment. Please turn off '
                    '"tag other article", and/or clear out the "reason" box, and try again.')
    return None


ARTICLE_MODE = Mode(
    name='article',
    is_active=lambda page: page.namespace in (0, 2, 118) and page.exists,
    tag_list=ARTICLE_TAGS,
    custom_option='custom',
    group_template='Multiple issues',
    group_regex=r'(?:multiple ?issues|article ?issues|mi)(?!\s*\|\s*section\s*=)',
    group_min_size=2,
    groupable_default=False,
    removal_supported=True,
    leading_regex=ARTICLE_LEADING_RE,
    deferred_tags=tuple(ARTICLE_DEFERRED_TAGS),
    date_parameter='date',
    exclusive_sets=tuple(ARTICLE_EXCLUSIVE_SETS),
    initial_cleanup=_article_cleanup,
    preprocess=_article_preprocess,
    validate=_article_validate,
)


# =========================================================================
# File mode
# =========================================================================

MOVE_TO_COMMONS_RE = re.compile(
    r'\{\{(mtc|(copy |move )?to ?commons|move to wikimedia commons|copy to wikimedia commons)[^}]*\}\}',
    re.IGNORECASE)

SHOULD_BE_SVG_RE = re.compile(
    r'\{\{((convert to |convertto|should be |shouldbe|to)?svg|badpng|vectorize)[^}]*\}\}',
    re.IGNORECASE)

NON_FREE_REDUCE_RE = re.compile(
    r'\{\{\s*(Template\s*:\s*)?(Non-free reduce|FairUseReduce|Fairusereduce|Fair Use Reduce|'
    r'Fair use reduce|Reduce size|Reduce|Fair-use reduce|Image-toobig|Comic-ovrsize-img|'
    r'Non-free-reduce|Nfr|Smaller image|Nonfree reduce)\s*(\|(?:\{\{[^{}]*\}\}|[^{}])*)?\}\}\s*',
    re.IGNORECASE)

# Tags that make other tags obsolete when they are placed.
FILE_CLEANUP = {
    'Keep local': MOVE_TO_COMMONS_RE,
    'Now Commons': MOVE_TO_COMMONS_RE,
    'Do not move to Commons': MOVE_TO_COMMONS_RE,
    'Vector version available': SHOULD_BE_SVG_RE,
    'Orphaned non-free revisions': NON_FREE_REDUCE_RE,
}


def _file_cleanup(text: str, request) -> str:
    for tag in request.tags:
        if tag in FILE_CLEANUP:
            text = FILE_CLEANUP[tag].sub('', text)
    return text


def _file_validate(request, page: PageInfo, today: datetime.date) -> str | None:
    tags = request.tags
    extension = page.extension
    if extension:
        extension_upper = extension.upper()
        # What self-respecting file format has *two* extensions?!
        if extension_upper == 'JPG':
            extension_upper = 'JPEG'
        extension = extension_upper

        for kind in ('GIF', 'JPEG', 'SVG'):
            bad = 'Bad ' + kind
            if extension_upper != kind and bad in tags:
                suggestion = f'This appears to be a {extension} file, '
                if extension_upper in ('GIF', 'JPEG', 'SVG'):
                    return suggestion + f'please use {{{{Bad {extension_upper}}}}} instead.'
                return suggestion + f'so {{{{{bad}}}}} is inappropriate.'

        if 'Should be ' + extension_upper in tags:
            return (f'This is already a {extension} file, so '
                    f'{{{{Should be {extension_upper}}}}} is inappropriate.')

        if 'Overcompressed JPEG' in tags and extension_upper != 'JPEG':
            return (f'This appears to be a {extension} file, so '
                    "{{Overcompressed JPEG}} probably doesn't apply.")

        if extension_upper != 'SVG':
            for tag in ('Bad trace', 'Bad font'):
                if tag in tags:
                    return (f'This appears to be a {extension} file, so '
                            f"{{{{{tag}}}}} probably doesn't apply.")

    expiry = (request.values.get('DoNotMoveToCommons_expiry') or '').strip()
    if 'Do not move to Commons' in tags and expiry:
        if not re.fullmatch(r'2\d{3}', expiry) or int(expiry) <= today.year:
            return 'Must be a valid future year.'
    return None


FILE_MODE = Mode(
    name='file',
    is_active=lambda page: page.namespace == 6 and page.exists and not page.shared,
    tag_list=FILE_TAGS,
    custom_option='customfile',
    groupable_default=False,
    removal_supported=False,
    leading_regex=leading_templates_regex(
        PROTECTION_TEMPLATES + SPEEDY_DELETION_TEMPLATES + PROPOSED_DELETION_TEMPLATES),
    exclusive_sets=tuple(FILE_EXCLUSIVE_SETS),
    initial_cleanup=_file_cleanup,
    validate=_file_validate,
)

# Keep the redirect mode above the article mode.
MODES = (REDIRECT_MODE, ARTICLE_MODE, FILE_MODE)


def select_mode(page: PageInfo, modes=MODES) -> Mode | None:
    """Return the first mode active for the page."""
    for mode in modes:
        if mode.is_active(page):
            return mode
    return None
