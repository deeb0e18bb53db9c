"""
Tag placement and grouping engine.

Given the wikitext of a page and a tagging request, the engine computes
the new wikitext. A run goes through these stages, in order:

1.  Validation: the request is checked before anything is changed.
2.  Initial cleanup: mode-specific cleanup and removal of unselected tags.
3.  Classification: requested tags already on the page are excluded,
    bottom-of-page tags are appended right away, and the rest is split
    into groupable and non-groupable tags.
4.  Rearrangement: new tags are placed below the leading templates of the
    page, grouped inside the mode's container template when there is one
    or when enough groupable tags warrant creating it. Groupable tags
    already on the page are pulled into the container.
5.  Final cleanup: a container left with too few members is dissolved.

The engine never talks to the wiki; loading, detecting existing tags,
saving and the follow-up workflows belong to the caller (see `tag.py`).
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

import re
from dataclasses import dataclass, field

import pywikibot

from tag_catalog import TagDefinition
from tag_config import TagConfig
from tag_data import CURRENT_DATE
from tag_errors import StructuralMismatch, ValidationError
from tag_modes import REDIRECT_DIRECTIVE_RE, Mode, PageInfo, select_mode
from tag_patterns import (
    count_members, insert_tag_text, tag_block_regex, tag_regex, template_spans,
)
from tag_render import render_tag
from tag_validation import validate_request


@dataclass
class TaggingRequest:

    """The tags a user selected for one page."""

    tags: list[str] = field(default_factory=list)
    values: dict = field(default_factory=dict)  # form field name -> value
    tags_to_remove: list[str] = field(default_factory=list)
    # None keeps every existing tag that is not removed
    tags_to_retain: list[str] | None = None
    group: bool | None = None  # None uses the configured default
    reason: str = ''


@dataclass
class Classification:

    """How the requested tags are going to be placed."""

    new_tags: list[str] = field(default_factory=list)
    groupable_new: list[str] = field(default_factory=list)
    non_groupable_new: list[str] = field(default_factory=list)
    groupable_existing: list[str] = field(default_factory=list)
    already_present: list[str] = field(default_factory=list)
    deferred: list[str] = field(default_factory=list)


@dataclass
class TagResult:

    """The outcome of a tagging run."""

    text: str
    old_text: str
    mode: Mode
    page: PageInfo
    request: TaggingRequest
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    summary: str = ''

    @property
    def changed(self) -> bool:
        return self.text != self.old_text


def should_create_container(groupable_new_count: int, groupable_existing_count: int,
                            mode: Mode, disable_grouping: bool = False) -> bool:
    """Whether enough groupable tags are around to create a container."""
    if disable_grouping or not mode.group_template:
        return False
    return groupable_new_count + groupable_existing_count >= mode.group_min_size


class TagRun:

    """State of one tagging run over one page text."""

    def __init__(self, config: TagConfig, text: str, page: PageInfo,
                 request: TaggingRequest, mode: Mode, existing_tags=()):
        self.config = config
        self.text = text
        self.old_text = text
        self.page = page
        self.request = request
        self.mode = mode
        self.catalog = config.catalog(mode)
        self.existing_tags = list(existing_tags)

        group = config.group_by_default if request.group is None else request.group
        self.disable_grouping = not group or not mode.group_template

        if mode.preprocess:
            self.values, self.template_params = mode.preprocess(request, page)
        else:
            self.values, self.template_params = dict(request.values), {}

        self.added = []
        self.removed = []
        self.warnings = []

    # =========================================================================
    # Helpers
    # =========================================================================

    def warn(self, message: str) -> None:
        pywikibot.warning(message)
        self.warnings.append(message)

    def is_groupable(self, tag: str) -> bool:
        if self.disable_grouping:
            return False
        return self.catalog.is_groupable(tag, self.mode.groupable_default)

    def tag_regex(self, tag: str) -> re.Pattern:
        return tag_regex(tag, self.config.aliases(tag))

    def tag_text(self, tag: str) -> str:
        """Render the wikitext of a new tag."""
        definition = self.catalog.resolve(tag) or TagDefinition(name=tag)
        extra = dict(self.template_params.get(tag, {}))
        date_parameter = self.mode.date_parameter
        if date_parameter and all(f.parameter != date_parameter for f in definition.fields):
            extra.setdefault(date_parameter, CURRENT_DATE)
        return render_tag(definition, self.values, extra, self.config.timestamp)

    def tag_set_text(self, tags) -> str:
        return ''.join(self.tag_text(tag) + '\n' for tag in tags)

    def insert_tag_text(self, tag_text: str) -> None:
        self.text = insert_tag_text(tag_text, self.text, self.mode.leading_regex)

    # =========================================================================
    # Stages
    # =========================================================================

    def initial_cleanup(self) -> None:
        if self.mode.initial_cleanup:
            self.text = self.mode.initial_cleanup(self.text, self.request)
        self.remove_tags()

    def remove_tags(self) -> None:
        """Remove the tags the user unselected, with their redirects."""
        for tag in dict.fromkeys(self.request.tags_to_remove):
            regex = tag_block_regex(tag, self.config.aliases(tag))
            text, count = regex.subn('', self.text)
            if not count:
                self.warn(f'{StructuralMismatch(tag)}, it may be a redirect... skipping')
                continue
            self.text = text
            self.removed.append(tag)

    def classify(self) -> Classification:
        """Sort the requested tags; bottom-of-page tags are added here."""
        result = Classification()
        for tag in dict.fromkeys(self.request.tags):
            if self.tag_regex(tag).search(self.text) and not self.catalog.dupe_allowed(tag):
                self.warn(f'Found {{{{{tag}}}}} on the {self.mode.name} already... excluding')
                result.already_present.append(tag)
            elif tag in self.mode.deferred_tags:
                tag_text = self.tag_text(tag)
                self.text = (self.text.rstrip() + '\n\n' + tag_text
                             if self.text.strip() else tag_text)
                result.deferred.append(tag)
                self.added.append(tag)
            else:
                result.new_tags.append(tag)

        for tag in result.new_tags:
            if self.is_groupable(tag):
                result.groupable_new.append(tag)
            else:
                result.non_groupable_new.append(tag)

        if self.request.tags_to_retain is None:
            retain = [tag for tag in self.existing_tags
                      if tag not in self.request.tags_to_remove]
        else:
            retain = list(self.request.tags_to_retain)
        # A requested tag found on the page is kept where it belongs
        retain += result.already_present
        result.groupable_existing = [
            tag for tag in dict.fromkeys(retain)
            if tag not in result.new_tags and tag not in self.mode.deferred_tags
            and self.is_groupable(tag)]
        return result

    def add_and_rearrange(self, sorted_tags: Classification) -> None:
        """Add the new tags; existing groupable tags outside the container are pulled in."""
        if self.mode.collect_regex is not None:
            self.regroup_collected_tags(sorted_tags.new_tags)
            return

        group = self.mode.group_template

        # Case 1. Container exists: new groupable tags are put into it, and
        # so are existing groupable tags that were outside.
        if not self.disable_grouping and self.mode.container_present(self.text):
            pywikibot.info(f'Adding supported tags inside existing {{{{{group}}}}}')
            self.insert_tag_text(self.tag_set_text(sorted_tags.non_groupable_new))
            existing_text, _ = self.splice_tags(sorted_tags.groupable_existing)
            self.add_into_container(
                existing_text + self.tag_set_text(sorted_tags.groupable_new))

        # Case 2. No container, but one is warranted: it is created with the
        # new and the existing groupable tags.
        elif should_create_container(len(sorted_tags.groupable_new),
                                     len(sorted_tags.groupable_existing),
                                     self.mode, self.disable_grouping):
            existing_text, spliced = self.splice_tags(sorted_tags.groupable_existing)
            ungrouped_text = self.tag_set_text(sorted_tags.non_groupable_new)
            if len(sorted_tags.groupable_new) + len(spliced) >= self.mode.group_min_size:
                pywikibot.info(f'Grouping supported tags inside {{{{{group}}}}}')
                grouped_text = ('{{' + group + '|\n'
                                + self.tag_set_text(sorted_tags.groupable_new)
                                + existing_text + '}}')
                self.insert_tag_text(grouped_text + '\n' + ungrouped_text)
            else:
                # Too few of the existing tags were found to fill a container
                self.insert_tag_text(self.tag_set_text(sorted_tags.new_tags) + existing_text)

        # Case 3. No container, none to be added.
        else:
            self.insert_tag_text(self.tag_set_text(sorted_tags.new_tags))

        self.added.extend(sorted_tags.new_tags)

    def regroup_collected_tags(self, new_tags) -> None:
        """Take out every tag of the mode and put them all in the container.

        Used by modes whose tags share a name pattern, so all of them can
        be found in the text without detection of existing tags.
        """
        group = self.mode.group_template
        existing = [match.strip() for match in self.mode.collect_regex.findall(self.text)]
        self.text = self.mode.collect_regex.sub('', self.text)
        tag_text = ''.join(tag + '\n' for tag in existing) + self.tag_set_text(new_tags)
        self.added.extend(new_tags)

        if self.mode.container_present(self.text):
            pywikibot.info(f'Adding tags inside existing {{{{{group}}}}}')
            self.add_into_container(tag_text)
            return
        if not tag_text:
            return

        pywikibot.info(f'Grouping tags inside {{{{{group}}}}}')
        grouped_text = '{{' + group + '|\n' + tag_text + '}}'
        directive = REDIRECT_DIRECTIVE_RE.match(self.text)
        if directive:
            head = self.text[:directive.end()].rstrip()
            rest = self.text[directive.end():].lstrip('\n')
            self.text = head + '\n\n' + grouped_text + '\n' + rest
        else:
            self.text = grouped_text + '\n' + self.text.lstrip('\n')

    def splice_tags(self, tags):
        """Cut existing tags out of the text.

        Tags held by the container or by any other template stay where
        they are.

        :return: the wikitext of the spliced tags, and their names
        """
        tag_text = ''
        spliced = []
        for tag in tags:
            try:
                text = self._splice_tag(tag)
            except StructuralMismatch as e:
                self.warn(f'{e}... skipping')
                continue
            if text:
                tag_text += text + '\n'
                spliced.append(tag)
        return tag_text, spliced

    def _splice_tag(self, tag: str) -> str | None:
        regex = tag_block_regex(tag, self.config.aliases(tag))
        spans = template_spans(self.text)

        found = False
        for match in regex.finditer(self.text):
            found = True
            brace = self.text.index('{{', match.start())
            if any(start < brace < end for start, end in spans):
                continue
            self.text = self.text[:match.start()] + self.text[match.end():]
            return match.group(0).strip()

        if not found:
            raise StructuralMismatch(tag)
        return None  # already grouped

    def add_into_container(self, tag_text: str) -> None:
        """Append tags after the current members of the container."""
        if not tag_text.strip():
            return
        container = self.mode.find_container(self.text)
        opening = container.opening.rstrip()
        if not opening.endswith(('|', '=')):
            opening += '|'
        members = container.members.strip()
        body = (members + '\n' if members else '') + tag_text.strip()
        self.text = (self.text[:container.start] + opening + '\n' + body + '\n'
                     + container.closing + self.text[container.end:])

    def final_cleanup(self) -> None:
        """Dissolve every container holding fewer tags than the mode minimum.

        A run that changed nothing leaves the page alone.
        """
        if not self.mode.container_re or self.text == self.old_text:
            return
        for container in reversed(self.mode.find_containers(self.text)):
            if count_members(container.members) >= self.mode.group_min_size:
                continue

            pywikibot.info(f'Removing {{{{{self.mode.group_template}}}}} holding too few tags')
            members = container.members.strip()
            rest = self.text[container.end:]
            if not members:
                rest = re.sub(r'\A[ \t]*\n', '', rest)
            self.text = self.text[:container.start] + members + rest


class TagEngine:

    """Entry point: apply a tagging request to a page text."""

    def __init__(self, config: TagConfig | None = None):
        self.config = config or TagConfig()

    def run(self, text: str, page: PageInfo, request: TaggingRequest,
            existing_tags=(), mode: Mode | None = None) -> TagResult:
        """Return the new page text and what was done.

        :param existing_tags: tags detected on the page by the caller
        :param mode: force a mode instead of selecting it from the page
        :raises ValidationError: the request is rejected; nothing is changed
        """
        mode = mode or select_mode(page, self.config.modes)
        if mode is None:
            raise ValidationError(f'None of the tagging modes applies to {page.title}')

        validate_request(request, mode, self.config.catalog(mode), page)

        run = TagRun(self.config, text, page, request, mode, existing_tags)
        run.initial_cleanup()
        sorted_tags = run.classify()
        run.add_and_rearrange(sorted_tags)
        run.final_cleanup()

        result = TagResult(
            text=run.text,
            old_text=text,
            mode=mode,
            page=page,
            request=request,
            added=run.added,
            removed=run.removed,
            warnings=run.warnings,
        )
        result.summary = make_edit_summary(result.added, result.removed,
                                           self.config.summary_messages(),
                                           request.reason)
        return result


# =========================================================================
# Edit Summary Generation
# =========================================================================

def make_edit_summary(tags_to_add, tags_to_remove, msgs: dict,
                      reason: str | None = None) -> str:
    """Generate a language-aware edit summary.

    The bot prefix is only added if a summary was actually generated.
    Summaries over 499 characters lose their template links.
    """
    summary_parts = []
    if tags_to_add:
        links = [make_template_link(tag, msgs) for tag in tags_to_add]
        prefix = msgs['tag'] if len(links) == 1 else msgs['tags']
        summary_parts.append(f"{msgs['adding']} {prefix} {make_sentence(links, msgs)}")

    if tags_to_remove:
        links = [make_template_link(tag, msgs) for tag in tags_to_remove]
        prefix = msgs['tag'] if len(links) == 1 else msgs['tags']
        summary_parts.append(f"{msgs['removing']} {prefix} {make_sentence(links, msgs)}")

    edit_summary = msgs['separator'].join(summary_parts)
    if not edit_summary:
        return ''

    if reason:
        edit_summary += f': {reason}'
    edit_summary = msgs['bot_prefix'] + edit_summary

    # Shorten summary if it exceeds the character limit
    if len(edit_summary) > 499:
        edit_summary = re.sub(r'\[\[([^|\]]+)\|([^\]]+)\]\]', r'\2', edit_summary)
    return edit_summary


def make_sentence(items: list[str], msgs: dict) -> str:
    """Join summary items as ``A, B and C``, using the language's separators."""
    if not items:
        return ''
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]}{msgs['and']}{items[1]}"
    return msgs['comma_separator'].join(items[:-1]) + f"{msgs['and']}{items[-1]}"


def make_template_link(tag: str, msgs: dict) -> str:
    """Link a tag to its template page, e.g. ``{{[[Template:POV|POV]]}}``.

    Anything after a pipe in the tag (its parameters) is left out of the
    link, and the link target uses the localized template namespace.
    """
    if '|' in tag:
        tag = tag.split('|', 1)[0]

    ns = msgs['template_ns']
    return f'{{{{[[{ns}:{tag}|{tag}]]}}}}'
