"""
Follow-up edits made after a tagged page has been saved.

Each workflow is a post-save hook: a callable taking the saved page and
the TagResult of the run. Hooks are independent of each other; a failing
hook is logged and the remaining hooks still run. None of them runs when
the tagged page was not saved.
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

import re

import pywikibot

from tag_config import TagConfig
from tag_data import CURRENT_DATE
from tag_engine import TagResult
from tag_modes import (
    ARTICLE_LEADING_RE, MERGE_TAGS, TRANSLATION_TAGS, is_checked, merge_discussion,
)
from tag_patterns import insert_tag_text, tag_regex
from tag_render import render_tag

PNT_PAGE = 'Wikipedia:Pages needing translation into English'

PNT_CLEANUP_HEADING_RE = re.compile(
    r'\n+(==\s?Translated pages that could still use some cleanup\s?==)')

# Tag put on the other article of a merge proposal
OTHER_MERGE_TAG = {'Merge': 'Merge', 'Merge to': 'Merge from', 'Merge from': 'Merge to'}


def append_section(page, title: str, text: str, summary: str) -> None:
    """Add a new section at the bottom of a page and save it."""
    old_text = page.text if page.exists() else ''
    section = f'== {title} ==\n{text}'
    page.text = old_text.rstrip() + '\n\n' + section if old_text.strip() else section
    page.save(summary=summary)


class PostSaveHook:

    """Base class of the follow-up workflows."""

    def __init__(self, config: TagConfig | None = None):
        self.config = config or TagConfig()

    def __call__(self, page, result: TagResult) -> None:
        if not self.applies(result):
            return
        try:
            self.run(page, result)
        except Exception as e:
            pywikibot.error(f'{type(self).__name__} failed for {page.title()}: {e}')

    def applies(self, result: TagResult) -> bool:
        raise NotImplementedError

    def run(self, page, result: TagResult) -> None:
        raise NotImplementedError


def _merge_tag(result: TagResult) -> str | None:
    for tag in result.added:
        if tag in MERGE_TAGS:
            return tag
    return None


def _translation_tag(result: TagResult) -> str | None:
    for tag in result.added:
        if tag in TRANSLATION_TAGS:
            return tag
    return None


class MergeDiscussionHook(PostSaveHook):

    """Post the merge rationale on the talk page of the discussion article."""

    def applies(self, result):
        tag = _merge_tag(result)
        return bool(tag and merge_discussion(tag, result.request.values, result.page))

    def run(self, page, result):
        tag = _merge_tag(result)
        discussion = merge_discussion(tag, result.request.values, result.page)
        talk = pywikibot.Page(page.site, discussion.discuss_article).toggleTalkPage()
        pywikibot.info(f'Posting rationale on {talk.title()}')
        append_section(talk, discussion.title_linked,
                       result.request.values['mergeReason'].strip() + ' ~~~~',
                       'Proposing to merge [[:' + discussion.other_article + ']] '
                       + ('with' if tag == 'Merge' else 'into')
                       + ' [[:' + discussion.discuss_article + ']]')


class MergeOtherPageHook(PostSaveHook):

    """Tag the other article of a merge proposal with the counterpart tag."""

    def applies(self, result):
        return bool(_merge_tag(result)) and is_checked(result.request.values.get('mergeTagOther'))

    def run(self, page, result):
        tag = _merge_tag(result)
        other_tag = OTHER_MERGE_TAG[tag]
        values = result.request.values
        discussion = merge_discussion(tag, values, result.page)
        target = discussion.target if discussion else values['mergeTarget'].strip()

        other_page = pywikibot.Page(page.site, target)
        if not other_page.exists():
            pywikibot.warning(f'{other_page.title()} does not exist; not tagging it')
            return
        text = other_page.text
        if tag_regex(other_tag, self.config.aliases(other_tag)).search(text):
            pywikibot.warning(f'Found {{{{{other_tag}}}}} on {other_page.title()} already')
            return

        definition = self.config.catalogs['article'].resolve(other_tag)
        extra = {'discuss': discussion.link} if discussion else {}
        extra['date'] = CURRENT_DATE
        tag_text = render_tag(definition, {'mergeTarget': page.title()}, extra,
                              self.config.timestamp)
        other_page.text = insert_tag_text(tag_text + '\n', text, ARTICLE_LEADING_RE)
        pywikibot.info(f'Tagging other page ({other_page.title()})')
        other_page.save(summary=f'Adding tag {{{{[[Template:{other_tag}|{other_tag}]]}}}}')


class TranslationListingHook(PostSaveHook):

    """List the article at the page collecting articles needing translation."""

    def applies(self, result):
        return (bool(_translation_tag(result))
                and is_checked(result.request.values.get('translationPostAtPNT')))

    def run(self, page, result):
        values = result.request.values
        lang = (values.get('translationLanguage') or '').strip()
        comments = (values.get('translationComments') or '').strip()
        title = page.title()
        template = 'duflu' if _translation_tag(result) == 'Rough translation' else 'needtrans'
        template_text = (f'{{{{subst:{template}|pg={title}|Language={lang or "uncertain"}'
                         f'|Comments={comments}}}}} ~~~~')

        pnt_page = pywikibot.Page(page.site, PNT_PAGE)
        if pnt_page.isRedirectPage():
            pnt_page = pnt_page.getRedirectTarget()
        old_text = pnt_page.text
        if template == 'duflu':
            text = old_text + '\n\n' + template_text
            summary = 'Translation cleanup requested on'
        else:
            text = PNT_CLEANUP_HEADING_RE.sub(
                lambda match: '\n\n' + template_text + '\n\n' + match.group(1),
                old_text, count=1)
            summary = 'Translation' + (f' from {lang}' if lang else '') + ' requested on'

        if text == old_text:
            pywikibot.error(f'Failed to find target spot for the listing on {pnt_page.title()}')
            return
        pnt_page.text = text
        pywikibot.info(f'Listing article at {pnt_page.title()}')
        pnt_page.save(summary=f'{summary} [[:{title}]]')


class CreatorNotificationHook(PostSaveHook):

    """Ask the creator of the page to contribute in English."""

    def applies(self, result):
        return (bool(_translation_tag(result))
                and is_checked(result.request.values.get('translationNotify')))

    def run(self, page, result):
        creator = page.oldest_revision.user
        pywikibot.info(f'Found creator {creator}')
        if creator == page.site.username():
            pywikibot.warning(
                f'The bot ({creator}) created this page; skipping user notification')
            return

        title = page.title()
        listed = is_checked(result.request.values.get('translationPostAtPNT'))
        talk = pywikibot.User(page.site, creator).getUserTalkPage()
        if talk.isRedirectPage():
            talk = talk.getRedirectTarget()
        append_section(talk, f'Your article [[{title}]]',
                       f'{{{{subst:uw-notenglish|1={title}'
                       + ('' if listed else '|nopnt=yes') + '}} ~~~~',
                       'Notice: Please use English when contributing to the English Wikipedia.')


def default_hooks(config: TagConfig | None = None) -> list[PostSaveHook]:
    """Return the follow-up workflows in the order they run."""
    return [
        MergeDiscussionHook(config),
        MergeOtherPageHook(config),
        TranslationListingHook(config),
        CreatorNotificationHook(config),
    ]


def run_hooks(hooks, page, result: TagResult) -> None:
    for hook in hooks:
        hook(page, result)
