#!/usr/bin/env python3
"""
A bot for placing maintenance tags on Wikipedia pages, in the style of the
Twinkle tagging gadget.

The bot adds the requested tags to every page given by the page generators,
and removes the tags it is asked to remove. It only saves an edit if at
least one tag is added or removed.

Operational Flow:
1.  Mode selection: redirects get redirect category templates, articles
    (and user space or draft pages) get article maintenance tags, and local
    files get file maintenance tags. Other pages are skipped.
2.  Validation: a request that does not fit the page (incompatible tags,
    missing required parameters, a file tag for the wrong file type, ...)
    is reported and the page is left alone.
3.  Tag Management: new tags are placed below hatnotes and deletion or
    protection notices. If enough tags are present, they are grouped into
    {{Multiple issues}} (articles) or {{Redirect category shell}}
    (redirects). {{Uncategorized}} and {{Improve categories}} go to the
    bottom of the page.
4.  Edit Summary and Save: a language-aware edit summary is generated in a
    style similar to the Twinkle gadget before the page is saved.
5.  Follow-up: for merge and translation tags, the merge rationale is posted
    on the talk page, the other article is tagged, the article is listed at
    Wikipedia:Pages needing translation into English and its creator is
    notified, as requested by the parameters.

Configuration and Recommendations:
- All tag definitions, and internationalization (i18n) messages are managed
  in the `tag_data.py` file, NOT here.
- Redirects of the requested tag templates are looked up on the wiki, so
  tags placed under another name are found too.

The following parameters are supported:

-always           The bot won't ask for confirmation when putting a page.

-tags:            Comma separated list of the tags to add,
                  e.g. -tags:"Unreferenced,Orphan"

-remove:          Comma separated list of the tags to remove.

-param:           Value of a tag parameter, given as field=value. Can be
                  used several times, e.g. -param:mergeTarget=Foo

-nogroup          Do not group the tags into {{Multiple issues}}.

-custom:          Comma separated list of extra article tags to allow.

-customfile:      Comma separated list of extra file tags to allow.

-customredirect:  Comma separated list of extra redirect tags to allow.

-reason:          Append custom text to the default summary.
                  Useful for mentioning discussion permanent links.

-summary:         Overwrite the default summary. Be careful, this is not recommended as it
                  disables the detailed, automatic summary generation.

Example:
--------

To tag the articles of a category as unreferenced orphans:

    python pwb.py tag -cat:"Some category" -tags:"Unreferenced,Orphan"

&params;
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

import sys

import pywikibot
from pywikibot import pagegenerators
from pywikibot.bot import (
    ConfigParserBot,
    ExistingPageBot,
    SingleSiteBot,
)
from pywikibot.exceptions import Error

from tag_config import TagConfig, split_list
from tag_engine import TagEngine, TaggingRequest
from tag_errors import ValidationError
from tag_hooks import default_hooks, run_hooks
from tag_modes import PageInfo, select_mode

# This is required for the text that is shown when you run this script
# with the parameter -help.
docuReplacements = {'&params;': pagegenerators.parameterHelp}  # noqa: N816


class TagBot(
    SingleSiteBot,  # A bot only working on one site
    ConfigParserBot,  # A bot which reads options from scripts.ini setting file
    ExistingPageBot,  # CurrentPageBot which only treats existing pages
):

    use_redirects = None  # treats redirects and non-redirects

    update_options = {
        'tags': '',  # comma separated tags to add
        'remove': '',  # comma separated tags to remove
        'nogroup': False,  # do not group tags into their container
        'custom': '',  # extra article tags
        'customfile': '',  # extra file tags
        'customredirect': '',  # extra redirect tags
        'reason': None,  # append custom text to the default summary
        'summary': None,  # overwrite the default summary
    }

    def __init__(self, params=None, hooks=None, **kwargs):
        super().__init__(**kwargs)

        if self.opt.reason and self.opt.summary:
            pywikibot.error(
                'Invalid summary options. Use either -reason or -summary, not both.')
            sys.exit(1)

        # Tag parameter values, by form field name
        self.params = dict(params or {})
        self.config = TagConfig.from_options(self.opt, language=self.site.code)
        self.engine = TagEngine(self.config)
        self.hooks = default_hooks(self.config) if hooks is None else hooks

    def treat_page(self) -> None:
        """Load the given page, tag it, and save it."""
        page = self.current_page
        info = self.page_info(page)
        mode = select_mode(info, self.config.modes)
        if mode is None:
            pywikibot.info(f'Skipping {page.title()}: no tags apply to this page.')
            return

        request = self.make_request()
        if not request.tags and not request.tags_to_remove:
            pywikibot.info('No tags to add or remove.')
            return

        self.load_template_redirects(request.tags + request.tags_to_remove)
        existing_tags = self.existing_tags(page, mode)

        try:
            result = self.engine.run(page.text, info, request, existing_tags, mode)
        except ValidationError as e:
            pywikibot.error(f'{page.title()}: {e}')
            return

        if not result.changed:
            pywikibot.info(f'No changes were needed on {page.title()}')
            return

        summary = self.opt.summary or result.summary
        if self.userPut(page, result.old_text, result.text, summary=summary):
            run_hooks(self.hooks, page, result)

    def make_request(self) -> TaggingRequest:
        """Build the tagging request from the bot options."""
        return TaggingRequest(
            tags=split_list(self.opt.tags),
            values=dict(self.params),
            tags_to_remove=split_list(self.opt.remove),
            group=False if self.opt.nogroup else None,
            reason=self.opt.reason or '',
        )

    # =========================================================================
    # Page Helpers
    # =========================================================================

    def page_info(self, page) -> PageInfo:
        """Collect what the tagging modes need to know about a page."""
        namespace = page.namespace()
        shared = False
        mime_type = None
        if namespace == 6:
            file_page = pywikibot.FilePage(page)
            shared = file_page.file_is_shared()
            try:
                mime_type = file_page.latest_file_info.mime
            except Error as e:
                pywikibot.warning(f'Could not get the file type of {page.title()}: {e}')

        return PageInfo(
            title=page.title(),
            namespace=int(namespace),
            exists=page.exists(),
            is_redirect=page.isRedirectPage(),
            shared=shared,
            mime_type=mime_type,
        )

    def existing_tags(self, page, mode) -> list[str]:
        """Return the catalog tags transcluded on the page."""
        names = {template.title(with_ns=False) for template in page.templates()}
        return [tag for tag in self.config.catalog(mode).flat
                if tag in names
                or any(alias in names for alias in self.config.aliases(tag))]

    def load_template_redirects(self, tags) -> None:
        """Look up the redirects of the tag templates not seen yet."""
        for tag in tags:
            if tag in self.config.template_redirects:
                continue
            template = pywikibot.Page(self.site, tag, ns=10)
            if not template.exists():
                pywikibot.warning(f'Template {{{{{tag}}}}} does not exist on {self.site}')
                self.config.template_redirects[tag] = []
                continue
            self.config.template_redirects[tag] = self._get_template_redirects(template)

    def _get_template_redirects(self, page):
        """Get a list of redirect titles for a given template."""
        redirects = page.redirects(filter_fragments=False, namespaces=10)
        return [redirect.title(with_ns=False) for redirect in redirects]


def main(*args: str) -> None:
    """
    Process command line arguments and invoke bot.

    If args is an empty list, sys.argv is used.

    :param args: command line arguments
    """
    options = {}
    params = {}
    # Process global arguments to determine desired site
    local_args = pywikibot.handle_args(args)

    # This factory is responsible for processing command line arguments
    # that are also used by other scripts and that determine on which pages
    # to work on.
    gen_factory = pagegenerators.GeneratorFactory()

    # Process pagegenerators arguments
    local_args = gen_factory.handle_args(local_args)

    # Parse your own command line arguments
    for arg in local_args:
        arg, _, value = arg.partition(':')
        option = arg[1:]
        if option == 'param':
            field, sep, field_value = value.partition('=')
            if not sep or not field.strip():
                pywikibot.error(f'Invalid parameter {value!r}, use -param:field=value')
                return
            params[field.strip()] = field_value
        elif option in ('tags', 'remove', 'custom', 'customfile', 'customredirect',
                        'summary', 'reason'):
            if not value:
                value = pywikibot.input('Please enter a value for ' + arg)
            options[option] = value
        # take the remaining options as booleans.
        # You will get a hint if they aren't pre-defined in your bot class
        else:
            options[option] = True

    # The preloading option is responsible for downloading multiple
    # pages from the wiki simultaneously.
    gen = gen_factory.getCombinedGenerator(preload=True)

    # check if further help is needed
    if not pywikibot.bot.suggest_help(missing_generator=not gen):
        # pass generator and private options to the bot
        bot = TagBot(generator=gen, params=params, **options)
        bot.run()  # guess what it does


if __name__ == '__main__':
    main()
