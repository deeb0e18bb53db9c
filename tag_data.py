# -*- coding: utf-8 -*-

"""
This file serves as the central data hub for the tagging engine.

It contains the tag catalogs of the three tagging modes (redirects,
articles and files) and the lists of templates that the engine has to
know about, separating data from the placement logic in `tag_engine.py`.

Catalog format:
    {category: {subcategory: [tag, ...]}}  or  {category: [tag, ...]}

Each tag is a dict with these keys (only "tag" is mandatory):
  - "tag": (str) template name, unique within one catalog.
  - "description": (str) human readable description.
  - "fields": (list) parameter inputs, see below.
  - "groupable": (bool) may the tag live inside the mode's container
    template? Leave it out to use the mode default.
  - "dupe_allowed": (bool) may the tag be added again when already present?
  - "subst": (bool) must the template be substituted on save?

Each field is a dict with the keys:
  - "name": (str) form field name, the key of the request values.
  - "type": "input", "select", "checkbox", "hidden" or "textarea".
  - "parameter": (str) template parameter; numbers are positional.
  - "value": (str) default value, or the constant of a hidden field.
  - "required", "label", "tooltip", "list".
"""

# Placeholder rendered into dated tags; MediaWiki expands it on save.
CURRENT_DATE = '{{subst:CURRENTMONTHNAME}} {{subst:CURRENTYEAR}}'

REDIRECT_TAGS = {
    'Grammar, punctuation, and spelling': {
        'Abbreviation': [
            {'tag': 'R from acronym',
             'description': 'redirect from an acronym (e.g. POTUS) to its expanded form'},
            {'tag': 'R from initialism',
             'description': 'redirect from an initialism (e.g. AGF) to its expanded form'},
            {'tag': 'R from MathSciNet abbreviation',
             'description': 'redirect from MathSciNet publication title abbreviation to the unabbreviated title'},
            {'tag': 'R from NLM abbreviation',
             'description': 'redirect from a NLM publication title abbreviation to the unabbreviated title'},
        ],
        'Capitalisation': [
            {'tag': 'R from CamelCase', 'description': 'redirect from a CamelCase title'},
            {'tag': 'R from other capitalisation',
             'description': 'redirect from a title with another method of capitalisation'},
            {'tag': 'R from miscapitalisation', 'description': 'redirect from a capitalisation error'},
        ],
        'Grammar & punctuation': [
            {'tag': 'R from modification',
             'description': "redirect from a modification of the target's title, such as with words rearranged"},
            {'tag': 'R from plural', 'description': 'redirect from a plural word to the singular equivalent'},
            {'tag': 'R to plural', 'description': 'redirect from a singular noun to its plural form'},
        ],
        'Parts of speech': [
            {'tag': 'R from verb', 'description': 'redirect from an English-language verb or verb phrase'},
            {'tag': 'R from adjective',
             'description': 'redirect from an adjective (word or phrase that describes a noun)'},
        ],
        'Spelling': [
            {'tag': 'R from alternative spelling', 'description': 'redirect from a title with a different spelling'},
            {'tag': 'R from ASCII-only',
             'description': 'redirect from a title in only basic ASCII to the formal title'},
            {'tag': 'R from diacritic',
             'description': 'redirect from a page name that has diacritical marks (accents, umlauts, etc.)'},
            {'tag': 'R to diacritic',
             'description': 'redirect to the article title with diacritical marks (accents, umlauts, etc.)'},
            {'tag': 'R from misspelling', 'description': 'redirect from a misspelling or typographical error'},
        ],
    },
    'Alternative names': {
        'General': [
            {'tag': 'R from alternative language',
             'description': 'redirect from or to a title in another language',
             'fields': [
                 {'name': 'altLangFrom', 'type': 'input', 'parameter': 'from',
                  'label': 'From language (two-letter code): ',
                  'tooltip': 'Enter the two-letter code of the language the redirect name is in'},
                 {'name': 'altLangTo', 'type': 'input', 'parameter': 'to',
                  'label': 'To language (two-letter code): ',
                  'tooltip': 'Enter the two-letter code of the language the target name is in'},
             ]},
            {'tag': 'R from alternative name',
             'description': 'redirect from a title that is another name, a pseudonym, a nickname, or a synonym'},
            {'tag': 'R from ambiguous sort name',
             'description': 'redirect from an ambiguous sort name to a page or list that disambiguates it'},
            {'tag': 'R from former name', 'description': 'redirect from a former name or working title'},
            {'tag': 'R from historic name',
             'description': 'redirect from a name with a significant historic past no longer known by that name'},
            {'tag': 'R from incomplete name', 'description': 'R from incomplete name'},
            {'tag': 'R from incorrect name',
             'description': 'redirect from an erroneus name that is unsuitable as a title'},
            {'tag': 'R from less specific name',
             'description': 'redirect from a less specific title to a more specific, less general one'},
            {'tag': 'R from long name', 'description': 'redirect from a more complete title'},
            {'tag': 'R from more specific name',
             'description': 'redirect from a more specific title to a less specific, more general one'},
            {'tag': 'R from short name',
             'description': 'redirect from a title that is a shortened form of a more complete title'},
            {'tag': 'R from sort name',
             'description': "redirect from the target's sort name, such as beginning with their surname"},
            {'tag': 'R from synonym', 'description': 'redirect from a semantic synonym of the target page title'},
        ],
        'People': [
            {'tag': 'R from birth name', 'description': "redirect from a person's birth name to a more common name"},
            {'tag': 'R from given name', 'description': "redirect from a person's given name"},
            {'tag': 'R from name with title',
             'description': "redirect from a person's name preceded or followed by a title"},
            {'tag': 'R from person', 'description': 'redirect from a person or persons to a related article'},
            {'tag': 'R from personal name',
             'description': "redirect from an individual's personal name to their better known moniker"},
            {'tag': 'R from pseudonym', 'description': 'redirect from a pseudonym'},
            {'tag': 'R from surname', 'description': 'redirect from a title that is a surname'},
        ],
        'Technical': [
            {'tag': 'R from drug trade name',
             'description': 'redirect from (or to) the trade name of a drug to (or from) the INN'},
            {'tag': 'R from filename', 'description': 'redirect from a title that is a filename of the target'},
            {'tag': 'R from molecular formula',
             'description': 'redirect from a molecular/chemical formula to its technical or trivial name'},
            {'tag': 'R from gene symbol',
             'description': 'redirect from a HUGO symbol for a gene to an article about the gene'},
        ],
        'Organisms': [
            {'tag': 'R to scientific name', 'description': 'redirect from the common name to the scientific name'},
            {'tag': 'R from scientific name', 'description': 'redirect from the scientific name to the common name'},
            {'tag': 'R from alternative scientific name',
             'description': 'redirect from an alternative scientific name to the accepted scientific name'},
            {'tag': 'R from scientific abbreviation', 'description': 'redirect from a scientific abbreviation'},
            {'tag': 'R to monotypic taxon',
             'description': 'redirect from the only lower-ranking member of a monotypic taxon to its taxon'},
            {'tag': 'R from monotypic taxon',
             'description': 'redirect from a monotypic taxon to its only lower-ranking member'},
            {'tag': 'R taxon with possibilities',
             'description': 'redirect from a title related to a living organism that could be expanded'},
        ],
        'Geography': [
            {'tag': 'R from name and country', 'description': 'redirect from the specific name to the briefer name'},
            {'tag': 'R from more specific geographic name',
             'description': 'redirect from a geographic location that includes extraneous identifiers'},
        ],
    },
    'Navigation aids': {
        'Navigation': [
            {'tag': 'R to anchor',
             'description': 'redirect from a topic without its own page to an anchored part of a page'},
            {'tag': 'R avoided double redirect',
             'description': 'redirect from an alternative title for another redirect',
             'fields': [
                 {'name': 'doubleRedirectTarget', 'type': 'input', 'parameter': '1',
                  'label': 'Redirect target name',
                  'tooltip': "Enter the page this redirect would target if the page wasn't also a redirect"},
             ]},
            {'tag': 'R from file metadata link',
             'description': 'redirect of a wikilink created from EXIF, XMP, or other metadata'},
            {'tag': 'R to list entry',
             'description': 'redirect to a list which contains brief descriptions of subjects'},
            {'tag': 'R mentioned in hatnote',
             'description': 'redirect from a title that is mentioned in a hatnote at the redirect target'},
            {'tag': 'R to section',
             'description': 'similar to {{R to list entry}}, but when the list is organized in sections'},
            {'tag': 'R from shortcut', 'description': 'redirect from a Wikipedia shortcut'},
            {'tag': 'R from template shortcut',
             'description': 'redirect from a shortcut page name to a page in template namespace'},
        ],
        'Disambiguation': [
            {'tag': 'R from ambiguous term',
             'description': 'redirect from an ambiguous page name to a page that disambiguates it'},
            {'tag': 'R to disambiguation page', 'description': 'redirect to a disambiguation page'},
            {'tag': 'R from incomplete disambiguation',
             'description': 'redirect from a page name that is too ambiguous to be the title of an article'},
            {'tag': 'R from incorrect disambiguation',
             'description': 'redirect from a page name with incorrect disambiguation'},
            {'tag': 'R from other disambiguation',
             'description': 'redirect from a page name with an alternative disambiguation qualifier'},
            {'tag': 'R from unnecessary disambiguation',
             'description': 'redirect from a page name that has an unneeded disambiguation qualifier'},
        ],
        'Merge, duplicate & move': [
            {'tag': 'R from duplicated article',
             'description': 'redirect to a similar article in order to preserve its edit history'},
            {'tag': 'R with history',
             'description': 'redirect from a page containing substantive page history'},
            {'tag': 'R from move', 'description': 'redirect from a page that has been moved/renamed'},
            {'tag': 'R from merge', 'description': 'redirect from a merged page in order to preserve its edit history'},
        ],
        'Namespace': [
            {'tag': 'R from remote talk page',
             'description': 'redirect from a talk page to a corresponding page that is more heavily watched'},
            {'tag': 'R to category namespace',
             'description': 'redirect from a page outside the category namespace to a category page'},
            {'tag': 'R to help namespace', 'description': 'redirect to a page in help namespace'},
            {'tag': 'R to main namespace',
             'description': 'redirect from a page outside the main-article namespace to an article'},
            {'tag': 'R to portal namespace', 'description': 'redirect to a page in portal namespace'},
            {'tag': 'R to project namespace', 'description': 'redirect to a page in the project namespace'},
            {'tag': 'R to user namespace', 'description': 'redirect from a page outside the user namespace to a user page'},
        ],
    },
    'Media': {
        'General': [
            {'tag': 'R from book', 'description': 'redirect from a book title to a more general, relevant article'},
            {'tag': 'R from album', 'description': 'redirect from an album to a related topic'},
            {'tag': 'R from song', 'description': 'redirect from a song title to a more general, relevant article'},
            {'tag': 'R from television episode',
             'description': 'redirect from a television episode title to a related work or lists of episodes'},
        ],
        'Fiction': [
            {'tag': 'R from fictional character',
             'description': 'redirect from a fictional character to a related fictional work'},
            {'tag': 'R from fictional element',
             'description': 'redirect from a fictional element to a related fictional work'},
            {'tag': 'R from fictional location',
             'description': 'redirect from a fictional location or setting to a related fictional work'},
        ],
    },
    'Miscellaneous': {
        'Related information': [
            {'tag': 'R to article without mention',
             'description': 'redirect to an article without any mention of the redirected word or phrase'},
            {'tag': 'R to decade', 'description': 'redirect from a year to the decade article'},
            {'tag': 'R from domain name', 'description': 'redirect from a domain name to an article about a website'},
            {'tag': 'R from phrase', 'description': 'redirect from a phrase to a more general relevant article'},
            {'tag': 'R from list topic', 'description': 'redirect from the topic of a list to the equivalent list'},
            {'tag': 'R from member', 'description': 'redirect from a member of a group to a related topic'},
            {'tag': 'R to related topic', 'description': 'redirect to an article about a similar topic'},
            {'tag': 'R from related word', 'description': 'redirect from a related word'},
            {'tag': 'R from school', 'description': 'redirect from a school article that had very little information'},
            {'tag': 'R from subtopic', 'description': 'redirect from a title that is a subtopic of the target article'},
            {'tag': 'R to subtopic', 'description': "redirect to a subtopic of the redirect's title"},
            {'tag': 'R from Unicode character',
             'description': 'redirect from a single Unicode character to an article that infers its meaning'},
            {'tag': 'R from Unicode code',
             'description': 'redirect from a Unicode code point to an article about the character'},
        ],
        'With possibilities': [
            {'tag': 'R with possibilities',
             'description': 'redirect from a specific title to a more general, less detailed article'},
        ],
        'ISO codes': [
            {'tag': 'R from ISO 4 abbreviation',
             'description': 'redirect from an ISO 4 publication title abbreviation to the unabbreviated title'},
            {'tag': 'R from ISO 639 code',
             'description': 'redirect from an ISO 639 language code to an article about the language'},
        ],
        'Printworthiness': [
            {'tag': 'R printworthy',
             'description': 'redirect from a title that would be helpful in a printed version of Wikipedia'},
            {'tag': 'R unprintworthy',
             'description': 'redirect from a title that would NOT be helpful in a printed version of Wikipedia'},
        ],
    },
}

# Shared by {{Not English}} and {{Rough translation}}.
TRANSLATION_FIELDS = [
    {'name': 'translationLanguage', 'type': 'input', 'parameter': '1',
     'label': 'Language of article (if known): ',
     'tooltip': 'Consider looking at [[WP:LRC]] for help.'},
    {'name': 'translationPostAtPNT', 'type': 'checkbox',
     'label': 'List this article at Wikipedia:Pages needing translation into English (PNT)'},
    {'name': 'translationNotify', 'type': 'checkbox',
     'label': 'Notify the article creator'},
    {'name': 'translationComments', 'type': 'textarea',
     'label': 'Additional comments to post at PNT'},
]


def merge_fields(tag):
    """Return the fields of {{Merge}}, {{Merge to}} and {{Merge from}}."""
    other = {'Merge from': 'Merge to', 'Merge to': 'Merge from'}.get(tag, 'Merge')
    discussion_page = "the other article's" if tag == 'Merge to' else "this article's"
    return [
        {'name': 'mergeTarget', 'type': 'input', 'parameter': '1', 'required': True,
         'label': 'Other article(s): ',
         'tooltip': 'If specifying multiple articles, separate them with pipe characters: Article one|Article two'},
        {'name': 'mergeTagOther', 'type': 'checkbox',
         'label': f'Tag the other article with a {{{{{other}}}}} tag'},
        {'name': 'mergeReason', 'type': 'textarea',
         'label': f'Rationale for merge (will be posted on {discussion_page} talk page):'},
    ]


ARTICLE_TAGS = {
    'Maintenance tags': {
        'Sources': [
            {'tag': 'Unreferenced', 'description': 'article has no references at all'},
            {'tag': 'BLP unreferenced', 'description': 'biography of a living person with no references'},
            {'tag': 'More citations needed', 'description': 'article has references, but not enough of them'},
            {'tag': 'BLP sources', 'description': 'biography of a living person that needs more references'},
            {'tag': 'No footnotes',
             'description': 'article has references, but no inline citations to them'},
            {'tag': 'Primary sources', 'description': 'article relies too much on primary sources'},
            {'tag': 'One source', 'description': 'article relies largely or entirely on a single source'},
            {'tag': 'Unreliable sources', 'description': 'article may rely on unreliable sources'},
        ],
        'References': [
            {'tag': 'Cleanup bare URLs', 'description': 'article uses bare URLs for references'},
            {'tag': 'Citation style', 'description': 'article has unclear or inconsistent inline citations'},
        ],
        'Structure and formatting': [
            {'tag': 'Cleanup rewrite', 'description': 'article needs to be rewritten entirely'},
            {'tag': 'Cleanup reorganize', 'description': 'article needs to be reorganized'},
            {'tag': 'Copy edit',
             'description': 'article needs copy editing for grammar, style, cohesion, tone or spelling',
             'fields': [
                 {'name': 'copyEditFor', 'type': 'input', 'parameter': 'for',
                  'label': '"For" parameter: ',
                  'tooltip': 'Brief description of what needs copy editing (optional)'},
             ]},
            {'tag': 'Lead too short', 'description': 'article lead section is too short'},
            {'tag': 'Lead missing', 'description': 'article has no lead section'},
            {'tag': 'Very long', 'description': 'article is too long to read and navigate comfortably'},
            {'tag': 'Technical', 'description': 'article is too technical for most readers'},
        ],
        'Neutrality and quality': [
            {'tag': 'POV', 'description': 'article does not maintain a neutral point of view'},
            {'tag': 'Advert', 'description': 'article is written like an advertisement'},
            {'tag': 'Peacock', 'description': 'article contains wording that promotes the subject'},
            {'tag': 'Context', 'description': 'article provides insufficient context'},
            {'tag': 'Globalize',
             'description': 'article may not represent a worldwide view of the subject',
             'fields': [
                 {'name': 'globalize', 'type': 'select', 'parameter': '1',
                  'list': [
                      {'label': '{{Globalize}}: article may not represent a worldwide view', 'value': ''},
                      {'label': '{{Globalize|Western}}', 'value': 'Western'},
                      {'label': '{{Globalize|North America}}', 'value': 'North America'},
                      {'label': '{{Globalize|Europe}}', 'value': 'Europe'},
                  ]},
             ]},
            {'tag': 'Notability',
             'description': 'subject of the article may not meet the general notability guideline',
             'fields': [
                 {'name': 'notability', 'type': 'select', 'parameter': '1',
                  'list': [
                      {'label': "{{Notability}}: article's subject may not meet the general guideline", 'value': ''},
                      {'label': '{{Notability|Biographies}}', 'value': 'Biographies'},
                      {'label': '{{Notability|Companies}}', 'value': 'Companies'},
                      {'label': '{{Notability|Events}}', 'value': 'Events'},
                      {'label': '{{Notability|Web}}', 'value': 'Web'},
                  ]},
             ]},
        ],
        'Time sensitive': [
            {'tag': 'Update', 'description': 'article needs additional up-to-date information',
             'fields': [
                 {'name': 'updateInfo', 'type': 'input', 'parameter': 'reason',
                  'label': 'Reason: ', 'tooltip': 'Explain what needs updating (optional)'},
             ]},
            {'tag': 'Current', 'description': 'article is about a current event and may change rapidly',
             'groupable': False,
             'fields': [
                 {'name': 'currentEvent', 'type': 'select', 'parameter': '1',
                  'list': [
                      {'label': 'general', 'value': ''},
                      {'label': 'disaster', 'value': 'disaster'},
                      {'label': 'election', 'value': 'election'},
                      {'label': 'sport', 'value': 'sport'},
                      {'label': 'war', 'value': 'war'},
                  ]},
             ]},
            {'tag': 'In use', 'description': 'article is undergoing a major edit', 'groupable': False},
            {'tag': 'Under construction', 'description': 'article is in the process of being built',
             'groupable': False},
        ],
        'Translation': [
            {'tag': 'Not English', 'description': 'article is written in a language other than English',
             'groupable': False, 'fields': TRANSLATION_FIELDS},
            {'tag': 'Rough translation', 'description': 'poor translation from another language',
             'groupable': False, 'fields': TRANSLATION_FIELDS},
        ],
        'Categorization': [
            {'tag': 'Uncategorized', 'description': 'article has no categories'},
            {'tag': 'Improve categories', 'description': 'article may require additional categories'},
        ],
    },
    'Merge and split': {
        'Merge': [
            {'tag': 'Merge', 'description': 'article should be merged with another given article',
             'groupable': False, 'fields': merge_fields('Merge')},
            {'tag': 'Merge to', 'description': 'article should be merged into another given article',
             'groupable': False, 'fields': merge_fields('Merge to')},
            {'tag': 'Merge from', 'description': 'another given article should be merged into this one',
             'groupable': False, 'fields': merge_fields('Merge from')},
        ],
    },
}

# Everything under "Maintenance tags" may sit inside {{Multiple issues}}
# unless the tag says otherwise.
for _tags in ARTICLE_TAGS['Maintenance tags'].values():
    for _tag in _tags:
        _tag.setdefault('groupable', True)

FILE_TAGS = {
    'License and sourcing problem tags': [
        {'tag': 'Better source requested',
         'description': 'source info consists of bare image URL/generic base URL only'},
        {'tag': 'Non-free reduce',
         'description': 'non-low-resolution fair use image (or too-long audio clip, etc)'},
        {'tag': 'Orphaned non-free revisions',
         'description': 'fair use media with old revisions that need to be deleted',
         'subst': True,
         'fields': [
             {'name': 'OrphanedNonFreeRevisionsDate', 'type': 'hidden', 'parameter': 'date',
              'value': '{{subst:date}}'},
         ]},
    ],
    'Wikimedia Commons-related tags': [
        {'tag': 'Copy to Commons', 'description': 'free media that should be copied to Commons',
         'fields': [
             {'name': 'CopyToCommonsHuman', 'type': 'hidden', 'parameter': 'human',
              'value': '{{subst:REVISIONUSER}}'},
         ]},
        {'tag': 'Do not move to Commons', 'description': 'file not suitable for moving to Commons',
         'fields': [
             {'name': 'DoNotMoveToCommons_reason', 'type': 'input', 'parameter': 'reason',
              'required': True, 'label': 'Reason: ',
              'tooltip': 'Enter the reason why this image should not be moved to Commons (required)'},
             {'name': 'DoNotMoveToCommons_expiry', 'type': 'input', 'parameter': 'expiry',
              'label': 'Expiration year: ',
              'tooltip': 'If this file can be moved to Commons beginning in a certain year, enter it here'},
         ]},
        {'tag': 'Keep local', 'description': 'request to keep local copy of a Commons file',
         'fields': [
             {'name': 'keeplocalName', 'type': 'input', 'parameter': '1',
              'label': 'Commons image name if different: '},
         ]},
        {'tag': 'Now Commons', 'description': 'file has been copied to Commons',
         'subst': True,
         'fields': [
             {'name': 'nowcommonsName', 'type': 'input', 'parameter': '1',
              'label': 'Commons image name if different: '},
         ]},
    ],
    'Cleanup tags': [
        {'tag': 'Artifacts', 'description': 'PNG contains residual compression artifacts'},
        {'tag': 'Bad font', 'description': 'SVG uses fonts not available on the thumbnail server'},
        {'tag': 'Bad format', 'description': 'PDF/DOC/... file should be converted to a more useful format'},
        {'tag': 'Bad GIF', 'description': 'GIF that should be PNG, JPEG, or SVG'},
        {'tag': 'Bad JPEG', 'description': 'JPEG that should be PNG or SVG'},
        {'tag': 'Bad SVG', 'description': 'SVG containing raster grahpics'},
        {'tag': 'Bad trace', 'description': 'auto-traced SVG requiring cleanup'},
        {'tag': 'Cleanup image', 'description': 'general cleanup',
         'fields': [
             {'name': 'cleanupimageReason', 'type': 'input', 'parameter': '1', 'required': True,
              'label': 'Reason: ', 'tooltip': 'Enter the reason for cleanup (required)'},
         ]},
        {'tag': 'ClearType', 'description': 'image (not screenshot) with ClearType anti-aliasing'},
        {'tag': 'Imagewatermark', 'description': 'image contains visible or invisible watermarking'},
        {'tag': 'NoCoins', 'description': 'image using coins to indicate scale'},
        {'tag': 'Overcompressed JPEG', 'description': 'JPEG with high levels of artifacts'},
        {'tag': 'Opaque', 'description': 'opaque background should be transparent'},
        {'tag': 'Remove border', 'description': 'unneeded border, white space, etc.'},
        {'tag': 'Rename media', 'description': 'file should be renamed according to the criteria at [[WP:FMV]]',
         'fields': [
             {'name': 'renamemediaNewname', 'type': 'input', 'parameter': '1', 'label': 'New name: '},
             {'name': 'renamemediaReason', 'type': 'input', 'parameter': '2', 'label': 'Reason: '},
         ]},
        {'tag': 'Should be PNG', 'description': 'GIF or JPEG should be lossless'},
        {'tag': 'Should be SVG', 'description': 'PNG, GIF or JPEG should be vector graphics',
         'fields': [
             {'name': 'svgCategory', 'type': 'select', 'parameter': '1', 'value': 'other',
              'list': [{'label': value, 'value': value} for value in (
                  'other', 'alphabet', 'chemical', 'circuit', 'coat of arms', 'diagram', 'emblem',
                  'fair use', 'flag', 'graph', 'logo', 'map', 'music', 'physical', 'symbol')]},
         ]},
        {'tag': 'Should be text', 'description': 'image should be represented as text, tables, or math markup'},
    ],
    'Image quality tags': [
        {'tag': 'Image hoax', 'description': 'Image may be manipulated or constitute a hoax',
         'fields': [
             {'name': 'ImageHoaxDate', 'type': 'hidden', 'parameter': 'date', 'value': CURRENT_DATE},
         ]},
        {'tag': 'Image-blownout'},
        {'tag': 'Image-out-of-focus'},
        {'tag': 'Image-Poor-Quality',
         'fields': [
             {'name': 'ImagePoorQualityReason', 'type': 'input', 'parameter': '1', 'required': True,
              'label': 'Reason: ', 'tooltip': 'Enter the reason why this image is so bad (required)'},
         ]},
        {'tag': 'Image-underexposure'},
        {'tag': 'Low quality chem', 'description': 'disputed chemical structures',
         'fields': [
             {'name': 'lowQualityChemReason', 'type': 'input', 'parameter': '1', 'required': True,
              'label': 'Reason: ', 'tooltip': 'Enter the reason why the diagram is disputed (required)'},
         ]},
    ],
    'Replacement tags': [
        {'tag': 'Obsolete', 'description': 'improved version available'},
        {'tag': 'PNG version available'},
        {'tag': 'Vector version available'},
    ],
}

# Every replacement tag names the file that replaces this one.
for _tag in FILE_TAGS['Replacement tags']:
    _tag['fields'] = [
        {'name': _tag['tag'].replace(' ', '_') + 'File', 'type': 'input', 'parameter': '1',
         'required': True, 'label': 'Replacement file: ',
         'tooltip': 'Enter the name of the file which replaces this one (required)'},
    ]

# Tags of which at most one may be selected at a time.
ARTICLE_EXCLUSIVE_SETS = [
    ['Merge', 'Merge from', 'Merge to'],
    ['Not English', 'Rough translation'],
]

FILE_EXCLUSIVE_SETS = [
    ['Bad GIF', 'Bad JPEG', 'Bad SVG', 'Bad format'],
    ['Should be PNG', 'Should be SVG', 'Should be text'],
    ['Bad SVG', 'Vector version available'],
    ['Bad JPEG', 'Overcompressed JPEG'],
    ['PNG version available', 'Vector version available'],
]

# Tags that always go to the bottom of an article instead of the top.
ARTICLE_DEFERRED_TAGS = ['Uncategorized', 'Improve categories']

# Defines the templates that may appear above the maintenance tags, in
# layout order. Entries are regex fragments matched case-insensitively.
HATNOTE_TEMPLATES = [
    # Before hatnotes
    'short description',
    'DISPLAYTITLE',
    'lowercase title',
    'italic title',
    # Hatnotes
    'hatnote',
    'main',
    'correct title',
    'dablink',
    'distinguish',
    'for',
    'further',
    'selfref',
    'self-reference',
    'year dab',
    'about year',
    'similar names',
    'highway detail hatnote',
    'broader',
    'about(?:-distinguish| other people)?',
    'other\\s?(?:storms|hurricane(?: use)?s|people|persons|places|ships|uses(?: of)?)',
    'redirect(?:-(?:distinguish|synonym|multi))?',
    'see\\s?(?:wiktionary|also(?: if exists)?)',
]

PROTECTION_TEMPLATES = ['pp', 'pp-.*?']

SPEEDY_DELETION_TEMPLATES = ['db', 'delete', 'db-.*?', 'speedy deletion-.*?']

# PROD notices span several "|key=value" lines.
PROPOSED_DELETION_TEMPLATES = [
    '(?:proposed deletion|prod blp)\\/dated(?:\\s*\\|(?:concern|user|timestamp|help).*)+',
    # not a hatnote, but sometimes under a CSD or PROD
    'salt',
    'proposed deletion endorsed',
]

# An AfD notice is wrapped in HTML comments, with the actual template
# between them.
AFD_NOTICE = (
    '<!--.*AfD.*\\n\\{\\{(?:Article for deletion\\/dated|AfDM).*\\}\\}\\n'
    '<!--.*(?:\\n<!--.*)?AfD.*(?:[ \\t]*\\n)?'
)

# Language-specific messages for generating edit summaries.
# Falls back to 'en' if the site language is not defined here.
SUMMARY_MESSAGES = {
    'en': {
        'bot_prefix': 'Bot: ',
        'adding': 'Adding',
        'removing': 'Removing',
        'tag': 'tag',
        'tags': 'tags',
        'and': ' and ',
        'comma_separator': ', ',
        'separator': '; ',
        'template_ns': 'Template',
    },
    'ckb': {
        'bot_prefix': 'بۆت: ',
        'adding': 'زیادکردنی',
        'removing': 'لابردنی',
        'tag': 'تاگی',
        'tags': 'تاگەکانی',
        'and': ' و ',
        'comma_separator': '، ',
        'separator': '؛ ',
        'template_ns': 'داڕێژە',
    },
}
