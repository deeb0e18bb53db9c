"""Tests for tag_modes and tag_validation."""

import datetime

import pytest

from tag_catalog import TagCatalog
from tag_config import TagConfig, split_list
from tag_engine import TaggingRequest
from tag_errors import ConfigurationError, MissingRequiredField, ValidationError
from tag_modes import (
    ARTICLE_MODE, FILE_MODE, REDIRECT_MODE, PageInfo, merge_discussion,
    normalize_merge_target, select_mode,
)
from tag_validation import validate_request

TODAY = datetime.date(2026, 10, 19)


def validate(mode, page, tags, values=None, remove=(), config=None):
    config = config or TagConfig()
    request = TaggingRequest(tags=list(tags), values=values or {}, tags_to_remove=list(remove))
    validate_request(request, mode, config.catalog(mode), page, TODAY)


class TestPageInfo:

    def test_title_without_namespace(self):
        assert PageInfo('File:Foo.png', namespace=6).title_without_ns == 'Foo.png'
        assert PageInfo('Foo: a story').title_without_ns == 'Foo: a story'

    def test_extension_from_mime_type(self):
        page = PageInfo('File:Foo.png', namespace=6, mime_type='image/svg+xml')
        assert page.extension == 'svg'

    def test_extension_from_title(self):
        assert PageInfo('File:Foo.Bar.jpg', namespace=6).extension == 'jpg'


class TestSelectMode:
    """Tests for picking the mode of a page."""

    def test_redirect_wins_over_article(self):
        page = PageInfo('Foo', namespace=0, is_redirect=True)
        assert select_mode(page) is REDIRECT_MODE

    @pytest.mark.parametrize('namespace', [0, 2, 118])
    def test_article_namespaces(self, namespace):
        assert select_mode(PageInfo('Foo', namespace=namespace)) is ARTICLE_MODE

    def test_missing_article(self):
        assert select_mode(PageInfo('Foo', exists=False)) is None

    def test_local_file(self):
        assert select_mode(PageInfo('File:Foo.png', namespace=6)) is FILE_MODE

    def test_shared_file(self):
        assert select_mode(PageInfo('File:Foo.png', namespace=6, shared=True)) is None

    def test_other_namespace(self):
        assert select_mode(PageInfo('Wikipedia:Foo', namespace=4)) is None

    def test_custom_mode_order(self):
        page = PageInfo('Foo', is_redirect=True)
        assert select_mode(page, (ARTICLE_MODE, REDIRECT_MODE)) is ARTICLE_MODE


class TestModePolicies:

    def test_container_templates(self):
        assert REDIRECT_MODE.group_template == 'Redirect category shell'
        assert REDIRECT_MODE.group_min_size == 1
        assert ARTICLE_MODE.group_template == 'Multiple issues'
        assert ARTICLE_MODE.group_min_size == 2
        assert FILE_MODE.container_re is None

    @pytest.mark.parametrize('text', [
        '{{Redirect category shell|\n{{R from move}}\n}}',
        '{{Rcat shell|{{R from move}}}}',
        '{{Redr|{{R from move}}}}',
    ])
    def test_redirect_container_names(self, text):
        assert REDIRECT_MODE.container_present(text)

    def test_userspace_draft_removed(self):
        request = TaggingRequest(tags=['Advert'])
        text = '{{Userspace draft|date=May 2020}}\nBody'
        assert ARTICLE_MODE.initial_cleanup(text, request) == 'Body'


class TestMergeParameters:
    """Tests for the parameters of merge tags."""

    def test_normalize_target(self):
        assert normalize_merge_target(' foo_bar ') == 'Foo bar'

    def test_discussion_on_the_other_article(self):
        discussion = merge_discussion('Merge to', {'mergeTarget': 'Bar', 'mergeReason': 'x'},
                                      PageInfo('Foo'))
        assert discussion.discuss_article == 'Bar'
        assert discussion.title_linked == 'Proposed merge of [[Foo]] into [[Bar]]'
        assert discussion.link == 'Talk:Bar#Proposed merge of Foo into Bar'

    def test_discussion_on_this_article(self):
        discussion = merge_discussion('Merge', {'mergeTarget': 'Bar', 'mergeReason': 'x'},
                                      PageInfo('Foo'))
        assert discussion.discuss_article == 'Foo'
        assert discussion.title == 'Proposed merge of Bar with Foo'

    def test_no_discussion_without_reason_or_outside_articles(self):
        assert merge_discussion('Merge', {'mergeTarget': 'Bar'}, PageInfo('Foo')) is None
        values = {'mergeTarget': 'Bar', 'mergeReason': 'x'}
        assert merge_discussion('Merge', values, PageInfo('User:Me/Foo', namespace=2)) is None

    def test_preprocess(self):
        request = TaggingRequest(tags=['Merge from'],
                                 values={'mergeTarget': 'bar', 'mergeReason': 'x'})
        values, extra = ARTICLE_MODE.preprocess(request, PageInfo('Foo'))
        assert values['mergeTarget'] == 'Bar'
        assert extra == {'Merge from': {'discuss': 'Talk:Foo#Proposed merge of Bar into Foo'}}
        assert request.values['mergeTarget'] == 'bar'


class TestValidation:
    """Tests for the checks run before any change."""

    def test_exclusive_article_tags(self):
        with pytest.raises(ValidationError, match=r'\{\{Merge\}\}, \{\{Merge from\}\}'):
            validate(ARTICLE_MODE, PageInfo('Foo'), ['Merge', 'Merge to'],
                     {'mergeTarget': 'Bar'})

    def test_exclusive_file_tags(self):
        with pytest.raises(ValidationError, match='Please select only one of'):
            validate(FILE_MODE, PageInfo('File:Foo.png', namespace=6),
                     ['Should be SVG', 'Should be text'])

    def test_missing_required_field(self):
        with pytest.raises(MissingRequiredField):
            validate(ARTICLE_MODE, PageInfo('Foo'), ['Merge'])

    def test_required_field_with_default(self):
        config = TagConfig(custom_tags={'file': [{'tag': 'Custom', 'fields': [
            {'name': 'customKind', 'parameter': '1', 'required': True, 'value': 'other'},
        ]}]})
        validate(FILE_MODE, PageInfo('File:Foo.png', namespace=6), ['Custom'], config=config)

    def test_removal_not_supported(self):
        with pytest.raises(ValidationError, match='Removing tags'):
            validate(FILE_MODE, PageInfo('File:Foo.png', namespace=6), [], remove=['Artifacts'])

    def test_multiple_merge_targets_with_reason(self):
        with pytest.raises(ValidationError, match='multiple articles'):
            validate(ARTICLE_MODE, PageInfo('Foo'), ['Merge'],
                     {'mergeTarget': 'Bar|Baz', 'mergeReason': 'Overlap'})

    def test_multiple_merge_targets_alone(self):
        validate(ARTICLE_MODE, PageInfo('Foo'), ['Merge'], {'mergeTarget': 'Bar|Baz'})

    @pytest.mark.parametrize('title, tags, message', [
        ('File:Foo.png', ['Bad JPEG'], r'PNG file, so \{\{Bad JPEG\}\} is inappropriate'),
        ('File:Foo.gif', ['Bad JPEG'], r'please use \{\{Bad GIF\}\} instead'),
        ('File:Foo.png', ['Should be PNG'], 'already a PNG file'),
        ('File:Foo.png', ['Overcompressed JPEG'], "probably doesn't apply"),
        ('File:Foo.png', ['Bad trace'], r"\{\{Bad trace\}\} probably doesn't apply"),
    ])
    def test_file_type_checks(self, title, tags, message):
        with pytest.raises(ValidationError, match=message):
            validate(FILE_MODE, PageInfo(title, namespace=6), tags)

    def test_jpg_counts_as_jpeg(self):
        validate(FILE_MODE, PageInfo('File:Foo.jpg', namespace=6), ['Bad JPEG', 'Should be PNG'])

    def test_mime_type_beats_title(self):
        page = PageInfo('File:Foo.png', namespace=6, mime_type='image/svg+xml')
        validate(FILE_MODE, page, ['Bad font'])

    @pytest.mark.parametrize('expiry, valid', [
        ('2030', True),
        ('', True),
        ('2026', False),
        ('1999', False),
        ('next year', False),
    ])
    def test_do_not_move_to_commons_expiry(self, expiry, valid):
        values = {'DoNotMoveToCommons_reason': 'local logo', 'DoNotMoveToCommons_expiry': expiry}
        page = PageInfo('File:Foo.png', namespace=6)
        if valid:
            validate(FILE_MODE, page, ['Do not move to Commons'], values)
        else:
            with pytest.raises(ValidationError, match='valid future year'):
                validate(FILE_MODE, page, ['Do not move to Commons'], values)


class TestTagConfig:
    """Tests for the run configuration."""

    def test_split_list(self):
        assert split_list(' Advert, POV ,,') == ['Advert', 'POV']
        assert split_list(None) == []
        assert split_list(['A', ' ']) == ['A']

    def test_from_options(self):
        config = TagConfig.from_options({'custom': 'My tag', 'customfile': ''},
                                        timestamp='May 2020')
        assert 'My tag' in config.catalog(ARTICLE_MODE)
        assert 'My tag' not in config.catalog(FILE_MODE)
        assert config.timestamp == 'May 2020'

    def test_custom_tags_for_unknown_mode(self):
        with pytest.raises(ConfigurationError, match='unknown modes'):
            TagConfig(custom_tags={'portal': ['Foo']})

    def test_duplicate_mode_names(self):
        with pytest.raises(ConfigurationError, match='Duplicate mode'):
            TagConfig(modes=(ARTICLE_MODE, ARTICLE_MODE))

    def test_catalogs_are_independent(self):
        first = TagConfig(custom_tags={'article': ['Only here']})
        second = TagConfig()
        assert 'Only here' in first.catalog(ARTICLE_MODE)
        assert 'Only here' not in second.catalog(ARTICLE_MODE)
        assert isinstance(second.catalog(ARTICLE_MODE), TagCatalog)

    def test_summary_messages_fall_back_to_english(self):
        assert TagConfig(language='ckb').summary_messages()['template_ns'] == 'داڕێژە'
        assert TagConfig(language='xx').summary_messages()['template_ns'] == 'Template'
