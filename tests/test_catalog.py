"""Tests for tag_catalog: loading, lookups and custom tags."""

import pytest

from tag_catalog import (
    CHECKBOX, CUSTOM_CATEGORY, HIDDEN, TagCatalog, make_definition,
)
from tag_data import ARTICLE_TAGS, FILE_TAGS, REDIRECT_TAGS
from tag_errors import ConfigurationError


class TestLoad:
    """Tests for building catalogs from the tag tables."""

    def test_nested_table(self):
        catalog = TagCatalog.load(ARTICLE_TAGS)
        definition = catalog.resolve('Unreferenced')
        assert definition.category == 'Maintenance tags'
        assert definition.subcategory == 'Sources'
        assert 'Sources' in catalog.categories['Maintenance tags']

    def test_flat_table(self):
        catalog = TagCatalog.load(FILE_TAGS)
        definition = catalog.resolve('Artifacts')
        assert definition.category == 'Cleanup tags'
        assert definition.subcategory == ''

    def test_every_builtin_catalog_loads(self):
        for table in (ARTICLE_TAGS, FILE_TAGS, REDIRECT_TAGS):
            assert len(TagCatalog.load(table)) > 0

    def test_unknown_tag_resolves_to_none(self):
        catalog = TagCatalog.load(ARTICLE_TAGS)
        assert catalog.resolve('No such tag') is None
        assert 'No such tag' not in catalog

    def test_duplicate_name_rejected(self):
        table = {'A': [{'tag': 'Foo'}], 'B': [{'tag': 'Foo'}]}
        with pytest.raises(ConfigurationError, match='Duplicate tag'):
            TagCatalog.load(table)

    def test_malformed_group_rejected(self):
        with pytest.raises(ConfigurationError):
            TagCatalog.load({'A': 'Foo'})

    def test_entry_without_name_rejected(self):
        with pytest.raises(ConfigurationError):
            TagCatalog.load({'A': [{'description': 'no tag name'}]})


class TestDefinitions:
    """Tests for tag definitions and their fields."""

    def test_fields_keep_declared_order(self):
        catalog = TagCatalog.load(ARTICLE_TAGS)
        fields = catalog.resolve('Merge').fields
        assert [field.name for field in fields] == ['mergeTarget', 'mergeTagOther', 'mergeReason']
        assert fields[0].required
        assert fields[0].positional
        assert fields[1].kind == CHECKBOX

    def test_hidden_field_constant(self):
        catalog = TagCatalog.load(FILE_TAGS)
        field = catalog.resolve('Copy to Commons').fields[0]
        assert field.kind == HIDDEN
        assert field.value == '{{subst:REVISIONUSER}}'

    def test_hidden_field_without_value_rejected(self):
        entry = {'tag': 'Foo', 'fields': [{'name': 'x', 'type': 'hidden', 'parameter': 'x'}]}
        with pytest.raises(ConfigurationError, match='has no value'):
            make_definition(entry)

    def test_unknown_field_kind_rejected(self):
        entry = {'tag': 'Foo', 'fields': [{'name': 'x', 'type': 'slider'}]}
        with pytest.raises(ConfigurationError):
            make_definition(entry)

    def test_duplicate_parameter_keys_rejected(self):
        entry = {'tag': 'Foo', 'fields': [
            {'name': 'a', 'parameter': '1'},
            {'name': 'b', 'parameter': '1'},
        ]}
        with pytest.raises(ConfigurationError, match='Duplicate parameter'):
            make_definition(entry)

    def test_select_choices(self):
        catalog = TagCatalog.load(FILE_TAGS)
        field = catalog.resolve('Should be SVG').fields[0]
        assert field.value == 'other'
        assert 'diagram' in field.choices

    def test_replacement_tags_require_a_file(self):
        catalog = TagCatalog.load(FILE_TAGS)
        for tag in ('Obsolete', 'PNG version available', 'Vector version available'):
            field = catalog.resolve(tag).fields[0]
            assert field.required
            assert field.parameter == '1'


class TestGroupable:
    """Tests for the groupable flag and its mode default."""

    def test_explicit_flags(self):
        catalog = TagCatalog.load(ARTICLE_TAGS)
        assert catalog.is_groupable('Unreferenced', False) is True
        assert catalog.is_groupable('Current', True) is False
        assert catalog.is_groupable('Merge', True) is False
        assert catalog.is_groupable('Not English', True) is False

    def test_mode_default_for_unflagged_and_unknown_tags(self):
        catalog = TagCatalog.load(REDIRECT_TAGS)
        assert catalog.is_groupable('R from move', True) is True
        assert catalog.is_groupable('R from move', False) is False
        assert catalog.is_groupable('Not in catalog', True) is True

    def test_dupe_allowed_defaults_to_false(self):
        catalog = TagCatalog.load(ARTICLE_TAGS)
        assert catalog.dupe_allowed('Unreferenced') is False
        assert catalog.dupe_allowed('Not in catalog') is False


class TestCustomTags:
    """Tests for user supplied tags."""

    def test_entry_forms(self):
        catalog = TagCatalog.load(FILE_TAGS, [
            'Plain custom',
            ('Paired custom', 'with a description'),
            {'value': 'Preference custom', 'label': 'from preferences'},
            {'tag': 'Full custom', 'groupable': True},
        ])
        group = catalog.categories[CUSTOM_CATEGORY]['']
        assert [definition.name for definition in group] == [
            'Plain custom', 'Paired custom', 'Preference custom', 'Full custom']
        assert catalog.resolve('Paired custom').description == 'with a description'
        assert catalog.resolve('Preference custom').description == 'from preferences'
        assert catalog.resolve('Full custom').groupable is True
        assert catalog.resolve('Plain custom').groupable is None

    def test_custom_tag_may_not_shadow_builtin(self):
        with pytest.raises(ConfigurationError, match='Duplicate tag'):
            TagCatalog.load(ARTICLE_TAGS, ['Unreferenced'])

    def test_malformed_custom_entry(self):
        with pytest.raises(ConfigurationError):
            TagCatalog.load(ARTICLE_TAGS, [42])
