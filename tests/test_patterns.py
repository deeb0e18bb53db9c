"""Tests for tag_patterns: detection, containers and insertion points."""

import pytest

from tag_modes import ARTICLE_LEADING_RE, ARTICLE_MODE
from tag_patterns import (
    count_members, find_insertion_point, insert_tag_text, tag_block_regex,
    tag_regex, template_end, template_name_pattern, template_spans,
)


class TestTagRegex:
    """Tests for the detection pattern of a tag."""

    @pytest.mark.parametrize('text', [
        '{{More citations needed}}',
        '{{more citations needed|date=May 2020}}',
        '{{More_citations needed|date=May 2020}}',
        '{{ Template:More citations needed }}',
        '{{subst:More citations needed}}',
    ])
    def test_matches(self, text):
        assert tag_regex('More citations needed').search(text)

    @pytest.mark.parametrize('text', [
        '{{More citations needed for you}}',
        '{{BLP more citations needed}}',
        'More citations needed',
    ])
    def test_does_not_match(self, text):
        assert not tag_regex('More citations needed').search(text)

    def test_prefix_of_other_tag_not_matched(self):
        assert not tag_regex('Merge').search('{{Merge to|Foo}}')

    def test_aliases(self):
        regex = tag_regex('Advert', ['Advertisement', 'Ad'])
        assert regex.search('{{Advertisement|date=May 2020}}')
        assert regex.search('{{ad}}')

    def test_invalid_name(self):
        with pytest.raises(ValueError):
            template_name_pattern('  ')


class TestTagBlockRegex:
    """Tests for the whole-template pattern used when splicing tags."""

    def test_nested_templates_and_newline(self):
        text = 'A\n{{Advert|date={{subst:CURRENTYEAR}}}}\nB'
        match = tag_block_regex('Advert').search(text)
        assert match.group(0) == '{{Advert|date={{subst:CURRENTYEAR}}}}\n'

    def test_removal_leaves_surroundings(self):
        text = '{{POV|date=May 2020}}\n{{Advert}}\nBody'
        assert tag_block_regex('POV').sub('', text) == '{{Advert}}\nBody'


class TestContainers:
    """Tests for the three parts of a container template."""

    def test_parts(self):
        text = ('{{Multiple issues|collapsed=yes|\n{{Advert|date=May 2020}}\n'
                '{{POV|date=May 2020}}\n}}\nBody')
        container = ARTICLE_MODE.find_container(text)
        assert container.opening.rstrip() == '{{Multiple issues|collapsed=yes|'
        assert count_members(container.members) == 2
        assert container.closing == '}}'
        assert text[container.end:] == '\nBody'

    def test_explicit_first_parameter(self):
        text = '{{multiple issues|1=\n{{Advert}}\n{{POV}}\n}}'
        container = ARTICLE_MODE.find_container(text)
        assert container.opening.rstrip() == '{{multiple issues|1='
        assert count_members(container.members) == 2

    def test_named_parameter_after_the_tags(self):
        text = '{{Multiple issues|\n{{Advert}}\n{{POV}}\n|collapsed=yes}}'
        container = ARTICLE_MODE.find_container(text)
        assert container.closing == '|collapsed=yes}}'
        assert count_members(container.members) == 2

    def test_comments_are_not_members(self):
        text = '{{Multiple issues|\n<!-- note -->\n{{Advert}}\n}}'
        container = ARTICLE_MODE.find_container(text)
        assert count_members(container.members) == 1

    def test_plain_text_inside(self):
        text = ('{{Multiple issues|\n{{Unreferenced|date=May 2020}}\nnote\n'
                '{{Advert|date={{date}}}}\n}}\nBody.\n')
        container = ARTICLE_MODE.find_container(text)
        assert container.start == 0
        assert text[container.end:] == '\nBody.\n'
        assert 'note' in container.members
        assert count_members(container.members) == 2

    def test_empty_container(self):
        container = ARTICLE_MODE.find_container('{{Multiple issues}}\nBody')
        assert (container.members, container.closing) == ('', '}}')

    def test_every_container_found(self):
        text = '{{Multiple issues|\n{{Advert}}\n}}\nA\n{{MI|\n{{POV}}\n}}\nB'
        assert len(ARTICLE_MODE.find_containers(text)) == 2

    def test_unterminated_container_ignored(self):
        assert not ARTICLE_MODE.container_present('{{Multiple issues|\n{{Advert}}\nBody')

    def test_section_variant_ignored(self):
        text = '{{Multiple issues|section=yes|\n{{Advert}}\n{{POV}}\n}}'
        assert not ARTICLE_MODE.container_present(text)

    def test_longer_name_ignored(self):
        assert not ARTICLE_MODE.container_present('{{Multiple issues box|\n{{Advert}}\n}}')


class TestTemplateSpans:

    def test_template_end(self):
        text = 'A {{Foo|{{bar|x}}|y}} B'
        assert text[:template_end(text, 2)] == 'A {{Foo|{{bar|x}}|y}}'

    def test_template_end_unterminated(self):
        assert template_end('{{Foo|{{bar}}', 0) is None

    def test_outermost_spans(self):
        text = '{{A|{{B}}}} text {{C}} }}'
        assert template_spans(text) == [(0, 11), (17, 22)]


class TestInsertionPoint:
    """Tests for placing tags below the leading templates."""

    def test_no_leading_templates(self):
        assert find_insertion_point('Body text', ARTICLE_LEADING_RE) == 0

    def test_after_hatnotes(self):
        text = '{{Short description|A fruit}}\n{{About|the fruit}}\nBody'
        offset = find_insertion_point(text, ARTICLE_LEADING_RE)
        assert text[offset:] == 'Body'

    def test_stops_at_other_templates(self):
        text = '{{About|x}}\n{{Infobox fruit|name=Apple}}\n{{For|y}}\nBody'
        offset = find_insertion_point(text, ARTICLE_LEADING_RE)
        assert text[offset:].startswith('{{Infobox fruit')

    def test_protection_and_deletion_notices(self):
        text = '{{pp-semi|small=yes}}\n{{db-spam}}\nBody'
        offset = find_insertion_point(text, ARTICLE_LEADING_RE)
        assert text[offset:] == 'Body'

    def test_insert_keeps_the_rest_verbatim(self):
        text = '{{About|x}}\n\n  Body with {{cite web|url=a}}\n'
        result = insert_tag_text('{{Advert}}', text, ARTICLE_LEADING_RE)
        assert result == '{{About|x}}\n{{Advert}}\n\n  Body with {{cite web|url=a}}\n'

    def test_insert_after_template_without_newline(self):
        result = insert_tag_text('{{Advert}}\n', '{{About|x}}', ARTICLE_LEADING_RE)
        assert result == '{{About|x}}\n{{Advert}}\n'

    def test_insert_nothing(self):
        assert insert_tag_text('', 'Body', ARTICLE_LEADING_RE) == 'Body'
