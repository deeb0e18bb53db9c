"""
Tag catalog: the maintenance tags a tagging mode knows about.

A catalog is loaded from the nested tables in `tag_data.py`
({category: {subcategory: [tag, ...]}} or {category: [tag, ...]}) and
flattened into a name -> TagDefinition index. User supplied custom tags
are appended as one extra category.

Custom tags may not reuse the name of a built-in tag: any duplicate name
in the flattened index is a ConfigurationError.
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

from dataclasses import dataclass, field

from tag_errors import ConfigurationError

INPUT = 'input'
SELECT = 'select'
CHECKBOX = 'checkbox'
HIDDEN = 'hidden'
TEXTAREA = 'textarea'

FIELD_KINDS = (INPUT, SELECT, CHECKBOX, HIDDEN, TEXTAREA)

CUSTOM_CATEGORY = 'Custom tags'


@dataclass(frozen=True)
class FieldSpec:

    """A single parameter input of a tag."""

    name: str
    kind: str = INPUT
    parameter: str | None = None
    value: str | None = None
    required: bool = False
    label: str = ''
    tooltip: str = ''
    choices: tuple[str, ...] = ()

    @property
    def positional(self) -> bool:
        """Whether the template parameter is an unnamed (numbered) one."""
        return bool(self.parameter) and self.parameter.isdigit()


@dataclass(frozen=True)
class TagDefinition:

    """A maintenance tag template and its parameters."""

    name: str
    description: str = ''
    fields: tuple[FieldSpec, ...] = ()
    groupable: bool | None = None
    dupe_allowed: bool = False
    subst: bool = False
    category: str = ''
    subcategory: str = ''


@dataclass
class TagCatalog:

    """Categorised tag definitions plus the flat name index."""

    categories: dict = field(default_factory=dict)
    flat: dict[str, TagDefinition] = field(default_factory=dict)

    @classmethod
    def load(cls, tag_list: dict, custom=()) -> TagCatalog:
        """Build a catalog from built-in tables and custom tag entries.

        Custom entries are template names, (name, description) pairs or
        dicts in the built-in tag format.
        """
        catalog = cls()
        for category, content in tag_list.items():
            if isinstance(content, dict):
                for subcategory, tags in content.items():
                    catalog._add_group(category, subcategory, tags)
            else:
                catalog._add_group(category, '', content)

        custom_tags = [_custom_entry(entry) for entry in custom]
        if custom_tags:
            catalog._add_group(CUSTOM_CATEGORY, '', custom_tags)
        return catalog

    def _add_group(self, category: str, subcategory: str, tags) -> None:
        if not isinstance(tags, (list, tuple)):
            raise ConfigurationError(
                f'Malformed tag list in "{category}": expected a list of tags')
        group = self.categories.setdefault(category, {}).setdefault(subcategory, [])
        for entry in tags:
            definition = make_definition(entry, category, subcategory)
            if definition.name in self.flat:
                previous = self.flat[definition.name]
                raise ConfigurationError(
                    f'Duplicate tag {{{{{definition.name}}}}} in "{category}", '
                    f'already defined in "{previous.category}"')
            self.flat[definition.name] = definition
            group.append(definition)

    def resolve(self, name: str) -> TagDefinition | None:
        """Return the definition of a tag, or None for unknown tags."""
        return self.flat.get(name)

    def is_groupable(self, name: str, mode_default: bool) -> bool:
        """Return the explicit groupable flag of a tag or the mode default."""
        definition = self.flat.get(name)
        if definition is None or definition.groupable is None:
            return mode_default
        return definition.groupable

    def dupe_allowed(self, name: str) -> bool:
        definition = self.flat.get(name)
        return bool(definition and definition.dupe_allowed)

    def __contains__(self, name: str) -> bool:
        return name in self.flat

    def __len__(self) -> int:
        return len(self.flat)


def make_definition(entry: dict, category: str = '', subcategory: str = '') -> TagDefinition:
    """Convert a tag table entry into a TagDefinition."""
    if not isinstance(entry, dict) or not str(entry.get('tag', '')).strip():
        raise ConfigurationError(f'Malformed tag entry in "{category}": {entry!r}')

    name = entry['tag'].strip()
    fields = tuple(_make_field(name, spec) for spec in entry.get('fields', ()))

    parameters = [spec.parameter for spec in fields if spec.parameter]
    if len(parameters) != len(set(parameters)):
        raise ConfigurationError(f'Duplicate parameter keys in {{{{{name}}}}}')

    groupable = entry.get('groupable')
    if groupable is not None:
        groupable = bool(groupable)

    return TagDefinition(
        name=name,
        description=entry.get('description', ''),
        fields=fields,
        groupable=groupable,
        dupe_allowed=bool(entry.get('dupe_allowed', False)),
        subst=bool(entry.get('subst', False)),
        category=category,
        subcategory=subcategory,
    )


def _make_field(tag: str, spec: dict) -> FieldSpec:
    kind = spec.get('type', INPUT)
    if kind not in FIELD_KINDS or not spec.get('name'):
        raise ConfigurationError(f'Malformed field of {{{{{tag}}}}}: {spec!r}')
    if kind == HIDDEN and spec.get('value') is None:
        raise ConfigurationError(
            f'Hidden field "{spec["name"]}" of {{{{{tag}}}}} has no value')

    parameter = spec.get('parameter')
    return FieldSpec(
        name=spec['name'],
        kind=kind,
        parameter=str(parameter) if parameter is not None else None,
        value=spec.get('value'),
        required=bool(spec.get('required', False)),
        label=spec.get('label', ''),
        tooltip=spec.get('tooltip', ''),
        choices=tuple(item['value'] for item in spec.get('list', ())),
    )


def _custom_entry(entry) -> dict:
    """Normalize a custom tag entry to the built-in dict format."""
    if isinstance(entry, str):
        return {'tag': entry, 'description': ''}
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return {'tag': entry[0], 'description': entry[1]}
    if isinstance(entry, dict):
        # Preference entries use value/label, like the tag dialog
        if 'value' in entry and 'tag' not in entry:
            return {'tag': entry['value'], 'description': entry.get('label', '')}
        return entry
    raise ConfigurationError(f'Malformed custom tag entry: {entry!r}')
