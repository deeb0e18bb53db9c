"""
Parameter renderer: turn a tag definition and form values into wikitext.
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

from tag_catalog import CHECKBOX, HIDDEN, TagDefinition
from tag_data import CURRENT_DATE
from tag_errors import MissingRequiredField


def _field_value(field, values):
    """Return the rendered value of a field, or '' if there is none."""
    if field.kind == HIDDEN:
        return field.value or ''

    value = values.get(field.name)
    if field.kind == CHECKBOX:
        if isinstance(value, (list, tuple)):
            value = ', '.join(str(item) for item in value if item)
        elif isinstance(value, bool):
            value = 'yes' if value else ''
    if value is None or not str(value).strip():
        value = field.value or ''
    return str(value).strip()


def parameter_text(definition: TagDefinition, values=None, extra_params=None,
                   timestamp: str | None = None) -> str:
    """Return the ``|key=value`` part of a tag.

    Fields are emitted in their declared order; fields without a template
    parameter (form-only fields) and fields without a value are left out.
    A positional parameter is written without its key when it directly
    follows the previous positional parameter.

    :param extra_params: parameters added by the tagging mode, appended
        after the declared fields
    :param timestamp: text replacing the current month/year placeholder
    :raises MissingRequiredField: a required field has no value
    """
    values = values or {}
    params = []
    for field in definition.fields:
        if not field.parameter:
            continue
        value = _field_value(field, values)
        if field.required and not value:
            raise MissingRequiredField(definition.name, field.name, field.label)
        if value:
            params.append((field.parameter, value))

    declared = {key for key, _ in params}
    for key, value in (extra_params or {}).items():
        if key not in declared and value:
            params.append((str(key), str(value)))

    text = ''
    next_positional = 1
    for key, value in params:
        if timestamp and CURRENT_DATE in value:
            value = value.replace(CURRENT_DATE, timestamp)
        if key == str(next_positional) and '=' not in value:
            text += f'|{value}'
            next_positional += 1
        else:
            text += f'|{key}={value}'
    return text


def render_tag(definition: TagDefinition, values=None, extra_params=None,
               timestamp: str | None = None) -> str:
    """Return the wikitext of a tag, e.g. ``{{Name|key1=val1|key2=val2}}``."""
    prefix = 'subst:' if definition.subst else ''
    params = parameter_text(definition, values, extra_params, timestamp)
    return f'{{{{{prefix}{definition.name}{params}}}}}'
