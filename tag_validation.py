"""
Pre-flight checks of a tagging request.

Validation only looks at the request and the page identity, never at the
page text, and runs before anything is changed.
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

import datetime

from tag_catalog import HIDDEN, TagCatalog
from tag_errors import MissingRequiredField, ValidationError


def validate_request(request, mode, catalog: TagCatalog, page,
                     today: datetime.date | None = None) -> None:
    """Check a tagging request against the rules of a mode.

    :raises ValidationError: the request cannot be applied; the message
        describes the problem
    """
    tags = request.tags

    # Given an array of incompatible tags, check if we have two or more selected
    for exclusive in mode.exclusive_sets:
        if len([tag for tag in exclusive if tag in tags]) > 1:
            raise ValidationError(
                'Please select only one of: {{' + '}}, {{'.join(exclusive) + '}}.')

    if request.tags_to_remove and not mode.removal_supported:
        raise ValidationError(f'Removing tags is not supported on {mode.name} pages.')

    for tag in tags:
        definition = catalog.resolve(tag)
        if definition is None:
            continue
        for field in definition.fields:
            if not field.required or field.kind == HIDDEN:
                continue
            value = request.values.get(field.name)
            if (value is None or not str(value).strip()) and not field.value:
                raise MissingRequiredField(tag, field.name, field.label)

    if mode.validate:
        message = mode.validate(request, page, today or datetime.date.today())
        if message:
            raise ValidationError(message)
