"""
Exceptions raised while placing maintenance tags.
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

from pywikibot.exceptions import Error


class TagError(Error):

    """Base class for all tagging errors."""


class ConfigurationError(TagError):

    """The tag catalog or the mode list is malformed.

    Raised while the configuration is being built, before any page text
    is touched.
    """


class ValidationError(TagError):

    """The tagging request cannot be applied as it stands."""


class MissingRequiredField(ValidationError):

    """A required parameter of a selected tag has no value."""

    def __init__(self, tag: str, field: str, label: str = '') -> None:
        self.tag = tag
        self.field = field
        what = label.strip().rstrip(':') or field
        super().__init__(f'{{{{{tag}}}}}: a value for "{what}" is required.')


class StructuralMismatch(TagError):

    """An expected template could not be found in the page text."""

    def __init__(self, tag: str, message: str = '') -> None:
        self.tag = tag
        super().__init__(
            message or f'Unable to find {{{{{tag}}}}} in the page text')
