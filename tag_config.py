"""
Configuration of a tagging run.

The configuration is an explicit object handed to the engine, so several
documents (or tests) can be processed with independent settings. All
catalogs are built when the configuration is created: a malformed catalog
or a duplicate tag name fails here, before any page is edited.
"""
#
# (C) Pywikibot team, 2025
#
# Distributed under the terms of the MIT license.
#
from __future__ import annotations

from dataclasses import dataclass, field

from tag_catalog import TagCatalog
from tag_data import SUMMARY_MESSAGES
from tag_errors import ConfigurationError
from tag_modes import MODES


def split_list(value) -> list[str]:
    """Split a comma separated option value."""
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(',')
    return [item.strip() for item in value if item and item.strip()]


@dataclass
class TagConfig:

    """Settings shared by all pages of a run."""

    modes: tuple = MODES
    custom_tags: dict = field(default_factory=dict)  # mode name -> custom entries
    group_by_default: bool = True
    timestamp: str | None = None  # replaces the current month/year placeholder
    language: str = 'en'
    template_redirects: dict = field(default_factory=dict)  # tag -> redirect titles
    catalogs: dict = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        names = [mode.name for mode in self.modes]
        if len(names) != len(set(names)):
            raise ConfigurationError(f'Duplicate mode names: {names}')

        unknown = set(self.custom_tags) - set(names)
        if unknown:
            raise ConfigurationError(
                f'Custom tags given for unknown modes: {", ".join(sorted(unknown))}')

        for mode in self.modes:
            self.catalogs[mode.name] = TagCatalog.load(
                mode.tag_list, self.custom_tags.get(mode.name, ()))

    @classmethod
    def from_options(cls, options, **kwargs) -> TagConfig:
        """Create a configuration from bot options.

        Custom tags are read from the option named by each mode
        (``custom``, ``customfile``, ``customredirect``).
        """
        modes = kwargs.pop('modes', MODES)
        custom_tags = {}
        for mode in modes:
            entries = split_list(options.get(mode.custom_option))
            if entries:
                custom_tags[mode.name] = entries
        return cls(modes=modes, custom_tags=custom_tags, **kwargs)

    def catalog(self, mode) -> TagCatalog:
        return self.catalogs[mode.name]

    def aliases(self, tag: str) -> list[str]:
        """Return the known redirects of a tag template."""
        return self.template_redirects.get(tag, [])

    def summary_messages(self) -> dict:
        """Prepare language-specific summary messages."""
        msgs = SUMMARY_MESSAGES['en'].copy()
        msgs.update(SUMMARY_MESSAGES.get(self.language, {}))
        return msgs
