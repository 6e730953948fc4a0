"""Multi-language text and its resolution to a single display value."""

import json
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Text

from atlas.domain import atlas
from atlas.errors import MissingLocalization


class Language(Enum):
    """Languages every displayed country and sight is translated into."""

    EN = "en"
    RU = "ru"
    DE = "de"


DEFAULT_LANGUAGE = Language.EN.value
SUPPORTED_LANGUAGES = tuple(lang.value for lang in Language)


def resolve(values, language, field="value"):
    """Return the value of the first ``values`` entry written in ``language``.

    ``values`` is a sequence of ``{"language": ..., "value": ...}`` mappings.
    Raises MissingLocalization when no entry matches; no other language is
    substituted.
    """
    by_language = {}
    for entry in values or ():
        by_language.setdefault(entry.get("language"), entry.get("value"))

    if language not in by_language:
        raise MissingLocalization(field, language)
    return by_language[language]


@atlas.value_object
class LocalizedText:
    """A piece of text translated into one or more supported languages.

    Stored as a JSON array of ``{"language", "value"}`` pairs, one per language.
    """

    entries: Text(required=True)

    @invariant.post
    def entries_must_be_well_formed(self):
        try:
            entries = json.loads(self.entries)
        except (json.JSONDecodeError, TypeError):
            raise ValidationError({"entries": ["Localized text must be valid JSON"]}) from None

        if not isinstance(entries, list) or not entries:
            raise ValidationError({"entries": ["Localized text must be a non-empty list"]})

        seen = set()
        for entry in entries:
            if not isinstance(entry, dict):
                raise ValidationError({"entries": ["Each translation must be an object"]})

            language = entry.get("language")
            if language not in SUPPORTED_LANGUAGES:
                raise ValidationError({"entries": [f"Unsupported language: {language!r}"]})
            if language in seen:
                raise ValidationError({"entries": [f"Duplicate translation for '{language}'"]})
            seen.add(language)

            value = entry.get("value")
            if not isinstance(value, str) or not value.strip():
                raise ValidationError({"entries": [f"Translation for '{language}' must not be empty"]})

    @classmethod
    def of(cls, entries):
        """Build from a list of ``{"language", "value"}`` mappings."""
        return cls(entries=json.dumps(list(entries), ensure_ascii=False))

    def as_list(self):
        return json.loads(self.entries)

    def has(self, language):
        return any(entry["language"] == language for entry in self.as_list())

    def resolve(self, language, field="value"):
        return resolve(self.as_list(), language, field=field)
