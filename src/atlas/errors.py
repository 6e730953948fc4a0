"""Failures raised by the atlas domain."""

from protean.exceptions import ObjectNotFoundError


class CountryNotFound(ObjectNotFoundError):
    def __init__(self, country_id):
        self.country_id = country_id
        super().__init__({"country": [f"Country {country_id} not found"]})


class SightNotFound(ObjectNotFoundError):
    def __init__(self, country_id, sight_id):
        self.country_id = country_id
        self.sight_id = sight_id
        super().__init__({"sight": [f"Sight {sight_id} not found in country {country_id}"]})


class MissingLocalization(Exception):
    """A stored localized field has no value for the requested language.

    Every displayed field is expected to carry all supported languages, so this
    signals malformed stored data rather than a bad request.
    """

    def __init__(self, field, language):
        self.field = field
        self.language = language
        super().__init__(f"No '{language}' value for {field}")
