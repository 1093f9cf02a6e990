""" Closed vocabularies for TwiML attribute values. """

from enum import Enum

from vxtwiml.errors import InvalidEnumValue


class TwiMLEnum(Enum):
    """An enum whose values are the codes written to the wire"""

    @property
    def code(self):
        return self.value

    @classmethod
    def lookup(cls, value):
        """Returns the member for ``value``.

        ``value`` may be a member, a member name (case insensitive) or a wire
        code. ``None`` is returned unchanged so that absent optional values
        stay absent."""
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value == member.code or value.upper() == member.name:
                    return member
        raise InvalidEnumValue(
            "Invalid value %r for %s. Must be one of %r" % (
                value, cls.__name__, [member.code for member in cls]))


class Voice(TwiMLEnum):
    """Voice gender used to read text back to the caller"""
    MAN = 'man'
    WOMAN = 'woman'


class Language(TwiMLEnum):
    """Voice language with a specific language's accent and pronunciation"""
    ENGLISH = 'en'
    SPANISH = 'es'
    FRENCH = 'fr'
    GERMAN = 'de'
