""" Exceptions raised while building TwiML. """


class TwiMLError(Exception):
    """Base class for errors raised when building TwiML"""


class InvalidEnumValue(TwiMLError):
    """Raised when a value is not a member of a closed vocabulary"""


class InvalidAttributeValue(TwiMLError):
    """Raised when an attribute value fails its verb's validation"""


class MissingRequiredAttribute(TwiMLError):
    """Raised when a required, non callback parameter is not supplied"""


class MissingCallback(TwiMLError):
    """Raised when a required callback URL cannot be produced"""


class InconsistentTranscriptionConfig(TwiMLError):
    """Raised when transcription is requested without a transcribe
    callback"""


class InvalidNesting(TwiMLError):
    """Raised when a verb is nested inside a verb that does not allow it"""


class CallbackResolutionError(Exception):
    """Raised by resolvers that cannot turn a target into a URL"""
