from .callbacks import (
    ICallbackResolver, IChildProducer, URLJoinResolver, MappingResolver,
    NestedVerb)
from .enums import Voice, Language
from .errors import (
    TwiMLError, InvalidEnumValue, InvalidAttributeValue,
    MissingRequiredAttribute, MissingCallback,
    InconsistentTranscriptionConfig, InvalidNesting, CallbackResolutionError)
from .response import Response, ErrorResponse, build_response, CONTENT_TYPE
from .verbs import (
    Verb, Fragment, Say, Play, Gather, Record, Sms, Dial,
    say, play, gather, record, sms, dial)

__all__ = [
    'ICallbackResolver', 'IChildProducer', 'URLJoinResolver',
    'MappingResolver', 'NestedVerb',
    'Voice', 'Language',
    'TwiMLError', 'InvalidEnumValue', 'InvalidAttributeValue',
    'MissingRequiredAttribute', 'MissingCallback',
    'InconsistentTranscriptionConfig', 'InvalidNesting',
    'CallbackResolutionError',
    'Response', 'ErrorResponse', 'build_response', 'CONTENT_TYPE',
    'Verb', 'Fragment', 'Say', 'Play', 'Gather', 'Record', 'Sms', 'Dial',
    'say', 'play', 'gather', 'record', 'sms', 'dial',
]
