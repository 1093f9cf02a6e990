""" TwiML verbs and the builders that serialize them. """

import xml.etree.ElementTree as ET
from enum import Enum
from xml.sax.saxutils import escape as _escape

from vxtwiml.callbacks import IChildProducer
from vxtwiml.enums import Language, Voice
from vxtwiml.errors import (
    CallbackResolutionError, InconsistentTranscriptionConfig,
    InvalidAttributeValue, InvalidNesting, MissingCallback,
    MissingRequiredAttribute)


_entities = {'"': '&quot;', "'": '&apos;'}

DIGITS = '0123456789#*'


def escape(text):
    """Escapes the five XML special characters in ``text``"""
    return _escape(text, _entities)


def render_value(value):
    """Returns the wire form of an attribute value, or None if absent"""
    if value is None:
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return '%d' % value
    if isinstance(value, Enum):
        return value.value
    return str(value)


def format_attribute(name, value):
    """Returns `` name="value"`` for ``value``, or '' if it is absent"""
    value = render_value(value)
    if value is None:
        return ''
    return ' %s="%s"' % (name, escape(value))


class Fragment(str):
    """Serialized markup for a single verb.

    Behaves as a plain string but remembers the verb it was built from."""

    def __new__(cls, markup, tag=None):
        self = super(Fragment, cls).__new__(cls, markup)
        self.tag = tag
        return self


def check_integer(name, integer, minimum=None):
    """Raises the appropriate error if the value cannot be cast to an int.
    If minimum is present, raises the appropriate error if the value is less
    than minimum.

    Returns the processed integer"""
    if isinstance(integer, bool):
        raise InvalidAttributeValue(
            "Invalid value %r for %s parameter. Must be an integer."
            % (integer, name))
    try:
        integer = int(integer)
    except (TypeError, ValueError):
        raise InvalidAttributeValue(
            "Invalid value %r for %s parameter. Must be an integer."
            % (integer, name))
    if minimum is not None and integer < minimum:
        raise InvalidAttributeValue(
            "Invalid value %r for %s parameter. Must be >= %s"
            % (integer, name, minimum))
    return integer


def check_boolean(name, value):
    if not isinstance(value, bool):
        raise InvalidAttributeValue(
            "Invalid value %r for %s parameter. Must be true or false."
            % (value, name))
    return value


def check_text(name, text):
    """Returns a text body as a string. Integers such as phone numbers are
    converted, None stays absent"""
    if text is None or isinstance(text, str):
        return text
    if isinstance(text, int) and not isinstance(text, bool):
        return '%d' % text
    raise InvalidAttributeValue(
        "Invalid value %r for %s parameter. Must be a string."
        % (text, name))


def check_keys(name, keys, single=False):
    """Validates a finishOnKey value. Returns None when absent"""
    if keys is None:
        return None
    if not isinstance(keys, str):
        raise InvalidAttributeValue(
            "Invalid value %r for %s parameter. Must be a string."
            % (keys, name))
    if single and len(keys) > 1:
        raise InvalidAttributeValue(
            "Invalid value %r for %s parameter. "
            "Must only be one character" % (keys, name))
    if not all(c in DIGITS for c in keys):
        raise InvalidAttributeValue(
            "Invalid value %r for %s parameter. "
            "Must be one of %r" % (keys, name, DIGITS))
    return keys


def resolve_callback(name, target, resolver=None, required=False):
    """Returns the URL for a callback attribute.

    Without a resolver ``target`` is taken to be an already resolved URL."""
    if not target:
        if required:
            raise MissingCallback(
                "Required callback %r not supplied" % name)
        return None
    if resolver is None:
        return target
    try:
        return resolver.resolve(target)
    except CallbackResolutionError as e:
        raise MissingCallback(
            "Unable to resolve %r callback: %s" % (name, e))


def produce_children(children):
    """Returns the serialized form of each child, in order"""
    fragments = []
    for child in children:
        if IChildProducer.providedBy(child):
            child = child.produce()
        if not isinstance(child, str):
            raise TypeError(
                "Child verbs must be strings or child producers, not %r"
                % (child,))
        fragments.append(child)
    return fragments


def child_tags(child):
    """Returns the verb names in a serialized child, None for bare text"""
    if isinstance(child, Fragment):
        return [child.tag]
    try:
        root = ET.fromstring('<_>%s</_>' % child)
    except ET.ParseError:
        return [None]
    tags = [element.tag for element in root]
    text = [root.text] + [element.tail for element in root]
    if any(t and t.strip() for t in text):
        tags.append(None)
    return tags


class Verb(object):
    """Represents a single verb in TwiML.

    Attributes are given as ``(name, value)`` pairs and are serialized in
    that order. Absent (None) values are dropped. Children are already
    serialized fragments and are inserted verbatim after the escaped text.
    """
    name = "Verb"
    # Verb names allowed as children, None if any child is allowed
    nested_verbs = None
    self_closing = False

    def __init__(self, attributes=(), children=(), text=None):
        self._attributes = tuple(
            (name, render_value(value)) for name, value in attributes
            if value is not None)
        self._children = tuple(children)
        self._text = text
        if self.nested_verbs is not None:
            for child in self._children:
                for tag in child_tags(child):
                    if tag not in self.nested_verbs:
                        raise InvalidNesting(
                            "Invalid sub verb %r for %s verb. "
                            "Must be one of %r"
                            % (tag, self.name, list(self.nested_verbs)))

    @property
    def tag(self):
        return self.name

    @property
    def attributes(self):
        return dict(self._attributes)

    @property
    def children(self):
        return self._children

    @property
    def text(self):
        return self._text

    def to_xml(self):
        """Returns the markup for this verb and its children"""
        attributes = ''.join(
            format_attribute(name, value) for name, value in self._attributes)
        body = ''.join(self._children)
        if self._text is not None:
            body = escape(self._text) + body
        if not body and self.self_closing:
            return '<%s%s/>' % (self.name, attributes)
        return '<%s%s>%s</%s>' % (self.name, attributes, body, self.name)

    def to_fragment(self):
        return Fragment(self.to_xml(), self.name)

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self.to_xml())

    @classmethod
    def build(cls, *args, **kwargs):
        raise NotImplementedError()

    @classmethod
    def render(cls, *args, **kwargs):
        """Builds the verb and returns its serialized :class:`Fragment`"""
        return cls.build(*args, **kwargs).to_fragment()


class Say(Verb):
    """Represents the Say verb"""
    name = "Say"

    @classmethod
    def build(cls, text=None, language=None, voice=None, loop=1, children=()):
        """Returns a new Say verb reading ``text`` to the caller.

        :param language: a :class:`Language`, its name or its code
        :param voice: a :class:`Voice`, its name or its code
        :param int loop: how many times to repeat the text, 0 for forever
        """
        text = check_text('text', text)
        language = Language.lookup(language)
        voice = Voice.lookup(voice)
        loop = check_integer('loop', loop, 0)
        return cls([
            ('language', language),
            ('voice', voice),
            ('loop', loop),
        ], produce_children(children), text)


class Play(Verb):
    """Represents the Play verb"""
    name = "Play"

    @classmethod
    def build(cls, file=None, loop=1):
        """Returns a new Play verb playing the audio at the ``file`` URL"""
        file = check_text('file', file)
        if not file:
            raise MissingRequiredAttribute(
                "Required attribute 'file' not supplied for Play verb")
        loop = check_integer('loop', loop, 0)
        return cls([('loop', loop)], text=file)


class Gather(Verb):
    """Represents the Gather verb"""
    name = "Gather"
    nested_verbs = ('Say', 'Play')

    @classmethod
    def build(cls, action=None, timeout=5, finish_on_key='#',
              num_digits=None, children=(), resolver=None):
        """Returns a new Gather verb collecting keypad digits.

        The digits are submitted with a GET request to the ``action``
        callback. Say and Play verbs may be nested to prompt the caller
        while waiting for input."""
        timeout = check_integer('timeout', timeout, 0)
        finish_on_key = check_keys('finishOnKey', finish_on_key, single=True)
        if num_digits is not None:
            num_digits = check_integer('numDigits', num_digits, 1)
        action = resolve_callback('action', action, resolver, required=True)
        return cls([
            ('numDigits', num_digits),
            ('finishOnKey', finish_on_key),
            ('timeout', timeout),
            ('method', 'GET'),
            ('action', action),
        ], produce_children(children))


class Record(Verb):
    """Represents the Record verb"""
    name = "Record"
    nested_verbs = ()
    self_closing = True

    @classmethod
    def build(cls, action=None, timeout=5, finish_on_key='#',
              max_length=3600, transcribe=False, transcribe_callback=None,
              play_beep=True, resolver=None):
        """Returns a new Record verb recording the caller's voice.

        The recording is submitted with a GET request to the ``action``
        callback. When ``transcribe`` is true a ``transcribe_callback`` must
        be supplied to receive the transcription."""
        transcribe = check_boolean('transcribe', transcribe)
        if transcribe and not transcribe_callback:
            raise InconsistentTranscriptionConfig(
                "A transcribe callback is required when transcribe is true")
        timeout = check_integer('timeout', timeout, 0)
        finish_on_key = check_keys('finishOnKey', finish_on_key)
        max_length = check_integer('maxLength', max_length, 1)
        play_beep = check_boolean('playBeep', play_beep)
        if transcribe:
            transcribe_callback = resolve_callback(
                'transcribeCallback', transcribe_callback, resolver,
                required=True)
        else:
            transcribe_callback = None
        action = resolve_callback('action', action, resolver, required=True)
        return cls([
            ('finishOnKey', finish_on_key),
            ('timeout', timeout),
            ('maxLength', max_length),
            ('transcribe', transcribe),
            ('transcribeCallback', transcribe_callback),
            ('playBeep', play_beep),
            ('method', 'GET'),
            ('action', action),
        ])


class Sms(Verb):
    """Represents the Sms verb"""
    name = "Sms"

    @classmethod
    def build(cls, text=None, action=None, from_=None, to=None,
              status_callback=None, children=(), resolver=None):
        """Returns a new Sms verb sending ``text`` during the call"""
        text = check_text('text', text)
        action = resolve_callback('action', action, resolver)
        status_callback = resolve_callback(
            'statusCallback', status_callback, resolver)
        return cls([
            ('action', action),
            ('from', from_),
            ('to', to),
            ('statusCallback', status_callback),
        ], produce_children(children), text)


class Dial(Verb):
    """Represents the Dial verb"""
    name = "Dial"

    @classmethod
    def build(cls, number=None, action=None, timeout=30,
              hangup_on_star=False, time_limit=14400, caller_id=None,
              children=(), resolver=None):
        """Returns a new Dial verb connecting the caller to another party.

        The destination is either a ``number`` or nested destination
        markup in ``children``."""
        number = check_text('number', number)
        children = produce_children(children)
        if not number and not ''.join(children):
            raise MissingRequiredAttribute(
                "Dial verb requires a number or nested destination")
        timeout = check_integer('timeout', timeout, 1)
        hangup_on_star = check_boolean('hangupOnStar', hangup_on_star)
        time_limit = check_integer('timeLimit', time_limit, 1)
        action = resolve_callback('action', action, resolver)
        return cls([
            ('action', action),
            ('timeout', timeout),
            ('hangupOnStar', hangup_on_star),
            ('timeLimit', time_limit),
            ('callerId', caller_id),
        ], children, number)


say = Say.render
play = Play.render
gather = Gather.render
record = Record.render
sms = Sms.render
dial = Dial.render
