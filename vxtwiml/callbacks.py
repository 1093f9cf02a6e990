""" Callback resolution and child production interfaces. """

from urllib.parse import urljoin, urlparse

from zope.interface import Interface, implementer

from vxtwiml.errors import CallbackResolutionError


class ICallbackResolver(Interface):
    """Turns a logical destination into an absolute callback URL"""

    def resolve(target):
        """Returns the URL for ``target``, raising
        :class:`CallbackResolutionError` if it cannot be resolved"""


class IChildProducer(Interface):
    """Lazily produces the markup for a nested verb"""

    def produce():
        """Returns a serialized TwiML fragment"""


@implementer(ICallbackResolver)
class URLJoinResolver(object):
    """Resolves targets relative to a base URL.

    Absolute targets are returned unchanged."""

    def __init__(self, base_url):
        self.base_url = base_url

    def resolve(self, target):
        if not target:
            raise CallbackResolutionError(
                "Cannot resolve empty callback target")
        url = urljoin(self.base_url, target)
        if not urlparse(url).scheme:
            raise CallbackResolutionError(
                "Callback target %r does not resolve to an absolute URL "
                "against %r" % (target, self.base_url))
        return url


@implementer(ICallbackResolver)
class MappingResolver(object):
    """Resolves logical names through a fixed mapping of names to URLs"""

    def __init__(self, urls):
        self._urls = dict(urls)

    def resolve(self, target):
        try:
            return self._urls[target]
        except KeyError:
            raise CallbackResolutionError(
                "Unknown callback target %r" % (target,))


@implementer(IChildProducer)
class NestedVerb(object):
    """Defers a builder call until the parent verb asks for its children.

    ``NestedVerb(say, 'Hello', voice=Voice.WOMAN)`` produces the same markup
    as ``say('Hello', voice=Voice.WOMAN)``, but only when the parent is
    built."""

    def __init__(self, builder, *args, **kwargs):
        self.builder = builder
        self.args = args
        self.kwargs = kwargs

    def produce(self):
        return self.builder(*self.args, **self.kwargs)
