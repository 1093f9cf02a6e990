from twisted.trial.unittest import TestCase
from zope.interface.verify import verifyObject

from vxtwiml.callbacks import (
    ICallbackResolver, IChildProducer, MappingResolver, NestedVerb,
    URLJoinResolver)
from vxtwiml.errors import CallbackResolutionError
from vxtwiml.verbs import say


class TestURLJoinResolver(TestCase):
    def setUp(self):
        self.resolver = URLJoinResolver('http://example.com/flows/')

    def test_interface(self):
        self.assertTrue(verifyObject(ICallbackResolver, self.resolver))

    def test_relative_target(self):
        self.assertEqual(
            self.resolver.resolve('digits'),
            'http://example.com/flows/digits')

    def test_absolute_path_target(self):
        self.assertEqual(
            self.resolver.resolve('/digits'), 'http://example.com/digits')

    def test_absolute_url_target(self):
        """Absolute URLs are returned unchanged"""
        self.assertEqual(
            self.resolver.resolve('https://other.com/digits'),
            'https://other.com/digits')

    def test_empty_target(self):
        e = self.assertRaises(
            CallbackResolutionError, self.resolver.resolve, '')
        self.assertEqual(str(e), "Cannot resolve empty callback target")

    def test_relative_base(self):
        """A target that does not resolve to an absolute URL is an error"""
        resolver = URLJoinResolver('flows/')
        self.assertRaises(CallbackResolutionError, resolver.resolve, 'digits')


class TestMappingResolver(TestCase):
    def test_resolve(self):
        resolver = MappingResolver({'digits': 'http://e.com/digits'})
        self.assertTrue(verifyObject(ICallbackResolver, resolver))
        self.assertEqual(resolver.resolve('digits'), 'http://e.com/digits')

    def test_unknown(self):
        resolver = MappingResolver({})
        e = self.assertRaises(
            CallbackResolutionError, resolver.resolve, 'digits')
        self.assertEqual(str(e), "Unknown callback target 'digits'")


class TestNestedVerb(TestCase):
    def test_produce(self):
        """The builder is called with the given arguments on produce"""
        child = NestedVerb(say, 'Hello', loop=2)
        self.assertTrue(verifyObject(IChildProducer, child))
        self.assertEqual(child.produce(), '<Say loop="2">Hello</Say>')

    def test_lazy(self):
        """The builder is not called until produce is"""
        calls = []
        child = NestedVerb(lambda: calls.append(1) or '')
        self.assertEqual(calls, [])
        child.produce()
        self.assertEqual(calls, [1])
