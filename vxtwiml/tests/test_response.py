from twisted.trial.unittest import TestCase
import xml.etree.ElementTree as ET

from vxtwiml.callbacks import NestedVerb
from vxtwiml.errors import MissingCallback
from vxtwiml.response import (
    CONTENT_TYPE, ErrorResponse, Response, build_response)
from vxtwiml.verbs import play, say


class TestResponse(TestCase):
    def test_build_response(self):
        """Fragments are wrapped in order inside a single Response"""
        markup, headers = build_response([
            say('Hello'), play('http://foo.com/cowbell.mp3')])
        self.assertEqual(
            markup,
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<Response>\n'
            '<Say loop="1">Hello</Say>'
            '<Play loop="1">http://foo.com/cowbell.mp3</Play>'
            '\n</Response>')
        self.assertEqual(headers, {
            'Content-Type': 'application/xml; charset=UTF-8'})

    def test_build_response_parses(self):
        markup, _ = build_response([
            say('Hello'), NestedVerb(play, 'http://foo.com/cowbell.mp3')])
        root = ET.fromstring(markup.encode('utf-8'))
        self.assertEqual(root.tag, 'Response')
        [say_verb, play_verb] = root
        self.assertEqual(say_verb.tag, 'Say')
        self.assertEqual(say_verb.text, 'Hello')
        self.assertEqual(play_verb.tag, 'Play')

    def test_empty_response(self):
        markup, _ = build_response()
        self.assertEqual(
            markup,
            '<?xml version="1.0" encoding="UTF-8"?>\n<Response>\n\n</Response>')
        self.assertEqual(list(ET.fromstring(markup.encode('utf-8'))), [])

    def test_response_object(self):
        response = Response([say('Hello')])
        self.assertEqual(response.children, ('<Say loop="1">Hello</Say>',))
        self.assertEqual(response.headers, {'Content-Type': CONTENT_TYPE})
        self.assertEqual(response.format_xml(), response.format_xml())


class TestErrorResponse(TestCase):
    def test_format_xml(self):
        response = ErrorResponse.from_exception(MissingCallback('no <url>'))
        self.assertEqual(
            response.format_xml(),
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<Error><Type>MissingCallback</Type>'
            '<Message>no &lt;url&gt;</Message></Error>')
        self.assertEqual(response.headers, {'Content-Type': CONTENT_TYPE})
