""" Assembly of complete TwiML documents. """

import xml.etree.ElementTree as ET

from vxtwiml.verbs import produce_children

CONTENT_TYPE = 'application/xml; charset=UTF-8'
PREAMBLE = '<?xml version="1.0" encoding="UTF-8"?>\n'


class Response(object):
    """ The root <Response> element wrapping the top level verbs of a
        document.
    """
    name = 'Response'

    def __init__(self, children=()):
        """
        :param list children: serialized verbs or child producers, in the
            order they should be executed
        """
        self.children = tuple(produce_children(children))

    @property
    def headers(self):
        return {'Content-Type': CONTENT_TYPE}

    def format_xml(self):
        return '%s<%s>\n%s\n</%s>' % (
            PREAMBLE, self.name, ''.join(self.children), self.name)


class ErrorResponse(object):
    """ Document returned in place of TwiML when a flow fails
    """
    name = 'Error'

    def __init__(self, error_type, error_message):
        self.error_type = error_type
        self.error_message = error_message

    @property
    def headers(self):
        return {'Content-Type': CONTENT_TYPE}

    def format_xml(self):
        root = ET.Element(self.name)
        ET.SubElement(root, 'Type').text = self.error_type
        ET.SubElement(root, 'Message').text = self.error_message
        return PREAMBLE + ET.tostring(root, encoding='unicode')

    @classmethod
    def from_exception(cls, exception):
        return cls(exception.__class__.__name__, str(exception))


def build_response(children=()):
    """Returns the markup for a document containing ``children`` together
    with the headers to send it with"""
    response = Response(children)
    return response.format_xml(), response.headers
