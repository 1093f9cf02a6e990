""" A minimal web host serving TwiML documents built from flows. """

from klein import Klein
from twisted.internet.defer import inlineCallbacks, maybeDeferred
from twisted.logger import Logger

from vxtwiml.callbacks import URLJoinResolver
from vxtwiml.errors import TwiMLError
from vxtwiml.response import ErrorResponse, Response


class UnknownFlow(Exception):
    """Raised when a request is made for a flow that is not registered"""


class InvalidFlowResult(TwiMLError):
    """Raised when a flow does not return a list of verbs"""


class TwiMLServer(object):
    """
    Server that answers requests with the TwiML document built by a flow.

    A flow is a callable ``flow(request, resolver)`` returning (or returning
    a deferred that fires with) the list of top level verbs for the
    document. Callback targets given to ``resolver`` are the names of other
    flows on this server.
    """
    app = Klein()
    log = Logger()

    def __init__(self, base_url, flows={}):
        self.base_url = base_url
        self._flows = flows.copy()

    @property
    def resolver(self):
        return URLJoinResolver(self.base_url)

    def add_flow(self, name, flow):
        """
        :param string name: relative web path to serve the flow on
        :param callable flow: callable returning the document's verbs
        """
        self._flows[name] = flow

    def _write_response(self, request, response, code=200):
        request.setResponseCode(code)
        for name, value in response.headers.items():
            request.setHeader(name, value)
        return response.format_xml().encode('utf-8')

    @app.handle_errors(UnknownFlow)
    def unknown_flow(self, request, failure):
        return self._write_response(
            request, ErrorResponse.from_exception(failure.value), 404)

    @app.handle_errors(TwiMLError)
    def flow_error(self, request, failure):
        self.log.failure(
            "Error building TwiML for {uri}", failure=failure,
            uri=request.uri)
        return self._write_response(
            request, ErrorResponse.from_exception(failure.value), 500)

    @app.route('/<string:name>', methods=['GET', 'POST'])
    @inlineCallbacks
    def run_flow(self, request, name):
        flow = self._flows.get(name)
        if flow is None:
            raise UnknownFlow("No flow registered for %r" % name)
        self.log.debug("Running flow {name!r}", name=name)
        children = yield maybeDeferred(flow, request, self.resolver)
        if children is None:
            raise InvalidFlowResult("Flow %r returned no verbs" % name)
        return self._write_response(request, Response(children))

    @app.route('/', methods=['GET', 'POST'])
    def root(self, request):
        return self.run_flow(request, '')
