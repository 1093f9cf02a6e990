""" Command line entry point running a :class:`TwiMLServer`. """

import sys

from twisted.logger import Logger, globalLogBeginner, textFileLogObserver
from twisted.python import usage
from twisted.python.reflect import namedAny
from twisted.web.server import Site

from vxtwiml.server import TwiMLServer

log = Logger()


class Options(usage.Options):
    """Config for the TwiML server"""
    optParameters = [
        ['port', 'p', 8080, "The port the server should listen on", int],
        ['interface', 'i', '127.0.0.1',
         "The interface the server should listen on"],
        ['base-url', 'b', None,
         "The public URL of the server, callbacks are resolved against it. "
         "Defaults to the interface and port."],
        ['flows', 'f', None,
         "Dotted name of a dict mapping web paths to flows"],
    ]

    def postOptions(self):
        if self['flows'] is None:
            raise usage.UsageError("--flows is required")
        try:
            self['flows'] = namedAny(self['flows'])
        except (AttributeError, ValueError, ImportError) as e:
            raise usage.UsageError(
                "Unable to load flows %r: %s" % (self['flows'], e))
        if not isinstance(self['flows'], dict):
            raise usage.UsageError("--flows must name a dict of flows")
        if self['base-url'] is None:
            self['base-url'] = 'http://%s:%s/' % (
                self['interface'], self['port'])


def make_server(options):
    return TwiMLServer(options['base-url'], options['flows'])


def main(argv=None, reactor=None):
    options = Options()
    try:
        options.parseOptions(argv)
    except usage.UsageError as e:
        sys.stderr.write('%s\n%s: %s\n' % (options, sys.argv[0], e))
        sys.exit(1)

    if reactor is None:
        from twisted.internet import reactor

    globalLogBeginner.beginLoggingTo([textFileLogObserver(sys.stdout)])
    server = make_server(options)
    reactor.listenTCP(
        options['port'], Site(server.app.resource()),
        interface=options['interface'])
    log.info(
        "Serving {count} flows on {url}",
        count=len(options['flows']), url=options['base-url'])
    reactor.run()


if __name__ == '__main__':
    main()
