r"""Serialization of rendering state into a JavaScript string literal.

The state computed on the server is encoded as JSON and then escaped so
that it can be written as the body of a single quoted JavaScript string,
right inside a ``<script>`` element::

    <script>window.__STATE__ = '{"user":"O\'Neil","unread":3}';</script>

On the client the string is given to ``JSON.parse`` to hydrate the
application. Parsing a string is faster than evaluating an object literal
and the escaping guarantees that nothing inside the state can close the
string or the script element.

"""
import re

from statescript.configuration.utils import GlobalConfigurable, StateConfigError
from statescript.jsonify import encode as json_encode
from statescript.support.converters import asglobalname, aslogger

import logging
log = logging.getLogger(__name__)

__all__ = ['FALLBACK_LITERAL', 'STAGES', 'SerializationFailure', 'StateSerializer',
           'double_backslashes', 'escape_single_quotes', 'escape_unsafe_chars',
           'get_serializer', 'serialize_state']

#: Returned when the state cannot be encoded, the page hydrates with an empty object.
FALLBACK_LITERAL = "'{}'"

_UNSAFE_CHARS = '<>\N{LINE SEPARATOR}\N{PARAGRAPH SEPARATOR}'
# Lone surrogates cannot be encoded to UTF-8 and are escaped like JSON.stringify does.
_SURROGATES = '%s-%s' % (chr(0xD800), chr(0xDFFF))
_UNSAFE_CHARS_RE = re.compile('[%s%s]' % (_UNSAFE_CHARS, _SURROGATES))


class SerializationFailure(Exception):
    """The state could not be converted to JSON text"""

    def __init__(self, state, error):
        super(SerializationFailure, self).__init__('Unable to serialize state: %s' % (error, ))
        self.state = state
        self.error = error


def double_backslashes(text):
    """Escapes the backslashes JSON already uses for quotes and control characters."""
    return text.replace('\\', '\\\\')


def escape_single_quotes(text):
    return text.replace("'", "\\'")


def escape_unsafe_chars(text):
    """Replaces ``<``, ``>``, U+2028 and U+2029 with their ``\\uXXXX`` escape.

    The HTML parser runs before the JavaScript one and would close the
    script element on a literal ``</script>``, while the two separators
    are line terminators for older JavaScript engines. Lone surrogates,
    which show up in ``surrogateescape`` decoded data, are escaped too as
    they would make the page impossible to encode.
    """
    return _UNSAFE_CHARS_RE.sub(lambda match: '\\u%04X' % ord(match.group(0)), text)


#: Escaping stages, in the order they must be applied. Each stage inserts
#: backslashes that the stages before it must never see.
STAGES = (double_backslashes, escape_single_quotes, escape_unsafe_chars)


def _is_falsy(state):
    # Only scalars can be falsy, empty lists and dicts are kept like the browser does.
    if state is None:
        return True
    if isinstance(state, (bool, int, float, str)):
        return not state or state != state
    return False


class StateSerializer(GlobalConfigurable):
    """Converts rendering state into a single quoted JavaScript string literal.

    The serializer never raises: when the state cannot be encoded (circular
    references, unsupported types, ``NaN``...) the failure is logged along
    with the state and :data:`FALLBACK_LITERAL` is returned, so a broken
    state never prevents the page from being served.

    Falsy scalar states (``None``, ``False``, ``0``, ``""``) are replaced by
    an empty object before encoding.

    The global instance used by :func:`serialize_state` can be configured
    through :func:`statescript.configuration.configure` using the following options:

    - ``state.logger`` -> Logger, or logger name, receiving serialization failures.
    - ``state.global_name`` -> JavaScript name the state gets assigned to by
      :func:`statescript.util.html.state_script` (``window.__STATE__`` by default).
    - ``state.encoder`` -> :class:`statescript.jsonify.JSONEncoder` to use instead of
      the global one.

    """
    CONFIG_NAMESPACE = 'state.'
    CONFIG_OPTIONS = {'logger': aslogger,
                      'global_name': asglobalname}

    stages = STAGES

    def __init__(self, **options):
        self.configure(**options)

    def configure(self, encoder=None, logger=None, global_name='window.__STATE__', **options):
        self._encoder = encoder
        self._log = aslogger(logger) if logger is not None else log
        self.global_name = asglobalname(global_name)
        if options:
            raise StateConfigError('Unknown state serializer options: %s' % ', '.join(sorted(options)))

    def canonicalize(self, state):
        """Encodes the state to JSON text, raises :class:`SerializationFailure` on errors."""
        if _is_falsy(state):
            state = {}

        try:
            return json_encode(state, encoder=self._encoder)
        except Exception as e:
            raise SerializationFailure(state, e) from e

    def escape(self, text):
        for stage in self.stages:
            text = stage(text)
        return text

    def serialize(self, state):
        try:
            text = self.canonicalize(state)
        except SerializationFailure as failure:
            self._log.error('On state serialization - %s: %r', failure.error, state,
                            exc_info=failure)
            return FALLBACK_LITERAL

        return "'%s'" % self.escape(text)

    __call__ = serialize


_default_serializer = StateSerializer.create_global()


def get_serializer(serializer=None):
    """Returns ``serializer`` or the global one when it is ``None``."""
    if serializer is None:
        serializer = _default_serializer
    return serializer


def serialize_state(state, serializer=None):
    """Return the single quoted JavaScript literal for ``state``."""
    return get_serializer(serializer).serialize(state)
