"""JSON encoding functions.

This is the canonicalization step of the state serializer: it produces
the same compact text the browser's ``JSON.stringify`` would, so that
the escaping stages work on a predictable input.
"""

import datetime
import decimal
import types

from json import JSONEncoder as _JSONEncoder

from webob.multidict import MultiDict

from statescript.configuration.utils import GlobalConfigurable
from statescript.support.converters import asbool

import logging
log = logging.getLogger(__name__)


class JSONEncoder(_JSONEncoder, GlobalConfigurable):
    """statescript custom JSONEncoder.

    Provides support for encoding objects commonly found in rendering state, like:

        - Dates
        - Decimals
        - WebOb MultiDicts (request parameters)
        - Generators and sets

    Support for additional types is provided through the ``__json__`` method
    that will be called on the object by the JSONEncoder when provided and through
    the ability to register custom encoder for specific types using
    :meth:`.JSONEncoder.register_custom_encoder`.

    Output is compact (no spaces after separators), non ASCII characters are
    kept as they are and ``NaN``/``Infinity`` are refused as they are not JSON.
    All of those can be overridden with the standard ``json.JSONEncoder`` arguments.

    """
    CONFIG_NAMESPACE = 'json.'
    CONFIG_OPTIONS = {'isodates': asbool}

    def __init__(self, **kwargs):
        kwargs = self.configure(**kwargs)
        kwargs.setdefault('separators', (',', ':'))
        kwargs.setdefault('ensure_ascii', False)
        kwargs.setdefault('allow_nan', False)
        super(JSONEncoder, self).__init__(**kwargs)

    def configure(self, isodates=False, custom_encoders=None, **kwargs):
        """JSON encoder can be configured through :func:`statescript.configuration.configure`
        using the following options:

        - ``json.isodates`` -> encode dates using ISO8601 format
        - ``json.custom_encoders`` -> Dictionary ``{type: encode_func}`` to register
          custom encoders for specific types.

        """
        self._isodates = isodates
        self._registered_types_map = {}
        self._registered_types_list = tuple()
        if custom_encoders is not None:
            for type_, encoder in custom_encoders.items():
                self.register_custom_encoder(type_, encoder)
        return kwargs

    def register_custom_encoder(self, objtype, encoder):
        """Register a custom encoder for the given type.

        Instead of using standard behavior for encoding the given type to JSON, the
        ``encoder`` will used instead. ``encoder`` must be a callable that takes
        the object as argument and returns an object that can be encoded in JSON (usually a dict).

        """
        if objtype in self._registered_types_map:
            log.warning('%s type already registered for a custom encoder, replacing it', objtype)
            self._registered_types_list = tuple(t for t in self._registered_types_list
                                                if t is not objtype)

        self._registered_types_map[objtype] = encoder
        # Append to head, so we find first the last registered types
        self._registered_types_list = (objtype, ) + self._registered_types_list

    def default(self, obj):
        if isinstance(obj, self._registered_types_list):
            for type_ in self._registered_types_list:
                if isinstance(obj, type_):
                    return self._registered_types_map[type_](obj)
        elif hasattr(obj, '__json__') and callable(obj.__json__):
            return obj.__json__()
        elif isinstance(obj, (datetime.date, datetime.datetime, datetime.time)):
            if self._isodates:
                if isinstance(obj, (datetime.datetime, datetime.time)):
                    obj = obj.replace(microsecond=0)
                return obj.isoformat()
            else:
                return str(obj)
        elif isinstance(obj, decimal.Decimal):
            return float(obj)
        elif isinstance(obj, MultiDict):
            return obj.mixed()
        elif isinstance(obj, types.GeneratorType):
            return list(obj)
        elif isinstance(obj, (set, frozenset)):
            try:
                return sorted(obj)
            except TypeError:
                return list(obj)
        else:
            return _JSONEncoder.default(self, obj)


_default_encoder = JSONEncoder.create_global()


def encode(obj, encoder=None):
    """Return a JSON string representation of a Python object."""
    if encoder is None:
        encoder = _default_encoder

    return encoder.encode(obj)
