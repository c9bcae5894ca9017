# (c) 2005 Ian Bicking and contributors; written for Paste (http://pythonpaste.org)
# Licensed under the MIT license: http://www.opensource.org/licenses/mit-license.php
#
# Adapted to statescript
import logging
import re


def asbool(obj):
    if isinstance(obj, str):
        obj = obj.strip().lower()
        if obj in ["true", "yes", "on", "y", "t", "1"]:
            return True
        elif obj in ["false", "no", "off", "n", "f", "0"]:
            return False
        else:
            raise ValueError("String is not true/false: %r" % obj)
    return bool(obj)


def aslogger(val):
    if isinstance(val, logging.Logger):
        return val

    if not isinstance(val, str):
        raise ValueError("Logger names must be strings")

    return logging.getLogger(val)


_JS_IDENTIFIER = r'[A-Za-z_$][A-Za-z0-9_$]*'
_JS_GLOBAL_NAME_RE = re.compile(r'^%s(\.%s)*$' % (_JS_IDENTIFIER, _JS_IDENTIFIER))


def asglobalname(val):
    """Validates a dotted JavaScript identifier path like ``window.__STATE__``.

    The name ends up unescaped on the left side of the state assignment,
    so anything that is not made only of identifiers and dots is refused.
    """
    if not isinstance(val, str):
        raise ValueError("Global names must be strings")

    val = val.strip()
    if not _JS_GLOBAL_NAME_RE.match(val):
        raise ValueError("Not a valid JavaScript global name: %r" % val)
    return val
