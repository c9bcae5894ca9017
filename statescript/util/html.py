from markupsafe import Markup

from ..serializer import get_serializer
from ..support.converters import asglobalname


def state_assignment(state, global_name=None, serializer=None):
    """Returns the ``window.__STATE__ = '...';`` statement for ``state``.

    ``global_name`` defaults to the ``state.global_name`` option of the
    serializer and must be a dotted JavaScript identifier path, as it is
    written without any escaping.
    """
    serializer = get_serializer(serializer)
    if global_name is None:
        global_name = serializer.global_name
    else:
        global_name = asglobalname(global_name)

    return '%s = %s;' % (global_name, serializer.serialize(state))


def state_script(state, global_name=None, nonce=None, serializer=None):
    """Works exactly like :func:`state_assignment` but returns a whole
    ``<script>`` element as :class:`markupsafe.Markup`.

    Being ``Markup`` the result can be output by template engines with
    autoescaping enabled, like ``${h.state_script(state)}`` in Kajiki
    or ``{{ state_script(state) }}`` in Jinja. When a Content Security
    Policy is in place provide the request ``nonce``, it gets HTML escaped.
    """
    if nonce is not None:
        opening = Markup('<script nonce="%s">') % nonce
    else:
        opening = Markup('<script>')

    assignment = state_assignment(state, global_name=global_name, serializer=serializer)
    return opening + Markup(assignment) + Markup('</script>')
