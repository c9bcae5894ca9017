"""statescript turns server side rendering state into a JavaScript string
literal that is safe to write inside a ``<script>`` element.

Typical usage from a template::

    from statescript import state_script

    html = '<body>%s%s</body>' % (markup, state_script({'user': user}))

which produces ``<script>window.__STATE__ = '{...}';</script>``, on the
client ``JSON.parse(window.__STATE__)`` gives back the state.

Global objects (the JSON encoder and the state serializer) are tuned
through :func:`statescript.configuration.configure`.

"""
from .configuration import config, configure
from .jsonify import JSONEncoder
from .jsonify import encode as json_encode
from .renderers import RendererFactory, StateRenderer
from .serializer import (
    FALLBACK_LITERAL,
    STAGES,
    SerializationFailure,
    StateSerializer,
    serialize_state,
)
from .util.html import state_assignment, state_script
from .release import version as __version__

__all__ = ['config', 'configure', 'JSONEncoder', 'json_encode',
           'RendererFactory', 'StateRenderer',
           'FALLBACK_LITERAL', 'STAGES', 'SerializationFailure', 'StateSerializer',
           'serialize_state', 'state_assignment', 'state_script']
