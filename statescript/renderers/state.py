from statescript.configuration import coerce_config, config
from statescript.serializer import StateSerializer, get_serializer
from statescript.util.html import state_assignment
from .base import RendererFactory

__all__ = ['StateRenderer']


class StateRenderer(RendererFactory):
    """
    Renders the template variables as a JavaScript statement assigning the
    serialized state, to be served as a script or included in a page.

    Supported ``render_params``:

    - All supported by :meth:`.StateSerializer.configure`, options not given
      fall back to the configured ``state.*`` ones.
    - ``key`` -> Render a single key of the dictionary returned by controller
      instead of rendering the dictionary itself.
    - ``global_name`` -> Name the state is assigned to, ``window.__STATE__``
      unless configured differently through ``state.global_name``.

    """
    engines = {'state': {'content_type': 'application/javascript'}}

    @classmethod
    def create(cls, config, app_globals):
        return {'state': cls.render_state}

    @staticmethod
    def _get_configured_serializer(options):
        # Caching is not supported by state serialization
        options.pop('cache_expire', None)
        options.pop('cache_type', None)
        options.pop('cache_key', None)

        if not options:
            return get_serializer()
        else:
            configured = coerce_config(config, StateSerializer.CONFIG_NAMESPACE,
                                       StateSerializer.CONFIG_OPTIONS)
            configured.update(options)
            return StateSerializer(**configured)

    @staticmethod
    def render_state(template_name, template_vars, **render_params):
        key = render_params.pop('key', None)
        if key is not None:
            template_vars = template_vars[key]

        global_name = render_params.pop('global_name', None)
        serializer = StateRenderer._get_configured_serializer(render_params)
        return state_assignment(template_vars, global_name=global_name,
                                serializer=serializer)
