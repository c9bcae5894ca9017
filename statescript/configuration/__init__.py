"""Process wide configuration.

``config`` holds the options with their dotted names, like
``json.isodates`` or ``state.logger``. Global objects read the options
in their own namespace when :func:`configure` reaches the
``config_ready`` milestone::

    from statescript.configuration import configure

    configure({'json.isodates': 'true',
               'state.logger': 'myapp.ssr',
               'state.global_name': 'window.__APP_STATE__'})

"""
from logging import getLogger

from . import milestones
from .utils import StateConfigError, coerce_config, coerce_options, GlobalConfigurable

log = getLogger(__name__)

#: Options of the running application, keys are dotted option names.
config = {}


def configure(options=None, **kw):
    """Replaces the current configuration and reconfigures global objects.

    Options can be provided both as a dictionary and as keyword arguments,
    the latter only being usable for names without dots.
    """
    new_config = dict(options or {})
    new_config.update(kw)

    config.clear()
    config.update(new_config)
    log.debug('Configuring with options %s', sorted(config))

    milestones.config_ready._reset()
    milestones.config_ready.reach()
    return config


__all__ = ['config', 'configure', 'milestones', 'StateConfigError',
           'coerce_config', 'coerce_options', 'GlobalConfigurable']
