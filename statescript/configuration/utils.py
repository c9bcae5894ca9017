from .milestones import config_ready


class StateConfigError(Exception):pass


def coerce_options(options, converters):
    """Convert some configuration options to expected types.

    To replace given options with the converted values
    in a dictionary you might do::

        conf.update(coerce_options(conf, {
            'isodates': asbool,
            'logger': aslogger
        }))
    """
    converted_options = {}
    for option, converter in converters.items():
        if option in options:
            converted_options[option] = converter(options[option])
    return converted_options


def coerce_config(configuration, prefix, converters):
    """Extracts a set of options with a common prefix and converts them.

    To extract all options starting with ``state.`` from
    the ``conf`` dictionary and convert them::

        state_config = coerce_config(conf, 'state.', {
            'logger': aslogger,
            'global_name': asglobalname
        })
    """

    options = dict((key[len(prefix):], configuration[key])
                    for key in configuration if key.startswith(prefix))
    options.update(coerce_options(options, converters))
    return options


class GlobalConfigurable(object):
    """Defines a configurable object with a global default instance.

    GlobalConfigurable are objects which the user can create multiple instances to use
    in its own application or third party module, but for which statescript provides
    a default instance.

    The default JSON encoder and the default state serializer are the two
    global instances: :func:`statescript.jsonify.encode` and
    :func:`statescript.serializer.serialize_state` use them when no
    explicit instance is given.

    While user created versions are configured calling the :meth:`.GlobalConfigurable.configure`
    method, global versions are configured by :func:`statescript.configuration.configure`
    which reaches the ``config_ready`` milestone.

    """
    CONFIG_NAMESPACE = None
    CONFIG_OPTIONS = {}

    def configure(self, **options):
        """Expected to be implemented by each object to proceed with actual configuration.

        Configure method will receive all the options whose name starts with ``CONFIG_NAMESPACE``
        (example ``json.isodates`` has ``json.`` namespace).

        If ``CONFIG_OPTIONS`` is specified options values will be converted with
        :func:`coerce_config` passing ``CONFIG_OPTIONS`` as the ``converters`` dictionary.

        """
        raise NotImplementedError('GlobalConfigurable objects must implement a configure method')

    @classmethod
    def create_global(cls):
        """Creates a global instance whose configuration is linked to ``statescript.config``."""
        if cls.CONFIG_NAMESPACE is None:
            raise StateConfigError('Must specify a CONFIG_NAMESPACE attribute in class for the '
                                   'namespace used by all configuration options.')

        obj = cls()
        config_ready.register(obj._load_config, persist_on_reset=True)
        return obj

    def _load_config(self):
        from statescript.configuration import config
        self.configure(**coerce_config(config, self.CONFIG_NAMESPACE,  self.CONFIG_OPTIONS))
