class RendererFactory(object):
    """
    Factory that creates one or multiple rendering engines.

    Rendering engines are the callables a web framework invokes to turn
    the values returned by a controller into a response body. Subclasses
    must implement the ``create`` method accordingly.

    """

    #: Here specify the list of engines for which this factory
    #: will create a rendering engine and their options.
    #: They must be specified like::
    #:
    #:   engines = {'state': {'content_type': 'application/javascript'}}
    #:
    #: Currently only supported option is ``content_type``.
    engines = {}

    @classmethod
    def create(cls, config, app_globals):  # pragma: no cover
        """
        Given the application configuration and application globals
        it must create a rendering engine for each one specified
        into the ``engines`` list.

        It must return a dictionary in the form::

            {'engine_name': rendering_engine_callable,
             'other_engine': other_rendering_callable}

        Rendering engine callables are callables in the form::

            func(template_name, template_vars,
                 cache_key=None, cache_type=None, cache_expire=None,
                 **render_params)

        ``render_params`` parameter will contain all the values
        provided by the caller for the specific engine.

        """
        raise NotImplementedError()
