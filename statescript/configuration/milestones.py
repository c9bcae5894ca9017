# -*- coding: utf-8 -*-
"""
Utilities for lazy resolution of configurations.

Global objects, like the default JSON encoder and the default state
serializer, exist before the application configuration is known. They
register on the ``config_ready`` milestone to load their options
once :func:`statescript.configuration.configure` is called.

"""

from logging import getLogger
log = getLogger(__name__)


class _ConfigMilestoneTracker(object):
    """Tracks actions that need to be performed
    when a specific configuration point is reached
    and required options are correctly initialized

    """
    def __init__(self, name):
        self.name = name
        self._actions = dict()
        self._reached = False
        self._keep_on_reset = []

    @property
    def reached(self):
        return self._reached

    def register(self, action, persist_on_reset=False):
        """Registers an action to be called on milestone completion.

        If milestone is already passed action is immediately called.
        Actions registered with ``persist_on_reset`` are registered
        again every time the milestone is reset, so they run on each
        reconfiguration.

        """
        if persist_on_reset:
            self._keep_on_reset.append(action)

        if self._reached:
            log.debug('%s milestone passed, calling %s directly', self.name, action)
            action()
        else:
            log.debug('Register %s to be called when %s reached', action, self.name)
            self._actions[id(action)] = action

    def reach(self):
        """Marks the milestone as reached.

        Runs the registered actions. Calling this
        method multiple times should lead to nothing.

        """
        log.debug('%s milestone reached', self.name)

        try:
            while True:
                try:
                    __, action = self._actions.popitem()
                except KeyError:
                    break
                action()
        finally:
            self._reached = True

    def _reset(self):
        """Brings the milestone back to its initial state.

        Persistent actions are registered again, everything else is lost.
        """
        self._reached = False
        self._actions = dict()
        for action in self._keep_on_reset:
            self.register(action)


config_ready = _ConfigMilestoneTracker('config_ready')
