import pytest

from statescript.configuration import config, configure
from statescript.configuration.milestones import _ConfigMilestoneTracker, config_ready
from statescript.configuration.utils import (GlobalConfigurable, StateConfigError,
                                             coerce_config, coerce_options)
from statescript.support.converters import asbool


class Action:
    called = 0
    def __call__(self):
        self.called += 1


class TestMilestones(object):
    def setup_method(self):
        self.milestone = _ConfigMilestoneTracker('test_milestone')

    def test_multiple_registration(self):
        a = Action()
        self.milestone.register(a)
        self.milestone.register(a)
        self.milestone.register(a)

        self.milestone.reach()
        assert a.called == 1

    def test_register_after_reach(self):
        a = Action()

        self.milestone.reach()
        self.milestone.register(a)
        assert a.called == 1

    def test_call_all(self):
        a = Action()
        a2 = Action()
        a3 = Action()

        self.milestone.register(a)
        self.milestone.register(a2)
        self.milestone.register(a3)

        self.milestone.reach()
        assert a.called == a2.called == a3.called == 1
        assert self.milestone.reached

    def test_reset_keeps_persistent_actions(self):
        persistent = Action()
        transient = Action()
        self.milestone.register(persistent, persist_on_reset=True)
        self.milestone.register(transient)
        self.milestone.reach()

        self.milestone._reset()
        assert not self.milestone.reached
        self.milestone.reach()

        assert persistent.called == 2
        assert transient.called == 1

    def test_failing_action_propagates(self):
        def fail():
            raise KeyError('missing option')

        self.milestone.register(fail)
        with pytest.raises(KeyError):
            self.milestone.reach()
        assert self.milestone.reached


class TemporaryGlobalConfigurable(GlobalConfigurable):
    pass


class TestGlobalConfigurable(object):
    def setup_method(self):
        config_ready._reset()

    def teardown_method(self):
        for action in config_ready._keep_on_reset[:]:
            default_object = getattr(action, '__self__', None)
            if default_object and isinstance(default_object, TemporaryGlobalConfigurable):
                config_ready._keep_on_reset.remove(action)

        configure()

    def test_requires_configure_implementation(self):
        class NoConfig(TemporaryGlobalConfigurable):
            CONFIG_NAMESPACE = 'fake.'

        NoConfig.create_global()
        with pytest.raises(NotImplementedError):
            config_ready.reach()

    def test_requires_namespace(self):
        class NoNameSpace(TemporaryGlobalConfigurable):
            def configure(self, **options):
                return options

        with pytest.raises(StateConfigError):
            NoNameSpace.create_global()

    def test_gets_configured_on_config_ready(self):
        class Configurable(TemporaryGlobalConfigurable):
            CONFIG_NAMESPACE = 'fake.'
            CONFIG_OPTIONS = {'enabled': asbool}
            _CONFIGURED = []

            def configure(self, **options):
                self._CONFIGURED.append(options)

        Configurable.create_global()
        configure({'fake.enabled': 'false', 'fake.name': 'x', 'other.enabled': 'true'})

        assert Configurable._CONFIGURED == [{'enabled': False, 'name': 'x'}]

    def test_keeps_on_milestone_reset(self):
        class Configurable(TemporaryGlobalConfigurable):
            CONFIG_NAMESPACE = 'fake.'
            _CONFIGURED = []

            def configure(self, **options):
                self._CONFIGURED.append(True)

        Configurable.create_global()
        configure()
        configure()

        assert len(Configurable._CONFIGURED) == 2


class TestConfigure(object):
    def teardown_method(self):
        configure()

    def test_replaces_options(self):
        configure({'json.isodates': True})
        configure({'state.global_name': '__APP__'})

        assert config == {'state.global_name': '__APP__'}

    def test_keyword_options(self):
        assert configure({'json.isodates': True}, debug=True) == {'json.isodates': True,
                                                                  'debug': True}


def test_coerce_options():
    options = {'enabled': 'yes', 'name': 'x'}
    assert coerce_options(options, {'enabled': asbool, 'missing': asbool}) == {'enabled': True}


def test_coerce_config():
    conf = {'state.enabled': 'no', 'state.name': 'x', 'json.enabled': 'yes'}
    assert coerce_config(conf, 'state.', {'enabled': asbool}) == {'enabled': False,
                                                                   'name': 'x'}
