import logging

import pytest

from statescript.support.converters import asbool, asglobalname, aslogger


class TestAsBool(object):
    def test_asbool_truthy(self):
        assert asbool('true')
        assert asbool('yes')
        assert asbool('on')
        assert asbool('y')
        assert asbool('t')
        assert asbool(' 1 ')

    def test_asbool_falsy(self):
        assert not asbool('false')
        assert not asbool('no')
        assert not asbool('off')
        assert not asbool('n')
        assert not asbool('f')
        assert not asbool('0')

    def test_asbool_broken(self):
        with pytest.raises(ValueError):
            asbool('Test')

    def test_nonstring(self):
        assert asbool(1) is True
        assert asbool(None) is False


class TestAsLogger(object):
    def test_logger(self):
        logger = logging.getLogger('tests.converters')
        assert aslogger(logger) is logger

    def test_logger_name(self):
        assert aslogger('tests.converters') is logging.getLogger('tests.converters')

    def test_not_a_name(self):
        with pytest.raises(ValueError):
            aslogger(5)


class TestAsGlobalName(object):
    @pytest.mark.parametrize('name', ['__STATE__', 'window.__STATE__',
                                      'window.$app.state_1', '_'])
    def test_valid(self, name):
        assert asglobalname(name) == name

    def test_strips(self):
        assert asglobalname('  window.__STATE__ ') == 'window.__STATE__'

    @pytest.mark.parametrize('name', ['', 'window.', '.state', '1state', 'window["x"]',
                                      'a;alert(1)', 'x</script>', 'a b', 'a..b'])
    def test_invalid(self, name):
        with pytest.raises(ValueError):
            asglobalname(name)

    def test_not_a_string(self):
        with pytest.raises(ValueError):
            asglobalname(None)
