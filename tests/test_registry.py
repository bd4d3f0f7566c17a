import pytest

from logdrain import REGISTRY, get_parser, parse
from logdrain.base import register


def test_heroku_parser_is_registered():
    assert get_parser("heroku") is parse
    assert get_parser("HEROKU") is parse


def test_unknown_parser_raises():
    with pytest.raises(KeyError):
        get_parser("does-not-exist")


def test_register_decorator_adds_parser():
    @register("TestSource")
    def fake(line):
        raise NotImplementedError

    try:
        assert get_parser("testsource") is fake
    finally:
        REGISTRY.pop("testsource", None)


def test_config_is_exported():
    import logdrain

    assert logdrain.config.ROUTER_STRICT in (True, False)
    assert "config" in logdrain.__all__
