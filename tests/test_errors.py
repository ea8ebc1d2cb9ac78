import pytest

from expirycache.errors import (
    CacheError,
    KeyExpiredError,
    KeyNotFoundError,
    NilValueError,
)


@pytest.mark.parametrize(
    "exc_type, message",
    [
        (KeyNotFoundError, "key not found in cache"),
        (KeyExpiredError, "key has expired"),
        (NilValueError, "nil value is not allowed"),
    ],
)
def test_default_messages(exc_type, message):
    assert str(exc_type()) == message


@pytest.mark.parametrize(
    "exc_type, message",
    [
        (KeyNotFoundError, "key not found in cache"),
        (KeyExpiredError, "key has expired"),
        (NilValueError, "nil value is not allowed"),
    ],
)
def test_all_are_cache_errors(exc_type, message):
    with pytest.raises(CacheError) as info:
        raise exc_type()
    assert info.type is exc_type
    assert str(info.value) == message


@pytest.mark.parametrize(
    "exc_type, message",
    [
        (KeyNotFoundError, "key not found in cache"),
        (KeyExpiredError, "key has expired"),
    ],
)
def test_lookup_errors_are_lookup_errors(exc_type, message):
    err = exc_type()
    assert isinstance(err, LookupError)
    assert str(err) == message


def test_nil_value_is_value_error():
    err = NilValueError()
    assert isinstance(err, ValueError)
    assert isinstance(err, CacheError)
    assert not isinstance(err, LookupError)
    assert str(err) == "nil value is not allowed"


def test_custom_message_is_kept():
    err = KeyNotFoundError("missing: alpha")
    assert str(err) == "missing: alpha"


def test_errors_are_distinct():
    expired = KeyExpiredError()
    not_found = KeyNotFoundError()
    assert not isinstance(expired, KeyNotFoundError)
    assert not isinstance(not_found, KeyExpiredError)
    assert str(expired) == "key has expired"
    assert str(not_found) == "key not found in cache"