"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Test that core types can be imported."""
    from eventual import Err, Nothing, Ok, Option, Result, Some

    assert Ok is not None
    assert Err is not None
    assert Some is not None
    assert Nothing is not None
    assert Result is not None
    assert Option is not None


def test_import_variants():
    """Test that raw variants can be imported."""
    from eventual import ErrValue, NothingValue, OkValue, SomeValue

    assert SomeValue(1).value == 1
    assert NothingValue() == NothingValue()
    assert OkValue(1).value == 1
    assert ErrValue('e').error == 'e'


def test_import_async():
    """Test that async containers can be imported."""
    from eventual import AsyncOption, AsyncResult
    from eventual.async_ import Pending

    assert AsyncOption is not None
    assert AsyncResult is not None
    assert Pending is not None


def test_import_errors():
    """Test that the error hierarchy can be imported."""
    from eventual import EmptyValueError, EventualError, PendingDepthError, UnwrapError

    assert issubclass(UnwrapError, EventualError)
    assert issubclass(EmptyValueError, UnwrapError)
    assert issubclass(PendingDepthError, EventualError)


def test_public_api_matches_all():
    """Every name in __all__ is importable from the top-level package."""
    import eventual

    for name in eventual.__all__:
        assert hasattr(eventual, name), name
