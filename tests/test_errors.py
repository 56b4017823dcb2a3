import pytest

from shaderir.internals.errors import ERR, REGISTRY, Category, InternalError, raise_internal_error


def test_registry_codes_are_unique_and_accessible() -> None:
    assert ERR.CE0101 is REGISTRY["CE0101"]
    assert ERR["CE0103"].category == Category.FUNC
    with pytest.raises(AttributeError):
        ERR.CE9999


def test_internal_error_carries_code_and_text() -> None:
    with pytest.raises(InternalError) as excinfo:
        raise_internal_error("CE0101", type="label")
    assert excinfo.value.code == "CE0101"
    assert str(excinfo.value) == "CE0101: cannot encode type 'label' in a mangled name"
    assert isinstance(excinfo.value, RuntimeError)


def test_missing_format_key_is_reported() -> None:
    with pytest.raises(KeyError):
        raise_internal_error("CE0103", index=1)


def test_unknown_code_is_reported() -> None:
    with pytest.raises(KeyError):
        raise_internal_error("CE9999")
