import pytest

from gqlcore.customerrors import CustomErrorsResolver, DroidNotFoundError


def test_droid_found():
    droid = CustomErrorsResolver().droid("2001")
    assert droid.name() == "R2-D2"
    assert droid.id() == "2001"


def test_other_droid_found():
    assert CustomErrorsResolver().droid("2000").name() == "C-3PO"


def test_droid_missing_raises():
    with pytest.raises(DroidNotFoundError) as info:
        CustomErrorsResolver().droid("9999")
    err = info.value
    assert err.code == "NotFound"
    assert err.message == "This is not the droid you are looking for"


def test_error_string():
    err = DroidNotFoundError("NotFound", "This is not the droid you are looking for")
    assert str(err) == "error [NotFound]: This is not the droid you are looking for"


def test_error_extensions():
    err = DroidNotFoundError("NotFound", "This is not the droid you are looking for")
    assert err.extensions() == {
        "code": "NotFound",
        "message": "This is not the droid you are looking for",
    }