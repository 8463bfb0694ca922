import pytest

from generic_adapter.internals import errors as er
from generic_adapter.internals.report import Reporter, emit


def test_declared_field_errors():
    assert er.ERR.GA1001 is er.ERR_NOT_A_STRUCT
    assert er.ERR["GA1002"] is er.ERR_UNKNOWN_FIELD
    assert er.ERR_NOT_A_STRUCT.text == "argument does not reference a struct"
    assert er.ERR_UNKNOWN_FIELD.text == "struct has no field of the given name"


def test_unknown_code_lookup():
    with pytest.raises(AttributeError):
        er.ERR.GA9999


def test_make_error_picks_exception_class():
    assert isinstance(er.make_error("GA1001"), er.NotAStructError)
    assert isinstance(er.make_error("GA1002"), er.UnknownFieldError)
    assert isinstance(er.make_error("GA2001", value="1", type="x"), er.VerificationError)
    assert isinstance(er.make_error("GA3001", value="1", type="x"), er.ContractError)
    assert isinstance(er.make_error("GA4002", name="x"), er.UnknownTypeError)


def test_missing_format_key():
    with pytest.raises(KeyError) as exc_info:
        er.format_error("GA4002")
    assert exc_info.value.args[0].startswith("missing text key 'name' for GA4002")


def test_raise_error_message():
    with pytest.raises(er.GenericAdapterError) as exc_info:
        er.raise_error("GA4002", name="Widget")
    assert str(exc_info.value) == "GA4002: unknown type name 'Widget'"
    assert exc_info.value.message == "unknown type name 'Widget'"


def test_reporter_format_plain():
    r = Reporter("verify_int")
    assert not r.has_errors
    emit(r, er.ERR.GA2001, value="'x'", type="string")
    assert r.has_errors
    assert r.format(use_color=False) == (
        "verify_int: error [GA2001]: int parameter required, not 'x' (string)."
    )


def test_reporter_print_without_tty_is_plain(capsys):
    r = Reporter("op")
    r.error("GA3001", "cannot append to non-slice 1 (int)")
    r.print()
    assert capsys.readouterr().err == "op: error [GA3001]: cannot append to non-slice 1 (int).\n"


def test_reporter_color_output():
    r = Reporter("op")
    emit(r, er.ERR.GA4002, name="Widget")
    text = r.format(use_color=True)
    assert "\x1b[31m" in text
    assert "unknown type name 'Widget'." in text
