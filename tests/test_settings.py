import pytest

from settings_file.errors import NotFoundError, TypeMismatchError
from settings_file.settings import SettingsBuilder
from settings_file.values import BooleanValue, IntegerValue, StringListValue, StringValue, TypedListValue


def _settings(**values):
    builder = SettingsBuilder()
    for name, value in values.items():
        builder.add(name, value)
    return builder.build()


def test_get_string_returns_stored_value() -> None:
    settings = _settings(test="value")
    assert settings.get("test") == StringValue("value")
    assert settings.get_string("test") == "value"
    assert settings.as_string("test") == "value"


def test_get_string_renders_other_variants() -> None:
    settings = _settings(number=42, flag=False, names=["a", "b", "c"], mixed=[1, True, "x"])
    assert settings.get_string("number") == "42"
    assert settings.get_string("flag") == "false"
    assert settings.get_string("names") == "a,b,c"
    assert settings.get_string("mixed") == "1,true,x"


def test_missing_setting_message() -> None:
    settings = _settings()
    with pytest.raises(NotFoundError) as excinfo:
        settings.get_string("test")
    assert str(excinfo.value) == "Setting: 'test', not found!"
    assert settings.find("test") is None
    assert settings.find_string("test") is None


def test_get_int_parses_numeric_text() -> None:
    settings = _settings(number=7, text="-12", word="seven", flag=True)
    assert settings.get_int("number") == 7
    assert settings.get_int("text") == -12
    with pytest.raises(TypeMismatchError):
        settings.get_int("word")
    with pytest.raises(TypeMismatchError):
        settings.get_int("flag")
    with pytest.raises(NotFoundError):
        settings.get_int("missing")


def test_find_int_returns_none_on_failure() -> None:
    settings = _settings(number=3, word="three")
    assert settings.find_int("number") == 3
    assert settings.find_int("word") is None
    assert settings.find_int("missing") is None


@pytest.mark.parametrize("token", ["Yes", "Y", "1", "True", "T", " yes ", "TRUE"])
def test_get_bool_truthy_strings(token: str) -> None:
    assert _settings(flag=token).get_bool("flag") is True


@pytest.mark.parametrize("token", ["no", "N", "0", "false", "F"])
def test_get_bool_falsy_strings(token: str) -> None:
    assert _settings(flag=token).get_bool("flag") is False


def test_get_bool_rejects_other_values() -> None:
    settings = _settings(flag=True, word="maybe", number=1)
    assert settings.get_bool("flag") is True
    with pytest.raises(TypeMismatchError):
        settings.get_bool("word")
    # only booleans and strings are coerced
    with pytest.raises(TypeMismatchError):
        settings.get_bool("number")
    with pytest.raises(NotFoundError):
        settings.get_bool("missing")
    assert settings.find_bool("word") is None
    assert settings.find_bool("missing") is None


def test_get_strings_only_for_string_lists() -> None:
    settings = _settings(names=["a", "b"], word="a,b")
    assert settings.get_strings("names") == ["a", "b"]
    with pytest.raises(TypeMismatchError):
        settings.get_strings("word")
    # absence is reported the same way as a wrong type
    with pytest.raises(TypeMismatchError):
        settings.get_strings("missing")


def test_get_list_checks_element_type() -> None:
    settings = _settings(numbers=[1, 2, 3], flags=[True, False], names=["a"])
    assert settings.get_list("numbers", int) == [1, 2, 3]
    assert settings.get_list("flags", bool) == [True, False]
    with pytest.raises(TypeMismatchError):
        settings.get_list("numbers", str)
    with pytest.raises(TypeMismatchError):
        settings.get_list("flags", int)
    with pytest.raises(TypeMismatchError):
        settings.get_list("names", str)
    with pytest.raises(TypeMismatchError):
        settings.get_list("missing", int)


def test_typed_list_of_strings_is_explicit() -> None:
    settings = SettingsBuilder().add("names", TypedListValue(("a", "b"))).build()
    assert settings.get_list("names", str) == ["a", "b"]
    with pytest.raises(TypeMismatchError):
        settings.get_strings("names")


def test_iteration_and_size() -> None:
    settings = _settings(a=1, b="two")
    assert len(settings) == 2
    assert set(settings) == {"a", "b"}
    assert "a" in settings
    assert dict(settings.items()) == {"a": IntegerValue(1), "b": StringValue("two")}


def test_round_trip_through_builder() -> None:
    values = {
        "number": IntegerValue(5),
        "flag": BooleanValue(True),
        "text": StringValue("hello"),
        "names": StringListValue(("x", "y")),
        "items": TypedListValue((1.5, 2.5)),
    }
    builder = SettingsBuilder()
    for name, value in values.items():
        builder.add(name, value)
    settings = builder.build()
    for name, value in values.items():
        assert settings.get(name) == value
