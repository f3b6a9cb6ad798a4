from settings_file.arguments import flag, to_arguments
from settings_file.settings import SettingsBuilder


def test_flag_prefix_depends_on_name_length() -> None:
    assert flag("a", "1") == "-a=1"
    assert flag("ab", "1") == "--ab=1"


def test_to_arguments_renders_values_as_strings() -> None:
    settings = SettingsBuilder().add("v", True).add("names", ["x", "y"]).add("port", 8080).build()
    assert sorted(to_arguments(settings)) == ["--names=x,y", "--port=8080", "-v=true"]


def test_to_arguments_sorted() -> None:
    settings = SettingsBuilder().add("zeta", "z").add("alpha", "a").add("m", 1).build()
    assert to_arguments(settings, sort_keys=True) == ["--alpha=a", "-m=1", "--zeta=z"]


def test_to_arguments_empty() -> None:
    assert to_arguments(SettingsBuilder().build()) == []
