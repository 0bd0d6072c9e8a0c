import pytest

from conftest import LinterWithErrors
from erb_lint.config import RunnerConfig, deep_merge, deep_stringify_keys, load_config_file
from erb_lint.exceptions import ConfigNotFoundError, ConfigParseError, ConfigValidationError, LinterNotFoundError
from erb_lint.linters import FinalNewline
from erb_lint.registry import LinterRegistry


@pytest.fixture
def registry():
    return LinterRegistry([LinterWithErrors, FinalNewline])


def test_deep_stringify_keys():
    assert deep_stringify_keys({1: {"a": [{2: "x"}]}}) == {"1": {"a": [{"2": "x"}]}}


def test_deep_merge_overrides_scalars_and_merges_mappings():
    base = {"linters": {"FinalNewline": {"enabled": True, "present": True}}, "glob": "a"}
    override = {"linters": {"FinalNewline": {"present": False}}, "glob": "b"}

    merged = deep_merge(base, override)

    assert merged == {"linters": {"FinalNewline": {"enabled": True, "present": False}}, "glob": "b"}
    # Neither input is touched
    assert base["linters"]["FinalNewline"]["present"] is True
    assert override == {"linters": {"FinalNewline": {"present": False}}, "glob": "b"}


def test_deep_merge_accumulates_exclude_lists():
    merged = deep_merge({"exclude": ["a", "b"]}, {"exclude": ["b", "c"]})
    assert merged == {"exclude": ["a", "b", "c"]}


def test_missing_sections_default_to_empty(registry):
    config = RunnerConfig(None, registry)
    assert config.global_exclude == []
    assert config.linters_config == {}
    assert config.glob is None
    assert config.for_linter("FinalNewline").enabled is False


def test_for_linter_unions_global_exclude(registry):
    config = RunnerConfig(
        {"exclude": ["vendor/**"], "linters": {"FinalNewline": {"enabled": True, "exclude": ["tmp/*"]}}},
        registry,
    )
    linter_config = config.for_linter(FinalNewline)
    assert linter_config.enabled is True
    assert linter_config.exclude == ["tmp/*", "vendor/**"]
    assert config.for_linter("LinterWithErrors").exclude == ["vendor/**"]


def test_for_linter_does_not_mutate_config(registry):
    config = RunnerConfig({"exclude": ["x"], "linters": {"FinalNewline": {"exclude": ["y"]}}}, registry)
    config.for_linter("FinalNewline")
    assert config.for_linter("FinalNewline").exclude == ["y", "x"]
    assert config.to_dict()["linters"]["FinalNewline"]["exclude"] == ["y"]


def test_for_linter_accepts_linter_name(registry):
    assert RunnerConfig({}, registry).for_linter("final_newline").present is True


def test_for_linter_unknown_name(registry):
    with pytest.raises(LinterNotFoundError, match="Unknown: linter not found"):
        RunnerConfig({}, registry).for_linter("Unknown")


def test_for_linter_rejects_other_types(registry):
    with pytest.raises(TypeError):
        RunnerConfig({}, registry).for_linter(42)


def test_for_linter_invalid_option(registry):
    config = RunnerConfig({"linters": {"FinalNewline": {"presnt": False}}}, registry)
    with pytest.raises(ConfigValidationError) as exc_info:
        config.for_linter("FinalNewline")
    assert exc_info.value.linter_name == "FinalNewline"
    assert exc_info.value.key == "presnt"


def test_merge_and_merge_in_place_agree(registry):
    a = {"exclude": ["a/*"], "linters": {"FinalNewline": {"enabled": True, "exclude": ["fa"]}}}
    b = {"exclude": ["b/*"], "linters": {"FinalNewline": {"present": False, "exclude": ["fb"]}}}

    merged = RunnerConfig(a, registry).merge(RunnerConfig(b, registry))
    in_place = RunnerConfig(a, registry)
    returned = in_place.merge_in_place(RunnerConfig(b, registry))

    assert returned is in_place
    assert merged == in_place
    assert RunnerConfig(a, registry).to_dict() == a


def test_merged_excludes_are_union_of_all_sources(registry):
    a = RunnerConfig({"exclude": ["ga"], "linters": {"FinalNewline": {"exclude": ["la"], "present": True}}}, registry)
    b = RunnerConfig({"exclude": ["gb"], "linters": {"FinalNewline": {"exclude": ["lb"], "present": False}}}, registry)

    linter_config = a.merge(b).for_linter("FinalNewline")

    assert sorted(linter_config.exclude) == ["ga", "gb", "la", "lb"]
    assert linter_config.present is False


def test_default_config_enables_builtin_linters():
    config = RunnerConfig.default(LinterRegistry.with_builtin_linters())
    for name in ["FinalNewline", "RightTrim", "SpaceAroundErbTag", "SpaceIndentation", "TrailingWhitespace"]:
        assert config.for_linter(name).enabled is True


def test_default_for_only_layers_defaults_when_asked(registry):
    plain = RunnerConfig({"linters": {"LinterWithErrors": {"enabled": True}}}, registry)
    assert RunnerConfig.default_for(plain) == plain

    layered = RunnerConfig({"EnableDefaultLinters": True, "linters": {"RightTrim": {"enabled": False}}}, registry)
    resolved = RunnerConfig.default_for(layered).to_dict()
    assert resolved["linters"]["FinalNewline"] == {"enabled": True}
    assert resolved["linters"]["RightTrim"] == {"enabled": False}


def test_load_missing_file_is_distinct_from_empty_file(tmp_path, registry):
    with pytest.raises(ConfigNotFoundError, match="does not exist"):
        load_config_file(tmp_path / "missing.toml", registry)

    empty = tmp_path / "empty.toml"
    empty.write_text("", encoding="utf-8")
    assert load_config_file(empty, registry).to_dict() == {}


def test_load_config_file(tmp_path, registry):
    path = tmp_path / ".erb-lint.toml"
    path.write_text(
        'exclude = ["vendor/**"]\n\n[linters.FinalNewline]\nenabled = true\npresent = false\n',
        encoding="utf-8",
    )
    config = load_config_file(path, registry)
    linter_config = config.for_linter("FinalNewline")
    assert linter_config.present is False
    assert linter_config.exclude == ["vendor/**"]


def test_load_config_file_syntax_error(tmp_path, registry):
    path = tmp_path / "broken.toml"
    path.write_text("linters = [", encoding="utf-8")
    with pytest.raises(ConfigParseError, match="error parsing config"):
        load_config_file(path, registry)
