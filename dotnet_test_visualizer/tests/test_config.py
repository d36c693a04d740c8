from pathlib import Path

import pytest

from dotnet_test_visualizer.core.config import CONFIG_ENV_VAR, Config
from dotnet_test_visualizer.core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_defaults() -> None:
    config = Config()
    assert config.fast_threshold == 0.05
    assert config.normal_threshold == 0.1
    assert config.color is True
    assert config.verbosity == 0


def test_marker_for_thresholds() -> None:
    config = Config()
    assert config.marker_for(0.05) == "🚀"
    assert config.marker_for(0.07) == "🕐"
    assert config.marker_for(0.1) == "🕐"
    assert config.marker_for(2.0) == "🐌"


def test_loads_config_file_from_cwd(tmp_path: Path) -> None:
    (tmp_path / "dotnet_test_visualizer.toml").write_text(
        "[dotnet_test_visualizer]\nfast_threshold = 0.5\nnormal_threshold = 1.5\ncolor = false\n"
    )
    config = Config()
    assert config.fast_threshold == 0.5
    assert config.normal_threshold == 1.5
    assert config.color is False


def test_loads_tool_table_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text("[tool.dotnet_test_visualizer]\nshow_header = false\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert Config().show_header is False


def test_explicit_values_override_file(tmp_path: Path) -> None:
    (tmp_path / "dotnet_test_visualizer.toml").write_text(
        "[dotnet_test_visualizer]\nfast_threshold = 0.08\n"
    )
    assert Config(fast_threshold=0.01).fast_threshold == 0.01


def test_explicit_value_equal_to_default_overrides_file(tmp_path: Path) -> None:
    (tmp_path / "dotnet_test_visualizer.toml").write_text(
        "[dotnet_test_visualizer]\nfast_threshold = 0.02\ncolor = false\n"
    )
    config = Config(fast_threshold=0.05, color=True)
    assert config.fast_threshold == 0.05
    assert config.color is True


@pytest.mark.parametrize(
    "line",
    [
        'fast_threshold = "fast"',
        'color = "yes"',
        "verbosity = 1.5",
        "verbosity = true",
        "log_file = 3",
    ],
)
def test_wrongly_typed_file_value_raises(tmp_path: Path, line: str) -> None:
    (tmp_path / "dotnet_test_visualizer.toml").write_text(f"[dotnet_test_visualizer]\n{line}\n")
    with pytest.raises(ConfigurationError):
        Config()


def test_integer_threshold_in_file_is_accepted(tmp_path: Path) -> None:
    (tmp_path / "dotnet_test_visualizer.toml").write_text(
        "[dotnet_test_visualizer]\nfast_threshold = 1\nnormal_threshold = 2\n"
    )
    config = Config()
    assert config.fast_threshold == 1.0
    assert isinstance(config.fast_threshold, float)


def test_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / "dotnet_test_visualizer.toml").write_text("not = [valid")
    with pytest.raises(ConfigurationError):
        Config()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"fast_threshold": -1.0},
        {"fast_threshold": 1.0, "normal_threshold": 0.5},
        {"verbosity": 4},
    ],
)
def test_invalid_values_raise(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        Config(**kwargs)


def test_round_trip_dict() -> None:
    config = Config(fast_threshold=0.02, show_tree=False)
    assert Config.from_dict(config.to_dict()).show_tree is False
