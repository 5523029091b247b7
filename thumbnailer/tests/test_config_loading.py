import pytest
from pydantic import ValidationError

from thumbnailer.core.extension import ConvertibleExtension
from thumbnailer.core.features import HEIF_ENV_VAR
from thumbnailer.core.load.load import ConfigError, load_config


def test_defaults_without_file():
    config = load_config()
    assert config.features.heif is False
    assert config.skip_extensions == []
    assert config.logging.enabled is True
    assert config.logging.directory == ".thumbnailer/logs"


def test_load_full_config(config_file):
    path = config_file(
        """features:
  heif: true
skip_extensions:
  - PNG
  - avif
logging:
  enabled: false
  directory: ./logs
"""
    )

    config = load_config(path)
    assert config.features.heif is True
    assert config.skip_extensions == [ConvertibleExtension.PNG, ConvertibleExtension.AVIF]
    assert config.logging.enabled is False
    assert config.logging.directory == "./logs"


def test_skip_extensions_serialize_as_strings(config_file):
    config = load_config(config_file("skip_extensions: [Gif, svgz]\n"))
    assert config.model_dump(mode="json")["skip_extensions"] == ["gif", "svgz"]


def test_unknown_skip_extension_is_named(config_file):
    with pytest.raises(ValidationError) as exc_info:
        load_config(config_file("skip_extensions: [png, raw]\n"))
    assert "unsupported extension: 'raw'" in str(exc_info.value)


def test_extended_skip_extension_requires_heif(config_file):
    with pytest.raises(ValidationError, match="'heic'"):
        load_config(config_file("skip_extensions: [heic]\n"))


def test_environment_overrides_file(monkeypatch, config_file):
    path = config_file("features:\n  heif: false\nskip_extensions: [heic]\n")
    monkeypatch.setenv(HEIF_ENV_VAR, "1")

    config = load_config(path)
    assert config.features.heif is True
    assert config.skip_extensions == [ConvertibleExtension.HEIC]


def test_environment_applies_without_file(monkeypatch):
    monkeypatch.setenv(HEIF_ENV_VAR, "on")
    assert load_config().features.heif is True


def test_empty_file_uses_defaults(config_file):
    config = load_config(config_file(""))
    assert config.features.heif is False


def test_non_mapping_file(config_file):
    with pytest.raises(ConfigError, match="expected a mapping"):
        load_config(config_file("- png\n- jpg\n"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="File not found"):
        load_config(tmp_path / "nope.yaml")


def test_invalid_log_directory(config_file):
    with pytest.raises(ValidationError, match="Path cannot be empty"):
        load_config(config_file("logging:\n  directory: '  '\n"))


def test_explicit_heif_wins_over_file_and_environment(monkeypatch, config_file):
    path = config_file("features:\n  heif: false\nskip_extensions: [heic]\n")

    config = load_config(path, heif=True)
    assert config.features.heif is True
    assert config.skip_extensions == [ConvertibleExtension.HEIC]

    monkeypatch.setenv(HEIF_ENV_VAR, "1")
    with pytest.raises(ValidationError, match="'heic'"):
        load_config(path, heif=False)


@pytest.mark.parametrize("features", ["true", "on", "[heif]"])
def test_non_mapping_features(config_file, features):
    with pytest.raises(ConfigError, match="'features' must be a mapping"):
        load_config(config_file(f"features: {features}\n"))
