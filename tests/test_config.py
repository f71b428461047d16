from pathlib import Path

from verificile.config import Settings, get_settings, set_settings


def test_env_prefix(monkeypatch, tmp_path):
    monkeypatch.setenv("VERIFICILE_RECURSIVE", "true")
    monkeypatch.setenv("VERIFICILE_REPORT_DIR", str(tmp_path / "reports"))

    settings = Settings()

    assert settings.recursive is True
    assert settings.interactive is False
    assert settings.get_report_dir() == tmp_path / "reports"


def test_forensic_implies_verbose():
    settings = Settings(forensic=True)

    assert settings.verbose is True


def test_report_dir_defaults_to_cwd(monkeypatch, tmp_path):
    monkeypatch.delenv("VERIFICILE_REPORT_DIR", raising=False)
    monkeypatch.chdir(tmp_path)

    assert Settings().get_report_dir() == Path.cwd()


def test_config_dir_follows_xdg(monkeypatch, tmp_path):
    monkeypatch.delenv("VERIFICILE_CONFIG_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert Settings().get_config_dir() == tmp_path / "xdg" / "verificile"


def test_types_file_resolution(tmp_path):
    config_dir = tmp_path / "config"
    settings = Settings(config_dir=config_dir)
    assert settings.get_types_file() is None

    config_dir.mkdir()
    default_types = config_dir / "types.yaml"
    default_types.write_text("image/heic: heic\n", encoding="utf-8")
    assert settings.get_types_file() == default_types

    # An explicit path wins even when it does not exist yet.
    explicit = tmp_path / "missing.yaml"
    settings = Settings(config_dir=config_dir, types_file=explicit)
    assert settings.get_types_file() == explicit


def test_set_settings_replaces_global(override_settings):
    assert get_settings() is override_settings

    replacement = Settings(report_dir=override_settings.report_dir, recursive=True)
    set_settings(replacement)

    assert get_settings() is replacement
