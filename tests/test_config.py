from pathlib import Path

from rhymer.config import RhymerSettings


def test_settings_defaults_from_empty_environment():
    settings = RhymerSettings.from_env({})

    assert settings.dict_path is None
    assert settings.strict_rhymes is False
    assert settings.log_level is None


def test_settings_read_environment():
    settings = RhymerSettings.from_env(
        {
            "RHYMER_DICT_PATH": "/data/reduxdict",
            "RHYMER_STRICT_RHYMES": "Yes",
            "RHYMER_LOG_LEVEL": "debug",
        }
    )

    assert settings.dict_path == Path("/data/reduxdict")
    assert settings.strict_rhymes is True
    assert settings.log_level == "debug"


def test_settings_ignore_blank_path_and_false_flags():
    settings = RhymerSettings.from_env({"RHYMER_DICT_PATH": "  ", "RHYMER_STRICT_RHYMES": "off"})

    assert settings.dict_path is None
    assert settings.strict_rhymes is False


def test_with_overrides_only_replaces_given_values():
    base = RhymerSettings(dict_path=Path("a"), strict_rhymes=True, log_level="INFO")

    assert base.with_overrides() == base
    assert base.with_overrides(strict_rhymes=False).strict_rhymes is False
    assert base.with_overrides(dict_path="b").dict_path == Path("b")
    assert base.with_overrides(log_level="DEBUG").log_level == "DEBUG"
