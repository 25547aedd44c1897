from __future__ import annotations

from pathlib import Path

from app.settings import Settings


def test_settings_loads_values_from_env_file(tmp_path: Path, monkeypatch) -> None:
    env_file = tmp_path / "test.env"
    env_file.write_text(
        "ORACLE_API_KEY=key-from-file\nORACLE_MODEL=google/gemini-2.5-flash\n",
        encoding="utf-8",
    )

    monkeypatch.delenv("ORACLE_API_KEY", raising=False)
    monkeypatch.delenv("ORACLE_MODEL", raising=False)

    settings = Settings(_env_file=str(env_file))

    assert settings.oracle_api_key == "key-from-file"
    assert settings.oracle_model == "google/gemini-2.5-flash"


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("ORACLE_API_KEY", raising=False)
    monkeypatch.delenv("ORACLE_BASE_URL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.oracle_api_key is None
    assert settings.oracle_base_url == "https://ai.gateway.lovable.dev/v1"
    assert settings.oracle_timeout_seconds == 60.0
    assert settings.log_level == "INFO"
