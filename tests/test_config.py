from app import config
from app.config import SECRET_PARAMETERS, Settings, load_settings

SECRET_ENV_VARS = (
    "AVIATIONSTACK_API_KEY",
    "FLIGHTLABS_API_KEY",
    "FR24_API_KEY",
    "SERPAPI_API_KEY",
    "OPENAI_API_KEY",
    "AERODEX_SSM_PREFIX",
)


def _clear_secrets(monkeypatch):
    for name in SECRET_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_blank_secrets_are_treated_as_unset(monkeypatch):
    _clear_secrets(monkeypatch)
    monkeypatch.setenv("SERPAPI_API_KEY", "   ")
    monkeypatch.setenv("OPENAI_API_KEY", " sk-test ")

    loaded = Settings()

    assert loaded.serpapi_api_key is None
    assert loaded.openai_api_key == "sk-test"
    assert loaded.enabled_secrets() == ["openai_api_key"]


def test_explicit_blank_override_is_normalized(monkeypatch):
    _clear_secrets(monkeypatch)

    loaded = Settings(fr24_api_key="")

    assert loaded.fr24_api_key is None


def test_list_and_numeric_settings(monkeypatch):
    monkeypatch.setenv("AERODEX_CORS_ORIGINS", "https://a.test, https://b.test,")
    monkeypatch.setenv("PROVIDER_DEADLINE", "4.5")

    loaded = Settings()

    assert loaded.cors_origins == ["https://a.test", "https://b.test"]
    assert loaded.provider_deadline == 4.5


def test_load_settings_skips_ssm_without_prefix(monkeypatch):
    _clear_secrets(monkeypatch)

    def fail(prefix, name):
        raise AssertionError("SSM should not be queried")

    monkeypatch.setattr(config, "get_ssm_secret", fail)

    loaded = load_settings()

    assert loaded.enabled_secrets() == []


def test_load_settings_fills_missing_secrets_from_ssm(monkeypatch):
    _clear_secrets(monkeypatch)
    monkeypatch.setenv("AERODEX_SSM_PREFIX", "/aerodex/prod")
    monkeypatch.setenv("FR24_API_KEY", "from-env")
    requested = []

    def fake_ssm(prefix, name):
        requested.append((prefix, name))
        return "from-ssm" if name == "openai/api_key" else None

    monkeypatch.setattr(config, "get_ssm_secret", fake_ssm)

    loaded = load_settings(serpapi_api_key="override")

    assert loaded.openai_api_key == "from-ssm"
    assert loaded.fr24_api_key == "from-env"
    assert loaded.serpapi_api_key == "override"
    assert loaded.aviationstack_api_key is None
    requested_names = {name for _, name in requested}
    assert requested_names == set(SECRET_PARAMETERS.values()) - {"fr24/api_key", "serpapi/api_key"}
    assert all(prefix == "/aerodex/prod" for prefix, _ in requested)
