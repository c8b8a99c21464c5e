"""Tests for loading SMTP settings at startup."""
import pytest

from marketplace_notifications.exceptions import SmtpSettingsError
from marketplace_notifications.models.smtp_settings import SmtpSettings
from conftest import FakeConfigRepository, SMTP_CONFIG


def test_loads_and_parses_settings():
    settings = SmtpSettings.from_config_repository(FakeConfigRepository(SMTP_CONFIG))

    assert settings.ssl is True
    assert settings.port == 587
    assert settings.smtp_host == "smtp.contoso.com"
    assert settings.user_name == "smtp-user"


@pytest.mark.parametrize("key, value", [
    ("SMTPSslEnabled", "enabled"),
    ("SMTPPort", "five-eight-seven"),
])
def test_invalid_values_raise_settings_error(key, value):
    config_repo = FakeConfigRepository({**SMTP_CONFIG, key: value})

    with pytest.raises(SmtpSettingsError) as exc_info:
        SmtpSettings.from_config_repository(config_repo)

    assert exc_info.value.key == key


def test_missing_port_raises_settings_error():
    values = dict(SMTP_CONFIG)
    del values["SMTPPort"]

    with pytest.raises(SmtpSettingsError):
        SmtpSettings.from_config_repository(FakeConfigRepository(values))
