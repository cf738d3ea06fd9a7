"""Tests for configuration management."""
from decimal import Decimal

import pytest

from config.settings import Settings

ENV_VARS = (
    'ABCBANK_MAXI_HIGH_RATE',
    'ABCBANK_MAXI_LOW_RATE',
    'ABCBANK_WITHDRAWAL_WINDOW_DAYS',
    'ABCBANK_DAYS_IN_YEAR',
    'ABCBANK_MAX_TRANSACTION_AMOUNT',
    'ABCBANK_LOG_FILE',
    'ABCBANK_LOG_LEVEL',
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove abcbank variables and undo anything load_dotenv sets."""
    for name in ENV_VARS:
        # setenv first so monkeypatch restores the variable to absent afterwards
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return monkeypatch


def test_settings_defaults():
    """Test that all default values are correctly set."""
    settings = Settings()

    assert settings.maxi_savings_high_rate == Decimal('0.05')
    assert settings.maxi_savings_low_rate == Decimal('0.01')
    assert settings.withdrawal_window_days == 10
    assert settings.days_in_year == 365
    assert settings.max_transaction_amount is None
    assert settings.log_file == 'abcbank.log'
    assert settings.log_level == 'INFO'


def test_settings_load(clean_env, tmp_path):
    """Test loading Settings from environment variables."""
    clean_env.setenv('ABCBANK_MAXI_HIGH_RATE', '0.04')
    clean_env.setenv('ABCBANK_WITHDRAWAL_WINDOW_DAYS', '7')
    clean_env.setenv('ABCBANK_MAX_TRANSACTION_AMOUNT', '1000000')
    clean_env.setenv('ABCBANK_LOG_LEVEL', 'debug')

    settings = Settings.load(str(tmp_path / 'missing.env'))

    assert settings.maxi_savings_high_rate == Decimal('0.04')
    assert settings.maxi_savings_low_rate == Decimal('0.01')
    assert settings.withdrawal_window_days == 7
    assert settings.max_transaction_amount == Decimal('1000000')
    assert settings.log_level == 'DEBUG'


def test_settings_load_from_dotenv(clean_env, tmp_path):
    """Values in a .env file are picked up, environment values win."""
    env_file = tmp_path / '.env'
    env_file.write_text('ABCBANK_MAXI_LOW_RATE=0.02\nABCBANK_DAYS_IN_YEAR=360\n', encoding='utf-8')
    clean_env.setenv('ABCBANK_DAYS_IN_YEAR', '366')

    settings = Settings.load(str(env_file))

    assert settings.maxi_savings_low_rate == Decimal('0.02')
    assert settings.days_in_year == 366


def test_settings_load_invalid_decimal(clean_env, tmp_path):
    """Test that loading fails when a rate is not a number."""
    clean_env.setenv('ABCBANK_MAXI_LOW_RATE', 'one percent')

    with pytest.raises(ValueError, match="ABCBANK_MAXI_LOW_RATE must be a decimal number"):
        Settings.load(str(tmp_path / 'missing.env'))


def test_settings_load_invalid_integer(clean_env, tmp_path):
    """Test that loading fails when the window is not an integer."""
    clean_env.setenv('ABCBANK_WITHDRAWAL_WINDOW_DAYS', 'ten')

    with pytest.raises(ValueError, match="ABCBANK_WITHDRAWAL_WINDOW_DAYS must be an integer"):
        Settings.load(str(tmp_path / 'missing.env'))


def test_settings_load_non_finite_decimal(clean_env, tmp_path):
    """Test that loading fails for NaN rates."""
    clean_env.setenv('ABCBANK_MAXI_HIGH_RATE', 'NaN')

    with pytest.raises(ValueError, match="must be a finite number"):
        Settings.load(str(tmp_path / 'missing.env'))


@pytest.mark.parametrize(
    'overrides, message',
    [
        ({'maxi_savings_low_rate': Decimal('-0.01')}, 'must not be negative'),
        ({'withdrawal_window_days': 0}, 'withdrawal_window_days'),
        ({'days_in_year': 0}, 'days_in_year'),
        ({'max_transaction_amount': Decimal('0')}, 'max_transaction_amount'),
    ],
)
def test_settings_validation(overrides, message):
    """Invalid values are rejected on construction."""
    with pytest.raises(ValueError, match=message):
        Settings(**overrides)


def test_settings_log_level_is_normalised():
    """Lower-case level names are accepted."""
    assert Settings(log_level='warning').log_level == 'WARNING'


def test_settings_load_invalid_log_level(clean_env, tmp_path):
    """Test that loading fails for an unknown log level."""
    clean_env.setenv('ABCBANK_LOG_LEVEL', 'LOUD')

    with pytest.raises(ValueError, match="log_level must be a logging level name"):
        Settings.load(str(tmp_path / 'missing.env'))
