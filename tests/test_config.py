from __future__ import annotations

from decimal import Decimal

import pytest

from multicast.config import DEFAULT_SETTINGS, Settings


def test_default_settings() -> None:
    assert DEFAULT_SETTINGS.alert_threshold == Decimal("0.1")
    assert DEFAULT_SETTINGS.progress_steps == 10
    assert DEFAULT_SETTINGS.progress_pause == 0.0
    assert DEFAULT_SETTINGS.progress_file == "progress.txt"


def test_settings_from_env_overrides() -> None:
    settings = Settings.from_env(
        {
            "MULTICAST_ALERT_THRESHOLD": "0.25",
            "MULTICAST_PROGRESS_STEPS": "4",
            "MULTICAST_PROGRESS_PAUSE": "0.01",
            "MULTICAST_PROGRESS_FILE": "out.txt",
        }
    )

    assert settings == Settings(Decimal("0.25"), 4, 0.01, "out.txt")


def test_settings_from_env_ignores_blank_values() -> None:
    assert Settings.from_env({"MULTICAST_PROGRESS_STEPS": "  "}) == DEFAULT_SETTINGS


def test_settings_from_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MULTICAST_PROGRESS_STEPS", "5")

    assert Settings.from_env().progress_steps == 5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"alert_threshold": Decimal("-0.1")},
        {"progress_steps": 0},
        {"progress_pause": -1.0},
    ],
)
def test_settings_reject_invalid_values(kwargs) -> None:
    with pytest.raises(ValueError):
        Settings(**kwargs)


def test_settings_from_env_rejects_bad_threshold() -> None:
    with pytest.raises(ValueError):
        Settings.from_env({"MULTICAST_ALERT_THRESHOLD": "ten percent"})
