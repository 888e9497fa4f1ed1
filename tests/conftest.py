import pytest

from automation_readiness.models.inputs import ReadinessInputs
from automation_readiness.services.input_store import InputStore


@pytest.fixture()
def default_inputs():
    return ReadinessInputs()


@pytest.fixture()
def high_variance_inputs():
    return ReadinessInputs(
        process_volume=1000,
        variance=90,
        exception_rate=10,
        data_quality=70,
        system_access=60,
        compliance_sensitivity=30,
    )


@pytest.fixture()
def store(tmp_path):
    return InputStore(tmp_path / "store", "automationReadinessInputs")


# -----------------------------
# Keep the CLI off the real home dir
# -----------------------------
@pytest.fixture()
def isolated_settings(monkeypatch, tmp_path):
    from automation_readiness.config import settings

    monkeypatch.setattr(settings, "storage_dir", tmp_path / "cli-store")
    monkeypatch.setattr(settings, "csv_filename", str(tmp_path / "out.csv"))
    return settings
