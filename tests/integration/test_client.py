"""
Integration tests for the high-level VaultClient.
"""

import shutil

import pytest
from confvault import VaultClient, VaultSettings
from confvault.domain.identifier import identify
from confvault.errors import RunAbortedError, StorageError, ValidationError


@pytest.fixture
def settings(tmp_path):
    return VaultSettings(
        staging_dir=tmp_path / "staging",
        store_path=tmp_path / "secrets.tsv",
    )


@pytest.fixture
def client(settings):
    client = VaultClient.from_settings(settings)
    client.start_run()
    return client


def test_redact_line(client, settings):
    """Test secrets are replaced by redaction tokens."""
    with client.capture():
        line = client.redact("username admin password 7 094F471A1A0A", "094F471A1A0A")

    identifier = identify("094F471A1A0A")
    assert line == f"username admin password 7 <secret hidden:{identifier}>"
    assert "094F471A1A0A" not in line

    report = client.finish_run()
    assert report.entries_written == 1
    assert settings.store_path.read_text(encoding="utf-8") == f"{identifier}\t094F471A1A0A\n"


def test_custom_token_format(settings):
    """Test the redaction token format is configurable."""
    from confvault.sdk.controller import RunController

    client = VaultClient(RunController.from_settings(settings), token_format="!{identifier}!")
    client.start_run()

    with client.capture():
        line = client.redact("key s3cr3t", "s3cr3t")

    assert line == f"key !{identify('s3cr3t')}!"


def test_capture_ends_session_on_error(client):
    """Test the session is closed when the body raises."""
    with pytest.raises(ValidationError):
        with client.capture():
            client.protect("")

    assert client.controller.current_session is None


def test_protect_outside_capture(client):
    """Test protect requires an open session."""
    with pytest.raises(StorageError):
        client.protect("hunter2")


def test_start_run_failure(tmp_path):
    """Test run-fatal start raises RunAbortedError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    client = VaultClient.from_settings(
        VaultSettings(staging_dir=blocker / "staging", store_path=tmp_path / "secrets.tsv")
    )

    with pytest.raises(RunAbortedError):
        client.start_run()


def test_finish_run_store_failure(tmp_path):
    """Test a failed store write raises RunAbortedError."""
    client = VaultClient.from_settings(
        VaultSettings(staging_dir=tmp_path / "staging", store_path=tmp_path / "missing" / "s.tsv")
    )
    client.start_run()
    with client.capture():
        client.protect("hunter2")

    with pytest.raises(RunAbortedError):
        client.finish_run()


def test_finish_run_cleanup_failure_is_not_fatal(client, settings, monkeypatch):
    """Test a cleanup-only failure still returns the report."""
    with client.capture():
        client.protect("hunter2")

    def refuse(path, *args, **kwargs):
        raise PermissionError(f"cannot remove {path}")

    monkeypatch.setattr(shutil, "rmtree", refuse)

    report = client.finish_run()

    assert report.entries_written == 1
    assert settings.staging_dir.exists()
