"""
Client Example - Exception-style capture with the high-level client.
"""

import tempfile
from pathlib import Path

from confvault import VaultClient, VaultSettings


def main():
    workdir = Path(tempfile.mkdtemp())
    settings = VaultSettings(
        staging_dir=workdir / "staging",
        store_path=workdir / "secrets.tsv",
    )
    client = VaultClient.from_settings(settings)

    client.start_run()

    with client.capture():
        line = client.redact("tacacs-server key 7 0822455D0A16", "0822455D0A16")
        print(f"Archived line: {line}")

    report = client.finish_run()
    print(f"Secrets committed: {report.entries_written}")
    print(settings.store_path.read_text())


if __name__ == "__main__":
    main()
