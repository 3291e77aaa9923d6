"""
Archive Run Example - Capture secrets from two device configs.

Run with:
    CONFVAULT_STAGING_DIR=/tmp/confvault.d CONFVAULT_STORE_PATH=/tmp/secrets.tsv \
        python examples/archive_run.py
"""

import sys

from confvault import RunController, VaultSettings
from confvault.config import configure_logging


DEVICES = {
    "core-sw1": [
        "hostname core-sw1",
        "enable secret 5 $1$mERr$hx5rVt7rPNoS4wqbXKX7m0",
        "username admin password 7 094F471A1A0A",
    ],
    "edge-rt1": [
        "hostname edge-rt1",
        "username admin password 7 094F471A1A0A",
        "snmp-server community s3cr3t RO",
    ],
}


def secret_of(line):
    """Toy line scanner: the last word of any line mentioning a secret."""
    words = line.split()
    if words and words[0] in ("enable", "username", "snmp-server"):
        return words[-2] if words[0] == "snmp-server" else words[-1]
    return None


def main():
    settings = VaultSettings()
    configure_logging(settings.log_level)
    controller = RunController.from_settings(settings)

    if not controller.on_run_start():
        print(f"Run aborted: {controller.last_error()}", file=sys.stderr)
        sys.exit(1)

    for device, lines in DEVICES.items():
        if not controller.on_session_start():
            print(f"{device}: {controller.last_error()}", file=sys.stderr)
            continue

        for line in lines:
            secret = secret_of(line)
            if secret:
                result = controller.on_save(secret)
                if not result:
                    print(f"{device}: {controller.last_error()}", file=sys.stderr)
                    continue
                line = line.replace(secret, f"<secret hidden:{result.value[:12]}>")
            print(f"{device}: {line}")

        if not controller.on_session_end():
            print(f"{device}: {controller.last_error()}", file=sys.stderr)

    result = controller.on_run_end()
    if result.fatal:
        print(f"Run aborted: {controller.last_error()}", file=sys.stderr)
        sys.exit(1)

    report = result.value or result.error.report
    print(f"\nStore {report.store_location}: {report.entries_written} secrets")


if __name__ == "__main__":
    main()
