"""
End-to-end tests for the bubblebabble command line, run in a subprocess.
"""

import base64
import hashlib
import os

from bubblebabble.algorithms import encode


def test_encode_data_string(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["encode", "--data", "Pineapple"])
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "xigak-nyryk-humil-bosek-sonax"


def test_encode_hex_and_stdin(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["encode", "--hex", "2a0ae5c0000200055cf9ccc87c4897c0"])
    assert result.returncode == 0
    assert (
        result.stdout.decode().strip()
        == "xepib-panus-bubub-dubyb-hilyz-nefas-myzug-mihos-bexux"
    )

    result = run_command(["encode"], input_bytes=b"")
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "xexax"


def test_encode_file_with_steps(cli_test_env):
    run_command, test_dir = cli_test_env
    (test_dir / "input.bin").write_bytes(b"1234567890")

    result = run_command(["encode", "--file", "input.bin", "--steps"])
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "xesef-disof-gytuf-katof-movif-baxux"
    assert "Initial data: 10 bytes" in result.stderr.decode()


def test_encode_rejects_conflicting_inputs(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["encode", "--data", "a", "--hex", "61"])
    assert result.returncode == 2
    assert "Use only one of" in result.stderr.decode()

    result = run_command(["encode", "--hex", "zz"])
    assert result.returncode == 2


def test_stable_command(cli_test_env):
    run_command, _ = cli_test_env
    loopback = (bytes(15) + b"\x01").hex()

    result = run_command(["stable", "--hex", loopback])
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "xebab-7wa-caxax"

    result = run_command(["stable", "--hex", "00000000", "--block-size", "4"])
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "xebab-bybab-baxax"


def test_stable_rejects_bad_block_size(cli_test_env):
    run_command, _ = cli_test_env
    for block_size in ("0", "3"):
        result = run_command(["stable", "--hex", "0001", "--block-size", block_size])
        assert result.returncode == 1
        assert "Block size must be" in result.stderr.decode()
        assert result.stdout == b""


def test_decode_command(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["decode", "xigak-nyryk-humil-bosek-sonax"])
    assert result.returncode == 0
    assert result.stdout == b"Pineapple"

    result = run_command(["decode", "--hex", "xebab-bybab-bebub-bybib-bebib-bybub-bebab-bybab-cixux"])
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "00" * 15 + "01"


def test_decode_rejects_corrupted_input(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["decode", "xesef-disof-gytuf-katof-movif-buxax"])
    assert result.returncode == 1
    assert "Failed to decode" in result.stderr.decode()


def test_address_command(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["address", "::1"])
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "xebab-7wa-caxax"

    result = run_command(["address", "fe80::4685:ff:fe76:1722", "--standard"])
    assert result.returncode == 0
    assert (
        result.stdout.decode().strip()
        == "xuzim-bobab-bobib-bobab-bucum-hibiz-zuzil-kyhed-duxix"
    )

    result = run_command(["address", "not-an-address"])
    assert result.returncode == 1
    assert "Failed to encode address" in result.stderr.decode()


def test_fingerprint_command(cli_test_env):
    run_command, test_dir = cli_test_env
    key_type = b"ssh-ed25519"
    blob = len(key_type).to_bytes(4, "big") + key_type + (32).to_bytes(4, "big") + bytes(32)
    (test_dir / "id_ed25519.pub").write_text(
        f"ssh-ed25519 {base64.b64encode(blob).decode('ascii')} bob@example\n"
    )
    (test_dir / "blob.bin").write_bytes(blob)

    result = run_command(["fingerprint", "id_ed25519.pub"])
    assert result.returncode == 0
    assert result.stdout.decode().strip() == encode(hashlib.sha1(blob).digest())

    result = run_command(["fingerprint", "blob.bin", "--raw", "--algorithm", "sha256"])
    assert result.returncode == 0
    assert result.stdout.decode().strip() == encode(hashlib.sha256(blob).digest())

    env = dict(os.environ, BUBBLEBABBLE_DIGEST="md5")
    result = run_command(["fingerprint", "id_ed25519.pub"], env=env)
    assert result.returncode == 0
    assert result.stdout.decode().strip() == encode(hashlib.md5(blob).digest())


def test_fingerprint_rejects_bad_key_file(cli_test_env):
    run_command, test_dir = cli_test_env
    (test_dir / "broken.pub").write_text("ssh-ed25519 ???\n")

    result = run_command(["fingerprint", "broken.pub"])
    assert result.returncode == 1
    assert "Failed to fingerprint" in result.stderr.decode()


def test_info_command(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["info", "16"])
    assert result.returncode == 0
    output = result.stdout.decode()
    assert "Words:         9" in output
    assert "Output length: 53" in output


def test_debug_logging_goes_to_stderr(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["--log-level", "DEBUG", "stable", "--hex", "0000"])
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "xebab-baxax"
    assert "Encoded stable babble" in result.stderr.decode()
