import pytest
import subprocess
import sys

# The eight IPv6 test addresses shared by the encoder tests
IPV6_VECTORS = [
    (
        "::",
        "xebab-bybab-bebub-bybib-bebib-bybub-bebab-bybab-bexux",
        "xebab-7wa-baxax",
    ),
    (
        "::1",
        "xebab-bybab-bebub-bybib-bebib-bybub-bebab-bybab-cixux",
        "xebab-7wa-caxax",
    ),
    (
        "::2",
        "xebab-bybab-bebub-bybib-bebib-bybub-bebab-bybab-doxux",
        "xebab-7wa-daxax",
    ),
    (
        "2a0a:e5c0:2:5:5cf9:ccc8:7c48:97c0",
        "xepib-panus-bubub-dubyb-hilyz-nefas-myzug-mihos-bexux",
        "xepib-pones-wa-dabab-helaz-nofas-mezag-mihos-baxax",
    ),
    (
        "fe80::4685:ff:fe76:1722",
        "xuzim-bobab-bobib-bobab-bucum-hibiz-zuzil-kyhed-duxix",
        "xuzim-3wa-becim-habaz-zozil-kahod-daxax",
    ),
]


@pytest.fixture(params=IPV6_VECTORS, ids=[v[0] for v in IPV6_VECTORS])
def ipv6_vector(request):
    """Provides (address, standard encoding, stable encoding)."""
    return request.param


@pytest.fixture
def cli_test_env(tmp_path):
    """
    Sets up a test environment with a temporary directory and a helper for running CLI commands.
    """

    def run_command(cmd, input_bytes=None, env=None):
        full_cmd = [sys.executable, "-m", "bubblebabble"] + cmd
        result = subprocess.run(
            full_cmd,
            cwd=tmp_path,
            input=input_bytes,
            capture_output=True,
            env=env,
            check=False,
        )

        if result.returncode != 0:
            print("Error running command:", " ".join(full_cmd))
            print("Stdout:", result.stdout)
            print("Stderr:", result.stderr)
        return result

    return run_command, tmp_path
