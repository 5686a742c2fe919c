import pytest
from pathlib import Path

# Define project root for path fixtures
repo_root = Path(__file__).resolve().parent.parent
assets = Path(__file__).resolve().parent / "_assets" / "instances"

@pytest.fixture(scope="session")
def solomon_path():
    """Path to a truncated Solomon C101 instance with header and separator block"""
    return assets / "c101_head.txt"

@pytest.fixture(scope="session")
def lilim_path():
    """Path to a truncated Li-Lim pickup-and-delivery instance without header"""
    return assets / "lc101_head.txt"

@pytest.fixture(scope="session")
def default_config_path():
    return repo_root / "src" / "vrpparse" / "config" / "default_config.yaml"

@pytest.fixture
def r1_text():
    """Header R1, summary 25 200, no separator block, three rows"""
    return (
        "R1\n"
        "generated for tests\n"
        "\n"
        "VEHICLE\n"
        "25 200\n"
        "1 0 0 0 0 100 0\n"
        "2 10 10 5 0 50 5\n"
        "3 -5 -5 5 0 50 5\n"
    )
