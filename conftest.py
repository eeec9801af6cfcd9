"""
Shared pytest configuration.
"""
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep minimax searches, several seconds each")
