import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.resolve()
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


ENV_OVERRIDES = ("AVGCALC_CONFIG", "AVGCALC_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    """Unset the app's env overrides; restored after the test, even if load_dotenv set them."""
    for name in ENV_OVERRIDES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
