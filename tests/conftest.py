# Qt-backed tests run headless; the offscreen platform must be selected before
# any QApplication is constructed, so it is set at import time.

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _isolated_logging(caplog):
    """Capture library debug logs per test so assertions can inspect them."""
    caplog.set_level("DEBUG", logger="screenbuckets")
    return caplog
