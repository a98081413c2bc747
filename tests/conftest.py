# stylecolor test configuration and shared fixtures
from __future__ import annotations

import pytest

from stylecolor.color import Color
from stylecolor.config import DEFAULTS, apply_settings

# ─────────────────────────────────────────────────────────────────────────────
# Color fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def red_color():
    """Pure red color."""
    return Color([0, 1.0, 0.5])


@pytest.fixture
def blue_color():
    """Pure blue color."""
    return Color([240, 1.0, 0.5])


@pytest.fixture
def white_color():
    """Pure white color."""
    return Color([0, 0.0, 1.0])


@pytest.fixture
def black_color():
    """Pure black color."""
    return Color([0, 0.0, 0.0])


@pytest.fixture
def gray_color():
    """Mid gray color (#808080)."""
    return Color([0, 0.0, 128 / 255])


@pytest.fixture
def no_color():
    """A color without components."""
    return Color()


# ─────────────────────────────────────────────────────────────────────────────
# Settings fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def settings_file(tmp_path):
    """Settings file with a child profile."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "name: site\n"
        "alpha_precision: 3\n"
        "children:\n"
        "  - name: print\n"
        "    alpha_precision: 1\n"
        "    log_color: true\n"
        "  - name: debug\n"
        "    log_level: debug\n"
    )
    return str(path)


@pytest.fixture
def restore_logging():
    """Reset package logging to the defaults after a test."""
    yield
    apply_settings(DEFAULTS)
