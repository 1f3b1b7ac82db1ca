import sys
from pathlib import Path

import pytest

# Add repository root to sys.path so tests can import hp_firmware.* modules.
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# snmpwalk -On -c public -v2c <host> .1.3.6.1.4.1.232 of a Gen10 host with
# one P408i-a controller, one RAID 1 volume, two drives and an iLO 5
CAPTURE = """\
.1.3.6.1.4.1.232.3.2.2.1.1.1.0 = INTEGER: 0
.1.3.6.1.4.1.232.3.2.2.1.1.2.0 = INTEGER: 98
.1.3.6.1.4.1.232.3.2.2.1.1.3.0 = STRING: "2.62"
.1.3.6.1.4.1.232.3.2.2.1.1.6.0 = INTEGER: 2
.1.3.6.1.4.1.232.3.2.2.1.1.15.0 = STRING: "PEYHB0ARH9Z0GD"
.1.3.6.1.4.1.232.3.2.2.1.1.20.0 = STRING: "Slot 0"
.1.3.6.1.4.1.232.3.2.3.1.1.1.0.1 = INTEGER: 0
.1.3.6.1.4.1.232.3.2.3.1.1.2.0.1 = INTEGER: 1
.1.3.6.1.4.1.232.3.2.3.1.1.3.0.1 = INTEGER: 3
.1.3.6.1.4.1.232.3.2.3.1.1.4.0.1 = INTEGER: 2
.1.3.6.1.4.1.232.3.2.5.1.1.1.0.1 = INTEGER: 0
.1.3.6.1.4.1.232.3.2.5.1.1.1.0.2 = INTEGER: 0
.1.3.6.1.4.1.232.3.2.5.1.1.2.0.1 = INTEGER: 1
.1.3.6.1.4.1.232.3.2.5.1.1.2.0.2 = INTEGER: 2
.1.3.6.1.4.1.232.3.2.5.1.1.3.0.1 = STRING: "VO0480JFDGT"
.1.3.6.1.4.1.232.3.2.5.1.1.3.0.2 = STRING: "EG0600JETKA"
.1.3.6.1.4.1.232.3.2.5.1.1.4.0.1 = STRING: "HPD1"
.1.3.6.1.4.1.232.3.2.5.1.1.4.0.2 = STRING: "HPD5"
.1.3.6.1.4.1.232.3.2.5.1.1.6.0.1 = INTEGER: 2
.1.3.6.1.4.1.232.3.2.5.1.1.6.0.2 = INTEGER: 2
.1.3.6.1.4.1.232.3.2.5.1.1.9.0.1 = INTEGER: 1337
.1.3.6.1.4.1.232.3.2.5.1.1.9.0.2 = INTEGER: 12000
.1.3.6.1.4.1.232.3.2.5.1.1.51.0.1 = STRING: "ABC123"
.1.3.6.1.4.1.232.3.2.5.1.1.51.0.2 = STRING: "DEF456"
.1.3.6.1.4.1.232.3.2.5.1.1.64.0.1 = STRING: "1I:1:1"
.1.3.6.1.4.1.232.3.2.5.1.1.64.0.2 = STRING: "1I:1:2"
.1.3.6.1.4.1.232.9.2.2.2.0 = STRING: "2.78"
.1.3.6.1.4.1.232.9.2.2.21.0 = INTEGER: 11
"""


def without(text: str, subtree: str) -> str:
    """Drop all capture lines below a subtree"""
    return "".join(line for line in text.splitlines(keepends=True) if not line.startswith(subtree + "."))


@pytest.fixture
def drop_subtree():
    return without


@pytest.fixture
def capture_text() -> str:
    return CAPTURE


@pytest.fixture
def write_capture(tmp_path: Path):
    def _write(text: str = CAPTURE, name: str = "walk.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
