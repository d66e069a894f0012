import os
import sys
from pathlib import Path

# Allow `import storytray.*` from the repo root.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def qt_app():
    from PyQt5.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
