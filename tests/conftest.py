import sys
from pathlib import Path

# Ensure `spots_api` is importable when running pytest from the repository root without installing.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
