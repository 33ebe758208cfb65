import sys
from pathlib import Path

# pip install せずに pytest を実行した場合でも core / backend を import できるようにする
PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
