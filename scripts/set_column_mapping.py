"""Save the board/column mapping from a JSON file, e.g.

    python scripts/set_column_mapping.py mapping.json

The file uses the settings-editor keys: board_id, employee_id, employee_name,
date, login_time, logout_time, entry_type, location, logout_location.
"""

from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_board.attendance_board.container import build_container
from src.attendance_board.attendance_board.core.exceptions import ValidationError


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print(__doc__)
        return 2

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        monday_config=settings.MONDAY_CONFIG,
        engine_config=settings.ENGINE_CONFIG,
    )

    data = json.loads(Path(argv[1]).read_text(encoding="utf-8"))
    try:
        mapping = container.mapping_service.save(data)
    except ValidationError as e:
        print(f"Invalid mapping: {e}")
        return 1

    print(f"OK: saved column mapping for board {mapping.board_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
