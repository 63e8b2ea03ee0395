import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()


@pytest.fixture
def blue_note():
    from sticky_note import NoteColor, NoteState

    return NoteState(
        color=NoteColor.BLUE,
        header="Spawner",
        content="Adjust rate before shipping",
        footer="Owned by Gameplay",
    )
