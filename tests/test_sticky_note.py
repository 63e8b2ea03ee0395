import pytest

from sticky_note import QUICK_ACTIONS, NoteColor, NoteState, set_color


def test_defaults():
    note = NoteState()
    assert note.color is NoteColor.YELLOW
    assert note.header == "New Note"
    assert note.content == "Write something here"
    assert note.footer == "Footer"


def test_text_fields_never_none():
    note = NoteState(header=None, content=None, footer=None)
    assert (note.header, note.content, note.footer) == ("", "", "")

    note.set_text("content", None)
    assert note.content == ""


def test_set_text_rejects_unknown_field():
    with pytest.raises(KeyError):
        NoteState().set_text("title", "x")


@pytest.mark.parametrize("value", ["blue", " BLUE ", "Blue", NoteColor.BLUE])
def test_color_names_are_case_insensitive(value):
    assert NoteColor.coerce(value) is NoteColor.BLUE


@pytest.mark.parametrize("value", ["orange", 42, None, [1, 2]])
def test_unknown_color_falls_back_to_yellow(value):
    assert NoteColor.coerce(value) is NoteColor.YELLOW
    assert NoteState(color=value).color is NoteColor.YELLOW


def test_from_dict_fills_missing_keys():
    note = NoteState.from_dict({"color": "Pink", "header": "Todo", "extra": 1})
    assert note.color is NoteColor.PINK
    assert note.header == "Todo"
    assert note.content == "Write something here"
    assert note.footer == "Footer"


def test_to_dict_uses_color_name(blue_note):
    data = blue_note.to_dict()
    assert data == {
        "color": "Blue",
        "header": "Spawner",
        "content": "Adjust rate before shipping",
        "footer": "Owned by Gameplay",
    }
    assert NoteState.from_dict(data) == blue_note


def test_set_color_returns_new_state(blue_note):
    updated = set_color(blue_note, NoteColor.GREEN)
    assert updated.color is NoteColor.GREEN
    assert updated.header == blue_note.header
    assert blue_note.color is NoteColor.BLUE
    assert updated is not blue_note


def test_quick_actions_cover_every_color(blue_note):
    assert set(QUICK_ACTIONS) == {f"color.{c.value.lower()}" for c in NoteColor}
    assert QUICK_ACTIONS["color.purple"](blue_note).color is NoteColor.PURPLE
    assert blue_note.color is NoteColor.BLUE


def test_non_string_text_becomes_string():
    note = NoteState(header=123, content=["x"], footer=4.5)
    assert (note.header, note.content, note.footer) == ("123", "['x']", "4.5")

    note.set_text("header", 7)
    assert note.header == "7"
