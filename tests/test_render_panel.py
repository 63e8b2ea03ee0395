from note_layout import render_panel
from sticky_note import NoteColor, NoteState
from theme import ThemeState, resolve


class FakeHost:
    """그리기 호출을 기록하고, 지정한 필드는 편집된 것처럼 돌려주는 호스트"""

    def __init__(self, edits=None):
        self.edits = edits or {}
        self.fields = []
        self.panels = []

    def measure_text(self, text, style, width):
        return style.font_size * 2

    def draw_field(self, rect, text, style):
        name = ("header", "content", "footer")[len(self.fields) % 3]
        self.fields.append((name, rect, text))
        return self.edits.get(name, text)

    def draw_panel(self, rect, background, body):
        self.panels.append((rect, background))
        body()


def test_render_draws_panel_and_fields(blue_note):
    host = FakeHost()
    changed = render_panel(host, blue_note, ThemeState(), 300)

    assert changed == []
    assert len(host.panels) == 1
    rect, background = host.panels[0]
    assert background == resolve(NoteColor.BLUE).background
    assert rect.width == 300
    assert [name for name, _, _ in host.fields] == ["header", "content", "footer"]
    # header 48, content 50 (min), footer 28 with host metrics
    assert [r.height for _, r, _ in host.fields] == [48, 50, 28]


def test_render_writes_edits_back(blue_note):
    host = FakeHost(edits={"content": "Rate fixed", "footer": ""})
    changed = render_panel(host, blue_note, ThemeState(), 300)

    assert changed == ["content", "footer"]
    assert blue_note.content == "Rate fixed"
    assert blue_note.footer == ""
    assert blue_note.header == "Spawner"


def test_render_recomputes_styles_only_on_color_change():
    note = NoteState()
    theme_state = ThemeState()
    render_panel(FakeHost(), note, theme_state, 300)
    render_panel(FakeHost(), note, theme_state, 300)
    assert theme_state.recompute_count == 1

    note.color = NoteColor.GREEN
    host = FakeHost()
    render_panel(host, note, theme_state, 300)
    assert theme_state.recompute_count == 2
    assert host.panels[0][1] == resolve(NoteColor.GREEN).background
