"""
스티커 메모 편집 패널
customtkinter 위젯으로 메모 레이아웃을 그리고, 편집 내용을 메모에 되돌려 쓴다.
"""

import logging
import tkinter as tk

import customtkinter as ctk

from note_layout import FieldEditTracker, FontMeasurer, render_panel
from sticky_note import QUICK_ACTIONS, TEXT_FIELDS, NoteState
from theme import ThemeState, panel_style, resolve

logger = logging.getLogger(__name__)

FONT_FAMILY = "Roboto Medium"

# 텍스트 위젯 안쪽 여백 (측정 높이에도 더함)
TEXTBOX_PADY = 0


class StickyNoteEditor(ctk.CTkFrame):
    """메모 한 장을 색 배경 위에 헤더/본문/푸터로 보여주는 편집 패널"""

    def __init__(self, master, note=None, on_modified=None, **kwargs):
        kwargs.setdefault("fg_color", "transparent")
        super().__init__(master, **kwargs)

        self.note = note if note is not None else NoteState()
        self.on_modified = on_modified

        # 패널 전용 테마/스타일 캐시
        self.theme_state = ThemeState()
        self._fonts = {}  # 글자 크기별 폰트 캐시
        self._textboxes = {}  # 필드 이름 -> CTkTextbox
        self._draw_index = 0
        self._background_image = None
        self._background_key = None
        self._refresh_pending = False
        self._edits = FieldEditTracker()
        self._measurer = FontMeasurer(self._font_for, vertical_inset=TEXTBOX_PADY * 2)

        # 테두리/여백은 테마와 무관하게 같음, 배경색만 draw_panel에서 바뀜
        self.panel_style = panel_style(resolve(self.note.color))
        left, right, top, bottom = self.panel_style.margin
        self.panel = ctk.CTkFrame(
            self, corner_radius=self.panel_style.border[0], border_width=0, height=120,
            fg_color=self.panel_style.background.to_hex()
        )
        self.panel.pack(fill="x", anchor="n", padx=(left, right), pady=(top, bottom))
        self.panel.pack_propagate(False)

        # 배경 이미지 라벨 (텍스트 상자들 뒤에 깔림)
        self.background_label = ctk.CTkLabel(self.panel, text="")
        self.background_label.place(x=0, y=0, relwidth=1, relheight=1)

        self.panel.bind("<Button-3>", self._show_context_menu)
        self.background_label.bind("<Button-3>", self._show_context_menu)
        self.bind("<Configure>", lambda _: self.schedule_refresh())

    # --- 호스트 기능 (NoteHost) ---

    def measure_text(self, text, style, width):
        """실제 폰트 기준 줄바꿈 높이"""
        return self._measurer(text, style, width)

    def draw_field(self, rect, text, style):
        field_name = TEXT_FIELDS[self._draw_index]
        self._draw_index += 1

        textbox = self._textboxes.get(field_name)
        if textbox is None:
            textbox = self._create_textbox(field_name)

        textbox.configure(
            font=self._font_for(style),
            text_color=style.text_color.to_hex(),
            fg_color=self.theme_state.theme.background.to_hex(),
            # CTk 위젯은 place()에 크기를 넘길 수 없음
            width=max(1, int(rect.width)),
            height=max(1, int(rect.height)),
        )
        textbox.place(x=rect.x, y=rect.y)

        current = textbox.get("1.0", "end-1c")
        # 마지막으로 써 넣은 값과 다르면 사용자 편집 (포커스와 무관)
        value, rewrite = self._edits.reconcile(field_name, current, text)
        if rewrite:
            textbox.delete("1.0", "end")
            textbox.insert("1.0", value)
        return value

    def draw_panel(self, rect, background, body):
        self.panel_style = panel_style(self.theme_state.theme)
        self.panel.configure(fg_color=background.to_hex(), height=max(1, rect.height))
        self._update_background(rect)
        self._draw_index = 0
        body()

    # --- 화면 갱신 ---

    def schedule_refresh(self):
        if not self._refresh_pending:
            self._refresh_pending = True
            self.after_idle(self.refresh)

    def refresh(self):
        """레이아웃 다시 계산하고 편집 내용 반영"""
        self._refresh_pending = False
        left, right, _, _ = self.panel_style.margin
        width = self.winfo_width() - left - right
        changed = render_panel(self, self.note, self.theme_state, width)
        if changed:
            self._notify_modified()
            # 바뀐 텍스트 기준으로 높이 재계산
            self.schedule_refresh()

    def flush(self):
        """위젯에 남은 편집을 현재 메모에 반영"""
        self.refresh()

    def set_note(self, note):
        """다른 메모로 교체"""
        # 교체 전에 아직 반영 안 된 편집을 이전 메모에 저장
        self.flush()
        self.note = note
        self.refresh()

    def apply_action(self, action_id):
        """빠른 색상 변경 액션 실행"""
        action = QUICK_ACTIONS.get(action_id)
        if action is None:
            logger.warning(f"Unknown note action: {action_id}")
            return
        self.note = action(self.note)
        logger.info(f"Note color set to {self.note.color.value}")
        self._notify_modified()
        self.refresh()

    def destroy(self):
        self.theme_state.reset()
        self._edits.forget()
        self._background_image = None
        super().destroy()

    # --- 내부 ---

    def _notify_modified(self):
        if self.on_modified:
            self.on_modified(self.note)

    def _font_for(self, style):
        font = self._fonts.get(style.font_size)
        if font is None:
            font = ctk.CTkFont(family=FONT_FAMILY, size=style.font_size)
            self._fonts[style.font_size] = font
        return font

    def _create_textbox(self, field_name):
        textbox = ctk.CTkTextbox(
            self.panel,
            wrap="word",
            border_width=0,
            border_spacing=0,
            corner_radius=0,
            activate_scrollbars=False,
        )
        textbox._textbox.configure(pady=TEXTBOX_PADY, spacing1=0, spacing2=0, spacing3=0)
        textbox.bind("<KeyRelease>", lambda _: self.schedule_refresh())
        textbox.bind("<FocusOut>", lambda _: self.schedule_refresh())
        textbox.bind("<Button-3>", self._show_context_menu)
        self._textboxes[field_name] = textbox
        return textbox

    def _update_background(self, rect):
        """테마가 바뀌거나 크기가 바뀌었을 때만 배경 이미지 교체"""
        swatch = self.theme_state.swatch
        size = (max(1, int(rect.width)), max(1, int(rect.height)))
        key = (id(swatch), size)
        if swatch is None or key == self._background_key:
            return
        self._background_image = ctk.CTkImage(light_image=swatch, dark_image=swatch, size=size)
        self.background_label.configure(image=self._background_image)
        self.background_label.lower()
        self._background_key = key

    def _show_context_menu(self, event):
        """우클릭 메뉴: 메모 색상 빠르게 바꾸기"""
        menu = tk.Menu(self, tearoff=0)
        for action_id in QUICK_ACTIONS:
            label = action_id.split(".", 1)[1].capitalize()
            menu.add_command(label=f"● {label}", command=lambda a=action_id: self.apply_action(a))
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()
