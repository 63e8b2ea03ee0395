import customtkinter as ctk
import os
import sys
import uuid
import logging
import tkinter
from data_manager import DataManager, initial_note_id  # 데이터 관리 모듈 임포트
from note_editor import StickyNoteEditor  # 메모 편집 패널 임포트
from sticky_note import NoteColor, NoteState
from theme import resolve
from ui_colors import PASTEL_COLORS, NOTE_LIST_COLORS  # 색상 팔레트 임포트

logger = logging.getLogger(__name__)

# 설정
ctk.set_appearance_mode("Light")  # 모드: "System" (standard), "Dark", "Light"
ctk.set_default_color_theme("blue")  # 테마: "blue" (standard), "green", "dark-blue"

DATA_DIR = "notes_data"
SETTINGS_FILE = "settings.json"
SAVE_DELAY_MS = 500


def get_base_dir():
    """애플리케이션 기본 디렉토리 반환 (PyInstaller 호환)"""
    if getattr(sys, 'frozen', False):
        # PyInstaller로 패키징된 경우
        return os.path.dirname(sys.executable)
    else:
        # 일반 Python 실행
        return os.path.dirname(os.path.abspath(__file__))


class StickyNoteApp(ctk.CTk):
    def __init__(self, base_dir=None):
        super().__init__()

        self.title("Sticky Notes")
        self.geometry("700x500")

        base_dir = base_dir or get_base_dir()

        # 데이터 초기화
        self.data_manager = DataManager(
            os.path.join(base_dir, DATA_DIR), os.path.join(base_dir, SETTINGS_FILE)
        )
        self.notes = self.data_manager.load_notes()  # {uuid: NoteState}
        self.current_note_id = None
        self.save_timer = None
        self.note_buttons = {}  # 메모 ID별 버튼 저장 (색상 업데이트용)

        # 그리드 레이아웃 설정 (1x2)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)

        # === 좌측 사이드바 (메모 목록) ===
        self.sidebar_frame = ctk.CTkFrame(self, width=200, corner_radius=0)
        self.sidebar_frame.grid(row=0, column=0, sticky="nsew")
        self.sidebar_frame.grid_rowconfigure(3, weight=1)

        # 새 메모 / 삭제 버튼
        self.action_frame = ctk.CTkFrame(self.sidebar_frame, fg_color="transparent")
        self.action_frame.grid(row=0, column=0, padx=20, pady=(20, 10), sticky="ew")
        self.action_frame.grid_columnconfigure((0, 1), weight=1)

        self.new_button = ctk.CTkButton(
            self.action_frame,
            text="+ New Note",
            command=self.create_new_note,
            fg_color=PASTEL_COLORS["primary"],
            hover_color=PASTEL_COLORS["primary_hover"],
            text_color="white",
            height=35
        )
        self.new_button.grid(row=0, column=0, padx=(0, 5), sticky="ew")

        self.delete_button = ctk.CTkButton(
            self.action_frame,
            text="🗑 Delete",
            command=self.delete_note,
            fg_color=PASTEL_COLORS["danger"],
            hover_color=PASTEL_COLORS["danger_hover"],
            text_color="white",
            height=35
        )
        self.delete_button.grid(row=0, column=1, sticky="ew")

        # 색상 버튼 (빠른 색상 변경)
        self.color_frame = ctk.CTkFrame(self.sidebar_frame, fg_color="transparent")
        self.color_frame.grid(row=1, column=0, padx=20, pady=(0, 10), sticky="ew")
        for color in NoteColor:
            swatch = resolve(color).background.to_hex()
            btn = ctk.CTkButton(
                self.color_frame,
                text="",
                width=28,
                height=28,
                fg_color=swatch,
                hover_color=swatch,
                border_width=1,
                border_color=NOTE_LIST_COLORS["idle_border"],
                command=lambda c=color: self.set_note_color(c)
            )
            btn.pack(side="left", padx=2)

        ctk.CTkLabel(self.sidebar_frame, text="Notes", anchor="w").grid(
            row=2, column=0, padx=20, sticky="ew"
        )

        # 메모 목록
        self.note_list_frame = ctk.CTkScrollableFrame(self.sidebar_frame, fg_color="transparent")
        self.note_list_frame.grid(row=3, column=0, padx=10, pady=(0, 20), sticky="nsew")

        # === 우측 메모 편집 패널 ===
        self.editor = StickyNoteEditor(self, on_modified=self.on_note_modified)
        self.editor.grid(row=0, column=1, sticky="nsew", padx=10, pady=10)

        self.protocol("WM_DELETE_WINDOW", self.on_closing)

        settings = self.load_settings()
        if not self.notes:
            self.create_new_note()
        else:
            self.select_note(initial_note_id(self.notes, settings))

    def load_settings(self):
        """설정 파일에서 창 크기, 화면 모드 불러오기"""
        settings = self.data_manager.load_settings()
        try:
            # 창 크기 및 위치 복원
            if "geometry" in settings:
                self.geometry(settings["geometry"])
            if "appearance_mode" in settings:
                ctk.set_appearance_mode(settings["appearance_mode"])
        except (ValueError, TypeError, tkinter.TclError) as e:
            logger.warning(f"Error applying settings: {e}")
        return settings

    def save_settings(self):
        """현재 설정을 파일에 저장"""
        settings = {
            "geometry": self.geometry(),
            "appearance_mode": ctk.get_appearance_mode(),
            "last_note_id": self.current_note_id,
        }
        self.data_manager.save_settings(settings)

    def save_notes(self):
        """메모를 JSON 파일에 저장"""
        self.save_timer = None
        self.data_manager.save_notes(self.notes)

    def schedule_save(self):
        """입력이 멈춘 뒤 한 번만 저장 (디바운싱)"""
        if self.save_timer:
            self.after_cancel(self.save_timer)
        self.save_timer = self.after(SAVE_DELAY_MS, self.save_notes)

    def create_new_note(self):
        note_id = str(uuid.uuid4())
        self.notes[note_id] = NoteState()
        logger.info(f"Created note {note_id}")
        self.save_notes()
        self.select_note(note_id)

    def delete_note(self):
        if self.current_note_id is None:
            return
        logger.info(f"Deleted note {self.current_note_id}")
        del self.notes[self.current_note_id]
        self.current_note_id = None
        self.save_notes()
        if self.notes:
            self.select_note(next(iter(self.notes)))
        else:
            self.create_new_note()

    def select_note(self, note_id):
        # 현재 메모 ID가 바뀌기 전에 남은 편집 저장
        self.editor.flush()
        self.current_note_id = note_id
        self.editor.set_note(self.notes[note_id])
        self.refresh_sidebar()

    def set_note_color(self, color):
        self.editor.apply_action(f"color.{color.value.lower()}")

    def on_note_modified(self, note):
        """편집 패널에서 메모가 바뀌었을 때 (색상 변경 시 새 객체가 옴)"""
        if self.current_note_id is None:
            return
        color_changed = self.notes[self.current_note_id].color != note.color
        self.notes[self.current_note_id] = note
        if color_changed:
            self.refresh_sidebar()
        else:
            self._update_note_button(self.current_note_id)
        self.schedule_save()

    def refresh_sidebar(self):
        """메모 목록 다시 그리기"""
        for widget in self.note_list_frame.winfo_children():
            widget.destroy()
        self.note_buttons = {}

        for note_id, note in self.notes.items():
            theme = resolve(note.color)
            is_current = note_id == self.current_note_id
            btn = ctk.CTkButton(
                self.note_list_frame,
                text=self._button_text(note),
                anchor="w",
                fg_color=theme.background.to_hex(),
                hover_color=theme.background.to_hex(),
                text_color=theme.text.to_hex(),
                border_width=2 if is_current else 1,
                border_color=NOTE_LIST_COLORS["selected_border" if is_current else "idle_border"],
                command=lambda i=note_id: self.select_note(i)
            )
            btn.pack(fill="x", pady=2)
            self.note_buttons[note_id] = btn

    def _update_note_button(self, note_id):
        """특정 메모 버튼의 텍스트만 업데이트 (성능 최적화)"""
        btn = self.note_buttons.get(note_id)
        if btn is not None:
            btn.configure(text=self._button_text(self.notes[note_id]))

    @staticmethod
    def _button_text(note):
        title = note.header.strip().splitlines()[0] if note.header.strip() else "No Title"
        return title[:24]

    def on_closing(self):
        """프로그램 종료 시 호출"""
        # 저장 타이머 정리
        if self.save_timer:
            self.after_cancel(self.save_timer)
            self.save_timer = None

        self.save_notes()
        self.save_settings()
        self.destroy()


def main():
    # 로깅 설정
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app = StickyNoteApp()
    app.mainloop()


if __name__ == "__main__":
    main()
