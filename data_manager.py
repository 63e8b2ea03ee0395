import json
import logging
import os

from sticky_note import NoteState

logger = logging.getLogger(__name__)


class DataManager:
    def __init__(self, data_dir, settings_file):
        self.settings_file = settings_file

        # 메모 하나당 JSON 파일 하나 (예: notes_data/<id>.json)
        self.data_dir = data_dir
        if not os.path.exists(self.data_dir):
            os.makedirs(self.data_dir)

    def load_notes(self):
        """메모 데이터 로드 (개별 JSON 파일)"""
        notes = {}
        for filename in sorted(os.listdir(self.data_dir)):
            if not filename.endswith(".json"):
                continue
            note_id = os.path.splitext(filename)[0]
            file_path = os.path.join(self.data_dir, filename)
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    notes[note_id] = NoteState.from_dict(json.load(f))
            except (OSError, ValueError, AttributeError) as e:
                logger.error(f"Error loading note {filename}: {e}")
        logger.info(f"Loaded {len(notes)} notes from {self.data_dir}")
        return notes

    def save_notes(self, notes):
        """메모 데이터 저장 (개별 JSON 파일)"""
        try:
            # 1. 현재 메모들 저장
            for note_id, note in notes.items():
                file_path = os.path.join(self.data_dir, f"{note_id}.json")
                with open(file_path, "w", encoding="utf-8") as f:
                    json.dump(note.to_dict(), f, ensure_ascii=False, indent=4)

            # 2. 삭제된 메모 파일 정리
            for filename in os.listdir(self.data_dir):
                if filename.endswith(".json") and os.path.splitext(filename)[0] not in notes:
                    os.remove(os.path.join(self.data_dir, filename))
                    logger.info(f"Deleted note file: {filename}")
        except OSError as e:
            logger.error(f"Error saving notes: {e}")

    def load_settings(self):
        """설정 데이터 로드"""
        if os.path.exists(self.settings_file):
            try:
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    settings = json.load(f)
                if isinstance(settings, dict):
                    return settings
                logger.warning(f"Ignoring malformed settings file {self.settings_file}")
            except (OSError, ValueError) as e:
                logger.error(f"Error loading settings: {e}")
        return {}

    def save_settings(self, settings):
        """설정 데이터 저장"""
        try:
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(settings, f, indent=4)
        except OSError as e:
            logger.error(f"Error saving settings: {e}")


def initial_note_id(notes, settings):
    """시작할 때 열 메모 ID (설정의 마지막 메모가 없으면 첫 메모)"""
    last_id = settings.get("last_note_id")
    if isinstance(last_id, str) and last_id in notes:
        return last_id
    return next(iter(notes), None)
