"""
스티커 메모 데이터 모델
색상 + 헤더/본문/푸터 텍스트 세 개로 구성된 메모 하나를 표현
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from functools import partial

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "New Note"
DEFAULT_CONTENT = "Write something here"
DEFAULT_FOOTER = "Footer"

TEXT_FIELDS = ("header", "content", "footer")


class NoteColor(Enum):
    """메모 색상 (고정된 5가지)"""
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"
    PINK = "Pink"
    PURPLE = "Purple"

    @classmethod
    def _missing_(cls, value):
        # 설정/JSON에서 들어오는 이름은 대소문자 구분 없이 허용
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None

    @classmethod
    def coerce(cls, value):
        """알 수 없는 값은 노란색으로 대체"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            logger.debug(f"Unknown note color {value!r}, falling back to Yellow")
            return cls.YELLOW


def _as_text(value):
    """None은 빈 문자열, 문자열이 아닌 값은 str()로 변환"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    logger.debug(f"Coercing non-string note text {value!r}")
    return str(value)


@dataclass
class NoteState:
    color: NoteColor = NoteColor.YELLOW
    header: str = DEFAULT_HEADER
    content: str = DEFAULT_CONTENT
    footer: str = DEFAULT_FOOTER

    def __post_init__(self):
        self.color = NoteColor.coerce(self.color)
        # 텍스트 필드는 항상 문자열 (비어 있을 수는 있음)
        for name in TEXT_FIELDS:
            setattr(self, name, _as_text(getattr(self, name)))

    def get_text(self, field_name):
        return getattr(self, field_name)

    def set_text(self, field_name, text):
        if field_name not in TEXT_FIELDS:
            raise KeyError(field_name)
        setattr(self, field_name, _as_text(text))

    def to_dict(self):
        return {
            "color": self.color.value,
            "header": self.header,
            "content": self.content,
            "footer": self.footer,
        }

    @classmethod
    def from_dict(cls, data):
        """저장된 딕셔너리에서 메모 복원 (없는 키는 기본값)"""
        return cls(
            color=data.get("color", NoteColor.YELLOW),
            header=data.get("header", DEFAULT_HEADER),
            content=data.get("content", DEFAULT_CONTENT),
            footer=data.get("footer", DEFAULT_FOOTER),
        )


def set_color(state, color):
    """색상만 바꾼 새 메모 반환 (원본은 그대로)"""
    return replace(state, color=NoteColor.coerce(color))


# 빠른 색상 변경 액션: 액션 ID -> 상태 전이 함수
QUICK_ACTIONS = {
    f"color.{color.value.lower()}": partial(set_color, color=color)
    for color in NoteColor
}
