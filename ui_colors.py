"""
UI 색상 팔레트 모듈
스티커 메모 색상 테마와 앱 화면 색상을 중앙 관리
"""

from sticky_note import NoteColor

# 메모 색상별 (배경색, 글자색) - RGBA 0~1
NOTE_THEMES = {
    NoteColor.YELLOW: {
        "background": (0.99, 0.915, 0.69, 1.0),   # 기본 노란 메모지
        "text": (0.25, 0.2, 0.1, 1.0),
    },
    NoteColor.GREEN: {
        "background": (0.85, 0.95, 0.80, 1.0),    # 연두
        "text": (0.17, 0.26, 0.15, 1.0),
    },
    NoteColor.BLUE: {
        "background": (0.80, 0.90, 0.98, 1.0),    # 하늘색
        "text": (0.18, 0.22, 0.28, 1.0),
    },
    NoteColor.PINK: {
        "background": (0.99, 0.85, 0.90, 1.0),    # 분홍
        "text": (0.31, 0.16, 0.21, 1.0),
    },
    NoteColor.PURPLE: {
        "background": (0.90, 0.85, 0.98, 1.0),    # 연보라
        "text": (0.24, 0.18, 0.31, 1.0),
    },
}

# 사이드바 전용 파스텔 색상 팔레트
PASTEL_COLORS = {
    "primary": "#90CAF9",          # 파스텔 블루 - 새 메모
    "primary_hover": "#64B5F6",
    "danger": "#EF9A9A",           # 파스텔 레드 - 삭제
    "danger_hover": "#E57373",
}

# 메모 목록 색상
NOTE_LIST_COLORS = {
    "selected_border": "#8E24AA",  # 현재 선택된 메모 테두리
    "idle_border": "#B0BEC5",
}
