"""
메모 색상 테마 모듈
색상 -> (배경색, 글자색) 변환, 헤더/본문/푸터 스타일 생성, 패널별 스타일 캐시
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from PIL import Image

from sticky_note import NoteColor
from ui_colors import NOTE_THEMES

logger = logging.getLogger(__name__)

HEADER_FONT_SIZE = 24
BODY_FONT_SIZE = 14

# (left, right, top, bottom)
PANEL_BORDER = (5, 5, 5, 5)
PANEL_MARGIN = (5, 15, 5, 5)
PANEL_PADDING = (8, 8, 8, 8)
NO_OFFSET = (0, 0, 0, 0)


class RGBA(NamedTuple):
    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgba8(self):
        """PIL용 0~255 튜플"""
        return tuple(max(0, min(255, round(c * 255))) for c in self)

    def to_hex(self):
        """Tk용 #rrggbb 문자열 (알파 무시)"""
        r, g, b, _ = self.to_rgba8()
        return f"#{r:02x}{g:02x}{b:02x}"


@dataclass(frozen=True)
class ThemePair:
    background: RGBA
    text: RGBA


@dataclass(frozen=True)
class TextStyle:
    font_size: int
    text_color: RGBA
    word_wrap: bool = True
    background: Optional[RGBA] = None
    alignment: str = "upper_left"
    padding: Tuple[int, int, int, int] = NO_OFFSET
    margin: Tuple[int, int, int, int] = NO_OFFSET


@dataclass(frozen=True)
class StyleSet:
    header: TextStyle
    content: TextStyle
    footer: TextStyle

    def for_field(self, field_name):
        return getattr(self, field_name)


@dataclass(frozen=True)
class PanelStyle:
    background: RGBA
    border: Tuple[int, int, int, int] = PANEL_BORDER
    margin: Tuple[int, int, int, int] = PANEL_MARGIN
    padding: Tuple[int, int, int, int] = PANEL_PADDING


THEME_TABLE = {
    color: ThemePair(background=RGBA(*entry["background"]), text=RGBA(*entry["text"]))
    for color, entry in NOTE_THEMES.items()
}


def resolve(color) -> ThemePair:
    """메모 색상에 해당하는 테마 반환 (알 수 없는 값은 노란색)"""
    return THEME_TABLE.get(NoteColor.coerce(color), THEME_TABLE[NoteColor.YELLOW])


def derive_styles(pair: ThemePair) -> StyleSet:
    """테마에서 헤더/본문/푸터 스타일 생성 (글자 크기만 다름)"""
    header = TextStyle(font_size=HEADER_FONT_SIZE, text_color=pair.text)
    content = TextStyle(font_size=BODY_FONT_SIZE, text_color=pair.text)
    footer = TextStyle(font_size=BODY_FONT_SIZE, text_color=pair.text)
    return StyleSet(header=header, content=content, footer=footer)


def panel_style(pair: ThemePair) -> PanelStyle:
    return PanelStyle(background=pair.background)


def create_color_swatch(color, size=(2, 2)):
    """단색 배경 이미지 생성"""
    return Image.new("RGBA", size, RGBA(*color).to_rgba8())


class ThemeState:
    """패널 하나가 소유하는 테마/스타일 캐시"""

    def __init__(self):
        self.theme = None
        self.styles = None
        self.swatch = None
        self.recompute_count = 0

    def styles_for(self, color) -> StyleSet:
        """테마가 바뀌었을 때만 스타일과 배경 이미지를 다시 만든다"""
        pair = resolve(color)
        if self.styles is None or pair != self.theme:
            logger.debug(f"Recomputing note styles for {NoteColor.coerce(color).value}")
            self.styles = derive_styles(pair)
            self._replace_swatch(create_color_swatch(pair.background))
            self.theme = pair
            self.recompute_count += 1
        return self.styles

    def _replace_swatch(self, swatch):
        if self.swatch is not None:
            self.swatch.close()
        self.swatch = swatch

    def reset(self):
        """패널 닫힐 때 캐시 정리"""
        self._replace_swatch(None)
        self.theme = None
        self.styles = None
