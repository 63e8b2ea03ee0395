"""
메모 패널 레이아웃 모듈
헤더/본문/푸터의 줄바꿈 높이를 계산해서 그릴 위치(rect)를 정하고,
호스트 UI와 편집 결과를 주고받는다.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Protocol

from sticky_note import TEXT_FIELDS
from theme import RGBA, StyleSet, TextStyle, derive_styles, resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    padding: float = 8
    spacing: float = 10
    # 본문/푸터는 스크롤바 자리만큼 좁게 측정
    inset: float = 35
    inset_fields: tuple = ("content", "footer")
    min_header_height: float = 30
    min_content_height: float = 50
    min_footer_height: float = 0

    def min_height(self, field_name):
        return getattr(self, f"min_{field_name}_height")

    def inset_for(self, field_name):
        return self.inset if field_name in self.inset_fields else 0


DEFAULT_LAYOUT = LayoutConfig()


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self):
        return self.y + self.height


class FieldLayout(NamedTuple):
    field_name: str
    rect: Rect
    text: str
    style: TextStyle


class NoteHost(Protocol):
    """메모 패널을 실제로 그리는 호스트 UI가 제공하는 기능"""

    def measure_text(self, text: str, style: TextStyle, width: float) -> float: ...

    def draw_field(self, rect: Rect, text: str, style: TextStyle) -> str: ...

    def draw_panel(self, rect: Rect, background: RGBA, body: Callable[[], None]) -> None: ...


def wrap_text(text, width, measure_width) -> List[str]:
    """단어 단위 줄바꿈 (한 줄보다 긴 단어는 글자 단위로 자름)"""
    if not text or width <= 0:
        return []

    lines = []
    for paragraph in text.split("\n"):
        start = len(lines)
        line = ""
        for word in paragraph.split(" "):
            candidate = f"{line} {word}" if line else word
            if measure_width(candidate) <= width:
                line = candidate
                continue
            if line:
                lines.append(line)
            while word and measure_width(word) > width:
                cut = _fit_prefix(word, width, measure_width)
                lines.append(word[:cut])
                word = word[cut:]
            line = word
        if line or len(lines) == start:
            lines.append(line)
    return lines


def _fit_prefix(word, width, measure_width):
    # 최소 한 글자는 넣어야 무한 루프가 안 생김
    cut = 1
    while cut < len(word) and measure_width(word[:cut + 1]) <= width:
        cut += 1
    return cut


class FixedWidthMeasurer:
    """폰트 없이 쓰는 근사 측정기 (글자 폭 = 글자 크기 x 0.6)"""

    def __init__(self, char_ratio=0.6, line_ratio=1.25):
        self.char_ratio = char_ratio
        self.line_ratio = line_ratio

    def __call__(self, text, style, width):
        advance = style.font_size * self.char_ratio
        lines = wrap_text(text, width, lambda s: len(s) * advance)
        return len(lines) * style.font_size * self.line_ratio


DEFAULT_MEASURER = FixedWidthMeasurer()


class FontMeasurer:
    """tkinter.font.Font 처럼 measure()/metrics()를 가진 폰트로 높이 측정

    vertical_inset: 텍스트 위젯 자체의 위아래 여백 합
    """

    def __init__(self, font_for, vertical_inset=0):
        self.font_for = font_for
        self.vertical_inset = vertical_inset

    def __call__(self, text, style, width):
        font = self.font_for(style)
        lines = wrap_text(text, width, font.measure)
        if not lines:
            return 0.0
        return len(lines) * font.metrics("linespace") + self.vertical_inset


class FieldEditTracker:
    """위젯에 마지막으로 써 넣은 텍스트를 기억해서 사용자 편집을 구분

    포커스와 상관없이, 위젯 내용이 마지막으로 쓴 값과 다르면 사용자 편집이다.
    """

    def __init__(self):
        self._written = {}

    def reconcile(self, field_name, current, text):
        """(메모에 돌려줄 텍스트, 위젯을 text로 다시 써야 하는지) 반환"""
        written = self._written.get(field_name)
        if written is not None and current != written:
            self._written[field_name] = current
            return current, False
        self._written[field_name] = text
        return text, current != text

    def forget(self):
        self._written.clear()


def _measure(measure, text, style, width):
    if not text or width <= 0:
        return 0.0
    return measure(text, style, width)


def layout(state, styles: StyleSet, available_width, measure=None, config=DEFAULT_LAYOUT):
    """헤더, 본문, 푸터 순서로 FieldLayout 세 개 반환"""
    if styles is None:
        styles = derive_styles(resolve(state.color))
    if measure is None:
        measure = DEFAULT_MEASURER

    field_width = max(0.0, available_width - config.padding * 2)
    x = config.padding
    y = config.padding

    fields = []
    for index, name in enumerate(TEXT_FIELDS):
        if index:
            y += config.spacing
        style = styles.for_field(name)
        text = state.get_text(name)
        measured = _measure(measure, text, style, field_width - config.inset_for(name))
        height = max(measured, config.min_height(name))
        fields.append(FieldLayout(name, Rect(x, y, field_width, height), text, style))
        y += height
    return tuple(fields)


def panel_rect(fields, available_width, config=DEFAULT_LAYOUT):
    """필드 전체를 감싸는 배경 영역"""
    bottom = fields[-1].rect.bottom if fields else config.padding
    return Rect(0, 0, max(0.0, available_width), bottom + config.padding)


def render_panel(host: NoteHost, state, theme_state, available_width, config=DEFAULT_LAYOUT):
    """레이아웃 계산 -> 호스트에 그리기 -> 편집된 텍스트를 메모에 반영

    변경된 필드 이름 목록을 반환한다.
    """
    styles = theme_state.styles_for(state.color)
    fields = layout(state, styles, available_width, measure=host.measure_text, config=config)
    changed = []

    def body():
        for field in fields:
            edited = host.draw_field(field.rect, field.text, field.style)
            if edited is not None and edited != field.text:
                state.set_text(field.field_name, edited)
                changed.append(field.field_name)

    host.draw_panel(panel_rect(fields, available_width, config), theme_state.theme.background, body)

    if changed:
        logger.debug(f"Note fields edited: {', '.join(changed)}")
    return changed
