from __future__ import annotations

from typing import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget
import pyqtgraph as pg

from ..categories import NumberTypeOption


class CategoryCard(QPushButton):
    """Checkable card for one number type."""

    def __init__(self, option: NumberTypeOption, parent=None):
        super().__init__(parent)
        self.option = option
        self.setCheckable(True)
        self.setObjectName("CategoryCard")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        v = QVBoxLayout(self)
        head = QHBoxLayout()
        self.glyph = QLabel(option.glyph)
        self.glyph.setObjectName("CardGlyph")
        self.title = QLabel(option.label)
        self.title.setObjectName("CardTitle")
        head.addWidget(self.glyph)
        head.addWidget(self.title)
        head.addStretch(1)
        v.addLayout(head)
        self.desc = QLabel(option.description)
        self.desc.setObjectName("CardDescription")
        self.desc.setWordWrap(True)
        v.addWidget(self.desc)
        for lbl in (self.glyph, self.title, self.desc):
            lbl.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setMinimumHeight(84)


class ResultField(QFrame):
    def __init__(self, title: str, accent: bool = False, parent=None):
        super().__init__(parent)
        self.setObjectName("ResultField")
        v = QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)
        self.title = QLabel(title)
        self.title.setObjectName("FieldTitle")
        self.value = QLabel("")
        self.value.setObjectName("FieldValueAccent" if accent else "FieldValue")
        self.value.setWordWrap(True)
        self.value.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        v.addWidget(self.title)
        v.addWidget(self.value)

    def set_value(self, text: str, muted: bool = False) -> None:
        self.value.setText(text)
        self.value.setProperty("muted", muted)
        self.value.style().unpolish(self.value)
        self.value.style().polish(self.value)


class WindowChart(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        v = QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)
        self.plot = pg.PlotWidget(title="Window")
        self.plot.showGrid(x=True, y=True, alpha=0.3)
        self.plot.setMinimumHeight(160)
        self.cur_values = self.plot.plot([], pen=pg.mkPen('#4f46e5', width=2), symbol='o', symbolSize=6)
        self.cur_avg = self.plot.plot([], pen=pg.mkPen('#f59e0b', width=2, style=Qt.PenStyle.DashLine))
        v.addWidget(self.plot)

    def update_series(self, values: Sequence[float], average: float) -> None:
        xs = list(range(1, len(values) + 1))
        self.cur_values.setData(xs, list(values))
        if xs:
            self.cur_avg.setData([xs[0], xs[-1]], [average, average])
        else:
            self.cur_avg.setData([], [])
