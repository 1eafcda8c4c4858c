from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..calculator import AverageCalculator
from ..categories import NUMBER_TYPES
from ..config import Preferences
from .widgets import CategoryCard, ResultField, WindowChart


log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, prefs: Preferences):
        super().__init__()
        self.prefs = prefs
        self.calc = AverageCalculator(
            capacity=prefs.window_size,
            category=prefs.default_category,
            decimals=prefs.decimals,
        )
        self.setWindowTitle("Average Calculator")
        self.resize(900, 640)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)

        title = QLabel("Average Calculator")
        title.setObjectName("Title")
        subtitle = QLabel(f"Calculate running averages with a sliding window of {self.calc.capacity} numbers")
        subtitle.setObjectName("Subtitle")
        layout.addWidget(title)
        layout.addWidget(subtitle)

        layout.addLayout(self._build_categories())
        layout.addLayout(self._build_input())
        self.lbl_error = QLabel("")
        self.lbl_error.setObjectName("Error")
        self.lbl_error.hide()
        layout.addWidget(self.lbl_error)

        self.results = self._build_results()
        self.results.hide()
        layout.addWidget(self.results)
        layout.addStretch(1)
        log.info("Main window ready (window size %d)", self.calc.capacity)

    def _build_categories(self) -> QGridLayout:
        grid = QGridLayout()
        self.group = QButtonGroup(self)
        self.group.setExclusive(True)
        self.cards = {}
        for i, opt in enumerate(NUMBER_TYPES):
            card = CategoryCard(opt)
            card.setChecked(opt.id == self.calc.selected)
            self.group.addButton(card)
            self.cards[opt.id] = card
            grid.addWidget(card, 0, i)
        self.group.buttonClicked.connect(lambda b: self.calc.select(b.option.id))
        return grid

    def _build_input(self) -> QHBoxLayout:
        row = QHBoxLayout()
        self.ed_number = QLineEdit()
        self.ed_number.setPlaceholderText("Enter a number")
        self.ed_number.returnPressed.connect(self._on_add)
        self.bt_add = QPushButton("Add Number")
        self.bt_add.setObjectName("Primary")
        self.bt_add.clicked.connect(self._on_add)
        row.addWidget(self.ed_number, 1)
        row.addWidget(self.bt_add)
        return row

    def _build_results(self) -> QGroupBox:
        box = QGroupBox("Results")
        g = QGridLayout(box)
        self.f_prev = ResultField("Previous Window State")
        self.f_curr = ResultField("Current Window State")
        self.f_added = ResultField("New Numbers Added")
        self.f_avg = ResultField("Current Average", accent=True)
        g.addWidget(self.f_prev, 0, 0)
        g.addWidget(self.f_curr, 1, 0)
        g.addWidget(self.f_added, 0, 1)
        g.addWidget(self.f_avg, 1, 1)
        self.chart = WindowChart()
        g.addWidget(self.chart, 2, 0, 1, 2)
        return box

    def _on_add(self) -> None:
        self.calc.submit(self.ed_number.text())
        self.refresh()

    def refresh(self) -> None:
        if self.calc.error:
            self.lbl_error.setText(self.calc.error)
            self.lbl_error.show()
            return
        self.lbl_error.clear()
        self.lbl_error.hide()
        self.ed_number.setText(self.calc.input_text)
        self.cards[self.calc.selected].setChecked(True)
        r = self.calc.rendered()
        if r is None or not self.calc.has_results:
            self.results.hide()
            return
        snap = self.calc.snapshot
        self.f_prev.set_value(r["previous"], muted=not snap.previous_window)
        self.f_curr.set_value(r["current"])
        self.f_added.set_value(r["added"])
        self.f_avg.set_value(r["average"])
        self.chart.update_series(snap.current_window, snap.average)
        self.results.show()
