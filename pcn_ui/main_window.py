# pcn_ui/main_window.py
import time

import numpy as np

# Matplotlib for plotting
import matplotlib
matplotlib.use('Qt5Agg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas

# Try to import PyQt5, fallback to PySide6
try:
    from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                                 QLineEdit, QPushButton, QComboBox, QTableWidget, QTableWidgetItem,
                                 QMessageBox, QSpinBox, QTextEdit, QGroupBox)
    from PyQt5.QtCore import QCoreApplication
    qt_binding = 'PyQt5'
except ImportError:
    from PySide6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                                   QLineEdit, QPushButton, QComboBox, QTableWidget, QTableWidgetItem,
                                   QMessageBox, QSpinBox, QTextEdit, QGroupBox)
    from PySide6.QtCore import QCoreApplication
    qt_binding = 'PySide6'

from pcn.config import DEFAULT_EPOCHS, DEFAULT_ETA, TrainingConfig
from pcn.datasets import logic_gate, parse_custom_points
from pcn.errors import PerceptronError
from pcn.evaluation import confusion_matrix
from pcn.perceptron import Perceptron
from pcn_ui.themes import DARK_THEME, LIGHT_THEME
from pcn_ui.plot3d import show_score_surface


class PerceptronTrainerMainWindow(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle('Batch Perceptron Trainer')
        self.resize(1200, 780)

        self.dark_mode = True

        main_layout = QHBoxLayout(self)
        control_layout = QVBoxLayout()
        plot_layout = QVBoxLayout()

        # Dataset group
        dataset_group = QGroupBox('Dataset')
        ds_layout = QVBoxLayout()
        self.dataset_combo = QComboBox()
        self.dataset_combo.addItems(['AND', 'OR', 'XOR', 'Custom'])
        self.dataset_combo.currentTextChanged.connect(self.on_dataset_change)
        ds_layout.addWidget(self.dataset_combo)
        ds_layout.addWidget(QLabel('Custom points (one per line): x1,...,xn,y'))
        self.custom_text = QTextEdit()
        self.custom_text.setPlaceholderText('0,0,0\n0,1,1\n1,0,1\n1,1,1')
        ds_layout.addWidget(self.custom_text)
        h_out = QHBoxLayout()
        h_out.addWidget(QLabel('Outputs (y is a class index when > 1):'))
        self.outputs_spin = QSpinBox()
        self.outputs_spin.setRange(1, 10)
        self.outputs_spin.setValue(1)
        h_out.addWidget(self.outputs_spin)
        ds_layout.addLayout(h_out)
        dataset_group.setLayout(ds_layout)
        control_layout.addWidget(dataset_group)

        # Parameters
        params_group = QGroupBox('Parameters')
        params_layout = QHBoxLayout()
        params_layout.addWidget(QLabel('eta:'))
        self.eta_input = QLineEdit(str(DEFAULT_ETA))
        params_layout.addWidget(self.eta_input)
        params_layout.addWidget(QLabel('Epochs:'))
        self.epochs_input = QSpinBox()
        self.epochs_input.setRange(0, 10000)
        self.epochs_input.setValue(DEFAULT_EPOCHS)
        params_layout.addWidget(self.epochs_input)
        params_layout.addWidget(QLabel('Seed:'))
        self.seed_input = QLineEdit('')
        self.seed_input.setPlaceholderText('clock')
        params_layout.addWidget(self.seed_input)
        params_group.setLayout(params_layout)
        control_layout.addWidget(params_group)

        # Buttons / controls
        btn_layout = QHBoxLayout()
        self.train_btn = QPushButton('Train (animate)')
        self.train_btn.clicked.connect(self.on_train)
        btn_layout.addWidget(self.train_btn)
        self.clear_btn = QPushButton('Clear')
        self.clear_btn.clicked.connect(self.on_clear)
        btn_layout.addWidget(self.clear_btn)
        self.theme_toggle = QPushButton('Toggle Theme')
        self.theme_toggle.clicked.connect(self.toggle_theme)
        btn_layout.addWidget(self.theme_toggle)
        self.plot3d_btn = QPushButton('3D Score Surface')
        self.plot3d_btn.clicked.connect(self.on_plot_3d)
        btn_layout.addWidget(self.plot3d_btn)
        control_layout.addLayout(btn_layout)

        # Table log
        self.table = QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(['epoch', 'errors', 'weights (last row = bias)'])
        control_layout.addWidget(QLabel('Training log'))
        control_layout.addWidget(self.table, stretch=1)

        main_layout.addLayout(control_layout, 1)

        # Right column - plots
        self.fig_dec = Figure(figsize=(6, 4))
        self.canvas_dec = FigureCanvas(self.fig_dec)
        plot_layout.addWidget(self.canvas_dec, stretch=3)

        self.fig_acc = Figure(figsize=(6, 2))
        self.canvas_acc = FigureCanvas(self.fig_acc)
        plot_layout.addWidget(self.canvas_acc, stretch=1)

        bottom = QHBoxLayout()
        self.fig_w = Figure(figsize=(3, 2))
        self.canvas_w = FigureCanvas(self.fig_w)
        bottom.addWidget(self.canvas_w)
        self.fig_cm = Figure(figsize=(3, 2))
        self.canvas_cm = FigureCanvas(self.fig_cm)
        bottom.addWidget(self.canvas_cm)
        plot_layout.addLayout(bottom, stretch=2)

        self.status_label = QLabel('Ready — using %s' % qt_binding)
        plot_layout.addWidget(self.status_label)

        main_layout.addLayout(plot_layout, 2)

        # internal holders
        self.model = None
        self.dataset_cache = None
        self.epochs = []
        self.errors_per_epoch = []

        self.apply_theme(self.dark_mode)
        self.on_dataset_change(self.dataset_combo.currentText())

    # -------------------- theme ---------------------
    def apply_theme(self, dark: bool):
        self.setStyleSheet(DARK_THEME if dark else LIGHT_THEME)
        self.dark_mode = dark

    def toggle_theme(self):
        self.apply_theme(not self.dark_mode)

    # -------------------- dataset & config ----------------
    def on_dataset_change(self, text):
        custom = text == 'Custom'
        self.custom_text.setEnabled(custom)
        self.outputs_spin.setEnabled(custom)

    def parse_dataset(self):
        name = self.dataset_combo.currentText()
        if name == 'Custom':
            txt = self.custom_text.toPlainText().strip()
            data = parse_custom_points(txt, n_out=self.outputs_spin.value())
        else:
            data = logic_gate(name)
        self.dataset_cache = data
        return data

    def read_config(self):
        seed_txt = self.seed_input.text().strip()
        return TrainingConfig(eta=float(self.eta_input.text()),
                              epochs=int(self.epochs_input.value()),
                              seed=int(seed_txt) if seed_txt else None)

    # -------------------- UI actions ----------------
    def clear_plots(self):
        for fig, canvas in ((self.fig_dec, self.canvas_dec), (self.fig_acc, self.canvas_acc),
                            (self.fig_w, self.canvas_w), (self.fig_cm, self.canvas_cm)):
            fig.clear()
            canvas.draw()

    def on_clear(self):
        self.table.setRowCount(0)
        self.clear_plots()
        self.epochs.clear()
        self.errors_per_epoch.clear()
        self.model = None
        self.status_label.setText('Cleared')

    def on_train(self):
        try:
            inputs, targets = self.parse_dataset()
        except ValueError as e:
            QMessageBox.critical(self, "Dataset", str(e))
            return
        try:
            config = self.read_config()
        except ValueError as e:
            QMessageBox.critical(self, "Param error", str(e))
            return

        self.table.setRowCount(0)
        self.epochs.clear()
        self.errors_per_epoch.clear()
        self.clear_plots()

        delay_ms = 80
        try:
            self.model = Perceptron.from_dataset(inputs, targets, rng=config.seed)

            def on_epoch(epoch, weights):
                self.epoch_callback(epoch, weights, inputs, targets)
                time.sleep(delay_ms / 1000.0)

            result = self.model.train(inputs, targets, config.eta, config.epochs, callback=on_epoch)
            ev = confusion_matrix(self.model, inputs, targets)
        except PerceptronError as e:
            QMessageBox.critical(self, "Training error", str(e))
            return

        self.draw_current_model(self.model.weights)
        self.draw_confusion_matrix(ev)
        outputs = ' '.join('%.0f' % v for v in result.final_outputs.ravel())
        self.status_label.setText(f"Training finished. outputs=[{outputs}] "
                                  f"accuracy={ev.accuracy:.4f} ({int(np.trace(ev.confusion))}/{ev.n_samples})")

    def epoch_callback(self, epoch, weights, inputs, targets):
        wrong = int(np.sum(np.any(self.model.predict(inputs) != targets, axis=1)))
        self.epochs.append(epoch)
        self.errors_per_epoch.append(wrong)
        self.append_epoch_to_table(epoch, wrong, weights)
        self.draw_current_model(weights)
        self.draw_weights(weights, epoch)
        self.draw_error_plot(len(inputs))
        self.status_label.setText(f"Epoch {epoch} done — {wrong} misclassified after update")
        QCoreApplication.processEvents()

    def append_epoch_to_table(self, epoch, wrong, weights):
        i = self.table.rowCount()
        self.table.insertRow(i)
        self.table.setItem(i, 0, QTableWidgetItem(str(epoch)))
        self.table.setItem(i, 1, QTableWidgetItem(str(wrong)))
        rows = ' | '.join(' '.join('%.4f' % v for v in row) for row in weights)
        self.table.setItem(i, 2, QTableWidgetItem(rows))
        self.table.scrollToBottom()

    # ------------- extra UI action: 3D surface button --------------
    def on_plot_3d(self):
        if self.model is None:
            QMessageBox.information(self, "3D score surface", "Train a model first.")
            return
        inputs, _ = self.dataset_cache
        if inputs.shape[1] != 2:
            QMessageBox.information(self, "3D score surface",
                                    "3D surface is only available for 2D inputs (x1, x2).")
            return
        show_score_surface(self.model, inputs, resolution=60)

    # ------------- drawing helpers --------------
    def draw_current_model(self, weights):
        """Scatter the data and draw score == 0 for every output (2 inputs only)."""
        self.fig_dec.clf()
        ax = self.fig_dec.add_subplot(111)
        inputs, targets = self.dataset_cache

        if inputs.shape[1] != 2:
            ax.text(0.5, 0.5, "Decision boundary only drawn for 2 inputs.",
                    ha='center', va='center', transform=ax.transAxes)
            self.canvas_dec.draw()
            return

        labels = targets[:, 0].astype(int) if targets.shape[1] == 1 else np.argmax(targets, axis=1)
        for cls in np.unique(labels):
            pts = inputs[labels == cls]
            ax.scatter(pts[:, 0], pts[:, 1], marker='os^vD<>ph*'[cls % 10], s=80,
                       edgecolors='k', label=f'class {cls}')

        x_min, x_max = inputs[:, 0].min() - 0.5, inputs[:, 0].max() + 0.5
        y_min, y_max = inputs[:, 1].min() - 0.5, inputs[:, 1].max() + 0.5
        xs = np.linspace(x_min, x_max, 200)
        for j in range(weights.shape[1]):
            w1, w2, b = weights[0, j], weights[1, j], weights[2, j]
            # bias input is -1: boundary is w1*x1 + w2*x2 - b = 0
            if abs(w2) > 1e-8:
                ax.plot(xs, (b - w1 * xs) / w2, '-', linewidth=2, label=f'output {j}')
            elif abs(w1) > 1e-8:
                ax.axvline(b / w1, linestyle='--', linewidth=2, label=f'output {j}')
        ax.set_xlim(x_min, x_max)
        ax.set_ylim(y_min, y_max)
        ax.legend(fontsize='small')
        ax.set_title('Decision boundary')
        self.canvas_dec.draw()

    def draw_weights(self, weights, epoch):
        self.fig_w.clf()
        ax = self.fig_w.add_subplot(111)
        im = ax.imshow(weights, aspect='auto', cmap='coolwarm')
        ax.set_title(f'Weights (epoch {epoch})')
        ax.set_xlabel('output')
        ax.set_ylabel('input (last = bias)')
        self.fig_w.colorbar(im, ax=ax, fraction=0.05)
        self.canvas_w.draw()

    def draw_error_plot(self, n_samples):
        self.fig_acc.clf()
        ax = self.fig_acc.add_subplot(111)
        ax.bar(self.epochs, self.errors_per_epoch, alpha=0.5, label='misclassified')
        acc = [1.0 - e / n_samples for e in self.errors_per_epoch]
        ax.plot(self.epochs, acc, marker='o', linestyle='-', label='accuracy')
        ax.set_xlabel('Epoch')
        ax.set_ylim(0, max([1] + self.errors_per_epoch))
        ax.legend()
        self.canvas_acc.draw()

    def draw_confusion_matrix(self, ev):
        self.fig_cm.clf()
        ax = self.fig_cm.add_subplot(111)
        ax.imshow(ev.confusion, cmap='Blues')
        for a in range(ev.n_classes):
            for p in range(ev.n_classes):
                ax.text(p, a, str(ev.confusion[a, p]), ha='center', va='center')
        ax.set_xlabel('predicted')
        ax.set_ylabel('actual')
        ax.set_title(f'Confusion matrix (acc {ev.accuracy:.4f})')
        self.canvas_cm.draw()
