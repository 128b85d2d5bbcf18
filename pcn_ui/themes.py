# pcn_ui/themes.py
# Qt stylesheets for the widgets the trainer window uses.

LIGHT_THEME = """
QWidget {
    background-color: #f4f6f8;
    color: #1b2430;
    font-family: 'Segoe UI', Roboto, Arial, sans-serif;
    font-size: 13px;
}
QGroupBox {
    background-color: #ffffff;
    border: 1px solid #cfd8e3;
    border-radius: 6px;
    margin-top: 10px;
    padding: 6px;
}
QGroupBox::title { subcontrol-origin: margin; left: 8px; color: #2f6f4f; font-weight: 600; }
QPushButton {
    background-color: #2f6f4f;
    color: white;
    border-radius: 6px;
    padding: 5px 10px;
}
QPushButton:pressed { background-color: #245a3f; }
QLineEdit, QSpinBox, QComboBox, QTextEdit, QTableWidget {
    background-color: #ffffff;
    border: 1px solid #cfd8e3;
    border-radius: 4px;
}
QHeaderView::section { background-color: #e6ecf2; padding: 3px; border: none; }
"""

DARK_THEME = """
QWidget {
    background-color: #161a1f;
    color: #dfe6ee;
    font-family: 'Segoe UI', Roboto, Arial, sans-serif;
    font-size: 13px;
}
QGroupBox {
    background-color: #1f252c;
    border: 1px solid #2e3742;
    border-radius: 6px;
    margin-top: 10px;
    padding: 6px;
}
QGroupBox::title { subcontrol-origin: margin; left: 8px; color: #7fd1a5; font-weight: 600; }
QPushButton {
    background-color: #3d8c63;
    color: #f5fff9;
    border-radius: 6px;
    padding: 5px 10px;
}
QPushButton:pressed { background-color: #2f6f4f; }
QLineEdit, QSpinBox, QComboBox, QTextEdit, QTableWidget {
    background-color: #12161a;
    color: #dfe6ee;
    border: 1px solid #2e3742;
    border-radius: 4px;
}
QHeaderView::section { background-color: #262d35; color: #dfe6ee; padding: 3px; border: none; }
"""
