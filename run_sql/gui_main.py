from PyQt5.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QInputDialog,
    QLineEdit,
    QMessageBox,
    QVBoxLayout,
)

from .models import Answer
from .prompts import Prompter


class LoginDialog(QDialog):
    """사용자명 / 비밀번호 입력 창"""

    def __init__(self, title):
        super().__init__()
        self.setWindowTitle(title)
        layout = QVBoxLayout()
        form_layout = QFormLayout()
        self.user_input = QLineEdit(); self.user_input.setPlaceholderText('Username')
        self.pw_input = QLineEdit(); self.pw_input.setPlaceholderText('Password'); self.pw_input.setEchoMode(QLineEdit.Password)
        self.pw_input.returnPressed.connect(self.accept)
        form_layout.addRow('Username', self.user_input)
        form_layout.addRow('Password', self.pw_input)
        layout.addLayout(form_layout)
        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
        self.setLayout(layout)


class QtPrompter(Prompter):
    """PyQt5 모달 대화상자. QApplication 이 먼저 생성되어 있어야 함"""

    def __init__(self, title='Run SQL'):
        self.title = title

    def _title(self, suffix):
        return f'{self.title} - {suffix}'

    def ask_text(self, label, title, default=''):
        text, ok = QInputDialog.getText(None, self._title(title), label, QLineEdit.Normal, default)
        return Answer.of(text if ok else None)

    def ask_choice(self, label, items):
        item, ok = QInputDialog.getItem(None, self.title, label, list(items), 0, False)
        return Answer.of(item if ok else None)

    def ask_login(self, title):
        dlg = LoginDialog(self._title(title))
        if dlg.exec_() != QDialog.Accepted:
            return Answer.of(None), Answer.of(None)
        return Answer.of(dlg.user_input.text()), Answer.of(dlg.pw_input.text())

    def error(self, message):
        QMessageBox.critical(None, self._title('오류'), message)

    def notify(self, message):
        QMessageBox.information(None, self.title, message)
