"""
사용자 입력 인터페이스

모든 호출은 동기식(블로킹)이며 Answer 를 반환합니다:
  - VALUE: 입력값
  - CANCELLED: 취소 (value == "")
  - SKIPPED: 이미 알고 있는 값이라 묻지 않음
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from .models import Answer


class Prompter(ABC):
    """모달 대화상자 기반 입력/알림. gui_main.QtPrompter 가 실제 구현"""

    @abstractmethod
    def ask_text(self, label: str, title: str, default: str = "") -> Answer:
        ...

    @abstractmethod
    def ask_choice(self, label: str, items: Sequence[str]) -> Answer:
        ...

    @abstractmethod
    def ask_login(self, title: str) -> Tuple[Answer, Answer]:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...

    @abstractmethod
    def notify(self, message: str) -> None:
        ...
