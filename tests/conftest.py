from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from security.auth import ALLOWED_CHAT_ID_KEY

ALLOWED_CHAT_ID = 424242


class FakeTelegram:
    """Records outgoing bot calls in the order they happen."""

    def __init__(self, allowed_chat_id: int = ALLOWED_CHAT_ID) -> None:
        self.calls: list[tuple] = []
        self.bot = SimpleNamespace(send_message=AsyncMock(side_effect=self._send_message))
        self.context = SimpleNamespace(
            bot=self.bot,
            bot_data={ALLOWED_CHAT_ID_KEY: allowed_chat_id},
        )

    async def _send_message(self, chat_id, text, reply_markup=None):
        self.calls.append(("send_message", chat_id, text, reply_markup))

    async def _answer(self, *args, **kwargs):
        self.calls.append(("answer",))

    def message_update(self, chat_id: int) -> SimpleNamespace:
        return SimpleNamespace(effective_chat=SimpleNamespace(id=chat_id), callback_query=None)

    def callback_update(self, data, chat_id=ALLOWED_CHAT_ID, with_message=True) -> SimpleNamespace:
        message = SimpleNamespace(chat=SimpleNamespace(id=chat_id)) if with_message else None
        query = SimpleNamespace(
            id="cq-1",
            data=data,
            message=message,
            answer=AsyncMock(side_effect=self._answer),
        )
        return SimpleNamespace(
            effective_chat=message.chat if message else None,
            callback_query=query,
        )

    @property
    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def telegram() -> FakeTelegram:
    return FakeTelegram()


@pytest.fixture
def clean_random_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RANDOM_MIN", raising=False)
    monkeypatch.delenv("RANDOM_MAX", raising=False)
