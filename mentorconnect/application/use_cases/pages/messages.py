"""Messages page: conversation list, threads and optional AI replies."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime

from mentorconnect.domain.entities import Conversation, Message, Role
from mentorconnect.infrastructure.fixtures.message_data import (
    AI_SUGGESTIONS,
    CONVERSATION_STARTERS,
    CURRENT_PARTICIPANT_ID,
    REPLY_TEMPLATES,
    alumni_thread,
    conversations,
    student_thread,
)
from mentorconnect.infrastructure.llm_client import LocalChatService
from mentorconnect.utils.datetime import now_in_app_timezone

logger = logging.getLogger(__name__)

ThreadFactory = Callable[[str], list[Message]]


@dataclass(frozen=True)
class StudentConversationView:
    conversation: Conversation
    messages: tuple[Message, ...]
    conversation_starters: dict[str, str]


@dataclass(frozen=True)
class AlumniConversationView:
    """Conversation view with the alumni-only reply helpers."""

    conversation: Conversation
    messages: tuple[Message, ...]
    reply_templates: tuple[str, ...]
    ai_suggestions: dict[str, str]

    @property
    def pinned(self) -> tuple[Message, ...]:
        return tuple(message for message in self.messages if message.is_pinned)


def _system_prompt(conversation: Conversation) -> str:
    counterpart = conversation.counterpart
    return (
        f"You are {counterpart.name}, a member of a university mentorship platform "
        f"with the role {counterpart.role.value}. Reply to the last message in one "
        "short, friendly paragraph."
    )


class MessagesPage:
    """Conversations shared by every role plus one lazily built thread each."""

    def __init__(self, conversations: list[Conversation], thread_factory: ThreadFactory) -> None:
        self.conversations = conversations
        self._thread_factory = thread_factory
        self._threads: dict[str, list[Message]] = {}

    @classmethod
    def for_role(cls, role: Role) -> "MessagesPage":
        factory = alumni_thread if role is Role.ALUMNI else student_thread
        return cls(conversations(), factory)

    def search(self, query: str = "") -> list[Conversation]:
        needle = query.strip().lower()
        return [
            conversation
            for conversation in self.conversations
            if any(needle in participant.name.lower() for participant in conversation.participants)
        ]

    def conversation(self, conversation_id: str) -> Conversation:
        for conversation in self.conversations:
            if conversation.id == conversation_id:
                return conversation
        raise ValueError("Conversation not found")

    def thread(self, conversation_id: str) -> list[Message]:
        conversation = self.conversation(conversation_id)
        messages = self._threads.get(conversation_id)
        if messages is None:
            messages = self._thread_factory(conversation.counterpart.id)
            self._threads[conversation_id] = messages
        return messages

    def student_view(self, conversation_id: str) -> StudentConversationView:
        return StudentConversationView(
            conversation=self.conversation(conversation_id),
            messages=tuple(self.thread(conversation_id)),
            conversation_starters=dict(CONVERSATION_STARTERS),
        )

    def alumni_view(self, conversation_id: str) -> AlumniConversationView:
        return AlumniConversationView(
            conversation=self.conversation(conversation_id),
            messages=tuple(self.thread(conversation_id)),
            reply_templates=REPLY_TEMPLATES,
            ai_suggestions=dict(AI_SUGGESTIONS),
        )

    def send_message(
        self,
        conversation_id: str,
        content: str,
        *,
        sender_id: str = CURRENT_PARTICIPANT_ID,
        now: datetime | None = None,
    ) -> Message | None:
        """Append a message to the thread. Blank content is ignored."""

        text = content.strip()
        if not text:
            return None
        messages = self.thread(conversation_id)
        message = Message(
            id=str(len(messages) + 1),
            sender_id=sender_id,
            content=text,
            timestamp=now or now_in_app_timezone(),
            is_read=True,
        )
        messages.append(message)
        return message

    def toggle_pin(self, conversation_id: str, message_id: str) -> Message:
        messages = self.thread(conversation_id)
        for index, message in enumerate(messages):
            if message.id == message_id:
                updated = replace(message, is_pinned=not message.is_pinned)
                messages[index] = updated
                return updated
        raise ValueError("Message not found")

    async def generate_reply(
        self,
        conversation_id: str,
        chat_service: LocalChatService,
        *,
        now: datetime | None = None,
    ) -> Message | None:
        """Let the local model answer as the other participant."""

        conversation = self.conversation(conversation_id)
        history = [{"role": "system", "content": _system_prompt(conversation)}]
        for message in self.thread(conversation_id):
            role = "user" if message.sender_id == CURRENT_PARTICIPANT_ID else "assistant"
            history.append({"role": role, "content": message.content})

        reply = await chat_service.chat(history)
        logger.debug("Generated reply for conversation %s", conversation_id)
        return self.send_message(
            conversation_id,
            reply,
            sender_id=conversation.counterpart.id,
            now=now,
        )


__all__ = [
    "AlumniConversationView",
    "MessagesPage",
    "StudentConversationView",
]
