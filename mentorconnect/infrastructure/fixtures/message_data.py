"""Sample conversations and message threads for the messages page."""

from __future__ import annotations

from datetime import datetime, timezone

from mentorconnect.domain.entities import (
    Conversation,
    LastMessage,
    Message,
    Participant,
    Role,
)

CURRENT_PARTICIPANT_ID = "1"

REPLY_TEMPLATES: tuple[str, ...] = (
    "I'd be happy to review your resume. Please share it when convenient.",
    "Let's schedule a call to discuss this in more detail. Are you available this week?",
    "Thanks for reaching out. Here are some resources that might help you: [links]",
    "Great question! Based on my experience in the industry...",
)

AI_SUGGESTIONS: dict[str, str] = {
    "Career advice": (
        "That's a great question! For someone starting their career, I'd recommend..."
    ),
    "Schedule call": "I'm available for a call this Friday at 3pm. Would that work for you?",
}

CONVERSATION_STARTERS: dict[str, str] = {
    "Career journey": "Could you tell me more about your career journey?",
    "Skill development": "What skills should I focus on developing right now?",
    "Internship advice": (
        "Do you have any advice for someone looking for their first internship?"
    ),
}

_THREAD_CONTENT: tuple[str, ...] = (
    "Hello! I had some questions about career paths in software engineering. "
    "Do you have time for a quick chat?",
    "Hi there! I'd be happy to help. What specific questions do you have?",
    "I'm trying to decide between focusing on frontend or backend development. "
    "What would you recommend for someone just starting their career?",
    "Also, do you have time for a quick call sometime this week?",
)


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def conversations() -> list[Conversation]:
    return [
        Conversation(
            id="1",
            participants=(
                Participant(id="2", name="Sarah Johnson", role=Role.ALUMNI, is_online=True),
            ),
            last_message=LastMessage(
                content="Do you have time for a quick chat about the internship?",
                timestamp=_utc(2023, 5, 15, 14, 30),
                sender_id="2",
            ),
            unread_count=2,
        ),
        Conversation(
            id="2",
            participants=(Participant(id="3", name="Michael Chen", role=Role.ALUMNI),),
            last_message=LastMessage(
                content="I've shared some resources about system design interviews.",
                timestamp=_utc(2023, 5, 14, 10, 15),
                sender_id="3",
            ),
        ),
        Conversation(
            id="3",
            participants=(
                Participant(id="4", name="Emma Davis", role=Role.STUDENT, is_online=True),
            ),
            last_message=LastMessage(
                content="Thanks for your help with the project!",
                timestamp=_utc(2023, 5, 13, 17, 45),
                sender_id=CURRENT_PARTICIPANT_ID,
            ),
        ),
    ]


def alumni_thread(counterpart_id: str) -> list[Message]:
    """Thread where the other participant asks the questions."""

    senders = (counterpart_id, CURRENT_PARTICIPANT_ID, counterpart_id, counterpart_id)
    minutes = (30, 35, 40, 41)
    return [
        Message(
            id=str(index),
            sender_id=sender,
            content=content,
            timestamp=_utc(2023, 5, 15, 14, minute),
            is_read=index != 4,
        )
        for index, (sender, content, minute) in enumerate(
            zip(senders, _THREAD_CONTENT, minutes), start=1
        )
    ]


def student_thread(counterpart_id: str) -> list[Message]:
    """Thread where the current student asks the questions."""

    senders = (
        CURRENT_PARTICIPANT_ID,
        counterpart_id,
        CURRENT_PARTICIPANT_ID,
        CURRENT_PARTICIPANT_ID,
    )
    minutes = (30, 35, 40, 41)
    return [
        Message(
            id=str(index),
            sender_id=sender,
            content=content,
            timestamp=_utc(2023, 5, 15, 14, minute),
            is_read=True,
        )
        for index, (sender, content, minute) in enumerate(
            zip(senders, _THREAD_CONTENT, minutes), start=1
        )
    ]


__all__ = [
    "AI_SUGGESTIONS",
    "CONVERSATION_STARTERS",
    "CURRENT_PARTICIPANT_ID",
    "REPLY_TEMPLATES",
    "alumni_thread",
    "conversations",
    "student_thread",
]
