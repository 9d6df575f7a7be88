from .assistant import (
    AssistantGenerateRequest,
    AssistantGenerateResponse,
    AssistantStatusRead,
)
from .dashboard import (
    AdminDashboardRead,
    AlumniDashboardRead,
    DashboardRead,
    StudentDashboardRead,
)
from .event import EventCreate
from .forum import ForumCommentCreate, ForumPostCreate
from .mentorship import (
    AlumniMentorshipRead,
    AvailabilityRead,
    MentorshipBoardRead,
    MentorshipRequestCreate,
    StudentMentorshipRead,
)
from .message import (
    AlumniConversationRead,
    ConversationRead,
    MessageCreate,
    MessageSendResponse,
    StudentConversationRead,
)
from .notification import (
    BellRead,
    NotificationCreate,
    NotificationListRead,
    NotificationRead,
    NotificationStateRead,
)
from .page import PageRead
from .profile import ProfileRead
from .resource import ResourceActivityRead, ResourceCreate
from .session import LoginRequest, RefreshResponse, SessionRead, SignupRequest, UserRead

__all__ = [
    "AdminDashboardRead",
    "AlumniConversationRead",
    "AlumniDashboardRead",
    "AlumniMentorshipRead",
    "AssistantGenerateRequest",
    "AssistantGenerateResponse",
    "AssistantStatusRead",
    "AvailabilityRead",
    "BellRead",
    "ConversationRead",
    "DashboardRead",
    "EventCreate",
    "ForumCommentCreate",
    "ForumPostCreate",
    "LoginRequest",
    "MentorshipBoardRead",
    "MentorshipRequestCreate",
    "MessageCreate",
    "MessageSendResponse",
    "NotificationCreate",
    "NotificationListRead",
    "NotificationRead",
    "NotificationStateRead",
    "PageRead",
    "ProfileRead",
    "RefreshResponse",
    "ResourceActivityRead",
    "ResourceCreate",
    "SessionRead",
    "SignupRequest",
    "StudentConversationRead",
    "StudentDashboardRead",
    "StudentMentorshipRead",
    "UserRead",
]
