"""Domain entities exposed by the application."""

from .analytics import (
    AnalyticsReport,
    CategoryCount,
    EventAnalytics,
    MenteeProgress,
    MentorshipAnalytics,
    PopularResource,
    ResourceAnalytics,
    TopicCount,
)
from .dashboard import (
    AdminDashboard,
    AlumniDashboard,
    AlumniDashboardStats,
    NavigationCard,
    PlatformStats,
    RecentReport,
    RecentUser,
    StudentDashboard,
    StudentDashboardStats,
)
from .event import Event, EventType, RecentEvent, UpcomingEvent
from .forum import ForumComment, ForumPost
from .mentorship import (
    ActiveMentorship,
    AvailabilitySlot,
    Mentor,
    MentorshipRequest,
    MentorshipRequestStatus,
    MentorshipSession,
    MentorshipSessionStatus,
    MentorshipStatusItem,
)
from .message import Conversation, LastMessage, Message, MessageAttachment, Participant
from .notification import Notification, NotificationSender, NotificationType
from .person import PersonSummary
from .resource import (
    AudienceSegment,
    Resource,
    ResourceActivity,
    ResourceType,
    ResourceViewPoint,
)
from .role import Role, Viewer
from .session import SessionSnapshot, SessionState
from .user import User

__all__ = [
    "ActiveMentorship",
    "AdminDashboard",
    "AlumniDashboard",
    "AlumniDashboardStats",
    "AnalyticsReport",
    "AudienceSegment",
    "AvailabilitySlot",
    "CategoryCount",
    "Conversation",
    "Event",
    "EventAnalytics",
    "EventType",
    "ForumComment",
    "ForumPost",
    "LastMessage",
    "MenteeProgress",
    "Mentor",
    "MentorshipAnalytics",
    "MentorshipRequest",
    "MentorshipRequestStatus",
    "MentorshipSession",
    "MentorshipSessionStatus",
    "MentorshipStatusItem",
    "Message",
    "MessageAttachment",
    "NavigationCard",
    "Notification",
    "NotificationSender",
    "NotificationType",
    "Participant",
    "PersonSummary",
    "PlatformStats",
    "PopularResource",
    "RecentEvent",
    "RecentReport",
    "RecentUser",
    "Resource",
    "ResourceActivity",
    "ResourceAnalytics",
    "ResourceType",
    "ResourceViewPoint",
    "Role",
    "SessionSnapshot",
    "SessionState",
    "StudentDashboard",
    "StudentDashboardStats",
    "TopicCount",
    "UpcomingEvent",
    "User",
    "Viewer",
]
