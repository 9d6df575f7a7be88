"""Sample data displayed on the role dashboards."""

from __future__ import annotations

from datetime import datetime, timedelta

from mentorconnect.domain.entities import (
    ActiveMentorship,
    AdminDashboard,
    AlumniDashboard,
    AlumniDashboardStats,
    Mentor,
    MentorshipRequest,
    MentorshipRequestStatus,
    MentorshipStatusItem,
    PersonSummary,
    PlatformStats,
    RecentEvent,
    RecentReport,
    RecentUser,
    Resource,
    ResourceType,
    Role,
    StudentDashboard,
    StudentDashboardStats,
    UpcomingEvent,
)


def student_dashboard(now: datetime) -> StudentDashboard:
    day = timedelta(days=1)
    mentors = (
        Mentor(
            id="1",
            name="Sarah Johnson",
            avatar="",
            title="Senior Software Engineer",
            company="Google",
            expertise=("Web Development", "System Design", "Career Guidance"),
            availability="",
            rating=0.0,
            bio="Experienced software engineer with 10+ years in the industry",
        ),
        Mentor(
            id="2",
            name="David Chen",
            avatar="",
            title="Product Manager",
            company="Microsoft",
            expertise=("Product Management", "Career Transition", "Leadership"),
            availability="",
            rating=0.0,
            bio="Product manager with experience in both startups and large tech companies",
        ),
        Mentor(
            id="3",
            name="Maria Garcia",
            avatar="",
            title="Data Scientist",
            company="Amazon",
            expertise=("AI/ML", "Data Science", "Technical Interviews"),
            availability="",
            rating=0.0,
            bio="Data scientist specializing in machine learning and AI applications",
        ),
    )
    mentorships = (
        MentorshipStatusItem(
            id="1",
            mentor=PersonSummary(name="Robert Taylor", id="104"),
            status="active",
            start_date=now - 30 * day,
            last_message_date=now - 2 * day,
        ),
        MentorshipStatusItem(
            id="2",
            mentor=PersonSummary(name="Jennifer Lee", id="105"),
            status="pending",
        ),
    )
    platform = PersonSummary(name="MentorConnect")
    resources = (
        Resource(
            id="1",
            title="How to Prepare for Technical Interviews",
            description="A comprehensive guide to acing technical interviews at top tech companies",
            type=ResourceType.ARTICLE,
            url="https://example.com/tech-interviews",
            created_by=platform,
            created_at=now - 7 * day,
            tags=("Career", "Interviews", "Technical"),
        ),
        Resource(
            id="2",
            title="Introduction to React Hooks",
            description="Learn how to use React Hooks to build more efficient React components",
            type=ResourceType.VIDEO,
            url="https://example.com/react-hooks",
            created_by=platform,
            created_at=now - 14 * day,
            tags=("React", "JavaScript", "Frontend"),
        ),
        Resource(
            id="3",
            title="Building a Professional Portfolio",
            description="Step-by-step guide to creating a portfolio that stands out to employers",
            type=ResourceType.COURSE,
            url="https://example.com/portfolio-course",
            created_by=platform,
            created_at=now - 21 * day,
            tags=("Career", "Portfolio", "Personal Branding"),
        ),
    )
    events = (
        UpcomingEvent(id="1", title="Resume Workshop", start_date=now + 3 * day),
        UpcomingEvent(
            id="2",
            title="Tech Industry Networking Event",
            start_date=now + 10 * day,
            location_type="in-person",
        ),
    )
    return StudentDashboard(
        stats=StudentDashboardStats(
            mentorship_requests=sum(1 for item in mentorships if item.status == "pending"),
            active_mentorships=sum(1 for item in mentorships if item.status == "active"),
            upcoming_events=len(events),
            unread_messages=3,
            saved_resources=5,
        ),
        recommended_mentors=mentors,
        mentorships=mentorships,
        resources=resources,
        upcoming_events=events,
    )


def alumni_dashboard(now: datetime) -> AlumniDashboard:
    day = timedelta(days=1)
    pending = (
        MentorshipRequest(
            id="1",
            counterpart=PersonSummary(name="John Doe", id="101"),
            topic="Machine Learning",
            message="I would love to learn from your experience in the tech industry.",
            status=MentorshipRequestStatus.PENDING,
            request_date=now,
        ),
        MentorshipRequest(
            id="2",
            counterpart=PersonSummary(name="Jane Smith", id="102"),
            topic="Product Management",
            message="I admire your career path and would appreciate your guidance.",
            status=MentorshipRequestStatus.PENDING,
            request_date=now - day,
        ),
    )
    active = (
        ActiveMentorship(
            id="3",
            mentee=PersonSummary(name="Michael Johnson", id="103"),
            start_date=now - 30 * day,
            last_message_date=now - 2 * day,
            topics=("Career Transition", "Interview Preparation"),
        ),
    )
    events = (
        UpcomingEvent(
            id="1",
            title="Alumni Networking Event",
            start_date=now + 7 * day,
            location_type="hybrid",
        ),
        UpcomingEvent(id="2", title="Mentorship Workshop", start_date=now + 14 * day),
    )
    return AlumniDashboard(
        stats=AlumniDashboardStats(
            pending_requests=len(pending),
            active_mentorships=len(active),
            completed_mentorships=5,
            upcoming_events=len(events),
            unread_messages=3,
        ),
        pending_requests=pending,
        active_mentorships=active,
        upcoming_events=events,
    )


def admin_dashboard(now: datetime) -> AdminDashboard:
    day = timedelta(days=1)
    users = (
        RecentUser("1", "John", "Doe", "john.doe@example.com", Role.STUDENT, now - 2 * day),
        RecentUser("2", "Jane", "Smith", "jane.smith@example.com", Role.ALUMNI, now - 3 * day),
        RecentUser("3", "Robert", "Johnson", "robert.j@example.com", Role.STUDENT, now - 5 * day),
        RecentUser("4", "Emily", "Williams", "emily.w@example.com", Role.ALUMNI, now - 7 * day),
    )
    events = (
        RecentEvent("1", "Tech Career Fair", now + 7 * day, 45, PersonSummary("Michael Brown")),
        RecentEvent("2", "Resume Workshop", now + 3 * day, 28, PersonSummary("Sarah Johnson")),
        RecentEvent(
            "3", "Alumni Networking Mixer", now + 14 * day, 62, PersonSummary("David Chen")
        ),
    )
    reports = (
        RecentReport(
            id="1",
            type="forum",
            reason="Inappropriate content in forum post",
            status="pending",
            created_at=now - day,
            reported_by=PersonSummary("Alex Taylor"),
        ),
        RecentReport(
            id="2",
            type="user",
            reason="Spam messages from user",
            status="pending",
            created_at=now - 2 * day,
            reported_by=PersonSummary("Jessica Lee"),
        ),
    )
    return AdminDashboard(
        stats=PlatformStats(
            total_users=256,
            active_users=178,
            total_mentorships=87,
            active_mentorships=42,
            total_events=24,
            total_resources=115,
            total_forum_topics=93,
            total_forum_replies=427,
        ),
        recent_users=users,
        recent_events=events,
        recent_reports=reports,
    )


__all__ = ["admin_dashboard", "alumni_dashboard", "student_dashboard"]
