"""Dashboard payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from mentorconnect.domain.entities import (
    AdminDashboard,
    AlumniDashboard,
    NavigationCard,
    StudentDashboard,
)


class StudentDashboardRead(BaseModel):
    layout: Literal["student"] = "student"
    navigation: list[NavigationCard]
    dashboard: StudentDashboard


class AlumniDashboardRead(BaseModel):
    layout: Literal["alumni"] = "alumni"
    navigation: list[NavigationCard]
    dashboard: AlumniDashboard


class AdminDashboardRead(BaseModel):
    layout: Literal["admin"] = "admin"
    navigation: list[NavigationCard]
    dashboard: AdminDashboard


DashboardRead = StudentDashboardRead | AlumniDashboardRead | AdminDashboardRead


__all__ = [
    "AdminDashboardRead",
    "AlumniDashboardRead",
    "DashboardRead",
    "StudentDashboardRead",
]
