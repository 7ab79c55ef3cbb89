"""Account, profile, activity and notification view models."""

from __future__ import annotations

from typing import ClassVar

from fusiondash.views.base import ViewModel


class CompanySummary(ViewModel):
    name: str
    plan: str
    plan_status: str
    next_billing: str
    seats: int
    used_seats: int


class UsageMeter(ViewModel):
    current: float
    limit: float


class AccountUsage(ViewModel):
    projects: UsageMeter
    ideas: UsageMeter
    storage: UsageMeter
    ai_credits: UsageMeter


class AccountHealth(ViewModel):
    score: float
    status: str
    last_activity: str
    active_users: int


class RecentActivity(ViewModel):
    type: str
    description: str
    time: str


class Account(ViewModel):
    company: CompanySummary
    usage: AccountUsage
    health: AccountHealth
    recent_activity: list[RecentActivity]


class Profile(ViewModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    role: str
    department: str
    bio: str


class CurrentUser(ViewModel):
    id: str
    name: str
    email: str
    role: str
    company: str


class ActivityItem(ViewModel):
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({"score", "status", "comment"})

    id: str
    type: str
    actor: str
    action: str
    target: str
    timestamp: str
    score: float | None = None
    status: str | None = None
    comment: str | None = None


class NotificationPref(ViewModel):
    id: str
    label: str
    description: str
    email: bool
    push: bool


class NotificationCategory(ViewModel):
    id: str
    label: str
    icon: str
    prefs: list[NotificationPref]


class CompanySettings(ViewModel):
    name: str = ""
    domain: str = ""
    industry: str = ""
    size: str = ""
    timezone: str = ""
    language: str = ""
    enforce_sso: bool = False
    two_factor: bool = False
    ip_whitelist: bool = False
    data_retention: str = ""
