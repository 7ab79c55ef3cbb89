"""Workspace-level entities: account, settings, activity, notifications, tools."""

from __future__ import annotations

from typing import Any

from fusiondash.models.base import Entity


class Activity(Entity):
    type: str = ""
    actor_id: str = ""
    action: str = ""
    target: str = ""
    timestamp: str = ""
    score: float | None = None
    status: str | None = None
    comment: str | None = None


class Account(Entity):
    """Subscription and usage figures (singleton)."""

    plan: str = ""
    plan_status: str = ""
    next_billing: str = ""
    seats: int = 0
    used_seats: int = 0
    projects_limit: int = 0
    projects_current: int = 0
    ideas_limit: int = 0
    ideas_current: int = 0
    storage_limit: float = 0
    storage_current: float = 0
    ai_credits_limit: int = 0
    ai_credits_current: int = 0
    health_score: float = 0
    health_status: str = ""
    last_activity: str = ""
    active_users: int = 0


class CompanySettings(Entity):
    """Company profile and security switches (singleton)."""

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


class NotificationCategory(Entity):
    label: str = ""
    icon: str = ""


class NotificationPreference(Entity):
    category_id: str
    label: str = ""
    description: str = ""
    email: bool = False
    push: bool = False


class CrunchColumn(Entity):
    original_name: str = ""
    friendly_name: str = ""
    data_type: str = ""
    description: str = ""
    sample_values: str | list[Any] = ""
    is_acronym: bool = False
    acronym_expansion: str = ""


class Process(Entity):
    name: str = ""
    description: str = ""
    department: str = ""


class ProcessStep(Entity):
    process_id: str
    title: str = ""
    description: str = ""
    owner: str = ""
    role: str = ""
    tools: str | list[Any] = ""
    duration: str = ""
    sort_order: int = 0
    type: str = ""
