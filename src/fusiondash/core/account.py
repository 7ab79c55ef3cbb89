"""Account, profile, activity and notification composer."""

import asyncio
import logging

from fusiondash.core.base import Composer
from fusiondash.core.joins import group_by
from fusiondash.models.user import CURRENT_USER_ID
from fusiondash.models.workspace import Account as AccountRow
from fusiondash.models.workspace import CompanySettings as CompanySettingsRow
from fusiondash.views.account import (
    Account,
    AccountHealth,
    AccountUsage,
    ActivityItem,
    CompanySettings,
    CompanySummary,
    CurrentUser,
    NotificationCategory,
    NotificationPref,
    Profile,
    RecentActivity,
    UsageMeter,
)

logger = logging.getLogger(__name__)

# Shown when the store has no signed-in user row (first run, empty demo data).
DEMO_PROFILE = Profile(
    first_name="Alex",
    last_name="Thompson",
    email="alex.thompson@company.com",
    phone="+1 (555) 123-4567",
    role="Product Manager",
    department="Product",
    bio="Passionate about building products that solve real problems.",
)
DEMO_CURRENT_USER = CurrentUser(
    id=CURRENT_USER_ID, name="Demo User", email="demo@example.com", role="Admin", company=""
)


class AccountComposer(Composer):
    """Composes account-level pages."""

    async def account(self) -> Account:
        """Plan, usage, health and the most recent activity lines."""
        directory = self._user_directory()
        _, account, settings, activities = await asyncio.gather(
            directory.load(),
            self._store.account(),
            self._store.company_settings(),
            self._store.activities(),
        )
        account = account or AccountRow(id="")
        settings = settings or CompanySettingsRow(id="")

        recent = activities[: self._config.recent_activity_limit]
        return Account(
            company=CompanySummary(
                name=settings.name,
                plan=account.plan,
                plan_status=account.plan_status,
                next_billing=account.next_billing,
                seats=account.seats,
                used_seats=account.used_seats,
            ),
            usage=AccountUsage(
                projects=UsageMeter(current=account.projects_current, limit=account.projects_limit),
                ideas=UsageMeter(current=account.ideas_current, limit=account.ideas_limit),
                storage=UsageMeter(current=account.storage_current, limit=account.storage_limit),
                ai_credits=UsageMeter(
                    current=account.ai_credits_current, limit=account.ai_credits_limit
                ),
            ),
            health=AccountHealth(
                score=account.health_score,
                status=account.health_status,
                last_activity=account.last_activity,
                active_users=account.active_users,
            ),
            recent_activity=[
                RecentActivity(
                    type=a.type,
                    description=f"{directory.display_name(a.actor_id)} {a.action} {a.target}",
                    time=a.timestamp,
                )
                for a in recent
            ],
        )

    async def profile(self) -> Profile:
        user = await self._store.current_user()
        if user is None:
            logger.debug("No current-user row, returning demo profile")
            return DEMO_PROFILE
        return Profile(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
            role=user.role,
            department=user.department,
            bio=user.bio,
        )

    async def current_user(self) -> CurrentUser:
        """Header badge for the signed-in user."""
        user, settings = await asyncio.gather(
            self._store.current_user(),
            self._store.company_settings(),
        )
        if user is None:
            return DEMO_CURRENT_USER
        return CurrentUser(
            id=user.id,
            name=user.full_name(),
            email=user.email,
            role=user.role,
            company=settings.name if settings else "",
        )

    async def activity_feed(self) -> list[ActivityItem]:
        """Activities with actor names; score/status/comment only when recorded."""
        directory = self._user_directory()
        _, activities = await asyncio.gather(directory.load(), self._store.activities())
        return [
            ActivityItem(
                id=a.id,
                type=a.type,
                actor=directory.display_name(a.actor_id),
                action=a.action,
                target=a.target,
                timestamp=a.timestamp,
                score=a.score,
                status=a.status,
                comment=a.comment,
            )
            for a in activities
        ]

    async def notification_categories(self) -> list[NotificationCategory]:
        """Categories with their preferences grouped underneath."""
        categories, prefs = await asyncio.gather(
            self._store.notification_categories(),
            self._store.notification_preferences(),
        )
        prefs_by_category = group_by(prefs, lambda p: p.category_id)
        return [
            NotificationCategory(
                id=c.id,
                label=c.label,
                icon=c.icon,
                prefs=[
                    NotificationPref(
                        id=p.id,
                        label=p.label,
                        description=p.description,
                        email=p.email,
                        push=p.push,
                    )
                    for p in prefs_by_category.get(c.id, [])
                ],
            )
            for c in categories
        ]

    async def company_settings(self) -> CompanySettings:
        row = await self._store.company_settings()
        if row is None:
            return CompanySettings()
        return CompanySettings(
            name=row.name,
            domain=row.domain,
            industry=row.industry,
            size=row.size,
            timezone=row.timezone,
            language=row.language,
            enforce_sso=row.enforce_sso,
            two_factor=row.two_factor,
            ip_whitelist=row.ip_whitelist,
            data_retention=row.data_retention,
        )
