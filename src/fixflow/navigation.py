"""
Role-based navigation.

Every UserRole maps to exactly one Experience; each Experience has one NavConfig
builder. Adding a role or experience without extending the tables below fails at
import time.
"""

import logging
from enum import Enum
from typing import Callable, Optional, Union

from pydantic import BaseModel, ConfigDict

from fixflow.models.session import PlanType, UserRole

logger = logging.getLogger(__name__)


class Experience(str, Enum):
    SOLO_OPERATOR = "SOLO_OPERATOR"
    FIELD_WORKER = "FIELD_WORKER"
    TEAM_MANAGER = "TEAM_MANAGER"


class NavLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    href: str
    icon: str
    description: str
    primary: bool = False


class NavConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    experience: Experience
    title: str
    description: str
    icon: str
    color: str
    bg_color: str
    links: tuple[NavLink, ...]


ROLE_EXPERIENCE: dict[UserRole, Experience] = {
    UserRole.OWNER: Experience.TEAM_MANAGER,
    UserRole.MANAGER: Experience.TEAM_MANAGER,
    UserRole.ADMIN: Experience.TEAM_MANAGER,
    UserRole.EMPLOYEE: Experience.FIELD_WORKER,
    UserRole.TECHNICIAN: Experience.FIELD_WORKER,
    UserRole.FIELD_WORKER: Experience.FIELD_WORKER,
    UserRole.CLIENT: Experience.SOLO_OPERATOR,
    UserRole.SOLO: Experience.SOLO_OPERATOR,
}

ROLE_LABELS: dict[UserRole, str] = {
    UserRole.OWNER: "Owner",
    UserRole.MANAGER: "Manager",
    UserRole.EMPLOYEE: "Employee",
    UserRole.ADMIN: "Administrator",
    UserRole.TECHNICIAN: "Technician",
    UserRole.CLIENT: "Client",
    UserRole.SOLO: "Solo Operator",
    UserRole.FIELD_WORKER: "Field Worker",
}


def _parse_role(role: Union[UserRole, str, None]) -> Optional[UserRole]:
    if role is None or isinstance(role, UserRole):
        return role
    try:
        return UserRole(role.upper())
    except ValueError:
        return None


def role_label(role: Union[UserRole, str, None]) -> str:
    parsed = _parse_role(role)
    return ROLE_LABELS[parsed] if parsed else "User"


def experience_for(role: Union[UserRole, str, None]) -> Experience:
    parsed = _parse_role(role)
    if parsed is None:
        logger.warning(f"Unknown role {role!r}, using {Experience.SOLO_OPERATOR.value} navigation")
        return Experience.SOLO_OPERATOR
    return ROLE_EXPERIENCE[parsed]


def _solo_operator(is_solo_plan: bool) -> NavConfig:
    return NavConfig(
        experience=Experience.SOLO_OPERATOR,
        title="My Business",
        description="Your personal dashboard",
        icon="User",
        color="text-primary",
        bg_color="bg-primary/10",
        links=(
            NavLink(name="Today", href="/dashboard", icon="LayoutDashboard",
                    description="Your tasks today", primary=True),
            NavLink(name="Schedule", href="/dashboard/schedule", icon="Calendar",
                    description="Your upcoming jobs", primary=True),
            NavLink(name="Customers", href="/dashboard/customers", icon="Users",
                    description="Your customers"),
            NavLink(name="Income", href="/dashboard/invoices", icon="DollarSign",
                    description="Track your earnings"),
            NavLink(name="Billing", href="/dashboard/billing", icon="DollarSign",
                    description="Manage your subscription"),
        ),
    )


def _field_worker(is_solo_plan: bool) -> NavConfig:
    return NavConfig(
        experience=Experience.FIELD_WORKER,
        title="My Work",
        description="Your daily tasks and schedule",
        icon="Wrench",
        color="text-green-500",
        bg_color="bg-green-500/10",
        links=(
            NavLink(name="Today", href="/dashboard", icon="LayoutDashboard",
                    description="Your jobs today", primary=True),
            NavLink(name="My Jobs", href="/dashboard/work-orders", icon="FileText",
                    description="All assigned tasks", primary=True),
            NavLink(name="Schedule", href="/dashboard/schedule", icon="Calendar",
                    description="Your work schedule"),
        ),
    )


def _team_manager(is_solo_plan: bool) -> NavConfig:
    return NavConfig(
        experience=Experience.TEAM_MANAGER,
        title="My Business" if is_solo_plan else "Team Dashboard",
        description="Your personal dashboard" if is_solo_plan else "Manage your team and operations",
        icon="User" if is_solo_plan else "Shield",
        color="text-primary" if is_solo_plan else "text-blue-500",
        bg_color="bg-primary/10" if is_solo_plan else "bg-blue-500/10",
        links=(
            NavLink(name="Dashboard", href="/dashboard", icon="LayoutDashboard",
                    description="Your overview" if is_solo_plan else "Team overview", primary=True),
            NavLink(name="Work Orders", href="/dashboard/work-orders", icon="FileText",
                    description="All work orders", primary=True),
            NavLink(name="Schedule", href="/dashboard/schedule", icon="Calendar",
                    description="Your scheduling" if is_solo_plan else "Team scheduling", primary=True),
            NavLink(name="Customers", href="/dashboard/customers", icon="Users",
                    description="Customer management"),
            NavLink(name="Team", href="/dashboard/team", icon="Users",
                    description="Team management"),
            NavLink(name="Invoices", href="/dashboard/invoices", icon="DollarSign",
                    description="Billing & invoices"),
            NavLink(name="Billing", href="/dashboard/billing", icon="DollarSign",
                    description="Manage subscription"),
            NavLink(name="Reports", href="/dashboard/reports", icon="BarChart3",
                    description="Business insights"),
            NavLink(name="Settings", href="/dashboard/settings", icon="Settings",
                    description="System settings"),
        ),
    )


NAV_BUILDERS: dict[Experience, Callable[[bool], NavConfig]] = {
    Experience.SOLO_OPERATOR: _solo_operator,
    Experience.FIELD_WORKER: _field_worker,
    Experience.TEAM_MANAGER: _team_manager,
}

_missing_roles = set(UserRole) - set(ROLE_EXPERIENCE)
_missing_experiences = set(Experience) - set(NAV_BUILDERS)
if _missing_roles or _missing_experiences:
    raise RuntimeError(f"Navigation tables incomplete: {_missing_roles | _missing_experiences}")


def _parse_plan(plan_type: Union[PlanType, str, None]) -> Optional[PlanType]:
    if plan_type is None or isinstance(plan_type, PlanType):
        return plan_type
    try:
        return PlanType(plan_type.upper())
    except ValueError:
        logger.warning(f"Unknown plan {plan_type!r}, using {PlanType.SOLO.value} navigation")
        return None


def get_nav_config(
    role: Union[UserRole, str, None],
    plan_type: Union[PlanType, str, None] = None,
) -> NavConfig:
    plan = _parse_plan(plan_type)
    is_solo_plan = (plan or PlanType.SOLO) == PlanType.SOLO
    return NAV_BUILDERS[experience_for(role)](is_solo_plan)
