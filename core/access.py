"""
역할 기반 화면 접근 규칙

탭별 허용 역할, 역할별 첫 화면, 관리자/소유자 판정.
"""

from dataclasses import dataclass

from core.types import NavTab, UserRole

MANAGER_ROLES: frozenset[UserRole] = frozenset({UserRole.OWNER, UserRole.ADMIN, UserRole.DEVELOPER})
OWNER_ROLES: frozenset[UserRole] = frozenset({UserRole.OWNER, UserRole.DEVELOPER})
ALL_ROLES: frozenset[UserRole] = frozenset(UserRole)


@dataclass(frozen=True)
class NavItem:
    """사이드바 메뉴 항목"""

    tab: NavTab
    label: str
    roles: frozenset[UserRole]


NAV_ITEMS: tuple[NavItem, ...] = (
    NavItem(NavTab.DASHBOARD, "Dasbor", MANAGER_ROLES),
    NavItem(NavTab.OPERATIONS, "Operasional", ALL_ROLES),
    NavItem(NavTab.FINANCE, "Keuangan", MANAGER_ROLES),
    NavItem(NavTab.HR, "SDM & Absensi", ALL_ROLES),
    NavItem(NavTab.SETTINGS, "Pengaturan", MANAGER_ROLES),
)


def nav_items_for(role: UserRole) -> list[NavItem]:
    """역할이 볼 수 있는 메뉴 (정의 순서 유지)"""
    return [item for item in NAV_ITEMS if role in item.roles]


def can_access(role: UserRole, tab: NavTab) -> bool:
    return any(item.tab == tab and role in item.roles for item in NAV_ITEMS)


def landing_tab(role: UserRole) -> NavTab:
    """역할 전환 후 첫 화면 (운전원은 운영 화면)"""
    if role == UserRole.OPERATOR:
        return NavTab.OPERATIONS
    return NavTab.DASHBOARD


def is_manager(role: UserRole) -> bool:
    """차량 등록/삭제 등 관리 작업 가능 여부"""
    return role in MANAGER_ROLES


def is_owner(role: UserRole) -> bool:
    """직원 관리 가능 여부"""
    return role in OWNER_ROLES


def can_edit_settings(role: UserRole) -> bool:
    return can_access(role, NavTab.SETTINGS)
