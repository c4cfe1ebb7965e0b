"""
애플리케이션 세션

장부, 전기기, 보고서 캐시와 운영/인사 레코드를 한 객체에 보관한다.
웹 계층은 이 객체 하나를 의존성으로 주입받는다.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable

from core.access import landing_tab
from core.config.loader import CompanySettings, default_company
from core.errors import RecordNotFoundError, RecordValidationError
from core.fleet.registry import FleetRegistry
from core.hr.models import User
from core.hr.roster import Roster
from core.ledger.book import Ledger
from core.ledger.cache import ReportCache
from core.ledger.poster import JournalPoster
from core.reporting.budget import ProjectBudget
from core.types import NavTab, UserRole

logger = logging.getLogger(__name__)

# 최초 실행 시 기본 관리자
DEFAULT_ADMIN = User(
    user_id="admin-01",
    name="ADMIN UTAMA",
    role=UserRole.OWNER,
    email="admin@perusahaan.id",
)


class AppSession:
    """애플리케이션 상태

    Args:
        company: 회사 정보 (None이면 기본값)
        users: 초기 사용자 목록 (None이면 기본 관리자 1명)
        ledger: 초기 장부 (None이면 빈 장부)
    """

    def __init__(
        self,
        company: CompanySettings | None = None,
        users: Iterable[User] | None = None,
        ledger: Ledger | None = None,
    ):
        self.company = company or default_company()
        self.roster = Roster(list(users) if users is not None else [DEFAULT_ADMIN])
        self.current_user: User = self.roster.users[0]
        self.active_tab: NavTab = landing_tab(self.current_user.role)

        self.ledger = ledger if ledger is not None else Ledger()
        self.poster = JournalPoster(self.ledger)
        self.reports = ReportCache()

        self.fleet = FleetRegistry()
        self.projects: list[ProjectBudget] = []

    @property
    def role(self) -> UserRole:
        return self.current_user.role

    def switch_role(self, role: UserRole | str) -> NavTab:
        """역할 시뮬레이션 전환

        해당 역할의 첫 사용자로 전환 (없으면 첫 사용자).

        Returns:
            전환 후 첫 화면 탭
        """
        try:
            role = UserRole(role)
        except ValueError as e:
            raise RecordValidationError(str(e)) from e

        self.current_user = self.roster.first_with_role(role)
        # 매칭 사용자가 없어도 요청한 역할 기준으로 첫 화면 결정
        self.active_tab = landing_tab(role)
        logger.info(f"역할 전환: {role.value} -> {self.current_user.user_id} ({self.active_tab.value})")
        return self.active_tab

    def update_company(
        self,
        name: str | None = None,
        address: str | None = None,
        registration_id: str | None = None,
        logo: str | None = None,
    ) -> CompanySettings:
        """회사 정보 갱신 (지정한 필드만)

        Raises:
            RecordValidationError: 빈 회사명
        """
        changes: dict[str, str | None] = {}
        if name is not None:
            name = name.strip().upper()
            if not name:
                raise RecordValidationError("회사명은 비어 있을 수 없습니다")
            changes["name"] = name
        if address is not None:
            changes["address"] = address.strip().upper()
        if registration_id is not None:
            changes["registration_id"] = registration_id.strip().upper()
        if logo is not None:
            changes["logo"] = logo or None

        self.company = dataclasses.replace(self.company, **changes)
        logger.info(f"회사 정보 변경: {sorted(changes)}")
        return self.company

    # =========================================================================
    # 프로젝트 예산
    # =========================================================================

    def add_project(self, project: ProjectBudget) -> ProjectBudget:
        if any(p.project_id == project.project_id for p in self.projects):
            raise RecordValidationError(f"이미 존재하는 프로젝트입니다: {project.project_id}")
        self.projects.append(project)
        return project

    def get_project(self, project_id: str) -> ProjectBudget:
        for project in self.projects:
            if project.project_id == project_id:
                return project
        raise RecordNotFoundError(f"프로젝트를 찾을 수 없습니다: {project_id}")
