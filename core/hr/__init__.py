"""
HR 모듈

직원 명부와 출근 기록
"""

from core.hr.models import AttendanceRecord, User
from core.hr.roster import Roster

__all__ = ["AttendanceRecord", "Roster", "User"]
