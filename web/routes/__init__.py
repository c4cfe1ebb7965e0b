"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- session: 현재 사용자 / 역할 전환
- dashboard: 대시보드 지표, 예산, AI 감사
- finance: 분개, 거래 내역, 재무제표
- operations: 차량, 운행, 주유
- hr: 직원, 출근
- settings: 회사 정보
"""
