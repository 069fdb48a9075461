"""서비스 패키지 — 참조 검증 및 트랜잭션 계층.

Service package — Reference checks and transaction boundaries.
One service per entity. Each write runs inside ``unit_of_work`` and
verifies foreign keys through the owning repositories before touching rows.
"""
