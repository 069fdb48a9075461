"""레포지토리 패키지 — 엔티티별 데이터 접근 계층.

Repository package — Per-entity data access.
Every repository extends BaseRepository and is exposed as a module-level
singleton; none of them commits or checks foreign keys.
"""
