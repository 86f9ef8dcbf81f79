"""Bins API - 재활용 수거함 조회 서비스."""
