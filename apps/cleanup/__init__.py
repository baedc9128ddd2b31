"""Cleanup Verification Service.

쓰레기 제보 → 청소 전/후 사진 검증 → 포인트 적립 → 상품권 교환.
"""
