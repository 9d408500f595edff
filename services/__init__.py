"""
Service layer - orchestration of core image operations
"""
