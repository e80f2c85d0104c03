"""
Users Domain - users, groups and permissions.
"""
