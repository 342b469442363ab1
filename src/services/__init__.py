"""Application services layer.

Services hold state and helpers shared across commands (notifications, dashboard
mock data). They should avoid UI concerns.
"""
