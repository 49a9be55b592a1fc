"""
Services module - dashboard business logic.

- recommendation_service: relevance ranking and match explanations
- deadline_service: upcoming deadlines and the deadline calendar
- job_filter_service: browse filters over the catalog
- dashboard_service: stat-card counts
- storage_service: loads dashboard data from PostgreSQL
"""
