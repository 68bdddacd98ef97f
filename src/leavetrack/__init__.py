"""LeaveTrack package.

This package is organized by feature modules (users, leaves, projects,
holidays, settings, calendar) with a thin Flask controller layer on top of
service/repository layers. All repositories are in-memory.
"""
