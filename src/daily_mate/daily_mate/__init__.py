"""Daily Mate package.

Personal work-day and earnings tracker, organized by feature modules
(users, workplaces, workdays, stats, calendar_grid) with a thin Flask
controller layer on top of service/repository layers.
"""
