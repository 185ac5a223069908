"""Attendance Board package.

Records daily Login/Logout events on a monday.com board, keeping one item per
employee per day. Organized by feature modules (attendance, mapping, activity)
with a thin Flask controller layer over service/repository layers.
"""
