"""Attendance & Payroll package.

Feature modules (attendance, payroll, leaves, employees, shifts) with a thin
Flask controller layer on top of service and repository layers.
"""
