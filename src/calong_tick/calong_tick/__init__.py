"""Calong-Tick time tracking package.

Feature modules (admins, employees, attendance, payroll) each carry a model,
a repository protocol with its MySQL implementation, a service and a thin
Flask controller.
"""
