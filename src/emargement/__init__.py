"""Émargement API package.

Feature modules (users, sessions, attendance) each carry a repository
interface, a MySQL implementation, a service and a thin Flask controller.
"""
