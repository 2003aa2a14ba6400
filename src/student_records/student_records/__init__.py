"""Student Records package.

This package is organized by feature modules (users, students, grades, ...)
around a single DomainStore that owns every persisted collection, with a thin
Flask controller layer and service layer on top.
"""
