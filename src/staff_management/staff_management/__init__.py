"""Staff Management package.

Feature modules (books, members, employees, shifts, employee_shifts,
borrowing, ...) each carry a model, a repository interface with its MySQL
implementation, a service and a thin Flask controller layer.
"""
