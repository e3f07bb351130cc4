# app/modules/employees/__init__.py
"""
Módulo Employees - Empleados asignados a una bodega
"""

from .router import router as employees_router
from .service import EmployeeService
from .repository import EmployeeRepository

__all__ = [
    "employees_router",
    "EmployeeService",
    "EmployeeRepository"
]
