"""
User Tasks API - Tasks Module
"""

from usertasks.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
