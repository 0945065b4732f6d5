from __future__ import annotations

from enum import Enum


class EmployeeType(str, Enum):
    """Employment classification."""

    PART_TIME = "part_time"
    FULL_TIME = "full_time"


class EmployeeRole(str, Enum):
    """Restaurant job titles stored on the employee row."""

    HEAD_CHEF = "head_chef"
    SOUS_CHEF = "sous_chef"
    JUNIOR_CHEF = "junior_chef"
    KITCHEN_HELPER = "kitchen_helper"
    DISHWASHER = "dishwasher"
    RESTAURANT_MANAGER = "restaurant_manager"
    FLOOR_MANAGER = "floor_manager"
    HEAD_WAITER = "head_waiter"
    WAITER = "waiter"
    BARTENDER = "bartender"
    HOST = "host"
    BUSSER = "busser"
    CASHIER = "cashier"


class ClockState(str, Enum):
    """Per-employee attendance state."""

    CLOSED = "closed"
    OPEN = "open"


class ReportPeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
