"""Staff-related enums."""

from enum import Enum


class StaffRole(str, Enum):
    """Console staff roles."""

    SALES_MANAGER = "sales_manager"
    SALES_REP = "sales_rep"
    ACCOUNT_MANAGER = "account_manager"
    ADMIN = "admin"
