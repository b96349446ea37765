from enum import Enum

class AccountStatus(str, Enum):
    ACTIVE = "active"
    UNINITIALIZED = "uninitialized"
    FROZEN = "frozen"
