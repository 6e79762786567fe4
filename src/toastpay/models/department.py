"""Department tags and the fixed source-value lookup tables."""

from __future__ import annotations

from enum import StrEnum


class Department(StrEnum):
    BARTEND = "BARTEND"
    TSERVER = "TSERVER"
    SERVER = "SERVER"
    STEWARD = "STEWARD"
    PIZZA = "PIZZA"
    LINE = "LINE"
    PREP = "PREP"
    HOST = "HOST"
    SAUTE = "SAUTE"
    RUNNER = "RUNNER"
    EVENT = "EVENT"


# Labor summary export: Toast job code -> department
JOB_CODE_DEPARTMENTS: dict[str, Department] = {
    "212": Department.BARTEND,
    "311": Department.TSERVER,
    "211": Department.SERVER,
    "227": Department.STEWARD,
    "225": Department.PIZZA,
    "224": Department.LINE,
    "226": Department.PREP,
    "213": Department.HOST,
    "223": Department.SAUTE,
    "214": Department.RUNNER,
    "37": Department.EVENT,
}

# Tips & gratuity export: job title -> department (exact, case-sensitive)
JOB_TITLE_DEPARTMENTS: dict[str, Department] = {
    "Food Runner": Department.RUNNER,
    "Server": Department.SERVER,
    "Bartender": Department.BARTEND,
    "Host": Department.HOST,
    "Steward": Department.STEWARD,
    "Training Server": Department.TSERVER,
}
