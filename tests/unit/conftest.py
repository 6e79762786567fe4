"""Sample Toast exports shared by the unit tests."""

from __future__ import annotations

import pytest

LABOR_CSV = (
    "Location,Employee,Regular Hours,Overtime Hours,Normal Rate,Employee Id,Job Code\r\n"
    'Olivine,"Doe, Jane",10,2,15,42,212\r\n'
    'Olivine,"Smith, John",32.5,0,18.25,57,211\r\n'
    'Olivine,"Lee, Ana",40,4.5,16,63,224\r\n'
    "\r\n"
)

TIPS_CSV = (
    "Employee Id,Employee,Job,Tips,Gratuity,Tips and Gratuity After Pooling\n"
    '7,"Park, Sam",Bartender,100.00,20.00,123.455\n'
    '8,"Ng, Tia",Food Runner,10,0,45.1\n'
)


@pytest.fixture
def labor_csv() -> str:
    return LABOR_CSV


@pytest.fixture
def tips_csv() -> str:
    return TIPS_CSV
