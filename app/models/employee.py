# app/models/employee.py
from functools import lru_cache
from typing import Optional
from faker import Faker
from app.config import get_settings
from app.schemas.employee import Employee

MIN_AGE = 20
MAX_AGE = 50
MIN_SALARY_UNITS = 1
MAX_SALARY_UNITS = 2000
SALARY_UNIT = 1000

@lru_cache()
def get_faker(locale: str) -> Faker:
    return Faker(locale)

def generate_employee(employee_id: int, faker: Optional[Faker] = None) -> Employee:
    """Build one employee record with random, locale-specific values.

    Age is drawn from [20, 50) and salary from [1, 2000) thousands; the
    upper bounds are exclusive, Faker's ``random_int`` is inclusive.
    """
    f = faker or get_faker(get_settings().FAKER_LOCALE)
    return Employee(
        id=employee_id,
        name=f.name(),
        age=f.random_int(MIN_AGE, MAX_AGE - 1),
        salary=f.random_int(MIN_SALARY_UNITS, MAX_SALARY_UNITS - 1) * SALARY_UNIT,
        phone_number=f.phone_number(),
        address=f.street_name(),
    )
