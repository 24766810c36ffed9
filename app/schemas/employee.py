# app/schemas/employee.py
from pydantic import BaseModel, Field

class Employee(BaseModel):
    id: int
    name: str
    age: int
    salary: int
    phone_number: str = Field(..., alias="phoneNumber")
    address: str

    class Config:
        populate_by_name = True
