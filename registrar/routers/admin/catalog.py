# registrar/routers/admin/catalog.py
"""Account types, departments and grades."""
from typing import Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...core.exceptions import raise_for_result, rows_or_raise
from ...schemas.results import OperationResult
from ...services.administrator import Administrator
from .dependencies import get_administrator

class AccountTypeCreate(BaseModel):
    name: str = Field(..., min_length=1)

class DepartmentCreate(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1)

class GradeCreate(BaseModel):
    name: str = Field(..., min_length=1)

router = APIRouter(prefix="/api/v1/admin", tags=["Administrator - Catalog"])

@router.get("/account-types", response_model=list)
async def get_account_types(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.get_account_types())

@router.post("/account-types", response_model=OperationResult, status_code=201)
async def create_account_type(data: AccountTypeCreate, admin: Administrator = Depends(get_administrator)):
    result = await admin.create_account_type(data.name)
    raise_for_result(result)
    return result

@router.delete("/account-types/{name}", response_model=OperationResult)
async def delete_account_type(name: str, admin: Administrator = Depends(get_administrator)):
    result = await admin.delete_account_type(name)
    raise_for_result(result)
    return result

@router.get("/departments", response_model=list)
async def get_departments(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.get_departments())

@router.post("/departments", response_model=OperationResult, status_code=201)
async def create_department(data: DepartmentCreate, admin: Administrator = Depends(get_administrator)):
    """Create a department; omit id to let the database assign one"""
    result = await admin.create_department(data.id, data.name)
    raise_for_result(result)
    return result

@router.delete("/departments/{id}", response_model=OperationResult)
async def delete_department(id: int, admin: Administrator = Depends(get_administrator)):
    result = await admin.delete_department(id)
    raise_for_result(result)
    return result

@router.get("/grades", response_model=list)
async def get_grades(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.get_grades())

@router.post("/grades", response_model=OperationResult, status_code=201)
async def create_grade(data: GradeCreate, admin: Administrator = Depends(get_administrator)):
    result = await admin.create_grade(data.name)
    raise_for_result(result)
    return result

@router.delete("/grades/{name}", response_model=OperationResult)
async def delete_grade(name: str, admin: Administrator = Depends(get_administrator)):
    result = await admin.delete_grade(name)
    raise_for_result(result)
    return result
