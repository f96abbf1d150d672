# registrar/routers/admin/semesters.py
from typing import Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...core.exceptions import DatabaseError, raise_for_result, rows_or_raise
from ...schemas.results import OperationResult
from ...services.administrator import Administrator
from .dependencies import get_administrator

class SemesterCreate(BaseModel):
    name: str = Field(..., min_length=1)

class SemesterAssignment(BaseModel):
    name: str = Field(..., min_length=1)
    year: int

router = APIRouter(prefix="/api/v1/admin/semesters", tags=["Administrator - Semesters"])

def _entry_or_raise(entry) -> Optional[dict]:
    if isinstance(entry, OperationResult):
        raise DatabaseError()
    return entry

@router.get("/", response_model=list)
async def get_semesters(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.get_semesters())

@router.post("/", response_model=OperationResult, status_code=201)
async def create_semester(data: SemesterCreate, admin: Administrator = Depends(get_administrator)):
    result = await admin.create_semester(data.name)
    raise_for_result(result)
    return result

@router.get("/current")
async def get_current_semester(admin: Administrator = Depends(get_administrator)):
    """Active current semester, null when none was ever assigned"""
    return _entry_or_raise(await admin.get_current_semester())

@router.put("/current", response_model=OperationResult)
async def assign_current_semester(data: SemesterAssignment, admin: Administrator = Depends(get_administrator)):
    result = await admin.assign_current_semester(data.name, data.year)
    raise_for_result(result)
    return result

@router.get("/next")
async def get_next_semester(admin: Administrator = Depends(get_administrator)):
    """Active next semester, null when none was ever assigned"""
    return _entry_or_raise(await admin.get_next_semester())

@router.put("/next", response_model=OperationResult)
async def assign_next_semester(data: SemesterAssignment, admin: Administrator = Depends(get_administrator)):
    result = await admin.assign_next_semester(data.name, data.year)
    raise_for_result(result)
    return result

@router.delete("/{name}", response_model=OperationResult)
async def delete_semester(name: str, admin: Administrator = Depends(get_administrator)):
    result = await admin.delete_semester(name)
    raise_for_result(result)
    return result
