# registrar/routers/admin/instructors.py
from typing import Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...core.exceptions import raise_for_result, rows_or_raise
from ...schemas.results import OperationResult
from ...services.administrator import Administrator
from .dependencies import get_administrator

class InstructorCreate(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None

router = APIRouter(prefix="/api/v1/admin/instructors", tags=["Administrator - Instructors"])

@router.get("/", response_model=list)
async def get_instructors(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.get_instructors())

@router.post("/", response_model=OperationResult, status_code=201)
async def create_instructor(data: InstructorCreate, admin: Administrator = Depends(get_administrator)):
    result = await admin.create_instructor(data.id, data.name, data.email)
    raise_for_result(result)
    return result

@router.delete("/{id}", response_model=OperationResult)
async def delete_instructor(id: int, admin: Administrator = Depends(get_administrator)):
    result = await admin.delete_instructor(id)
    raise_for_result(result)
    return result
