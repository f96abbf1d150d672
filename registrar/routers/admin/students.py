# registrar/routers/admin/students.py
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...core.exceptions import raise_for_result, rows_or_raise
from ...schemas.results import OperationResult
from ...services.administrator import Administrator
from .dependencies import get_administrator

class StudentCreate(BaseModel):
    id: int
    name: str = Field(..., min_length=1)
    ssn: int

router = APIRouter(prefix="/api/v1/admin/students", tags=["Administrator - Students"])

@router.get("/", response_model=list)
async def get_students(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.get_students())

@router.post("/", response_model=OperationResult, status_code=201)
async def create_student(data: StudentCreate, admin: Administrator = Depends(get_administrator)):
    result = await admin.create_student(data.id, data.name, data.ssn)
    raise_for_result(result)
    return result

@router.post("/{id}/graduation", response_model=OperationResult)
async def assign_graduation(id: int, admin: Administrator = Depends(get_administrator)):
    result = await admin.assign_graduation(id)
    raise_for_result(result)
    return result

@router.post("/{id}/probation", response_model=OperationResult)
async def assign_probation(id: int, admin: Administrator = Depends(get_administrator)):
    result = await admin.assign_probation(id)
    raise_for_result(result)
    return result

@router.delete("/{id}/probation", response_model=OperationResult)
async def remove_probation(id: int, admin: Administrator = Depends(get_administrator)):
    result = await admin.remove_probation(id)
    raise_for_result(result)
    return result
