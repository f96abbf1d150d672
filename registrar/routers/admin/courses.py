# registrar/routers/admin/courses.py
from decimal import Decimal
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...core.exceptions import raise_for_result, rows_or_raise
from ...schemas.results import OperationResult
from ...services.administrator import Administrator
from .dependencies import get_administrator

class CourseCreate(BaseModel):
    id: int
    title: str = Field(..., min_length=1)
    dept: int
    credits: int = Field(..., ge=0)
    cost: Decimal = Field(..., ge=0, decimal_places=2)

class CourseUpdate(BaseModel):
    title: str = Field(..., min_length=1)
    dept: int
    credits: int = Field(..., ge=0)
    cost: Decimal = Field(..., ge=0, decimal_places=2)

router = APIRouter(prefix="/api/v1/admin/courses", tags=["Administrator - Courses"])

@router.get("/", response_model=list)
async def view_courses(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.view_courses())

@router.post("/", response_model=OperationResult, status_code=201)
async def create_course(data: CourseCreate, admin: Administrator = Depends(get_administrator)):
    result = await admin.create_course(data.id, data.title, data.dept, data.credits, data.cost)
    raise_for_result(result)
    return result

@router.put("/{id}", response_model=OperationResult)
async def update_course(id: int, data: CourseUpdate, admin: Administrator = Depends(get_administrator)):
    result = await admin.update_course(id, data.title, data.dept, data.credits, data.cost)
    raise_for_result(result)
    return result

@router.delete("/{id}", response_model=OperationResult)
async def delete_course(id: int, admin: Administrator = Depends(get_administrator)):
    result = await admin.delete_course(id)
    raise_for_result(result)
    return result
