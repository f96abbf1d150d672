# registrar/routers/admin/classes.py
from typing import Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...core.exceptions import raise_for_result, rows_or_raise
from ...schemas.results import OperationResult
from ...services.administrator import Administrator
from .dependencies import get_administrator

class ClassCreate(BaseModel):
    class_id: Optional[int] = None
    course_id: int
    section: str = Field(..., min_length=1)
    instructor: Optional[int] = None
    year: int
    semester: str = Field(..., min_length=1)

class ClassUpdate(BaseModel):
    section: str = Field(..., min_length=1)
    # required: the update always rewrites the instructor column
    instructor: int
    year: int
    semester: str = Field(..., min_length=1)

router = APIRouter(prefix="/api/v1/admin/classes", tags=["Administrator - Classes"])

IDENTITY = "/{course_id}/{section}/{year}/{semester}"

@router.get("/", response_model=list)
async def get_classes(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.get_classes())

@router.post("/", response_model=OperationResult, status_code=201)
async def create_class(data: ClassCreate, admin: Administrator = Depends(get_administrator)):
    """Create a class in the current or next semester"""
    result = await admin.create_class(
        data.class_id, data.course_id, data.section, data.instructor, data.year, data.semester
    )
    raise_for_result(result)
    return result

@router.get("/current", response_model=list)
async def get_current_classes(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.get_current_classes())

@router.get("/next", response_model=list)
async def get_next_classes(admin: Administrator = Depends(get_administrator)):
    return rows_or_raise(await admin.get_next_classes())

@router.get(IDENTITY, response_model=list)
async def get_class_info(
    course_id: int,
    section: str,
    year: int,
    semester: str,
    admin: Administrator = Depends(get_administrator)
):
    return rows_or_raise(await admin.get_class_info(course_id, section, year, semester))

@router.put(IDENTITY, response_model=OperationResult)
async def update_class(
    course_id: int,
    section: str,
    year: int,
    semester: str,
    data: ClassUpdate,
    admin: Administrator = Depends(get_administrator)
):
    """Move or reassign a class; the destination must be the current or next semester"""
    result = await admin.update_class(
        course_id, section, year, semester,
        data.section, data.instructor, data.year, data.semester,
    )
    raise_for_result(result)
    return result

@router.delete(IDENTITY, response_model=OperationResult)
async def delete_class(
    course_id: int,
    section: str,
    year: int,
    semester: str,
    admin: Administrator = Depends(get_administrator)
):
    """Delete a class; only classes of the next semester can be deleted"""
    result = await admin.delete_class(course_id, section, year, semester)
    raise_for_result(result)
    return result
