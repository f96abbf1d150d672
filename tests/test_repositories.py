"""
Entity repositories: create/list/delete/update contracts.

Duplicates are rejected by the store, never pre-checked; deletes and updates
that match nothing report "No rows affected" rather than a store message.
"""
from decimal import Decimal

import pytest
from sqlalchemy import text

from registrar.schemas.results import NO_ROWS_AFFECTED, OperationResult

pytestmark = pytest.mark.anyio("asyncio")


async def test_account_type_duplicate_is_rejected_by_store(admin):
    first = await admin.create_account_type("Administrator")
    second = await admin.create_account_type("Administrator")

    assert first == OperationResult(success=True)
    assert second.success is False
    assert second.detail
    assert second.detail != NO_ROWS_AFFECTED


async def test_department_duplicate_id_is_rejected_by_store(admin):
    assert (await admin.create_department(1, "Computer Science")).success
    duplicate = await admin.create_department(1, "Electrical Engineering")

    assert duplicate.success is False
    assert duplicate.detail


async def test_department_without_id_gets_assigned_one(admin):
    assert (await admin.create_department(None, "Computer Science")).success
    assert (await admin.create_department(None, "Electrical Engineering")).success

    departments = await admin.get_departments()

    assert [d["name"] for d in departments] == ["Computer Science", "Electrical Engineering"]
    assert all(isinstance(d["id"], int) for d in departments)
    assert departments[0]["id"] != departments[1]["id"]


async def test_instructor_duplicate_email_is_rejected_by_store(admin):
    assert (await admin.create_instructor(1, "John Doe", "johndoe@gmail.com")).success
    duplicate = await admin.create_instructor(2, "Jane Doe", "johndoe@gmail.com")

    assert duplicate.success is False
    assert duplicate.detail


async def test_instructor_name_and_email_are_optional(admin):
    assert (await admin.create_instructor(7, None, None)).success
    assert (await admin.create_instructor(8, None, None)).success

    instructors = await admin.get_instructors()
    assert {i["id"] for i in instructors} == {7, 8}


async def test_course_duplicate_id_is_rejected_by_store(admin):
    assert (await admin.create_department(1, "Computer Science")).success
    assert (await admin.create_course(100, "Awesome Lab", 1, 3, 1000.00)).success
    duplicate = await admin.create_course(100, "Other Lab", 1, 4, 1500.00)

    assert duplicate.success is False
    assert duplicate.detail


async def test_course_requires_existing_department(admin):
    result = await admin.create_course(100, "Orphan", 42, 3, 1000.00)

    assert result.success is False
    assert result.detail


async def test_student_duplicate_id_is_rejected_by_store(admin):
    assert (await admin.create_student(123, "Saiful Islam", 123456789)).success
    duplicate = await admin.create_student(123, "Akbar Haider", 111111111)

    assert duplicate.success is False
    assert duplicate.detail


async def test_student_is_created_registered_without_credits_or_probation(admin):
    assert (await admin.create_student(123, "Saiful Islam", 123456789)).success

    [student] = await admin.get_students()

    assert student["credits"] == 0
    assert bool(student["registered"]) is True
    assert bool(student["probation"]) is False
    assert student["ssn"] == 123456789


@pytest.mark.parametrize(
    "operation, key",
    [
        ("delete_account_type", "Teacher"),
        ("delete_department", 26),
        ("delete_grade", "E"),
        ("delete_semester", "Fa"),
        ("delete_instructor", 0),
        ("delete_course", 1),
    ],
)
async def test_delete_of_unknown_key_reports_no_rows_affected(admin, operation, key):
    result = await getattr(admin, operation)(key)

    assert result == OperationResult(success=False, detail=NO_ROWS_AFFECTED)


async def test_delete_existing_rows(admin):
    assert (await admin.create_account_type("Student")).success
    assert (await admin.create_grade("F")).success
    assert (await admin.create_semester("Winter")).success

    assert (await admin.delete_account_type("Student")).success
    assert (await admin.delete_grade("F")).success
    assert (await admin.delete_semester("Winter")).success

    assert await admin.get_account_types() == []
    assert await admin.get_grades() == []
    assert await admin.get_semesters() == []


@pytest.mark.parametrize(
    "operation",
    ["get_account_types", "get_departments", "get_grades", "get_semesters",
     "get_instructors", "view_courses", "get_classes", "get_students"],
)
async def test_list_on_empty_table_is_empty_not_failure(admin, operation):
    result = await getattr(admin, operation)()

    assert result == []
    assert not isinstance(result, OperationResult)


async def test_list_query_error_is_bare_failure(admin, connection):
    await connection.execute(text("DROP TABLE grades"))
    await connection.commit()

    result = await admin.get_grades()

    assert result == OperationResult(success=False, detail=None)


async def test_write_query_error_carries_store_message(admin, connection):
    await connection.execute(text("DROP TABLE grades"))
    await connection.commit()

    result = await admin.create_grade("A")

    assert result.success is False
    assert "grades" in result.detail


async def test_update_course(admin):
    assert (await admin.create_department(1, "Computer Science")).success
    assert (await admin.create_course(101, "Awesome Lab", 1, 3, 1000.00)).success

    result = await admin.update_course(101, "New Awesome Lab", 1, 4, 1500.50)

    assert result.success
    [course] = await admin.view_courses()
    assert course["title"] == "New Awesome Lab"
    assert course["credits"] == 4
    assert Decimal(str(course["cost"])) == Decimal("1500.50")


async def test_update_unknown_course_reports_no_rows_affected(admin):
    assert (await admin.create_department(1, "Computer Science")).success

    result = await admin.update_course(999, "Ghost", 1, 3, 10)

    assert result == OperationResult(success=False, detail=NO_ROWS_AFFECTED)
