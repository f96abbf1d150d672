"""
Student status guards: graduation and probation.

Checks run in a fixed order (existence, registration, probation) and stop at
the first failing one; the UPDATE only runs when every check passed.
"""
import pytest
from sqlalchemy import text

from registrar.schemas.results import (
    GRADUATION_NOT_REGISTERED,
    GRADUATION_ON_PROBATION,
    NO_MATCHING_ID,
    PROBATION_ALREADY,
    PROBATION_NOT_ON,
    PROBATION_NOT_REGISTERED,
    OperationResult,
)

pytestmark = pytest.mark.anyio("asyncio")


async def _student(admin, id):
    students = await admin.get_students()
    return next(s for s in students if s["id"] == id)


@pytest.fixture
async def enrolled(admin):
    assert (await admin.create_student(123321, "Saiful Islam", 123456789)).success
    return admin


async def test_graduation_deregisters_student(enrolled):
    assert (await enrolled.assign_graduation(123321)).success

    student = await _student(enrolled, 123321)
    assert bool(student["registered"]) is False


async def test_graduation_unknown_id(admin):
    assert await admin.assign_graduation(1) == OperationResult(success=False, detail=NO_MATCHING_ID)


async def test_graduation_twice_reports_not_registered(enrolled):
    assert (await enrolled.assign_graduation(123321)).success

    again = await enrolled.assign_graduation(123321)

    assert again == OperationResult(success=False, detail=GRADUATION_NOT_REGISTERED)


async def test_graduation_refused_on_probation(enrolled):
    assert (await enrolled.assign_probation(123321)).success

    result = await enrolled.assign_graduation(123321)

    assert result == OperationResult(success=False, detail=GRADUATION_ON_PROBATION)
    assert bool((await _student(enrolled, 123321))["registered"]) is True


async def test_graduation_checks_registration_before_probation(enrolled, connection):
    await connection.execute(
        text("UPDATE students SET registered = 0, probation = 1 WHERE id = 123321")
    )
    await connection.commit()

    result = await enrolled.assign_graduation(123321)

    assert result == OperationResult(success=False, detail=GRADUATION_NOT_REGISTERED)


async def test_probation_sets_flag(enrolled):
    assert (await enrolled.assign_probation(123321)).success

    assert bool((await _student(enrolled, 123321))["probation"]) is True


async def test_probation_guards(enrolled):
    assert await enrolled.assign_probation(9) == OperationResult(success=False, detail=NO_MATCHING_ID)

    assert (await enrolled.assign_probation(123321)).success
    assert await enrolled.assign_probation(123321) == OperationResult(success=False, detail=PROBATION_ALREADY)

    assert (await enrolled.create_student(456, "Akbar Haider", 111111111)).success
    assert (await enrolled.assign_graduation(456)).success
    assert await enrolled.assign_probation(456) == OperationResult(success=False, detail=PROBATION_NOT_REGISTERED)


async def test_remove_probation(enrolled):
    assert await enrolled.remove_probation(123321) == OperationResult(success=False, detail=PROBATION_NOT_ON)

    assert (await enrolled.assign_probation(123321)).success
    assert (await enrolled.remove_probation(123321)).success
    assert bool((await _student(enrolled, 123321))["probation"]) is False

    assert (await enrolled.assign_graduation(123321)).success


async def test_remove_probation_unknown_id(admin):
    assert await admin.remove_probation(5) == OperationResult(success=False, detail=NO_MATCHING_ID)


async def test_remove_probation_checks_registration_before_probation(enrolled, connection):
    assert (await enrolled.assign_probation(123321)).success
    await connection.execute(text("UPDATE students SET registered = 0 WHERE id = 123321"))
    await connection.commit()

    result = await enrolled.remove_probation(123321)

    assert result == OperationResult(success=False, detail=PROBATION_NOT_REGISTERED)
    assert bool((await _student(enrolled, 123321))["probation"]) is True
