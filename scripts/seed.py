#!/usr/bin/env python3
"""Load the sample registration data into an empty, migrated database."""

import asyncio
from registrar.core.database import engine
from registrar.core.executor import QueryExecutor
from registrar.services.administrator import Administrator

ACCOUNT_TYPES = ["Administrator", "Instructor", "Student"]
DEPARTMENTS = [(1, "Computer Science"), (2, "Electrical Engineering"), (3, "Computer Engineering")]
GRADES = ["A", "B", "C", "D", "F"]
SEMESTERS = ["Winter", "Spring", "Summer", "Fall"]
INSTRUCTORS = [
    (1, "John Connor", "john.anthony.connor@gmail.com"),
    (2, "Hesham Auda", "hauda@ccny.cuny.edu"),
    (3, "Akbar Islam", "nysaifulislam@gmail.com"),
    (4, "Akira Kawaguchi", "akawaguchi@ccny.cuny.edu"),
]
COURSES = [
    (1, "Database Systems", 1, 3, "1000.00"),
    (2, "Data Structures", 1, 3, "1000.00"),
    (3, "Algorithms", 1, 3, "1000.00"),
]
CLASSES = [
    (32157, 1, "H", 1, 2021, "Spring"),
    (32179, 1, "M", 2, 2021, "Spring"),
    (34280, 1, "A", 4, 2021, "Fall"),
]
STUDENTS = [(123, "Saiful Islam", 123456789), (456, "Akbar Haider", 111111111)]


async def seed():
    async with engine.connect() as conn:
        admin = Administrator(QueryExecutor(conn))
        steps = []
        steps += [(f"account type {name}", admin.create_account_type, (name,)) for name in ACCOUNT_TYPES]
        steps += [(f"department {row[1]}", admin.create_department, row) for row in DEPARTMENTS]
        steps += [(f"grade {name}", admin.create_grade, (name,)) for name in GRADES]
        steps += [(f"semester {name}", admin.create_semester, (name,)) for name in SEMESTERS]
        steps.append(("current semester Spring 2021", admin.assign_current_semester, ("Spring", 2021)))
        steps.append(("next semester Fall 2021", admin.assign_next_semester, ("Fall", 2021)))
        steps += [(f"instructor {row[1]}", admin.create_instructor, row) for row in INSTRUCTORS]
        steps += [(f"course {row[1]}", admin.create_course, row) for row in COURSES]
        steps += [(f"class {row[0]}", admin.create_class, row) for row in CLASSES]
        steps += [(f"student {row[1]}", admin.create_student, row) for row in STUDENTS]

        failures = 0
        for label, operation, args in steps:
            result = await operation(*args)
            if result.success:
                print(f"✅ {label}")
            else:
                failures += 1
                print(f"❌ {label}: {result.detail}")

    await engine.dispose()
    return failures


if __name__ == "__main__":
    raise SystemExit(1 if asyncio.run(seed()) else 0)
