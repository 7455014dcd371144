#!/usr/bin/env python3
"""
Sample Data Seeder for Course Mock API
Writes a db file with demo courses, students and enrollments

Usage:
    python seed_data.py [path/to/db.json] [--yes]
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.config import settings
from app.services.serializer import reference_validator
from app.services.store import Store

DEFAULT_DB_FILE = "db.json"

SAMPLE_COURSES = [
    {
        "title": "Introduction to Python Programming",
        "description": "Learn Python from scratch with hands-on projects.",
        "teacher": "Dr. Sarah Johnson",
    },
    {
        "title": "Web Development with React",
        "description": "Build modern web applications with React.js and hooks.",
        "teacher": "Marco Rossi",
    },
]

SAMPLE_STUDENTS = [
    {"name": "John Smith", "email": "john.smith@example.com"},
    {"name": "Emily Davis", "email": "emily.davis@example.com"},
]


async def seed(db_file: str) -> dict:
    """
    Fill a fresh db file with sample records

    Records go through the store, so they are validated exactly like
    requests and enrollments only reference records created here.

    Returns:
        Snapshot of every collection after seeding
    """
    path = Path(db_file)
    if path.exists():
        path.unlink()

    store = Store(db_file)
    store.load()

    print("\n📚 Creating sample courses...")
    courses = []
    for course_data in SAMPLE_COURSES:
        course = await store.create("courses", course_data)
        courses.append(course)
        print(f"   ✅ Created course {course['id']}: {course['title']}")

    print("\n👥 Creating sample students...")
    students = []
    for student_data in SAMPLE_STUDENTS:
        student = await store.create("students", student_data)
        students.append(student)
        print(f"   ✅ Created student {student['id']}: {student['email']}")

    print("\n🎓 Enrolling students...")
    validate = reference_validator(store, "enrollments")
    for index, student in enumerate(students):
        course = courses[index % len(courses)]
        await store.create(
            "enrollments",
            {"studentId": student["id"], "courseId": course["id"], "date": "2025-01-15"},
            validate=validate,
        )
        print(f"   ✅ Enrolled {student['name']} in: {course['title']}")

    return store.snapshot()


def main(argv=None):
    """Main seeding function"""
    args = list(sys.argv[1:] if argv is None else argv)
    assume_yes = "--yes" in args
    paths = [arg for arg in args if arg != "--yes"]
    db_file = paths[0] if paths else (settings.DB_FILE or DEFAULT_DB_FILE)

    print("="*60)
    print("🌱 Course Mock API - Sample Data Seeder")
    print("="*60)

    if Path(db_file).exists() and not assume_yes:
        print(f"\n⚠️  WARNING: This will overwrite {db_file}.")
        response = input("Continue? (y/N): ")
        if response.lower() != 'y':
            print("❌ Seeding cancelled")
            return 1

    snapshot = asyncio.run(seed(db_file))

    print("\n" + "="*60)
    print(f"✅ Sample data written to {db_file}")
    print("="*60)
    for name, records in snapshot.items():
        print(f"   {name}: {len(records)}")

    print("\n🚀 Start the server against it:")
    print(f"   DB_FILE={db_file} python run.py")
    return 0


if __name__ == "__main__":
    sys.exit(main())
