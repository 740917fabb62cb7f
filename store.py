"""
Data access for the students table.
"""
from typing import Any, Dict, List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_db
from models import Students


class StudentStore:
    """Row-level operations on `Students` bound to one request's session."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Students]:
        return self.db.query(Students).all()

    def find_by_id(self, student_id: int) -> Optional[Students]:
        return self.db.get(Students, student_id)

    def insert(self, values: Dict[str, Any]) -> Students:
        student = Students(**values)
        self.db.add(student)
        self.db.commit()
        self.db.refresh(student)
        return student

    def update(self, student: Students, values: Dict[str, Any]) -> Students:
        for column, value in values.items():
            setattr(student, column, value)
        self.db.commit()
        self.db.refresh(student)
        return student

    def remove(self, student: Students) -> None:
        self.db.delete(student)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()


def get_student_store(db: Session = Depends(get_db)) -> StudentStore:
    return StudentStore(db)
