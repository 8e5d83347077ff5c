from typing import Dict, List
from pydantic import BaseModel
from datetime import date


class BatchWeeks(BaseModel):
    week1: List[str] = []
    week2: List[str] = []


# Batch rotation table (GET/PUT /admin/batch-schedule)
class BatchSchedule(BaseModel):
    schedule: Dict[str, BatchWeeks]


class HolidayToggle(BaseModel):
    date: date
    is_holiday: bool = True
