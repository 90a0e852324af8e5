"""Test data factories using Faker."""

from faker import Faker
from typing import Optional

fake = Faker()


def create_task_data(category: Optional[str] = None, due_in_minutes: Optional[int] = None) -> dict:
    """Create test task payload data."""
    return {
        "title": fake.sentence(nb_words=4),
        "description": fake.text(max_nb_chars=120),
        "category": category if category is not None else fake.word(),
        "due_in_minutes": due_in_minutes if due_in_minutes is not None else fake.random_int(min=1, max=600),
    }


def create_employee_data() -> dict:
    """Create test employee payload data."""
    return {
        "name": fake.name(),
        "email": fake.email(),
    }
