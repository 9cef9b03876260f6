"""
Shared fixtures for sorting tests.
Builds the sample people and record files used by several test modules.
"""
import json
import pytest
from datetime import date
from pathlib import Path
from typing import List
import sys

# Add src/ to sys.path so 'sortrules' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from sample_people import Address, Gender, Person, birthday_for

# Fixed day so age-based expectations do not depend on when the suite runs
REFERENCE_DAY = date(2025, 12, 31)


@pytest.fixture
def reference_day() -> date:
    return REFERENCE_DAY


@pytest.fixture
def people(reference_day) -> List[Person]:
    """
    Seven people, three minors and four adults on the reference day:
    - minors : Joe Lai (13), Jessica Lee (13), Richard Wang (16)
    - adults : Mike Cheng (18), Cathy Feng (21), Bill Lin (26), Zoe Kuan (34)
    """
    def born(age, month, day):
        return birthday_for(age, month, day, reference_day)

    return [
        Person("Joe", "Lai", Gender.MALE, born(13, 1, 3)),
        Person("Jessica", "Lee", Gender.FEMALE, born(13, 11, 23)),
        Person("Mike", "Cheng", Gender.MALE, born(18, 9, 3)),
        Person("Richard", "Wang", Gender.MALE, born(16, 7, 13)),
        Person("Cathy", "Feng", Gender.FEMALE, born(21, 5, 9)),
        Person("Bill", "Lin", Gender.MALE, born(26, 3, 22)),
        Person("Zoe", "Kuan", Gender.FEMALE, born(34, 4, 30)),
    ]


@pytest.fixture
def people_with_addresses(reference_day) -> List[Person]:
    """Five people, two of them (Chen, Ho) without a home address."""
    born = birthday_for(30, 6, 1, reference_day)
    return [
        Person("Amy", "Wu", Gender.FEMALE, born, Address("12 Oak St", "Taipei", "Taiwan")),
        Person("Ben", "Chen", Gender.MALE, born),
        Person("Cara", "Lin", Gender.FEMALE, born, Address("3 Elm Rd", "Tainan", "Taiwan")),
        Person("Dan", "Ho", Gender.MALE, born),
        Person("Eve", "Tsai", Gender.FEMALE, born, Address("7 Pine Ave", "Hsinchu", "Taiwan")),
    ]


@pytest.fixture
def records_file(tmp_path) -> Path:
    """JSON array of person records; Kim has no age."""
    records = [
        {"first_name": "Lee", "last_name": "Park", "age": 41},
        {"first_name": "Ana", "last_name": "Silva", "age": 29},
        {"first_name": "Kim", "last_name": "Park"},
        {"first_name": "Bo", "last_name": "Andersson", "age": 29},
    ]
    path = tmp_path / "people.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path
