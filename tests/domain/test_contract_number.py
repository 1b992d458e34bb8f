from __future__ import annotations

import random
import re
from datetime import date

from car_rental_admin.domain.contract import generate_contract_number

NUMBER_FORMAT = re.compile(r"^CTR-\d{8}-[0-9A-Z]{4}$")


def test_contract_number_format() -> None:
    number = generate_contract_number(today=date(2025, 1, 10), rng=random.Random(1))

    assert NUMBER_FORMAT.match(number)
    assert number.startswith("CTR-20250110-")


def test_contract_number_is_deterministic_for_a_seeded_rng() -> None:
    first = generate_contract_number(today=date(2025, 1, 10), rng=random.Random(7))
    second = generate_contract_number(today=date(2025, 1, 10), rng=random.Random(7))

    assert first == second


def test_contract_number_defaults_to_today() -> None:
    number = generate_contract_number()

    assert NUMBER_FORMAT.match(number)
    assert number[4:12] == f"{date.today():%Y%m%d}"
