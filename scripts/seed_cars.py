#!/usr/bin/env python3
"""
Seed the cars table with a deterministic rental fleet.

Features:
- Deterministic: fixed seed → same fleet every run
- Idempotent: safe to run multiple times (clears contracts and cars before seeding)
- Realism-lite: daily rates follow the fleet class and the car's age

Usage:
    python scripts/seed_cars.py
"""

from __future__ import annotations

import random
import string
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from car_rental_admin.domain.car import CarStatus
from car_rental_admin.infra.db.models.car import CarRow
from car_rental_admin.infra.db.models.contract import ContractRow
from car_rental_admin.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_CARS = 30  # Size of the fleet
CURRENT_YEAR = 2026


# ==============================================================================
# Fleet Data
# ==============================================================================

# Fleet classes with daily rate bands
CLASSES = {
    "economy": {
        "brands": ["Toyota", "Hyundai", "Kia", "Suzuki"],
        "rate_min": Decimal("120"),
        "rate_max": Decimal("180"),
    },
    "family": {
        "brands": ["Toyota", "Nissan", "Honda", "Mitsubishi"],
        "rate_min": Decimal("200"),
        "rate_max": Decimal("320"),
    },
    "premium": {
        "brands": ["BMW", "Mercedes-Benz", "Lexus"],
        "rate_min": Decimal("450"),
        "rate_max": Decimal("800"),
    },
}

MODELS_BY_BRAND = {
    "Toyota": ["Yaris", "Corolla", "RAV4", "Land Cruiser Prado"],
    "Hyundai": ["Accent", "Elantra", "i10"],
    "Kia": ["Picanto", "Rio", "Pegas"],
    "Suzuki": ["Swift", "Dzire", "Ciaz"],
    "Nissan": ["Sunny", "Altima", "X-Trail", "Patrol"],
    "Honda": ["City", "Civic", "CR-V"],
    "Mitsubishi": ["Attrage", "Outlander", "Pajero"],
    "BMW": ["320i", "520i", "X5"],
    "Mercedes-Benz": ["C 200", "E 300", "GLE 450"],
    "Lexus": ["ES 350", "RX 350", "LX 600"],
}

# Most of the fleet is rentable; a few cars are in the workshop or retired
STATUS_WEIGHTS = {
    CarStatus.AVAILABLE: 8,
    CarStatus.MAINTENANCE: 1,
    CarStatus.UNAVAILABLE: 1,
}


# ==============================================================================
# Rate Calculation with Realism
# ==============================================================================


def calculate_daily_rate(fleet_class: str, year: int) -> Decimal:
    """
    Daily rate based on fleet class and year.

    Logic:
    - Premium classes rent for more than economy
    - Each year of age takes ~5% off, capped at 30%
    - Rates are rounded to the nearest 5
    """
    band = CLASSES[fleet_class]
    base_rate = Decimal(random.randint(int(band["rate_min"]), int(band["rate_max"])))

    years_old = max(0, CURRENT_YEAR - year)
    discount = min(Decimal("0.05") * years_old, Decimal("0.30"))
    rate = base_rate * (Decimal("1") - discount)

    return max((rate / 5).quantize(Decimal("1")) * 5, Decimal("50"))


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_plate(used: set[str]) -> str:
    """Unique plate such as 'K 48213'."""
    while True:
        plate = f"{random.choice(string.ascii_uppercase)} {random.randint(10000, 99999)}"
        if plate not in used:
            used.add(plate)
            return plate


def generate_car(used_plates: set[str]) -> CarRow:
    """Generate a single rental car."""
    fleet_class = random.choice(list(CLASSES.keys()))
    brand = random.choice(CLASSES[fleet_class]["brands"])
    model = random.choice(MODELS_BY_BRAND[brand])

    # Rental fleets turn over quickly: 2020-2026, weighted toward newer
    year = random.choices(range(2020, 2027), weights=[1, 1, 2, 3, 4, 5, 4], k=1)[0]
    status = random.choices(list(STATUS_WEIGHTS), weights=list(STATUS_WEIGHTS.values()), k=1)[0]

    return CarRow(
        name=f"{brand} {model} {year}",
        brand=brand,
        model=model,
        year=year,
        plate_number=generate_plate(used_plates),
        price_per_day=calculate_daily_rate(fleet_class, year),
        status=status.value,
        notes="Scheduled service" if status is CarStatus.MAINTENANCE else None,
    )


def seed_cars(num_cars: int = NUM_CARS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with the rental fleet.

    Args:
        num_cars: Number of cars to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_cars} cars (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (contracts reference cars)
        print("🗑️  Clearing existing contracts and cars...")
        deleted_contracts = session.query(ContractRow).delete()
        deleted_cars = session.query(CarRow).delete()
        print(f"   Deleted {deleted_contracts} contracts and {deleted_cars} cars")

        # Step 2: Generate and insert new cars
        print(f"🚗 Generating {num_cars} cars...")
        used_plates: set[str] = set()
        cars = [generate_car(used_plates) for _ in range(num_cars)]

        session.add_all(cars)
        session.flush()

        print(f"✅ Successfully seeded {len(cars)} cars!")

        print("\n📊 Sample cars:")
        for i, car in enumerate(cars[:5], 1):
            print(f"   {i}. {car.name} [{car.plate_number}] - {car.price_per_day}/day ({car.status})")

        if len(cars) > 5:
            print(f"   ... and {len(cars) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_cars()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
