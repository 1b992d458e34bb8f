from car_rental_admin.infra.db.models.base import Base
from car_rental_admin.infra.db.models.car import CarRow
from car_rental_admin.infra.db.models.contract import ContractRow
from car_rental_admin.infra.db.models.customer import CustomerRow

__all__ = ["Base", "CarRow", "ContractRow", "CustomerRow"]
