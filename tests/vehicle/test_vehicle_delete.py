import os
import shutil
import tempfile
import unittest

from dealership.models.vehicle import Vehicle
from dealership.repositories.txt_vehicle_repository import TxtVehicleRepository
from dealership.services.vehicle_service import (
    VehicleService, EmptyFieldError, VehicleNotFoundError, DuplicateVehicleError,
)


class TestDeleteVehicle(unittest.TestCase):
    """Test suite for deleting vehicles."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.repository = TxtVehicleRepository(os.path.join(self.temp_dir, "car.txt"))
        self.repository.open()
        self.service = VehicleService(self.repository)

        self.service.add_vehicle(
            Vehicle("Toyota", "Corolla", 2018, 45000, 12000.0, "CH001", "in_stock"))
        self.service.add_vehicle(
            Vehicle("Honda", "Civic", 2015, 90000, 8500.0, "CH002", "sold"))

    def tearDown(self):
        self.repository.close()
        shutil.rmtree(self.temp_dir)

    def test_delete_then_get(self):
        """Test a deleted vehicle can no longer be found."""
        self.service.delete_vehicle("CH001")

        with self.assertRaises(VehicleNotFoundError) as context:
            self.service.get_vehicle_by_chassis_number("CH001")
        self.assertIn("No vehicle found", str(context.exception))

        remaining = [v.chassis_number for v in self.service.get_all_vehicles()]
        self.assertEqual(remaining, ["CH002"])

    def test_delete_unknown_vehicle(self):
        with self.assertRaises(VehicleNotFoundError):
            self.service.delete_vehicle("CH404")
        self.assertEqual(len(self.service.get_all_vehicles()), 2)

    def test_delete_blank_chassis_number(self):
        with self.assertRaises(EmptyFieldError):
            self.service.delete_vehicle("")
        with self.assertRaises(EmptyFieldError):
            self.service.delete_vehicle(None)

    def test_delete_all_leaves_empty_inventory(self):
        self.service.delete_vehicle("CH001")
        self.service.delete_vehicle("CH002")

        self.assertEqual(self.service.get_all_vehicles(), [])


class TestInventoryLifecycle(unittest.TestCase):
    """Walk one vehicle through add, duplicate add, update and delete."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.file_path = os.path.join(self.temp_dir, "car.txt")

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_full_lifecycle(self):
        with TxtVehicleRepository(self.file_path) as repository:
            service = VehicleService(repository)
            corolla = Vehicle("Toyota", "Corolla", 2018, 45000, 12000.0, "CH001", "in_stock")

            service.add_vehicle(corolla)

            with self.assertRaises(DuplicateVehicleError) as context:
                service.add_vehicle(
                    Vehicle("Honda", "Corolla", 2018, 45000, 12000.0, "CH001", "in_stock"))
            self.assertIn("already exists", str(context.exception))

            service.update_vehicle(
                Vehicle("Toyota", "Corolla", 2018, 45000, 12000.0, "CH001", "sold"))
            vehicles = service.get_all_vehicles()
            self.assertEqual(len(vehicles), 1)
            self.assertEqual(vehicles[0].status, "sold")

            service.delete_vehicle("CH001")
            self.assertEqual(service.get_all_vehicles(), [])

        with open(self.file_path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "")


if __name__ == '__main__':
    unittest.main()
