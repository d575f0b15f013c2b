import os
import shutil
import tempfile
import unittest

from click.testing import CliRunner

from dealership.cli_module.cli import cli
from dealership.models.vehicle import Vehicle
from dealership.repositories.txt_vehicle_repository import TxtVehicleRepository


class TestEmployeeCommands(unittest.TestCase):
    """Test the 'dealership employee' commands."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.file_path = os.path.join(self.temp_dir, "car.txt")
        self.runner = CliRunner()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def _invoke(self, *args, input=None):
        return self.runner.invoke(
            cli, ["--inventory-file", self.file_path, "employee"] + list(args), input=input)

    def _seed(self, *vehicles):
        with open(self.file_path, "a", encoding="utf-8") as f:
            for line in vehicles:
                f.write(line + "\n")

    def _stored(self):
        with TxtVehicleRepository(self.file_path) as repository:
            return repository.find_all()

    def test_add_with_options(self):
        result = self._invoke(
            "add", "--make", "Toyota", "--model", "Corolla", "--year", "2018",
            "--mileage", "45000", "--price", "12000", "--chassis-number", "CH001",
            "--status", "IN_STOCK")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Vehicle added successfully.", result.output)
        self.assertEqual(self._stored(),
                         [Vehicle("Toyota", "Corolla", 2018, 45000, 12000.0, "CH001", "in_stock")])

    def test_add_with_prompts(self):
        result = self._invoke("add", input="Honda\nCivic\n2015\n90000\n8500\nCH002\nsold\n")

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(self._stored()[0].chassis_number, "CH002")

    def test_add_duplicate_reports_error(self):
        self._seed("Toyota,Corolla,2018,45000,12000.0,CH001,in_stock")

        result = self._invoke(
            "add", "--make", "Honda", "--model", "Civic", "--year", "2015",
            "--mileage", "1", "--price", "1", "--chassis-number", "CH001", "--status", "sold")

        self.assertIn("Error:", result.output)
        self.assertIn("already exists", result.output)
        self.assertEqual(len(self._stored()), 1)

    def test_update_merges_omitted_options(self):
        self._seed("Toyota,Corolla,2018,45000,12000.0,CH001,in_stock")

        result = self._invoke("update", "CH001", "--status", "sold", "--price", "11000")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Vehicle updated successfully.", result.output)
        self.assertEqual(self._stored(),
                         [Vehicle("Toyota", "Corolla", 2018, 45000, 11000.0, "CH001", "sold")])

    def test_update_without_options(self):
        self._seed("Toyota,Corolla,2018,45000,12000.0,CH001,in_stock")

        result = self._invoke("update", "CH001")

        self.assertIn("No update information provided", result.output)

    def test_update_unknown_vehicle(self):
        result = self._invoke("update", "CH404", "--status", "sold")
        self.assertIn("No vehicle found with chassis number: CH404", result.output)

    def test_delete_with_confirm_flag(self):
        self._seed("Toyota,Corolla,2018,45000,12000.0,CH001,in_stock")

        result = self._invoke("delete", "CH001", "--confirm")

        self.assertIn("Vehicle deleted successfully.", result.output)
        self.assertEqual(self._stored(), [])

    def test_delete_cancelled(self):
        self._seed("Toyota,Corolla,2018,45000,12000.0,CH001,in_stock")

        result = self._invoke("delete", "CH001", input="n\n")

        self.assertIn("Vehicle deletion cancelled.", result.output)
        self.assertEqual(len(self._stored()), 1)

    def test_show(self):
        self._seed("Toyota,Corolla,2018,45000,12000.0,CH001,in_stock")

        result = self._invoke("show", "CH001")

        self.assertIn("Make: Toyota", result.output)
        self.assertIn("Status: in_stock", result.output)

    def test_list_and_search(self):
        self._seed("Toyota,Corolla,2018,45000,12000.0,CH001,in_stock",
                   "Honda,Civic,2015,90000,8500.0,CH002,sold")

        result = self._invoke("list")
        self.assertIn("CH001", result.output)
        self.assertIn("CH002", result.output)

        result = self._invoke("search", "--status", "sold")
        self.assertNotIn("CH001", result.output)
        self.assertIn("CH002", result.output)


if __name__ == '__main__':
    unittest.main()
